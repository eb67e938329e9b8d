# hse_portal/extensions.py
from flask_cors import CORS

from .storage.json_store import JsonStore
from .storage.collection_store import CollectionStore
from .services.ppe_ledger import PpeLedger
from .services.training import TrainingBook
from .services.factories import FactoryBoard

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

# JsonStore is bound to DATA_DIR in create_app via store.init_app(app)
store = JsonStore()
collections = CollectionStore(store)

ppe_ledger = PpeLedger(collections)
training_book = TrainingBook(store)
factory_board = FactoryBoard(store)
