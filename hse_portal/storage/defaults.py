import copy
from datetime import datetime

# Documents created the first time a collection is read.
DEFAULT_DOCUMENTS = {
    "users": [
        {"username": "admin", "password": "admin123", "role": "admin"},
        {"username": "user1", "password": "user123", "role": "user"},
    ],
    "factories": {
        "Jangalpur": {"fire": 0, "firstAid": 0, "manpower": 0},
        "Dhulagarh": {"fire": 0, "firstAid": 0, "manpower": 0},
        "Amta": {"fire": 0, "firstAid": 0, "manpower": 0},
        "Panchla": {"fire": 0, "firstAid": 0, "manpower": 0},
    },
    "notices": [
        {
            "id": 1,
            "title": "Welcome!",
            "content": "Use the menu above to navigate the HSE Portal.",
            "active": True,
        }
    ],
    "reports": [],
    "stats": {"accidents": 0, "last": None},
    "ppe": [],
    "ppe_logs": [],
    "training": {"modules": [], "records": []},
    "policies": [],
    "gallery": [],
    "chat": [],
    "ptw": [],
    "visitors": [],
}


def default_for(collection: str):
    """Fresh default value for a collection; unknown collections start as an empty list."""
    if collection == "chat":
        return [{"id": 1, "user": "System", "text": "Welcome", "time": datetime.now().strftime("%d/%m/%Y, %H:%M:%S")}]
    return copy.deepcopy(DEFAULT_DOCUMENTS.get(collection, []))


def seed_defaults(store):
    """Persist the default document of every known collection that has no file yet."""
    created = []
    for name in DEFAULT_DOCUMENTS:
        if not store.exists(name):
            store.write(name, default_for(name))
            created.append(name)
    return created
