from flask import Flask
from .config import Config
from .errors import register_error_handlers
from .extensions import cors, store
from .storage.defaults import seed_defaults


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Extensions
    cors.init_app(app)
    store.init_app(app)
    app.config["UPLOADS_DIR"].mkdir(parents=True, exist_ok=True)

    created = seed_defaults(store)
    if created:
        app.logger.info("Seeded default documents: %s", ", ".join(created))
    app.logger.info("data files at %s", app.config["DATA_DIR"])
    app.logger.info("uploads served at /uploads (folder %s)", app.config["UPLOADS_DIR"])

    # Errors
    register_error_handlers(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.records_api import bp as records_api
    from .routes.ppe_api import bp as ppe_api
    from .routes.training_api import bp as training_api
    from .routes.factories_api import bp as factories_api
    from .routes.uploads_api import bp as uploads_api
    from .routes.auth_api import bp as auth_api

    app.register_blueprint(pages_bp)
    app.register_blueprint(records_api, url_prefix="/api")
    app.register_blueprint(ppe_api, url_prefix="/api")
    app.register_blueprint(training_api, url_prefix="/api")
    app.register_blueprint(factories_api, url_prefix="/api")
    app.register_blueprint(uploads_api, url_prefix="/api")
    app.register_blueprint(auth_api, url_prefix="/api")

    return app
