from flask import jsonify


class HseError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class NotFound(HseError):
    status_code = 404
    message = "Not found"


class BadRequest(HseError):
    status_code = 400
    message = "Bad request"


class InvalidAction(BadRequest):
    message = "Unknown action"


class InsufficientStock(BadRequest):
    message = "Insufficient stock"


class Unauthorized(HseError):
    status_code = 401
    message = "Invalid credentials"


class StorageCorrupt(HseError):
    message = "Stored data is corrupt"

    def __init__(self, collection: str):
        super().__init__(f"Stored data for '{collection}' is corrupt")
        self.collection = collection


def register_error_handlers(app):
    @app.errorhandler(HseError)
    def _handle_hse_error(err: HseError):
        if err.status_code >= 500:
            app.logger.exception("Request failed: %s", err.message)
        else:
            app.logger.warning("%s: %s", type(err).__name__, err.message)
        return jsonify({"error": err.message}), err.status_code
