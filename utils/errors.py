"""
utils/errors.py
-----------------
API exceptions and the Flask error handlers that turn them
into JSON responses.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for errors reported to the client as JSON."""

    status_code = 500

    def __init__(self, message, payload=None):
        super().__init__(message)
        self.message = message
        self.payload = payload or {}

    def to_dict(self):
        body = {"error": self.message}
        body.update(self.payload)
        return body


class ValidationError(ApiError):
    """Client input is missing or inconsistent."""

    status_code = 400


class NotFound(ApiError):
    status_code = 404

    def __init__(self, message="Record not found", payload=None):
        super().__init__(message, payload)


class PersistenceError(ApiError):
    """The store could not be reached or rejected a read/write."""

    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message, {"details": details} if details else None)


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            app.logger.error("%s: %s", error.message, error.payload.get("details", ""))
        else:
            app.logger.warning("%s %s", error.status_code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        app.logger.warning("%s %s", error.code, error.description)
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        return jsonify({"error": "Internal server error", "details": str(error)}), 500
