import logging

from flask import jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from craftsymphony import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error raised by API handlers and rendered as ``{"error": message}``."""

    def __init__(self, status, message, **extra):
        super().__init__(message)
        self.status = status
        self.message = message
        self.extra = extra

    def to_response(self):
        body = {"error": self.message}
        body.update(self.extra)
        return jsonify(body), self.status


def describe_validation_error(exc):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "; ".join(parts) or "Invalid data"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        db.session.rollback()
        if exc.status >= 500:
            logger.error("API error %s on %s: %s", exc.status, request.path, exc.message)
        return exc.to_response()

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc):
        db.session.rollback()
        return jsonify({"error": describe_validation_error(exc)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if request.path.startswith("/api/"):
            return jsonify({"error": exc.description or exc.name}), exc.code
        return exc
