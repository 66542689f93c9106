import logging

from flask import request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from .responses import text_response

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    # unknown path and unsupported method look the same to clients
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def not_found(e):
        return text_response("Not found", 404)

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return e

        logger.exception(f"{type(e).__name__} while handling {request.method} {request.path}")
        return text_response("Internal Server Error", 500)
