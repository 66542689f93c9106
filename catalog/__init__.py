import logging

from flask import Flask

from . import config
from .errors import register_error_handlers
from .routes.products import ProductPathConverter, products_bp
from .services.store import ProductStore

logger = logging.getLogger(__name__)


def create_app(store=None):
    """
    Builds the Flask app.

    :param store: object with load(), save(products) and lock; defaults to
        a ProductStore on config.PRODUCTS_FILE
    """
    app = Flask(__name__)

    # keep key order and unicode as stored
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    if store is None:
        store = ProductStore(config.PRODUCTS_FILE)
    app.extensions["product_store"] = store

    app.url_map.converters["product_path"] = ProductPathConverter
    app.register_blueprint(products_bp)
    register_error_handlers(app)

    logger.debug(f"App created with {store!r}")
    return app
