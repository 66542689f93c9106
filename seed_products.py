import argparse
import logging

from catalog import config
from catalog.services.store import ProductStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Test Product 1", "price": 10.99, "description": "Test description 1"},
    {"id": 2, "name": "Test Product 2", "price": 20.99, "description": "Test description 2"},
]


def seed(store, force=False):
    """Writes the sample products. Returns False if the file exists and force is off."""
    if store.exists() and not force:
        logger.warning(f"{store.path} exists already, use --force to overwrite")
        return False

    store.save(SAMPLE_PRODUCTS)
    logger.info(f"{len(SAMPLE_PRODUCTS)} products written to {store.path}")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write sample products to the products file")
    parser.add_argument("--file", default=config.PRODUCTS_FILE, help="products file (default: %(default)s)")
    parser.add_argument("--force", action="store_true", help="overwrite an existing file")
    args = parser.parse_args(argv)

    return 0 if seed(ProductStore(args.file), force=args.force) else 1


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    raise SystemExit(main())
