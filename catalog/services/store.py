import copy
import json
import logging
import os
import tempfile
import threading

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the stored collection is not a JSON array."""


# --------------------------------
# JSON file store
# --------------------------------
class ProductStore:
    """
    Loads and saves the whole product collection as one JSON file.

    Every save rewrites the complete file: the collection is written to a
    temp file next to the target and then moved over it, so readers never
    see a half-written file.

    :param path: path of the products.json file
    """

    def __init__(self, path):
        self.path = os.path.abspath(path)
        self.lock = threading.RLock()

    def load(self):
        with open(self.path, encoding="utf-8") as f:
            products = json.load(f)

        if not isinstance(products, list):
            raise StorageError(f"{self.path} does not contain a JSON array")

        logger.debug(f"{len(products)} products loaded from {self.path}")
        return products

    def save(self, products):
        fd, tmp_path = tempfile.mkstemp(
            dir=os.path.dirname(self.path),
            prefix=f".{os.path.basename(self.path)}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(products, f, ensure_ascii=False, indent=2, allow_nan=False)
            os.replace(tmp_path, self.path)
        except Exception:
            os.remove(tmp_path)
            raise

        logger.debug(f"{len(products)} products saved to {self.path}")

    def exists(self):
        return os.path.exists(self.path)

    def __repr__(self):
        return f"<ProductStore {self.path}>"


# --------------------------------
# In-memory store
# --------------------------------
class InMemoryProductStore:
    """Keeps the collection in memory. load() hands out a copy."""

    def __init__(self, products=None):
        self._products = copy.deepcopy(products or [])
        self.lock = threading.RLock()
        self.saves = 0

    def load(self):
        return copy.deepcopy(self._products)

    def save(self, products):
        self._products = copy.deepcopy(products)
        self.saves += 1

    def __repr__(self):
        return f"<InMemoryProductStore {len(self._products)} products>"
