import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

PORT = int(os.getenv("PORT", 3000))
HOST = os.getenv("HOST", "127.0.0.1")
PRODUCTS_FILE = os.getenv("PRODUCTS_FILE", os.path.join(basedir, "products.json"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
