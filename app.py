import logging

from catalog import config, create_app

# ---------- SETUP ----------
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = create_app()

# ---------- START ----------
if __name__ == '__main__':
    logger.info(f"Server is running on http://localhost:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT)
