# init_db.py
"""
Creates the tables and seeds a default administrator plus sample rows.

    python init_db.py
"""
import asyncio
import logging
import sys

from app.backend.config.config import settings
from app.backend.db.schema import initialize_database

logging.basicConfig(level=logging.INFO, format="%(asctime)s - [%(name)s] - %(levelname)s - %(message)s")
logger = logging.getLogger("init_db")


def main() -> int:
    if not settings.DATABASE_URL:
        logger.error("Missing DATABASE_URL in environment.")
        return 1
    try:
        asyncio.run(initialize_database(settings.DATABASE_URL, ssl=settings.DB_SSL))
    except Exception:
        logger.error("Database initialisation failed.", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
