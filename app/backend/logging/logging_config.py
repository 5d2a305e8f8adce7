import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..config.config import settings

LOG_FORMAT = "%(asctime)s - [%(name)s] - %(levelname)s - %(message)s"


def setup_logging():
    """
    Sets up the central logging configuration used across the application.

    Logs go both to the console (for development) and to a file that is rotated
    once it reaches a given size (for production).
    """
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Drop default handlers installed by uvicorn and friends so every line
    # follows the same format.
    if logger.hasHandlers():
        logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stdout_handler)

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    # Past 5 MB the file is moved to app.log.1, app.log.2, ...
    file_handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=5*1024*1024,  # 5 MB
        backupCount=5
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
