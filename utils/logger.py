"""
Root logger setup: daily rotating file under assets/logs plus console.
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.path.join("assets", "logs")
LOG_PATH = os.path.join(LOG_DIR, "vakitcompass.log")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(level: int = logging.INFO, log_path: str = LOG_PATH):
    os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)

    # setup_logging may run twice (tests, reloads); start from a bare root
    if logger.hasHandlers():
        logger.handlers.clear()

    # --- FILE HANDLER (rotates daily, keeps 14 days) ---
    file_handler = TimedRotatingFileHandler(
        log_path,
        when="midnight",
        interval=1,
        backupCount=14,
        encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # --- CONSOLE HANDLER ---
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    # requests/urllib3 chatter
    logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)

    logging.info(f"[LOG] Logging initialized → {log_path}")
