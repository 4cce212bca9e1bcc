import logging
import os
from logging.handlers import RotatingFileHandler

from setbreaker.config import LOG_FILE
from setbreaker.utils import ensure_dir


def setup_logger(level: int = logging.INFO, log_file: str = LOG_FILE) -> logging.Logger:
    ensure_dir(os.path.dirname(os.path.abspath(log_file)))
    logger = logging.getLogger("SetBreaker")
    logger.setLevel(level)

    if not logger.handlers:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8",
        )
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    return logger
