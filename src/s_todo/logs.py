"""File logging setup. Nothing is ever written to the terminal."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "s_todo"
LOG_FILE = "s_todo.log"
MAX_BYTES = 2_000_000
BACKUP_COUNT = 2


def setup_logging(log_dir: Path, level: str = "WARNING") -> logging.Logger:
    """Attach a rotating file handler to the ``s_todo`` logger.

    Handlers from a previous call are replaced. If the log file cannot be
    opened, records go to a NullHandler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG)
    # keep records off the root logger (and so off the terminal)
    logger.propagate = False

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_dir / LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        logger.addHandler(logging.NullHandler())
        return logger

    fh.setLevel(getattr(logging, level.upper(), logging.WARNING))
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(fh)
    return logger
