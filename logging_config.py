"""
Logging setup for the editor app and the ``mcdm`` package.
"""
import logging
import sys
from typing import Optional

import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# httpx logs every request at INFO; the client logs its own summary
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | str = config.LOG_LEVEL, log_file: Optional[str] = config.LOG_FILE) -> logging.Logger:
    """Send ``mcdm.*`` records to stdout and, if given, to ``log_file``."""
    logger = logging.getLogger("mcdm")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger
