"""Process-wide logger set up once, writing to a rotating file under ``log/``."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "asmm8"
LOG_DIR = "log"
MAX_BYTES = 100 * 1024 * 1024
BACKUP_COUNT = 3

TRACE = 5

# Numeric levels used in configuration, mapped to logging levels.
_LEVELS = {
    -1: TRACE,
    0: logging.DEBUG,
    1: logging.INFO,
    2: logging.WARNING,
    3: logging.ERROR,
    4: logging.CRITICAL,
    5: logging.CRITICAL,
    6: logging.CRITICAL + 10,
    7: logging.CRITICAL + 10,
}

_FORMAT = (
    "%(asctime)s %(levelname)s %(filename)s:%(lineno)d "
    "API_service=ASMM8 %(message)s"
)
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

_lock = threading.Lock()
_configured = False


def _resolve_level(log_level: Union[str, int, None]) -> int:
    try:
        number = int(log_level) if log_level is not None else 1
    except (TypeError, ValueError):
        number = 1
    return _LEVELS.get(number, logging.INFO)


def get_logger(
    log_file_path: str = "asmm8.log",
    log_level: Union[str, int, None] = None,
    app_env: Optional[str] = None,
) -> logging.Logger:
    """Configure the service logger on first call and return it.

    ``log_level`` uses numeric levels (0 debug, 1 info, 2 warn, 3 error);
    anything unparsable means info. Outside ``PROD`` (and when an environment
    is given) records also go to stderr. Later calls return the same logger.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    with _lock:
        if _configured:
            return logger
        os.makedirs(LOG_DIR, mode=0o750, exist_ok=True)
        path = os.path.join(LOG_DIR, log_file_path)
        formatter = logging.Formatter(_FORMAT, _DATEFMT)

        file_handler = RotatingFileHandler(
            path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        with contextlib.suppress(OSError):
            os.chmod(path, 0o640)

        if app_env is not None and app_env != "PROD":
            stream_handler = logging.StreamHandler(sys.stderr)
            stream_handler.setFormatter(formatter)
            logger.addHandler(stream_handler)

        logger.setLevel(_resolve_level(log_level))
        logger.propagate = False
        _configured = True
    return logger


def _reset() -> None:
    """Remove the configured handlers so the logger can be set up again."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    with _lock:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        _configured = False