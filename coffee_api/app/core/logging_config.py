"""
Logging setup for the Coffee API.

``create_app`` calls ``setup_logging`` with the level and log file from
its ``Settings``.  The module‑level application is built on import, so
the function runs more than once per process: the console handler is
attached only the first time, while the level and any new log file are
applied on every call.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "coffee_api.console"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_name(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and attach handlers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names mean ``INFO``.
    logfile : Optional[str]
        File to append log records to.  A handler is added unless one
        for the same path is already attached.
    """
    logger = logging.getLogger()
    logger.setLevel(_level_from_name(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
