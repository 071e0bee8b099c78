"""
Logging configuration for the service.

``setup_logging`` installs one console handler (and optionally one file
handler) on the root logger and makes Uvicorn's own loggers propagate
to it, so server start-up messages, access lines and application logs
share one format and one destination.  ``run.py`` starts Uvicorn with
``log_config=None`` for this reason.

Handlers installed here are tagged by name, which makes repeated calls
(one per ``create_app``) harmless and leaves handlers added by other
tools, such as pytest's log capture, alone.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "user_records.console"
FILE_HANDLER_NAME = "user_records.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger and route Uvicorn's loggers through it.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console.  Defaults to
        ``settings.log_file``.  A second call with a different path
        replaces the previous file handler.
    """
    level = level or settings.log_level
    logfile = logfile or settings.log_file
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if _find_handler(root, CONSOLE_HANDLER_NAME) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = str(Path(logfile).resolve())
        current = _find_handler(root, FILE_HANDLER_NAME)
        if current is not None and getattr(current, "baseFilename", None) != log_path:
            root.removeHandler(current)
            current.close()
            current = None
        if current is None:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)
