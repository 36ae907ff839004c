"""
Logging configuration for the Developer API.

The service logs through its own package loggers and through the
loggers of the Uvicorn server that hosts it.  ``setup_logging`` gives
all of them the configured level and routes their records to one
console handler (plus an optional file handler) on the root logger.
``run.py`` starts Uvicorn with ``log_config=None`` so the server keeps
this setup instead of installing its own.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_LOGGERS = (
    "developer_api",
    "developer_api_client",
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
)

_HANDLER_NAME = "developer_api"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the service and server loggers.

    Levels are (re)applied on every call.  Handlers are attached to the
    root logger only once per process, so repeated ``create_app`` calls
    do not duplicate output.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        Path of an additional log file.  Omit to log to the console only.
    """
    numeric_level = resolve_level(level)
    for name in SERVICE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        logger.propagate = True

    root = logging.getLogger()
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
