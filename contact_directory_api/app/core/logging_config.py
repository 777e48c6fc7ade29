"""
Logging setup for the contact directory.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger once per process, then sets the
level of the ``contact_directory_api`` logger tree.  The package level
is applied on every call, so a second ``create_app`` can still change
it.  Uvicorn's access log is kept at WARNING unless the service itself
runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings
from .db import BASE_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "contact_directory_api"


def resolve_log_path(logfile: str) -> Path:
    """Resolve ``logfile`` against ``BASE_DIR`` unless it is absolute."""
    path = Path(logfile)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> logging.Logger:
    """Configure logging and return the package logger.

    Parameters
    ----------
    level : Optional[str]
        Level name such as ``"DEBUG"``; defaults to ``settings.log_level``.
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Log file path; defaults to ``settings.log_file``.  An empty value
        disables file logging.
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    access_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    logging.getLogger("uvicorn.access").setLevel(access_level)

    root = logging.getLogger()
    if root.handlers:
        return package_logger

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    logfile = logfile if logfile is not None else settings.log_file
    if logfile:
        log_path = resolve_log_path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers)
    return package_logger
