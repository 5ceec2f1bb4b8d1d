"""
Logging configuration for the Student Points API.

``setup_logging`` installs one console handler (plus an optional file
handler) on the root logger and hands uvicorn's own loggers over to
it, so server start‑up lines, access lines and roster messages share a
single format and destination.  ``run.py`` starts uvicorn with
``log_config=None`` for the same reason.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn creates for itself.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _level_from_name(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def route_server_loggers(level: int) -> None:
    """Make uvicorn's loggers propagate to the root handlers.

    Any handlers uvicorn attached are removed so lines are not printed
    twice in two formats.
    """
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route uvicorn's loggers into it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file; set through ``LOG_FILE``.
    """
    numeric_level = _level_from_name(level)
    route_server_loggers(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # Configured already, e.g. by pytest or a second create_app call.
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
