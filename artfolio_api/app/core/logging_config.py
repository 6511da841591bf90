"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console handler and, optionally, a file handler.  Log records carry
the timestamp, logger name, level and message.  Logging is configured
at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler.  The root logger's level is
    set from ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured (e.g. by uvicorn or by a previous create_app call).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
