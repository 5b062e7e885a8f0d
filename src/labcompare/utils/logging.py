"""Logging setup for labcompare.

The comparison core only ever asks for loggers (get_logger(__name__)); output
is configured by whoever runs it, either the host application or the demo
through configure_logging(). Nothing is written to files.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "LABCOMPARE_LOG_LEVEL"
ROOT_LOGGER_NAME = "labcompare"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the "labcompare" logger (never the root logger).

    Args:
        level: Level name or number; defaults to $LABCOMPARE_LOG_LEVEL, else INFO.
        fmt: Record format; defaults to DEFAULT_FMT.
        datefmt: Timestamp format; defaults to DEFAULT_DATEFMT.
        force: Replace existing handlers. Otherwise a second call is a no-op
            once a stderr handler is attached.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)


# alias used by the demo entrypoint
setup_logging = configure_logging


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for name, or the package logger "labcompare" when name is None."""
    if name is None:
        name = ROOT_LOGGER_NAME
    return logging.getLogger(name)
