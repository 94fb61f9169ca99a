"""Logging setup for the phrase generator.

Library modules only ever call :func:`get_logger`; the command line entry
points decide the level once through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(threadName)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route all records to stderr with one line per record.

    Constraint searches emit a DEBUG record per successful anchor and a
    WARNING when they give up, so INFO shows dictionary loads and resets
    only. The thread name tells concurrent provider builds apart.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``fraze`` logger or a child of it, installing defaults on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "fraze")
