"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers under the ``docgen`` namespace.
    - Allow an optional verbose/debug mode.

Notes/Edge cases:
    - Configuration is idempotent; calling :func:`configure_logging` twice
      replaces the handler installed by the previous call, so the package
      logger never holds more than one and never writes to a stale stream.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "docgen"
_HANDLER_ATTR = "_docgen_handler"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""

    root = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    previous = getattr(root, _HANDLER_ATTR, None)
    if previous is not None:
        # sys.stderr may have been swapped and the old stream closed
        root.removeHandler(previous)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    root.addHandler(handler)
    setattr(root, _HANDLER_ATTR, handler)
    root.setLevel(level)
    return root


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
