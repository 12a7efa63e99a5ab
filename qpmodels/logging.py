"""Logging utilities for qpmodels.

All package loggers hang below a single ``qpmodels`` root logger that owns the
only handler. Constructors use it to report the bound repairs they perform and,
at DEBUG level, the dimensions of every problem they build.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

ROOT_NAME = "qpmodels"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_DEFAULT_LEVEL = logging.WARNING


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(_DEFAULT_LEVEL)
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name`` inside the ``qpmodels`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            package are nested below ``qpmodels``; ``None`` returns the root.

    Example:
        >>> from qpmodels.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("built LP with N=%d", 3)
    """
    root = _root()
    if name is None or name == ROOT_NAME:
        return root
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the level of the package root logger and its handlers.

    Args:
        level: ``logging`` level constant or its name (``"DEBUG"``, ...).
    """
    level = _as_level(level)
    root = _root()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Replace the package handler with one writing to ``stream``.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        stream: Output stream (default: ``sys.stderr``).
    """
    root = _root()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    set_log_level(level)


__all__ = ["ROOT_NAME", "DEFAULT_FORMAT", "get_logger", "set_log_level", "configure_logging"]
