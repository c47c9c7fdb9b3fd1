"""
MIT License

Logging setup shared by the tthash CLI and batch runner.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_NAME = "tthash"

_ROOT: Optional[logging.Logger] = None


def _root_logger() -> logging.Logger:
    global _ROOT
    if _ROOT is None:
        logger = logging.getLogger(ROOT_NAME)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%Y-%m-%dT%H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _ROOT = logger
    return _ROOT


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for module ``name``."""
    root = _root_logger()
    if not name or name == ROOT_NAME:
        return root
    return logging.getLogger(name if name.startswith(ROOT_NAME + ".") else f"{ROOT_NAME}.{name}")


def set_verbosity(quiet: bool = False) -> None:
    """Only let warnings through when ``quiet`` is set."""
    _root_logger().setLevel(logging.WARNING if quiet else logging.INFO)


__all__ = ["ROOT_NAME", "get_logger", "set_verbosity"]
