"""
MIT License

Toy Tetragraph Hash: a 4-letter, non-cryptographic teaching digest.
"""

from __future__ import annotations

from .core.digest import tth

__version__ = "0.1.0"

__all__ = ["tth", "__version__"]
