"""
MIT License

Numeric-to-letter mapping of the final running hash.
"""

from __future__ import annotations

from typing import Sequence

from .sanitize import ALPHABET


def encode(running: Sequence[int]) -> str:
    """Map each running-hash value to its alphabet letter and concatenate."""
    letters = []
    for value in running:
        index = int(value)
        if not 0 <= index < len(ALPHABET):
            raise ValueError(f"Hash value out of alphabet range: {value}")
        letters.append(ALPHABET[index])
    return "".join(letters)


__all__ = ["encode"]
