"""
MIT License

Input sanitization for the Toy Tetragraph Hash.
"""

from __future__ import annotations

import re

import numpy as np

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_NON_LETTER_RE = re.compile(r"[^A-Za-z]+")
_ALPHABET_SET = frozenset(ALPHABET)


def sanitize(message: str) -> str:
    """
    Keep ASCII letters only, folded to uppercase.

    Letters outside A-Z (accented, ligatures, other scripts) are dropped
    before case folding so that e.g. ``"ß"`` never turns into ``"SS"``.
    """
    return _NON_LETTER_RE.sub("", message).upper()


def letter_values(text: str) -> np.ndarray:
    """Map sanitized text to alphabet indices (A=0 .. Z=25)."""
    if not text:
        return np.zeros(0, dtype=np.int64)
    unexpected = sorted(set(text) - _ALPHABET_SET)
    if unexpected:
        raise ValueError(f"Text is not sanitized, unexpected characters: {''.join(unexpected)!r}")
    codes = np.frombuffer(text.encode("ascii"), dtype=np.uint8)
    return codes.astype(np.int64) - ord("A")


__all__ = ["ALPHABET", "sanitize", "letter_values"]
