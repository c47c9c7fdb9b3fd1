"""
MIT License

Text helpers for tthash.
"""

from __future__ import annotations

import textwrap
from typing import Iterable, List

from ..core.sanitize import ALPHABET


def wrap_block(text: str, width: int = 100, indent: str = "") -> str:
    """Wrap a block of text to the given width with optional indent."""
    return "\n".join(textwrap.fill(line, width=width, subsequent_indent=indent) for line in text.splitlines())


def letter_grid(block: Iterable[Iterable[int]]) -> List[str]:
    """Draw a block as rows of letters followed by their numeric values."""
    lines = []
    for row in block:
        values = [int(value) for value in row]
        letters = " ".join(ALPHABET[value] for value in values)
        numbers = " ".join(f"{value:>2}" for value in values)
        lines.append(f"  {letters}   | {numbers}")
    return lines


__all__ = ["wrap_block", "letter_grid"]
