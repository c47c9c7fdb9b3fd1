"""
MIT License

Block decomposition of sanitized text into 4x4 letter-value matrices.
"""

from __future__ import annotations

import numpy as np

from .sanitize import letter_values

BLOCK_ROWS = 4
BLOCK_COLS = 4
BLOCK_SIZE = BLOCK_ROWS * BLOCK_COLS


def block_count(length: int) -> int:
    """Number of blocks for a sanitized text of ``length`` letters (never zero)."""
    return max(1, -(-length // BLOCK_SIZE))


def build_blocks(text: str) -> np.ndarray:
    """
    Split sanitized text into row-major 4x4 blocks.

    Parameters
    ----------
    text:
        Output of :func:`tthash.core.sanitize.sanitize`.

    Returns
    -------
    numpy.ndarray
        Integer array of shape ``(n, 4, 4)`` where block ``k``, row ``r``,
        column ``c`` holds the letter at ``k*16 + r*4 + c``. Cells past the
        end of the text are 0, the same value as ``A``.

    Raises
    ------
    ValueError
        If ``text`` holds anything other than the letters A-Z.
    """
    values = letter_values(text)
    n_blocks = block_count(len(values))
    padded = np.zeros(n_blocks * BLOCK_SIZE, dtype=np.int64)
    padded[: len(values)] = values
    return padded.reshape(n_blocks, BLOCK_ROWS, BLOCK_COLS)


__all__ = ["BLOCK_ROWS", "BLOCK_COLS", "BLOCK_SIZE", "block_count", "build_blocks"]
