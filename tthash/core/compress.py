"""
MIT License

Compression rounds of the Toy Tetragraph Hash.

Each block is folded into a 4-column running total twice: once as read, and
once after its rows have been shifted (row 0 left by one, row 1 left by two,
row 2 left by three, row 3 reversed). All arithmetic is modulo 26.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

MODULUS = 26

# Source column for every destination cell of a shifted row.
SHIFT_TABLE = np.array(
    [
        [1, 2, 3, 0],
        [2, 3, 0, 1],
        [3, 0, 1, 2],
        [3, 2, 1, 0],
    ],
    dtype=np.intp,
)

RunningHash = Tuple[int, int, int, int]

INITIAL_HASH: RunningHash = (0, 0, 0, 0)


def column_sums(block: np.ndarray) -> np.ndarray:
    """Sum a 4x4 block down its columns."""
    return np.asarray(block, dtype=np.int64).sum(axis=0)


def shift_rows(block: np.ndarray) -> np.ndarray:
    """Return a new block with every row permuted by :data:`SHIFT_TABLE`."""
    return np.take_along_axis(np.asarray(block), SHIFT_TABLE, axis=1)


def fold(running: Sequence[int], sums: Iterable[int]) -> RunningHash:
    """Add reduced column sums into the running hash, modulo 26."""
    folded = [(int(total) + int(col) % MODULUS) % MODULUS for total, col in zip(running, sums)]
    return tuple(folded)  # type: ignore[return-value]


def compress_block(running: Sequence[int], block: np.ndarray) -> RunningHash:
    """Apply both sub-phases of one block to ``running``."""
    running = fold(running, column_sums(block))
    return fold(running, column_sums(shift_rows(block)))


def compress(blocks: Iterable[np.ndarray]) -> RunningHash:
    """Fold every block, in order, into a running hash starting at zero."""
    running = INITIAL_HASH
    for block in blocks:
        running = compress_block(running, block)
    return running


__all__ = [
    "MODULUS",
    "SHIFT_TABLE",
    "INITIAL_HASH",
    "RunningHash",
    "column_sums",
    "shift_rows",
    "fold",
    "compress_block",
    "compress",
]
