"""
MIT License

End-to-end Toy Tetragraph Hash and its round-by-round trace.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .blocks import build_blocks
from .compress import INITIAL_HASH, RunningHash, column_sums, compress, fold, shift_rows
from .encode import encode
from .sanitize import sanitize
from ..util.text import letter_grid, wrap_block


@dataclass
class RoundTrace:
    """Intermediate states of one block's compression."""

    index: int
    block: np.ndarray
    sums: np.ndarray
    after_sums: RunningHash
    shifted: np.ndarray
    shifted_sums: np.ndarray
    after_shift: RunningHash


@dataclass
class HashTrace:
    message: str
    sanitized: str
    blocks: np.ndarray
    rounds: List[RoundTrace] = field(default_factory=list)
    running: RunningHash = INITIAL_HASH

    @property
    def digest(self) -> str:
        return encode(self.running)


def _require_text(message: object) -> str:
    if not isinstance(message, str):
        raise TypeError(f"message must be str, not {type(message).__name__}")
    return message


def tth(message: str) -> str:
    """
    Return the 4-letter Toy Tetragraph Hash of ``message``.

    Only the letters A-Z (either case) contribute; everything else is
    ignored, so a message without letters hashes to ``"AAAA"``.
    """
    return encode(compress(build_blocks(sanitize(_require_text(message)))))


def trace(message: str) -> HashTrace:
    """Hash ``message`` while recording every block's intermediate state."""

    text = sanitize(_require_text(message))
    blocks = build_blocks(text)
    result = HashTrace(message=message, sanitized=text, blocks=blocks)
    running = INITIAL_HASH
    for index, block in enumerate(blocks):
        sums = column_sums(block)
        after_sums = fold(running, sums)
        shifted = shift_rows(block)
        shifted_sums = column_sums(shifted)
        running = fold(after_sums, shifted_sums)
        result.rounds.append(
            RoundTrace(
                index=index,
                block=block,
                sums=sums,
                after_sums=after_sums,
                shifted=shifted,
                shifted_sums=shifted_sums,
                after_shift=running,
            )
        )
    result.running = running
    return result


def _numbers(values) -> str:
    return " ".join(f"{int(value):>2}" for value in values)


def render_trace(result: HashTrace) -> List[str]:
    """Render a trace as plain-text lines for terminal output."""

    lines = [f"sanitized ({len(result.sanitized)} letters):"]
    lines.append(wrap_block(result.sanitized, width=64, indent="") or "(empty)")
    lines.append(f"blocks: {len(result.blocks)}")
    for entry in result.rounds:
        lines.append("")
        lines.append(f"## block {entry.index + 1}")
        lines.extend(letter_grid(entry.block))
        lines.append(f"column sums   {_numbers(entry.sums)}")
        lines.append(f"running hash  {_numbers(entry.after_sums)}  {encode(entry.after_sums)}")
        lines.append("shifted:")
        lines.extend(letter_grid(entry.shifted))
        lines.append(f"column sums   {_numbers(entry.shifted_sums)}")
        lines.append(f"running hash  {_numbers(entry.after_shift)}  {encode(entry.after_shift)}")
    lines.append("")
    lines.append(f"digest: {result.digest}")
    return lines


__all__ = ["RoundTrace", "HashTrace", "tth", "trace", "render_trace"]
