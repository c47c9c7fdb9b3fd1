"""
MIT License

Batch hashing of message files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .blocks import block_count
from .digest import tth
from .sanitize import sanitize
from ..io.fasta import read_fasta_messages
from ..io.messages import read_lines, read_message_table
from ..util.logging import get_logger

LOGGER = get_logger(__name__)

INPUT_FORMATS = ("lines", "table", "fasta")

RESULT_COLUMNS = ["id", "message", "sanitized_length", "n_blocks", "digest"]


@dataclass
class BatchConfig:
    source: str
    input_format: str = "lines"
    column: str = "message"
    id_column: Optional[str] = None
    skip_empty: bool = False


@dataclass
class BatchResult:
    config: BatchConfig
    table: pd.DataFrame
    empty_messages: int


def load_messages(config: BatchConfig) -> pd.DataFrame:
    if config.input_format == "lines":
        return read_lines(config.source, skip_empty=config.skip_empty)
    if config.input_format == "table":
        return read_message_table(config.source, column=config.column, id_column=config.id_column)
    if config.input_format == "fasta":
        return read_fasta_messages(config.source)
    raise ValueError(f"Unsupported input format: {config.input_format}")


def hash_messages(messages: pd.DataFrame) -> pd.DataFrame:
    """Add sanitized length, block count and digest to an ``id``/``message`` table."""

    table = messages.loc[:, ["id", "message"]].reset_index(drop=True)
    lengths = table["message"].map(lambda message: len(sanitize(message)))
    table["sanitized_length"] = lengths.astype(int)
    table["n_blocks"] = lengths.map(block_count).astype(int)
    table["digest"] = table["message"].map(tth)
    return table[RESULT_COLUMNS]


def run_batch(config: BatchConfig) -> BatchResult:
    """Read, hash and summarize every message named by ``config``."""

    LOGGER.info("Reading %s messages from %s", config.input_format, config.source)
    messages = load_messages(config)
    LOGGER.info("Hashing %d messages", len(messages))
    table = hash_messages(messages)
    empty = int((table["sanitized_length"] == 0).sum())
    if empty:
        LOGGER.warning("%d message(s) contain no letters A-Z and hash to AAAA", empty)
    return BatchResult(config=config, table=table, empty_messages=empty)


__all__ = [
    "INPUT_FORMATS",
    "RESULT_COLUMNS",
    "BatchConfig",
    "BatchResult",
    "load_messages",
    "hash_messages",
    "run_batch",
]
