"""
MIT License

FASTA reading utilities for tthash.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import pandas as pd
from Bio import SeqIO

from .messages import MESSAGE_COLUMNS


@dataclass
class FastaRecord:
    """Minimal FASTA record snapshot."""

    seq_id: str
    sequence: str


def iter_fasta(path: str | Path) -> Iterator[FastaRecord]:
    for record in SeqIO.parse(str(path), "fasta"):
        yield FastaRecord(seq_id=record.id, sequence=str(record.seq))


def read_fasta_messages(path: str | Path) -> pd.DataFrame:
    """Treat every FASTA record as one message keyed by its record id."""
    rows = [{"id": rec.seq_id, "message": rec.sequence} for rec in iter_fasta(path)]
    return pd.DataFrame(rows, columns=MESSAGE_COLUMNS)


__all__ = ["FastaRecord", "iter_fasta", "read_fasta_messages"]
