"""
MIT License

TSV/CSV/JSONL helpers for tthash.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO
import json

import pandas as pd

FORMATS = ("tsv", "csv", "jsonl")


def write_table(df: pd.DataFrame, path: str | Path | IO[str], fmt: str = "tsv") -> None:
    """
    Persist a DataFrame in the requested serialization format.

    Parameters
    ----------
    df:
        DataFrame to serialize.
    path:
        Output file path, or an open text stream such as ``sys.stdout``.
    fmt:
        One of ``tsv``, ``csv`` or ``jsonl``.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format: {fmt}")

    if isinstance(path, (str, Path)):
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8", newline="") as handle:
            _write(df, handle, fmt)
    else:
        _write(df, path, fmt)


def _write(df: pd.DataFrame, handle: IO[str], fmt: str) -> None:
    if fmt == "tsv":
        df.to_csv(handle, sep="\t", index=False)
    elif fmt == "csv":
        df.to_csv(handle, sep=",", index=False)
    else:
        for record in df.to_dict(orient="records"):
            handle.write(json.dumps(record, ensure_ascii=False) + "\n")


__all__ = ["FORMATS", "write_table"]
