"""
MIT License

Readers for plain-text and tabular message inputs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

MESSAGE_COLUMNS = ["id", "message"]


def read_lines(path: str | Path, skip_empty: bool = False) -> pd.DataFrame:
    """Read one message per line; ids are 1-based line numbers."""
    source = Path(path)
    rows = []
    with source.open("r", encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            message = line.rstrip("\r\n")
            if skip_empty and not message.strip():
                continue
            rows.append({"id": str(number), "message": message})
    return pd.DataFrame(rows, columns=MESSAGE_COLUMNS)


def read_message_table(
    path: str | Path,
    column: str = "message",
    id_column: Optional[str] = None,
) -> pd.DataFrame:
    """Read messages from a TSV with a header row."""
    table_path = Path(path)
    df = pd.read_csv(table_path, sep="\t", dtype=str, keep_default_na=False)
    missing = [col for col in (column, id_column) if col and col not in df.columns]
    if missing:
        raise ValueError(f"Message table missing columns: {', '.join(missing)}")
    if id_column:
        ids = df[id_column]
    else:
        ids = pd.Series([str(i) for i in range(1, len(df) + 1)], index=df.index)
    return pd.DataFrame({"id": ids.to_numpy(), "message": df[column].to_numpy()}, columns=MESSAGE_COLUMNS)


__all__ = ["MESSAGE_COLUMNS", "read_lines", "read_message_table"]
