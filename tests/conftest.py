"""Shared fixtures for tthash tests."""

from __future__ import annotations

import pytest

from tthash.util.logging import set_verbosity


@pytest.fixture
def alphabet_block():
    """The 16-letter message A..P laid out as a single block."""
    return [
        [0, 1, 2, 3],
        [4, 5, 6, 7],
        [8, 9, 10, 11],
        [12, 13, 14, 15],
    ]


@pytest.fixture
def messages_file(tmp_path):
    path = tmp_path / "messages.txt"
    path.write_text("hello, World!\n\nABCDEFGHIJKLMNOP\n123 !!!\n", encoding="utf-8")
    return path


@pytest.fixture
def message_table(tmp_path):
    path = tmp_path / "messages.tsv"
    path.write_text(
        "name\ttext\n"
        "greeting\thello, World!\n"
        "alpha\tABCDEFGHIJKLMNOPQ\n"
        "blank\t\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "records.fasta"
    path.write_text(">seq1 first record\nACGT\n>seq2\nACGTACGTAC\nGTACGTAC\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_verbosity():
    """Undo ``--quiet`` from CLI tests so later tests see INFO logging."""
    yield
    set_verbosity(quiet=False)
