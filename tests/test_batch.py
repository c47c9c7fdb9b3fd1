"""Tests for batch hashing and the file readers behind it."""

from __future__ import annotations

import json

import pandas as pd
import pytest

from tthash import tth
from tthash.core.batch import RESULT_COLUMNS, BatchConfig, hash_messages, load_messages, run_batch
from tthash.io.fasta import read_fasta_messages
from tthash.io.messages import read_lines, read_message_table
from tthash.io.tsv import write_table


class TestReaders:
    def test_read_lines_keeps_line_numbers(self, messages_file):
        df = read_lines(messages_file)
        assert df["id"].tolist() == ["1", "2", "3", "4"]
        assert df["message"].tolist()[1] == ""

    def test_read_lines_skip_empty(self, messages_file):
        df = read_lines(messages_file, skip_empty=True)
        assert df["id"].tolist() == ["1", "3", "4"]

    def test_read_message_table(self, message_table):
        df = read_message_table(message_table, column="text", id_column="name")
        assert df["id"].tolist() == ["greeting", "alpha", "blank"]
        assert df["message"].tolist() == ["hello, World!", "ABCDEFGHIJKLMNOPQ", ""]

    def test_read_message_table_default_ids(self, message_table):
        df = read_message_table(message_table, column="text")
        assert df["id"].tolist() == ["1", "2", "3"]

    def test_read_message_table_missing_column(self, message_table):
        with pytest.raises(ValueError, match="missing columns: message"):
            read_message_table(message_table)

    def test_read_fasta(self, fasta_file):
        df = read_fasta_messages(fasta_file)
        assert df["id"].tolist() == ["seq1", "seq2"]
        assert df["message"].tolist() == ["ACGT", "ACGTACGTACGTACGTAC"]


class TestHashMessages:
    def test_columns_and_values(self):
        messages = pd.DataFrame({"id": ["a", "b"], "message": ["ABCDEFGHIJKLMNOPQ", "!!"]})
        table = hash_messages(messages)
        assert list(table.columns) == RESULT_COLUMNS
        assert table["sanitized_length"].tolist() == [17, 0]
        assert table["n_blocks"].tolist() == [2, 1]
        assert table["digest"].tolist() == ["VHJB", "AAAA"]

    def test_empty_input(self):
        table = hash_messages(pd.DataFrame(columns=["id", "message"]))
        assert list(table.columns) == RESULT_COLUMNS
        assert table.empty


class TestRunBatch:
    def test_lines(self, messages_file):
        result = run_batch(BatchConfig(source=str(messages_file)))
        assert result.table["digest"].tolist() == [tth("hello, World!"), "AAAA", "FHJL", "AAAA"]
        assert result.empty_messages == 2

    def test_table(self, message_table):
        config = BatchConfig(source=str(message_table), input_format="table", column="text", id_column="name")
        result = run_batch(config)
        assert result.table.set_index("id")["digest"].to_dict() == {
            "greeting": tth("HELLOWORLD"),
            "alpha": "VHJB",
            "blank": "AAAA",
        }
        assert result.empty_messages == 1

    def test_fasta(self, fasta_file):
        result = run_batch(BatchConfig(source=str(fasta_file), input_format="fasta"))
        assert result.table["digest"].tolist() == ["CIZT", tth("ACGTACGTACGTACGTAC")]
        assert result.table["n_blocks"].tolist() == [1, 2]
        assert result.empty_messages == 0

    def test_unknown_format(self, messages_file):
        with pytest.raises(ValueError, match="Unsupported input format"):
            load_messages(BatchConfig(source=str(messages_file), input_format="xml"))


class TestWriteTable:
    @pytest.fixture
    def table(self):
        messages = pd.DataFrame({"id": ["1"], "message": ["ABCDEFGHIJKLMNOP"]})
        return hash_messages(messages)

    def test_tsv(self, table, tmp_path):
        out = tmp_path / "nested" / "out.tsv"
        write_table(table, out)
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "\t".join(RESULT_COLUMNS)
        assert lines[1] == "1\tABCDEFGHIJKLMNOP\t16\t1\tFHJL"

    def test_csv(self, table, tmp_path):
        out = tmp_path / "out.csv"
        write_table(table, out, fmt="csv")
        assert out.read_text(encoding="utf-8").splitlines()[1] == "1,ABCDEFGHIJKLMNOP,16,1,FHJL"

    def test_jsonl(self, table, tmp_path):
        out = tmp_path / "out.jsonl"
        write_table(table, out, fmt="jsonl")
        record = json.loads(out.read_text(encoding="utf-8").splitlines()[0])
        assert record == {
            "id": "1",
            "message": "ABCDEFGHIJKLMNOP",
            "sanitized_length": 16,
            "n_blocks": 1,
            "digest": "FHJL",
        }

    def test_unsupported_format(self, table, tmp_path):
        with pytest.raises(ValueError, match="Unsupported format"):
            write_table(table, tmp_path / "out.xml", fmt="xml")
