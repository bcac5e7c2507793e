"""
Tests for the result writer and the output decoder.
"""

import json

import pytest

from rdf2fr.encoding import (
    EncodedQuad,
    ResultWriter,
    group_encoded_quads,
    load_encoded_quads,
    load_sequence,
    to_field_ints,
    write_sequence,
)
from rdf2fr.errors import MalformedOutputError, QuadIOError, RangeInvariantViolation

SEQUENCE = ["1", "2", "3", "4", "0", "11", "12", "13", "14", "42"]


class TestResultWriter:
    """Tests for ResultWriter"""

    def test_writes_json_array_of_strings(self, tmp_path) -> None:
        path = tmp_path / "out.json"
        ResultWriter().write(SEQUENCE, path)

        assert json.loads(path.read_text(encoding="utf-8")) == SEQUENCE

    def test_creates_parent_directories(self, tmp_path) -> None:
        path = tmp_path / "nested" / "dir" / "out.json"
        write_sequence(SEQUENCE, path)
        assert path.exists()

    def test_no_temporary_files_left(self, tmp_path) -> None:
        ResultWriter().write(SEQUENCE, tmp_path / "out.json")
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_replaces_existing_file(self, tmp_path) -> None:
        path = tmp_path / "out.json"
        path.write_text("stale", encoding="utf-8")
        ResultWriter().write(SEQUENCE, path)
        assert load_sequence(path) == SEQUENCE

    def test_compact_output(self, tmp_path) -> None:
        path = tmp_path / "out.json"
        ResultWriter(indent=None).write(["1", "2"], path)
        assert path.read_text(encoding="utf-8") == '["1", "2"]\n'

    def test_unwritable_destination(self, tmp_path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(QuadIOError):
            ResultWriter().write(SEQUENCE, blocker / "out.json")

    def test_write_report(self, tmp_path) -> None:
        path = ResultWriter().write_report({"quads": 2}, tmp_path / "report.json")
        assert json.loads(path.read_text(encoding="utf-8")) == {"quads": 2}


class TestLoadSequence:
    """Tests for load_sequence"""

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(QuadIOError):
            load_sequence(tmp_path / "missing.json")

    @pytest.mark.parametrize("content", ['{"a": 1}', "[1, 2, 3]", "not json"])
    def test_malformed_content(self, tmp_path, content) -> None:
        path = tmp_path / "out.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(MalformedOutputError):
            load_sequence(path)


class TestDecoder:
    """Tests for regrouping persisted sequences"""

    def test_group_encoded_quads(self) -> None:
        quads = group_encoded_quads(SEQUENCE)

        assert quads == [
            EncodedQuad("1", "2", "3", "4", "0"),
            EncodedQuad("11", "12", "13", "14", "42"),
        ]
        assert quads[1].numeric == "42"

    def test_length_not_multiple_of_five(self) -> None:
        with pytest.raises(MalformedOutputError):
            group_encoded_quads(SEQUENCE[:7])

    def test_empty_sequence(self) -> None:
        assert group_encoded_quads([]) == []

    def test_to_field_ints(self) -> None:
        assert to_field_ints(["0", "5", "96"], 97) == [0, 5, 96]
        with pytest.raises(RangeInvariantViolation):
            to_field_ints(["0", "97"], 97)

    def test_load_encoded_quads(self, tmp_path) -> None:
        path = tmp_path / "out.json"
        write_sequence(SEQUENCE, path)
        assert len(load_encoded_quads(path, 97)) == 2
