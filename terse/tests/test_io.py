"""Tests for reading and writing documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from tersify.errors import MissingInputError, UnreadableInputError
from tersify.io import read_lines, split_lines, terse_output_path, write_lines


class TestSplitLines:
    """Tests for split_lines()."""

    def test_mixed_terminators(self) -> None:
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_final_terminator_dropped(self) -> None:
        assert split_lines("a\n\n") == ["a", ""]

    def test_empty(self) -> None:
        assert split_lines("") == []

    def test_form_feed_not_a_break(self) -> None:
        assert split_lines("a\fb\n") == ["a\fb"]


class TestReadWrite:
    """Tests for file access."""

    def test_missing_input(self, temp_dir: Path) -> None:
        path = temp_dir / "dartLangSpec.tex"
        with pytest.raises(MissingInputError) as info:
            read_lines(path)
        assert info.value.source_path == path
        assert "Specification not found" in str(info.value)

    def test_invalid_utf8(self, temp_dir: Path) -> None:
        path = temp_dir / "spec.tex"
        path.write_bytes(b"caf\xe9\n")
        with pytest.raises(UnreadableInputError) as info:
            read_lines(path)
        assert info.value.source_path == path

    def test_read_crlf(self, temp_dir: Path) -> None:
        path = temp_dir / "spec.tex"
        path.write_bytes(b"one\r\ntwo\r\n")
        assert read_lines(path) == ["one", "two"]

    def test_write_lines(self, temp_dir: Path) -> None:
        path = temp_dir / "out.tex"
        assert write_lines(path, ["a", "", "b"]) == 3
        assert path.read_bytes() == b"a\n\nb\n"

    def test_write_nothing(self, temp_dir: Path) -> None:
        path = temp_dir / "out.tex"
        assert write_lines(path, []) == 0
        assert path.read_bytes() == b""


class TestTerseOutputPath:
    """Tests for terse_output_path()."""

    def test_suffix_inserted(self) -> None:
        assert terse_output_path(Path("dartLangSpec.tex")) == Path("dartLangSpec-terse.tex")

    def test_same_directory(self) -> None:
        assert terse_output_path(Path("spec/doc.tex")) == Path("spec/doc-terse.tex")
