"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from tersify.cli import app

runner = CliRunner()


def _write_spec(directory: Path, lines: list[str]) -> Path:
    path = directory / "dartLangSpec.tex"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestCli:
    """Tests for the tersify command."""

    def test_writes_terse_file(self, temp_dir: Path, sample_spec_lines: list[str]) -> None:
        source = _write_spec(temp_dir, sample_spec_lines)
        result = runner.invoke(app, [str(source)])
        assert result.exit_code == 0, result.output
        output = temp_dir / "dartLangSpec-terse.tex"
        assert output.exists()
        text = output.read_text(encoding="utf-8")
        assert "A variable is a storage location in memory.\n" in text
        assert "Everything here is ignored." not in text
        assert "dartLangSpec-terse.tex" in result.output

    def test_explicit_output(self, temp_dir: Path) -> None:
        source = _write_spec(temp_dir, ["text %comment"])
        target = temp_dir / "short.tex"
        result = runner.invoke(app, [str(source), "-o", str(target)])
        assert result.exit_code == 0, result.output
        assert target.read_text(encoding="utf-8") == "text %\n"

    def test_missing_input(self, temp_dir: Path) -> None:
        result = runner.invoke(app, [str(temp_dir / "absent.tex")])
        assert result.exit_code == 1
        assert "simplify_specification error" in result.output
        assert not (temp_dir / "absent-terse.tex").exists()

    def test_structural_error_writes_nothing(self, temp_dir: Path) -> None:
        source = _write_spec(temp_dir, [r"\begin{document}", r"\LMHash{}", "text"])
        result = runner.invoke(app, [str(source)])
        assert result.exit_code == 1
        assert "reached end of text" in result.output
        assert not (temp_dir / "dartLangSpec-terse.tex").exists()

    def test_report(self, temp_dir: Path, sample_spec_lines: list[str]) -> None:
        source = _write_spec(temp_dir, sample_spec_lines)
        report = temp_dir / "passes.json"
        result = runner.invoke(app, [str(source), "--report", str(report)])
        assert result.exit_code == 0, result.output
        data = json.loads(report.read_text())
        assert data["input_line_count"] == len(sample_spec_lines)
        assert len(data["passes"]) == 7

    def test_dialect_file(self, temp_dir: Path) -> None:
        source = _write_spec(temp_dir, [r"\aside{x}", "kept"])
        dialect = temp_dir / "dialect.json"
        dialect.write_text(json.dumps({"non_normative_tags": ["aside"]}))
        result = runner.invoke(app, [str(source), "--dialect", str(dialect)])
        assert result.exit_code == 0, result.output
        assert (temp_dir / "dartLangSpec-terse.tex").read_text() == "kept\n"

    def test_mistyped_dialect_file(self, temp_dir: Path) -> None:
        source = _write_spec(temp_dir, ["x"])
        dialect = temp_dir / "dialect.json"
        dialect.write_text(json.dumps({"list_begins": 5}))
        result = runner.invoke(app, [str(source), "--dialect", str(dialect)])
        assert result.exit_code == 2
        assert "invalid dialect file" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_undecodable_input(self, temp_dir: Path) -> None:
        source = temp_dir / "dartLangSpec.tex"
        source.write_bytes(b"caf\xe9\n")
        result = runner.invoke(app, [str(source)])
        assert result.exit_code == 1
        assert "simplify_specification error: Specification is not valid UTF-8" in result.output
        assert not (temp_dir / "dartLangSpec-terse.tex").exists()

    def test_invalid_dialect_file(self, temp_dir: Path) -> None:
        source = _write_spec(temp_dir, ["x"])
        dialect = temp_dir / "dialect.json"
        dialect.write_text(json.dumps({"bogus": True}))
        result = runner.invoke(app, [str(source), "--dialect", str(dialect)])
        assert result.exit_code == 2
        assert "invalid dialect file" in result.output
