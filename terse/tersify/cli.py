"""Command line entry point.

Usage::

    # From the directory holding dartLangSpec.tex
    tersify

    # Explicit paths
    tersify path/to/spec.tex -o spec-terse.tex --report passes.json
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from tersify.dialect import Dialect
from tersify.errors import TerseError
from tersify.io import DEFAULT_SPECIFICATION, read_lines, terse_output_path, write_lines
from tersify.pipeline import TersePipeline

app = typer.Typer(help="Derive the terse, grep-friendly form of a LaTeX specification.")
logger = logging.getLogger("tersify")

ERROR_PREFIX = "simplify_specification error"


@app.command()
def main(
    input_path: Path = typer.Argument(
        Path(DEFAULT_SPECIFICATION), help="Specification to simplify"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination (default: <name>-terse.<ext>)"
    ),
    dialect_path: Optional[Path] = typer.Option(
        None, "--dialect", help="JSON file overriding dialect markers"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", help="Write the per-pass log as JSON"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
) -> None:
    """Strip non-normative text and put every paragraph on one line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        dialect = Dialect.load(dialect_path) if dialect_path else Dialect.default()
    except (OSError, TypeError, ValueError) as exc:
        typer.echo(f"{ERROR_PREFIX}: invalid dialect file: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    destination = output or terse_output_path(input_path)
    try:
        lines = read_lines(input_path)
        result = TersePipeline(dialect).run(lines)
    except TerseError as exc:
        typer.echo(f"{ERROR_PREFIX}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    write_lines(destination, result.lines)
    if report:
        result.save(report)
        logger.info("Pass log saved to %s", report)

    typer.echo(
        f"{destination}: {result.output_line_count} lines "
        f"(from {result.input_line_count})"
    )


if __name__ == "__main__":
    app()
