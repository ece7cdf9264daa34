"""Reading the specification and writing its terse form.

The whole input is read before any pass runs; output is written only
after the pipeline has completed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from tersify.core.lines import LineStore
from tersify.errors import MissingInputError, UnreadableInputError

logger = logging.getLogger(__name__)

DEFAULT_SPECIFICATION = "dartLangSpec.tex"
TERSE_SUFFIX = "-terse"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on CR, LF and CRLF only.

    A final line terminator does not produce a trailing empty line.
    Other separators (form feeds, Unicode line separators) stay inside
    their line.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def terse_output_path(path: Path) -> Path:
    """Return the conventional output path for ``path``.

    ``dartLangSpec.tex`` becomes ``dartLangSpec-terse.tex`` in the same
    directory.
    """
    return path.with_name(f"{path.stem}{TERSE_SUFFIX}{path.suffix}")


def read_lines(path: Path) -> list[str]:
    """Read a document as a list of lines without terminators.

    Args:
        path: Document to read.

    Returns:
        The document's lines.

    Raises:
        MissingInputError: If the file does not exist.
        UnreadableInputError: If the file is not valid UTF-8.
    """
    if not path.is_file():
        raise MissingInputError("Specification not found", source_path=path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            lines = split_lines(f.read())
    except UnicodeDecodeError as e:
        raise UnreadableInputError(
            "Specification is not valid UTF-8", source_path=path
        ) from e
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def emit(store: LineStore) -> list[str]:
    """Drop tombstones, keeping live lines in their original order."""
    return store.live_lines()


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """Write each line followed by a newline.

    Args:
        path: Destination file.
        lines: Lines to write, in order.

    Returns:
        Number of lines written.
    """
    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")
            count += 1
    logger.debug("Wrote %d lines to %s", count, path)
    return count
