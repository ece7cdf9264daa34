"""Fatal error types raised by the terse pipeline.

Both concrete errors are unrecoverable: the pipeline stops and no
output is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class TerseError(Exception):
    """Base exception for terse pipeline errors."""

    def __init__(
        self,
        message: str,
        source_path: Path | None = None,
        line_index: int | None = None,
    ):
        self.message = message
        self.source_path = source_path
        self.line_index = line_index
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "type": type(self).__name__,
            "source_path": str(self.source_path) if self.source_path else None,
            "line_index": self.line_index,
        }


class MissingInputError(TerseError):
    """The input document does not exist."""


class StructuralInconsistencyError(TerseError):
    """A gather reached the end of the document, or a list had no items."""


class UnreadableInputError(TerseError):
    """The input document is not valid UTF-8 text."""
