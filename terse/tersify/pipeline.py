"""Terse pipeline: runs every pass over one shared line store.

Passes run strictly in order, each to completion. Every pass is
recorded in a ``PassResult`` so reviewers can see how many lines each
step deleted or rewrote.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from tersify.cleaning.comments import strip_comments
from tersify.cleaning.examples import strip_examples
from tersify.cleaning.non_normative import strip_non_normative
from tersify.cleaning.whitespace import collapse_blank_lines, trim_trailing_whitespace
from tersify.core.lines import LineStore
from tersify.dialect import Dialect
from tersify.errors import TerseError
from tersify.io import emit
from tersify.reflow.engine import reflow

logger = logging.getLogger(__name__)

PassFunc = Callable[[LineStore, Dialect], None]


@dataclass
class PassResult:
    """Effect of one pass on the line store.

    Attributes:
        name: Pass name.
        deleted: Lines turned into tombstones by this pass.
        rewritten: Live lines whose text changed.
    """

    name: str
    deleted: int
    rewritten: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "deleted": self.deleted,
            "rewritten": self.rewritten,
        }

    @classmethod
    def compare(
        cls,
        name: str,
        before: tuple[str | None, ...],
        after: tuple[str | None, ...],
    ) -> PassResult:
        """Build a result from store snapshots taken around a pass."""
        deleted = 0
        rewritten = 0
        for old, new in zip(before, after):
            if old is None:
                continue
            if new is None:
                deleted += 1
            elif new != old:
                rewritten += 1
        return cls(name=name, deleted=deleted, rewritten=rewritten)


@dataclass
class PipelineResult:
    """Output of a pipeline run.

    Attributes:
        lines: Surviving lines, in order.
        input_line_count: Number of input lines.
        passes: One entry per executed pass.
        created_at: When the run finished.
    """

    lines: list[str]
    input_line_count: int
    passes: list[PassResult] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def output_line_count(self) -> int:
        return len(self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (without the output lines)."""
        return {
            "input_line_count": self.input_line_count,
            "output_line_count": self.output_line_count,
            "passes": [p.to_dict() for p in self.passes],
            "created_at": self.created_at.isoformat(),
        }

    def save(self, path: Path) -> None:
        """Save the pass log to a JSON file.

        Args:
            path: Destination file path.
        """
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


def _trim(store: LineStore, dialect: Dialect) -> None:
    trim_trailing_whitespace(store)


def _collapse(store: LineStore, dialect: Dialect) -> None:
    collapse_blank_lines(store)


DEFAULT_PASSES: list[tuple[str, PassFunc]] = [
    ("remove_comments", strip_comments),
    ("remove_examples", strip_examples),
    ("trim_trailing_whitespace", _trim),
    ("remove_non_normative", strip_non_normative),
    ("reflow", reflow),
    ("trim_trailing_whitespace", _trim),
    ("collapse_blank_lines", _collapse),
]


class TersePipeline:
    """Derives the terse form of a specification.

    Args:
        dialect: Marker vocabulary. Defaults to Dialect.default().
        passes: Ordered ``(name, pass)`` pairs. Defaults to the full
            terse pipeline.

    Example::

        result = TersePipeline().run(lines)
        print(f"{result.output_line_count} lines")
    """

    def __init__(
        self,
        dialect: Dialect | None = None,
        passes: list[tuple[str, PassFunc]] | None = None,
    ) -> None:
        self.dialect = dialect or Dialect.default()
        self._passes = passes if passes is not None else list(DEFAULT_PASSES)

    def run(self, lines: Iterable[str]) -> PipelineResult:
        """Run every pass and emit the surviving lines.

        Args:
            lines: Input lines without line terminators.

        Returns:
            PipelineResult with the output lines and the pass log.

        Raises:
            StructuralInconsistencyError: If the document violates the
                structural conventions of the dialect.
        """
        store = LineStore(lines)
        result = PipelineResult(lines=[], input_line_count=len(store))

        for name, run_pass in self._passes:
            before = store.snapshot()
            try:
                run_pass(store, self.dialect)
            except TerseError as exc:
                logger.error("Pass %s failed: %s", name, exc)
                raise
            outcome = PassResult.compare(name, before, store.snapshot())
            logger.debug(
                "Pass %s: %d deleted, %d rewritten",
                name,
                outcome.deleted,
                outcome.rewritten,
            )
            result.passes.append(outcome)

        result.lines = emit(store)
        logger.info(
            "Simplified %d lines to %d lines",
            result.input_line_count,
            result.output_line_count,
        )
        return result


def simplify(lines: Iterable[str], dialect: Dialect | None = None) -> list[str]:
    """Return the terse form of ``lines``."""
    return TersePipeline(dialect).run(lines).lines
