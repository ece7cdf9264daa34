"""
Paragraph and list reflow.

Joins every multi-line paragraph and every multi-line list item into
its first line (the anchor) and deletes the lines that contributed to
it. Code blocks and side-by-side layout spans inside lists keep their
line structure. Nested lists are handled by one recursive call per
nested list; indentation is never used to infer depth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tersify.core.lines import LineStore
from tersify.dialect import Dialect, WHITESPACE
from tersify.errors import StructuralInconsistencyError
from tersify.reflow.buffer import JoinBuffer


class ItemState(Enum):
    """States of one list scan."""

    SEEKING_ITEM = "seeking_item"
    COLLECTING_ITEM = "collecting_item"
    IN_LAYOUT_SPAN = "in_layout_span"
    IN_CODE_SPAN = "in_code_span"


@dataclass
class ListScan:
    """Scan state of a single list level.

    Attributes:
        state: Current state.
        buffer: Item being collected, if any.
        resume_state: State to return to when a code span closes.
    """

    state: ItemState = ItemState.SEEKING_ITEM
    buffer: JoinBuffer | None = None
    resume_state: ItemState = field(default=ItemState.SEEKING_ITEM)

    def start_item(self, buffer: JoinBuffer) -> None:
        self.buffer = buffer
        self.state = ItemState.COLLECTING_ITEM

    def finalize(self, store: LineStore) -> None:
        """Write the current item to its anchor and start seeking."""
        if self.buffer is not None:
            self.buffer.flush(store)
            self.buffer = None
        self.state = ItemState.SEEKING_ITEM

    def enter_code(self) -> None:
        self.resume_state = self.state
        self.state = ItemState.IN_CODE_SPAN

    def leave_code(self) -> None:
        self.state = self.resume_state


def _end_of_text() -> StructuralInconsistencyError:
    return StructuralInconsistencyError("reached end of text")


class ReflowEngine:
    """Joins paragraphs and list items of a line store in place.

    Args:
        store: Lines to reflow (modified in-place).
        dialect: Marker vocabulary.

    Example::

        ReflowEngine(store, Dialect.default()).run()
    """

    def __init__(self, store: LineStore, dialect: Dialect) -> None:
        self._store = store
        self._dialect = dialect

    def run(self) -> None:
        """Reflow the whole document.

        Front matter, up to and including the line that ends it, is
        left untouched.

        Raises:
            StructuralInconsistencyError: If a paragraph or list is
                not terminated, or a list has no items.
        """
        store = self._store
        dialect = self._dialect
        in_front_matter = True
        index = 0
        while index < len(store):
            line = store[index]
            if line is None:
                index += 1
            elif in_front_matter:
                if dialect.ends_front_matter(line):
                    in_front_matter = False
                index += 1
            elif dialect.starts_paragraph(line):
                seed = line[len(dialect.paragraph_start) :].strip(WHITESPACE)
                index = self.gather_paragraph(self._buffer(index, seed))
            elif dialect.starts_continuation(line):
                index = self.gather_paragraph(self._buffer(index, line.strip(WHITESPACE)))
            elif dialect.starts_list(line):
                index = self.gather_items(index)
            else:
                index += 1

    def _buffer(self, anchor: int, seed: str) -> JoinBuffer:
        return JoinBuffer.seeded(anchor, seed, join_char=self._dialect.comment_char)

    def gather_paragraph(self, buffer: JoinBuffer) -> int:
        """Join the lines following ``buffer.anchor`` into the anchor.

        Gathering stops at the first empty line or end-of-case line,
        which is left in place.

        Args:
            buffer: Buffer anchored at the paragraph's first line.

        Returns:
            Index of the terminating line.

        Raises:
            StructuralInconsistencyError: If no terminator is found.
        """
        store = self._store
        for index, line in store.iter_live(buffer.anchor + 1):
            if line == "" or self._dialect.ends_case(line):
                buffer.flush(store)
                return index
            buffer.append(line)
            store.delete(index)
        raise _end_of_text()

    def find_item(self, start: int) -> int:
        """Return the index of the first item line at or after ``start``.

        Raises:
            StructuralInconsistencyError: If a list end comes first or
                the document ends.
        """
        for index, line in self._store.iter_live(start):
            trimmed = line.lstrip()
            if self._dialect.ends_list(trimmed):
                raise StructuralInconsistencyError(
                    f"no items found (line {index} seems to be malformed)",
                    line_index=index,
                )
            if self._dialect.is_item(trimmed):
                return index
        raise _end_of_text()

    def gather_items(self, list_index: int) -> int:
        """Join the items of the list that begins at ``list_index``.

        Args:
            list_index: Index of the list begin line.

        Returns:
            Index of the first line after the list end marker.

        Raises:
            StructuralInconsistencyError: If the list is empty or not
                closed before the end of the document.
        """
        store = self._store
        dialect = self._dialect
        scan = ListScan()
        first = self.find_item(list_index + 1)
        scan.start_item(self._item_buffer(first))

        index = first + 1
        while index < len(store):
            line = store[index]
            if line is None:
                index += 1
                continue

            if scan.state is ItemState.IN_LAYOUT_SPAN:
                if dialect.ends_layout(line):
                    scan.finalize(store)
                index += 1
                continue
            if scan.state is ItemState.IN_CODE_SPAN:
                if dialect.ends_code(line.lstrip()):
                    scan.leave_code()
                index += 1
                continue

            if dialect.starts_layout(line):
                if dialect.ends_layout(line):
                    scan.finalize(store)
                else:
                    scan.state = ItemState.IN_LAYOUT_SPAN
                index += 1
                continue

            trimmed = line.lstrip()
            if dialect.starts_code(trimmed):
                scan.enter_code()
                index += 1
            elif dialect.starts_list(trimmed):
                scan.finalize(store)
                index = self.gather_items(index)
            elif dialect.ends_list(trimmed):
                scan.finalize(store)
                return index + 1
            elif dialect.is_item(trimmed):
                scan.finalize(store)
                scan.start_item(self._item_buffer(index))
                index += 1
            elif scan.state is ItemState.SEEKING_ITEM:
                # Text after a nested list or layout span opens a new anchor.
                if line.strip():
                    scan.start_item(self._item_buffer(index))
                index += 1
            else:
                scan.buffer.append(line)  # type: ignore[union-attr]
                store.delete(index)
                index += 1
        raise _end_of_text()

    def _item_buffer(self, index: int) -> JoinBuffer:
        text = self._store[index] or ""
        return self._buffer(index, text.rstrip(WHITESPACE))


def reflow(store: LineStore, dialect: Dialect) -> None:
    """Join paragraphs and list items of ``store`` in place."""
    ReflowEngine(store, dialect).run()
