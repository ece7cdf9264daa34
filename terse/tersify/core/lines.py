"""
Line Store: the fixed-length arena every pass operates on.

Each slot holds either the live text of a line or ``None`` (a
tombstone). Slots are addressed by their original position, so
indices returned by one pass stay valid for the next one. Deleted
slots are only filtered out once, when the result is emitted.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class LineStore:
    """
    Fixed-length sequence of optional-text lines.

    The length never changes, and a deleted slot never becomes live
    again. Live text may be rewritten in place.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._slots: list[str | None] = list(lines)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> str | None:
        return self._slots[index]

    def is_live(self, index: int) -> bool:
        return self._slots[index] is not None

    def delete(self, index: int) -> None:
        """Turn the slot at ``index`` into a tombstone."""
        self._slots[index] = None

    def set_text(self, index: int, text: str) -> None:
        """
        Rewrite the text of a live line.

        Raises:
            ValueError: If the slot has already been deleted.
        """
        if self._slots[index] is None:
            raise ValueError(f"Line {index} is deleted and cannot be rewritten")
        self._slots[index] = text

    def iter_live(self, start: int = 0) -> Iterator[tuple[int, str]]:
        """Yield ``(index, text)`` for each live line from ``start`` on.

        The store may be mutated while iterating; every slot is read
        when the iteration reaches it.
        """
        for index in range(start, len(self._slots)):
            text = self._slots[index]
            if text is not None:
                yield index, text

    def snapshot(self) -> tuple[str | None, ...]:
        return tuple(self._slots)

    def live_lines(self) -> list[str]:
        """Return the surviving lines in their original order."""
        return [text for text in self._slots if text is not None]

    @property
    def live_count(self) -> int:
        return sum(1 for text in self._slots if text is not None)
