"""Whitespace normalization passes."""

from __future__ import annotations

from tersify.core.lines import LineStore
from tersify.dialect import WHITESPACE


def trim_trailing_whitespace(store: LineStore) -> None:
    """Strip trailing space-like characters from every live line.

    Args:
        store: Lines to clean (modified in-place).
    """
    for index, line in store.iter_live():
        trimmed = line.rstrip(WHITESPACE)
        if trimmed != line:
            store.set_text(index, trimmed)


def collapse_blank_lines(store: LineStore) -> None:
    """Reduce every run of empty lines to a single empty line.

    Args:
        store: Lines to clean (modified in-place).
    """
    previous_blank = False
    for index, line in store.iter_live():
        if line:
            previous_blank = False
        elif previous_blank:
            store.delete(index)
        else:
            previous_blank = True
