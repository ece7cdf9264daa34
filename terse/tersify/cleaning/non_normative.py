"""Removal of commentary, rationale and blind symbol definitions.

Brace structure is not balanced. A one-line block is found with a
greedy match up to the last closing brace on the line; a multi-line
block is assumed to end at the first later line that has a closing
brace at exactly the indentation of the opening line.
"""

from __future__ import annotations

import re

from tersify.core.lines import LineStore
from tersify.dialect import Dialect, WHITESPACE, indentation


def _closes_block(line: str, indent: int) -> bool:
    head = line[:indent]
    return (
        len(head) == indent
        and not head.strip(WHITESPACE)
        and line[indent : indent + 1] == "}"
    )


def _remove_span(store: LineStore, index: int, line: str, match: re.Match[str]) -> None:
    if match.start() == 0 and match.end() == len(line):
        store.delete(index)
    else:
        store.set_text(index, line[: match.start()] + line[match.end() :])


def strip_non_normative(store: LineStore, dialect: Dialect) -> None:
    """Delete or splice out all non-normative elements.

    Args:
        store: Lines to clean (modified in-place).
        dialect: Marker vocabulary.
    """
    length = len(store)
    index = 0
    while index < length:
        line = store[index]
        if line is None:
            index += 1
            continue
        if dialect.is_blind_symbol(line):
            store.delete(index)
            index += 1
            continue
        if dialect.non_normative_open_re.match(line) is None:
            index += 1
            continue

        match = dialect.parenthesized_one_line_re.search(line)
        if match is None:
            match = dialect.one_line_re.search(line)
        if match is not None:
            _remove_span(store, index, line, match)
            index += 1
            continue

        # Multi-line block: delete through the matching closing brace.
        indent = indentation(line)
        store.delete(index)
        index += 1
        while index < length:
            current = store[index]
            store.delete(index)
            index += 1
            if current is not None and _closes_block(current, indent):
                break
