"""Removal of illustrative code blocks.

Every example block is described by commentary, so none of it is
normative.
"""

from __future__ import annotations

from tersify.core.lines import LineStore
from tersify.dialect import Dialect


def strip_examples(store: LineStore, dialect: Dialect) -> None:
    """Delete every example block, begin and end markers included.

    Blocks do not nest: the first end marker closes the block.

    Args:
        store: Lines to clean (modified in-place).
        dialect: Marker vocabulary.
    """
    in_example = False
    for index, line in store.iter_live():
        if dialect.starts_example(line):
            in_example = True
        if in_example:
            store.delete(index)
            if dialect.ends_example(line):
                in_example = False
