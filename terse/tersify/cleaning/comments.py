"""Comment stripping pass.

Comment-only lines disappear entirely; trailing comments are reduced
to the bare comment character so that the line break it suppressed
stays suppressed.
"""

from __future__ import annotations

from tersify.core.lines import LineStore
from tersify.dialect import Dialect


def strip_comments(store: LineStore, dialect: Dialect) -> None:
    """Delete comment-only lines and truncate trailing comments.

    Everything after the end-of-document line is treated as a comment
    and deleted.

    Args:
        store: Lines to clean (modified in-place).
        dialect: Marker vocabulary.
    """
    for index, line in store.iter_live():
        position = dialect.comment_position(line)
        if position is None:
            if dialect.ends_document(line):
                for rest in range(index + 1, len(store)):
                    store.delete(rest)
                break
            continue
        if position == 0 or line.lstrip().startswith(dialect.comment_char):
            store.delete(index)
        else:
            store.set_text(index, line[: position + 1])
