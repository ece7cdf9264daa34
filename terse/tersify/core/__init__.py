"""Core data structures for tersify."""

from tersify.core.lines import LineStore

__all__ = [
    "LineStore",
]
