"""Paragraph and list item reflow."""

from tersify.reflow.buffer import JoinBuffer
from tersify.reflow.engine import ItemState, ListScan, ReflowEngine, reflow

__all__ = [
    "ItemState",
    "JoinBuffer",
    "ListScan",
    "ReflowEngine",
    "reflow",
]
