"""Terse variants of LaTeX specifications.

Removes comments, example code, commentary and rationale from a
specification and joins every paragraph and list item onto a single
line, so the result can be searched with line-based tools.
"""

__version__ = "0.1.0"
