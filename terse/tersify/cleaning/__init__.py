"""Line-level cleaning passes.

Comment stripping, example block removal, non-normative block
removal and whitespace normalization. Every pass works on a
``LineStore`` in-place and only deletes or rewrites live lines.
"""

from tersify.cleaning.comments import strip_comments
from tersify.cleaning.examples import strip_examples
from tersify.cleaning.non_normative import strip_non_normative
from tersify.cleaning.whitespace import collapse_blank_lines, trim_trailing_whitespace

__all__ = [
    "collapse_blank_lines",
    "strip_comments",
    "strip_examples",
    "strip_non_normative",
    "trim_trailing_whitespace",
]
