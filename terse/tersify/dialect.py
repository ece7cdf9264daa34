"""Marker vocabulary of the specification dialect.

The pipeline does not parse LaTeX. It recognizes a fixed set of
structural markers by prefix or substring tests on single lines. All
marker tokens live in a ``Dialect`` so they can be inspected and
overridden from a JSON file.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field, fields
from functools import cached_property
from pathlib import Path
from typing import Any

# Space-like code points stripped from line ends.
WHITESPACE = (
    "\t\n\x0b\x0c\r "
    "\u00a0"
    "\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f"
    "\u205f"
    "\u3000"
    "\ufeff"
)

# Dialect fields holding several tokens.
_SEQUENCE_KEYS = ("list_begins", "list_ends", "non_normative_tags")


def indentation(text: str) -> int:
    """Return the number of leading whitespace characters in ``text``.

    Args:
        text: Line to measure.

    Returns:
        Width of the leading whitespace run (``len(text)`` if blank).
    """
    return len(text) - len(text.lstrip(WHITESPACE))


@dataclass
class Dialect:
    """Structural markers of the source document.

    Attributes:
        comment_char: Starts a comment; also the join-without-space
            character at the end of a line.
        escape_char: Escapes a comment character.
        front_matter_end: Line prefix that ends the front matter.
        end_document: Line prefix after which everything is discarded.
        paragraph_start: Zero-argument paragraph command.
        continuation: Continued-paragraph command.
        end_case: Explicit paragraph terminator.
        list_begins: Prefixes opening an itemized list.
        list_ends: Prefixes closing an itemized list.
        item: Prefix of a list item.
        example_begin: Prefix opening an illustrative code block.
        example_end: Prefix closing an illustrative code block.
        code_begin: Prefix opening a verbatim normative code block.
        code_end: Prefix closing a verbatim normative code block.
        layout_begin: Substring opening a side-by-side layout span.
        layout_end: Substring closing a side-by-side layout span.
        blind_symbol: Prefix of a blind symbol definition.
        non_normative_tags: Command names of commentary blocks.
    """

    comment_char: str = "%"
    escape_char: str = "\\"
    front_matter_end: str = r"\begin{document}"
    end_document: str = r"\end{document}"
    paragraph_start: str = r"\LMHash{}"
    continuation: str = r"\noindent"
    end_case: str = r"\EndCase"
    list_begins: tuple[str, ...] = (r"\begin{itemize}", r"\begin{enumerate}")
    list_ends: tuple[str, ...] = (r"\end{itemize}", r"\end{enumerate}")
    item: str = r"\item"
    example_begin: str = r"\begin{dartCode}"
    example_end: str = r"\end{dartCode}"
    code_begin: str = r"\begin{normativeDartCode}"
    code_end: str = r"\end{normativeDartCode}"
    layout_begin: str = r"\begin{minipage}"
    layout_end: str = r"\end{minipage}"
    blind_symbol: str = r"\BlindDefineSymbol{"
    non_normative_tags: tuple[str, ...] = field(
        default_factory=lambda: ("commentary", "rationale")
    )

    def __post_init__(self) -> None:
        if len(self.comment_char) != 1:
            raise ValueError("comment_char must be a single character")
        self.list_begins = tuple(self.list_begins)
        self.list_ends = tuple(self.list_ends)
        self.non_normative_tags = tuple(self.non_normative_tags)

    # --- Line predicates ---

    def ends_front_matter(self, line: str) -> bool:
        return line.startswith(self.front_matter_end)

    def ends_document(self, line: str) -> bool:
        return line.startswith(self.end_document)

    def starts_paragraph(self, line: str) -> bool:
        return line.startswith(self.paragraph_start)

    def starts_continuation(self, line: str) -> bool:
        return line.startswith(self.continuation)

    def ends_case(self, line: str) -> bool:
        return line.startswith(self.end_case)

    def starts_list(self, line: str) -> bool:
        return line.startswith(self.list_begins)

    def ends_list(self, line: str) -> bool:
        return line.startswith(self.list_ends)

    def is_item(self, line: str) -> bool:
        return line.startswith(self.item)

    def starts_example(self, line: str) -> bool:
        return line.startswith(self.example_begin)

    def ends_example(self, line: str) -> bool:
        return line.startswith(self.example_end)

    def starts_code(self, line: str) -> bool:
        return line.startswith(self.code_begin)

    def ends_code(self, line: str) -> bool:
        return line.startswith(self.code_end)

    def starts_layout(self, line: str) -> bool:
        return self.layout_begin in line

    def ends_layout(self, line: str) -> bool:
        return self.layout_end in line

    def is_blind_symbol(self, line: str) -> bool:
        return line.startswith(self.blind_symbol)

    def comment_position(self, line: str) -> int | None:
        """Return the index of the first unescaped comment character.

        A comment character counts when it is at column 0 or follows a
        character that is neither an escape nor another comment
        character.

        Args:
            line: Line to search.

        Returns:
            Index of the comment character, or None.
        """
        match = self.comment_re.search(line)
        if match is None:
            return None
        return match.end() - 1

    # --- Compiled patterns ---

    @cached_property
    def comment_re(self) -> re.Pattern[str]:
        char = re.escape(self.comment_char)
        escape = re.escape(self.escape_char)
        return re.compile(rf"^{char}|[^{char}{escape}]{char}")

    @cached_property
    def non_normative_open_re(self) -> re.Pattern[str]:
        tags = "|".join(re.escape(t) for t in self.non_normative_tags)
        return re.compile(rf"^ *\(?\\(?:{tags})\{{")

    @cached_property
    def one_line_re(self) -> re.Pattern[str]:
        return re.compile(r"\\[a-zA-Z]*\{.*\}")

    @cached_property
    def parenthesized_one_line_re(self) -> re.Pattern[str]:
        return re.compile(r"\(\\[a-zA-Z]*\{.*\}\)")

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data = asdict(self)
        for key in _SEQUENCE_KEYS:
            data[key] = list(data[key])
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dialect:
        """Deserialize from dictionary, keeping defaults for missing keys.

        Raises:
            ValueError: On unknown keys or values of the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("Dialect must be a mapping of marker names to tokens")
        known = {f.name for f in fields(cls)}
        unknown = {str(key) for key in data} - known
        if unknown:
            raise ValueError(f"Unknown dialect keys: {', '.join(sorted(unknown))}")
        for key, value in data.items():
            if key in _SEQUENCE_KEYS:
                if not isinstance(value, (list, tuple)) or not all(
                    isinstance(item, str) for item in value
                ):
                    raise ValueError(f"Dialect key {key!r} must be a list of strings")
            elif not isinstance(value, str):
                raise ValueError(f"Dialect key {key!r} must be a string")
        return cls(**data)

    @classmethod
    def load(cls, path: Path) -> Dialect:
        """Load a dialect override from a JSON file.

        Args:
            path: JSON file with a subset of the dialect keys.

        Returns:
            Dialect with the overrides applied.
        """
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def default(cls) -> Dialect:
        """Create the dialect of the Dart language specification."""
        return cls()
