"""Fragment joining for paragraphs and list items."""

from __future__ import annotations

from tersify.core.lines import LineStore


class JoinBuffer:
    """Accumulates the text of one paragraph or list item.

    Fragments are left-trimmed and separated by a single space, except
    after a raw line that ended with the join character: that character
    is dropped and the next fragment is glued on directly.

    Args:
        anchor: Index of the line that receives the joined text.
        text: Initial content.
        insert_space: Whether the first appended fragment is preceded
            by a space.
        join_char: Line-final character that suppresses the space.
    """

    def __init__(
        self,
        anchor: int,
        text: str = "",
        insert_space: bool = True,
        join_char: str = "%",
    ) -> None:
        self.anchor = anchor
        self._parts: list[str] = [text]
        self._insert_space = insert_space
        self._join_char = join_char

    @classmethod
    def seeded(cls, anchor: int, text: str, join_char: str = "%") -> JoinBuffer:
        """Start a buffer from the anchor's own text.

        The anchor follows the same rule as every appended line: a final
        join character is dropped and the first fragment is glued on
        without a space. An empty seed takes no space either.

        Args:
            anchor: Index of the anchor line.
            text: Trimmed anchor text.
            join_char: Line-final character that suppresses the space.
        """
        if text.endswith(join_char):
            return cls(anchor, text[:-1], insert_space=False, join_char=join_char)
        return cls(anchor, text, insert_space=bool(text), join_char=join_char)

    def append(self, raw: str) -> None:
        """Add one source line.

        Args:
            raw: The line as stored, before trimming.
        """
        if raw.endswith(self._join_char):
            fragment = raw[:-1].lstrip()
            next_space = False
        else:
            fragment = raw.lstrip()
            next_space = True
        if fragment:
            if self._insert_space:
                self._parts.append(" ")
            self._parts.append(fragment)
        self._insert_space = next_space

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def flush(self, store: LineStore) -> None:
        """Write the joined text into the anchor line."""
        store.set_text(self.anchor, self.text)
