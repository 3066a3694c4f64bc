"""
entry.py - A dictionary entry extracted from the corpus.

An entry is a headword line plus one or more description blocks. Each
block is the text of one occurrence of the headword: the headword line
itself followed by its body lines, newlines embedded.

Naming:
  key          the raw headword line as read ("HOME", "FOO; BAR")
  alias_tokens the key split on ';' and stripped
  display_key  alias_tokens joined with "; " (HTML anchor / id form)
"""

from typing import Dict, List, Sequence, Tuple

from webster.errors import EntrySealedError
from webster.headword import ALIAS_JOINER


def _physical_lines(block: str) -> List[str]:
    """Split a block into lines; a trailing newline does not start a new line."""
    if not block:
        return []
    lines = block.split("\n")
    if block.endswith("\n"):
        lines.pop()
    return lines


class Entry:
    """Headword line + description blocks. Sealed once handed to the caller."""

    def __init__(self, key: str, alias_tokens: Sequence[str]):
        self.key = key
        self.alias_tokens: Tuple[str, ...] = tuple(alias_tokens)
        self.display_key = ALIAS_JOINER.join(self.alias_tokens)
        self._blocks: List[str] = []
        self._sealed = False

    def add_description(self, block: str):
        """Append one closed description block."""
        if self._sealed:
            raise EntrySealedError(f"Entry {self.key!r} is sealed")
        self._blocks.append(block)

    def seal(self) -> "Entry":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def description_blocks(self) -> Tuple[str, ...]:
        return tuple(self._blocks)

    @property
    def alias_count(self) -> int:
        return len(self.alias_tokens)

    def description(self) -> str:
        """
        Plain view: all blocks concatenated in order.

        No separators are added and trailing blank lines are kept as read.
        """
        return "".join(self._blocks)

    def description_html(self) -> str:
        """
        Block-structured view for HTML pages.

        An anchor named after display_key, then every physical line of
        every block terminated by <br>, the first line of each block in
        bold. Text is emitted verbatim (no escaping).
        """
        parts = [f'<a id="{self.display_key}"></a>\n']
        for block in self._blocks:
            for index, line in enumerate(_physical_lines(block)):
                if index == 0:
                    parts.append(f"<b>{line}</b><br>\n")
                else:
                    parts.append(f"{line}<br>\n")
        return "".join(parts)

    def to_dict(self) -> Dict:
        """JSON-ready mapping used by the JSONL export."""
        return {
            "key": self.key,
            "display_key": self.display_key,
            "aliases": list(self.alias_tokens),
            "descriptions": list(self._blocks),
        }

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return (
            self.key == other.key
            and self.alias_tokens == other.alias_tokens
            and self._blocks == other._blocks
        )

    def __repr__(self):
        return f"Entry(key={self.key!r}, blocks={len(self._blocks)})"
