"""
headword.py - Decide whether a corpus line is a dictionary headword line.

Headwords in the Gutenberg Webster text stand alone on their own line in
capitals, e.g.

    HOME
    COOPERATE; CO-OPERATE

Anything with lowercase letters, digits or sentence punctuation is body
text. This is a heuristic over raw text, not a grammar: a capitalised
line of body text that happens to avoid those characters is accepted.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Characters that never appear on a headword line
EXCLUDED_CHARS = frozenset(".()[]+,")

ALIAS_SEPARATOR = ";"
ALIAS_JOINER = "; "


@dataclass(frozen=True)
class Headword:
    """A line accepted as a headword, with its alias tokens."""

    line: str
    tokens: Tuple[str, ...]

    @property
    def display(self) -> str:
        return ALIAS_JOINER.join(self.tokens)


def split_aliases(text: str) -> Tuple[str, ...]:
    """Split a headword line on ';' and strip each piece (empty pieces kept)."""
    return tuple(piece.strip() for piece in text.split(ALIAS_SEPARATOR))


def classify(line: Optional[str]) -> Optional[Headword]:
    """
    Classify a line.

    Returns None for body text, or a Headword carrying the line's alias
    tokens when the line is:
      - non-empty
      - free of lowercase letters, numeric characters and . ( ) [ ] + ,
      - not "--" and not starting with "--"
    """
    if not line:
        return None

    for c in line:
        if c.islower() or c.isnumeric() or c in EXCLUDED_CHARS:
            return None

    if line == "--" or line.startswith("--"):
        return None

    return Headword(line, split_aliases(line))


def is_headword(line: Optional[str]) -> bool:
    return classify(line) is not None
