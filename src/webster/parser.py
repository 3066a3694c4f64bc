"""
parser.py - Extract dictionary entries from the Gutenberg Webster text.

EntryParser.find_entry() supports two usage patterns:

1) Lookup mode: find_entry("HOME") returns the entry whose headword line
   is exactly "HOME".
2) Sequential mode: find_entry() returns the entry at the parser's cursor
   and moves the cursor to the next headword line, so repeated calls walk
   the dictionary from A to ZYTHUM.

Every call rewinds the reader and scans from the top of the file. This is
O(n) per lookup and per step; it keeps the reader free of state between
calls and is fast enough for a handful of lookups per run.

The cursor is moved by any scan that finds its entry, lookups included:
after find_entry("HOME") a sequential call continues with the headword
that follows HOME in the file.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from webster.entry import Entry
from webster.headword import classify
from webster.reader import CorpusReader

logger = logging.getLogger(__name__)

FIRST_HEADWORD = "A"


@dataclass(frozen=True)
class CorpusMarkers:
    """Fixed text of the corpus that ends a scan."""

    # Gutenberg license footer follows the last entry
    footer: str
    # Last headword of the dictionary and text on its final line
    final_headword: str
    final_tail: str


GUTENBERG_WEBSTER = CorpusMarkers(
    footer="End of Project Gutenberg's Webster's Unabridged Dictionary, by Various",
    final_headword="ZYTHUM",
    final_tail="wheat. [Written also zythem.]",
)


class EntryParser:
    """Entry extractor over one CorpusReader, with a sequential cursor."""

    def __init__(
        self,
        reader: CorpusReader,
        markers: CorpusMarkers = GUTENBERG_WEBSTER,
        first_headword: str = FIRST_HEADWORD,
    ):
        self.reader = reader
        self.markers = markers
        self.first_headword = first_headword
        # Next headword line to find in sequential mode (None: not started)
        self._cursor: Optional[str] = None
        self._exhausted = False

    @property
    def cursor(self) -> Optional[str]:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        """True once a scan consumed the last entry of the corpus."""
        return self._exhausted

    def reset(self):
        """Forget the cursor; the next sequential call starts at the first headword."""
        self._cursor = None
        self._exhausted = False

    def find_entry(self, key: Optional[str] = None) -> Optional[Entry]:
        """
        Return the entry for key (lookup mode) or for the cursor (sequential mode).

        key must be the full headword line, e.g. "HOME" or "FOO; BAR"; the
        match is exact and case-sensitive. Returns None when the key is not
        in the corpus, or in sequential mode once the walk is finished.
        """
        if key is None:
            if self._exhausted:
                logger.debug("Sequential walk finished; no more entries")
                return None
            if self._cursor is None:
                self._cursor = self.first_headword
            target = self._cursor
        else:
            target = key

        entry = self._scan(target)
        if entry is None:
            logger.debug(f"Headword line {target!r} not found")
        return entry

    def iter_entries(self) -> Iterator[Entry]:
        """Walk the whole dictionary in sequential mode from the first headword."""
        self.reset()
        while True:
            entry = self.find_entry()
            if entry is None:
                return
            yield entry

    def _scan(self, target: str) -> Optional[Entry]:
        self.reader.rewind()

        for line in self.reader:
            if self.markers.footer in line:
                return None

            headword = classify(line)
            if headword is not None and line == target:
                entry = Entry(line, headword.tokens)
                return self._collect(entry, target, line)

        return None

    def _collect(self, entry: Entry, target: str, first_line: str) -> Entry:
        """Accumulate description blocks for a matched headword and seal the entry."""
        block = first_line

        for line in self.reader:
            if self.markers.footer in line:
                break

            block += "\n"

            if classify(line) is not None:
                if line == target:
                    # Same headword repeated: one entry, another block
                    entry.add_description(block)
                    block = ""
                else:
                    entry.add_description(block)
                    self._cursor = line
                    self._exhausted = False
                    return entry.seal()

            block += line

            if entry.key == self.markers.final_headword and self.markers.final_tail in line:
                block += "\n\n"
                break

        # End of corpus: footer, final tail or end of file
        entry.add_description(block)
        self._cursor = None
        self._exhausted = True
        logger.debug(f"Reached end of corpus after {entry.key!r}")
        return entry.seal()

    def close(self):
        self.reader.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
