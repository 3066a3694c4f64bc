"""
export.py - Write extracted entries to disk.

- write_headword_list: plain text, one headword line per line, in the
  corpus encoding (the check's Webster.txt)
- write_jsonl: one JSON object per entry (orjson)
- EntryWriter: streams both while the dictionary is walked
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import orjson

from webster.entry import Entry
from webster.reader import CORPUS_ENCODING

logger = logging.getLogger(__name__)


class EntryWriter:
    """Streams headwords and/or entries to files while the dictionary is walked."""

    def __init__(self, headword_path: Optional[Path] = None, jsonl_path: Optional[Path] = None,
                 encoding: str = CORPUS_ENCODING):
        self.headword_path = headword_path
        self.jsonl_path = jsonl_path
        self.encoding = encoding
        self.written = 0
        self._headwords = None
        self._jsonl = None

    def __enter__(self):
        if self.headword_path:
            self.headword_path.parent.mkdir(parents=True, exist_ok=True)
            self._headwords = open(self.headword_path, 'w', encoding=self.encoding, newline='\n')
        if self.jsonl_path:
            self.jsonl_path.parent.mkdir(parents=True, exist_ok=True)
            self._jsonl = open(self.jsonl_path, 'wb')
        return self

    def write(self, entry: Entry):
        if self._headwords:
            self._headwords.write(f"{entry.key}\n")
        if self._jsonl:
            # orjson.dumps returns bytes
            self._jsonl.write(orjson.dumps(entry.to_dict()) + b'\n')
        self.written += 1

    def __exit__(self, exc_type, exc_val, exc_tb):
        for handle in (self._headwords, self._jsonl):
            if handle:
                handle.close()
        if self.headword_path:
            logger.info(f"Wrote {self.written:,} headwords to {self.headword_path}")
        if self.jsonl_path:
            logger.info(f"Wrote {self.written:,} entries to {self.jsonl_path}")
        return False


def write_headword_list(keys: Iterable[str], output_path: Path,
                        encoding: str = CORPUS_ENCODING) -> int:
    """Write headword lines, one per line."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(output_path, 'w', encoding=encoding, newline='\n') as f:
        for key in keys:
            f.write(f"{key}\n")
            count += 1
    logger.info(f"Wrote {count:,} headwords to {output_path}")
    return count


def write_jsonl(entries: Iterable[Entry], output_path: Path) -> int:
    """Write entries to JSONL using orjson."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(output_path, 'wb') as f:
        for entry in entries:
            f.write(orjson.dumps(entry.to_dict()) + b'\n')
            count += 1
    logger.info(f"Wrote {count:,} entries to {output_path}")
    return count
