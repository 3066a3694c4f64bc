"""
reader.py - Rewindable line source over the dictionary text file.

The Gutenberg file (29765-8.txt) is ISO-8859-1, as stated in its header.
One handle is opened per reader and kept for the reader's lifetime;
rewind() seeks that handle back to the start instead of reopening it.

Usage:
    with CorpusReader("29765-8.txt") as reader:
        for line in reader:
            ...
        reader.rewind()
        first = reader.read_line()
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from webster.errors import CorpusClosedError

logger = logging.getLogger(__name__)

CORPUS_ENCODING = "latin-1"


class CorpusReader:
    """Sequential line reader with rewind-to-start."""

    def __init__(self, path: Union[str, Path], encoding: str = CORPUS_ENCODING):
        self.path = Path(path)
        self.encoding = encoding
        # Universal newlines: \r\n and \r arrive as \n
        self._file = open(self.path, "r", encoding=encoding)
        logger.debug(f"Opened corpus {self.path} ({encoding})")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def _check_open(self):
        if self._file.closed:
            raise CorpusClosedError(f"Corpus reader for {self.path} is closed")

    def rewind(self):
        """Move back to the first line, discarding any buffered read-ahead."""
        self._check_open()
        self._file.seek(0)

    def read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of file."""
        self._check_open()
        line = self._file.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def close(self):
        if not self._file.closed:
            self._file.close()
            logger.debug(f"Closed corpus {self.path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
