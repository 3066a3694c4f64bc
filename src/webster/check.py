"""
check.py - Walk the whole dictionary and check its integrity.

Sequentially parses every entry (EntryParser in sequential mode, from A
to the final headword) and checks that:
  - the raw headword line equals its joined alias form (key == display_key)
  - no headword line occurs twice in the walk

The walk stops at the first failure. Optionally every headword is written
to a plain list (Webster.txt) and every entry to JSONL while walking.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from webster.entry import Entry
from webster.errors import IntegrityError
from webster.export import EntryWriter
from webster.parser import EntryParser
from webster.progress import WalkProgress

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    ok: bool
    count: int
    violation: Optional[IntegrityError] = None
    max_aliases: int = 0


def iter_validated(entries: Iterable[Entry]) -> Iterator[Entry]:
    """
    Yield entries, raising IntegrityError on the first inconsistent one.

    The offending entry is not yielded.
    """
    seen = set()
    for entry in entries:
        if entry.key != entry.display_key:
            raise IntegrityError(entry.key, "mismatch", entry.display_key)
        if entry.key in seen:
            raise IntegrityError(entry.key, "duplicate", entry.display_key)
        seen.add(entry.key)
        yield entry


def _walk(parser: EntryParser) -> Iterator[Entry]:
    final_headword = parser.markers.final_headword
    for entry in parser.iter_entries():
        yield entry
        if entry.key == final_headword:
            return


def check_dictionary(
    parser: EntryParser,
    headword_list: Optional[Path] = None,
    jsonl_path: Optional[Path] = None,
    show_progress: bool = True,
) -> CheckResult:
    """
    Run the integrity check over the whole dictionary.

    Resets the parser's cursor first, so any earlier lookups do not affect
    where the walk starts.
    """
    logger.info(f"Checking dictionary {parser.reader.path}")

    count = 0
    max_aliases = 0
    violation = None

    writer = EntryWriter(headword_list, jsonl_path, encoding=parser.reader.encoding)
    with writer, WalkProgress("Checking dictionary", enabled=show_progress) as progress:
        try:
            for entry in iter_validated(_walk(parser)):
                writer.write(entry)
                count += 1
                max_aliases = max(max_aliases, entry.alias_count)
                progress.advance(entry.key)
        except IntegrityError as e:
            violation = e

    if violation is not None:
        logger.error(f"Dictionary not OK: {violation} (after {count:,} words)")
        return CheckResult(ok=False, count=count, violation=violation, max_aliases=max_aliases)

    logger.info(f"{count:,} words found")
    logger.info("Dictionary OK")
    return CheckResult(ok=True, count=count, max_aliases=max_aliases)
