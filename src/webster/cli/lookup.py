#!/usr/bin/env python3
"""
webster - Look up words in Gutenberg's Webster's Unabridged Dictionary.

Prints the entries for the given words, writes them to an HTML page, or
walks the whole dictionary to check it.

Usage:
    webster WORD [WORD ...] [options]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from webster.check import check_dictionary
from webster.config import Settings, load_settings
from webster.entry import Entry
from webster.errors import ConfigError
from webster.parser import EntryParser
from webster.reader import CorpusReader
from webster.render import ConsoleRenderer, write_html_page

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def read_words_file(path: Path, encoding: str) -> List[str]:
    """One lookup word per line."""
    with open(path, 'r', encoding=encoding) as f:
        return [line.rstrip('\n') for line in f]


def find_entries(parser: EntryParser, words: List[str]) -> List[Entry]:
    """Look up each word (upper-cased) and return the entries found, in order."""
    found = []
    for word in words:
        entry = parser.find_entry(word.upper())
        if entry is None:
            logger.info(f"No entry for '{word}'")
            continue
        found.append(entry)
    return found


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='webster',
        description="Look up words in Gutenberg's Webster's Unabridged Dictionary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print entries to the console
  webster home honor

  # Write entries to words.html with a jump-link index
  webster home honor --html

  # Read the words from words.txt
  webster --from-file --html

  # Read the words from another file
  webster --from-file --words-file mywords.txt

  # Check the whole dictionary and write Webster.txt
  webster --check
        """
    )

    parser.add_argument('words', nargs='*', help='Words to look up (case-insensitive)')
    parser.add_argument('-c', '--check', action='store_true',
                        help='Check the whole dictionary and write the headword list')
    parser.add_argument('-w', '--html', action='store_true',
                        help='Write the entries to an HTML page instead of the console')
    parser.add_argument('-f', '--from-file', action='store_true',
                        help='Read lookup words from the words file instead of the arguments')
    parser.add_argument('--words-file', type=Path,
                        help='Words file read by --from-file (default: words.txt)')
    parser.add_argument('--corpus', type=Path,
                        help='Dictionary text file (default: 29765-8.txt or $WEBSTER_CORPUS)')
    parser.add_argument('--config', type=Path, help='YAML settings file')
    parser.add_argument('--headwords', type=Path,
                        help='Headword list written by --check (default: Webster.txt)')
    parser.add_argument('--jsonl', type=Path, help='Also write every entry to JSONL during --check')
    parser.add_argument('-o', '--output', type=Path, help='HTML output file (default: words.html)')
    parser.add_argument('-q', '--quiet', action='store_true', help='No live progress panel')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.corpus:
        settings.corpus = args.corpus
    if args.headwords:
        settings.headword_list = args.headwords
    if args.words_file:
        settings.words_file = args.words_file
    if args.output:
        settings.html = {**settings.html, 'output': str(args.output)}
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the webster CLI."""
    arg_parser = build_parser()
    args = arg_parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.words and not args.check and not args.from_file:
        arg_parser.print_help()
        return 0

    try:
        settings = apply_overrides(load_settings(args.config), args)
    except (ConfigError, OSError) as e:
        logger.error(f"Cannot load settings: {e}")
        return 1

    try:
        reader = CorpusReader(settings.corpus, settings.encoding)
    except OSError as e:
        logger.error(f"Cannot open dictionary {settings.corpus}: {e}")
        logger.info("Set --corpus or $WEBSTER_CORPUS to the location of 29765-8.txt")
        return 1

    with EntryParser(reader) as parser:
        if args.check:
            result = check_dictionary(
                parser,
                headword_list=settings.headword_list,
                jsonl_path=args.jsonl,
                show_progress=not args.quiet,
            )
            if not result.ok:
                return 1

        if args.from_file:
            # Positional words are ignored when reading from a file
            try:
                words = read_words_file(settings.words_file, settings.encoding)
            except OSError as e:
                logger.error(f"Cannot read words file {settings.words_file}: {e}")
                return 1
        else:
            words = args.words

        if not words:
            return 0

        entries = find_entries(parser, words)

        if args.html:
            write_html_page(entries, settings.html_output, settings)
        else:
            renderer = ConsoleRenderer(settings)
            for entry in entries:
                renderer.render(entry)

    return 0


if __name__ == '__main__':
    sys.exit(main())
