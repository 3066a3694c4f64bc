"""Tests for EntryParser: lookup mode, sequential mode and end-of-corpus handling.

The miniature corpus in conftest.py mirrors the layout of the Gutenberg file.
"""

import pytest

from webster.parser import FIRST_HEADWORD, GUTENBERG_WEBSTER, CorpusMarkers, EntryParser
from webster.reader import CorpusReader


FOOTER = GUTENBERG_WEBSTER.footer

ZYTHUM_BLOCK = (
    "ZYTHUM\n"
    "Zy\"thum, n. [L., fr. Gr.] A kind of ancient malt beverage; a liquor made\n"
    "from malt and wheat. [Written also zythem.]\n\n"
)


@pytest.fixture
def parser_for(make_corpus):
    """Build a parser over an ad-hoc corpus; closed at teardown."""
    parsers = []

    def _make(lines, **kwargs):
        parser = EntryParser(CorpusReader(make_corpus(lines)), **kwargs)
        parsers.append(parser)
        return parser

    yield _make
    for parser in parsers:
        parser.close()


# =============================================================================
# Lookup mode
# =============================================================================

def test_lookup_merges_immediately_repeated_headword(mini_parser):
    entry = mini_parser.find_entry("HOME")

    assert entry.key == "HOME"
    assert entry.alias_tokens == ("HOME",)
    # A block closed by the next headword line keeps the newline before that line
    assert entry.description_blocks == (
        "HOME\nPlace of residence.\n",
        "HOME\n(informal)\n",
    )
    assert entry.sealed
    assert mini_parser.cursor == "HONOR; HONOUR"


def test_lookup_first_entry(mini_parser):
    entry = mini_parser.find_entry("A")

    assert entry.description_blocks == (
        "A\nA (named a in the English, and most commonly ä in other languages).\n\n",
        "A\nA, prep. [Abbreviated form of an (AS. on). See On.]\n\n",
    )
    assert mini_parser.cursor == "AARON'S ROD"


def test_lookup_entry_with_aliases(mini_parser):
    entry = mini_parser.find_entry("HONOR; HONOUR")

    assert entry.alias_tokens == ("HONOR", "HONOUR")
    assert entry.display_key == entry.key
    assert entry.description() == "HONOR; HONOUR\nHon\"or, n. Esteem due or paid to worth.\n\n"
    assert mini_parser.cursor == "ZYTHUM"


@pytest.mark.parametrize("key", [
    "HOMES",
    "home",
    "HONOR",        # only an alias token, not the full line
    "Place of residence.",
    "",
])
def test_lookup_unknown_key_returns_none(mini_parser, key):
    assert mini_parser.find_entry(key) is None


def test_failed_lookup_leaves_cursor_alone(mini_parser):
    mini_parser.find_entry("HOME")
    assert mini_parser.find_entry("NOT A WORD") is None
    assert mini_parser.cursor == "HONOR; HONOUR"


def test_lookup_is_repeatable(mini_parser):
    first = mini_parser.find_entry("HOME")
    mini_parser.find_entry("ZYTHUM")
    mini_parser.find_entry("A")
    second = mini_parser.find_entry("HOME")

    assert first == second
    assert first is not second
    assert first.description_blocks == second.description_blocks


def test_headword_after_footer_is_never_found(mini_parser):
    """Scanning stops at the Gutenberg footer, even for capitalised lines after it."""
    trailer = "*** END OF THIS PROJECT GUTENBERG EBOOK WEBSTER'S UNABRIDGED DICTIONARY ***"
    assert mini_parser.find_entry(trailer) is None


def test_non_contiguous_repeat_is_not_merged(parser_for):
    parser = parser_for([
        "A", "alpha body",
        "FOO", "first foo",
        "BAR", "bar body",
        "FOO", "second foo",
        "ZED", "zed body",
    ])

    entry = parser.find_entry("FOO")
    assert entry.description_blocks == ("FOO\nfirst foo\n",)
    assert parser.cursor == "BAR"


def test_lowercase_line_is_body_text(parser_for):
    parser = parser_for(["ROOM", "", "a quiet room.", "", "QUIET", "still"])

    entry = parser.find_entry("ROOM")
    assert entry.description() == "ROOM\n\na quiet room.\n\n"
    assert parser.cursor == "QUIET"


# =============================================================================
# End of corpus
# =============================================================================

def test_final_headword_tail_ends_scan(mini_parser):
    entry = mini_parser.find_entry("ZYTHUM")

    assert entry.description_blocks == (ZYTHUM_BLOCK,)
    assert mini_parser.cursor is None
    assert mini_parser.exhausted


def test_footer_closes_last_entry(parser_for):
    parser = parser_for(["A", "alpha body", "B", "beta body", "", FOOTER, "", "TRAILER"])

    entry = parser.find_entry("B")
    assert entry.description_blocks == ("B\nbeta body\n",)
    assert parser.exhausted


def test_end_of_file_closes_last_entry(parser_for):
    parser = parser_for(["A", "alpha body", "B", "beta body"])

    entry = parser.find_entry("B")
    assert entry.description_blocks == ("B\nbeta body",)
    assert parser.exhausted
    assert parser.find_entry() is None


def test_custom_markers(parser_for):
    markers = CorpusMarkers(footer="THE END OF THE BOOK", final_headword="ZED", final_tail="zed end.")
    parser = parser_for(["A", "alpha", "ZED", "zed end.", "TRAILING", "junk"], markers=markers)

    entry = parser.find_entry("ZED")
    assert entry.description_blocks == ("ZED\nzed end.\n\n",)
    assert parser.exhausted


# =============================================================================
# Sequential mode
# =============================================================================

def test_sequential_walk_starts_at_a(mini_parser):
    assert mini_parser.cursor is None

    entry = mini_parser.find_entry()
    assert entry.key == FIRST_HEADWORD
    assert mini_parser.cursor == "AARON'S ROD"


def test_sequential_walk_visits_every_headword_once(mini_parser):
    keys = []
    while True:
        entry = mini_parser.find_entry()
        if entry is None:
            break
        keys.append(entry.key)

    assert keys == ["A", "AARON'S ROD", "HOME", "HONOR; HONOUR", "ZYTHUM"]


def test_sequential_walk_does_not_restart(mini_parser):
    list(mini_parser.iter_entries())

    assert mini_parser.exhausted
    assert mini_parser.find_entry() is None
    assert mini_parser.find_entry() is None


def test_reset_restarts_walk(mini_parser):
    list(mini_parser.iter_entries())
    mini_parser.reset()

    assert not mini_parser.exhausted
    assert mini_parser.find_entry().key == "A"


def test_iter_entries_matches_lookups(mini_parser):
    walked = list(mini_parser.iter_entries())
    looked_up = [mini_parser.find_entry(entry.key) for entry in walked]
    assert walked == looked_up


def test_lookup_moves_sequential_cursor(mini_parser):
    """A successful lookup moves the cursor to the headword after the match."""
    mini_parser.find_entry()  # A
    mini_parser.find_entry("HOME")

    assert mini_parser.find_entry().key == "HONOR; HONOUR"
    assert mini_parser.find_entry().key == "ZYTHUM"
    assert mini_parser.find_entry() is None


def test_lookup_after_exhaustion_resumes_walk(mini_parser):
    list(mini_parser.iter_entries())
    assert mini_parser.find_entry("NOWHERE") is None
    assert mini_parser.exhausted

    mini_parser.find_entry("AARON'S ROD")
    assert not mini_parser.exhausted
    assert mini_parser.find_entry().key == "HOME"


def test_custom_first_headword(parser_for):
    parser = parser_for(["PREFACE", "intro", "B", "beta"], first_headword="B")
    assert parser.find_entry().key == "B"
    assert parser.find_entry() is None


def test_missing_first_headword(parser_for):
    parser = parser_for(["B", "beta"])
    assert parser.find_entry() is None
    assert parser.cursor == FIRST_HEADWORD
