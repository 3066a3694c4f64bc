"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


# A miniature copy of the Gutenberg file: header, a few entries, the final
# ZYTHUM entry and the license footer.
MINI_CORPUS_LINES = [
    "The Project Gutenberg EBook of Webster's Unabridged Dictionary, by Various",
    "",
    "Character set encoding: ISO-8859-1",
    "",
    "A",
    "A (named a in the English, and most commonly ä in other languages).",
    "",
    "A",
    "A, prep. [Abbreviated form of an (AS. on). See On.]",
    "",
    "AARON'S ROD",
    "Aa\"ron's rod`, n. A rod with one serpent twined around it.",
    "",
    "HOME",
    "Place of residence.",
    "HOME",
    "(informal)",
    "HONOR; HONOUR",
    "Hon\"or, n. Esteem due or paid to worth.",
    "",
    "ZYTHUM",
    "Zy\"thum, n. [L., fr. Gr.] A kind of ancient malt beverage; a liquor made",
    "from malt and wheat. [Written also zythem.]",
    "",
    "",
    "",
    "End of Project Gutenberg's Webster's Unabridged Dictionary, by Various",
    "",
    "*** END OF THIS PROJECT GUTENBERG EBOOK WEBSTER'S UNABRIDGED DICTIONARY ***",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_corpus(temp_dir):
    """Factory writing a list of lines as a Latin-1 corpus file."""
    def _make(lines, name="corpus.txt", newline="\n"):
        path = temp_dir / name
        path.write_bytes(newline.join(lines).encode("latin-1") + newline.encode("latin-1"))
        return path
    return _make


@pytest.fixture
def mini_corpus(make_corpus):
    """Path to the miniature Webster corpus."""
    return make_corpus(MINI_CORPUS_LINES, name="29765-8.txt")


@pytest.fixture
def mini_parser(mini_corpus):
    """EntryParser over the miniature corpus, closed after the test."""
    from webster.parser import EntryParser
    from webster.reader import CorpusReader

    with EntryParser(CorpusReader(mini_corpus)) as parser:
        yield parser
