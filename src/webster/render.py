"""
render.py - Show entries on the console or as an HTML page.

Both consume the views of Entry: the console renderer colours the plain
view line by line, the HTML writer wraps the block-structured views in a
page with a jump-link index.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from webster.config import Settings
from webster.entry import Entry

logger = logging.getLogger(__name__)

LINK_STYLES = [
    "a:link {color: green; background-color: transparent; text-decoration: none;}",
    "a:visited {color: pink; background-color: transparent; text-decoration: none;}",
    "a:hover {color: red; background-color: transparent; text-decoration: underline;}",
    "a:active {color: yellow; background-color: transparent; text-decoration: underline;}",
]


def looks_like_headword(line: str) -> bool:
    """Has at least one letter and no lowercase letters (HOME, HONOR, ...)."""
    if not line.strip():
        return False
    has_letter = False
    for c in line:
        if c.isalpha():
            if c.islower():
                return False
            has_letter = True
    return has_letter


class ConsoleRenderer:
    """Prints entries with headword lines and body lines in different colours."""

    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None):
        settings = settings or Settings()
        self.headword_style = settings.colors['headword']
        self.description_style = settings.colors['description']
        self.console = console or Console(highlight=False)

    def render(self, entry: Entry):
        text = entry.description()
        if not text:
            return
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        for line in text.split("\n"):
            style = self.headword_style if looks_like_headword(line) else self.description_style
            self.console.print(Text(line, style=style), soft_wrap=True)


def html_header(settings: Settings) -> str:
    html = settings.html
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="ISO-8859-1">',
        f"<title>{html['title']}</title>",
        "<style>",
        *LINK_STYLES,
        "</style>",
        "</head>",
    ]
    body = (
        f"<body><h2>{html['title']}</h2>"
        f'<a href=" " title="{html["details"]}" '
        f'style="background-color:#FFFFFF;color:#000000;text-decoration:none">'
        f"{html['description']}</a><br>\n<br><br>"
    )
    return "\n".join(lines) + "\n" + body


def jump_links(entries: Iterable[Entry]) -> str:
    return "".join(
        f'<a href="#{entry.display_key}">{entry.display_key}</a><br>\n'
        for entry in entries
    )


def write_html_page(entries: List[Entry], output_path: Path, settings: Optional[Settings] = None) -> int:
    """
    Write entries as one HTML document, returning the number of entries written.

    The page is written in the corpus encoding so the text needs no transcoding.
    """
    settings = settings or Settings()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Writing {len(entries):,} entries to {output_path}")

    with open(output_path, 'w', encoding=settings.encoding, errors='replace', newline='\n') as f:
        f.write(html_header(settings))
        f.write(jump_links(entries))
        f.write("<br>")
        for entry in entries:
            f.write(entry.description_html())
        f.write("</body>\n")
        f.write("</html>")

    logger.info(f"{len(entries):,} html words added")
    return len(entries)
