"""
Rich-based live panel for the sequential dictionary walk.

Each step of the walk rescans the corpus from the top, so a full check
takes a long time; the panel shows how far it has got without scrolling
the terminal.
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class WalkProgress:
    """
    Context manager showing entries checked, current headword and rate.

    Usage:
        with WalkProgress("Checking dictionary") as progress:
            for entry in parser.iter_entries():
                progress.advance(entry.key)
    """

    def __init__(
        self,
        title: str = "Progress",
        enabled: bool = True,
        refresh_per_second: int = 4,
        console: Optional[Console] = None,
    ):
        self.title = title
        self.enabled = enabled
        self.refresh_per_second = refresh_per_second
        self.console = console

        self.count = 0
        self.headword = ""
        self.start_time: float = 0
        self.live: Optional[Live] = None

    def __enter__(self):
        self.start_time = time.time()
        if self.enabled:
            self.live = Live(
                self._make_panel(),
                refresh_per_second=self.refresh_per_second,
                console=self.console,
            )
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
        return False

    def advance(self, headword: str):
        self.count += 1
        self.headword = headword
        if self.live:
            self.live.update(self._make_panel())

    def metrics(self) -> Dict[str, Any]:
        elapsed = time.time() - self.start_time
        metrics: Dict[str, Any] = {
            "Entries": self.count,
            "Headword": self.headword,
            "Elapsed": elapsed,
        }
        if elapsed > 0:
            metrics["Rate"] = self.count / elapsed
        return metrics

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self.metrics().items():
            grid.add_row(
                Text(f"{key}:", style="bold grey50"),
                Text(format_metric(key, value), style="bright_cyan"),
            )

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")


def format_metric(key: str, value: Any) -> str:
    """Format a metric value for display."""
    if isinstance(value, float):
        if key == "Elapsed":
            minutes, seconds = divmod(int(value), 60)
            if minutes >= 60:
                hours, minutes = divmod(minutes, 60)
                return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
            return f"{minutes:02d}:{seconds:02d}"
        if key == "Rate":
            return f"{value:,.1f}/s"
        return f"{value:,.2f}"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)
