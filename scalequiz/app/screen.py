from __future__ import annotations

"""Full-screen terminal surface: bordered page rendering and raw key reads."""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import click
from rich.console import Console
from rich.control import Control

logger = logging.getLogger(__name__)

TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = "┏", "┓", "┗", "┛"
HORIZONTAL, VERTICAL = "━", "┃"


class QuizScreen:
    """Draws pages inside a box sized to the terminal and reads single keys.

    Output goes through a rich Console (cursor moves, clearing, sizing);
    keys come from `getchar`, `click.getchar` unless a test supplies one.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        getchar: Optional[Callable[[], str]] = None,
        *,
        text_col: int = 4,
        text_row: int = 2,
    ) -> None:
        self.console = console or Console(highlight=False)
        self._getchar = getchar or click.getchar
        self.text_col = text_col
        self.text_row = text_row

    @property
    def width(self) -> int:
        return self.console.size.width

    @property
    def height(self) -> int:
        return self.console.size.height

    def init(self) -> None:
        self.console.show_cursor(False)

    def destroy(self) -> None:
        self.console.show_cursor(True)
        self.console.clear()

    @contextmanager
    def session(self) -> Iterator["QuizScreen"]:
        """Hide the cursor for the duration; always restore it on the way out."""
        self.init()
        try:
            yield self
        finally:
            try:
                self.destroy()
            except OSError:
                logger.exception("Could not restore terminal")

    def read_key(self) -> str:
        return self._getchar()

    def render(self, text: str) -> None:
        # one buffered write per frame
        with self.console:
            self.console.clear()
            self._border()
            self._write_page(text)

    def _put(self, col: int, row: int, s: str) -> None:
        self.console.control(Control.move_to(col, row))
        self.console.out(s, end="", highlight=False)

    def _write_page(self, text: str) -> None:
        for i, line in enumerate(text.split("\n")):
            self._put(self.text_col, self.text_row + i, line)

    def _border(self) -> None:
        w, h = self.width, self.height
        if w < 2 or h < 2:
            return
        inner = HORIZONTAL * (w - 2)
        self._put(0, 0, f"{TOP_LEFT}{inner}{TOP_RIGHT}")
        for row in range(1, h - 1):
            self._put(0, row, VERTICAL)
            self._put(w - 1, row, VERTICAL)
        self._put(0, h - 1, f"{BOTTOM_LEFT}{inner}{BOTTOM_RIGHT}")
