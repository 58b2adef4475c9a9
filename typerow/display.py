from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from rich.console import Console
from rich.text import Text
from textual.widgets import Static

from .layout import Layout

log = logging.getLogger(__name__)


class Display:
    """
    Full-repaint renderer for a Layout.

    While a session runs, frames go to the attached board widget, which
    textual repaints as a whole. With no board attached (before or after
    the session) frames are written to the terminal through a rich
    Console, either over a cleared screen or below whatever is already
    there.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.board: Optional[Static] = None
        self.term_cols: Optional[int] = None
        self.col_offset = 0
        self.layout_size: Tuple[int, int] = (0, 0)
        self._bounds_for: Optional[Layout] = None

    def attach(self, board: Static, term_cols: int) -> None:
        self.board = board
        self.term_cols = term_cols
        self._bounds_for = None

    def detach(self) -> None:
        self.board = None
        self.term_cols = None
        self._bounds_for = None

    def set_bounds(self, layout: Layout) -> None:
        if self._bounds_for is layout:
            return
        self.layout_size = layout.size()
        content_cols = max([self.layout_size[1]] + [Text.from_ansi(line).cell_len for line in layout.lines()])
        term_cols = self.term_cols if self.term_cols is not None else self.console.width
        self.col_offset = max(0, (term_cols - content_cols) // 2)
        self._bounds_for = layout
        log.debug("layout %s in %d columns, offset %d", self.layout_size, term_cols, self.col_offset)

    def frame_lines(self, layout: Layout) -> List[str]:
        pad = " " * self.col_offset
        return [pad + line if line else line for line in layout.lines()]

    def frame(self, layout: Layout) -> Text:
        return Text("\n").join(Text.from_ansi(line) for line in self.frame_lines(layout))

    def render(self, layout: Layout) -> None:
        self.set_bounds(layout)
        frame = self.frame(layout)
        if self.board is not None:
            self.board.update(frame)
            return
        self.console.clear()
        self.console.print(frame)

    def render_no_clear(self, layout: Layout) -> None:
        self.set_bounds(layout)
        self.console.print(self.frame(layout))
