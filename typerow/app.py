from __future__ import annotations

import logging
from typing import Optional, Union

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .game import CommandMode, Game, TimeMode
from .keys import from_event

log = logging.getLogger(__name__)

Mode = Union[TimeMode, CommandMode]

FINISHED = "finished"
INTERRUPTED = "interrupted"


class Board(Static):
    """The repainted play area."""


class TypingApp(App):
    CSS = """
    Screen {
        background: transparent;
    }

    Board {
        width: 100%;
        height: auto;
    }
    """

    TITLE = "typerow"

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", priority=True),
    ]

    def __init__(self, game: Game, mode: Mode, tick_ms: int = 50) -> None:
        super().__init__()
        self.game = game
        self.mode = mode
        self.tick_ms = tick_ms
        self.outcome: Optional[str] = None

    def compose(self) -> ComposeResult:
        self.board = Board()
        yield self.board

    def on_mount(self) -> None:
        self.game.display.attach(self.board, self.size.width)
        self.game.refresh()
        self.set_interval(self.tick_ms / 1000.0, self._tick)
        log.info(
            "session started in %s mode, limit %ss, row budget %d",
            self.mode.name,
            self.game.timer.limit,
            self.game.word_queue.row_char_budget,
        )

    def _tick(self) -> None:
        if self.outcome is None and self.mode.is_over(self.game):
            self._finish(FINISHED)

    def _finish(self, outcome: str) -> None:
        self.outcome = outcome
        self.game.display.detach()
        self.exit(outcome)

    def on_key(self, event: events.Key) -> None:
        if self.outcome is not None:
            return
        event.stop()
        if not self.game.process_key(from_event(event)):
            self.action_interrupt()

    def action_interrupt(self) -> None:
        if self.outcome is not None:
            return
        self.mode.interrupt()
        self._finish(INTERRUPTED)
