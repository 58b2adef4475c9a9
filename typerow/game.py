from __future__ import annotations

import logging
import subprocess
import tempfile
from typing import List, Optional, Sequence

from .display import Display
from .keys import Key
from .layout import Layout
from .score import Score
from .timer import Timer
from .words import DEFAULT_ROW_CHAR_BUDGET, WordFeed, WordQueue

log = logging.getLogger(__name__)

FINISHED_BANNER = "Your process has finished. The output is above. Here's your score:"


class Game:
    """Everything one session owns: the queue, the clock, the layout and its display."""

    def __init__(
        self,
        feed: WordFeed,
        *,
        limit: int = 60,
        row_char_budget: int = DEFAULT_ROW_CHAR_BUDGET,
        display: Optional[Display] = None,
        timer: Optional[Timer] = None,
    ) -> None:
        self.word_queue = WordQueue(feed, row_char_budget)
        self.word_queue.init()
        self.timer = timer or Timer(limit)
        self.layout = Layout.play()
        self.display = display or Display()

    def update_layout(self) -> None:
        row1, row2 = self.word_queue.rendered_rows()
        self.layout.update("words", ("row1", row1))
        self.layout.update("words", ("row2", row2))
        self.layout.update("word", ("word", self.word_queue.current.actual))

    def refresh(self) -> None:
        self.update_layout()
        self.display.render(self.layout)

    def process_key(self, key: Key) -> bool:
        """Apply one keystroke; False means the player asked to stop."""
        if key.is_interrupt:
            return False
        if not self.timer.running():
            self.timer.start()
        self.word_queue.register_key(key)
        self.refresh()
        return True

    def score(self) -> Score:
        correct, incorrect = self.word_queue.words_count()
        return Score(
            elapsed=self.timer.elapsed(),
            correct=correct,
            incorrect=incorrect,
            strokes=self.word_queue.correct_strokes,
        )

    def score_layout(self) -> Layout:
        return self.score().layout()


# ---------------------------
# Modes
# ---------------------------

class TimeMode:
    name = "time"

    def __init__(self, time: int = 60) -> None:
        self.time = time

    def begin(self, game: Game) -> None:
        game.timer.set(self.time)

    def is_over(self, game: Game) -> bool:
        return game.timer.is_limit()

    def interrupt(self) -> None:
        pass

    def close(self) -> None:
        pass

    def end(self, game: Game) -> None:
        game.display.render(game.score_layout())


class CommandMode:
    """Practice while a child process runs; the session lasts as long as it does."""

    name = "command"

    def __init__(self, argv: Sequence[str]) -> None:
        if not argv:
            raise ValueError("command mode needs a program to run")
        self.argv: List[str] = list(argv)
        self.child: Optional[subprocess.Popen] = None
        self.killed = False
        self._output = None

    def begin(self, game: Game) -> None:
        # stdout goes to a temporary file so a chatty child never blocks on a full pipe
        self._output = tempfile.TemporaryFile()
        try:
            self.child = subprocess.Popen(
                self.argv,
                stdin=subprocess.DEVNULL,
                stdout=self._output,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            self._output.close()
            self._output = None
            raise
        log.info("spawned %s (pid %d)", self.argv, self.child.pid)

    def is_over(self, game: Game) -> bool:
        return self.child is not None and self.child.poll() is not None

    def interrupt(self) -> None:
        if self.child is not None and self.child.poll() is None:
            self.child.kill()
            self.child.wait()
            self.killed = True
            log.info("killed %s", self.argv)

    def output(self) -> str:
        if self._output is None:
            return ""
        self._output.seek(0)
        return self._output.read().decode("utf-8", errors="replace")

    def close(self) -> None:
        self.interrupt()
        if self._output is not None:
            self._output.close()
            self._output = None

    def end(self, game: Game) -> None:
        if self.child is not None and not self.killed:
            code = self.child.wait()
            log.info("%s exited with %s", self.argv, code)
            console = game.display.console
            console.clear()
            for line in self.output().split("\n"):
                console.print(line, markup=False, highlight=False)
            console.print(FINISHED_BANNER, markup=False, highlight=False)
        game.display.render_no_clear(game.score_layout())
