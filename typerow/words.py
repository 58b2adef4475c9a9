from __future__ import annotations

import logging
import random
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .keys import Key, KeyKind

log = logging.getLogger(__name__)

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"

DEFAULT_ROW_CHAR_BUDGET = 60
NUM_ROWS = 2


class CorpusError(ValueError):
    """The word corpus is empty or could not be read."""


# ---------------------------
# Corpus
# ---------------------------

def parse_corpus(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_corpus(path: Optional[Path] = None) -> List[str]:
    """
    Read the newline-separated corpus. Without a path, the list bundled
    with the package is used.
    """
    try:
        if path is None:
            text = resources.files("typerow").joinpath("words.txt").read_text(encoding="utf-8")
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"cannot read word list: {exc}") from exc
    return parse_corpus(text)


# ---------------------------
# Live words
# ---------------------------

class LiveWord:
    """A target word together with whatever has been typed against it."""

    __slots__ = ("expected", "_actual", "matched")

    def __init__(self, expected: str) -> None:
        self.expected = expected
        self._actual: List[str] = []
        self.matched = False

    def __repr__(self) -> str:
        return f"LiveWord(expected={self.expected!r}, actual={self.actual!r})"

    @property
    def actual(self) -> str:
        return "".join(self._actual)

    def push(self, c: str) -> bool:
        self._actual.append(c)
        self.matched = self.actual == self.expected
        return self.matched

    def pop(self) -> bool:
        if self._actual:
            self._actual.pop()
        self.matched = self.actual == self.expected
        return self.matched

    def correct_stroke_count(self) -> int:
        count = 0
        for typed, target in zip(self._actual, self.expected):
            if typed != target:
                break
            count += 1
        return count

    def render_final(self) -> str:
        color = GREEN if self.matched else RED
        return f"{color}{self.expected}{RESET}"

    def render_active(self) -> str:
        # green prefix, the first miss in red, then the rest uncolored
        out = [GREEN]
        typed = iter(self._actual)
        diverged = False
        closed = False
        for target in self.expected:
            if diverged or closed:
                out.append(target)
                continue
            c = next(typed, None)
            if c is None:
                out.append(RESET)
                out.append(target)
                closed = True
            elif c == target:
                out.append(target)
            else:
                out.append(RED)
                out.append(target)
                out.append(RESET)
                diverged = True
        out.append(RESET)
        return "".join(out)


class WordFeed:
    """Random access to the corpus; every draw is a fresh LiveWord."""

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None) -> None:
        pool = load_corpus() if words is None else [w for w in words if w]
        if not pool:
            raise CorpusError("word list is empty")
        self.words: Sequence[str] = pool
        self._rng = rng or random

    @classmethod
    def from_text(cls, text: str, rng: Optional[random.Random] = None) -> "WordFeed":
        return cls(parse_corpus(text), rng=rng)

    @classmethod
    def from_file(cls, path: Path, rng: Optional[random.Random] = None) -> "WordFeed":
        return cls(load_corpus(path), rng=rng)

    def __len__(self) -> int:
        return len(self.words)

    def random(self) -> LiveWord:
        return LiveWord(self._rng.choice(self.words))


def gen_row(feed: WordFeed, row_char_budget: int = DEFAULT_ROW_CHAR_BUDGET) -> List[LiveWord]:
    """Draw words until the next one would not fit; each counts a trailing space."""
    if min(len(w) for w in feed.words) >= row_char_budget:
        raise CorpusError(f"no word fits in a row of {row_char_budget} characters")
    total = 0
    row: List[LiveWord] = []
    while True:
        word = feed.random()
        if total + len(word.expected) >= row_char_budget:
            if not row:
                continue
            break
        total += len(word.expected) + 1
        row.append(word)
    return row


# ---------------------------
# Queue
# ---------------------------

class WordQueue:
    """
    Two rows of LiveWords. Only row 0 takes input; once its last word is
    committed the row is dropped, row 1 moves up and a fresh row is drawn.
    """

    def __init__(self, feed: WordFeed, row_char_budget: int = DEFAULT_ROW_CHAR_BUDGET) -> None:
        if min(len(w) for w in feed.words) >= row_char_budget:
            raise CorpusError(f"no word fits in a row of {row_char_budget} characters")
        self.feed = feed
        self.row_char_budget = row_char_budget
        self.num_rows = NUM_ROWS
        self.rows: List[List[LiveWord]] = []
        self.cursor = 0
        self._correct_words = 0
        self._incorrect_words = 0
        self._correct_strokes = 0

    def init(self) -> None:
        self.rows = [self.gen_row() for _ in range(self.num_rows)]
        self.cursor = 0

    def gen_row(self) -> List[LiveWord]:
        return gen_row(self.feed, self.row_char_budget)

    @property
    def current(self) -> LiveWord:
        return self.rows[0][self.cursor]

    @property
    def correct_words(self) -> int:
        return self._correct_words

    @property
    def incorrect_words(self) -> int:
        return self._incorrect_words

    @property
    def correct_strokes(self) -> int:
        return self._correct_strokes

    def words_count(self) -> Tuple[int, int]:
        return self._correct_words, self._incorrect_words

    def register_key(self, key: Key) -> None:
        word = self.current
        if key.kind is KeyKind.CHAR:
            if key.char != " ":
                word.push(key.char)
            elif word.actual:
                self.move_index()
        elif key.kind is KeyKind.BACKSPACE:
            word.pop()

    def move_index(self) -> None:
        word = self.current
        if word.matched:
            self._correct_words += 1
        else:
            self._incorrect_words += 1
        self._correct_strokes += word.correct_stroke_count()
        log.debug("committed %r as %r (matched=%s)", word.expected, word.actual, word.matched)

        if self.cursor + 1 < len(self.rows[0]):
            self.cursor += 1
        else:
            self.flush()

    def flush(self) -> None:
        self.rows.pop(0)
        self.rows.append(self.gen_row())
        self.cursor = 0
        log.debug("row flushed, next row has %d words", len(self.rows[-1]))

    def rendered_rows(self) -> Tuple[str, str]:
        active = []
        for i, word in enumerate(self.rows[0]):
            if i < self.cursor:
                active.append(word.render_final())
            elif i == self.cursor:
                active.append(word.render_active())
            else:
                active.append(word.expected)
            active.append(" ")
        upcoming = "".join(f"{word.expected} " for word in self.rows[1])
        return "".join(active), upcoming
