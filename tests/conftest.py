import io

import pytest
from rich.console import Console

from typerow.display import Display
from typerow.words import WordFeed


class CycleRandom:
    """Stands in for random.Random: hands out the corpus in order, forever."""

    def __init__(self):
        self.i = 0

    def choice(self, seq):
        word = seq[self.i % len(seq)]
        self.i += 1
        return word


def cycle_feed(*words):
    return WordFeed(words, rng=CycleRandom())


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100, color_system=None, highlight=False)


@pytest.fixture
def display(console):
    return Display(console=console)
