from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .layout import Layout


def compute_accuracy(correct: int, incorrect: int) -> float:
    total = correct + incorrect
    if total == 0:
        return 0.0
    return correct / total * 100.0


def compute_wpm(strokes: int, elapsed_sec: int) -> float:
    # a "word" is five correct strokes
    if elapsed_sec <= 0:
        return 0.0
    return strokes / 5.0 / elapsed_sec * 60.0


@dataclass(frozen=True)
class Score:
    elapsed: int
    correct: int
    incorrect: int
    strokes: int

    @property
    def accuracy(self) -> float:
        return compute_accuracy(self.correct, self.incorrect)

    @property
    def wpm(self) -> float:
        return compute_wpm(self.strokes, self.elapsed)

    def state(self) -> Dict[str, str]:
        return {
            "time": str(self.elapsed),
            "correct": str(self.correct),
            "incorrect": str(self.incorrect),
            "accuracy": f"{self.accuracy:.2f}",
            "wpm": f"{self.wpm:.0f}",
        }

    def layout(self) -> Layout:
        layout = Layout.score()
        layout.replace("score", self.state())
        return layout
