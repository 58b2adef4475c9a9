from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

WORDS_TEMPLATE = ("", "{{row1}}", "{{row2}}")
WORD_TEMPLATE = ("", "{{word}}", "")
SCORE_TEMPLATE = (
    "",
    "time: {{time}}s   correct: {{correct}}  incorrect: {{incorrect}}  "
    "accuracy: {{accuracy}}%  speed: {{wpm}}wpm",
    "",
)

Size = Tuple[int, int]


def substitute(line: str, state: Mapping[str, str]) -> str:
    """Fill `{{key}}` tokens from state; unknown keys stay as they are."""
    return PLACEHOLDER.sub(lambda m: state.get(m.group(1), m.group(0)), line)


def unit_size(template: Sequence[str]) -> Size:
    if not template:
        return 0, 0
    return len(template), max(len(line) for line in template)


def row_size(components: Sequence["Component"]) -> Size:
    if not components:
        return 0, 0
    return (
        max(c.size()[0] for c in components),
        sum(c.size()[1] for c in components),
    )


class ComponentKind(Enum):
    WORDS = "words"
    WORD = "word"
    SCORE = "score"

    @property
    def template(self) -> Tuple[str, ...]:
        return TEMPLATES[self]


TEMPLATES = {
    ComponentKind.WORDS: WORDS_TEMPLATE,
    ComponentKind.WORD: WORD_TEMPLATE,
    ComponentKind.SCORE: SCORE_TEMPLATE,
}


@dataclass
class Component:
    kind: ComponentKind
    state: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def new(cls, component_id: str) -> "Component":
        try:
            kind = ComponentKind(component_id)
        except ValueError:
            raise ValueError(f"unknown component {component_id!r}") from None
        return cls(kind)

    @property
    def id(self) -> str:
        return self.kind.value

    @property
    def template(self) -> Tuple[str, ...]:
        return self.kind.template

    def get_state(self) -> Dict[str, str]:
        return dict(self.state)

    def set_state(self, state: Mapping[str, str]) -> None:
        self.state = dict(state)

    def size(self) -> Size:
        return unit_size(self.template)

    def line(self, x: int) -> str:
        """Template line `x` with placeholders filled, or "" past the end."""
        if 0 <= x < len(self.template):
            return substitute(self.template[x], self.state)
        return ""


class Layout:
    """A grid of components: rows top to bottom, components left to right."""

    def __init__(self, rows: Sequence[Sequence[Component]]) -> None:
        self.rows: List[List[Component]] = [list(row) for row in rows]

    @classmethod
    def play(cls) -> "Layout":
        return cls([[Component.new("words")], [Component.new("word")]])

    @classmethod
    def score(cls) -> "Layout":
        return cls([[Component.new("score")]])

    def get_row(self, index: int) -> List[Component]:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return []

    def get_row_size(self, index: int) -> Optional[Size]:
        if 0 <= index < len(self.rows):
            return row_size(self.rows[index])
        return None

    def size(self) -> Size:
        rows = cols = 0
        for row in self.rows:
            r, c = row_size(row)
            rows += r
            cols = max(cols, c)
        return rows, cols

    def find(self, component_id: str) -> Optional[Component]:
        for row in self.rows:
            for component in row:
                if component.id == component_id:
                    return component
        return None

    def update(self, component_id: str, item: Tuple[str, str]) -> None:
        component = self.find(component_id)
        if component is not None:
            key, value = item
            component.state[key] = value

    def replace(self, component_id: str, state: Mapping[str, str]) -> None:
        component = self.find(component_id)
        if component is not None:
            component.set_state(state)

    def lines(self) -> List[str]:
        out: List[str] = []
        for row in self.rows:
            height, _ = row_size(row)
            for x in range(height):
                out.append("".join(c.line(x) for c in row))
        return out
