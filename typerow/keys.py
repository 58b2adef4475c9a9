from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textual import events


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    INTERRUPT = "interrupt"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, c: str) -> "Key":
        return cls(KeyKind.CHAR, c)

    @property
    def is_interrupt(self) -> bool:
        return self.kind is KeyKind.INTERRUPT


SPACE = Key.of(" ")
BACKSPACE = Key(KeyKind.BACKSPACE)
INTERRUPT = Key(KeyKind.INTERRUPT)
OTHER = Key(KeyKind.OTHER)


def from_event(event: events.Key) -> Key:
    """Translate a textual key event; anything unrecognised becomes OTHER."""
    if event.key == "ctrl+c":
        return INTERRUPT
    if event.key in ("backspace", "ctrl+h"):
        return BACKSPACE
    if event.key == "space":
        return SPACE
    if event.is_printable and event.character and len(event.character) == 1:
        return Key.of(event.character)
    return OTHER
