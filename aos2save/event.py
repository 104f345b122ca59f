"""Key events with a short-lived buffer of typed ASCII text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class Key(Enum):
    """Non-character keys the editor reacts to."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    ESC = "Esc"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    F12 = "F12"

    def __str__(self) -> str:
        return self.value


KeyInput = Union[Key, str]


@dataclass(frozen=True)
class Event:
    """The latest key press plus the text typed shortly before it.

    A single-character string stands for a character key. Typed text is
    forgotten when the gap between two events exceeds ``MAX_TEXT_AGE``.
    """

    MAX_TEXT_AGE: ClassVar[float] = 0.5
    MAX_INPUT_SIZE: ClassVar[int] = 32

    key: Key | str | None = None
    accumulated_input: str = ""
    received_at: float = 0.0

    @classmethod
    def empty(cls, received_at: float) -> Event:
        return cls(None, "", received_at)

    def follow_with(self, key: KeyInput | None, now: float) -> Event:
        """The event that follows this one; ``key`` is ``None`` for non-key input."""
        text = self.accumulated_input
        if now - self.received_at > self.MAX_TEXT_AGE:
            text = ""
        if isinstance(key, str):
            if len(key) != 1:
                raise ValueError(f"a character key must be one character, got {key!r}")
            if key.isascii() and len(text) < self.MAX_INPUT_SIZE:
                text += key
        elif key is not None and not isinstance(key, Key):
            raise TypeError(f"unsupported key: {key!r}")
        return Event(key, text, now)