"""Core data models for the foxtype application.

This module contains the input event types consumed by the session and the
session state variants. A session is always in exactly one of the four
variants; only ``Active`` carries a payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

# ============================================================================
# Constants
# ============================================================================

REFERENCE_TEXT = "The quick brown fox jumped over the lazy dog."
START_KEY = "s"
QUIT_CHARS = ("c", "C")
APP_TITLE = "Quick Fox Typing Test"


# ============================================================================
# Input Events
# ============================================================================


class Key(Enum):
    """Logical identity of a pressed key."""

    CHAR = "char"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    ENTER = "enter"
    TAB = "tab"
    OTHER = "other"


class Modifier(Enum):
    """Modifier keys held during a key press."""

    CONTROL = "control"
    ALT = "alt"
    SHIFT = "shift"

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return {
            Modifier.CONTROL: "Ctrl",
            Modifier.ALT: "Alt",
            Modifier.SHIFT: "Shift",
        }[self]


@dataclass(frozen=True)
class KeyPress:
    """A single key press with its active modifiers."""

    key: Key
    char: Optional[str] = None
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.key == Key.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError(f"Character key requires exactly one character, got {self.char!r}")
        elif self.char is not None:
            raise ValueError(f"Only character keys carry a character, got {self.char!r}")

    @classmethod
    def character(cls, char: str, *modifiers: Modifier) -> KeyPress:
        """Create a character key press."""
        return cls(key=Key.CHAR, char=char, modifiers=frozenset(modifiers))

    @classmethod
    def special(cls, key: Key, *modifiers: Modifier) -> KeyPress:
        """Create a non-character key press (Escape, Backspace, ...)."""
        return cls(key=key, modifiers=frozenset(modifiers))

    def has_modifier(self, modifier: Modifier) -> bool:
        """Check if the given modifier was held."""
        return modifier in self.modifiers

    def is_control(self, *chars: str) -> bool:
        """Check if this is Control held with one of ``chars``."""
        return (
            self.key == Key.CHAR
            and self.has_modifier(Modifier.CONTROL)
            and self.char in chars
        )

    def __str__(self) -> str:
        name = self.char if self.key == Key.CHAR else self.key.value
        prefix = "".join(f"{m}+" for m in sorted(self.modifiers, key=lambda m: m.value))
        return f"{prefix}{name}"


@dataclass(frozen=True)
class OtherEvent:
    """Any terminal event that is not a key press (mouse, resize, release...)."""

    kind: str = "other"


InputEvent = Union[KeyPress, OtherEvent]


# ============================================================================
# Session States
# ============================================================================


class Phase(Enum):
    """Tag of the session state variant."""

    IDLE = "idle"
    ACTIVE = "active"
    COMPLETED = "completed"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Idle:
    """Awaiting the start key; nothing typed yet."""


@dataclass
class Active:
    """A test is in progress.

    ``reference`` is fixed for the whole episode. ``typed`` is edited in place,
    one character at a time.
    """

    reference: str
    typed: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The typed buffer as a string."""
        return "".join(self.typed)

    def is_match(self) -> bool:
        """Check if the typed buffer equals the reference, codepoint by codepoint."""
        return self.text == self.reference


@dataclass(frozen=True)
class Completed:
    """The typed buffer matched the reference."""


@dataclass(frozen=True)
class Terminated:
    """Session ended. No transition leaves this state."""


SessionState = Union[Idle, Active, Completed, Terminated]

_PHASES: dict[type, Phase] = {
    Idle: Phase.IDLE,
    Active: Phase.ACTIVE,
    Completed: Phase.COMPLETED,
    Terminated: Phase.TERMINATED,
}


def phase_of(state: SessionState) -> Phase:
    """Get the phase tag of a state variant."""
    return _PHASES[type(state)]
