"""Core typing-session logic."""

from foxtype.core.models import (
    REFERENCE_TEXT,
    Active,
    Completed,
    Idle,
    InputEvent,
    Key,
    KeyPress,
    Modifier,
    OtherEvent,
    Phase,
    SessionState,
    Terminated,
)
from foxtype.core.session import Session

__all__ = [
    "REFERENCE_TEXT",
    "Active",
    "Completed",
    "Idle",
    "InputEvent",
    "Key",
    "KeyPress",
    "Modifier",
    "OtherEvent",
    "Phase",
    "Session",
    "SessionState",
    "Terminated",
]
