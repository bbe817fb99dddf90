"""Typing session state machine.

This module provides the Session class that owns the current state variant
and applies key events to it.
"""

from __future__ import annotations

import logging
from typing import Callable

from foxtype.core.models import (
    QUIT_CHARS,
    REFERENCE_TEXT,
    START_KEY,
    Active,
    Completed,
    Idle,
    InputEvent,
    Key,
    KeyPress,
    Phase,
    SessionState,
    Terminated,
    phase_of,
)

logger = logging.getLogger(__name__)


class Session:
    """Typing test session.

    State Machine:
        any state → TERMINATED (Escape, Ctrl+C)
        IDLE | COMPLETED → ACTIVE (start key)
        ACTIVE → ACTIVE (character appended / removed)
        ACTIVE → COMPLETED (typed buffer equals the reference)

    Keys with no rule for the current state are ignored.
    """

    def __init__(self, reference: str = REFERENCE_TEXT):
        """Initialize the session in the idle state.

        Args:
            reference: Sentence the user has to reproduce
        """
        self._reference = reference
        self._state: SessionState = Idle()
        self._callbacks: dict[str, list[Callable]] = {}

    # ========================================================================
    # State Access
    # ========================================================================

    @property
    def state(self) -> SessionState:
        """Current state variant."""
        return self._state

    @property
    def phase(self) -> Phase:
        """Phase tag of the current state."""
        return phase_of(self._state)

    def is_terminated(self) -> bool:
        """Check if the host loop should stop."""
        return isinstance(self._state, Terminated)

    # ========================================================================
    # Event Handling
    # ========================================================================

    def update(self, event: InputEvent) -> None:
        """Apply one input event to the session.

        Non key-press events and keys without a rule for the current state
        leave the session unchanged.

        Args:
            event: Input event from the event source
        """
        if not isinstance(event, KeyPress) or self.is_terminated():
            return

        if self._is_quit(event):
            self._transition(Terminated())
            return

        state = self._state
        if isinstance(state, (Idle, Completed)):
            if event.key == Key.CHAR and event.char == START_KEY:
                self._transition(Active(reference=self._reference))
        elif isinstance(state, Active):
            self._on_typing_key(state, event)

        if isinstance(self._state, Active):
            self._check_completion()

    def _is_quit(self, event: KeyPress) -> bool:
        return event.key == Key.ESCAPE or event.is_control(*QUIT_CHARS)

    def _on_typing_key(self, state: Active, event: KeyPress) -> None:
        if event.key == Key.CHAR:
            state.typed.append(event.char)
        elif event.key == Key.BACKSPACE:
            if state.typed:
                state.typed.pop()

    def _check_completion(self) -> None:
        state = self._state
        assert isinstance(state, Active)
        if state.is_match():
            self._transition(Completed())

    def _transition(self, new_state: SessionState) -> None:
        previous = phase_of(self._state)
        self._state = new_state
        current = phase_of(new_state)
        logger.debug(f"Session transition: {previous.value} -> {current.value}")
        self._broadcast_event(
            "state_changed", {"state": new_state, "phase": current, "previous": previous}
        )

    # ========================================================================
    # Rendering
    # ========================================================================

    def render_lines(self) -> list[str]:
        """Project the current state into display lines.

        Returns:
            Lines to draw, top to bottom. Empty once terminated.
        """
        state = self._state
        if isinstance(state, Idle):
            return [f"Press '{START_KEY}' to start the typing test."]
        if isinstance(state, Active):
            return [state.reference, state.text]
        if isinstance(state, Completed):
            return [
                "Well done! You typed the sentence exactly.",
                f"Press '{START_KEY}' to try again.",
            ]
        return []

    # ========================================================================
    # Event Callbacks
    # ========================================================================

    def register_callback(self, event: str, callback: Callable) -> None:
        """Register callback for events.

        Args:
            event: Event name
            callback: Callback function

        Supported events:
            - state_changed: State variant changed
              (data: {"state": SessionState, "phase": Phase, "previous": Phase})
        """
        if event not in self._callbacks:
            self._callbacks[event] = []

        self._callbacks[event].append(callback)
        logger.debug(f"Registered callback for event: {event}")

    def unregister_callback(self, event: str, callback: Callable) -> None:
        """Unregister callback for events.

        Args:
            event: Event name
            callback: Callback function to remove
        """
        if event in self._callbacks:
            try:
                self._callbacks[event].remove(callback)
                logger.debug(f"Unregistered callback for event: {event}")
            except ValueError:
                logger.warning(f"Callback not found for event: {event}")

    def _broadcast_event(self, event: str, data: dict) -> None:
        for callback in self._callbacks.get(event, []):
            try:
                callback(data)
            except Exception as e:
                logger.error(f"Error in callback for event {event}: {e}", exc_info=True)
