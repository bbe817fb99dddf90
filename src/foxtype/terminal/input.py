"""Keyboard input from the terminal.

Translates blessed keystrokes into the input events understood by the
session.
"""

from __future__ import annotations

import logging
from typing import Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

from foxtype.core.models import InputEvent, Key, KeyPress, Modifier, OtherEvent

logger = logging.getLogger(__name__)

ESC = "\x1b"

_NAMED_KEYS: dict[str, Key] = {
    "KEY_ESCAPE": Key.ESCAPE,
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_ENTER": Key.ENTER,
    "KEY_TAB": Key.TAB,
}


def _control_letter(char: str) -> Optional[str]:
    """Map a raw control byte (Ctrl+A .. Ctrl+Z) to its letter."""
    code = ord(char)
    if 0x01 <= code <= 0x1A:
        return chr(code + 0x60)
    return None


def decode_keystroke(keystroke: Keystroke) -> InputEvent:
    """Convert a blessed keystroke into an input event.

    Args:
        keystroke: Keystroke returned by ``Terminal.inkey()``

    Returns:
        KeyPress for recognised keys, OtherEvent otherwise
    """
    text = str(keystroke)
    if not text:
        return OtherEvent("timeout")

    # Alt+key arrives as ESC followed by the key; newer blessed releases
    # report it as a sequence (KEY_ALT_X), older ones as plain text.
    if len(text) == 2 and text[0] == ESC and text[1].isprintable():
        return KeyPress.character(text[1], Modifier.ALT)

    if keystroke.is_sequence:
        key = _NAMED_KEYS.get(keystroke.name or "", Key.OTHER)
        return KeyPress.special(key)

    if len(text) != 1:
        logger.debug(f"Ignoring unrecognised input: {text!r}")
        return OtherEvent("unknown")

    if text == ESC:
        return KeyPress.special(Key.ESCAPE)

    letter = _control_letter(text)
    if letter is not None:
        return KeyPress.character(letter, Modifier.CONTROL)

    if not text.isprintable():
        return KeyPress.special(Key.OTHER)

    return KeyPress.character(text)


class BlessedEventSource:
    """Blocking event source reading one keystroke at a time."""

    def __init__(self, term: Terminal):
        """Initialize the event source.

        Args:
            term: Terminal to read keystrokes from (must be in cbreak mode)
        """
        self._term = term

    def read_event(self) -> InputEvent:
        """Block until the next input event.

        In cbreak mode Ctrl+C is delivered as SIGINT rather than a byte, so
        the resulting KeyboardInterrupt is reported as the Ctrl+C key press.

        Returns:
            The decoded input event
        """
        try:
            keystroke = self._term.inkey()
        except KeyboardInterrupt:
            return KeyPress.character("c", Modifier.CONTROL)

        event = decode_keystroke(keystroke)
        logger.debug(f"Input event: {event}")
        return event
