"""Terminal collaborators: setup, keyboard input and frame rendering."""

from foxtype.terminal.input import BlessedEventSource, decode_keystroke
from foxtype.terminal.render import FrameRenderer
from foxtype.terminal.screen import terminal_session

__all__ = ["BlessedEventSource", "FrameRenderer", "decode_keystroke", "terminal_session"]
