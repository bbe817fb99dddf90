"""Unit tests for terminal setup and teardown."""

from contextlib import contextmanager

import pytest

from foxtype.terminal.screen import terminal_session


class FakeTerminal:
    """Terminal stand-in recording mode changes."""

    width = 80
    height = 24

    def __init__(self):
        self.log = []

    def _mode(self, name):
        @contextmanager
        def manager():
            self.log.append(f"enter {name}")
            try:
                yield
            finally:
                self.log.append(f"exit {name}")

        return manager()

    def fullscreen(self):
        return self._mode("fullscreen")

    def cbreak(self):
        return self._mode("cbreak")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")


def test_enters_and_restores_modes():
    """Test that terminal modes are entered and restored in order."""
    term = FakeTerminal()

    with terminal_session(term) as active:
        assert active is term
        assert term.log == ["enter fullscreen", "enter cbreak", "enter hidden_cursor"]

    assert term.log[3:] == ["exit hidden_cursor", "exit cbreak", "exit fullscreen"]


def test_restores_on_error():
    """Test that terminal modes are restored when the body raises."""
    term = FakeTerminal()

    with pytest.raises(OSError):
        with terminal_session(term):
            raise OSError("boom")

    assert term.log[-1] == "exit fullscreen"
