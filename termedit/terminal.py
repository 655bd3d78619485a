"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import blessed

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class OutputSink(ABC):
    """Destination for control sequences and frame text."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Queue data for the terminal."""

    @abstractmethod
    def flush(self) -> None:
        """Deliver everything queued so far."""


class StreamSink(OutputSink):
    """Sink backed by a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, data: str) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()


class TerminalInterface(OutputSink):
    """Handles terminal I/O using Blessed, with Curtsies as the key source."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False

    def write(self, data: str) -> None:
        self.term.stream.write(data)

    def flush(self) -> None:
        self.term.stream.flush()

    def setup(self):
        """Enter fullscreen mode and start reading raw keys."""
        self.write(self.term.enter_fullscreen)
        self.write(EditorConstants.ERASE_FRAME)
        self.flush()
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception as e:
                # curtsies may fail to initialize without a real tty (CI,
                # pipes); the editor then runs with no key source.
                logger.warning(f"Could not start key input: {e}")
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            self.write(self.term.exit_fullscreen)
            self.write(self.term.normal_cursor)
            self.write(EditorConstants.RESET_CURSOR_STYLE)
            self.write(EditorConstants.SHOW_CURSOR)
            self.flush()
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception as e:
                # Teardown should never crash the app
                logger.warning(f"Could not leave raw mode cleanly: {e}")
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def get_key(self):
        """Block until the user presses a key.

        Returns:
            The curtsies key name as a string, or None when no key source
            is available.
        """
        if self._curtsies_input is None:
            return None
        return str(next(self._curtsies_input))

    @property
    def has_input(self) -> bool:
        return self._curtsies_input is not None

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
