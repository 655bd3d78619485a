"""Main editor controller: documents, modes and the read-dispatch-draw loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .document import Document
from .keyboard import KeyboardHandler, KeyEvent
from .modes import Mode, transition
from .screen import Screen
from .storage import DocumentStorage, FileStorage
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Editor:
    """Modal editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 storage: Optional[DocumentStorage] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.screen = Screen(self.terminal, self.terminal)
        self.storage = storage or FileStorage()
        self.command_registry = CommandRegistry()
        self._documents: list[Document] = []
        self.active_index = 0
        self.mode = Mode.NORMAL
        self.running = False

    # --- Document collection ---

    @property
    def documents(self) -> tuple[Document, ...]:
        return tuple(self._documents)

    @property
    def active_document(self) -> Document:
        return self._documents[self.active_index]

    def add_document(self) -> Document:
        return self.add_document_from(Document(self.terminal))

    def add_document_from(self, document: Document) -> Document:
        self._documents.append(document)
        return document

    def add_document_from_text(self, text: str, path: Optional[str] = None) -> Document:
        return self.add_document_from(Document.from_text(text, self.terminal, path=path))

    def remove_document(self, index: int) -> Optional[Document]:
        """Remove and return the document at index, or None if there is none."""
        if not 0 <= index < len(self._documents):
            return None
        document = self._documents.pop(index)
        if self.active_index >= len(self._documents):
            self.active_index = max(0, len(self._documents) - 1)
        if self.screen.current_document is document:
            if self._documents:
                self.screen.set_current_document(self.active_document)
            else:
                self.screen.remove_current_document()
        return document

    def set_active(self, index: int):
        if not 0 <= index < len(self._documents):
            raise IndexError(f"No document at index {index}")
        self.active_index = index
        self.screen.set_current_document(self._documents[index])

    # --- File handling ---

    def load_file(self, path: str) -> Document:
        """Open path as a new active document.

        If the file can't be read a message is printed (the terminal is
        not in raw mode yet) and an empty document bound to path is used,
        so saving will create the file.
        """
        try:
            text = self.storage.read(path)
        except (OSError, UnicodeDecodeError) as e:
            print(EditorConstants.FILE_NOT_FOUND_MESSAGE.format(path))
            logger.warning(f"Could not read {path}: {e}")
            document = self.add_document_from(Document(self.terminal, path=path))
        else:
            document = self.add_document_from_text(text, path=path)
            logger.info(f"Loaded {path} ({document.line_count} lines)")
        self.set_active(len(self._documents) - 1)
        return document

    def save_active(self) -> bool:
        """Overwrite the active document's file with its lines.

        Returns:
            True if the file was written. Failures are only logged.
        """
        document = self.active_document
        if document.path is None:
            # Nothing to save to until documents can be given a path
            logger.debug("Active document has no path; skipping save")
            return False
        try:
            self.storage.write(document.path, document.to_text())
        except OSError as e:
            logger.debug(f"Could not save {document.path}: {e}")
            return False
        logger.info(f"Saved {document.path}")
        return True

    # --- Input handling ---

    def _set_mode(self, mode: Mode):
        if mode == self.mode:
            return
        logger.debug(f"Mode {self.mode.value} -> {mode.value}")
        self.mode = mode
        if mode == Mode.INSERT:
            self.active_document.set_cursor_style(EditorConstants.INSERT_CARET_STYLE)
        else:
            self.active_document.set_cursor_style(EditorConstants.NORMAL_CARET_STYLE)

    def handle_key_event(self, key_event: Optional[KeyEvent]) -> bool:
        """Apply one key to the active document.

        Returns:
            False once the editor should stop running
        """
        step = transition(self.mode, key_event)
        self.command_registry.execute(self, step.action, key_event)
        self._set_mode(step.mode)
        return self.running

    def draw(self):
        """Repaint the active document."""
        self.screen.resize(self.terminal.width, self.terminal.height)
        self.screen.draw(self.active_document)

    def run(self):
        """Run the main editor loop until Esc is pressed in Normal mode."""
        if not self._documents:
            self.add_document()
        self.set_active(self.active_index)
        self.terminal.setup()
        self.running = True
        try:
            self.draw()
            while self.running:
                if not self.terminal.has_input:
                    logger.error("No keyboard input available; stopping")
                    break
                key_event = self.keyboard.get_key_event()
                if self.handle_key_event(key_event):
                    self.draw()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.running = False
            self.terminal.cleanup()
