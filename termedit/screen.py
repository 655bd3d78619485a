"""Full-frame renderer that paints a document onto the terminal."""

from typing import Optional

from .constants import EditorConstants
from .cursor import Direction
from .document import Document
from .terminal import OutputSink


class Screen:
    """Owns the frame dimensions and repaints documents from scratch.

    There is no diffing: every draw erases the frame, paints each visible
    line with the document's invisible paint cursor, then re-renders the
    editing cursor on top and flushes.
    """

    def __init__(self, sink: OutputSink, terminal=None):
        self.sink = sink
        if terminal is not None:
            self.width = terminal.width
            self.height = terminal.height
        else:
            self.width = EditorConstants.DEFAULT_WIDTH
            self.height = EditorConstants.DEFAULT_HEIGHT
        self._document: Optional[Document] = None
        self.erase()
        self.flush()

    @property
    def current_document(self) -> Optional[Document]:
        return self._document

    def set_current_document(self, document: Document):
        self._document = document

    def remove_current_document(self):
        self._document = None

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def draw(self, document: Document):
        """Erase the frame, paint the document's lines, restore its cursor."""
        self.erase()
        paint = document.paint_cursor
        paint.reset()
        for line in document.lines[:self.height]:
            paint.jump_to_col(1)
            self.sink.write(line)
            paint.move_by(Direction.DOWN, 1)
        document.cursor.render()
        self.flush()

    def draw_current(self):
        """Draw the attached document, if any, and flush either way."""
        if self._document is not None:
            self.draw(self._document)
        else:
            self.flush()

    def flush(self):
        self.sink.flush()

    def erase(self):
        self.sink.write(EditorConstants.ERASE_FRAME)
