"""In-memory document: lines of text plus the cursors that walk them."""

from typing import Optional, Sequence

from .cursor import Cursor, CursorStyle, Direction
from .terminal import OutputSink, StreamSink


def split_lines(text: str) -> list[str]:
    """Split file text into lines; a trailing newline adds no extra line."""
    if not text:
        return [""]
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Document:
    """An editable text buffer.

    ``lines`` is never empty. The editing cursor is 1-based, so the current
    line lives at ``lines[cursor.row - 1]``. The paint cursor is invisible
    and only drives line-by-line painting in the screen.
    """

    def __init__(self, sink: Optional[OutputSink] = None,
                 lines: Optional[Sequence[str]] = None,
                 path: Optional[str] = None):
        self.sink = sink if sink is not None else StreamSink()
        self._lines: list[str] = list(lines) if lines else [""]
        self.cursor = Cursor(self.sink)
        self.paint_cursor = Cursor(self.sink, visible=False)
        self.path = path

    @classmethod
    def from_text(cls, text: str, sink: Optional[OutputSink] = None,
                  path: Optional[str] = None) -> "Document":
        return cls(sink, lines=split_lines(text), path=path)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def _current_index(self) -> Optional[int]:
        index = self.cursor.row - 1
        if 0 <= index < len(self._lines):
            return index
        return None

    def get_current_row(self) -> Optional[str]:
        """Return the line under the cursor, or None if the row has no line."""
        index = self._current_index()
        return None if index is None else self._lines[index]

    def set_current_row(self, text: str) -> bool:
        """Replace the line under the cursor. Returns False if out of range."""
        index = self._current_index()
        if index is None:
            return False
        self._lines[index] = text
        return True

    def insert_char(self, c: str):
        """Insert c at the cursor column and advance the cursor."""
        line = self.get_current_row()
        if line is None:
            self._lines.append(c)
        else:
            offset = self.cursor.col - 1
            self.set_current_row(line[:offset] + c + line[offset:])
        self.cursor.move_by(Direction.RIGHT, 1)

    def remove_char(self):
        """Backspace.

        An empty line below the first is deleted and the cursor lands after
        the end of the previous line. A nonempty line loses its last
        character wherever the cursor is.
        """
        line = self.get_current_row()
        if line is None:
            return
        if not line:
            if self.cursor.row > 1:
                del self._lines[self.cursor.row - 1]
                row = self.cursor.row - 1
                self.cursor.jump(row, len(self._lines[row - 1]) + 1)
            return
        self.set_current_row(line[:-1])
        if self.cursor.col > 1:
            self.cursor.move_by(Direction.LEFT, 1)

    def new_line(self):
        """Append an empty line and put the cursor at its start.

        The current line is not split at the cursor.
        """
        self._lines.append("")
        self.cursor.jump(len(self._lines), 1)

    def insert_text(self, text: str):
        """Insert a block of text at the cursor without moving it."""
        line = self.get_current_row()
        if line is None:
            self._lines.append(text)
            return
        offset = self.cursor.col - 1
        self.set_current_row(line[:offset] + text + line[offset:])

    def move_cursor(self, direction: Direction, offset: int = 1):
        self.cursor.move_by(direction, offset)

    def set_cursor_style(self, style: CursorStyle):
        self.cursor.set_style(style)

    def to_text(self) -> str:
        """Serialize with every line terminated by a newline."""
        return ''.join(line + '\n' for line in self._lines)

    def __repr__(self):
        return f"Document(path={self.path!r}, lines={len(self._lines)}, cursor={self.cursor!r})"
