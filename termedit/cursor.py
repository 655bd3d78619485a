"""Cursor position and the control sequences that mirror it on the terminal."""

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .terminal import OutputSink

CSI = "\x1b["


class CursorStyle(IntEnum):
    """Caret glyph styles, valued by their DECSCUSR parameter."""
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERLINE = 3
    STEADY_UNDERLINE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


MIN_POSITION = 1


def saturating_sub(value: int, offset: int, floor: int = MIN_POSITION) -> int:
    """Subtract offset from value without going below floor."""
    return max(floor, value - offset)


def saturating_add(value: int, offset: int, floor: int = MIN_POSITION) -> int:
    """Add offset to value; a negative offset still stops at floor."""
    return max(floor, value + offset)


class Cursor:
    """A 1-based terminal cursor.

    Position changes made through ``move_by`` are purely logical. ``jump``
    and friends also emit the absolute positioning sequence, and
    ``render`` re-emits the full cursor state. Output goes to the injected
    sink and is never flushed here.
    """

    def __init__(self, sink: "OutputSink", visible: bool = True,
                 style: CursorStyle = CursorStyle.STEADY_BLOCK):
        self._sink = sink
        self._row = MIN_POSITION
        self._col = MIN_POSITION
        self._visible = visible
        self._style = style

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def style(self) -> CursorStyle:
        return self._style

    def move_by(self, direction: Direction, offset: int = 1):
        """Move relative to the current position, saturating at row/col 1."""
        if direction == Direction.UP:
            self._row = saturating_sub(self._row, offset)
        elif direction == Direction.DOWN:
            self._row = saturating_add(self._row, offset)
        elif direction == Direction.LEFT:
            self._col = saturating_sub(self._col, offset)
        elif direction == Direction.RIGHT:
            self._col = saturating_add(self._col, offset)

    def reset(self):
        """Return to row 1, column 1 without emitting anything."""
        self._row = MIN_POSITION
        self._col = MIN_POSITION

    def jump(self, row: int, col: int):
        self._row = max(MIN_POSITION, row)
        self._col = max(MIN_POSITION, col)
        self._emit_position()

    def jump_to_row(self, row: int):
        self.jump(row, self._col)

    def jump_to_col(self, col: int):
        self.jump(self._row, col)

    def set_visibility(self, visible: bool):
        self._visible = visible
        self._emit_visibility()

    def set_style(self, style: CursorStyle):
        """Record the glyph style; it reaches the terminal on the next render()."""
        self._style = style

    def render(self):
        """Re-emit position, style and visibility, in that order."""
        self._emit_position()
        self._sink.write(f"{CSI}{int(self._style)} q")
        self._emit_visibility()

    def _emit_position(self):
        self._sink.write(f"{CSI}{self._row};{self._col}H")

    def _emit_visibility(self):
        self._sink.write(f"{CSI}?25h" if self._visible else f"{CSI}?25l")

    def __repr__(self):
        return (f"Cursor(row={self._row}, col={self._col}, "
                f"visible={self._visible}, style={self._style.name})")
