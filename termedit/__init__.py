"""termedit - A small modal terminal text editor."""

from .cursor import Cursor, CursorStyle, Direction
from .document import Document
from .editor import Editor
from .modes import Mode
from .screen import Screen

__all__ = [
    'Cursor',
    'CursorStyle',
    'Direction',
    'Document',
    'Editor',
    'Mode',
    'Screen',
]
