"""Modal input state machine.

Each mode owns a key table mapping ``(KeyType, value)`` to an action and
the mode to continue in. ``transition`` is a pure function over those
tables so dispatch can be tested without a terminal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .keyboard import KeyEvent, KeyType


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"


class Action(Enum):
    """Effects a key can have on the editor."""
    EXIT = "exit"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SAVE = "save"
    REMOVE_CHAR = "remove_char"
    NEW_LINE = "new_line"
    INSERT_CHAR = "insert_char"


@dataclass(frozen=True)
class Transition:
    mode: Mode
    action: Optional[Action] = None


KeyTable = Dict[Tuple[KeyType, str], Transition]

_ARROWS = {
    'left': Action.MOVE_LEFT,
    'right': Action.MOVE_RIGHT,
    'up': Action.MOVE_UP,
    'down': Action.MOVE_DOWN,
}


def _movement(mode: Mode) -> KeyTable:
    return {(KeyType.SPECIAL, key): Transition(mode, action) for key, action in _ARROWS.items()}


NORMAL_KEYS: KeyTable = {
    **_movement(Mode.NORMAL),
    (KeyType.REGULAR, 'h'): Transition(Mode.NORMAL, Action.MOVE_LEFT),
    (KeyType.REGULAR, 'l'): Transition(Mode.NORMAL, Action.MOVE_RIGHT),
    (KeyType.REGULAR, 'k'): Transition(Mode.NORMAL, Action.MOVE_UP),
    (KeyType.REGULAR, 'j'): Transition(Mode.NORMAL, Action.MOVE_DOWN),
    (KeyType.REGULAR, 'i'): Transition(Mode.INSERT),
    (KeyType.SPECIAL, 'escape'): Transition(Mode.NORMAL, Action.EXIT),
    (KeyType.SPECIAL, 'tab'): Transition(Mode.NORMAL, Action.SAVE),
}

INSERT_KEYS: KeyTable = {
    **_movement(Mode.INSERT),
    (KeyType.SPECIAL, 'escape'): Transition(Mode.NORMAL),
    (KeyType.SPECIAL, 'backspace'): Transition(Mode.INSERT, Action.REMOVE_CHAR),
    (KeyType.SPECIAL, 'enter'): Transition(Mode.INSERT, Action.NEW_LINE),
}

KEY_TABLES: Dict[Mode, KeyTable] = {
    Mode.NORMAL: NORMAL_KEYS,
    Mode.INSERT: INSERT_KEYS,
}


def transition(mode: Mode, key_event: Optional[KeyEvent]) -> Transition:
    """Return the next mode and the action for key_event in mode.

    Unbound keys (and the absence of a key) leave the mode unchanged with
    no action. In Insert mode any unbound printable character is typed.
    """
    if key_event is None:
        return Transition(mode)
    found = KEY_TABLES[mode].get((key_event.key_type, key_event.value))
    if found is not None:
        return found
    if mode == Mode.INSERT and key_event.is_printable:
        return Transition(Mode.INSERT, Action.INSERT_CHAR)
    return Transition(mode)
