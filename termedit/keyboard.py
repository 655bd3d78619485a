"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw token from curtsies
    is_alt: bool = False
    is_ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        return (self.key_type == KeyType.REGULAR and len(self.value) == 1
                and self.value.isprintable())


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'tab',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it; None when nothing was read."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: curtsies token such as 'a', '<LEFT>' or '<Ctrl-x>'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-') if '-' in name else [name]
            base = parts[-1]
            mods = set(parts[:-1])
            if 'meta' in mods or 'esc' in mods:
                mods.add('alt')
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are what Enter sends in raw mode
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if base == 'i':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
                if base == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
                return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
            if base in SPECIAL_KEYS:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            # Unknown token: keep it special so it never gets typed into text
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
