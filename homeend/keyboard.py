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


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'f1',
}

_ALIASES = {
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'pgup': 'page_up',
    'pgdn': 'page_down',
    'esc': 'escape',
    'return': 'enter',
    'keypad_home': 'home',
    'keypad_end': 'end',
}


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'home', 'backspace')
    raw: str  # The raw key string from the input source
    is_alt: bool = False
    is_ctrl: bool = False

    @property
    def digit(self) -> Optional[int]:
        """The digit of an Alt-<digit> press, used as a prefix argument."""
        if self.key_type == KeyType.ALT and len(self.value) == 1 and self.value.isdigit():
            return int(self.value)
        return None


class KeyboardHandler:
    """Turns raw key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived before timeout."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a key token into a KeyEvent.

        Accepts curtsies names such as '<HOME>', '<Ctrl-a>' or '<Esc+3>',
        single control characters, and plain text.
        """
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            return self._parse_token(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if ch == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if o == 127:
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        # ESC followed by a single character is the terminal spelling of Alt
        if len(key_str) == 2 and key_str[0] == '\x1b':
            return KeyEvent(key_type=KeyType.ALT, value=key_str[1], raw=key_str, is_alt=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Support both '-' and '+' as modifier separators (e.g., '<Esc+u>')
        parts = name.replace('+', '-').split('-')
        base = parts[-1]
        mods = {p.lower() for p in parts[:-1]}
        if len(base) != 1:
            base = base.lower()
        base = _ALIASES.get(base, base)
        if mods & {'meta', 'esc'}:
            mods.add('alt')

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
        if base == 'tab' and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
        if 'ctrl' in mods and len(base) == 1:
            base = base.lower()
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if base == 'escape':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        # Plain specials and anything unknown
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
