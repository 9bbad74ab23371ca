from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import List, Union


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    TAB = "tab"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"


class Modifiers(IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


@dataclass(frozen=True)
class Key:
    code: KeyCode
    char: str = ""
    modifiers: Modifiers = Modifiers.NONE

    @classmethod
    def of(cls, ch: str, modifiers: Modifiers = Modifiers.NONE) -> "Key":
        return cls(KeyCode.CHAR, ch, modifiers)

    def is_char(self, ch: str) -> bool:
        return self.code is KeyCode.CHAR and self.char == ch


@dataclass(frozen=True)
class KeyInput:
    key: Key


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[KeyInput, Tick]


_ESC = 0x1B
_ARROWS = {
    ord("A"): KeyCode.UP,
    ord("B"): KeyCode.DOWN,
    ord("C"): KeyCode.RIGHT,
    ord("D"): KeyCode.LEFT,
}


def _decode_escape(data: bytes, i: int):
    """Decode the sequence starting at the ESC byte data[i]; returns (key, next index)."""
    n = len(data)
    if i + 1 >= n:
        return Key(KeyCode.ESC), i + 1
    nxt = data[i + 1]
    if nxt in (ord("["), ord("O")):
        # CSI / SS3: parameters then a final byte in 0x40..0x7e
        j = i + 2
        while j < n and not 0x40 <= data[j] <= 0x7E:
            j += 1
        if j >= n:
            return Key(KeyCode.UNKNOWN), n
        params = data[i + 2:j]
        code = _ARROWS.get(data[j]) if not params else None
        return Key(code or KeyCode.UNKNOWN), j + 1
    if 0x20 <= nxt < 0x7F:
        return Key.of(chr(nxt), Modifiers.ALT), i + 2
    return Key(KeyCode.ESC), i + 1


def decode_keys(data: bytes) -> List[Key]:
    """Turn one raw-mode read into keys, in the order they were typed."""
    keys: List[Key] = []
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        if b == _ESC:
            key, i = _decode_escape(data, i)
            keys.append(key)
            continue
        i += 1
        if b in (0x7F, 0x08):
            keys.append(Key(KeyCode.BACKSPACE))
        elif b in (0x0D, 0x0A):
            keys.append(Key(KeyCode.ENTER))
        elif b == 0x09:
            keys.append(Key(KeyCode.TAB))
        elif 0x01 <= b <= 0x1A:
            keys.append(Key.of(chr(b + 0x60), Modifiers.CONTROL))
        elif 0x20 <= b < 0x7F:
            keys.append(Key.of(chr(b)))
        # anything else (NUL, other C0 controls, non-ASCII) is dropped
    return keys
