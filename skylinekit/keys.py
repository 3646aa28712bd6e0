"""Mapping of Windows virtual-key codes to platform-neutral key identifiers."""

from __future__ import annotations

import string
from enum import Enum, IntEnum, auto
from typing import Dict

KF_EXTENDED = 0x0100
"""Extended-key flag in the high word of a key message's ``lparam``."""


class VirtualKey(IntEnum):
    """Windows virtual-key codes that have a named mapping."""

    LBUTTON = 0x01
    RBUTTON = 0x02
    BACK = 0x08
    TAB = 0x09
    RETURN = 0x0D
    SHIFT = 0x10
    CONTROL = 0x11
    MENU = 0x12
    PAUSE = 0x13
    CAPITAL = 0x14
    ESCAPE = 0x1B
    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D
    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUMLOCK = 0x90
    SCROLL = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LMENU = 0xA4
    RMENU = 0xA5
    BROWSER_BACK = 0xA6
    BROWSER_FORWARD = 0xA7
    OEM_1 = 0xBA
    OEM_PLUS = 0xBB
    OEM_COMMA = 0xBC
    OEM_MINUS = 0xBD
    OEM_PERIOD = 0xBE
    OEM_2 = 0xBF
    OEM_3 = 0xC0
    OEM_4 = 0xDB
    OEM_5 = 0xDC
    OEM_6 = 0xDD
    OEM_7 = 0xDE


class Key(Enum):
    """Platform-neutral key identifiers."""

    NONE = auto()
    TAB = auto()
    LEFT_ARROW = auto()
    RIGHT_ARROW = auto()
    UP_ARROW = auto()
    DOWN_ARROW = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    INSERT = auto()
    DELETE = auto()
    BACKSPACE = auto()
    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    MINUS = auto()
    PERIOD = auto()
    SLASH = auto()
    SEMICOLON = auto()
    EQUAL = auto()
    LEFT_BRACKET = auto()
    BACKSLASH = auto()
    RIGHT_BRACKET = auto()
    GRAVE_ACCENT = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()
    KEYPAD_0 = auto()
    KEYPAD_1 = auto()
    KEYPAD_2 = auto()
    KEYPAD_3 = auto()
    KEYPAD_4 = auto()
    KEYPAD_5 = auto()
    KEYPAD_6 = auto()
    KEYPAD_7 = auto()
    KEYPAD_8 = auto()
    KEYPAD_9 = auto()
    KEYPAD_DECIMAL = auto()
    KEYPAD_DIVIDE = auto()
    KEYPAD_MULTIPLY = auto()
    KEYPAD_SUBTRACT = auto()
    KEYPAD_ADD = auto()
    KEYPAD_ENTER = auto()
    LEFT_SHIFT = auto()
    LEFT_CTRL = auto()
    LEFT_ALT = auto()
    LEFT_SUPER = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CTRL = auto()
    RIGHT_ALT = auto()
    RIGHT_SUPER = auto()
    MENU = auto()
    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()
    APP_BACK = auto()
    APP_FORWARD = auto()


def _build_table() -> Dict[int, Key]:
    vk = VirtualKey
    table: Dict[int, Key] = {
        vk.TAB: Key.TAB,
        vk.LEFT: Key.LEFT_ARROW,
        vk.RIGHT: Key.RIGHT_ARROW,
        vk.UP: Key.UP_ARROW,
        vk.DOWN: Key.DOWN_ARROW,
        vk.PRIOR: Key.PAGE_UP,
        vk.NEXT: Key.PAGE_DOWN,
        vk.HOME: Key.HOME,
        vk.END: Key.END,
        vk.INSERT: Key.INSERT,
        vk.DELETE: Key.DELETE,
        vk.BACK: Key.BACKSPACE,
        vk.SPACE: Key.SPACE,
        vk.RETURN: Key.ENTER,
        vk.ESCAPE: Key.ESCAPE,
        vk.OEM_7: Key.APOSTROPHE,
        vk.OEM_COMMA: Key.COMMA,
        vk.OEM_MINUS: Key.MINUS,
        vk.OEM_PERIOD: Key.PERIOD,
        vk.OEM_2: Key.SLASH,
        vk.OEM_1: Key.SEMICOLON,
        vk.OEM_PLUS: Key.EQUAL,
        vk.OEM_4: Key.LEFT_BRACKET,
        vk.OEM_5: Key.BACKSLASH,
        vk.OEM_6: Key.RIGHT_BRACKET,
        vk.OEM_3: Key.GRAVE_ACCENT,
        vk.CAPITAL: Key.CAPS_LOCK,
        vk.SCROLL: Key.SCROLL_LOCK,
        vk.NUMLOCK: Key.NUM_LOCK,
        vk.SNAPSHOT: Key.PRINT_SCREEN,
        vk.PAUSE: Key.PAUSE,
        vk.DECIMAL: Key.KEYPAD_DECIMAL,
        vk.DIVIDE: Key.KEYPAD_DIVIDE,
        vk.MULTIPLY: Key.KEYPAD_MULTIPLY,
        vk.SUBTRACT: Key.KEYPAD_SUBTRACT,
        vk.ADD: Key.KEYPAD_ADD,
        vk.LSHIFT: Key.LEFT_SHIFT,
        vk.LCONTROL: Key.LEFT_CTRL,
        vk.LMENU: Key.LEFT_ALT,
        vk.LWIN: Key.LEFT_SUPER,
        vk.RSHIFT: Key.RIGHT_SHIFT,
        vk.RCONTROL: Key.RIGHT_CTRL,
        vk.RMENU: Key.RIGHT_ALT,
        vk.RWIN: Key.RIGHT_SUPER,
        vk.APPS: Key.MENU,
        vk.BROWSER_BACK: Key.APP_BACK,
        vk.BROWSER_FORWARD: Key.APP_FORWARD,
    }
    for digit in range(10):
        table[vk[f"NUMPAD{digit}"]] = Key[f"KEYPAD_{digit}"]
        table[ord(str(digit))] = Key[f"KEY_{digit}"]
    for letter in string.ascii_uppercase:
        table[ord(letter)] = Key[letter]
    for number in range(1, 25):
        table[vk[f"F{number}"]] = Key[f"F{number}"]
    return table


_VK_TO_KEY: Dict[int, Key] = _build_table()


def key_event_to_key(wparam: int, lparam: int) -> Key:
    """Translate a key message's ``wparam``/``lparam`` to a :class:`Key`.

    Keypad Enter has no virtual-key code of its own: it is Return with the
    extended-key flag set. Unmapped codes give :attr:`Key.NONE`.
    """
    high_word = (int(lparam) >> 16) & 0xFFFF
    if wparam == VirtualKey.RETURN and high_word & KF_EXTENDED:
        return Key.KEYPAD_ENTER
    return _VK_TO_KEY.get(int(wparam), Key.NONE)