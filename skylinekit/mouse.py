"""Mouse-message helpers: input source detection, wheel deltas and button tracking."""

from __future__ import annotations

from enum import Enum

WHEEL_DELTA = 120
"""Wheel movement reported for one notch of a standard mouse wheel."""

XBUTTON1 = 0x0001
XBUTTON2 = 0x0002

WM_LBUTTONDOWN = 0x0201
WM_LBUTTONUP = 0x0202
WM_LBUTTONDBLCLK = 0x0203
WM_RBUTTONDOWN = 0x0204
WM_RBUTTONUP = 0x0205
WM_RBUTTONDBLCLK = 0x0206
WM_MBUTTONDOWN = 0x0207
WM_MBUTTONUP = 0x0208
WM_MBUTTONDBLCLK = 0x0209
WM_XBUTTONDOWN = 0x020B
WM_XBUTTONUP = 0x020C
WM_XBUTTONDBLCLK = 0x020D

BUTTON_COUNT = 5
"""Buttons 0-4: left, right, middle, first extra, second extra."""

_SIGNATURE_MASK = 0xFFFFFF80
_PEN_SIGNATURE = 0xFF515700
_TOUCH_SIGNATURE = 0xFF515780

_MESSAGE_BUTTONS = {
    WM_LBUTTONDOWN: 0,
    WM_LBUTTONUP: 0,
    WM_LBUTTONDBLCLK: 0,
    WM_RBUTTONDOWN: 1,
    WM_RBUTTONUP: 1,
    WM_RBUTTONDBLCLK: 1,
    WM_MBUTTONDOWN: 2,
    WM_MBUTTONUP: 2,
    WM_MBUTTONDBLCLK: 2,
}
_X_MESSAGES = frozenset({WM_XBUTTONDOWN, WM_XBUTTONUP, WM_XBUTTONDBLCLK})


class MouseSource(Enum):
    """The device a mouse message came from."""

    MOUSE = "mouse"
    TOUCH_SCREEN = "touch_screen"
    PEN = "pen"


def _high_word(value: int) -> int:
    return (int(value) >> 16) & 0xFFFF


def mouse_source_from_extra_info(extra_info: int) -> MouseSource:
    """Tell pen, touch and mouse apart from a message's extra-info value."""
    signature = int(extra_info) & _SIGNATURE_MASK
    if signature == _PEN_SIGNATURE:
        return MouseSource.PEN
    if signature == _TOUCH_SIGNATURE:
        return MouseSource.TOUCH_SCREEN
    return MouseSource.MOUSE


def wheel_delta(wparam: int) -> float:
    """Return the wheel movement in a wheel message's ``wparam``, in notches.

    The high word holds a signed count in units of :data:`WHEEL_DELTA`;
    fine-grained devices such as track-pads give fractional results.
    """
    raw = _high_word(wparam)
    if raw >= 0x8000:
        raw -= 0x10000
    return raw / WHEEL_DELTA


def button_from_message(msg: int, wparam: int) -> int:
    """Return the button index (0-4) of a mouse button message.

    Double-click messages count as presses of the same button. For the extra
    buttons, the high word of ``wparam`` selects the first (3) or second (4).
    """
    if msg in _MESSAGE_BUTTONS:
        return _MESSAGE_BUTTONS[msg]
    if msg in _X_MESSAGES:
        return 3 if _high_word(wparam) == XBUTTON1 else 4
    raise ValueError(f"not a mouse button message: {msg:#06x}")


class MouseButtonTracker:
    """Keeps the set of held mouse buttons to decide when to capture the mouse."""

    def __init__(self) -> None:
        self.mask = 0

    @staticmethod
    def _bit(button: int) -> int:
        if isinstance(button, bool) or not isinstance(button, int):
            raise TypeError(f"button must be an int, not {type(button).__name__}")
        if not 0 <= button < BUTTON_COUNT:
            raise ValueError(f"button out of range: {button!r}")
        return 1 << button

    def press(self, button: int) -> bool:
        """Record ``button`` as held; True if no button was held before."""
        bit = self._bit(button)
        first = self.mask == 0
        self.mask |= bit
        return first

    def release(self, button: int) -> bool:
        """Record ``button`` as released; True if no button is held any more."""
        self.mask &= ~self._bit(button)
        return self.mask == 0

    def any_down(self) -> bool:
        """True while at least one button is held."""
        return self.mask != 0