# skylinekit

Small, dependency-free building blocks for games and tools:

- **Rectangle packing** (`skylinekit.rectpack`): a skyline packer for building
  texture atlases, with bottom-left and best-fit heuristics.
- **Key mapping** (`skylinekit.keys`): Windows virtual-key codes mapped to
  platform-neutral `Key` identifiers.
- **Mouse message decoding** (`skylinekit.mouse`): input source detection
  (mouse, touch screen, pen), wheel deltas, button indices and held-button
  tracking.

## Installation

```
pip install skylinekit
```

## Packing rectangles

```python
from skylinekit.rectpack import Heuristic, Rect, RectPacker

packer = RectPacker(256, 256, 256)
packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)

rects = [Rect(w=64, h=32), Rect(w=100, h=100), Rect(w=0, h=10)]
all_packed = packer.pack(rects)

for rect in rects:
    print(rect.x, rect.y, rect.was_packed)
```

`pack` places each rectangle, sets its `x`, `y` and `was_packed` fields, keeps
the list in its original order and returns whether every rectangle fit.
Rectangles are placed tallest first. Empty rectangles need no space and are
placed at the origin; rectangles that do not fit are left at
`(MAX_COORD, MAX_COORD)` with `was_packed` false. Calling `pack` again keeps
filling the same target.

With fewer nodes than the target width, widths are rounded up so the packer
never runs out of nodes; call `set_allow_out_of_mem(True)` to pack exact
widths at the risk of running out. `set_heuristic` raises `ValueError` for an
unknown heuristic, and `skyline()` yields the current skyline as `(x, y)`
segment starts.

## Mapping keys

```python
from skylinekit.keys import KF_EXTENDED, Key, VirtualKey, key_event_to_key

assert key_event_to_key(VirtualKey.TAB, 0) is Key.TAB
assert key_event_to_key(ord("A"), 0) is Key.A
assert key_event_to_key(VirtualKey.RETURN, KF_EXTENDED << 16) is Key.KEYPAD_ENTER
assert key_event_to_key(0xFF, 0) is Key.NONE
```

Keypad Enter is Return with the extended-key flag in the high word of
`lparam`. Codes without a mapping give `Key.NONE`.

## Decoding mouse messages

```python
from skylinekit.mouse import (
    WM_XBUTTONDOWN, XBUTTON2, MouseButtonTracker, MouseSource,
    button_from_message, mouse_source_from_extra_info, wheel_delta,
)

assert mouse_source_from_extra_info(0xFF515700) is MouseSource.PEN
assert wheel_delta(120 << 16) == 1.0
assert button_from_message(WM_XBUTTONDOWN, XBUTTON2 << 16) == 4

buttons = MouseButtonTracker()
assert buttons.press(0)        # first button held: start capturing
assert not buttons.press(1)
assert not buttons.release(0)
assert buttons.release(1)      # nothing held any more: release capture
```

`button_from_message` treats double-click messages as presses and raises
`ValueError` for anything that is not a button message. `MouseButtonTracker`
accepts buttons 0 to 4 and raises `ValueError` for others.

## What this package does not do

It does not read the keyboard, mouse or gamepads itself, create or manage
windows, or keep per-frame key state. It only decodes values you hand it and
packs rectangles in memory.

## Running the tests

```
pip install "skylinekit[test]"
pytest
```