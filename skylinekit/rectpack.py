"""Skyline bottom-left / best-fit rectangle packing into a fixed target area."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

MAX_COORD = 0x7FFFFFFF
"""Largest supported coordinate; failed rectangles are placed at this value."""

_SENTINEL_Y = 1 << 30
_BIG = 1 << 30


class Heuristic(IntEnum):
    """Placement heuristic used by :class:`RectPacker`."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    SKYLINE_DEFAULT = 0


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in by packing."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass
class _Node:
    x: int
    y: int


@dataclass
class _Placement:
    index: int
    x: int
    y: int


class RectPacker:
    """Packs rectangles into a ``width`` x ``height`` area without rotation.

    ``num_nodes`` bounds the number of skyline segments that can exist at once,
    mirroring the fixed temporary storage of the skyline algorithm.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT
        self.align = 1
        # The first node spans the full width; the second is the sentinel.
        self._active: List[_Node] = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.set_allow_out_of_mem(False)

    @property
    def _free_nodes(self) -> int:
        return self.num_nodes + 2 - len(self._active)

    def set_allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and quantized widths."""
        if allow:
            self.align = 1
        else:
            self.align = (self.width + self.num_nodes - 1) // self.num_nodes

    def set_heuristic(self, heuristic: int) -> None:
        """Select the placement heuristic."""
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            raise ValueError(f"unknown packing heuristic: {heuristic!r}") from None

    def _find_min_y(self, first: int, x0: int, width: int) -> Tuple[int, int]:
        active = self._active
        x1 = x0 + width
        min_y = 0
        waste_area = 0
        visited_width = 0
        i = first
        while active[i].x < x1:
            node, nxt = active[i], active[i + 1]
            if node.y > min_y:
                waste_area += visited_width * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited_width += nxt.x - x0
                else:
                    visited_width += nxt.x - node.x
            else:
                under_width = nxt.x - node.x
                if under_width + visited_width > width:
                    under_width = width - visited_width
                waste_area += under_width * (min_y - node.y)
                visited_width += under_width
            i += 1
        return min_y, waste_area

    def _find_best_pos(self, width: int, height: int) -> Optional[_Placement]:
        width += self.align - 1
        width -= width % self.align

        if width > self.width or height > self.height:
            return None

        active = self._active
        best: Optional[int] = None
        best_y = _BIG
        best_waste = _BIG
        bottom_left = self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT

        i = 0
        while active[i].x + width <= self.width:
            y, waste = self._find_min_y(i, active[i].x, width)
            if bottom_left:
                if y < best_y:
                    best_y = y
                    best = i
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = i
            i += 1

        best_x = 0 if best is None else active[best].x

        if self.heuristic == Heuristic.SKYLINE_BF_SORT_HEIGHT:
            # Also try aligning the right edge with each skyline node.
            node = 0
            tail = 0
            while active[tail].x < width:
                tail += 1
            while tail < len(active):
                xpos = active[tail].x - width
                while active[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = node
                tail += 1

        if best is None:
            return None
        return _Placement(best, best_x, best_y)

    def _pack_one(self, width: int, height: int) -> Optional[Tuple[int, int]]:
        res = self._find_best_pos(width, height)
        if res is None or res.y + height > self.height or self._free_nodes == 0:
            return None

        active = self._active
        new_node = _Node(res.x, res.y + height)
        start = res.index + 1 if active[res.index].x < res.x else res.index

        right = res.x + width
        cur = start
        while cur + 1 < len(active) and active[cur + 1].x <= right:
            cur += 1
        if active[cur].x < right:
            active[cur].x = right
        active[start:cur] = [new_node]
        return res.x, res.y

    def pack(self, rects: Sequence[Rect]) -> bool:
        """Place ``rects`` in the target; return True if every one of them fit.

        Each rectangle's ``x``, ``y`` and ``was_packed`` are updated in place.
        Rectangles that do not fit are placed at ``(MAX_COORD, MAX_COORD)``.
        """
        order = sorted(range(len(rects)), key=lambda i: (-rects[i].h, -rects[i].w))
        for i in order:
            rect = rects[i]
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            spot = self._pack_one(rect.w, rect.h)
            if spot is None:
                rect.x = rect.y = MAX_COORD
            else:
                rect.x, rect.y = spot

        all_packed = True
        for rect in rects:
            rect.was_packed = not (rect.x == MAX_COORD and rect.y == MAX_COORD)
            all_packed = all_packed and rect.was_packed
        return all_packed

    def skyline(self) -> Iterable[Tuple[int, int]]:
        """Yield the current skyline as ``(x, y)`` segment starts, sentinel included."""
        for node in self._active:
            yield node.x, node.y