import itertools
import random

import pytest

from skylinekit.rectpack import MAX_COORD, Heuristic, Rect, RectPacker


def _assert_valid_layout(rects, width, height):
    placed = [r for r in rects if r.was_packed and r.w and r.h]
    for r in placed:
        assert 0 <= r.x and r.x + r.w <= width
        assert 0 <= r.y and r.y + r.h <= height
    for a, b in itertools.combinations(placed, 2):
        overlap = (
            a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h
        )
        assert not overlap, (a, b)


def test_single_rect_goes_to_origin():
    packer = RectPacker(64, 64, 64)
    rect = Rect(w=10, h=20)
    assert packer.pack([rect]) is True
    assert (rect.x, rect.y, rect.was_packed) == (0, 0, True)


def test_two_rects_side_by_side():
    packer = RectPacker(20, 10, 20)
    rects = [Rect(w=10, h=10, id=1), Rect(w=10, h=10, id=2)]
    assert packer.pack(rects)
    assert sorted((r.x, r.y) for r in rects) == [(0, 0), (10, 0)]


def test_too_large_rect_fails():
    packer = RectPacker(16, 16, 16)
    rect = Rect(w=17, h=4)
    assert packer.pack([rect]) is False
    assert (rect.x, rect.y) == (MAX_COORD, MAX_COORD)
    assert rect.was_packed is False


def test_empty_rects_need_no_space():
    packer = RectPacker(4, 4, 4)
    rects = [Rect(w=0, h=5), Rect(w=5, h=0)]
    assert packer.pack(rects) is True
    assert all((r.x, r.y) == (0, 0) and r.was_packed for r in rects)


def test_order_and_ids_are_preserved():
    packer = RectPacker(100, 100, 100)
    rects = [Rect(w=5, h=i + 1, id=i) for i in range(10)]
    packer.pack(rects)
    assert [r.id for r in rects] == list(range(10))
    assert [r.h for r in rects] == list(range(1, 11))


@pytest.mark.parametrize(
    "heuristic", [Heuristic.SKYLINE_BL_SORT_HEIGHT, Heuristic.SKYLINE_BF_SORT_HEIGHT]
)
@pytest.mark.parametrize("allow_oom", [False, True])
def test_random_layouts_do_not_overlap(heuristic, allow_oom):
    rng = random.Random(1234)
    width, height = 128, 128
    packer = RectPacker(width, height, width)
    packer.set_heuristic(heuristic)
    packer.set_allow_out_of_mem(allow_oom)
    rects = [Rect(w=rng.randint(1, 30), h=rng.randint(1, 30), id=i) for i in range(60)]
    result = packer.pack(rects)
    assert result == all(r.was_packed for r in rects)
    _assert_valid_layout(rects, width, height)


def test_overflowing_set_reports_failure_but_keeps_valid_layout():
    packer = RectPacker(32, 32, 32)
    rects = [Rect(w=16, h=16, id=i) for i in range(6)]
    assert packer.pack(rects) is False
    assert sum(r.was_packed for r in rects) == 4
    _assert_valid_layout(rects, 32, 32)


def test_repeated_pack_calls_continue_in_same_area():
    packer = RectPacker(32, 32, 32)
    first = [Rect(w=32, h=16)]
    second = [Rect(w=32, h=16)]
    assert packer.pack(first)
    assert packer.pack(second)
    _assert_valid_layout(first + second, 32, 32)
    third = [Rect(w=1, h=1)]
    assert packer.pack(third) is False


def test_out_of_nodes_when_allowed():
    packer = RectPacker(20, 20, 1)
    packer.set_allow_out_of_mem(True)
    rects = [Rect(w=5, h=5, id=0), Rect(w=5, h=5, id=1)]
    assert packer.pack(rects) is False
    assert [r.was_packed for r in rects].count(True) == 1


def test_skyline_starts_flat_with_sentinel():
    packer = RectPacker(50, 40, 10)
    assert list(packer.skyline()) == [(0, 0), (50, 1 << 30)]


def test_set_heuristic_rejects_unknown():
    packer = RectPacker(8, 8, 8)
    with pytest.raises(ValueError):
        packer.set_heuristic(7)


def test_set_heuristic_accepts_int():
    packer = RectPacker(8, 8, 8)
    packer.set_heuristic(1)
    assert packer.heuristic is Heuristic.SKYLINE_BF_SORT_HEIGHT


def test_zero_nodes_rejected():
    with pytest.raises(ValueError):
        RectPacker(8, 8, 0)


def test_best_fit_fills_tall_stack():
    packer = RectPacker(10, 30, 10)
    packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)
    rects = [Rect(w=10, h=10, id=i) for i in range(3)]
    assert packer.pack(rects)
    assert sorted(r.y for r in rects) == [0, 10, 20]
    assert all(r.x == 0 for r in rects)