from __future__ import annotations

from eonje_swim.utils.geometry import Point, Rect, Size, place_popover

VIEWPORT = Size(1000, 800)
PICKER = Size(200, 300)


def test_opens_centred_below_anchor():
    anchor = Rect(left=400, top=100, width=80, height=64)
    assert place_popover(anchor, PICKER, VIEWPORT) == Point(x=340, y=172)


def test_flips_above_when_bottom_overflows():
    anchor = Rect(left=400, top=600, width=80, height=64)
    assert place_popover(anchor, PICKER, VIEWPORT).y == 600 - 300 - 8


def test_pins_to_bottom_padding_when_no_room_either_side():
    anchor = Rect(left=400, top=200, width=80, height=64)
    point = place_popover(anchor, Size(200, 600), Size(1000, 650))
    assert point.y == 650 - 600 - 16


def test_clamps_horizontally():
    left_edge = place_popover(Rect(left=0, top=100, width=80, height=64), PICKER, VIEWPORT)
    right_edge = place_popover(Rect(left=960, top=100, width=80, height=64), PICKER, VIEWPORT)
    assert left_edge.x == 16
    assert right_edge.x == 1000 - 200 - 16
