from __future__ import annotations

from dataclasses import dataclass

VIEWPORT_PADDING = 16
ANCHOR_SPACING = 8


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def place_popover(
    anchor: Rect,
    content: Size,
    viewport: Size,
    *,
    padding: float = VIEWPORT_PADDING,
    spacing: float = ANCHOR_SPACING,
) -> Point:
    """Top-left corner for a popover attached to ``anchor``.

    The popover sits centred below the anchor. When its bottom edge would
    leave the padded viewport it flips above the anchor, or is pinned to the
    bottom padding when there is no room above either. Horizontally it is
    clamped inside the padding.
    """

    top = anchor.bottom + spacing
    left = anchor.left + anchor.width / 2 - content.width / 2

    if top + content.height > viewport.height - padding:
        flipped = anchor.top - content.height - spacing
        if flipped >= padding:
            top = flipped
        else:
            top = max(padding, viewport.height - content.height - padding)

    if left < padding:
        left = padding
    elif left + content.width > viewport.width - padding:
        left = viewport.width - content.width - padding

    return Point(x=left, y=top)
