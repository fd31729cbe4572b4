"""Pixel block primitive and logical canvas constants.

All emitters work in logical grid units on a 16x32 canvas. Blocks may extend
past the canvas edges (wings, afro, t-pose arms, the karate kick); the
renderer adapter decides whether to clip or pad.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from pixel_avatar.types import Color


CANVAS_WIDTH = 16
CANVAS_HEIGHT = 32

OUTLINE: Color = "#1a1a1a"
WHITE: Color = "#FFFFFF"


@dataclass(frozen=True)
class PixelBlock:
    """Axis-aligned colored rectangle in logical grid units.

    Attributes:
        x: Left edge (0 at the left of the canvas, may be negative).
        y: Top edge (0 at the top of the canvas, may be negative).
        width: Width in grid units.
        height: Height in grid units.
        color: Hex fill color.
    """

    x: int
    y: int
    width: int
    height: int
    color: Color

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def as_tuple(self) -> Tuple[int, int, int, int, Color]:
        return (self.x, self.y, self.width, self.height, self.color)


def px(color: Color, x: int, y: int, w: int = 1, h: int = 1) -> PixelBlock:
    """Shorthand used by the emitters' literal layouts."""
    return PixelBlock(x=x, y=y, width=w, height=h, color=color)


Bounds = Tuple[int, int, int, int]


def bounds(blocks: Iterable[PixelBlock]) -> Optional[Bounds]:
    """Return ``(left, top, right, bottom)`` covering all blocks, or None if empty."""
    left: Optional[int] = None
    top = right = bottom = 0
    for block in blocks:
        if left is None:
            left, top, right, bottom = block.x, block.y, block.right, block.bottom
            continue
        left = min(left, block.x)
        top = min(top, block.y)
        right = max(right, block.right)
        bottom = max(bottom, block.bottom)
    if left is None:
        return None
    return (left, top, right, bottom)
