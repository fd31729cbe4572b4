"""Shoe emitter: two two-tone shoes, independent of pose and legwear."""

from typing import List

from pixel_avatar.block import OUTLINE, PixelBlock, px
from pixel_avatar.palettes.resolve import ResolvedPalette


def shoe(palette: ResolvedPalette, x: int, highlight_x: int) -> List[PixelBlock]:
    shoes = palette.shoes
    return [
        px(OUTLINE, x, 29, 5, 1),
        px(OUTLINE, x - 1, 30, 1, 2),
        px(OUTLINE, x + 5, 30, 1, 2),
        px(OUTLINE, x, 32, 5, 1),
        px(shoes.base, x, 30, 5, 2),
        px(shoes.highlight, highlight_x, 30, 2, 1),
        px(shoes.shadow, x, 31, 5, 1),
    ]


def emit_shoes(palette: ResolvedPalette) -> List[PixelBlock]:
    """Left shoe then right shoe; highlights sit on the outer edge of each."""
    return shoe(palette, 2, 2) + shoe(palette, 9, 12)
