"""Neck and torso/shirt emitters.

All shirt styles share one torso outline and four-tone fill; each style then
overlays its own detail blocks. ``tank`` replaces the sleeve area with bare
shoulders in skin tones, and the arm emitter draws tank arms in skin tones
for every pose.
"""

from typing import Callable, Dict, List

from pixel_avatar.block import OUTLINE, PixelBlock, px
from pixel_avatar.palettes.catalog import resolve_or_default
from pixel_avatar.palettes.options import SHIRT_STYLES
from pixel_avatar.palettes.resolve import ResolvedPalette
from pixel_avatar.types import OptionID, ShirtStyle


ShirtDetailEmitter = Callable[[ResolvedPalette], List[PixelBlock]]


def emit_neck(palette: ResolvedPalette) -> List[PixelBlock]:
    return [
        px(OUTLINE, 6, 13, 4, 1),
        px(palette.skin.base, 6, 14, 4, 1),
        px(palette.skin.shadow, 7, 14, 2, 1),
    ]


def torso_base(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt = palette.shirt
    return [
        px(OUTLINE, 3, 14, 10, 1),
        px(OUTLINE, 2, 15, 1, 8),
        px(OUTLINE, 13, 15, 1, 8),
        px(shirt.highlight, 3, 15, 4, 2),
        px(shirt.base, 7, 15, 6, 2),
        px(shirt.base, 3, 17, 10, 3),
        px(shirt.midtone, 3, 20, 10, 2),
        px(shirt.shadow, 3, 21, 10, 1),
    ]


def tshirt_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    return []


def polo_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    return [
        px(palette.shirt.shadow, 6, 15, 4, 2),
        px(OUTLINE, 7, 15, 2, 3),
    ]


def hoodie_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt = palette.shirt
    return [
        px(shirt.shadow, 5, 15, 6, 3),
        px(shirt.midtone, 6, 17, 4, 3),
        # Hood edges
        px(shirt.shadow, 3, 15, 1, 3),
        px(shirt.shadow, 12, 15, 1, 3),
    ]


def sweater_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    midtone = palette.shirt.midtone
    return [px(midtone, 4, y, 8, 1) for y in (16, 18, 20)]


def tank_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(skin.base, 3, 15, 2, 3),
        px(skin.shadow, 3, 17, 2, 1),
        px(skin.base, 11, 15, 2, 3),
        px(skin.shadow, 11, 17, 2, 1),
    ]


def flannel_detail(palette: ResolvedPalette) -> List[PixelBlock]:
    shadow = palette.shirt.shadow
    return [px(shadow, x, 15, 1, 7) for x in (4, 6, 8, 10)]


SHIRT_DETAIL_EMITTERS: Dict[ShirtStyle, ShirtDetailEmitter] = {
    ShirtStyle.TSHIRT: tshirt_detail,
    ShirtStyle.POLO: polo_detail,
    ShirtStyle.HOODIE: hoodie_detail,
    ShirtStyle.SWEATER: sweater_detail,
    ShirtStyle.TANK: tank_detail,
    ShirtStyle.FLANNEL: flannel_detail,
}


def resolve_shirt_style(shirt_style: OptionID) -> ShirtStyle:
    return ShirtStyle(resolve_or_default(SHIRT_STYLES, shirt_style).id)


def emit_torso(shirt_style: OptionID, palette: ResolvedPalette) -> List[PixelBlock]:
    """Shared torso fill followed by the style's detail overlay."""
    detail = SHIRT_DETAIL_EMITTERS[resolve_shirt_style(shirt_style)]
    return torso_base(palette) + detail(palette)
