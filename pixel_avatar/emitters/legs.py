"""Legwear emitter.

``jeans`` draws two full-length legs, ``shorts`` and ``skirt`` share one short
garment block over skin-toned lower legs, and ``dress`` draws a single
lower-body shape with no leg separation.

Pose only matters for ``karate``: the right leg is redrawn as a horizontal
kick (with a kicking foot in shoe tones) while the left leg stays vertical.
The dress has no separate legs and ignores the kick.
"""

from typing import Callable, Dict, List

from pixel_avatar.block import OUTLINE, PixelBlock, px
from pixel_avatar.emitters.arms import resolve_pose
from pixel_avatar.palettes.catalog import resolve_or_default
from pixel_avatar.palettes.options import PANTS_STYLES
from pixel_avatar.palettes.resolve import ResolvedPalette
from pixel_avatar.types import OptionID, PantsStyle, Pose


LegsEmitter = Callable[[ResolvedPalette], List[PixelBlock]]


def leg_outline() -> List[PixelBlock]:
    return [
        px(OUTLINE, 3, 22, 4, 1),
        px(OUTLINE, 9, 22, 4, 1),
        px(OUTLINE, 2, 23, 1, 6),
        px(OUTLINE, 7, 23, 1, 6),
        px(OUTLINE, 8, 23, 1, 6),
        px(OUTLINE, 13, 23, 1, 6),
    ]


def jeans_legs(palette: ResolvedPalette) -> List[PixelBlock]:
    pants = palette.pants
    return leg_outline() + [
        px(pants.base, 3, 23, 4, 6),
        px(pants.highlight, 3, 23, 2, 2),
        px(pants.shadow, 3, 27, 4, 2),
        px(pants.base, 9, 23, 4, 6),
        px(pants.highlight, 11, 23, 2, 2),
        px(pants.shadow, 9, 27, 4, 2),
    ]


def short_garment_legs(palette: ResolvedPalette) -> List[PixelBlock]:
    pants, skin = palette.pants, palette.skin
    return leg_outline() + [
        px(pants.base, 3, 23, 10, 3),
        px(pants.highlight, 4, 23, 3, 1),
        px(pants.shadow, 3, 25, 10, 1),
        # Bare lower legs
        px(skin.base, 3, 26, 4, 3),
        px(skin.shadow, 3, 28, 4, 1),
        px(skin.base, 9, 26, 4, 3),
        px(skin.shadow, 9, 28, 4, 1),
    ]


def dress_legs(palette: ResolvedPalette) -> List[PixelBlock]:
    pants = palette.pants
    return [
        px(OUTLINE, 2, 22, 1, 7),
        px(OUTLINE, 13, 22, 1, 7),
        px(OUTLINE, 3, 29, 10, 1),
        px(pants.base, 3, 22, 10, 7),
        px(pants.highlight, 4, 22, 4, 2),
        px(pants.shadow, 3, 26, 10, 3),
        px(pants.midtone, 5, 24, 6, 1),
    ]


LEGS_EMITTERS: Dict[PantsStyle, LegsEmitter] = {
    PantsStyle.JEANS: jeans_legs,
    PantsStyle.SHORTS: short_garment_legs,
    PantsStyle.SKIRT: short_garment_legs,
    PantsStyle.DRESS: dress_legs,
}


def standing_left_leg(palette: ResolvedPalette) -> List[PixelBlock]:
    pants = palette.pants
    return [
        px(OUTLINE, 3, 22, 4, 1),
        px(OUTLINE, 2, 23, 1, 6),
        px(OUTLINE, 7, 23, 1, 6),
        px(pants.base, 3, 23, 4, 6),
        px(pants.highlight, 3, 23, 2, 2),
        px(pants.shadow, 3, 27, 4, 2),
    ]


def kicking_right_leg(palette: ResolvedPalette) -> List[PixelBlock]:
    pants, shoes = palette.pants, palette.shoes
    return [
        # Thigh
        px(OUTLINE, 9, 22, 4, 1),
        px(OUTLINE, 8, 23, 1, 3),
        px(OUTLINE, 13, 23, 1, 3),
        # Extended shin
        px(OUTLINE, 14, 24, 6, 1),
        px(OUTLINE, 19, 25, 1, 3),
        px(OUTLINE, 14, 28, 6, 1),
        px(pants.base, 9, 23, 4, 3),
        px(pants.base, 14, 25, 5, 3),
        px(pants.shadow, 14, 27, 5, 1),
        # Foot
        px(shoes.base, 18, 25, 2, 3),
        px(shoes.highlight, 19, 25, 1, 1),
        px(shoes.shadow, 18, 27, 2, 1),
    ]


def karate_legs(palette: ResolvedPalette) -> List[PixelBlock]:
    return standing_left_leg(palette) + kicking_right_leg(palette)


def resolve_pants_style(pants_style: OptionID) -> PantsStyle:
    return PantsStyle(resolve_or_default(PANTS_STYLES, pants_style).id)


def emit_legs(
    pants_style: OptionID, pose: OptionID, palette: ResolvedPalette
) -> List[PixelBlock]:
    style = resolve_pants_style(pants_style)
    if resolve_pose(pose) == Pose.KARATE and style != PantsStyle.DRESS:
        return karate_legs(palette)
    return LEGS_EMITTERS[style](palette)
