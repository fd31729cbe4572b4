"""Hair emitters.

Every style is an independent hand-authored layout; there is no shared
geometry between styles. Two passes exist:

* Back pass, placed before the head so strands hang behind the skull. Only
  ``long`` and ``dreads`` have one.
* Front pass, placed after the head. Every style except ``bald`` has one.

The afro front pass also repaints the upper face in skin tones, because its
fill covers the forehead.
"""

from typing import Callable, Dict, List

from pixel_avatar.block import OUTLINE, PixelBlock, px
from pixel_avatar.palettes.catalog import resolve_or_default
from pixel_avatar.palettes.options import HAIR_STYLES
from pixel_avatar.palettes.resolve import ResolvedPalette
from pixel_avatar.types import HairStyle, OptionID


HairEmitter = Callable[[ResolvedPalette], List[PixelBlock]]


# --- Back pass ---


def long_back(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 3, 3, 1, 18),
        px(OUTLINE, 12, 3, 1, 18),
        px(hair.shadow, 4, 4, 2, 16),
        px(hair.base, 6, 4, 4, 14),
        px(hair.shadow, 10, 4, 2, 16),
    ]


def dreads_back(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        # Left strands
        px(OUTLINE, 1, 4, 1, 18),
        px(OUTLINE, 3, 5, 1, 16),
        px(hair.shadow, 2, 4, 1, 17),
        px(hair.base, 4, 5, 1, 14),
        # Right strands
        px(OUTLINE, 14, 4, 1, 18),
        px(OUTLINE, 12, 5, 1, 16),
        px(hair.shadow, 13, 4, 1, 17),
        px(hair.base, 11, 5, 1, 14),
    ]


HAIR_BACK_EMITTERS: Dict[HairStyle, HairEmitter] = {
    HairStyle.LONG: long_back,
    HairStyle.DREADS: dreads_back,
}


# --- Front pass ---


def short_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 1, 8, 1),
        px(OUTLINE, 3, 2, 1, 4),
        px(OUTLINE, 12, 2, 1, 4),
        px(hair.shadow, 4, 2, 8, 1),
        px(hair.base, 4, 3, 8, 2),
        px(hair.highlight, 5, 2, 4, 1),
        px(hair.midtone, 4, 5, 2, 1),
        px(hair.midtone, 10, 5, 2, 1),
    ]


def medium_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 0, 8, 1),
        px(OUTLINE, 3, 1, 1, 8),
        px(OUTLINE, 12, 1, 1, 8),
        px(hair.shadow, 4, 1, 8, 1),
        px(hair.base, 4, 2, 8, 3),
        px(hair.highlight, 5, 1, 4, 2),
        # Side locks
        px(hair.base, 4, 5, 2, 4),
        px(hair.shadow, 4, 7, 2, 2),
        px(hair.base, 10, 5, 2, 4),
        px(hair.shadow, 10, 7, 2, 2),
    ]


def long_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 0, 8, 1),
        px(OUTLINE, 3, 1, 1, 3),
        px(OUTLINE, 12, 1, 1, 3),
        px(hair.shadow, 4, 1, 8, 1),
        px(hair.base, 4, 2, 8, 3),
        px(hair.highlight, 5, 1, 4, 2),
    ]


def curly_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 3, 0, 10, 1),
        px(OUTLINE, 2, 1, 1, 7),
        px(OUTLINE, 13, 1, 1, 7),
        px(hair.shadow, 3, 1, 10, 1),
        px(hair.base, 3, 2, 10, 4),
        px(hair.highlight, 4, 1, 3, 2),
        px(hair.highlight, 8, 1, 3, 2),
        # Curls
        px(hair.shadow, 3, 4),
        px(hair.shadow, 5, 3),
        px(hair.shadow, 7, 4),
        px(hair.shadow, 9, 3),
        px(hair.shadow, 11, 4),
        px(hair.base, 3, 6, 2, 2),
        px(hair.base, 11, 6, 2, 2),
    ]


def afro_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    skin = palette.skin
    return [
        px(OUTLINE, 2, -3, 12, 1),
        px(OUTLINE, 1, -2, 1, 10),
        px(OUTLINE, 14, -2, 1, 10),
        px(OUTLINE, 2, 8, 2, 1),
        px(OUTLINE, 12, 8, 2, 1),
        px(hair.base, 2, -2, 12, 10),
        px(hair.highlight, 3, -2, 4, 2),
        px(hair.highlight, 9, -2, 4, 2),
        px(hair.shadow, 2, 4, 2, 4),
        px(hair.shadow, 12, 4, 2, 4),
        # Texture
        px(hair.midtone, 4, 0),
        px(hair.midtone, 6, -1),
        px(hair.midtone, 9, -1),
        px(hair.midtone, 11, 0),
        # Face window
        px(skin.base, 5, 5, 6, 3),
        px(skin.highlight, 5, 5, 3, 2),
    ]


def dreads_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 0, 8, 1),
        px(OUTLINE, 3, 1, 1, 4),
        px(OUTLINE, 12, 1, 1, 4),
        px(hair.shadow, 4, 1, 8, 1),
        px(hair.base, 4, 2, 8, 3),
        px(hair.highlight, 5, 1, 4, 2),
        px(hair.base, 5, 5, 1, 4),
        px(hair.base, 10, 5, 1, 4),
    ]


def ponytail_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 1, 8, 1),
        px(OUTLINE, 3, 2, 1, 4),
        px(OUTLINE, 12, 2, 1, 12),
        px(OUTLINE, 13, 5, 1, 10),
        px(hair.shadow, 4, 2, 8, 1),
        px(hair.base, 4, 3, 8, 3),
        px(hair.highlight, 5, 2, 4, 2),
        # Tail
        px(hair.base, 12, 6, 1, 8),
        px(hair.shadow, 12, 10, 1, 4),
    ]


def bun_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 1, 8, 1),
        px(OUTLINE, 3, 2, 1, 4),
        px(OUTLINE, 12, 2, 1, 4),
        px(OUTLINE, 6, -2, 4, 1),
        px(OUTLINE, 5, -1, 1, 3),
        px(OUTLINE, 10, -1, 1, 3),
        px(hair.shadow, 4, 2, 8, 1),
        px(hair.base, 4, 3, 8, 3),
        px(hair.highlight, 5, 2, 4, 2),
        # Bun
        px(hair.base, 6, -1, 4, 3),
        px(hair.highlight, 7, -1, 2, 1),
        px(hair.shadow, 6, 1, 4, 1),
    ]


def spiky_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 3, 2, 1, 4),
        px(OUTLINE, 12, 2, 1, 4),
        px(OUTLINE, 3, -1, 2, 1),
        px(OUTLINE, 6, -2, 2, 1),
        px(OUTLINE, 9, -2, 2, 1),
        px(OUTLINE, 12, -1, 2, 1),
        px(hair.base, 4, 0, 8, 5),
        px(hair.base, 4, -1, 2, 1),
        px(hair.base, 6, -2, 2, 2),
        px(hair.base, 9, -2, 2, 2),
        px(hair.base, 11, -1, 2, 1),
        px(hair.highlight, 5, 0, 2, 2),
        px(hair.highlight, 7, -1, 1, 2),
        px(hair.highlight, 10, -1, 1, 2),
    ]


def mohawk_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 6, -4, 4, 1),
        px(OUTLINE, 5, -3, 1, 9),
        px(OUTLINE, 10, -3, 1, 9),
        px(OUTLINE, 4, 4, 1, 2),
        px(OUTLINE, 11, 4, 1, 2),
        px(hair.base, 6, -3, 4, 9),
        px(hair.highlight, 7, -3, 2, 3),
        px(hair.shadow, 6, 4, 4, 2),
    ]


def pigtails_front(palette: ResolvedPalette) -> List[PixelBlock]:
    hair = palette.hair
    return [
        px(OUTLINE, 4, 1, 8, 1),
        px(OUTLINE, 3, 2, 1, 4),
        px(OUTLINE, 12, 2, 1, 4),
        # Left tail outline
        px(OUTLINE, 0, 5, 1, 10),
        px(OUTLINE, 1, 4, 2, 1),
        px(OUTLINE, 3, 5, 1, 9),
        # Right tail outline
        px(OUTLINE, 15, 5, 1, 10),
        px(OUTLINE, 13, 4, 2, 1),
        px(OUTLINE, 12, 5, 1, 9),
        px(hair.shadow, 4, 2, 8, 1),
        px(hair.base, 4, 3, 8, 3),
        px(hair.highlight, 5, 2, 4, 2),
        px(hair.base, 1, 5, 2, 9),
        px(hair.shadow, 1, 10, 2, 4),
        px(hair.base, 13, 5, 2, 9),
        px(hair.shadow, 13, 10, 2, 4),
    ]


def bald_front(palette: ResolvedPalette) -> List[PixelBlock]:
    return []


HAIR_FRONT_EMITTERS: Dict[HairStyle, HairEmitter] = {
    HairStyle.SHORT: short_front,
    HairStyle.MEDIUM: medium_front,
    HairStyle.LONG: long_front,
    HairStyle.CURLY: curly_front,
    HairStyle.AFRO: afro_front,
    HairStyle.DREADS: dreads_front,
    HairStyle.PONYTAIL: ponytail_front,
    HairStyle.BUN: bun_front,
    HairStyle.SPIKY: spiky_front,
    HairStyle.MOHAWK: mohawk_front,
    HairStyle.PIGTAILS: pigtails_front,
    HairStyle.BALD: bald_front,
}


def resolve_hair_style(hair_style: OptionID) -> HairStyle:
    return HairStyle(resolve_or_default(HAIR_STYLES, hair_style).id)


def emit_hair_back(hair_style: OptionID, palette: ResolvedPalette) -> List[PixelBlock]:
    """Blocks drawn behind the head; empty for styles without a back pass."""
    emitter = HAIR_BACK_EMITTERS.get(resolve_hair_style(hair_style))
    if emitter is None:
        return []
    return emitter(palette)


def emit_hair_front(
    hair_style: OptionID, palette: ResolvedPalette
) -> List[PixelBlock]:
    """Blocks drawn over the head; empty for ``bald``."""
    return HAIR_FRONT_EMITTERS[resolve_hair_style(hair_style)](palette)
