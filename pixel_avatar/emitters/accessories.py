"""Accessory emitters.

Exactly one accessory is active per avatar. Each accessory draws in one of two
passes:

* Back pass (before the head): ``wings``, ``staff``, ``unicorn_horn``.
* Front pass (after the front hair): glasses, sunglasses, hats, crown, halo,
  earrings, pride flag, necklace, scarf.

``none`` draws nothing in either pass. Accessory colors are fixed; they do not
follow the avatar palette.
"""

from typing import Callable, Dict, List

from pixel_avatar.block import OUTLINE, WHITE, PixelBlock, px
from pixel_avatar.palettes.catalog import resolve_or_default
from pixel_avatar.palettes.options import ACCESSORIES
from pixel_avatar.types import Accessory, OptionID


AccessoryEmitter = Callable[[], List[PixelBlock]]

GOLD = "#FFD700"
PALE_GOLD = "#FFEC8B"
DARK_GOLD = "#B8960C"
RED = "#DC2626"
LIGHT_RED = "#F04040"
DARK_RED = "#9c1818"
FRAME = "#4a4a4a"
LENS_TINT = "#1a1a1a"


# --- Back pass ---


def wings() -> List[PixelBlock]:
    return [
        # Left wing
        px(OUTLINE, -3, 12, 1, 10),
        px(OUTLINE, -2, 11),
        px(OUTLINE, -1, 10),
        px(OUTLINE, -2, 22, 2, 1),
        px(WHITE, -2, 12, 3, 3),
        px("#F0F0FF", -1, 11, 2, 2),
        px("#E8E8F8", -2, 15, 3, 4),
        px("#D8D8F0", -1, 19, 2, 3),
        px("#C8C8E8", 0, 20, 1, 2),
        # Right wing
        px(OUTLINE, 18, 12, 1, 10),
        px(OUTLINE, 17, 11),
        px(OUTLINE, 16, 10),
        px(OUTLINE, 16, 22, 2, 1),
        px(WHITE, 15, 12, 3, 3),
        px("#F0F0FF", 15, 11, 2, 2),
        px("#E8E8F8", 15, 15, 3, 4),
        px("#D8D8F0", 15, 19, 2, 3),
        px("#C8C8E8", 15, 20, 1, 2),
    ]


def staff() -> List[PixelBlock]:
    return [
        # Pole
        px(OUTLINE, -2, 10, 1, 24),
        px("#8B4513", -1, 11, 1, 22),
        px("#A0522D", -1, 11, 1, 8),
        px("#6B3510", -1, 28, 1, 5),
        # Orb
        px(OUTLINE, -3, 7, 5, 1),
        px(OUTLINE, -4, 8, 1, 3),
        px(OUTLINE, 1, 8, 1, 3),
        px(OUTLINE, -3, 11, 5, 1),
        px("#9370DB", -3, 8, 5, 3),
        px("#BA55D3", -2, 8, 2, 2),
        px("#E6E6FA", -2, 8),
    ]


def unicorn_horn() -> List[PixelBlock]:
    return [
        px(OUTLINE, 7, -3, 2, 1),
        px(OUTLINE, 6, -2, 1, 3),
        px(OUTLINE, 9, -2, 1, 3),
        px(OUTLINE, 7, 1, 2, 1),
        # Spiral
        px("#FFF8DC", 7, -2, 2, 4),
        px("#FFE4B5", 7, -1),
        px("#FFE4B5", 8, 0),
        px(GOLD, 7, 0),
        # Sparkles
        px(WHITE, 5, -2),
        px(WHITE, 10, -1),
    ]


# --- Front pass ---


def glasses_frame() -> List[PixelBlock]:
    return [
        px(FRAME, 4, 7, 8, 1),
        px(FRAME, 4, 9, 3, 1),
        px(FRAME, 9, 9, 3, 1),
        px(FRAME, 4, 7, 1, 3),
        px(FRAME, 6, 7, 1, 3),
        px(FRAME, 9, 7, 1, 3),
        px(FRAME, 11, 7, 1, 3),
    ]


def glasses() -> List[PixelBlock]:
    return glasses_frame()


def sunglasses() -> List[PixelBlock]:
    return glasses_frame() + [
        px(LENS_TINT, 5, 8),
        px(LENS_TINT, 10, 8),
    ]


def hat_cap() -> List[PixelBlock]:
    return [
        px(OUTLINE, 3, 0, 10, 1),
        px(OUTLINE, 2, 1, 1, 4),
        px(OUTLINE, 13, 1, 1, 3),
        px(OUTLINE, 0, 4, 3, 1),
        px(RED, 3, 1, 10, 4),
        px(LIGHT_RED, 4, 1, 4, 2),
        px(DARK_RED, 3, 4, 10, 1),
        # Brim
        px(DARK_RED, 0, 5, 4, 1),
    ]


def hat_beanie() -> List[PixelBlock]:
    return [
        px(OUTLINE, 4, -1, 8, 1),
        px(OUTLINE, 3, 0, 1, 5),
        px(OUTLINE, 12, 0, 1, 5),
        px(OUTLINE, 6, -3, 4, 1),
        px(OUTLINE, 5, -2, 1, 2),
        px(OUTLINE, 10, -2, 1, 2),
        px("#7C3AED", 4, 0, 8, 5),
        px("#9F67FF", 4, 0, 8, 2),
        px("#6820b0", 4, 4, 8, 1),
        # Pom
        px("#7C3AED", 6, -2, 4, 2),
        px("#9F67FF", 7, -2, 2, 1),
    ]


def hat_cowboy() -> List[PixelBlock]:
    return [
        px(OUTLINE, 0, 3, 16, 1),
        px(OUTLINE, 4, -1, 8, 1),
        px(OUTLINE, 3, 0, 1, 4),
        px(OUTLINE, 12, 0, 1, 4),
        # Brim
        px("#8B4513", 1, 4, 14, 2),
        px("#A65D2E", 2, 4, 4, 1),
        px("#A65D2E", 10, 4, 4, 1),
        px("#5c2d0c", 1, 5, 14, 1),
        # Crown
        px("#8B4513", 4, 0, 8, 4),
        px("#A65D2E", 5, 0, 4, 2),
        px("#5c2d0c", 4, 3, 8, 1),
    ]


def crown() -> List[PixelBlock]:
    return [
        px(OUTLINE, 4, 1, 8, 1),
        px(OUTLINE, 3, 2, 1, 3),
        px(OUTLINE, 12, 2, 1, 3),
        px(OUTLINE, 4, -1, 2, 1),
        px(OUTLINE, 7, -2, 2, 1),
        px(OUTLINE, 10, -1, 2, 1),
        px(GOLD, 4, 2, 8, 3),
        px(PALE_GOLD, 5, 2, 4, 2),
        px(DARK_GOLD, 4, 4, 8, 1),
        px(GOLD, 4, 0, 2, 2),
        px(GOLD, 7, -1, 2, 3),
        px(GOLD, 10, 0, 2, 2),
        # Jewels
        px(RED, 8, 0),
        px("#2563EB", 5, 3),
        px("#16A34A", 10, 3),
    ]


def halo() -> List[PixelBlock]:
    return [
        px(OUTLINE, 4, -1, 8, 1),
        px(GOLD, 4, 0, 8, 1),
        px(PALE_GOLD, 5, 0, 6, 1),
    ]


def earrings() -> List[PixelBlock]:
    return [
        px(GOLD, 4, 9, 1, 2),
        px(PALE_GOLD, 4, 9),
        px(GOLD, 11, 9, 1, 2),
        px(PALE_GOLD, 11, 9),
    ]


def pride_flag() -> List[PixelBlock]:
    return [
        px(OUTLINE, 14, 15, 1, 10),
        px("#E40303", 15, 15),
        px("#FF8C00", 15, 16),
        px("#FFED00", 15, 17, 1, 2),
        px("#008026", 15, 19),
        px("#004DFF", 15, 20, 1, 2),
        px("#750787", 15, 22, 1, 2),
    ]


def necklace() -> List[PixelBlock]:
    return [
        px(DARK_GOLD, 6, 15, 4, 1),
        px(GOLD, 7, 16, 2, 1),
        px(PALE_GOLD, 7, 16),
    ]


def scarf() -> List[PixelBlock]:
    return [
        px(RED, 3, 14, 10, 2),
        px(LIGHT_RED, 4, 14, 4, 1),
        px(DARK_RED, 3, 15, 10, 1),
        # Tail
        px(RED, 10, 16, 2, 4),
        px(DARK_RED, 10, 18, 2, 2),
    ]


ACCESSORY_BACK_EMITTERS: Dict[Accessory, AccessoryEmitter] = {
    Accessory.WINGS: wings,
    Accessory.STAFF: staff,
    Accessory.UNICORN_HORN: unicorn_horn,
}

ACCESSORY_FRONT_EMITTERS: Dict[Accessory, AccessoryEmitter] = {
    Accessory.GLASSES: glasses,
    Accessory.SUNGLASSES: sunglasses,
    Accessory.HAT_CAP: hat_cap,
    Accessory.HAT_BEANIE: hat_beanie,
    Accessory.HAT_COWBOY: hat_cowboy,
    Accessory.CROWN: crown,
    Accessory.HALO: halo,
    Accessory.EARRINGS: earrings,
    Accessory.PRIDE_FLAG: pride_flag,
    Accessory.NECKLACE: necklace,
    Accessory.SCARF: scarf,
}


def resolve_accessory(accessory: OptionID) -> Accessory:
    return Accessory(resolve_or_default(ACCESSORIES, accessory).id)


def emit_accessory_back(accessory: OptionID) -> List[PixelBlock]:
    emitter = ACCESSORY_BACK_EMITTERS.get(resolve_accessory(accessory))
    return emitter() if emitter is not None else []


def emit_accessory_front(accessory: OptionID) -> List[PixelBlock]:
    emitter = ACCESSORY_FRONT_EMITTERS.get(resolve_accessory(accessory))
    return emitter() if emitter is not None else []
