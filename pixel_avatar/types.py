"""Common type aliases and enumerations.

Option ids are plain strings on :class:`~pixel_avatar.character.CharacterConfig`
so that stale persisted ids can still be represented; the enums below list
the ids the emitters know how to draw. ``StrEnum`` members compare equal to
their string values, so either form can be used for lookups.
"""

from enum import StrEnum, auto


Color = str
"""Hex color string (``#RRGGBB``)."""

OptionID = str


class HairStyle(StrEnum):
    SHORT = auto()
    MEDIUM = auto()
    LONG = auto()
    CURLY = auto()
    AFRO = auto()
    DREADS = auto()
    PONYTAIL = auto()
    BUN = auto()
    SPIKY = auto()
    MOHAWK = auto()
    PIGTAILS = auto()
    BALD = auto()


class ShirtStyle(StrEnum):
    TSHIRT = auto()
    POLO = auto()
    HOODIE = auto()
    SWEATER = auto()
    TANK = auto()
    FLANNEL = auto()


class PantsStyle(StrEnum):
    JEANS = auto()
    SHORTS = auto()
    SKIRT = auto()
    DRESS = auto()


class Accessory(StrEnum):
    NONE = auto()
    GLASSES = auto()
    WINGS = auto()
    STAFF = auto()
    UNICORN_HORN = auto()
    SUNGLASSES = auto()
    HAT_CAP = auto()
    HAT_BEANIE = auto()
    HAT_COWBOY = auto()
    EARRINGS = auto()
    NECKLACE = auto()
    SCARF = auto()
    PRIDE_FLAG = auto()
    HALO = auto()
    CROWN = auto()


class Pose(StrEnum):
    """Poses with hand-authored arm geometry.

    The pose catalog also lists ids without geometry (``dab``, ``flexing``...);
    those render with the idle layout.
    """

    IDLE = auto()
    WAVING = auto()
    RAISING_ROOF = auto()
    ROBOT = auto()
    TPOSE = auto()
    KARATE = auto()


class LayerName(StrEnum):
    """Composite layers in back-to-front order."""

    HAIR_BACK = auto()
    ACCESSORY_BACK = auto()
    HEAD = auto()
    HAIR_FRONT = auto()
    ACCESSORY_FRONT = auto()
    NECK = auto()
    TORSO = auto()
    ARMS = auto()
    LEGS = auto()
    SHOES = auto()
