"""Pixel-art avatar compositor.

A :class:`CharacterConfig` of discrete choices (skin, hair, shirt, pants,
shoes, one accessory, one pose) is composited into an ordered list of colored
blocks on a 16x32 logical grid. Rendering is a pure function of the config:
the same config always yields the same blocks, and unknown option ids degrade
to catalog defaults instead of raising.

Typical use:

>>> from pixel_avatar import DEFAULT_CHARACTER, compose
>>> composition = compose(DEFAULT_CHARACTER)
>>> len(composition.blocks) > 0
True
"""

from pixel_avatar.block import CANVAS_HEIGHT, CANVAS_WIDTH, PixelBlock
from pixel_avatar.character import DEFAULT_CHARACTER, CharacterConfig
from pixel_avatar.compositor import Composition, Layer, compose, compose_blocks
from pixel_avatar.unlock import is_locked

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "PixelBlock",
    "DEFAULT_CHARACTER",
    "CharacterConfig",
    "Composition",
    "Layer",
    "compose",
    "compose_blocks",
    "is_locked",
]
