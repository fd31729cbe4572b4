"""Pillow rasterizer for composited avatars.

Blocks are painted in emission order into an RGBA NumPy buffer (later blocks
overwrite earlier ones) and the buffer is wrapped as a ``PIL.Image``. The
logical 16x32 canvas is scaled by ``size / 16``; ``margin`` adds logical units
of padding on every side so that parts drawn outside the canvas (wings, afro,
t-pose arms, the karate kick) stay visible. Anything beyond the padded canvas
is clipped.
"""

import logging
import string
from functools import lru_cache
from typing import Optional, Tuple, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from pixel_avatar.character import CharacterConfig
from pixel_avatar.compositor import Composition, compose
from pixel_avatar.types import Color


logger = logging.getLogger(__name__)

DEFAULT_SIZE = 80
DEFAULT_MARGIN = 0

RGBA = Tuple[int, int, int, int]
UInt8Array = npt.NDArray[np.uint8]


@lru_cache(maxsize=512)
def hex_to_rgba(color: Color) -> RGBA:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` into an RGBA tuple."""
    if not color.startswith("#"):
        raise ValueError(f"Not a hex color: {color!r}")
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Not a hex color: {color!r}")
    value = int(digits, 16)
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def rasterize(
    composition: Composition,
    size: int = DEFAULT_SIZE,
    margin: int = DEFAULT_MARGIN,
    background: Optional[Color] = None,
) -> UInt8Array:
    """Paint a composition into an ``(height, width, 4)`` uint8 array.

    Args:
        composition: Composited avatar.
        size: Pixel width of the logical canvas (margin excluded).
        margin: Logical units of padding added on each side.
        background: Fill color; transparent when None.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin}")

    scale = size / composition.width
    width = round((composition.width + 2 * margin) * scale)
    height = round((composition.height + 2 * margin) * scale)

    buffer: UInt8Array = np.zeros((height, width, 4), dtype=np.uint8)
    if background is not None:
        buffer[...] = hex_to_rgba(background)

    for block in composition.blocks:
        x0 = max(0, round((block.x + margin) * scale))
        y0 = max(0, round((block.y + margin) * scale))
        x1 = min(width, round((block.right + margin) * scale))
        y1 = min(height, round((block.bottom + margin) * scale))
        if x0 >= x1 or y0 >= y1:
            continue
        buffer[y0:y1, x0:x1] = hex_to_rgba(block.color)

    logger.debug(
        "Rasterized %d blocks at scale %.2f into %dx%d",
        len(composition.blocks),
        scale,
        width,
        height,
    )
    return buffer


def render(
    avatar: Union[CharacterConfig, Composition],
    size: int = DEFAULT_SIZE,
    margin: int = DEFAULT_MARGIN,
    background: Optional[Color] = None,
) -> Image.Image:
    """Render a config (composited on the fly) or a composition as RGBA."""
    composition = avatar if isinstance(avatar, Composition) else compose(avatar)
    buffer = rasterize(composition, size=size, margin=margin, background=background)
    return Image.fromarray(buffer)


class AvatarRenderer:
    size: int
    margin: int
    background: Optional[Color]

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        margin: int = DEFAULT_MARGIN,
        background: Optional[Color] = None,
    ):
        self.size = size
        self.margin = margin
        self.background = background

    def render(self, avatar: Union[CharacterConfig, Composition]) -> Image.Image:
        return render(
            avatar,
            size=self.size,
            margin=self.margin,
            background=self.background,
        )
