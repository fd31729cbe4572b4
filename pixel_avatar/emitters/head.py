"""Head and face emitter.

Structurally constant: only the skin tones vary between avatars.
"""

from typing import List

from pixel_avatar.block import OUTLINE, WHITE, PixelBlock, px
from pixel_avatar.palettes.resolve import ResolvedPalette


IRIS = "#4080FF"
LIPS = "#c08070"


def emit_head(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        # Outline
        px(OUTLINE, 5, 4, 6, 1),
        px(OUTLINE, 4, 5, 1, 8),
        px(OUTLINE, 11, 5, 1, 8),
        px(OUTLINE, 5, 13, 6, 1),
        # Fill, lit from the top left
        px(skin.highlight, 5, 5, 3, 2),
        px(skin.base, 8, 5, 3, 2),
        px(skin.base, 5, 7, 6, 3),
        px(skin.midtone, 5, 10, 6, 2),
        px(skin.shadow, 5, 12, 6, 1),
        # Eyes
        px(WHITE, 5, 7, 2, 2),
        px(WHITE, 9, 7, 2, 2),
        px(OUTLINE, 6, 7, 1, 2),
        px(OUTLINE, 9, 7, 1, 2),
        px(IRIS, 6, 8),
        px(IRIS, 9, 8),
        # Nose
        px(skin.shadow, 7, 9, 2, 1),
        # Mouth
        px(skin.shadow, 6, 11, 4, 1),
        px(LIPS, 7, 11, 2, 1),
        # Ears
        px(skin.midtone, 4, 8, 1, 2),
        px(skin.midtone, 11, 8, 1, 2),
    ]
