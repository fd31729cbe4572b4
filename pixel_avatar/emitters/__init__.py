"""Per-feature block emitters.

Each emitter is a pure function from resolved palettes (and the style or pose
ids it branches on) to an ordered list of :class:`~pixel_avatar.block.PixelBlock`.
Emitters work in logical grid units; scaling happens only in the renderer
adapter. Style and pose ids are resolved through their catalogs before
dispatch, so unknown ids fall back instead of raising.

Layouts are literal, hand-authored pixel art organized as dispatch tables
with one entry per option id.
"""

from .accessories import emit_accessory_back, emit_accessory_front
from .arms import emit_arms, emit_left_arm, emit_right_arm
from .hair import emit_hair_back, emit_hair_front
from .head import emit_head
from .legs import emit_legs
from .shoes import emit_shoes
from .torso import emit_neck, emit_torso

__all__ = [
    "emit_accessory_back",
    "emit_accessory_front",
    "emit_arms",
    "emit_left_arm",
    "emit_right_arm",
    "emit_hair_back",
    "emit_hair_front",
    "emit_head",
    "emit_legs",
    "emit_shoes",
    "emit_neck",
    "emit_torso",
]
