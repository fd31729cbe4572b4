"""Rendering subpackage.

Reference adapter that turns a :class:`~pixel_avatar.compositor.Composition`
into pixels. The compositor itself is renderer-agnostic; any host that can
draw colored rectangles can consume ``Composition.blocks`` or
``Composition.to_physical(size)`` directly.

See :mod:`pixel_avatar.renderer.image` for the Pillow + NumPy rasterizer.
"""

from .image import AvatarRenderer, hex_to_rgba, rasterize, render

__all__ = ["AvatarRenderer", "hex_to_rgba", "rasterize", "render"]
