"""Palette and option catalogs.

Static, process-wide lookup tables:

* Tone catalogs (:mod:`.tones`) map a color id to a four-tone
  :class:`ToneSet` {base, shadow, highlight, midtone}.
* Option catalogs (:mod:`.options`) map a style, accessory or pose id to a
  display name plus an optional unlock threshold.

Every lookup performed while rendering goes through
:func:`resolve_or_default`, so an unknown id degrades to a documented default
entry instead of raising.
"""

from .catalog import Catalog, OptionEntry, ToneSet, make_catalog, resolve_or_default
from .options import ACCESSORIES, HAIR_STYLES, PANTS_STYLES, POSES, SHIRT_STYLES
from .resolve import ResolvedPalette, resolve_palette
from .tones import HAIR_COLORS, PANTS_COLORS, SHIRT_COLORS, SHOE_COLORS, SKIN_TONES

__all__ = [
    "Catalog",
    "OptionEntry",
    "ToneSet",
    "make_catalog",
    "resolve_or_default",
    "ResolvedPalette",
    "resolve_palette",
    "ACCESSORIES",
    "HAIR_STYLES",
    "PANTS_STYLES",
    "POSES",
    "SHIRT_STYLES",
    "HAIR_COLORS",
    "PANTS_COLORS",
    "SHIRT_COLORS",
    "SHOE_COLORS",
    "SKIN_TONES",
]
