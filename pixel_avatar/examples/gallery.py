"""Contact sheets of every option in one category.

Renders the base avatar once per catalog entry of a config field, varying only
that field, and pastes the results side by side. Useful for eyeballing new
layouts next to existing ones.

Example:

>>> from pixel_avatar.examples.gallery import render_gallery
>>> render_gallery("hair_style").save("hair_styles.png")  # doctest: +SKIP
"""

from dataclasses import replace
from typing import Dict, Union

from PIL import Image

from pixel_avatar.character import DEFAULT_CHARACTER, CharacterConfig
from pixel_avatar.palettes import (
    ACCESSORIES,
    HAIR_COLORS,
    HAIR_STYLES,
    PANTS_COLORS,
    PANTS_STYLES,
    POSES,
    SHIRT_COLORS,
    SHIRT_STYLES,
    SHOE_COLORS,
    SKIN_TONES,
    Catalog,
    OptionEntry,
    ToneSet,
)
from pixel_avatar.renderer.image import render


AnyCatalog = Union[Catalog[ToneSet], Catalog[OptionEntry]]

FIELD_CATALOGS: Dict[str, AnyCatalog] = {
    "skin_tone": SKIN_TONES,
    "hair_style": HAIR_STYLES,
    "hair_color": HAIR_COLORS,
    "shirt_style": SHIRT_STYLES,
    "shirt_color": SHIRT_COLORS,
    "pants_style": PANTS_STYLES,
    "pants_color": PANTS_COLORS,
    "shoe_color": SHOE_COLORS,
    "accessory": ACCESSORIES,
    "pose": POSES,
}

DEFAULT_GALLERY_SIZE = 64
DEFAULT_GALLERY_MARGIN = 4


def render_gallery(
    field: str,
    base: CharacterConfig = DEFAULT_CHARACTER,
    size: int = DEFAULT_GALLERY_SIZE,
    margin: int = DEFAULT_GALLERY_MARGIN,
) -> Image.Image:
    """Render one avatar per entry of ``field``'s catalog, left to right."""
    if field not in FIELD_CATALOGS:
        raise ValueError(
            f"Unknown field {field!r}; expected one of {sorted(FIELD_CATALOGS)}"
        )
    tiles = [
        render(replace(base, **{field: entry.id}), size=size, margin=margin)
        for entry in FIELD_CATALOGS[field]
    ]
    tile_w, tile_h = tiles[0].size
    sheet = Image.new("RGBA", (tile_w * len(tiles), tile_h), (0, 0, 0, 0))
    for idx, tile in enumerate(tiles):
        sheet.alpha_composite(tile, (idx * tile_w, 0))
    return sheet
