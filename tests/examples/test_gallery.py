# tests/examples/test_gallery.py

import numpy as np
import pytest

from pixel_avatar.character import CONFIG_FIELDS
from pixel_avatar.examples.gallery import FIELD_CATALOGS, render_gallery


def test_every_config_field_has_a_catalog() -> None:
    assert set(FIELD_CATALOGS) == set(CONFIG_FIELDS)


@pytest.mark.parametrize("field", ["hair_style", "shoe_color", "pose"])
def test_gallery_has_one_tile_per_entry(field: str) -> None:
    sheet = render_gallery(field, size=16, margin=0)
    assert sheet.size == (16 * len(FIELD_CATALOGS[field]), 32)


def test_gallery_default_tile_size() -> None:
    sheet = render_gallery("pants_style")
    assert sheet.size == (4 * 96, 160)


def test_gallery_tiles_differ() -> None:
    sheet = np.asarray(render_gallery("hair_style", size=16, margin=0))
    short, medium = sheet[:, 0:16], sheet[:, 16:32]
    assert not np.array_equal(short, medium)


def test_gallery_unknown_field() -> None:
    with pytest.raises(ValueError):
        render_gallery("cape")
