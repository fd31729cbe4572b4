# tests/renderer/test_image_renderer.py

import logging

import numpy as np
import pytest

from pixel_avatar import DEFAULT_CHARACTER, compose
from pixel_avatar.renderer import AvatarRenderer, hex_to_rgba, rasterize, render
from pixel_avatar.renderer.image import RGBA
from pixel_avatar.types import Accessory
from tests.test_utils import make_config


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#FFDDC0", (255, 221, 192, 255)),
        ("#1a1a1a", (26, 26, 26, 255)),
        ("#abc", (170, 187, 204, 255)),
        ("#11223380", (17, 34, 51, 128)),
    ],
)
def test_hex_to_rgba(color: str, expected: RGBA) -> None:
    assert hex_to_rgba(color) == expected


@pytest.mark.parametrize(
    "color",
    ["red", "#12345", "#GGGGGG", "", "#+12345", "#0x1234", "#12_345", "# 12345"],
)
def test_hex_to_rgba_rejects_garbage(color: str) -> None:
    with pytest.raises(ValueError):
        hex_to_rgba(color)


def test_rasterize_shape() -> None:
    buffer = rasterize(compose(), size=80)
    assert buffer.shape == (160, 80, 4)
    assert buffer.dtype == np.uint8


@pytest.mark.parametrize("size, margin", [(0, 0), (-8, 0), (16, -1)])
def test_rasterize_rejects_bad_arguments(size: int, margin: int) -> None:
    with pytest.raises(ValueError):
        rasterize(compose(), size=size, margin=margin)


def test_render_paints_blocks_in_order() -> None:
    image = render(DEFAULT_CHARACTER, size=80)
    assert image.mode == "RGBA"
    assert image.size == (80, 160)
    # Cell (6, 5) is the lit side of the forehead.
    assert image.getpixel((6 * 5 + 2, 5 * 5 + 2)) == (255, 221, 192, 255)
    # Top-left corner is empty.
    assert image.getpixel((0, 0)) == (0, 0, 0, 0)


def test_render_background() -> None:
    image = render(DEFAULT_CHARACTER, size=16, background="#FFFFFF")
    assert image.getpixel((0, 0)) == (255, 255, 255, 255)


def test_margin_keeps_overflow_visible() -> None:
    config = make_config(accessory=Accessory.WINGS)
    clipped = render(config, size=80)
    padded = render(config, size=80, margin=4)
    assert clipped.size == (80, 160)
    assert padded.size == (120, 200)
    # Left wing outline at cell (-3, 12).
    assert padded.getpixel(((-3 + 4) * 5 + 2, (12 + 4) * 5 + 2)) == (26, 26, 26, 255)


def test_render_accepts_composition() -> None:
    composition = compose(make_config(hair_style="afro"))
    by_config = np.asarray(render(composition.config, size=32))
    by_composition = np.asarray(render(composition, size=32))
    assert np.array_equal(by_config, by_composition)


def test_avatar_renderer() -> None:
    renderer = AvatarRenderer(size=32, margin=2, background="#000000")
    image = renderer.render(DEFAULT_CHARACTER)
    assert image.size == (40, 72)
    assert image.getpixel((0, 0)) == (0, 0, 0, 255)


def test_rasterize_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pixel_avatar.renderer.image"):
        rasterize(compose(), size=16)
    assert "Rasterized" in caplog.text


@pytest.mark.parametrize("accessory", [Accessory.NECKLACE, Accessory.SCARF])
def test_neckwear_is_covered_by_neck_and_torso(accessory: Accessory) -> None:
    # Front accessories draw before neck and torso, which hide these two fully.
    plain = np.asarray(render(DEFAULT_CHARACTER, size=16))
    worn = np.asarray(render(make_config(accessory=accessory), size=16))
    assert np.array_equal(plain, worn)


def test_pride_flag_shows_below_the_arm() -> None:
    plain = np.asarray(render(DEFAULT_CHARACTER, size=16))
    worn = np.asarray(render(make_config(accessory=Accessory.PRIDE_FLAG), size=16))
    assert not np.array_equal(plain, worn)
