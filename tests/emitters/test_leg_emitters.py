# tests/emitters/test_leg_emitters.py

import pytest

from pixel_avatar.emitters.legs import (
    LEGS_EMITTERS,
    dress_legs,
    emit_legs,
    jeans_legs,
    karate_legs,
    short_garment_legs,
)
from pixel_avatar.types import PantsStyle, Pose
from tests.test_utils import colors_of, covers, make_palette


def test_every_pants_style_has_emitter() -> None:
    assert set(LEGS_EMITTERS) == set(PantsStyle)


def test_shorts_and_skirt_share_layout() -> None:
    palette = make_palette()
    assert emit_legs(PantsStyle.SHORTS, Pose.IDLE, palette) == emit_legs(
        PantsStyle.SKIRT, Pose.IDLE, palette
    )


def test_short_garment_shows_bare_lower_legs() -> None:
    palette = make_palette(skin_tone="caramel")
    assert palette.skin.base in colors_of(short_garment_legs(palette))
    assert palette.skin.base not in colors_of(jeans_legs(palette))


def test_dress_has_no_leg_gap() -> None:
    palette = make_palette()
    dress = dress_legs(palette)
    jeans = jeans_legs(palette)
    # Column 8 is the outline between the legs; the dress fills it.
    assert any(b.x <= 8 < b.right and b.color == palette.pants.base for b in dress)
    assert not any(
        b.x <= 8 < b.right and b.color == palette.pants.base for b in jeans
    )


@pytest.mark.parametrize(
    "style", [PantsStyle.JEANS, PantsStyle.SHORTS, PantsStyle.SKIRT]
)
def test_karate_kicks_right_leg(style: PantsStyle) -> None:
    palette = make_palette(shoe_color="white")
    blocks = emit_legs(style, Pose.KARATE, palette)
    assert blocks == karate_legs(palette)
    # Kick reaches past the right edge with a shoe-toned foot.
    assert max(b.right for b in blocks) == 20
    assert palette.shoes.base in colors_of(blocks)
    # Left leg stays vertical.
    assert covers(blocks, 4, 28)
    assert not covers(blocks, 10, 28)


def test_dress_ignores_kick() -> None:
    palette = make_palette()
    assert emit_legs(PantsStyle.DRESS, Pose.KARATE, palette) == dress_legs(palette)


@pytest.mark.parametrize("pose", [p for p in Pose if p != Pose.KARATE] + ["dab"])
def test_non_karate_poses_do_not_change_legs(pose: str) -> None:
    palette = make_palette()
    assert emit_legs(PantsStyle.JEANS, pose, palette) == jeans_legs(palette)


def test_unknown_pants_style_falls_back_to_shorts() -> None:
    palette = make_palette()
    assert emit_legs("nonexistent_style", Pose.IDLE, palette) == short_garment_legs(
        palette
    )
