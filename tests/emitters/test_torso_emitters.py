# tests/emitters/test_torso_emitters.py

import pytest

from pixel_avatar.block import OUTLINE
from pixel_avatar.emitters.head import IRIS, LIPS, emit_head
from pixel_avatar.emitters.shoes import emit_shoes
from pixel_avatar.emitters.torso import (
    SHIRT_DETAIL_EMITTERS,
    emit_neck,
    emit_torso,
    torso_base,
)
from pixel_avatar.types import ShirtStyle
from tests.test_utils import colors_of, make_palette, tone_colors


def test_head_is_constant_apart_from_skin() -> None:
    fair = emit_head(make_palette(skin_tone="fair"))
    deep = emit_head(make_palette(skin_tone="deep"))
    assert len(fair) == len(deep) == 20
    assert [b.as_tuple()[:4] for b in fair] == [b.as_tuple()[:4] for b in deep]
    assert {IRIS, LIPS} <= colors_of(fair)


def test_neck_uses_skin() -> None:
    palette = make_palette(skin_tone="olive")
    assert colors_of(emit_neck(palette)) == {
        OUTLINE,
        palette.skin.base,
        palette.skin.shadow,
    }


def test_every_shirt_style_has_detail() -> None:
    assert set(SHIRT_DETAIL_EMITTERS) == set(ShirtStyle)


@pytest.mark.parametrize("style", list(ShirtStyle))
def test_torso_starts_with_shared_base(style: ShirtStyle) -> None:
    palette = make_palette()
    blocks = emit_torso(style, palette)
    base = torso_base(palette)
    assert blocks[: len(base)] == base


def test_tshirt_has_no_detail() -> None:
    palette = make_palette()
    assert emit_torso(ShirtStyle.TSHIRT, palette) == torso_base(palette)


def test_tank_shows_skin_shoulders() -> None:
    palette = make_palette(skin_tone="tan", shirt_color="green")
    colors = colors_of(emit_torso(ShirtStyle.TANK, palette))
    assert palette.skin.base in colors
    assert palette.shirt.base in colors


@pytest.mark.parametrize(
    "style", [s for s in ShirtStyle if s != ShirtStyle.TANK]
)
def test_sleeved_torso_uses_only_shirt_tones(style: ShirtStyle) -> None:
    palette = make_palette(shirt_color="orange")
    assert colors_of(emit_torso(style, palette)) <= tone_colors(palette.shirt) | {
        OUTLINE
    }


def test_sweater_stripes_and_flannel_checks() -> None:
    palette = make_palette()
    sweater = emit_torso(ShirtStyle.SWEATER, palette)[len(torso_base(palette)) :]
    assert [b.y for b in sweater] == [16, 18, 20]
    flannel = emit_torso(ShirtStyle.FLANNEL, palette)[len(torso_base(palette)) :]
    assert [b.x for b in flannel] == [4, 6, 8, 10]


def test_unknown_shirt_style_falls_back_to_polo() -> None:
    palette = make_palette()
    assert emit_torso("nonexistent_style", palette) == emit_torso(
        ShirtStyle.POLO, palette
    )


def test_shoes_are_two_offset_shoes() -> None:
    palette = make_palette(shoe_color="red")
    blocks = emit_shoes(palette)
    assert len(blocks) == 14
    left, right = blocks[:7], blocks[7:]
    assert [b.x + 7 for b in left][:5] == [b.x for b in right][:5]
    assert left[5].x == 2 and right[5].x == 12
    assert colors_of(blocks) == tone_colors(palette.shoes) - {
        palette.shoes.midtone
    } | {OUTLINE}
