# tests/emitters/test_accessory_emitters.py

import pytest

from pixel_avatar.emitters.accessories import (
    ACCESSORY_BACK_EMITTERS,
    ACCESSORY_FRONT_EMITTERS,
    LENS_TINT,
    emit_accessory_back,
    emit_accessory_front,
    glasses,
    sunglasses,
)
from pixel_avatar.types import Accessory
from tests.test_utils import colors_of


def test_every_accessory_draws_in_exactly_one_pass() -> None:
    back = set(ACCESSORY_BACK_EMITTERS)
    front = set(ACCESSORY_FRONT_EMITTERS)
    assert not back & front
    assert back | front | {Accessory.NONE} == set(Accessory)


def test_back_pass_members() -> None:
    assert set(ACCESSORY_BACK_EMITTERS) == {
        Accessory.WINGS,
        Accessory.STAFF,
        Accessory.UNICORN_HORN,
    }


@pytest.mark.parametrize("accessory", list(Accessory))
def test_one_pass_per_accessory(accessory: Accessory) -> None:
    back = emit_accessory_back(accessory)
    front = emit_accessory_front(accessory)
    if accessory == Accessory.NONE:
        assert back == [] and front == []
    else:
        assert bool(back) != bool(front)


def test_unknown_accessory_draws_nothing() -> None:
    assert emit_accessory_back("jetpack") == []
    assert emit_accessory_front("jetpack") == []


def test_sunglasses_are_tinted_glasses() -> None:
    assert sunglasses()[: len(glasses())] == glasses()
    assert LENS_TINT in colors_of(sunglasses())
    assert LENS_TINT not in colors_of(glasses())


def test_wings_extend_past_both_edges() -> None:
    blocks = emit_accessory_back(Accessory.WINGS)
    assert min(b.x for b in blocks) < 0
    assert max(b.right for b in blocks) > 16


@pytest.mark.parametrize(
    "accessory",
    [Accessory.CROWN, Accessory.HALO, Accessory.HAT_BEANIE, Accessory.UNICORN_HORN],
)
def test_headwear_reaches_above_canvas(accessory: Accessory) -> None:
    blocks = emit_accessory_back(accessory) + emit_accessory_front(accessory)
    assert min(b.y for b in blocks) < 0
