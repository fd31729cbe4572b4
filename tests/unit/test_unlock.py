# tests/unit/test_unlock.py

import pytest

from pixel_avatar.palettes import ACCESSORIES, HAIR_STYLES, POSES, OptionEntry
from pixel_avatar.unlock import (
    available_options,
    is_locked,
    locked_ids,
    locked_selections,
    next_unlock,
    points_needed,
)
from pixel_avatar.types import Accessory, HairStyle, Pose
from tests.test_utils import make_config


@pytest.mark.parametrize(
    "item, points, expected",
    [
        (OptionEntry("free", "Free"), 0, False),
        (OptionEntry("open", "Open", unlocked=True), 0, False),
        (OptionEntry("open_gated", "Open", unlocked=True, points_required=99), 0, False),
        (OptionEntry("gated", "Gated", points_required=500), 499, True),
        (OptionEntry("gated", "Gated", points_required=500), 500, False),
        (OptionEntry("gated", "Gated", points_required=500), 501, False),
        (OptionEntry("zero", "Zero", points_required=0), 0, False),
    ],
)
def test_is_locked(item: OptionEntry, points: int, expected: bool) -> None:
    assert is_locked(item, points) is expected


def test_crown_needs_500_points() -> None:
    crown = ACCESSORIES.find(Accessory.CROWN)
    assert crown is not None
    assert is_locked(crown, 499)
    assert not is_locked(crown, 500)


def test_negative_points_rejected() -> None:
    with pytest.raises(ValueError):
        is_locked(OptionEntry("x", "X"), -1)
    with pytest.raises(ValueError):
        locked_selections(make_config(), -5)


def test_points_needed() -> None:
    mohawk = HAIR_STYLES.find(HairStyle.MOHAWK)
    assert mohawk is not None
    assert points_needed(mohawk, 40) == 60
    assert points_needed(mohawk, 100) == 0
    short = HAIR_STYLES.find(HairStyle.SHORT)
    assert short is not None
    assert points_needed(short, 0) == 0


def test_available_options_keeps_catalog_order() -> None:
    options = available_options(HAIR_STYLES, 60)
    assert [entry.id for entry, _ in options] == list(HAIR_STYLES.ids())
    flags = {entry.id: locked for entry, locked in options}
    assert flags["spiky"] is False
    assert flags["pigtails"] is True
    assert flags["mohawk"] is True
    assert flags["bald"] is False


def test_locked_ids() -> None:
    assert locked_ids(HAIR_STYLES, 0) == ["spiky", "mohawk", "pigtails"]
    assert locked_ids(HAIR_STYLES, 100) == []


def test_next_unlock() -> None:
    first = next_unlock(ACCESSORIES, 0)
    assert first is not None and first.id == "earrings"
    after_halo = next_unlock(ACCESSORIES, 150)
    assert after_halo is not None and after_halo.id == "crown"
    assert next_unlock(ACCESSORIES, 500) is None


def test_next_unlock_skips_already_affordable() -> None:
    entry = next_unlock(POSES, 25)
    assert entry is not None and entry.id == "dab"


def test_locked_selections_reports_gated_fields() -> None:
    config = make_config(
        hair_style=HairStyle.MOHAWK,
        accessory=Accessory.CROWN,
        pose="flexing",
    )
    locked = locked_selections(config, 60)
    assert set(locked.keys()) == {"hair_style", "accessory"}
    assert locked["accessory"].points_required == 500


def test_locked_selections_ignores_unknown_ids() -> None:
    config = make_config(hair_style="nonexistent_style", pose=Pose.IDLE)
    assert len(locked_selections(config, 0)) == 0
