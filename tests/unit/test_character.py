# tests/unit/test_character.py

from dataclasses import FrozenInstanceError

import pytest

from pixel_avatar.character import CONFIG_FIELDS, DEFAULT_CHARACTER, CharacterConfig
from pixel_avatar.types import Accessory, HairStyle, PantsStyle, Pose, ShirtStyle


def test_default_character() -> None:
    assert DEFAULT_CHARACTER.skin_tone == "fair"
    assert DEFAULT_CHARACTER.hair_style == HairStyle.SHORT
    assert DEFAULT_CHARACTER.hair_color == "brown"
    assert DEFAULT_CHARACTER.shirt_style == ShirtStyle.TSHIRT
    assert DEFAULT_CHARACTER.shirt_color == "blue"
    assert DEFAULT_CHARACTER.pants_style == PantsStyle.JEANS
    assert DEFAULT_CHARACTER.pants_color == "blue"
    assert DEFAULT_CHARACTER.shoe_color == "brown"
    assert DEFAULT_CHARACTER.accessory == Accessory.NONE
    assert DEFAULT_CHARACTER.pose == Pose.IDLE


def test_config_is_frozen() -> None:
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CHARACTER.pose = Pose.WAVING  # type: ignore[misc]


def test_from_mapping_camel_case() -> None:
    config = CharacterConfig.from_mapping(
        {
            "skinTone": "tan",
            "hairStyle": "afro",
            "shirtStyle": "tank",
            "accessory": "crown",
            "pose": "karate",
        }
    )
    assert config.skin_tone == "tan"
    assert config.hair_style == HairStyle.AFRO
    assert config.shirt_style == ShirtStyle.TANK
    assert config.accessory == Accessory.CROWN
    assert config.pose == Pose.KARATE
    assert config.pants_style == DEFAULT_CHARACTER.pants_style


def test_from_mapping_snake_case_and_unknown_keys() -> None:
    config = CharacterConfig.from_mapping(
        {"hair_color": "teal", "favouriteFood": "pizza"}
    )
    assert config == CharacterConfig(hair_color="teal")


def test_from_mapping_keeps_unknown_ids() -> None:
    config = CharacterConfig.from_mapping({"hairColor": "nonexistent_color"})
    assert config.hair_color == "nonexistent_color"


def test_from_mapping_none_pose_is_idle() -> None:
    assert CharacterConfig.from_mapping({"pose": None}).pose == Pose.IDLE


@pytest.mark.parametrize("value", [None, 3, ["fair"]])
def test_from_mapping_rejects_non_strings(value: object) -> None:
    with pytest.raises(TypeError):
        CharacterConfig.from_mapping({"skinTone": value})


def test_to_mapping_round_trip() -> None:
    config = CharacterConfig(hair_style=HairStyle.BUN, pose=Pose.ROBOT)
    data = config.to_mapping()
    assert data["hairStyle"] == "bun"
    assert data["shoeColor"] == "brown"
    assert len(data) == len(CONFIG_FIELDS)
    assert CharacterConfig.from_mapping(data) == config
