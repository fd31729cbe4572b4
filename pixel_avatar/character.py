"""Character configuration value object.

:class:`CharacterConfig` is the single input to the compositor. It is frozen;
edits produce a new instance via :func:`dataclasses.replace`. Ids are stored
as plain strings and are *not* validated here: unknown ids are legal and are
resolved to catalog defaults at render time (see
:func:`pixel_avatar.palettes.resolve_or_default`).

The avatar-editing collaborator persists configs as camelCase JSON objects
(``{"skinTone": "fair", ...}``); :meth:`CharacterConfig.from_mapping` and
:meth:`CharacterConfig.to_mapping` convert to and from that shape.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from pixel_avatar.types import (
    Accessory,
    HairStyle,
    OptionID,
    PantsStyle,
    Pose,
    ShirtStyle,
)


@dataclass(frozen=True)
class CharacterConfig:
    """Discrete avatar choices.

    Attributes:
        skin_tone: Id in ``SKIN_TONES``.
        hair_style: Id in ``HAIR_STYLES``.
        hair_color: Id in ``HAIR_COLORS``.
        shirt_style: Id in ``SHIRT_STYLES``.
        shirt_color: Id in ``SHIRT_COLORS``.
        pants_style: Id in ``PANTS_STYLES``.
        pants_color: Id in ``PANTS_COLORS``.
        shoe_color: Id in ``SHOE_COLORS``.
        accessory: Id in ``ACCESSORIES`` (exactly one, ``"none"`` for no item).
        pose: Id in ``POSES``.
    """

    skin_tone: OptionID = "fair"
    hair_style: OptionID = HairStyle.SHORT
    hair_color: OptionID = "brown"
    shirt_style: OptionID = ShirtStyle.TSHIRT
    shirt_color: OptionID = "blue"
    pants_style: OptionID = PantsStyle.JEANS
    pants_color: OptionID = "blue"
    shoe_color: OptionID = "brown"
    accessory: OptionID = Accessory.NONE
    pose: OptionID = Pose.IDLE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CharacterConfig":
        """Build a config from a persisted mapping.

        Accepts camelCase (``skinTone``) or snake_case (``skin_tone``) keys.
        Missing keys keep their default, a ``None`` pose becomes ``"idle"``
        and unrecognized keys are ignored.

        Raises:
            TypeError: If a recognized key holds a non-string value.
        """
        values: Dict[str, str] = {}
        for name in CONFIG_FIELDS:
            for key in (SNAKE_TO_CAMEL[name], name):
                if key not in data:
                    continue
                value = data[key]
                if value is None and name == "pose":
                    value = Pose.IDLE
                if not isinstance(value, str):
                    raise TypeError(
                        f"{key} must be a string, got {type(value).__name__}"
                    )
                values[name] = value
                break
        return cls(**values)

    def to_mapping(self) -> Dict[str, str]:
        """Return the camelCase mapping used for persistence."""
        return {
            SNAKE_TO_CAMEL[name]: str(getattr(self, name)) for name in CONFIG_FIELDS
        }


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


CONFIG_FIELDS = tuple(f.name for f in fields(CharacterConfig))
SNAKE_TO_CAMEL: Dict[str, str] = {name: _camel(name) for name in CONFIG_FIELDS}

DEFAULT_CHARACTER = CharacterConfig()
