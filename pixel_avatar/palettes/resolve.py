"""Resolve every color of a config at once."""

from dataclasses import dataclass

from pixel_avatar.character import CharacterConfig
from pixel_avatar.palettes.catalog import ToneSet, resolve_or_default
from pixel_avatar.palettes.tones import (
    HAIR_COLORS,
    PANTS_COLORS,
    SHIRT_COLORS,
    SHOE_COLORS,
    SKIN_TONES,
)


@dataclass(frozen=True)
class ResolvedPalette:
    """Tone sets for each material of one avatar."""

    skin: ToneSet
    hair: ToneSet
    shirt: ToneSet
    pants: ToneSet
    shoes: ToneSet


def resolve_palette(config: CharacterConfig) -> ResolvedPalette:
    """Resolve the config's color ids, substituting catalog defaults as needed."""
    return ResolvedPalette(
        skin=resolve_or_default(SKIN_TONES, config.skin_tone),
        hair=resolve_or_default(HAIR_COLORS, config.hair_color),
        shirt=resolve_or_default(SHIRT_COLORS, config.shirt_color),
        pants=resolve_or_default(PANTS_COLORS, config.pants_color),
        shoes=resolve_or_default(SHOE_COLORS, config.shoe_color),
    )
