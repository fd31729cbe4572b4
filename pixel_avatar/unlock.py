"""Point-threshold unlock gate.

Callers (selection menus) consult these helpers before accepting a choice.
The compositor never does: it renders whatever configuration it is given.
Nothing here is cached; results are recomputed from the caller's current
point total every time.
"""

from typing import List, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from pixel_avatar.character import CharacterConfig
from pixel_avatar.palettes.catalog import Catalog, OptionEntry
from pixel_avatar.palettes.options import (
    ACCESSORIES,
    HAIR_STYLES,
    PANTS_STYLES,
    POSES,
    SHIRT_STYLES,
)


GATED_FIELDS: Tuple[Tuple[str, Catalog[OptionEntry]], ...] = (
    ("hair_style", HAIR_STYLES),
    ("shirt_style", SHIRT_STYLES),
    ("pants_style", PANTS_STYLES),
    ("accessory", ACCESSORIES),
    ("pose", POSES),
)


def _check_points(user_points: int) -> None:
    if user_points < 0:
        raise ValueError(f"user_points must be non-negative, got {user_points}")


def is_locked(item: OptionEntry, user_points: int) -> bool:
    """Return True if ``item`` may not be selected with ``user_points``.

    An item is locked iff it declares ``points_required``, is not explicitly
    ``unlocked``, and the user has fewer points than required.
    """
    _check_points(user_points)
    if item.unlocked or item.points_required is None:
        return False
    return user_points < item.points_required


def points_needed(item: OptionEntry, user_points: int) -> int:
    """Points still missing to unlock ``item`` (0 if already selectable)."""
    if not is_locked(item, user_points):
        return 0
    assert item.points_required is not None
    return item.points_required - user_points


def available_options(
    catalog: Catalog[OptionEntry], user_points: int
) -> List[Tuple[OptionEntry, bool]]:
    """Pair each entry with its locked flag, in catalog order."""
    return [(entry, is_locked(entry, user_points)) for entry in catalog]


def locked_ids(catalog: Catalog[OptionEntry], user_points: int) -> List[str]:
    return [entry.id for entry in catalog if is_locked(entry, user_points)]


def next_unlock(
    catalog: Catalog[OptionEntry], user_points: int
) -> Optional[OptionEntry]:
    """Return the cheapest entry still locked, or None if all are selectable.

    Ties keep catalog order.
    """
    locked = [entry for entry in catalog if is_locked(entry, user_points)]
    if not locked:
        return None
    return min(locked, key=lambda entry: entry.points_required or 0)


def locked_selections(
    config: CharacterConfig, user_points: int
) -> PMap[str, OptionEntry]:
    """Map each config field holding a locked choice to its catalog entry.

    Unknown ids are not reported; they are a rendering concern, not a gating
    one.
    """
    _check_points(user_points)
    out: PMap[str, OptionEntry] = pmap()
    for field_name, catalog in GATED_FIELDS:
        entry = catalog.find(getattr(config, field_name))
        if entry is not None and is_locked(entry, user_points):
            out = out.set(field_name, entry)
    return out
