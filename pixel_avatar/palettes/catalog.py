"""Immutable option catalogs and the fallback lookup combinator.

A :class:`Catalog` is an ordered, read-only table of entries keyed by ``id``.
Catalogs are built once at import time and never mutated. Lookups that must
not fail go through :func:`resolve_or_default`, which substitutes the
catalog's documented default entry for ids it does not know (stale saved
configurations, catalog renames). Rendering never raises on a bad id.
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, Protocol, Tuple, TypeVar

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from pixel_avatar.types import Color, OptionID


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToneSet:
    """Four-tone material palette.

    Attributes:
        id: Catalog id (e.g. ``"fair"``).
        base: Main fill color.
        shadow: Darkest tone, used for lower edges and creases.
        highlight: Lightest tone, used on top-left lit areas.
        midtone: Between base and shadow.
    """

    id: OptionID
    base: Color
    shadow: Color
    highlight: Color
    midtone: Color

    @property
    def tones(self) -> Tuple[Color, Color, Color, Color]:
        return (self.base, self.shadow, self.highlight, self.midtone)


@dataclass(frozen=True)
class OptionEntry:
    """Selectable style, accessory or pose.

    Attributes:
        id: Catalog id (e.g. ``"hoodie"``).
        name: Display name.
        unlocked: Always available regardless of points.
        points_required: Point threshold gating selection, if any.
    """

    id: OptionID
    name: str
    unlocked: bool = False
    points_required: Optional[int] = None


class HasID(Protocol):
    @property
    def id(self) -> OptionID: ...


T = TypeVar("T", bound=HasID)


@dataclass(frozen=True)
class Catalog(Generic[T]):
    """Ordered read-only table of entries.

    Attributes:
        name: Catalog name used in diagnostics (``"hair_colors"``).
        entries: Entries in display order.
        default_index: Index of the entry substituted for unknown ids.
    """

    name: str
    entries: PVector[T]
    default_index: int = 0
    _index: PMap[OptionID, T] = field(default=pmap(), repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.default_index < len(self.entries):
            raise ValueError(
                f"Catalog {self.name} default index {self.default_index} out of range"
            )
        index = pmap({entry.id: entry for entry in self.entries})
        if len(index) != len(self.entries):
            raise ValueError(f"Catalog {self.name} has duplicate ids")
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.entries)

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._index

    @property
    def default(self) -> T:
        return self.entries[self.default_index]

    def ids(self) -> Tuple[OptionID, ...]:
        return tuple(entry.id for entry in self.entries)

    def find(self, option_id: Optional[OptionID]) -> Optional[T]:
        """Return the entry for ``option_id`` or None."""
        if option_id is None:
            return None
        return self._index.get(option_id)


def make_catalog(
    name: str, entries: Iterable[T], default_index: int = 0
) -> Catalog[T]:
    return Catalog(name=name, entries=pvector(entries), default_index=default_index)


def resolve_or_default(catalog: Catalog[T], option_id: Optional[OptionID]) -> T:
    """Look up ``option_id`` and fall back to the catalog default.

    Args:
        catalog: Catalog to search.
        option_id: Requested id; may be unknown or None.

    Returns:
        T: The matching entry, or ``catalog.default`` when not found.
    """
    entry = catalog.find(option_id)
    if entry is not None:
        return entry
    fallback = catalog.default
    logger.debug(
        "Unknown %s id %r, falling back to %r", catalog.name, option_id, fallback.id
    )
    return fallback
