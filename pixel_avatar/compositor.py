"""Avatar compositor.

Turns a :class:`~pixel_avatar.character.CharacterConfig` into an ordered list
of pixel blocks by running every emitter in a fixed back-to-front order and
concatenating the output. Later blocks overwrite earlier ones where they
overlap, so the order is part of the visual contract:

1. ``hair_back``: long/dreads strands behind the skull
2. ``accessory_back``: wings, staff, unicorn horn
3. ``head``: head and face
4. ``hair_front``: every style except bald
5. ``accessory_front``: glasses, hats, crown, halo, earrings, pride flag,
   necklace, scarf
6. ``neck``
7. ``torso``: shirt with style detail
8. ``arms``: pose-resolved
9. ``legs``: pose-resolved for karate
10. ``shoes``

Composition is pure and recomputed from scratch on every call; there is no
caching or incremental update. Unknown ids never raise (see
:func:`pixel_avatar.palettes.resolve_or_default`).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from pixel_avatar.block import CANVAS_HEIGHT, CANVAS_WIDTH, Bounds, PixelBlock, bounds
from pixel_avatar.character import DEFAULT_CHARACTER, CharacterConfig
from pixel_avatar.emitters import (
    emit_accessory_back,
    emit_accessory_front,
    emit_arms,
    emit_hair_back,
    emit_hair_front,
    emit_head,
    emit_legs,
    emit_neck,
    emit_shoes,
    emit_torso,
)
from pixel_avatar.palettes.resolve import ResolvedPalette, resolve_palette
from pixel_avatar.types import Color, LayerName


LayerEmitter = Callable[[CharacterConfig, ResolvedPalette], List[PixelBlock]]

PhysicalBlock = Tuple[float, float, float, float, Color]


@dataclass(frozen=True)
class Layer:
    """One named slice of the composite, in emission order."""

    name: LayerName
    blocks: PVector[PixelBlock]


@dataclass(frozen=True)
class Composition:
    """Result of compositing one config.

    Attributes:
        config: The input configuration.
        palette: Tone sets resolved from the config.
        layers: Layers in back-to-front order; empty layers are kept so the
            layer sequence is identical for every config.
        width: Logical canvas width.
        height: Logical canvas height.
    """

    config: CharacterConfig
    palette: ResolvedPalette
    layers: PVector[Layer]
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @property
    def blocks(self) -> List[PixelBlock]:
        """All blocks flattened in emission order."""
        return [block for layer in self.layers for block in layer.blocks]

    def layer(self, name: LayerName) -> PVector[PixelBlock]:
        for layer in self.layers:
            if layer.name == name:
                return layer.blocks
        raise KeyError(name)

    def layer_names(self) -> Tuple[LayerName, ...]:
        return tuple(layer.name for layer in self.layers)

    def bounds(self) -> Optional[Bounds]:
        """``(left, top, right, bottom)`` of all blocks in grid units."""
        return bounds(self.blocks)

    def to_physical(self, size: float) -> List[PhysicalBlock]:
        """Scale blocks for a renderer whose canvas is ``size`` pixels wide.

        ``scale = size / width`` is applied uniformly to every coordinate.
        """
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        scale = size / self.width
        return [
            (b.x * scale, b.y * scale, b.width * scale, b.height * scale, b.color)
            for b in self.blocks
        ]


def _hair_back(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_hair_back(config.hair_style, palette)


def _accessory_back(
    config: CharacterConfig, palette: ResolvedPalette
) -> List[PixelBlock]:
    return emit_accessory_back(config.accessory)


def _head(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_head(palette)


def _hair_front(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_hair_front(config.hair_style, palette)


def _accessory_front(
    config: CharacterConfig, palette: ResolvedPalette
) -> List[PixelBlock]:
    return emit_accessory_front(config.accessory)


def _neck(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_neck(palette)


def _torso(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_torso(config.shirt_style, palette)


def _arms(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_arms(config.pose, config.shirt_style, palette)


def _legs(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_legs(config.pants_style, config.pose, palette)


def _shoes(config: CharacterConfig, palette: ResolvedPalette) -> List[PixelBlock]:
    return emit_shoes(palette)


Z_ORDER: Tuple[Tuple[LayerName, LayerEmitter], ...] = (
    (LayerName.HAIR_BACK, _hair_back),
    (LayerName.ACCESSORY_BACK, _accessory_back),
    (LayerName.HEAD, _head),
    (LayerName.HAIR_FRONT, _hair_front),
    (LayerName.ACCESSORY_FRONT, _accessory_front),
    (LayerName.NECK, _neck),
    (LayerName.TORSO, _torso),
    (LayerName.ARMS, _arms),
    (LayerName.LEGS, _legs),
    (LayerName.SHOES, _shoes),
)


def compose(config: CharacterConfig = DEFAULT_CHARACTER) -> Composition:
    """Composite ``config`` into layered pixel blocks.

    Args:
        config: Avatar choices; unknown ids fall back to catalog defaults.

    Returns:
        Composition: Layers in the fixed z-order.
    """
    palette = resolve_palette(config)
    layers = pvector(
        Layer(name=name, blocks=pvector(emitter(config, palette)))
        for name, emitter in Z_ORDER
    )
    return Composition(config=config, palette=palette, layers=layers)


def compose_blocks(config: CharacterConfig = DEFAULT_CHARACTER) -> List[PixelBlock]:
    """Flattened block list of :func:`compose`, back to front."""
    return compose(config).blocks
