"""Pose-dependent arm emitter.

Arms branch first on clothing (sleeved shirt vs. tank top) and then on pose.
Each pose defines the left and right arm independently because several
poses are asymmetric: ``waving`` raises only the right arm, ``karate`` punches
with the left arm and holds the right arm in guard. Poses listed in the pose
catalog without geometry of their own draw the idle arms.

Tank-top arms use only skin tones (plus the outline) in every pose.
"""

from typing import Callable, Dict, FrozenSet, List, Tuple

from pixel_avatar.block import OUTLINE, PixelBlock, px
from pixel_avatar.emitters.torso import resolve_shirt_style
from pixel_avatar.palettes.catalog import resolve_or_default
from pixel_avatar.palettes.options import POSES
from pixel_avatar.palettes.resolve import ResolvedPalette
from pixel_avatar.types import OptionID, Pose, ShirtStyle


ArmEmitter = Callable[[ResolvedPalette], List[PixelBlock]]
ArmPair = Tuple[ArmEmitter, ArmEmitter]

IMPLEMENTED_POSES: FrozenSet[Pose] = frozenset(Pose)


def resolve_pose(pose: OptionID) -> Pose:
    """Resolve a pose id to a pose with geometry (idle for anything else)."""
    entry = resolve_or_default(POSES, pose)
    if entry.id in IMPLEMENTED_POSES:
        return Pose(entry.id)
    return Pose.IDLE


# --- Sleeved arms ---


def idle_left(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 0, 15, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, 1, 23, 2, 1),
        px(shirt.base, 1, 15, 2, 4),
        px(shirt.shadow, 1, 18, 2, 1),
        px(skin.base, 1, 19, 2, 4),
        px(skin.shadow, 1, 21, 2, 2),
    ]


def idle_right(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 15, 15, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 13, 23, 2, 1),
        px(shirt.base, 13, 15, 2, 4),
        px(shirt.shadow, 13, 18, 2, 1),
        px(skin.base, 13, 19, 2, 4),
        px(skin.shadow, 13, 21, 2, 2),
    ]


def waving_left(palette: ResolvedPalette) -> List[PixelBlock]:
    return [
        px(OUTLINE, 0, 15, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, 1, 23, 2, 1),
        px(palette.shirt.base, 1, 15, 2, 4),
        px(palette.skin.base, 1, 19, 2, 4),
    ]


def waving_right(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 14, 6, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 15, 5, 3, 1),
        px(shirt.base, 13, 15, 2, 3),
        px(shirt.base, 14, 10, 2, 5),
        px(skin.base, 14, 6, 2, 4),
        # Hand
        px(skin.base, 16, 5, 2, 3),
        px(skin.highlight, 17, 5, 1, 2),
    ]


def raising_roof_left(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, -2, 6, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, -4, 4, 3, 1),
        px(shirt.base, 1, 15, 2, 3),
        px(shirt.base, -1, 10, 2, 5),
        px(skin.base, -1, 6, 2, 4),
        px(skin.base, -3, 4, 2, 3),
    ]


def raising_roof_right(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 17, 6, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 17, 4, 3, 1),
        px(shirt.base, 13, 15, 2, 3),
        px(shirt.base, 15, 10, 2, 5),
        px(skin.base, 15, 6, 2, 4),
        px(skin.base, 17, 4, 2, 3),
    ]


def robot_left(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, -3, 15, 4, 1),
        px(OUTLINE, -4, 16, 1, 7),
        px(OUTLINE, 1, 14, 2, 1),
        px(shirt.base, -3, 16, 4, 3),
        px(skin.base, -3, 19, 2, 4),
        px(skin.base, 1, 15, 2, 4),
    ]


def robot_right(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 15, 15, 4, 1),
        px(OUTLINE, 19, 16, 1, 7),
        px(OUTLINE, 13, 14, 2, 1),
        px(shirt.base, 15, 16, 4, 3),
        px(skin.base, 17, 19, 2, 4),
        px(skin.base, 13, 15, 2, 4),
    ]


def tpose_left(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, -6, 15, 7, 1),
        px(OUTLINE, -6, 16, 1, 3),
        px(OUTLINE, 1, 14, 2, 1),
        px(shirt.base, -2, 16, 4, 2),
        px(skin.base, -5, 16, 3, 2),
        px(skin.shadow, -5, 17, 3, 1),
        px(shirt.base, 1, 15, 2, 3),
    ]


def tpose_right(palette: ResolvedPalette) -> List[PixelBlock]:
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 15, 15, 7, 1),
        px(OUTLINE, 21, 16, 1, 3),
        px(OUTLINE, 13, 14, 2, 1),
        px(shirt.base, 14, 16, 4, 2),
        px(skin.base, 18, 16, 3, 2),
        px(skin.shadow, 18, 17, 3, 1),
        px(shirt.base, 13, 15, 2, 3),
    ]


def karate_left(palette: ResolvedPalette) -> List[PixelBlock]:
    """Left arm punching forward."""
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, -4, 17, 5, 1),
        px(OUTLINE, -5, 18, 1, 3),
        px(OUTLINE, 1, 14, 2, 1),
        px(shirt.base, -1, 18, 3, 2),
        px(skin.base, -4, 18, 3, 2),
        px(shirt.base, 1, 15, 2, 3),
    ]


def karate_right(palette: ResolvedPalette) -> List[PixelBlock]:
    """Right arm raised in guard."""
    shirt, skin = palette.shirt, palette.skin
    return [
        px(OUTLINE, 15, 15, 1, 5),
        px(OUTLINE, 14, 12, 1, 4),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 15, 11, 3, 1),
        px(shirt.base, 13, 15, 2, 4),
        px(shirt.base, 14, 13, 2, 2),
        px(skin.base, 15, 12, 2, 3),
    ]


# --- Bare (tank top) arms ---


def tank_idle_left(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 0, 15, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, 1, 23, 2, 1),
        px(skin.base, 1, 15, 2, 8),
        px(skin.highlight, 1, 15, 1, 3),
        px(skin.shadow, 1, 20, 2, 3),
    ]


def tank_idle_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 15, 15, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 13, 23, 2, 1),
        px(skin.base, 13, 15, 2, 8),
        px(skin.highlight, 14, 15, 1, 3),
        px(skin.shadow, 13, 20, 2, 3),
    ]


def tank_waving_left(palette: ResolvedPalette) -> List[PixelBlock]:
    return [
        px(OUTLINE, 0, 15, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, 1, 23, 2, 1),
        px(palette.skin.base, 1, 15, 2, 8),
    ]


def tank_waving_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 14, 6, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 15, 5, 3, 1),
        px(skin.base, 13, 15, 2, 3),
        px(skin.base, 14, 6, 2, 9),
        px(skin.base, 16, 5, 2, 3),
    ]


def tank_raising_roof_left(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, -2, 6, 1, 8),
        px(OUTLINE, 1, 14, 2, 1),
        px(OUTLINE, -4, 4, 3, 1),
        px(skin.base, 1, 15, 2, 3),
        px(skin.base, -1, 6, 2, 12),
        px(skin.base, -3, 4, 2, 3),
    ]


def tank_raising_roof_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 17, 6, 1, 8),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 17, 4, 3, 1),
        px(skin.base, 13, 15, 2, 3),
        px(skin.base, 15, 6, 2, 12),
        px(skin.base, 17, 4, 2, 3),
    ]


def tank_robot_left(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, -3, 15, 4, 1),
        px(OUTLINE, -4, 16, 1, 7),
        px(OUTLINE, 1, 14, 2, 1),
        px(skin.base, -3, 16, 4, 7),
        px(skin.base, 1, 15, 2, 4),
    ]


def tank_robot_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 15, 15, 4, 1),
        px(OUTLINE, 19, 16, 1, 7),
        px(OUTLINE, 13, 14, 2, 1),
        px(skin.base, 15, 16, 4, 7),
        px(skin.base, 13, 15, 2, 4),
    ]


def tank_tpose_left(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, -6, 15, 7, 1),
        px(OUTLINE, -6, 16, 1, 3),
        px(OUTLINE, 1, 14, 2, 1),
        px(skin.base, -5, 16, 7, 2),
        px(skin.base, 1, 15, 2, 3),
    ]


def tank_tpose_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 15, 15, 7, 1),
        px(OUTLINE, 21, 16, 1, 3),
        px(OUTLINE, 13, 14, 2, 1),
        px(skin.base, 14, 16, 7, 2),
        px(skin.base, 13, 15, 2, 3),
    ]


def tank_karate_left(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, -4, 17, 5, 1),
        px(OUTLINE, -5, 18, 1, 3),
        px(OUTLINE, 1, 14, 2, 1),
        px(skin.base, -4, 18, 6, 2),
        px(skin.base, 1, 15, 2, 3),
    ]


def tank_karate_right(palette: ResolvedPalette) -> List[PixelBlock]:
    skin = palette.skin
    return [
        px(OUTLINE, 15, 15, 1, 5),
        px(OUTLINE, 14, 12, 1, 4),
        px(OUTLINE, 13, 14, 2, 1),
        px(OUTLINE, 15, 11, 3, 1),
        px(skin.base, 13, 15, 2, 4),
        px(skin.base, 14, 12, 3, 3),
    ]


SLEEVED_ARMS: Dict[Pose, ArmPair] = {
    Pose.IDLE: (idle_left, idle_right),
    Pose.WAVING: (waving_left, waving_right),
    Pose.RAISING_ROOF: (raising_roof_left, raising_roof_right),
    Pose.ROBOT: (robot_left, robot_right),
    Pose.TPOSE: (tpose_left, tpose_right),
    Pose.KARATE: (karate_left, karate_right),
}

BARE_ARMS: Dict[Pose, ArmPair] = {
    Pose.IDLE: (tank_idle_left, tank_idle_right),
    Pose.WAVING: (tank_waving_left, tank_waving_right),
    Pose.RAISING_ROOF: (tank_raising_roof_left, tank_raising_roof_right),
    Pose.ROBOT: (tank_robot_left, tank_robot_right),
    Pose.TPOSE: (tank_tpose_left, tank_tpose_right),
    Pose.KARATE: (tank_karate_left, tank_karate_right),
}


def arm_pair(pose: OptionID, shirt_style: OptionID) -> ArmPair:
    """Select the (left, right) arm emitters for a pose and shirt style."""
    if resolve_shirt_style(shirt_style) == ShirtStyle.TANK:
        return BARE_ARMS[resolve_pose(pose)]
    return SLEEVED_ARMS[resolve_pose(pose)]


def emit_left_arm(
    pose: OptionID, shirt_style: OptionID, palette: ResolvedPalette
) -> List[PixelBlock]:
    return arm_pair(pose, shirt_style)[0](palette)


def emit_right_arm(
    pose: OptionID, shirt_style: OptionID, palette: ResolvedPalette
) -> List[PixelBlock]:
    return arm_pair(pose, shirt_style)[1](palette)


def emit_arms(
    pose: OptionID, shirt_style: OptionID, palette: ResolvedPalette
) -> List[PixelBlock]:
    """Left arm blocks followed by right arm blocks."""
    left, right = arm_pair(pose, shirt_style)
    return left(palette) + right(palette)
