"""Canonical names for the source enumerations.

One static table per closed enumeration. The strings are part of the
interchange format; consumers match on them.
"""

from enum import IntEnum
from typing import Dict, Type

from .errors import InvalidInputError
from ..source.model import (
    AnimationMode,
    AnimationType,
    CollisionMode,
    CollisionType,
    CurveMode,
    NoiseQuality,
    RenderMode,
    ShapeType,
    SimulationSpace,
    SortMode,
    SubEmitterType,
)


CURVE_MODE_NAMES = {
    CurveMode.CONSTANT: "Constant",
    CurveMode.CURVE: "Curve",
    CurveMode.TWO_CURVES: "TwoCurves",
    CurveMode.TWO_CONSTANTS: "TwoConstants",
}

SIMULATION_SPACE_NAMES = {
    SimulationSpace.LOCAL: "Local",
    SimulationSpace.WORLD: "World",
    SimulationSpace.CUSTOM: "Custom",
}

SHAPE_TYPE_NAMES = {
    ShapeType.SPHERE: "Sphere",
    ShapeType.HEMISPHERE: "Hemisphere",
    ShapeType.CONE: "Cone",
    ShapeType.BOX: "Box",
    ShapeType.MESH: "Mesh",
    ShapeType.CONE_VOLUME: "ConeVolume",
    ShapeType.CIRCLE: "Circle",
    ShapeType.SINGLE_SIDED_EDGE: "SingleSidedEdge",
    ShapeType.MESH_RENDERER: "MeshRenderer",
    ShapeType.SKINNED_MESH_RENDERER: "SkinnedMeshRenderer",
    ShapeType.BOX_SHELL: "BoxShell",
    ShapeType.BOX_EDGE: "BoxEdge",
    ShapeType.DONUT: "Donut",
    ShapeType.RECTANGLE: "Rectangle",
    ShapeType.SPRITE: "Sprite",
    ShapeType.SPRITE_RENDERER: "SpriteRenderer",
}

COLLISION_TYPE_NAMES = {
    CollisionType.PLANES: "Planes",
    CollisionType.WORLD: "World",
}

COLLISION_MODE_NAMES = {
    CollisionMode.COLLISION_3D: "Collision3D",
    CollisionMode.COLLISION_2D: "Collision2D",
}

ANIMATION_TYPE_NAMES = {
    AnimationType.WHOLE_SHEET: "WholeSheet",
    AnimationType.SINGLE_ROW: "SingleRow",
}

ANIMATION_MODE_NAMES = {
    AnimationMode.GRID: "Grid",
    AnimationMode.SPRITES: "Sprites",
}

RENDER_MODE_NAMES = {
    RenderMode.BILLBOARD: "Billboard",
    RenderMode.STRETCH: "Stretch",
    RenderMode.HORIZONTAL_BILLBOARD: "HorizontalBillboard",
    RenderMode.VERTICAL_BILLBOARD: "VerticalBillboard",
    RenderMode.MESH: "Mesh",
    RenderMode.NONE: "None",
}

SORT_MODE_NAMES = {
    SortMode.NONE: "None",
    SortMode.DISTANCE: "Distance",
    SortMode.OLDEST_IN_FRONT: "OldestInFront",
    SortMode.YOUNGEST_IN_FRONT: "YoungestInFront",
    SortMode.BY_DEPTH: "ByDepth",
}

SUB_EMITTER_TYPE_NAMES = {
    SubEmitterType.BIRTH: "Birth",
    SubEmitterType.COLLISION: "Collision",
    SubEmitterType.DEATH: "Death",
    SubEmitterType.TRIGGER: "Trigger",
    SubEmitterType.MANUAL: "Manual",
}

# Input side only: noise quality is exported as its integer level
NOISE_QUALITY_NAMES = {
    NoiseQuality.LOW: "Low",
    NoiseQuality.MEDIUM: "Medium",
    NoiseQuality.HIGH: "High",
}

# Reverse lookups, keyed by enum class
_TABLES: Dict[Type[IntEnum], Dict[IntEnum, str]] = {
    CurveMode: CURVE_MODE_NAMES,
    SimulationSpace: SIMULATION_SPACE_NAMES,
    ShapeType: SHAPE_TYPE_NAMES,
    CollisionType: COLLISION_TYPE_NAMES,
    CollisionMode: COLLISION_MODE_NAMES,
    AnimationType: ANIMATION_TYPE_NAMES,
    AnimationMode: ANIMATION_MODE_NAMES,
    RenderMode: RENDER_MODE_NAMES,
    SortMode: SORT_MODE_NAMES,
    SubEmitterType: SUB_EMITTER_TYPE_NAMES,
    NoiseQuality: NOISE_QUALITY_NAMES,
}


def enum_name(value: IntEnum) -> str:
    """Canonical string for an enumeration member."""
    if value is None:
        raise InvalidInputError("Enumeration value is required")
    table = _TABLES.get(type(value))
    if table is None or value not in table:
        raise InvalidInputError(f"No canonical name for {value!r}")
    return table[value]


def enum_from_name(enum_cls: Type[IntEnum], name: str) -> IntEnum:
    """Inverse of enum_name(): look up a member by its canonical string."""
    for member, text in _TABLES[enum_cls].items():
        if text == name:
            return member
    valid = ", ".join(_TABLES[enum_cls].values())
    raise ValueError(f"Unknown {enum_cls.__name__} '{name}' (expected one of: {valid})")
