"""Source-side value types for particle-effect definitions.

These mirror the authoring tool's object model: enumerations keep the tool's
numeric codes, modules are plain dataclasses with the tool's defaults.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Optional

import numpy as np


# ============================================================================
# Enumerations
# ============================================================================

class CurveMode(IntEnum):
    CONSTANT = 0
    CURVE = 1
    TWO_CURVES = 2
    TWO_CONSTANTS = 3


class SimulationSpace(IntEnum):
    LOCAL = 0
    WORLD = 1
    CUSTOM = 2


class ShapeType(IntEnum):
    SPHERE = 0
    HEMISPHERE = 2
    CONE = 4
    BOX = 5
    MESH = 6
    CONE_VOLUME = 7
    CIRCLE = 10
    SINGLE_SIDED_EDGE = 12
    MESH_RENDERER = 13
    SKINNED_MESH_RENDERER = 14
    BOX_SHELL = 15
    BOX_EDGE = 16
    DONUT = 17
    RECTANGLE = 18
    SPRITE = 19
    SPRITE_RENDERER = 20


class CollisionType(IntEnum):
    PLANES = 0
    WORLD = 1


class CollisionMode(IntEnum):
    COLLISION_3D = 0
    COLLISION_2D = 1


class NoiseQuality(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class AnimationType(IntEnum):
    WHOLE_SHEET = 0
    SINGLE_ROW = 1


class AnimationMode(IntEnum):
    GRID = 0
    SPRITES = 1


class RenderMode(IntEnum):
    BILLBOARD = 0
    STRETCH = 1
    HORIZONTAL_BILLBOARD = 2
    VERTICAL_BILLBOARD = 3
    MESH = 4
    NONE = 5


class SortMode(IntEnum):
    NONE = 0
    DISTANCE = 1
    OLDEST_IN_FRONT = 2
    YOUNGEST_IN_FRONT = 3
    BY_DEPTH = 4


class SubEmitterType(IntEnum):
    BIRTH = 0
    COLLISION = 1
    DEATH = 2
    TRIGGER = 3
    MANUAL = 4


# ============================================================================
# Primitive values
# ============================================================================

@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Color:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass
class Keyframe:
    time: float = 0.0
    value: float = 0.0
    in_tangent: float = 0.0
    out_tangent: float = 0.0


@dataclass
class AnimationCurve:
    keys: List[Keyframe] = field(default_factory=list)


@dataclass
class MinMaxCurve:
    """Constant, random-between-constants, curve or random-between-curves value."""
    mode: CurveMode = CurveMode.CONSTANT
    constant: float = 0.0
    constant_min: float = 0.0
    constant_max: float = 0.0
    curve: Optional[AnimationCurve] = None
    curve_min: Optional[AnimationCurve] = None
    curve_max: Optional[AnimationCurve] = None
    curve_multiplier: float = 1.0


@dataclass
class GradientColorKey:
    color: Color = field(default_factory=Color)
    time: float = 0.0


@dataclass
class GradientAlphaKey:
    alpha: float = 1.0
    time: float = 0.0


@dataclass
class Gradient:
    color_keys: List[GradientColorKey] = field(default_factory=list)
    alpha_keys: List[GradientAlphaKey] = field(default_factory=list)


@dataclass
class Burst:
    time: float = 0.0
    min_count: int = 30
    max_count: int = 30
    cycle_count: int = 1
    repeat_interval: float = 0.01


def _constant(value: float) -> MinMaxCurve:
    return MinMaxCurve(mode=CurveMode.CONSTANT, constant=value)


# ============================================================================
# Modules
# ============================================================================

@dataclass
class MainModule:
    duration: float = 5.0
    loop: bool = True
    prewarm: bool = False
    start_delay: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    start_lifetime: MinMaxCurve = field(default_factory=lambda: _constant(5.0))
    start_speed: MinMaxCurve = field(default_factory=lambda: _constant(5.0))
    start_size: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    start_size_3d: bool = False
    start_size_x: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    start_size_y: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    start_size_z: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    start_rotation: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    start_rotation_3d: bool = False
    start_rotation_x: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    start_rotation_y: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    start_rotation_z: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    start_color: Color = field(default_factory=Color)
    gravity_modifier: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    simulation_space: SimulationSpace = SimulationSpace.LOCAL
    simulation_speed: float = 1.0
    play_on_awake: bool = True
    max_particles: int = 1000


@dataclass
class EmissionModule:
    enabled: bool = True
    rate_over_time: MinMaxCurve = field(default_factory=lambda: _constant(10.0))
    rate_over_distance: MinMaxCurve = field(default_factory=lambda: _constant(0.0))
    bursts: List[Burst] = field(default_factory=list)

    @property
    def burst_count(self) -> int:
        return len(self.bursts)

    def get_bursts(self, out: list) -> int:
        """Copy bursts into the caller's buffer; returns how many were written."""
        n = min(len(out), len(self.bursts))
        for i in range(n):
            out[i] = self.bursts[i]
        return n


@dataclass
class ShapeModule:
    enabled: bool = True
    shape_type: ShapeType = ShapeType.CONE
    angle: float = 25.0
    radius: float = 1.0
    radius_thickness: float = 1.0
    arc: float = 360.0
    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    align_to_direction: bool = False
    random_direction_amount: float = 0.0
    spherical_direction_amount: float = 0.0


@dataclass
class VelocityOverLifetimeModule:
    enabled: bool = False
    x: MinMaxCurve = field(default_factory=MinMaxCurve)
    y: MinMaxCurve = field(default_factory=MinMaxCurve)
    z: MinMaxCurve = field(default_factory=MinMaxCurve)
    space: SimulationSpace = SimulationSpace.LOCAL


@dataclass
class LimitVelocityOverLifetimeModule:
    enabled: bool = False
    limit: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    dampen: float = 0.0
    separate_axes: bool = False
    limit_x: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    limit_y: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    limit_z: MinMaxCurve = field(default_factory=lambda: _constant(1.0))


@dataclass
class ForceOverLifetimeModule:
    enabled: bool = False
    x: MinMaxCurve = field(default_factory=MinMaxCurve)
    y: MinMaxCurve = field(default_factory=MinMaxCurve)
    z: MinMaxCurve = field(default_factory=MinMaxCurve)
    space: SimulationSpace = SimulationSpace.LOCAL
    randomized: bool = False


@dataclass
class ColorOverLifetimeModule:
    enabled: bool = False
    gradient: Gradient = field(default_factory=Gradient)


@dataclass
class SizeOverLifetimeModule:
    enabled: bool = False
    size: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    separate_axes: bool = False
    x: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    y: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    z: MinMaxCurve = field(default_factory=lambda: _constant(1.0))


@dataclass
class RotationOverLifetimeModule:
    enabled: bool = False
    x: MinMaxCurve = field(default_factory=MinMaxCurve)
    y: MinMaxCurve = field(default_factory=MinMaxCurve)
    z: MinMaxCurve = field(default_factory=MinMaxCurve)
    separate_axes: bool = False


@dataclass
class NoiseModule:
    enabled: bool = False
    strength: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    frequency: float = 0.5
    scroll_speed: float = 0.0
    damping: bool = True
    octave_count: int = 1
    octave_multiplier: float = 0.5
    octave_scale: float = 2.0
    quality: NoiseQuality = NoiseQuality.HIGH
    separate_axes: bool = False
    strength_x: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    strength_y: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    strength_z: MinMaxCurve = field(default_factory=lambda: _constant(1.0))


@dataclass
class CollisionModule:
    enabled: bool = False
    type: CollisionType = CollisionType.PLANES
    mode: CollisionMode = CollisionMode.COLLISION_3D
    dampen: MinMaxCurve = field(default_factory=MinMaxCurve)
    bounce: MinMaxCurve = field(default_factory=lambda: _constant(1.0))
    lifetime_loss: MinMaxCurve = field(default_factory=MinMaxCurve)
    min_kill_speed: float = 0.0
    max_kill_speed: float = 10000.0
    radius_scale: float = 1.0
    collides_with: int = -1     # layer bitmask
    max_collision_shapes: int = 256


@dataclass
class TextureSheetAnimationModule:
    enabled: bool = False
    num_tiles_x: int = 1
    num_tiles_y: int = 1
    animation: AnimationType = AnimationType.WHOLE_SHEET
    mode: AnimationMode = AnimationMode.GRID
    frame_over_time: MinMaxCurve = field(default_factory=MinMaxCurve)
    start_frame: MinMaxCurve = field(default_factory=MinMaxCurve)
    cycle_count: int = 1
    row_index: int = 0


# ============================================================================
# Renderer / textures
# ============================================================================

@dataclass
class Texture:
    """Main texture of a material.

    Pixel data comes either from an in-memory RGBA array or from an image file
    on disk; a texture with neither is not readable.
    """
    name: str = ""
    pixels: Optional[np.ndarray] = field(default=None, repr=False)
    image_path: Optional[Path] = None

    def read_pixels(self) -> np.ndarray:
        if self.pixels is not None:
            return self.pixels
        if self.image_path is None:
            raise ValueError(f"Texture '{self.name}' has no readable pixel data")
        from PIL import Image

        with Image.open(str(self.image_path)) as img:
            return np.array(img.convert('RGBA'))


@dataclass
class Material:
    name: str = ""
    main_texture: Optional[Texture] = None


@dataclass
class RendererComponent:
    render_mode: RenderMode = RenderMode.BILLBOARD
    sort_mode: SortMode = SortMode.NONE
    min_particle_size: float = 0.0
    max_particle_size: float = 0.5
    material: Optional[Material] = None
    pivot: Vector3 = field(default_factory=Vector3)
    flip: Vector3 = field(default_factory=Vector3)
    velocity_scale: Vector3 = field(default_factory=Vector3)
    length_scale: float = 2.0
    normal_direction: float = 1.0
    sorting_order: int = 0


# ============================================================================
# Sub-emitters
# ============================================================================

@dataclass
class SubEmitterSlot:
    type: SubEmitterType = SubEmitterType.BIRTH
    system: Optional[object] = None     # child EffectSource, or None when unassigned


@dataclass
class SubEmittersModule:
    enabled: bool = False
    slots: List[SubEmitterSlot] = field(default_factory=list)

    @property
    def sub_emitters_count(self) -> int:
        return len(self.slots)

    def get_sub_emitter_type(self, index: int) -> SubEmitterType:
        return self.slots[index].type

    def get_sub_emitter_system(self, index: int):
        return self.slots[index].system
