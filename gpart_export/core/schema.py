"""Export Schema

Module records and the root document of the .gpart interchange format.
Field declaration order is the emission order. Defaults match what the
consuming runtime assumes for a missing field, so a reader can fill gaps
with them.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .values import (
    BurstData,
    ColorData,
    GradientData,
    MinMaxCurveData,
    Vector3Data,
)

SCHEMA_VERSION = "1.0"
EXPORTER_ID = "gpart-export v1.0"
DEFAULT_EXTENSION = "gpart"


def _scalar(value: float = 0.0) -> MinMaxCurveData:
    return MinMaxCurveData(constant=value)


@dataclass(frozen=True)
class MetadataData:
    name: str = "Unnamed"
    version: str = SCHEMA_VERSION
    export_date: str = ""
    exporter: str = EXPORTER_ID


@dataclass(frozen=True)
class MainModuleData:
    duration: float = 5.0
    looping: bool = True
    prewarm: bool = False
    start_delay: MinMaxCurveData = field(default_factory=_scalar)
    start_lifetime: MinMaxCurveData = field(default_factory=_scalar)
    start_speed: MinMaxCurveData = field(default_factory=_scalar)
    start_size: MinMaxCurveData = field(default_factory=_scalar)
    start_size_3d: bool = field(default=False, metadata={"key": "startSize3D"})
    start_size_x: MinMaxCurveData = field(default_factory=_scalar)
    start_size_y: MinMaxCurveData = field(default_factory=_scalar)
    start_size_z: MinMaxCurveData = field(default_factory=_scalar)
    start_rotation: MinMaxCurveData = field(default_factory=_scalar)
    start_rotation_3d: bool = field(default=False, metadata={"key": "startRotation3D"})
    start_rotation_x: MinMaxCurveData = field(default_factory=_scalar)
    start_rotation_y: MinMaxCurveData = field(default_factory=_scalar)
    start_rotation_z: MinMaxCurveData = field(default_factory=_scalar)
    start_color: ColorData = field(default_factory=ColorData)
    gravity_modifier: MinMaxCurveData = field(default_factory=_scalar)
    simulation_space: str = "Local"
    simulation_speed: float = 1.0
    play_on_awake: bool = True
    max_particles: int = 1000


@dataclass(frozen=True)
class EmissionModuleData:
    enabled: bool = True
    rate_over_time: MinMaxCurveData = field(default_factory=_scalar)
    rate_over_distance: MinMaxCurveData = field(default_factory=_scalar)
    bursts: Tuple[BurstData, ...] = ()


@dataclass(frozen=True)
class ShapeModuleData:
    enabled: bool = True
    shape_type: str = "Cone"
    angle: float = 25.0
    radius: float = 1.0
    radius_thickness: float = 1.0
    arc: float = 360.0
    box_scale: Vector3Data = field(default_factory=Vector3Data)
    position: Vector3Data = field(default_factory=Vector3Data)
    rotation: Vector3Data = field(default_factory=Vector3Data)
    scale: Vector3Data = field(default_factory=Vector3Data)
    align_to_direction: bool = False
    random_direction_amount: float = 0.0
    spherical_direction_amount: float = 0.0


@dataclass(frozen=True)
class VelocityOverLifetimeModuleData:
    enabled: bool = False
    x: MinMaxCurveData = field(default_factory=_scalar)
    y: MinMaxCurveData = field(default_factory=_scalar)
    z: MinMaxCurveData = field(default_factory=_scalar)
    space: str = "Local"


@dataclass(frozen=True)
class LimitVelocityOverLifetimeModuleData:
    enabled: bool = False
    limit: MinMaxCurveData = field(default_factory=_scalar)
    dampen: float = 0.5
    separate_axes: bool = False
    limit_x: MinMaxCurveData = field(default_factory=_scalar)
    limit_y: MinMaxCurveData = field(default_factory=_scalar)
    limit_z: MinMaxCurveData = field(default_factory=_scalar)


@dataclass(frozen=True)
class ForceOverLifetimeModuleData:
    enabled: bool = False
    x: MinMaxCurveData = field(default_factory=_scalar)
    y: MinMaxCurveData = field(default_factory=_scalar)
    z: MinMaxCurveData = field(default_factory=_scalar)
    space: str = "Local"
    randomized: bool = False


@dataclass(frozen=True)
class ColorOverLifetimeModuleData:
    enabled: bool = False
    gradient: GradientData = field(default_factory=GradientData)


@dataclass(frozen=True)
class SizeOverLifetimeModuleData:
    enabled: bool = False
    size: MinMaxCurveData = field(default_factory=_scalar)
    separate_axes: bool = False
    x: MinMaxCurveData = field(default_factory=_scalar)
    y: MinMaxCurveData = field(default_factory=_scalar)
    z: MinMaxCurveData = field(default_factory=_scalar)


@dataclass(frozen=True)
class RotationOverLifetimeModuleData:
    enabled: bool = False
    x: MinMaxCurveData = field(default_factory=_scalar)
    y: MinMaxCurveData = field(default_factory=_scalar)
    z: MinMaxCurveData = field(default_factory=_scalar)
    separate_axes: bool = False


@dataclass(frozen=True)
class NoiseModuleData:
    enabled: bool = False
    strength: MinMaxCurveData = field(default_factory=_scalar)
    frequency: float = 0.5
    scroll_speed: float = 0.0
    damping: bool = True
    octaves: int = 1
    octave_multiplier: float = 0.5
    octave_scale: float = 2.0
    quality: int = 1            # integer level, unlike the other enumerations
    separate_axes: bool = False
    strength_x: MinMaxCurveData = field(default_factory=_scalar)
    strength_y: MinMaxCurveData = field(default_factory=_scalar)
    strength_z: MinMaxCurveData = field(default_factory=_scalar)


@dataclass(frozen=True)
class CollisionModuleData:
    enabled: bool = False
    type: str = "World"
    mode: str = "Collision3D"
    dampen: MinMaxCurveData = field(default_factory=_scalar)
    bounce: MinMaxCurveData = field(default_factory=_scalar)
    lifetime_loss: MinMaxCurveData = field(default_factory=_scalar)
    min_kill_speed: float = 0.0
    max_kill_speed: float = 10000.0
    radius_scale: float = 1.0
    collides_with_dynamic: bool = True
    max_collision_shapes: int = 256


@dataclass(frozen=True)
class TextureSheetAnimationModuleData:
    enabled: bool = False
    num_tiles_x: int = 1
    num_tiles_y: int = 1
    animation_type: str = "WholeSheet"
    mode: str = "Grid"
    frame_over_time: MinMaxCurveData = field(default_factory=_scalar)
    start_frame: MinMaxCurveData = field(default_factory=_scalar)
    cycle_count: int = 1
    row_index: int = 0


@dataclass(frozen=True)
class RendererModuleData:
    render_mode: str = "Billboard"
    sort_mode: str = "None"
    min_particle_size: float = 0.0
    max_particle_size: float = 0.5
    material: str = ""
    texture: str = ""
    pivot: Vector3Data = field(default_factory=Vector3Data)
    flip: bool = False
    velocity_scale: Vector3Data = field(default_factory=Vector3Data)
    length_scale: float = 2.0
    normal_direction: float = 1.0
    sorting_order: int = 0


@dataclass(frozen=True)
class SubEmitterData:
    type: str = "Birth"
    name: str = ""


@dataclass(frozen=True)
class ParticleSystemExport:
    """Root of one exported effect. ``renderer`` is None when none is attached."""
    metadata: MetadataData = field(default_factory=MetadataData)
    system: MainModuleData = field(default_factory=MainModuleData)
    emission: EmissionModuleData = field(default_factory=EmissionModuleData)
    shape: ShapeModuleData = field(default_factory=ShapeModuleData)
    velocity_over_lifetime: VelocityOverLifetimeModuleData = field(
        default_factory=VelocityOverLifetimeModuleData)
    limit_velocity_over_lifetime: LimitVelocityOverLifetimeModuleData = field(
        default_factory=LimitVelocityOverLifetimeModuleData)
    force_over_lifetime: ForceOverLifetimeModuleData = field(default_factory=ForceOverLifetimeModuleData)
    color_over_lifetime: ColorOverLifetimeModuleData = field(default_factory=ColorOverLifetimeModuleData)
    size_over_lifetime: SizeOverLifetimeModuleData = field(default_factory=SizeOverLifetimeModuleData)
    rotation_over_lifetime: RotationOverLifetimeModuleData = field(
        default_factory=RotationOverLifetimeModuleData)
    noise: NoiseModuleData = field(default_factory=NoiseModuleData)
    collision: CollisionModuleData = field(default_factory=CollisionModuleData)
    texture_sheet_animation: TextureSheetAnimationModuleData = field(
        default_factory=TextureSheetAnimationModuleData)
    renderer: Optional[RendererModuleData] = None
    sub_emitters: Tuple[SubEmitterData, ...] = ()
