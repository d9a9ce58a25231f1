"""
Source side: the authoring tool's object model and the accessor the exporter reads.

The YAML loader lives in ``gpart_export.source.loader`` and is imported
explicitly (it depends on ``gpart_export.core``).
"""

from .model import (
    CurveMode,
    SimulationSpace,
    ShapeType,
    CollisionType,
    CollisionMode,
    NoiseQuality,
    AnimationType,
    AnimationMode,
    RenderMode,
    SortMode,
    SubEmitterType,
    Vector3,
    Color,
    Keyframe,
    AnimationCurve,
    MinMaxCurve,
    GradientColorKey,
    GradientAlphaKey,
    Gradient,
    Burst,
    MainModule,
    EmissionModule,
    ShapeModule,
    VelocityOverLifetimeModule,
    LimitVelocityOverLifetimeModule,
    ForceOverLifetimeModule,
    ColorOverLifetimeModule,
    SizeOverLifetimeModule,
    RotationOverLifetimeModule,
    NoiseModule,
    CollisionModule,
    TextureSheetAnimationModule,
    Texture,
    Material,
    RendererComponent,
    SubEmitterSlot,
    SubEmittersModule,
)
from .accessor import EffectSource, EffectDefinition, ModuleSet

__all__ = [
    # enums
    'CurveMode', 'SimulationSpace', 'ShapeType', 'CollisionType', 'CollisionMode',
    'NoiseQuality', 'AnimationType', 'AnimationMode', 'RenderMode', 'SortMode',
    'SubEmitterType',
    # values
    'Vector3', 'Color', 'Keyframe', 'AnimationCurve', 'MinMaxCurve',
    'GradientColorKey', 'GradientAlphaKey', 'Gradient', 'Burst',
    # modules
    'MainModule', 'EmissionModule', 'ShapeModule', 'VelocityOverLifetimeModule',
    'LimitVelocityOverLifetimeModule', 'ForceOverLifetimeModule',
    'ColorOverLifetimeModule', 'SizeOverLifetimeModule', 'RotationOverLifetimeModule',
    'NoiseModule', 'CollisionModule', 'TextureSheetAnimationModule',
    'Texture', 'Material', 'RendererComponent', 'SubEmitterSlot', 'SubEmittersModule',
    # accessor
    'EffectSource', 'EffectDefinition', 'ModuleSet',
]
