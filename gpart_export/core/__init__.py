"""
Core data structures: value codecs, enumeration names and the export schema.
"""

from .errors import InvalidInputError, ModuleReadError, MissingRendererWarning, TextureExportWarning
from .names import enum_name, enum_from_name
from .values import (
    Vector3Data,
    ColorData,
    KeyframeData,
    AnimationCurveData,
    MinMaxCurveData,
    GradientColorKeyData,
    GradientAlphaKeyData,
    GradientData,
    BurstData,
    encode_vector3,
    encode_color,
    encode_curve,
    encode_scalar_range,
    encode_gradient,
    encode_burst,
)
from .schema import (
    SCHEMA_VERSION,
    EXPORTER_ID,
    DEFAULT_EXTENSION,
    MetadataData,
    MainModuleData,
    EmissionModuleData,
    ShapeModuleData,
    VelocityOverLifetimeModuleData,
    LimitVelocityOverLifetimeModuleData,
    ForceOverLifetimeModuleData,
    ColorOverLifetimeModuleData,
    SizeOverLifetimeModuleData,
    RotationOverLifetimeModuleData,
    NoiseModuleData,
    CollisionModuleData,
    TextureSheetAnimationModuleData,
    RendererModuleData,
    SubEmitterData,
    ParticleSystemExport,
)
from .evaluate import evaluate_curve, evaluate_scalar_range, evaluate_gradient

__all__ = [
    # errors
    'InvalidInputError', 'ModuleReadError', 'MissingRendererWarning', 'TextureExportWarning',
    # names
    'enum_name', 'enum_from_name',
    # values
    'Vector3Data', 'ColorData', 'KeyframeData', 'AnimationCurveData', 'MinMaxCurveData',
    'GradientColorKeyData', 'GradientAlphaKeyData', 'GradientData', 'BurstData',
    'encode_vector3', 'encode_color', 'encode_curve', 'encode_scalar_range',
    'encode_gradient', 'encode_burst',
    # schema
    'SCHEMA_VERSION', 'EXPORTER_ID', 'DEFAULT_EXTENSION', 'MetadataData',
    'MainModuleData', 'EmissionModuleData', 'ShapeModuleData',
    'VelocityOverLifetimeModuleData', 'LimitVelocityOverLifetimeModuleData',
    'ForceOverLifetimeModuleData', 'ColorOverLifetimeModuleData',
    'SizeOverLifetimeModuleData', 'RotationOverLifetimeModuleData',
    'NoiseModuleData', 'CollisionModuleData', 'TextureSheetAnimationModuleData',
    'RendererModuleData', 'SubEmitterData', 'ParticleSystemExport',
    # evaluate
    'evaluate_curve', 'evaluate_scalar_range', 'evaluate_gradient',
]
