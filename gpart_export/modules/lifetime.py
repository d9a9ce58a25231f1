"""Over-lifetime module translators: velocity, velocity limit, force, color, size, rotation."""

from ..core.names import enum_name
from ..core.schema import (
    ColorOverLifetimeModuleData,
    ForceOverLifetimeModuleData,
    LimitVelocityOverLifetimeModuleData,
    RotationOverLifetimeModuleData,
    SizeOverLifetimeModuleData,
    VelocityOverLifetimeModuleData,
)
from ..core.values import encode_gradient, encode_scalar_range
from ..source.accessor import EffectSource


def translate_velocity_over_lifetime(source: EffectSource) -> VelocityOverLifetimeModuleData:
    vel = source.velocity_over_lifetime
    return VelocityOverLifetimeModuleData(
        enabled=vel.enabled,
        x=encode_scalar_range(vel.x),
        y=encode_scalar_range(vel.y),
        z=encode_scalar_range(vel.z),
        space=enum_name(vel.space),
    )


def translate_limit_velocity_over_lifetime(source: EffectSource) -> LimitVelocityOverLifetimeModuleData:
    limit = source.limit_velocity_over_lifetime
    return LimitVelocityOverLifetimeModuleData(
        enabled=limit.enabled,
        limit=encode_scalar_range(limit.limit),
        dampen=limit.dampen,
        separate_axes=limit.separate_axes,
        limit_x=encode_scalar_range(limit.limit_x),
        limit_y=encode_scalar_range(limit.limit_y),
        limit_z=encode_scalar_range(limit.limit_z),
    )


def translate_force_over_lifetime(source: EffectSource) -> ForceOverLifetimeModuleData:
    force = source.force_over_lifetime
    return ForceOverLifetimeModuleData(
        enabled=force.enabled,
        x=encode_scalar_range(force.x),
        y=encode_scalar_range(force.y),
        z=encode_scalar_range(force.z),
        space=enum_name(force.space),
        randomized=force.randomized,
    )


def translate_color_over_lifetime(source: EffectSource) -> ColorOverLifetimeModuleData:
    color = source.color_over_lifetime
    return ColorOverLifetimeModuleData(
        enabled=color.enabled,
        gradient=encode_gradient(color.gradient),
    )


def translate_size_over_lifetime(source: EffectSource) -> SizeOverLifetimeModuleData:
    size = source.size_over_lifetime
    return SizeOverLifetimeModuleData(
        enabled=size.enabled,
        size=encode_scalar_range(size.size),
        separate_axes=size.separate_axes,
        x=encode_scalar_range(size.x),
        y=encode_scalar_range(size.y),
        z=encode_scalar_range(size.z),
    )


def translate_rotation_over_lifetime(source: EffectSource) -> RotationOverLifetimeModuleData:
    rotation = source.rotation_over_lifetime
    return RotationOverLifetimeModuleData(
        enabled=rotation.enabled,
        x=encode_scalar_range(rotation.x),
        y=encode_scalar_range(rotation.y),
        z=encode_scalar_range(rotation.z),
        separate_axes=rotation.separate_axes,
    )
