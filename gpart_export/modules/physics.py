"""Noise and collision module translators."""

from ..core.names import enum_name
from ..core.schema import CollisionModuleData, NoiseModuleData
from ..core.values import encode_scalar_range
from ..source.accessor import EffectSource


def translate_noise(source: EffectSource) -> NoiseModuleData:
    noise = source.noise
    return NoiseModuleData(
        enabled=noise.enabled,
        strength=encode_scalar_range(noise.strength),
        frequency=noise.frequency,
        scroll_speed=noise.scroll_speed,
        damping=noise.damping,
        octaves=noise.octave_count,
        octave_multiplier=noise.octave_multiplier,
        octave_scale=noise.octave_scale,
        quality=int(noise.quality),     # level, not a name
        separate_axes=noise.separate_axes,
        strength_x=encode_scalar_range(noise.strength_x),
        strength_y=encode_scalar_range(noise.strength_y),
        strength_z=encode_scalar_range(noise.strength_z),
    )


def translate_collision(source: EffectSource) -> CollisionModuleData:
    collision = source.collision
    return CollisionModuleData(
        enabled=collision.enabled,
        type=enum_name(collision.type),
        mode=enum_name(collision.mode),
        dampen=encode_scalar_range(collision.dampen),
        bounce=encode_scalar_range(collision.bounce),
        lifetime_loss=encode_scalar_range(collision.lifetime_loss),
        min_kill_speed=collision.min_kill_speed,
        max_kill_speed=collision.max_kill_speed,
        radius_scale=collision.radius_scale,
        # Only whether any layer is set; the mask itself is not exported
        collides_with_dynamic=collision.collides_with != 0,
        max_collision_shapes=collision.max_collision_shapes,
    )
