"""Shared fixtures: in-memory effect definitions."""

import numpy as np
import pytest

from gpart_export.source import (
    AnimationCurve,
    Burst,
    Color,
    CollisionType,
    CurveMode,
    EffectDefinition,
    Gradient,
    GradientAlphaKey,
    GradientColorKey,
    Keyframe,
    Material,
    MinMaxCurve,
    ModuleSet,
    RendererComponent,
    ShapeType,
    SimulationSpace,
    SubEmitterSlot,
    SubEmitterType,
    Texture,
    Vector3,
)


def constant(value):
    return MinMaxCurve(mode=CurveMode.CONSTANT, constant=value)


def linear_curve(start=0.0, end=1.0):
    slope = end - start
    return AnimationCurve(keys=[
        Keyframe(time=0.0, value=start, in_tangent=slope, out_tangent=slope),
        Keyframe(time=1.0, value=end, in_tangent=slope, out_tangent=slope),
    ])


@pytest.fixture
def explosion():
    """'Explosion': non-looping, one burst, collision configured but disabled."""
    modules = ModuleSet()
    modules.main.duration = 2.5
    modules.main.loop = False
    modules.main.max_particles = 500
    modules.emission.bursts = [
        Burst(time=0.0, min_count=10, max_count=20, cycle_count=1, repeat_interval=0.0),
    ]
    modules.collision.enabled = False
    modules.collision.type = CollisionType.WORLD
    return EffectDefinition(
        effect_name="Explosion",
        modules=modules,
        renderer=RendererComponent(material=Material(name="ExplosionMat")),
    )


@pytest.fixture
def full_effect():
    """Every module enabled with non-default values."""
    m = ModuleSet()
    m.main.start_lifetime = MinMaxCurve(mode=CurveMode.TWO_CONSTANTS, constant_min=0.5, constant_max=1.5)
    m.main.start_size_3d = True
    m.main.start_color = Color(1.0, 0.5, 0.25, 1.0)
    m.main.simulation_space = SimulationSpace.WORLD
    m.emission.bursts = [Burst(time=0.0, min_count=5, max_count=5), Burst(time=0.5, min_count=1, max_count=3)]
    m.shape.shape_type = ShapeType.BOX
    m.shape.scale = Vector3(2.0, 3.0, 4.0)
    for module in (m.velocity_over_lifetime, m.limit_velocity_over_lifetime, m.force_over_lifetime,
                   m.color_over_lifetime, m.size_over_lifetime, m.rotation_over_lifetime,
                   m.noise, m.collision, m.texture_sheet_animation, m.sub_emitters):
        module.enabled = True
    m.velocity_over_lifetime.y = constant(2.0)
    m.color_over_lifetime.gradient = Gradient(
        color_keys=[GradientColorKey(Color(1.0, 0.0, 0.0), 0.0), GradientColorKey(Color(0.0, 0.0, 1.0), 1.0)],
        alpha_keys=[GradientAlphaKey(1.0, 0.0), GradientAlphaKey(0.0, 1.0)],
    )
    m.size_over_lifetime.size = MinMaxCurve(mode=CurveMode.CURVE, curve=linear_curve(1.0, 0.0))
    m.texture_sheet_animation.num_tiles_x = 4
    m.texture_sheet_animation.num_tiles_y = 4

    child = EffectDefinition(effect_name="Sparks")
    m.sub_emitters.slots = [SubEmitterSlot(type=SubEmitterType.DEATH, system=child)]

    renderer = RendererComponent(
        material=Material(name="FireMat", main_texture=Texture(name="fire")),
        flip=Vector3(1.0, 0.0, 0.0),
    )
    return EffectDefinition(effect_name="Fire", modules=m, renderer=renderer)


@pytest.fixture
def textured_effect():
    pixels = np.zeros((4, 8, 4), dtype=np.uint8)
    pixels[..., 0] = 255
    pixels[..., 3] = 255
    renderer = RendererComponent(
        material=Material(name="SmokeMat", main_texture=Texture(name="smoke", pixels=pixels)),
    )
    return EffectDefinition(effect_name="Smoke", renderer=renderer)
