"""Main, emission and shape module translators."""

from ..core.errors import ModuleReadError
from ..core.names import enum_name
from ..core.schema import EmissionModuleData, MainModuleData, ShapeModuleData
from ..core.values import encode_burst, encode_color, encode_scalar_range, encode_vector3
from ..source.accessor import EffectSource


def translate_main(source: EffectSource) -> MainModuleData:
    main = source.main

    return MainModuleData(
        duration=main.duration,
        looping=main.loop,
        prewarm=main.prewarm,
        start_delay=encode_scalar_range(main.start_delay),
        start_lifetime=encode_scalar_range(main.start_lifetime),
        start_speed=encode_scalar_range(main.start_speed),
        start_size=encode_scalar_range(main.start_size),
        start_size_3d=main.start_size_3d,
        start_size_x=encode_scalar_range(main.start_size_x),
        start_size_y=encode_scalar_range(main.start_size_y),
        start_size_z=encode_scalar_range(main.start_size_z),
        start_rotation=encode_scalar_range(main.start_rotation),
        start_rotation_3d=main.start_rotation_3d,
        start_rotation_x=encode_scalar_range(main.start_rotation_x),
        start_rotation_y=encode_scalar_range(main.start_rotation_y),
        start_rotation_z=encode_scalar_range(main.start_rotation_z),
        start_color=encode_color(main.start_color),
        gravity_modifier=encode_scalar_range(main.gravity_modifier),
        simulation_space=enum_name(main.simulation_space),
        simulation_speed=main.simulation_speed,
        play_on_awake=main.play_on_awake,
        max_particles=max(0, int(main.max_particles)),
    )


def translate_emission(source: EffectSource) -> EmissionModuleData:
    emission = source.emission

    # Size the buffer to the reported count before filling it
    count = emission.burst_count
    buffer = [None] * count
    written = emission.get_bursts(buffer)
    if written != count:
        raise ModuleReadError(
            "emission",
            ValueError(f"source reported {count} bursts but returned {written}"),
        )

    return EmissionModuleData(
        enabled=emission.enabled,
        rate_over_time=encode_scalar_range(emission.rate_over_time),
        rate_over_distance=encode_scalar_range(emission.rate_over_distance),
        bursts=tuple(encode_burst(b) for b in buffer),
    )


def translate_shape(source: EffectSource) -> ShapeModuleData:
    shape = source.shape

    # boxScale and scale are the same source value; both are emitted
    return ShapeModuleData(
        enabled=shape.enabled,
        shape_type=enum_name(shape.shape_type),
        angle=shape.angle,
        radius=shape.radius,
        radius_thickness=shape.radius_thickness,
        arc=shape.arc,
        box_scale=encode_vector3(shape.scale),
        position=encode_vector3(shape.position),
        rotation=encode_vector3(shape.rotation),
        scale=encode_vector3(shape.scale),
        align_to_direction=shape.align_to_direction,
        random_direction_amount=shape.random_direction_amount,
        spherical_direction_amount=shape.spherical_direction_amount,
    )
