"""Texture sheet animation, renderer and sub-emitter translators."""

import warnings
from typing import Optional, Tuple

from ..core.errors import MissingRendererWarning
from ..core.names import enum_name
from ..core.schema import RendererModuleData, SubEmitterData, TextureSheetAnimationModuleData
from ..core.values import encode_scalar_range, encode_vector3
from ..source.accessor import EffectSource


def translate_texture_sheet_animation(source: EffectSource) -> TextureSheetAnimationModuleData:
    sheet = source.texture_sheet_animation
    return TextureSheetAnimationModuleData(
        enabled=sheet.enabled,
        num_tiles_x=sheet.num_tiles_x,
        num_tiles_y=sheet.num_tiles_y,
        animation_type=enum_name(sheet.animation),
        mode=enum_name(sheet.mode),
        frame_over_time=encode_scalar_range(sheet.frame_over_time),
        start_frame=encode_scalar_range(sheet.start_frame),
        cycle_count=sheet.cycle_count,
        row_index=sheet.row_index,
    )


def translate_renderer(source: EffectSource) -> Optional[RendererModuleData]:
    """Renderer record, or None when the effect has no renderer attached."""
    renderer = source.get_renderer()
    if renderer is None:
        warnings.warn(f"'{source.name}' has no renderer attached; renderer left unset",
                      MissingRendererWarning)
        return None

    material = renderer.material
    material_name = material.name if material is not None else ""
    texture_name = ""
    if material is not None and material.main_texture is not None:
        texture_name = material.main_texture.name

    flip = renderer.flip
    return RendererModuleData(
        render_mode=enum_name(renderer.render_mode),
        sort_mode=enum_name(renderer.sort_mode),
        min_particle_size=renderer.min_particle_size,
        max_particle_size=renderer.max_particle_size,
        material=material_name,
        texture=texture_name,
        pivot=encode_vector3(renderer.pivot),
        flip=(flip.x != 0 or flip.y != 0 or flip.z != 0),
        velocity_scale=encode_vector3(renderer.velocity_scale),
        length_scale=renderer.length_scale,
        normal_direction=renderer.normal_direction,
        sorting_order=renderer.sorting_order,
    )


def translate_sub_emitters(source: EffectSource) -> Tuple[SubEmitterData, ...]:
    """One entry per slot that has a child effect, in slot order."""
    subs = source.sub_emitters
    entries = []
    for i in range(subs.sub_emitters_count):
        child = subs.get_sub_emitter_system(i)
        if child is None:
            continue
        entries.append(SubEmitterData(
            type=enum_name(subs.get_sub_emitter_type(i)),
            name=child.name,
        ))
    return tuple(entries)
