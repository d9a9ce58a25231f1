"""
Module translators: one pure function per particle-system module.

Each translator reads one module from an ``EffectSource`` and returns the
record stored under its root key. ``MODULE_TRANSLATORS`` fixes the order
in which the exporter runs them.
"""

from .system import translate_main, translate_emission, translate_shape
from .lifetime import (
    translate_velocity_over_lifetime,
    translate_limit_velocity_over_lifetime,
    translate_force_over_lifetime,
    translate_color_over_lifetime,
    translate_size_over_lifetime,
    translate_rotation_over_lifetime,
)
from .physics import translate_noise, translate_collision
from .rendering import (
    translate_texture_sheet_animation,
    translate_renderer,
    translate_sub_emitters,
)

# (root field, translator) in export order
MODULE_TRANSLATORS = (
    ('system', translate_main),
    ('emission', translate_emission),
    ('shape', translate_shape),
    ('velocity_over_lifetime', translate_velocity_over_lifetime),
    ('limit_velocity_over_lifetime', translate_limit_velocity_over_lifetime),
    ('force_over_lifetime', translate_force_over_lifetime),
    ('color_over_lifetime', translate_color_over_lifetime),
    ('size_over_lifetime', translate_size_over_lifetime),
    ('rotation_over_lifetime', translate_rotation_over_lifetime),
    ('noise', translate_noise),
    ('collision', translate_collision),
    ('texture_sheet_animation', translate_texture_sheet_animation),
    ('renderer', translate_renderer),
    ('sub_emitters', translate_sub_emitters),
)

__all__ = [
    'MODULE_TRANSLATORS',
    # system
    'translate_main', 'translate_emission', 'translate_shape',
    # lifetime
    'translate_velocity_over_lifetime', 'translate_limit_velocity_over_lifetime',
    'translate_force_over_lifetime', 'translate_color_over_lifetime',
    'translate_size_over_lifetime', 'translate_rotation_over_lifetime',
    # physics
    'translate_noise', 'translate_collision',
    # rendering
    'translate_texture_sheet_animation', 'translate_renderer', 'translate_sub_emitters',
]
