"""Effect Description Loader: YAML files into in-memory effect definitions.

A description names the effect and lists the modules that differ from the
authoring tool's defaults. Keys are the module and field names of
``gpart_export.source.model``; enumerations are given by their canonical
names ("World", "Cone", "TwoConstants", ...).

    name: Explosion
    main:
      duration: 2.5
      loop: false
      start_lifetime: {mode: TwoConstants, constant_min: 0.5, constant_max: 1.0}
      max_particles: 500
    emission:
      bursts:
        - {time: 0, min_count: 10, max_count: 20}
    size_over_lifetime:
      enabled: true
      size: {mode: Curve, curve: [[0, 1], [1, 0]]}
    renderer:
      material: {name: FireMat, main_texture: {name: fire, image: fire.png}}
    sub_emitters:
      enabled: true
      slots:
        - {type: Death, system: {name: Sparks}}
"""

from dataclasses import fields
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, get_args, get_origin, get_type_hints

import yaml

from .accessor import EffectDefinition, ModuleSet
from .model import (
    AnimationCurve,
    Burst,
    Color,
    CurveMode,
    Gradient,
    GradientAlphaKey,
    GradientColorKey,
    Keyframe,
    Material,
    MinMaxCurve,
    RendererComponent,
    SubEmitterSlot,
    SubEmittersModule,
    SubEmitterType,
    Texture,
    Vector3,
)
from ..core.names import enum_from_name


def _mapping(d, where: str) -> Dict:
    if not isinstance(d, dict):
        raise ValueError(f"{where} must be a mapping, got {type(d).__name__}")
    return d


def _sequence(v, where: str) -> List:
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"{where} must be a list, got {type(v).__name__}")
    return v


def _floats(v, count: int, where: str) -> List[float]:
    components = [float(c) for c in _sequence(v, where)]
    if len(components) != count:
        raise ValueError(f"{where} needs {count} components, got {len(components)}")
    return components


def _parse_vector3(v, where: str = "vector") -> Vector3:
    if isinstance(v, dict):
        return Vector3(x=float(v.get("x", 0.0)), y=float(v.get("y", 0.0)), z=float(v.get("z", 0.0)))
    return Vector3(*_floats(v, 3, where))


def _parse_color(v, where: str = "color") -> Color:
    if isinstance(v, dict):
        return Color(
            r=float(v.get("r", 1.0)),
            g=float(v.get("g", 1.0)),
            b=float(v.get("b", 1.0)),
            a=float(v.get("a", 1.0)),
        )
    components = _floats(v, 4 if len(_sequence(v, where)) == 4 else 3, where)
    if len(components) == 3:
        components.append(1.0)
    return Color(*components)


def _parse_keyframe(k, where: str) -> Keyframe:
    if isinstance(k, dict):
        return Keyframe(
            time=float(k.get("time", 0.0)),
            value=float(k.get("value", 0.0)),
            in_tangent=float(k.get("in_tangent", 0.0)),
            out_tangent=float(k.get("out_tangent", 0.0)),
        )
    # [time, value] or [time, value, in_tangent, out_tangent]
    return Keyframe(*_floats(k, 4 if len(_sequence(k, where)) == 4 else 2, where))


def _parse_curve(v, where: str) -> Optional[AnimationCurve]:
    if v is None:
        return None
    keys = _mapping(v, where).get("keys", []) if isinstance(v, dict) else v
    return AnimationCurve(keys=[
        _parse_keyframe(k, f"{where}[{i}]") for i, k in enumerate(_sequence(keys, where))
    ])


def _parse_min_max_curve(v, where: str = "curve") -> MinMaxCurve:
    """A bare number is a constant; a mapping spells out mode and values."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return MinMaxCurve(mode=CurveMode.CONSTANT, constant=float(v))
    _mapping(v, where)
    return MinMaxCurve(
        mode=enum_from_name(CurveMode, v.get("mode", "Constant")),
        constant=float(v.get("constant", 0.0)),
        constant_min=float(v.get("constant_min", 0.0)),
        constant_max=float(v.get("constant_max", 0.0)),
        curve=_parse_curve(v.get("curve"), f"{where}.curve"),
        curve_min=_parse_curve(v.get("curve_min"), f"{where}.curve_min"),
        curve_max=_parse_curve(v.get("curve_max"), f"{where}.curve_max"),
        curve_multiplier=float(v.get("multiplier", 1.0)),
    )


def _parse_gradient(v: Optional[Dict], where: str = "gradient") -> Gradient:
    if v is None:
        return Gradient()
    _mapping(v, where)
    color_keys = []
    for i, k in enumerate(_sequence(v.get("color_keys", []), f"{where}.color_keys")):
        k = _mapping(k, f"{where}.color_keys[{i}]")
        color_keys.append(GradientColorKey(
            color=_parse_color(k.get("color", [1, 1, 1]), f"{where}.color_keys[{i}].color"),
            time=float(k.get("time", 0.0)),
        ))
    alpha_keys = []
    for i, k in enumerate(_sequence(v.get("alpha_keys", []), f"{where}.alpha_keys")):
        k = _mapping(k, f"{where}.alpha_keys[{i}]")
        alpha_keys.append(GradientAlphaKey(alpha=float(k.get("alpha", 1.0)), time=float(k.get("time", 0.0))))
    return Gradient(color_keys=color_keys, alpha_keys=alpha_keys)


def _parse_burst(d, where: str) -> Burst:
    _mapping(d, where)
    return Burst(
        time=float(d.get("time", 0.0)),
        min_count=int(d.get("min_count", 30)),
        max_count=int(d.get("max_count", d.get("min_count", 30))),
        cycle_count=int(d.get("cycle_count", 1)),
        repeat_interval=float(d.get("repeat_interval", 0.01)),
    )


def _parse_texture(d: Optional[Dict], base_dir: Path, where: str) -> Optional[Texture]:
    if d is None:
        return None
    _mapping(d, where)
    image_path = None
    if d.get("image"):
        image_path = Path(d["image"])
        if not image_path.is_absolute():
            image_path = (base_dir / image_path).resolve()
    return Texture(name=str(d.get("name", "")), image_path=image_path)


def _parse_material(d: Optional[Dict], base_dir: Path, where: str) -> Optional[Material]:
    if d is None:
        return None
    _mapping(d, where)
    return Material(
        name=str(d.get("name", "")),
        main_texture=_parse_texture(d.get("main_texture"), base_dir, f"{where}.main_texture"),
    )


_VALUE_PARSERS = {
    MinMaxCurve: _parse_min_max_curve,
    Vector3: _parse_vector3,
    Color: _parse_color,
    Gradient: _parse_gradient,
}


def _parse_field(hint, raw, where: str):
    if hint in _VALUE_PARSERS:
        return _VALUE_PARSERS[hint](raw, where)
    if get_origin(hint) is list and get_args(hint)[0] is Burst:
        return [_parse_burst(b, f"{where}[{i}]") for i, b in enumerate(_sequence(raw, where))]
    if isinstance(hint, type) and issubclass(hint, IntEnum):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return hint(raw)
        return enum_from_name(hint, str(raw))
    if hint is bool:
        return bool(raw)
    if hint in (int, float, str):
        if isinstance(raw, (dict, list)) or raw is None:
            raise ValueError(f"{where} must be {hint.__name__}, got {type(raw).__name__}")
        return hint(raw)
    raise ValueError(f"Unsupported field type for {where}: {hint}")


def _parse_module(cls, d: Optional[Dict], where: str):
    """Fill a module dataclass from a mapping; unset fields keep their defaults."""
    if d is None:
        return cls()
    _mapping(d, where)
    hints = get_type_hints(cls)
    known = {f.name for f in fields(cls)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown field(s) in {where}: {', '.join(sorted(map(str, unknown)))}")
    kwargs = {name: _parse_field(hints[name], value, f"{where}.{name}") for name, value in d.items()}
    return cls(**kwargs)


def _parse_renderer(d, base_dir: Path, where: str) -> RendererComponent:
    d = dict(_mapping(d, where))
    material = _parse_material(d.pop("material", None), base_dir, f"{where}.material")
    renderer = _parse_module(RendererComponent, d, where)
    renderer.material = material
    return renderer


def _parse_sub_emitters(d: Optional[Dict], base_dir: Path, where: str) -> SubEmittersModule:
    if d is None:
        return SubEmittersModule()
    _mapping(d, where)
    slots: List[SubEmitterSlot] = []
    for i, slot in enumerate(_sequence(d.get("slots", []), f"{where}.slots")):
        slot = _mapping(slot, f"{where}.slots[{i}]")
        system = slot.get("system")
        slots.append(SubEmitterSlot(
            type=enum_from_name(SubEmitterType, slot.get("type", "Birth")),
            system=_parse_effect(system, base_dir, f"{where}.slots[{i}].system") if system is not None else None,
        ))
    return SubEmittersModule(enabled=bool(d.get("enabled", bool(slots))), slots=slots)


def _parse_effect(raw: Dict[str, Any], base_dir: Path, where: str = "effect") -> EffectDefinition:
    raw = dict(_mapping(raw, where))
    name = str(raw.pop("name", "ParticleSystem"))

    has_renderer = "renderer" in raw
    renderer_raw = raw.pop("renderer", None)
    if not has_renderer:
        renderer = RendererComponent()
    elif renderer_raw is None:
        renderer = None                 # explicitly detached
    else:
        renderer = _parse_renderer(renderer_raw, base_dir, f"{name}.renderer")

    sub_emitters = _parse_sub_emitters(raw.pop("sub_emitters", None), base_dir, f"{name}.sub_emitters")

    hints = get_type_hints(ModuleSet)
    module_names = [f.name for f in fields(ModuleSet) if f.name != "sub_emitters"]
    unknown = set(raw) - set(module_names)
    if unknown:
        raise ValueError(f"Unknown module(s) in effect '{name}': {', '.join(sorted(map(str, unknown)))}")

    modules = ModuleSet(
        sub_emitters=sub_emitters,
        **{m: _parse_module(hints[m], raw.get(m), f"{name}.{m}") for m in module_names},
    )
    return EffectDefinition(effect_name=name, modules=modules, renderer=renderer)


def load_effect(path) -> EffectDefinition:
    """Load an effect description from a YAML file.

    Raises ValueError for a description of the wrong shape (a module that is
    not a mapping, an unknown field or enumeration name, ...).
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Effect description must be a mapping: {path}")
    if "name" not in raw:
        raw["name"] = path.stem
    try:
        return _parse_effect(raw, path.parent, str(path))
    except TypeError as e:
        raise ValueError(f"Malformed effect description {path}: {e}") from e
