"""Value Codecs

Converters for the primitive shapes used throughout the interchange format:
vectors, colors, keyframe curves, scalar ranges (MinMaxCurve), gradients
and bursts. Pure functions; the export records they build are immutable.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import InvalidInputError
from .names import enum_name
from ..source.model import (
    AnimationCurve,
    Burst,
    Color,
    Gradient,
    MinMaxCurve,
    Vector3,
)


@dataclass(frozen=True)
class Vector3Data:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class ColorData:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass(frozen=True)
class KeyframeData:
    time: float = 0.0
    value: float = 0.0
    in_tangent: float = 0.0
    out_tangent: float = 0.0


@dataclass(frozen=True)
class AnimationCurveData:
    keys: Tuple[KeyframeData, ...] = ()


@dataclass(frozen=True)
class MinMaxCurveData:
    """Scalar range record. Curve fields are None when the curve has no keys."""
    mode: str = "Constant"
    constant: float = 0.0
    constant_min: float = 0.0
    constant_max: float = 0.0
    curve: Optional[AnimationCurveData] = None
    curve_min: Optional[AnimationCurveData] = None
    curve_max: Optional[AnimationCurveData] = None
    multiplier: float = 1.0


@dataclass(frozen=True)
class GradientColorKeyData:
    color: ColorData = field(default_factory=ColorData)
    time: float = 0.0


@dataclass(frozen=True)
class GradientAlphaKeyData:
    alpha: float = 1.0
    time: float = 0.0


@dataclass(frozen=True)
class GradientData:
    color_keys: Tuple[GradientColorKeyData, ...] = ()
    alpha_keys: Tuple[GradientAlphaKeyData, ...] = ()


@dataclass(frozen=True)
class BurstData:
    time: float = 0.0
    min_count: int = 0
    max_count: int = 0
    cycles: int = 1
    repeat_interval: float = 0.0


def _require(value, what: str):
    if value is None:
        raise InvalidInputError(f"{what} is required")
    return value


def encode_vector3(v: Vector3) -> Vector3Data:
    _require(v, "Vector3")
    return Vector3Data(x=v.x, y=v.y, z=v.z)


def encode_color(c: Color) -> ColorData:
    _require(c, "Color")
    return ColorData(r=c.r, g=c.g, b=c.b, a=c.a)


def encode_curve(curve: Optional[AnimationCurve]) -> Optional[AnimationCurveData]:
    """Keyframes in authored order; None for an absent or key-less curve."""
    if curve is None or not curve.keys:
        return None
    return AnimationCurveData(keys=tuple(
        KeyframeData(
            time=k.time,
            value=k.value,
            in_tangent=k.in_tangent,
            out_tangent=k.out_tangent,
        )
        for k in curve.keys
    ))


def encode_scalar_range(mmc: MinMaxCurve) -> MinMaxCurveData:
    _require(mmc, "MinMaxCurve")
    return MinMaxCurveData(
        mode=enum_name(mmc.mode),
        constant=mmc.constant,
        constant_min=mmc.constant_min,
        constant_max=mmc.constant_max,
        curve=encode_curve(mmc.curve),
        curve_min=encode_curve(mmc.curve_min),
        curve_max=encode_curve(mmc.curve_max),
        multiplier=mmc.curve_multiplier,
    )


def encode_gradient(gradient: Gradient) -> GradientData:
    _require(gradient, "Gradient")
    return GradientData(
        color_keys=tuple(
            GradientColorKeyData(color=encode_color(k.color), time=k.time)
            for k in gradient.color_keys
        ),
        alpha_keys=tuple(
            GradientAlphaKeyData(alpha=k.alpha, time=k.time)
            for k in gradient.alpha_keys
        ),
    )


def encode_burst(burst: Burst) -> BurstData:
    _require(burst, "Burst")
    return BurstData(
        time=burst.time,
        min_count=int(burst.min_count),
        max_count=int(burst.max_count),
        cycles=int(burst.cycle_count),
        repeat_interval=burst.repeat_interval,
    )
