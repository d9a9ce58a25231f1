"""Curve, scalar-range and gradient sampling.

Evaluates exported records the way the consuming runtime does, so an export
can be previewed or checked without the runtime: normalized time is clamped
to [0, 1] before the key lookup and every scalar-range mode is scaled by its
multiplier. One deliberate difference: "TwoConstants" blends between min and
max by the random value, where the runtime reads it as a plain constant.

All functions accept a scalar or an array of normalized times and return
numpy arrays (or floats for scalar input).
"""

from typing import Optional, Union

import numpy as np

from .values import AnimationCurveData, GradientData, MinMaxCurveData

ArrayLike = Union[float, np.ndarray]


def _as_output(result: np.ndarray, scalar_input: bool):
    return float(np.ravel(result)[0]) if scalar_input else result


def _hermite(curve: AnimationCurveData, t: np.ndarray) -> np.ndarray:
    """Cubic Hermite interpolation between keyframes, clamped to the key range."""
    times = np.array([k.time for k in curve.keys], dtype=np.float64)
    values = np.array([k.value for k in curve.keys], dtype=np.float64)
    in_tan = np.array([k.in_tangent for k in curve.keys], dtype=np.float64)
    out_tan = np.array([k.out_tangent for k in curve.keys], dtype=np.float64)

    if len(times) == 1:
        return np.full(t.shape, values[0])

    t = np.clip(t, times[0], times[-1])
    # Segment index i such that times[i] <= t <= times[i+1]
    i = np.clip(np.searchsorted(times, t, side='right') - 1, 0, len(times) - 2)

    t0, t1 = times[i], times[i + 1]
    dt = t1 - t0
    degenerate = dt < 1e-4
    safe_dt = np.where(degenerate, 1.0, dt)
    u = (t - t0) / safe_dt

    u2 = u * u
    u3 = u2 * u
    h00 = 2 * u3 - 3 * u2 + 1
    h10 = u3 - 2 * u2 + u
    h01 = -2 * u3 + 3 * u2
    h11 = u3 - u2

    m0 = out_tan[i] * dt
    m1 = in_tan[i + 1] * dt
    result = h00 * values[i] + h10 * m0 + h01 * values[i + 1] + h11 * m1
    return np.where(degenerate, values[i], result)


def evaluate_curve(curve: Optional[AnimationCurveData], t: ArrayLike):
    """Sample a keyframe curve. An absent or empty curve evaluates to 0."""
    scalar_input = np.ndim(t) == 0
    ts = np.clip(np.atleast_1d(np.asarray(t, dtype=np.float64)), 0.0, 1.0)
    if curve is None or not curve.keys:
        return _as_output(np.zeros(ts.shape), scalar_input)
    result = _hermite(curve, ts)
    return _as_output(result, scalar_input)


def evaluate_scalar_range(mmc: MinMaxCurveData, t: ArrayLike, random_value: ArrayLike = 0.0):
    """Sample a MinMaxCurve record.

    ``random_value`` in [0, 1] blends between the min and max of the two-value
    modes. The multiplier scales every mode.
    """
    scalar_input = np.ndim(t) == 0 and np.ndim(random_value) == 0
    ts = np.atleast_1d(np.asarray(t, dtype=np.float64))
    r = np.asarray(random_value, dtype=np.float64)
    shape = np.broadcast(ts, r).shape

    if mmc.mode == "Constant":
        result = np.full(shape, float(mmc.constant))
    elif mmc.mode == "TwoConstants":
        result = mmc.constant_min * (1.0 - r) + mmc.constant_max * r
        result = np.broadcast_to(result, shape).astype(np.float64)
    elif mmc.mode == "Curve":
        result = evaluate_curve(mmc.curve, ts)
    elif mmc.mode == "TwoCurves":
        lo = evaluate_curve(mmc.curve_min, ts)
        hi = evaluate_curve(mmc.curve_max, ts)
        result = lo * (1.0 - r) + hi * r
    else:
        raise ValueError(f"Unknown curve mode: {mmc.mode}")

    return _as_output(np.asarray(result) * mmc.multiplier, scalar_input)


def _interp_keys(times: np.ndarray, values: np.ndarray, t: np.ndarray) -> np.ndarray:
    # np.interp clamps to the end values outside the key range
    return np.interp(t, times, values)


def evaluate_gradient(gradient: GradientData, t: ArrayLike) -> np.ndarray:
    """Sample a gradient as RGBA.

    Color and alpha keys are interpolated independently. No color keys gives
    white; no alpha keys gives full opacity. Returns shape (4,) for scalar
    input, (N, 4) otherwise.
    """
    scalar_input = np.ndim(t) == 0
    ts = np.clip(np.atleast_1d(np.asarray(t, dtype=np.float64)), 0.0, 1.0)
    rgba = np.ones((ts.size, 4), dtype=np.float64)

    if gradient.color_keys:
        times = np.array([k.time for k in gradient.color_keys], dtype=np.float64)
        for ch, attr in enumerate(("r", "g", "b")):
            values = np.array([getattr(k.color, attr) for k in gradient.color_keys], dtype=np.float64)
            rgba[:, ch] = _interp_keys(times, values, ts)

    if gradient.alpha_keys:
        times = np.array([k.time for k in gradient.alpha_keys], dtype=np.float64)
        values = np.array([k.alpha for k in gradient.alpha_keys], dtype=np.float64)
        rgba[:, 3] = _interp_keys(times, values, ts)

    return rgba[0] if scalar_input else rgba
