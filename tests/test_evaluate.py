"""Tests for curve, scalar-range and gradient sampling."""

import numpy as np
import pytest

from gpart_export.core import (
    AnimationCurveData,
    ColorData,
    GradientAlphaKeyData,
    GradientColorKeyData,
    GradientData,
    KeyframeData,
    MinMaxCurveData,
    evaluate_curve,
    evaluate_gradient,
    evaluate_scalar_range,
)

LINEAR = AnimationCurveData(keys=(
    KeyframeData(time=0.0, value=0.0, in_tangent=1.0, out_tangent=1.0),
    KeyframeData(time=1.0, value=1.0, in_tangent=1.0, out_tangent=1.0),
))


class TestCurve:
    def test_empty_curve_is_zero(self):
        assert evaluate_curve(None, 0.5) == 0.0
        assert evaluate_curve(AnimationCurveData(), 0.5) == 0.0

    def test_hits_keys(self):
        assert evaluate_curve(LINEAR, 0.0) == pytest.approx(0.0)
        assert evaluate_curve(LINEAR, 1.0) == pytest.approx(1.0)

    def test_matching_tangents_interpolate_linearly(self):
        t = np.linspace(0.0, 1.0, 11)
        np.testing.assert_allclose(evaluate_curve(LINEAR, t), t, atol=1e-12)

    def test_clamped_outside_key_range(self):
        assert evaluate_curve(LINEAR, -2.0) == pytest.approx(0.0)
        assert evaluate_curve(LINEAR, 3.0) == pytest.approx(1.0)

    def test_single_key_is_flat(self):
        curve = AnimationCurveData(keys=(KeyframeData(time=0.3, value=4.0),))
        np.testing.assert_allclose(evaluate_curve(curve, [0.0, 0.3, 1.0]), [4.0, 4.0, 4.0])

    def test_time_clamped_to_unit_range_before_key_lookup(self):
        # keys reach past t=1; samples beyond 1 stop at the t=1 value
        curve = AnimationCurveData(keys=(
            KeyframeData(time=0.0, value=0.0, in_tangent=0.5, out_tangent=0.5),
            KeyframeData(time=2.0, value=1.0, in_tangent=0.5, out_tangent=0.5),
        ))
        assert evaluate_curve(curve, 1.0) == pytest.approx(0.5)
        assert evaluate_curve(curve, 1.5) == pytest.approx(0.5)

    def test_flat_tangents_ease(self):
        curve = AnimationCurveData(keys=(KeyframeData(0.0, 0.0), KeyframeData(1.0, 1.0)))
        # smoothstep at a quarter
        assert evaluate_curve(curve, 0.25) == pytest.approx(0.15625)


class TestScalarRange:
    def test_constant(self):
        assert evaluate_scalar_range(MinMaxCurveData(constant=3.0), 0.7) == 3.0

    def test_two_constants_blend(self):
        mmc = MinMaxCurveData(mode="TwoConstants", constant_min=2.0, constant_max=4.0)
        assert evaluate_scalar_range(mmc, 0.0, random_value=0.0) == 2.0
        assert evaluate_scalar_range(mmc, 0.0, random_value=0.5) == 3.0
        assert evaluate_scalar_range(mmc, 0.0, random_value=1.0) == 4.0

    def test_curve_scaled_by_multiplier(self):
        mmc = MinMaxCurveData(mode="Curve", curve=LINEAR, multiplier=2.0)
        assert evaluate_scalar_range(mmc, 1.0) == pytest.approx(2.0)
        assert evaluate_scalar_range(mmc, 0.5) == pytest.approx(1.0)

    def test_multiplier_scales_constant_modes(self):
        assert evaluate_scalar_range(MinMaxCurveData(constant=2.0, multiplier=3.0), 0.5) == 6.0
        mmc = MinMaxCurveData(mode="TwoConstants", constant_min=1.0, constant_max=3.0, multiplier=2.0)
        assert evaluate_scalar_range(mmc, 0.0, random_value=0.5) == 4.0

    def test_two_curves_blend(self):
        flat_hi = AnimationCurveData(keys=(KeyframeData(0.0, 3.0),))
        mmc = MinMaxCurveData(mode="TwoCurves", curve_min=LINEAR, curve_max=flat_hi)
        assert evaluate_scalar_range(mmc, 1.0, random_value=0.5) == pytest.approx(2.0)

    def test_per_particle_random_values(self):
        mmc = MinMaxCurveData(mode="TwoConstants", constant_min=0.0, constant_max=10.0)
        out = evaluate_scalar_range(mmc, 0.0, random_value=np.array([0.0, 0.25, 1.0]))
        np.testing.assert_allclose(out, [0.0, 2.5, 10.0])

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            evaluate_scalar_range(MinMaxCurveData(mode="Random"), 0.0)


class TestGradient:
    def test_empty_is_opaque_white(self):
        np.testing.assert_allclose(evaluate_gradient(GradientData(), 0.5), [1.0, 1.0, 1.0, 1.0])

    def test_color_and_alpha_interpolate_independently(self):
        gradient = GradientData(
            color_keys=(
                GradientColorKeyData(ColorData(1.0, 0.0, 0.0), 0.0),
                GradientColorKeyData(ColorData(0.0, 0.0, 1.0), 1.0),
            ),
            alpha_keys=(
                GradientAlphaKeyData(1.0, 0.0),
                GradientAlphaKeyData(0.0, 0.5),
            ),
        )
        np.testing.assert_allclose(evaluate_gradient(gradient, 0.5), [0.5, 0.0, 0.5, 0.0])
        np.testing.assert_allclose(evaluate_gradient(gradient, 0.25), [0.75, 0.0, 0.25, 0.5])

    def test_array_input_shape(self):
        out = evaluate_gradient(GradientData(), np.linspace(0, 1, 5))
        assert out.shape == (5, 4)
