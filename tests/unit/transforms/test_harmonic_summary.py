"""Tests for per-harmonic amplitude and power features of a series."""

from __future__ import annotations

import math
import warnings

import numpy as np
import pytest

from fourierscope.domain import FourierCoefficients
from fourierscope.transforms import (
    FFTEngine,
    extract_coefficients,
    generate_points,
    harmonic_amplitudes,
    harmonic_powers,
    summarize_harmonics,
)


def _coefficients(expression: str, size: int) -> FourierCoefficients:
    engine = FFTEngine(size)
    return extract_coefficients(engine.forward_transform(generate_points(expression, size)))


def test_summary_of_mixed_harmonics() -> None:
    summary = summarize_harmonics(_coefficients("0.2 + sin(5x) + 0.1cos(9x)", 64))

    assert summary.dominant_harmonic == 5
    assert summary.dominant_amplitude == pytest.approx(1.0)
    assert summary.mean_power == pytest.approx(0.545)
    assert summary.dc_fraction == pytest.approx(0.04 / 0.545)
    assert summary.harmonic_centroid == pytest.approx((5 * 0.5 + 9 * 0.005) / 0.545)
    assert summary.energy_bandwidth == 5


def test_amplitudes_combine_cosine_and_sine_terms() -> None:
    coefficients = FourierCoefficients(a=np.array([1.0, 3.0, 0.0]), b=np.array([0.0, 4.0]))

    assert np.allclose(harmonic_amplitudes(coefficients), [1.0, 5.0, 0.0])
    assert np.allclose(harmonic_powers(coefficients), [1.0, 12.5, 0.0])


def test_powers_match_mean_square_of_samples() -> None:
    points = generate_points("|x| + cos(4x) - 0.5sin(2x)", 32)
    coefficients = _coefficients("|x| + cos(4x) - 0.5sin(2x)", 32)

    mean_square = float(np.mean(np.square(points.real_values)))
    assert float(np.sum(harmonic_powers(coefficients))) == pytest.approx(mean_square)


def test_nyquist_term_is_not_halved() -> None:
    coefficients = _coefficients("cos(4x)", 8)

    assert harmonic_powers(coefficients)[4] == pytest.approx(1.0)
    assert summarize_harmonics(coefficients).dominant_harmonic == 4


def test_constant_series_has_no_dominant_harmonic() -> None:
    summary = summarize_harmonics(_coefficients("3", 8))

    assert summary.dominant_harmonic == 0
    assert summary.dominant_amplitude == pytest.approx(3.0)
    assert summary.dc_fraction == pytest.approx(1.0)
    assert summary.energy_bandwidth == 0


def test_single_point_series() -> None:
    summary = summarize_harmonics(FourierCoefficients(a=np.array([2.0]), b=np.array([])))

    assert summary.dominant_harmonic == 0
    assert summary.mean_power == pytest.approx(4.0)


def test_zero_series() -> None:
    summary = summarize_harmonics(FourierCoefficients(a=np.zeros(5), b=np.zeros(4)))

    assert summary.dominant_harmonic == 0
    assert summary.harmonic_centroid == 0.0
    assert summary.mean_power == 0.0
    assert summary.dc_fraction == 0.0


def test_non_finite_coefficients_propagate_without_warnings() -> None:
    coefficients = FourierCoefficients(
        a=np.array([math.inf, math.nan, 1.0]),
        b=np.array([0.0, -math.inf]),
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        summary = summarize_harmonics(coefficients)

    assert not math.isfinite(summary.mean_power)
    assert not math.isfinite(summary.harmonic_centroid)
