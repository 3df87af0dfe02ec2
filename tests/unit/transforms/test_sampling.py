"""Tests for evenly spaced expression sampling."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fourierscope.errors import ConfigurationError, ParseError
from fourierscope.expression import parse_expression
from fourierscope.transforms import generate_points, sample_grid


def test_sample_grid_spans_half_open_period() -> None:
    x = sample_grid(8)

    assert x.shape == (8,)
    assert x[0] == pytest.approx(-math.pi)
    assert x[1] - x[0] == pytest.approx(2 * math.pi / 8)
    assert x[-1] == pytest.approx(math.pi - 2 * math.pi / 8)


def test_generate_points_produces_real_signal() -> None:
    points = generate_points("pi*(pi-x)", 8)

    assert len(points) == 8
    assert np.all(points.y.imag == 0.0)
    assert np.allclose(points.real_values, math.pi * (math.pi - points.x))


def test_generate_points_accepts_independent_sample_count() -> None:
    expression = parse_expression("|x|")
    coarse = generate_points(expression, 8)
    fine = generate_points(expression, 200)

    assert len(coarse) == 8
    assert len(fine) == 200
    assert np.allclose(fine.real_values, np.abs(fine.x))


def test_generate_points_keeps_non_finite_samples() -> None:
    points = generate_points("1/(x+pi)", 4)

    assert math.isinf(points.real_values[0])
    assert np.all(np.isfinite(points.real_values[1:]))


@pytest.mark.parametrize("num_points", [0, -3])
def test_sample_grid_rejects_non_positive_counts(num_points: int) -> None:
    with pytest.raises(ConfigurationError, match="> 0"):
        sample_grid(num_points)


def test_generate_points_surfaces_parse_errors() -> None:
    with pytest.raises(ParseError):
        generate_points("x +* 2", 8)
