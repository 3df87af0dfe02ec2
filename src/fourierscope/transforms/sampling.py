"""Evenly spaced sampling of an expression over one period."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from fourierscope.domain.models import SampledSignal
from fourierscope.errors import ConfigurationError
from fourierscope.expression import Expression, parse_expression


FloatArray = npt.NDArray[np.float64]

SAMPLE_ORIGIN = -math.pi
PERIOD = 2.0 * math.pi


def sample_grid(num_points: int) -> FloatArray:
    """Points ``x[j] = -pi + 2*pi*j/num_points`` covering [-pi, pi)."""
    _validate_num_points(num_points)
    return SAMPLE_ORIGIN + (PERIOD * np.arange(num_points, dtype=np.float64)) / num_points


def generate_points(expression: str | Expression, num_points: int) -> SampledSignal:
    """Sample ``expression`` at ``num_points`` grid points as a purely real complex signal.

    ``num_points`` is independent of any transform length, so the same call
    serves both transform input and high-resolution plotting.
    """
    compiled = parse_expression(expression) if isinstance(expression, str) else expression
    x = sample_grid(num_points)
    y = compiled.evaluate_many(x).astype(np.complex128)
    return SampledSignal(x=x, y=y)


def _validate_num_points(num_points: int) -> None:
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise ConfigurationError(f"num_points must be an integer, got {num_points!r}")
    if num_points <= 0:
        raise ConfigurationError("num_points must be > 0")
