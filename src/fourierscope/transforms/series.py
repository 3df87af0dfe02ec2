"""Evaluation of a truncated trigonometric series."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fourierscope.domain.models import FourierCoefficients, SeriesPoints
from fourierscope.transforms.sampling import sample_grid


FloatArray = npt.NDArray[np.float64]


def evaluate_series(coefficients: FourierCoefficients, x: float | npt.ArrayLike) -> float | FloatArray:
    """Evaluate ``S(x) = a0 + a_m cos(m x) + sum_{k=1}^{m-1} (a_k cos(k x) + b_k sin(k x))``.

    ``m`` is the series degree N/2. ``a0`` and ``a_m`` already carry their
    ``1/N`` scale from extraction, so they enter the sum unhalved.
    """
    points = np.asarray(x, dtype=np.float64)
    a = coefficients.a
    b = coefficients.b
    degree = coefficients.degree

    harmonics = np.arange(1, degree, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        angles = np.multiply.outer(points, harmonics)
        total = a[0] + np.cos(angles) @ a[1:degree] + np.sin(angles) @ b[1:degree]
        if degree > 0:
            total = total + a[degree] * np.cos(degree * points)

    if points.ndim == 0:
        return float(total)
    return np.asarray(total, dtype=np.float64)


def generate_interpolated_points(coefficients: FourierCoefficients, num_points: int) -> SeriesPoints:
    """Evaluate the series on ``num_points`` evenly spaced points over [-pi, pi)."""
    x = sample_grid(num_points)
    y = evaluate_series(coefficients, x)
    return SeriesPoints(x=x, y=np.asarray(y, dtype=np.float64))
