"""Sampling, transform, coefficient, and reconstruction stages."""

from fourierscope.transforms.coefficients import extract_coefficients
from fourierscope.transforms.fft import FFTEngine, is_power_of_two
from fourierscope.transforms.sampling import PERIOD, SAMPLE_ORIGIN, generate_points, sample_grid
from fourierscope.transforms.series import evaluate_series, generate_interpolated_points
from fourierscope.transforms.summary import (
    HarmonicSummary,
    harmonic_amplitudes,
    harmonic_powers,
    summarize_harmonics,
)

__all__ = [
    "FFTEngine",
    "HarmonicSummary",
    "PERIOD",
    "SAMPLE_ORIGIN",
    "evaluate_series",
    "extract_coefficients",
    "generate_interpolated_points",
    "generate_points",
    "harmonic_amplitudes",
    "harmonic_powers",
    "is_power_of_two",
    "sample_grid",
    "summarize_harmonics",
]
