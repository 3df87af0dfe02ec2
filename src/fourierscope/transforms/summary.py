"""Per-harmonic amplitude and power breakdown of a truncated Fourier series.

Powers are mean-square contributions over one period, so on the sample grid
they add up to the mean of ``f(x)^2`` (Parseval): ``a0^2`` for the constant
term, ``(a_k^2 + b_k^2) / 2`` for interior harmonics and ``a_m^2`` for the
Nyquist cosine, which is ``+-1`` at every sample.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from fourierscope.domain.models import FourierCoefficients


FloatArray = npt.NDArray[np.float64]

# Share of the mean power that ``energy_bandwidth`` must cover.
BANDWIDTH_POWER_FRACTION = 0.99

# Amplitudes below this share of the largest one count as rounding noise.
NEGLIGIBLE_AMPLITUDE_RATIO = 1e-12


@dataclass(frozen=True, slots=True)
class HarmonicSummary:
    """Headline features of a series, indexed by harmonic number."""

    dominant_harmonic: int
    dominant_amplitude: float
    harmonic_centroid: float
    mean_power: float
    dc_fraction: float
    energy_bandwidth: int


def harmonic_amplitudes(coefficients: FourierCoefficients) -> FloatArray:
    """Amplitude ``sqrt(a_k^2 + b_k^2)`` of harmonics 0..m."""
    b = np.append(coefficients.b, 0.0)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.asarray(np.hypot(coefficients.a, b), dtype=np.float64)


def harmonic_powers(coefficients: FourierCoefficients) -> FloatArray:
    """Mean-square contribution of harmonics 0..m to the reconstructed signal."""
    with np.errstate(invalid="ignore", over="ignore"):
        powers = np.square(harmonic_amplitudes(coefficients))
        degree = coefficients.degree
        if degree > 1:
            powers[1:degree] /= 2.0
    return powers


def summarize_harmonics(coefficients: FourierCoefficients) -> HarmonicSummary:
    """Extract summary features; non-finite coefficients propagate into the result.

    The dominant harmonic is the strongest non-constant term, or 0 when the
    series has none or all of them are negligible next to the largest
    amplitude.
    """
    amplitudes = harmonic_amplitudes(coefficients)
    powers = harmonic_powers(coefficients)
    harmonics = np.arange(powers.size, dtype=np.float64)

    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        dominant = 0
        if amplitudes.size > 1:
            candidate = 1 + int(np.argmax(amplitudes[1:]))
            if amplitudes[candidate] > NEGLIGIBLE_AMPLITUDE_RATIO * np.max(amplitudes):
                dominant = candidate

        mean_power = float(np.sum(powers))
        if mean_power == 0.0:
            centroid = 0.0
            dc_fraction = 0.0
            bandwidth = 0
        else:
            centroid = float(np.sum(harmonics * powers) / mean_power)
            dc_fraction = float(powers[0] / mean_power)
            covered = np.cumsum(powers) / mean_power
            reached = np.flatnonzero(covered >= BANDWIDTH_POWER_FRACTION)
            bandwidth = int(reached[0]) if reached.size else coefficients.degree

    return HarmonicSummary(
        dominant_harmonic=dominant,
        dominant_amplitude=float(amplitudes[dominant]),
        harmonic_centroid=centroid,
        mean_power=mean_power,
        dc_fraction=dc_fraction,
        energy_bandwidth=bandwidth,
    )
