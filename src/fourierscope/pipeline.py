"""Straight-line composition of the engine stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from fourierscope.domain import FourierCoefficients, SampledSignal, SeriesPoints, Spectrum
from fourierscope.errors import ConfigurationError
from fourierscope.expression import parse_expression
from fourierscope.transforms import (
    FFTEngine,
    HarmonicSummary,
    evaluate_series,
    extract_coefficients,
    generate_interpolated_points,
    generate_points,
    is_power_of_two,
    summarize_harmonics,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FourierRunConfig:
    """Inputs for one analysis run."""

    expression: str
    transform_size: int = 64
    interpolation_points: int = 512
    sample_points: int | None = None

    def __post_init__(self) -> None:
        if not self.expression.strip():
            raise ConfigurationError("expression must not be empty")
        if isinstance(self.transform_size, bool) or not is_power_of_two(self.transform_size):
            raise ConfigurationError(
                f"transform_size must be a positive power of 2, got {self.transform_size}"
            )
        if self.interpolation_points <= 0:
            raise ConfigurationError("interpolation_points must be > 0")
        if self.sample_points is not None and self.sample_points <= 0:
            raise ConfigurationError("sample_points must be > 0")

    @property
    def effective_sample_points(self) -> int:
        return self.transform_size if self.sample_points is None else self.sample_points


@dataclass(frozen=True, slots=True)
class FourierAnalysis:
    """Everything a presentation layer needs to draw one expression's analysis."""

    points: SampledSignal
    plot_points: SampledSignal
    spectrum: Spectrum
    coefficients: FourierCoefficients
    reconstruction: SeriesPoints
    summary: HarmonicSummary
    max_sample_error: float


def compute_function(config: FourierRunConfig | str, engine: FFTEngine | None = None) -> FourierAnalysis:
    """Sample, transform, extract coefficients, and reconstruct one expression.

    ``engine`` may be shared between calls; when omitted one is built for
    ``config.transform_size``. A string is shorthand for a default config.
    """
    if isinstance(config, str):
        config = FourierRunConfig(expression=config)
    if engine is None:
        engine = FFTEngine(config.transform_size)
    elif engine.size != config.transform_size:
        raise ConfigurationError(
            f"engine size {engine.size} does not match transform_size {config.transform_size}"
        )

    expression = parse_expression(config.expression)
    logger.debug("parsed expression %r for N=%d", config.expression, engine.size)

    points = generate_points(expression, engine.size)
    if config.effective_sample_points == engine.size:
        plot_points = points
    else:
        plot_points = generate_points(expression, config.effective_sample_points)

    spectrum = engine.forward_transform(points)
    coefficients = extract_coefficients(spectrum)
    with np.errstate(invalid="ignore", over="ignore"):
        reconstruction = generate_interpolated_points(coefficients, config.interpolation_points)
        errors = np.abs(evaluate_series(coefficients, points.x) - points.real_values)
        max_sample_error = float(np.max(errors))
    if not np.isfinite(max_sample_error):
        logger.info("expression %r produced non-finite samples", config.expression)

    return FourierAnalysis(
        points=points,
        plot_points=plot_points,
        spectrum=spectrum,
        coefficients=coefficients,
        reconstruction=reconstruction,
        summary=summarize_harmonics(coefficients),
        max_sample_error=max_sample_error,
    )
