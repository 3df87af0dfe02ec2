"""CLI runner that analyses one expression and emits a JSON report."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from fourierscope.errors import FourierScopeError
from fourierscope.pipeline import FourierAnalysis, FourierRunConfig, compute_function


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunnerResult:
    """Analysis plus the report path written for it, if any."""

    analysis: FourierAnalysis
    report_path: Path | None


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for expression analysis."""
    parser = argparse.ArgumentParser(
        prog="fourierscope-runner",
        description=(
            "Sample a periodic function over [-pi, pi), compute its FFT and Fourier series "
            "coefficients, and reconstruct it from the truncated series."
        ),
    )
    parser.add_argument(
        "--expression",
        required=True,
        help='Function of x, e.g. "pi*(pi-x)", "|x|", "2sin(3x)".',
    )
    parser.add_argument(
        "--size",
        type=int,
        default=64,
        help="Transform length N; must be a power of 2.",
    )
    parser.add_argument(
        "--interpolation-points",
        type=int,
        default=512,
        help="Number of points at which the reconstructed series is evaluated.",
    )
    parser.add_argument(
        "--sample-points",
        type=int,
        default=None,
        help="Number of plot samples of the original function (defaults to --size).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional path for the JSON report.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Diagnostic logging level.",
    )
    return parser


def run_from_args(args: argparse.Namespace) -> RunnerResult:
    """Execute one analysis and persist the report when requested."""
    config = FourierRunConfig(
        expression=args.expression,
        transform_size=args.size,
        interpolation_points=args.interpolation_points,
        sample_points=args.sample_points,
    )
    analysis = compute_function(config)

    report_path: Path | None = None
    if args.output is not None:
        report_path = args.output.resolve()
        report_path.parent.mkdir(parents=True, exist_ok=True)
        _write_json(report_path, analysis_to_jsonable(config, analysis))
        logger.info("wrote report to %s", report_path)

    return RunnerResult(analysis=analysis, report_path=report_path)


def analysis_to_jsonable(config: FourierRunConfig, analysis: FourierAnalysis) -> dict[str, Any]:
    """Convert an analysis into plain JSON types; non-finite floats become null."""
    spectrum = analysis.spectrum
    return {
        "config": asdict(config),
        "samples": {
            "x": _floats(analysis.points.x),
            "y": _floats(analysis.points.real_values),
        },
        "plot_samples": {
            "x": _floats(analysis.plot_points.x),
            "y": _floats(analysis.plot_points.real_values),
        },
        "spectrum": {
            "re": _floats(spectrum.values.real),
            "im": _floats(spectrum.values.imag),
            "magnitude": _floats(spectrum.magnitudes()),
            "phase": _floats(spectrum.phases()),
        },
        "coefficients": {
            "a": _floats(analysis.coefficients.a),
            "b": _floats(analysis.coefficients.b),
        },
        "reconstruction": {
            "x": _floats(analysis.reconstruction.x),
            "y": _floats(analysis.reconstruction.y),
        },
        "summary": {key: _finite_or_none(value) for key, value in asdict(analysis.summary).items()},
        "max_sample_error": _finite_or_none(analysis.max_sample_error),
    }


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        result = run_from_args(args)
    except (FourierScopeError, ValueError) as exc:
        print(f"[ERROR] fourierscope runner failed: {exc}", file=sys.stderr)
        return 2

    analysis = result.analysis
    print(f"expression: {args.expression}")
    print(f"size: {analysis.spectrum.size}")
    print(f"dominant_harmonic: {analysis.summary.dominant_harmonic}")
    print(f"a0: {analysis.coefficients.a[0]:.6g}")
    print(f"max_sample_error: {analysis.max_sample_error:.3e}")
    if result.report_path is not None:
        print(f"report: {result.report_path}")
    return 0


def _floats(values: npt.ArrayLike) -> list[float | None]:
    return [_finite_or_none(value) for value in np.asarray(values, dtype=np.float64).tolist()]


def _finite_or_none(value: float | int) -> float | int | None:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
