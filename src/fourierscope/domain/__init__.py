"""Value types shared by the sampler, transform, and reconstruction stages."""

from fourierscope.domain.complex import Complex, to_complex_array
from fourierscope.domain.models import FourierCoefficients, SampledSignal, SeriesPoints, Spectrum

__all__ = [
    "Complex",
    "FourierCoefficients",
    "SampledSignal",
    "SeriesPoints",
    "Spectrum",
    "to_complex_array",
]
