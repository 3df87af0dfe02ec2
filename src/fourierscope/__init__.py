"""Fourier series analysis engine: sampling, radix-2 FFT, and trigonometric reconstruction."""

from fourierscope.errors import ConfigurationError, FourierScopeError, LengthMismatchError, ParseError

__all__ = [
    "ConfigurationError",
    "FourierScopeError",
    "LengthMismatchError",
    "ParseError",
]
