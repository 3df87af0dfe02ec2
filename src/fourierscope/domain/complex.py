"""Immutable complex-number value and its arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Complex as ComplexNumber
from typing import Iterable, SupportsComplex

import numpy as np
import numpy.typing as npt


ComplexArray = npt.NDArray[np.complex128]


@dataclass(frozen=True, slots=True)
class Complex:
    """Complex number as an (re, im) pair of IEEE doubles.

    Arithmetic is exposed as static functions so that callers compose values
    explicitly, e.g. ``Complex.add(a, Complex.multiply(w, b))``. NaN and
    infinity propagate without raising.
    """

    re: float
    im: float = 0.0

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    @staticmethod
    def add(a: Complex, b: Complex) -> Complex:
        return Complex(a.re + b.re, a.im + b.im)

    @staticmethod
    def subtract(a: Complex, b: Complex) -> Complex:
        return Complex(a.re - b.re, a.im - b.im)

    @staticmethod
    def multiply(a: Complex, b: Complex) -> Complex:
        return Complex(
            a.re * b.re - a.im * b.im,
            a.re * b.im + a.im * b.re,
        )

    @staticmethod
    def scale(a: Complex, factor: float) -> Complex:
        return Complex(a.re * factor, a.im * factor)

    @staticmethod
    def conjugate(a: Complex) -> Complex:
        return Complex(a.re, -a.im)

    @staticmethod
    def magnitude(a: Complex) -> float:
        return math.sqrt(a.re * a.re + a.im * a.im)

    @staticmethod
    def phase(a: Complex) -> float:
        """Argument in radians, in (-pi, pi]."""
        return math.atan2(a.im, a.re)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Complex:
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @classmethod
    def of(cls, value: Complex | SupportsComplex | float) -> Complex:
        """Coerce a Python/numpy number (or a Complex) into a Complex."""
        if isinstance(value, Complex):
            return value
        if isinstance(value, (ComplexNumber, np.number)) or hasattr(value, "__complex__"):
            converted = complex(value)
            return cls(float(converted.real), float(converted.imag))
        raise TypeError(f"cannot convert {type(value).__name__} to Complex")


def to_complex_array(values: Iterable[Complex | SupportsComplex | float]) -> ComplexArray:
    """Convert a sequence of Complex values or numbers into a 1D complex128 array."""
    if isinstance(values, np.ndarray):
        return np.asarray(values, dtype=np.complex128)
    items = [complex(Complex.of(value)) for value in values]
    return np.asarray(items, dtype=np.complex128)
