"""Tests for the immutable Complex value type."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from fourierscope.domain import Complex, to_complex_array


def test_add_and_subtract_are_componentwise() -> None:
    a = Complex(1.5, -2.0)
    b = Complex(0.5, 4.0)

    assert Complex.add(a, b) == Complex(2.0, 2.0)
    assert Complex.subtract(a, b) == Complex(1.0, -6.0)


def test_multiply_matches_builtin_complex() -> None:
    a = Complex(2.0, 3.0)
    b = Complex(-1.0, 0.5)
    product = Complex.multiply(a, b)

    expected = complex(2.0, 3.0) * complex(-1.0, 0.5)
    assert product.re == pytest.approx(expected.real)
    assert product.im == pytest.approx(expected.imag)


def test_magnitude_and_phase() -> None:
    value = Complex(3.0, -4.0)

    assert Complex.magnitude(value) == pytest.approx(5.0)
    assert Complex.phase(value) == pytest.approx(math.atan2(-4.0, 3.0))
    assert Complex.phase(Complex(-1.0, 0.0)) == pytest.approx(math.pi)


def test_conjugate_scale_and_polar() -> None:
    value = Complex.from_polar(2.0, math.pi / 2)

    assert value.re == pytest.approx(0.0, abs=1e-15)
    assert value.im == pytest.approx(2.0)
    assert Complex.conjugate(Complex(1.0, 2.0)) == Complex(1.0, -2.0)
    assert Complex.scale(Complex(1.0, -2.0), 0.5) == Complex(0.5, -1.0)


def test_non_finite_values_propagate() -> None:
    result = Complex.multiply(Complex(math.inf, 0.0), Complex(0.0, 1.0))

    assert math.isnan(result.re)
    assert math.isinf(result.im)


def test_complex_is_immutable() -> None:
    value = Complex(1.0)
    with pytest.raises(FrozenInstanceError):
        value.re = 2.0  # type: ignore[misc]


def test_of_coerces_numbers() -> None:
    assert Complex.of(3) == Complex(3.0, 0.0)
    assert Complex.of(1 - 2j) == Complex(1.0, -2.0)
    assert Complex.of(np.complex128(0.5 + 0.25j)) == Complex(0.5, 0.25)
    with pytest.raises(TypeError, match="cannot convert"):
        Complex.of("1")  # type: ignore[arg-type]


def test_to_complex_array_accepts_mixed_sequences() -> None:
    array = to_complex_array([Complex(1.0, 0.0), Complex(0.0, 1.0), -1.0, 2j])

    assert array.dtype == np.complex128
    assert np.allclose(array, np.asarray([1.0, 1j, -1.0, 2j]))
