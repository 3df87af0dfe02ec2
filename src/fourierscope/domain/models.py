"""Read-only result containers passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from fourierscope.domain.complex import Complex


FloatArray = npt.NDArray[np.float64]
ComplexArray = npt.NDArray[np.complex128]


def _frozen_array(values: npt.ArrayLike, dtype: type[np.generic]) -> npt.NDArray[np.generic]:
    array = np.array(values, dtype=dtype, copy=True)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, slots=True)
class SampledSignal:
    """Evenly spaced samples of a function over one period, embedded in the complex domain."""

    x: FloatArray
    y: ComplexArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _frozen_array(self.x, np.float64))
        object.__setattr__(self, "y", _frozen_array(self.y, np.complex128))
        if self.x.ndim != 1 or self.y.ndim != 1:
            raise ValueError("x and y must be 1D arrays")
        if self.x.shape != self.y.shape:
            raise ValueError("x and y must have the same length")

    def __len__(self) -> int:
        return int(self.x.size)

    @property
    def real_values(self) -> FloatArray:
        """Real part of the samples, i.e. the sampled function values."""
        return np.asarray(self.y.real, dtype=np.float64)


@dataclass(frozen=True, slots=True)
class Spectrum:
    """Output of a forward transform in natural frequency-bin order."""

    values: ComplexArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _frozen_array(self.values, np.complex128))
        if self.values.ndim != 1:
            raise ValueError("spectrum values must be a 1D array")
        if self.values.size == 0:
            raise ValueError("spectrum must not be empty")

    def __len__(self) -> int:
        return int(self.values.size)

    @property
    def size(self) -> int:
        return int(self.values.size)

    def bin(self, k: int) -> Complex:
        """Return bin ``k`` as a Complex value; negative indices count from the end."""
        return Complex.of(self.values[k])

    def magnitudes(self) -> FloatArray:
        return np.asarray(np.abs(self.values), dtype=np.float64)

    def phases(self) -> FloatArray:
        return np.asarray(np.angle(self.values), dtype=np.float64)

    def one_sided(self) -> ComplexArray:
        """Bins 0..N/2, the non-redundant half for a real-valued input."""
        return self.values[: self.size // 2 + 1]


@dataclass(frozen=True, slots=True)
class FourierCoefficients:
    """Real cosine/sine series coefficients.

    ``a`` holds indices 0..N/2 and ``b`` holds indices 0..N/2-1. ``b[0]`` is
    always zero, and the sine partner of ``a[N/2]`` is not stored because it
    is identically zero on the sample grid.
    """

    a: FloatArray
    b: FloatArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", _frozen_array(self.a, np.float64))
        object.__setattr__(self, "b", _frozen_array(self.b, np.float64))
        if self.a.ndim != 1 or self.b.ndim != 1:
            raise ValueError("coefficient arrays must be 1D")
        if self.a.size < 1:
            raise ValueError("a must contain at least the constant term")
        if self.b.size != self.a.size - 1:
            raise ValueError("b must have exactly one element fewer than a")
        if self.b.size > 0 and self.b[0] != 0.0:
            raise ValueError("b[0] must be 0")

    @property
    def degree(self) -> int:
        """Highest harmonic present, N/2."""
        return int(self.a.size - 1)

    @property
    def size(self) -> int:
        """Transform length N the coefficients were extracted from."""
        return max(1, 2 * self.degree)


@dataclass(frozen=True, slots=True)
class SeriesPoints:
    """Real-valued points produced by evaluating a trigonometric series."""

    x: FloatArray
    y: FloatArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _frozen_array(self.x, np.float64))
        object.__setattr__(self, "y", _frozen_array(self.y, np.float64))
        if self.x.ndim != 1 or self.y.ndim != 1:
            raise ValueError("x and y must be 1D arrays")
        if self.x.shape != self.y.shape:
            raise ValueError("x and y must have the same length")

    def __len__(self) -> int:
        return int(self.x.size)
