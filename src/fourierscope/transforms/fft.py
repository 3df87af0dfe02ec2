"""Iterative radix-2 decimation-in-time FFT with precomputed tables."""

from __future__ import annotations

import math
from typing import Iterable, SupportsComplex, Union

import numpy as np
import numpy.typing as npt

from fourierscope.domain.complex import Complex, to_complex_array
from fourierscope.domain.models import SampledSignal, Spectrum
from fourierscope.errors import ConfigurationError, LengthMismatchError


ComplexArray = npt.NDArray[np.complex128]
IndexArray = npt.NDArray[np.intp]

SignalLike = Union[SampledSignal, ComplexArray, Iterable[Union[Complex, SupportsComplex, float]]]


class FFTEngine:
    """Forward/inverse transform for one fixed power-of-two length.

    The bit-reversal and twiddle tables are built once here and are read-only
    afterwards. Every transform call works on its own freshly allocated
    buffer, so one engine can serve concurrent callers without locking.
    """

    def __init__(self, size: int) -> None:
        _validate_size(size)
        self._size = int(size)
        self._stages = self._size.bit_length() - 1
        self._bit_reversal = _build_bit_reversal_table(self._size)
        self._twiddles = _build_twiddle_table(self._size)

    def __repr__(self) -> str:
        return f"FFTEngine(size={self._size})"

    @property
    def size(self) -> int:
        return self._size

    @property
    def stages(self) -> int:
        """Number of butterfly stages, log2(size)."""
        return self._stages

    @property
    def bit_reversal_table(self) -> IndexArray:
        return self._bit_reversal

    @property
    def twiddle_table(self) -> ComplexArray:
        return self._twiddles

    def forward_transform(self, signal: SignalLike) -> Spectrum:
        """Compute the DFT ``X[k] = sum_j s[j] * exp(-2*pi*i*j*k/N)``."""
        values = self._as_signal(signal)
        work = values[self._bit_reversal]
        half_size = self._size // 2

        span = 2
        with np.errstate(invalid="ignore", over="ignore"):
            while span <= self._size:
                half = span // 2
                twiddle_indices = (np.arange(half) * (self._size // span)) % half_size
                twiddles = self._twiddles[twiddle_indices]

                # Rows are butterfly groups; every (group, offset) pair of a stage
                # is combined at once, and the next stage sees only the new buffer.
                groups = work.reshape(-1, span)
                even = groups[:, :half]
                product = twiddles * groups[:, half:]
                work = np.concatenate((even + product, even - product), axis=1).reshape(-1)
                span *= 2

        return Spectrum(work)

    def inverse_transform(self, spectrum: Spectrum | SignalLike) -> ComplexArray:
        """Recover the time-domain signal: ``conj(F(conj(X))) / N``."""
        values = spectrum.values if isinstance(spectrum, Spectrum) else self._as_signal(spectrum)
        restored = self.forward_transform(np.conjugate(values)).values
        return np.asarray(np.conjugate(restored) / self._size, dtype=np.complex128)

    def _as_signal(self, signal: SignalLike) -> ComplexArray:
        if isinstance(signal, SampledSignal):
            values = np.asarray(signal.y, dtype=np.complex128)
        elif isinstance(signal, np.ndarray):
            values = np.asarray(signal, dtype=np.complex128)
        else:
            values = to_complex_array(signal)
        if values.ndim != 1:
            raise ValueError("signal must be 1D")
        if values.size != self._size:
            raise LengthMismatchError(expected=self._size, actual=int(values.size))
        return values


def is_power_of_two(value: int) -> bool:
    return value > 0 and (value & (value - 1)) == 0


def _validate_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ConfigurationError(f"transform size must be an integer, got {size!r}")
    if not is_power_of_two(int(size)):
        raise ConfigurationError(f"transform size must be a positive power of 2, got {size}")


def _build_bit_reversal_table(size: int) -> IndexArray:
    bits = size.bit_length() - 1
    indices = np.arange(size, dtype=np.intp)
    table = np.zeros(size, dtype=np.intp)
    for bit in range(bits):
        table |= ((indices >> bit) & 1) << (bits - 1 - bit)
    table.flags.writeable = False
    return table


def _build_twiddle_table(size: int) -> ComplexArray:
    # W[k] = cos(2*pi*k/N) - i*sin(2*pi*k/N), k in [0, N/2)
    angles = 2.0 * math.pi * np.arange(size // 2, dtype=np.float64) / size
    table = np.empty(size // 2, dtype=np.complex128)
    table.real = np.cos(angles)
    table.imag = -np.sin(angles)
    table.flags.writeable = False
    return table
