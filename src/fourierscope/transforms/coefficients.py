"""Real trigonometric series coefficients from the spectrum of a real signal."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fourierscope.domain.models import FourierCoefficients, Spectrum
from fourierscope.transforms.sampling import SAMPLE_ORIGIN


def extract_coefficients(
    spectrum: Spectrum | npt.ArrayLike,
    *,
    origin: float = SAMPLE_ORIGIN,
) -> FourierCoefficients:
    """Convert a spectrum into ``a``/``b`` coefficients of a cosine/sine series in x.

    Only bins 0..N/2 are read; the negative-frequency half is implied by
    conjugate symmetry, so the input must come from a real-valued signal.

    Bin ``k`` of samples taken at ``x[j] = origin + 2*pi*j/N`` is first
    rotated by ``exp(-i*k*origin)`` so the coefficients refer to ``cos(k*x)``
    and ``sin(k*x)`` rather than to the sample index. With ``origin=0``
    this reduces to the plain ``a[k] = 2*Re(X[k])/N``, ``b[k] = -2*Im(X[k])/N``.

    ``a[0]`` and ``a[N/2]`` are scaled by ``1/N``; ``b[0]`` is fixed at 0.
    """
    values = spectrum.values if isinstance(spectrum, Spectrum) else Spectrum(np.asarray(spectrum)).values
    size = int(values.size)
    degree = size // 2

    harmonics = np.arange(degree + 1, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        aligned = values[: degree + 1] * np.exp(-1j * harmonics * origin)

    a = 2.0 * aligned.real / size
    b = -2.0 * aligned.imag[:degree] / size
    a[0] /= 2.0
    if degree > 0:
        a[degree] /= 2.0
        b[0] = 0.0
    return FourierCoefficients(a=a, b=b)
