"""Magnitude spectrum of a real series."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from fourier_fit.errors import SpectrumError


def rfft_mag(data: Sequence[float]) -> np.ndarray:
    """|rfft(data)|, n // 2 + 1 bins."""
    samples = np.asarray(data, dtype=float)
    if samples.size == 0:
        raise SpectrumError("Could not take fft of data", details={"samples": 0})
    return np.abs(np.fft.rfft(samples))


def rfft_freqs(n: int, fs: float = 1.0) -> np.ndarray:
    """Bin frequencies from 0 to fs/2 for an n-sample series."""
    return np.fft.rfftfreq(n, d=1.0 / fs)


def dominant_bins(
    mags: Sequence[float], freqs: Sequence[float], count: int = 5
) -> List[Tuple[float, float]]:
    """
    Strongest non-DC bins as (frequency, magnitude), strongest first.
    """
    m = np.asarray(mags, dtype=float)
    f = np.asarray(freqs, dtype=float)
    if m.size <= 1 or count <= 0:
        return []
    order = np.argsort(m[1:])[::-1][:count] + 1
    return [(float(f[i]), float(m[i])) for i in order]


__all__ = ["rfft_mag", "rfft_freqs", "dominant_bins"]
