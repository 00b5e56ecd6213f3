"""
Bode magnitude response on a logarithmic frequency grid.

``fs`` is samples per unit time: with fs=1.0 (one weigh-in per day) the
frequency axis reads in cycles/day. A log axis cannot include zero, so the
grid starts at a small positive frequency.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

MIN_POINTS = 16


def bode_mag_logspace(
    b: Sequence[float], a: Sequence[float], fs: float, n_points: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate |H(e^{jw})| for H = B(z^-1)/A(z^-1) at log-spaced frequencies.

    Returns (freqs, mags); magnitudes are linear and NaN wherever the
    denominator vanishes.
    """
    n_points = max(n_points, MIN_POINTS)
    f_min = max(fs * 1e-4, 1e-9)
    f_max = max(fs * 0.5, f_min * 10.0)

    freqs = np.exp(np.linspace(np.log(f_min), np.log(f_max), n_points))
    omega = 2.0 * np.pi * freqs / fs

    # z^-k = e^{-j w k}
    z_inv = np.exp(-1j * omega)
    num = np.polyval(np.asarray(b, dtype=float)[::-1], z_inv)
    den = np.polyval(np.asarray(a, dtype=float)[::-1], z_inv)

    mags = np.full(n_points, np.nan)
    ok = np.abs(den) > 0.0
    mags[ok] = np.abs(num[ok] / den[ok])
    return freqs, mags


def magnitude_to_db(mags: Sequence[float]) -> np.ndarray:
    """20*log10 of linear magnitudes; non-positive maps to -inf, NaN stays NaN."""
    m = np.asarray(mags, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(m > 0, 20.0 * np.log10(m), np.where(np.isnan(m), np.nan, -np.inf))


__all__ = ["MIN_POINTS", "bode_mag_logspace", "magnitude_to_db"]
