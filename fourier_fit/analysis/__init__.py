"""
Analysis package for Fourier Fit.

Pure numerical helpers applied to a designed filter or a series: pole/zero
extraction, Bode magnitude, FFT magnitude spectrum and OHLC candles.
"""

from fourier_fit.analysis.bode import bode_mag_logspace, magnitude_to_db
from fourier_fit.analysis.candles import vec_to_candles
from fourier_fit.analysis.roots import iir_zeros_poles_z, is_stable, poly_roots_ascending_real
from fourier_fit.analysis.spectrum import dominant_bins, rfft_freqs, rfft_mag

__all__ = [
    "bode_mag_logspace",
    "magnitude_to_db",
    "vec_to_candles",
    "iir_zeros_poles_z",
    "is_stable",
    "poly_roots_ascending_real",
    "dominant_bins",
    "rfft_freqs",
    "rfft_mag",
]
