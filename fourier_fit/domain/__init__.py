"""
Domain package for Fourier Fit.

Exports the value objects shared by the filters, the session and the
reporter. Keep this package focused on data definitions and validation.
"""

from fourier_fit.domain.models import (
    Candle,
    CandleLength,
    FilterParams,
    FilterType,
    WeightEntry,
)

__all__ = [
    "Candle",
    "CandleLength",
    "FilterParams",
    "FilterType",
    "WeightEntry",
]
