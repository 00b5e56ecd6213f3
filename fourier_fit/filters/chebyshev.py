"""
Chebyshev low-pass designs.

Type I trades pass-band ripple (dB) for a steeper roll-off; type II keeps
the pass-band flat and places equiripple zeros in the stop-band at a given
minimum attenuation (dB).
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from scipy import signal

from fourier_fit.config import get_settings
from fourier_fit.errors import FilterDesignError
from fourier_fit.filters.abstract import AbstractFilterDesign


def _require_positive(value: float, what: str, design: str) -> float:
    if value <= 0:
        raise FilterDesignError(
            f"{design} {what} must be positive, got {value}",
            details={"filter": design, what: value},
        )
    return value


class ChebyshevIFilter(AbstractFilterDesign):
    """Chebyshev type I low-pass with pass-band ripple in dB."""

    name: str = "chebyshev1"
    description: str = "Chebyshev I"

    def __init__(self, ripple_db: Optional[float] = None) -> None:
        ripple = ripple_db if ripple_db is not None else get_settings().ripple_db
        self.ripple_db = _require_positive(ripple, "ripple", self.description)

    def _design_ba(self, cutoff: float, order: int) -> Tuple[np.ndarray, np.ndarray]:
        return signal.cheby1(order, self.ripple_db, cutoff, btype="lowpass", output="ba")

    def _design_sos(self, cutoff: float, order: int) -> np.ndarray:
        return signal.cheby1(order, self.ripple_db, cutoff, btype="lowpass", output="sos")


class ChebyshevIIFilter(AbstractFilterDesign):
    """Chebyshev type II low-pass with minimum stop-band attenuation in dB."""

    name: str = "chebyshev2"
    description: str = "Chebyshev II"

    def __init__(self, attenuation_db: Optional[float] = None) -> None:
        attenuation = (
            attenuation_db if attenuation_db is not None else get_settings().attenuation_db
        )
        self.attenuation_db = _require_positive(attenuation, "attenuation", self.description)

    def _design_ba(self, cutoff: float, order: int) -> Tuple[np.ndarray, np.ndarray]:
        return signal.cheby2(order, self.attenuation_db, cutoff, btype="lowpass", output="ba")

    def _design_sos(self, cutoff: float, order: int) -> np.ndarray:
        return signal.cheby2(order, self.attenuation_db, cutoff, btype="lowpass", output="sos")


__all__ = ["ChebyshevIFilter", "ChebyshevIIFilter"]
