"""
Butterworth low-pass design: maximally flat pass-band, no ripple.

The baseline design and the default filter of the CLI.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy import signal

from fourier_fit.filters.abstract import AbstractFilterDesign


class ButterworthFilter(AbstractFilterDesign):
    """Digital Butterworth low-pass."""

    name: str = "butterworth"
    description: str = "Butterworth"

    def _design_ba(self, cutoff: float, order: int) -> Tuple[np.ndarray, np.ndarray]:
        return signal.butter(order, cutoff, btype="lowpass", output="ba")

    def _design_sos(self, cutoff: float, order: int) -> np.ndarray:
        return signal.butter(order, cutoff, btype="lowpass", output="sos")


__all__ = ["ButterworthFilter"]
