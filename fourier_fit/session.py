"""
Stateful filter session: one series, one filter design, its derived analyses.

The session mirrors the "set parameters, then Calculate" workflow: setters
store the parameters, ``filter`` produces the filtered series together with
the filter's zeros, poles and the raw-data candles, and ``fft_filtered`` /
``generate_bode`` derive the spectrum and the magnitude response from that
filter run.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from fourier_fit.analysis.bode import bode_mag_logspace
from fourier_fit.analysis.candles import vec_to_candles
from fourier_fit.analysis.roots import iir_zeros_poles_z
from fourier_fit.analysis.spectrum import rfft_mag
from fourier_fit.config import get_settings
from fourier_fit.domain.models import Candle, CandleLength, FilterType
from fourier_fit.errors import AnalysisNotReadyError, NoDataError
from fourier_fit.filters import FilterData, FilterDesign, resolve_filter
from fourier_fit.filters.abstract import NYQUIST_PERIOD, cutoff_period_to_nyquist
from fourier_fit.utils.logging import get_logger

log = get_logger(__name__)

DEMO_SAMPLES = 512


def demo_series(n: int = DEMO_SAMPLES) -> np.ndarray:
    """A 5-cycle sine with a slow 0.15-amplitude drift, sampled n times."""
    t = np.arange(n, dtype=float) / n
    return np.sin(2.0 * math.pi * 5.0 * t) + 0.15 * np.sin(2.0 * t)


class FilterSession:
    """
    Holds the input series, the filter parameters and every derived result.

    The cutoff is stored as a fraction of Nyquist; use ``set_cutoff_period``
    to set it from a period in days.
    """

    def __init__(self) -> None:
        settings = get_settings()
        self.raw_data: Optional[np.ndarray] = None
        self.filter_type: FilterType = FilterType(settings.default_filter)
        self.cutoff_freq: float = cutoff_period_to_nyquist(settings.cutoff_period_days)
        self.order: int = settings.filter_order
        self.ripple: float = settings.ripple_db
        self.attenuation: float = settings.attenuation_db
        self.candle_length: CandleLength = CandleLength(settings.candle_length)
        self.sample_rate: float = settings.sample_rate
        self.bode_points: int = settings.bode_points

        self.filtered_data: Optional[FilterData] = None
        self.zeros: Optional[List[complex]] = None
        self.poles: Optional[List[complex]] = None
        self.bode_plot: Optional[Tuple[np.ndarray, np.ndarray]] = None
        self.data_spectrum: Optional[np.ndarray] = None
        self.candles: Optional[List[Candle]] = None

    # ------------------------------------------------------------ setters

    def set_data(self, data: Sequence[float]) -> None:
        self.raw_data = np.asarray(data, dtype=float)

    def set_demo_data(self) -> None:
        self.raw_data = demo_series()

    def set_filter_type(self, filter_type: FilterType) -> None:
        self.filter_type = FilterType(filter_type)

    def set_cutoff(self, cutoff: float) -> None:
        self.cutoff_freq = cutoff

    def set_cutoff_period(self, period_days: float) -> None:
        self.cutoff_freq = cutoff_period_to_nyquist(period_days)

    def set_order(self, order: int) -> None:
        self.order = order

    def set_ripple(self, ripple: float) -> None:
        self.ripple = ripple

    def set_attenuation(self, attenuation: float) -> None:
        self.attenuation = attenuation

    def set_candle_length(self, length: CandleLength) -> None:
        self.candle_length = CandleLength(length)

    @property
    def cutoff_period(self) -> float:
        return NYQUIST_PERIOD / self.cutoff_freq

    # --------------------------------------------------------- operations

    def _design(self) -> FilterDesign:
        return resolve_filter(
            self.filter_type.value, ripple_db=self.ripple, attenuation_db=self.attenuation
        )

    def filter(self) -> FilterData:
        """
        Run the selected design over the raw data.

        Also computes the filter's z-plane zeros and poles and buckets the
        raw series into candles.

        Raises
        ------
        NoDataError
            When no series was set.
        """
        if self.raw_data is None:
            raise NoDataError()

        design = self._design()
        self.filtered_data = design.apply(self.raw_data, self.cutoff_freq, self.order)
        self.zeros, self.poles = iir_zeros_poles_z(self.filtered_data.b, self.filtered_data.a)
        self.candles = vec_to_candles(self.raw_data, self.candle_length.samples)
        log.info(
            "Filtered series",
            extra={
                "filter": self.filter_type.value,
                "samples": int(self.raw_data.size),
                "cutoff": round(self.cutoff_freq, 6),
                "order": self.order,
            },
        )
        return self.filtered_data

    def fft_filtered(self) -> np.ndarray:
        if self.filtered_data is None:
            raise AnalysisNotReadyError()
        self.data_spectrum = rfft_mag(self.filtered_data.filtered)
        return self.data_spectrum

    def generate_bode(self) -> Tuple[np.ndarray, np.ndarray]:
        if self.filtered_data is None:
            raise AnalysisNotReadyError()
        self.bode_plot = bode_mag_logspace(
            self.filtered_data.b, self.filtered_data.a, self.sample_rate, self.bode_points
        )
        return self.bode_plot

    def calculate(self) -> None:
        """Filter, then derive the spectrum and the Bode response."""
        self.filter()
        self.fft_filtered()
        self.generate_bode()

    def clear(self) -> None:
        """Drop derived results; the series and parameters stay."""
        self.filtered_data = None
        self.zeros = None
        self.poles = None
        self.bode_plot = None
        self.data_spectrum = None
        self.candles = None


__all__ = ["DEMO_SAMPLES", "FilterSession", "demo_series"]
