"""
Fourier Fit - low-pass filtering and spectral analysis of a daily weight log.

The package smooths an evenly sampled series with a digital IIR low-pass
and characterises both the filter and the data:

- Butterworth, Chebyshev I and Chebyshev II designs, applied zero-phase
- z-plane zeros and poles of the designed filter
- Bode magnitude response on a log frequency grid
- FFT magnitude spectrum of the filtered series
- OHLC candles over weekly, monthly or yearly chunks
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from fourier_fit.config import Settings, get_settings
from fourier_fit.domain.models import Candle, CandleLength, FilterParams, FilterType
from fourier_fit.errors import FourierFitError
from fourier_fit.filters import FilterData, available_filters, resolve_filter
from fourier_fit.orchestrator import RunConfig, run_filters
from fourier_fit.session import FilterSession
from fourier_fit.storage.weight_log import WeightLog
from fourier_fit.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Candle",
    "CandleLength",
    "FilterParams",
    "FilterType",
    "FourierFitError",
    # Filtering
    "FilterData",
    "FilterSession",
    "available_filters",
    "resolve_filter",
    # Orchestration
    "RunConfig",
    "run_filters",
    # Storage
    "WeightLog",
    # Logging
    "configure_logging",
    "get_logger",
]
