"""
Filter designs for Fourier Fit.

Re-exports the design interfaces, the concrete low-pass families and a small
registry so callers can resolve a design by name.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from fourier_fit.filters.abstract import (
    NYQUIST_PERIOD,
    AbstractFilterDesign,
    FilterData,
    FilterDesign,
    cutoff_period_to_nyquist,
    min_len_for_sosfiltfilt,
    normalize_lowpass_dc,
)
from fourier_fit.filters.butterworth import ButterworthFilter
from fourier_fit.filters.chebyshev import ChebyshevIFilter, ChebyshevIIFilter


def _filter_factories(
    ripple_db: Optional[float] = None, attenuation_db: Optional[float] = None
) -> Dict[str, Callable[[], FilterDesign]]:
    """Registry of available filter designs."""
    return {
        "butterworth": lambda: ButterworthFilter(),
        "chebyshev1": lambda: ChebyshevIFilter(ripple_db=ripple_db),
        "chebyshev2": lambda: ChebyshevIIFilter(attenuation_db=attenuation_db),
    }


def available_filters() -> List[str]:
    """List available filter design names."""
    return sorted(_filter_factories().keys())


def resolve_filter(
    name: str, ripple_db: Optional[float] = None, attenuation_db: Optional[float] = None
) -> FilterDesign:
    factories = _filter_factories(ripple_db=ripple_db, attenuation_db=attenuation_db)
    if name not in factories:
        raise ValueError(f"Unknown filter '{name}'. Available: {', '.join(sorted(factories))}")
    return factories[name]()


__all__ = [
    # Abstracts
    "AbstractFilterDesign",
    "FilterData",
    "FilterDesign",
    # Helpers
    "NYQUIST_PERIOD",
    "cutoff_period_to_nyquist",
    "min_len_for_sosfiltfilt",
    "normalize_lowpass_dc",
    # Concrete designs
    "ButterworthFilter",
    "ChebyshevIFilter",
    "ChebyshevIIFilter",
    # Registry
    "available_filters",
    "resolve_filter",
]
