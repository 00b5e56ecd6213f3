"""
Utilities package for Fourier Fit.

Exports shared helpers for logging, profiling and number formatting.
Keep this package free of filter or analysis logic.
"""

from fourier_fit.utils.formatting import fmt_complex, fmt_roots, fmt_tick
from fourier_fit.utils.logging import configure_logging, get_logger
from fourier_fit.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
    "fmt_complex",
    "fmt_roots",
    "fmt_tick",
]
