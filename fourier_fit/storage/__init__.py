"""
Storage package for Fourier Fit.

File-backed persistence of the weight log. Keep this layer focused on I/O,
decoupled from filtering and analysis.
"""

from fourier_fit.storage.weight_log import CSV_COLUMNS, WeightLog, parse_date

__all__ = ["CSV_COLUMNS", "WeightLog", "parse_date"]
