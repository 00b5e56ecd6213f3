"""
Exception hierarchy for Fourier Fit.

Every failure raised by the filtering, analysis and storage layers derives
from FourierFitError so the CLI and orchestrator can catch one type and
still report a machine-friendly code.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FourierFitError(Exception):
    """Base exception for all Fourier Fit errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception into a serialisable payload."""
        result: Dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__,
        }
        if self.details:
            result["details"] = self.details
        if self.original_exception:
            result["original_error"] = str(self.original_exception)
        return result


# ---------------------------------------------------------------- filtering


class FilterDesignError(FourierFitError):
    """Raised when a filter cannot be constructed from the given parameters."""


class InvalidCutoffError(FilterDesignError):
    """Raised when a cutoff period sits at or below the Nyquist period."""

    def __init__(self, period: float, nyquist_period: float) -> None:
        super().__init__(
            message=f"Period of {period} is below the nyquist period of {nyquist_period}",
            code="invalid_cutoff",
            details={"period": period, "nyquist_period": nyquist_period},
        )
        self.period = period


class InsufficientDataError(FourierFitError):
    """Raised when a series is too short for zero-phase filtering."""

    def __init__(self, required: int, actual: int) -> None:
        super().__init__(
            message=f"Requires {required} points for filtering. Got {actual}",
            code="insufficient_data",
            details={"required": required, "actual": actual},
        )
        self.required = required
        self.actual = actual


# ----------------------------------------------------------------- analysis


class NoDataError(FourierFitError):
    """Raised when an analysis is requested before any data was loaded."""

    def __init__(self, message: str = "No data set") -> None:
        super().__init__(message=message, code="no_data")


class AnalysisNotReadyError(FourierFitError):
    """Raised when a derived analysis runs before filtering."""

    def __init__(self, message: str = "Filtering not complete") -> None:
        super().__init__(message=message, code="analysis_not_ready")


class PolynomialError(FourierFitError):
    """Raised for degenerate polynomials handed to the root finder."""


class SpectrumError(FourierFitError):
    """Raised when the FFT of a series cannot be taken."""


class CandleError(FourierFitError):
    """Raised for invalid candle bucketing requests."""


# ------------------------------------------------------------------ storage


class WeightLogError(FourierFitError):
    """Raised for weight log parsing and file errors."""


class InvalidDateError(WeightLogError):
    """Raised when a year/month/day triple is not a calendar date."""

    def __init__(self, message: str = "Invalid date") -> None:
        super().__init__(message=message, code="invalid_date")


__all__ = [
    "FourierFitError",
    "FilterDesignError",
    "InvalidCutoffError",
    "InsufficientDataError",
    "NoDataError",
    "AnalysisNotReadyError",
    "PolynomialError",
    "SpectrumError",
    "CandleError",
    "WeightLogError",
    "InvalidDateError",
]
