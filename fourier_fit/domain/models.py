"""
Domain models for Fourier Fit.

Defines the filter families, candle bucketing lengths and the small value
objects passed between the session, the orchestrator and the reporter.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import ClassVar, List

from pydantic import BaseModel, Field


class FilterType(str, Enum):
    """IIR low-pass families the session can design."""

    BUTTERWORTH = "butterworth"
    CHEBYSHEV1 = "chebyshev1"
    CHEBYSHEV2 = "chebyshev2"

    ALL: ClassVar[List["FilterType"]]

    @property
    def label(self) -> str:
        return _FILTER_LABELS[self]

    def __str__(self) -> str:
        return self.label


_FILTER_LABELS = {
    FilterType.BUTTERWORTH: "Butterworth",
    FilterType.CHEBYSHEV1: "Chebyshev I",
    FilterType.CHEBYSHEV2: "Chebyshev II",
}
FilterType.ALL = [FilterType.BUTTERWORTH, FilterType.CHEBYSHEV1, FilterType.CHEBYSHEV2]


class CandleLength(str, Enum):
    """Number of daily samples folded into one candle."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def samples(self) -> int:
        return {"weekly": 7, "monthly": 30, "yearly": 365}[self.value]

    def __str__(self) -> str:
        return self.value.capitalize()


class Candle(BaseModel):
    """Open/high/low/close summary of one chunk of samples."""

    t: float = Field(..., description="Chunk index (monotonic time axis).")
    open: float
    high: float
    low: float
    close: float

    model_config = {"frozen": True}

    @property
    def rising(self) -> bool:
        return self.close >= self.open


class FilterParams(BaseModel):
    """User-facing filter parameters; the cutoff is a period in days."""

    cutoff_period: float = Field(4.2, description="Cutoff period in samples (days).")
    order: int = Field(4, ge=1, description="Filter order.")
    ripple_db: float = Field(5.0, gt=0, description="Pass-band ripple for Chebyshev I.")
    attenuation_db: float = Field(40.0, gt=0, description="Stop-band attenuation for Chebyshev II.")

    model_config = {"frozen": True}


class WeightEntry(BaseModel):
    """A single dated weigh-in."""

    day: date
    weight: float

    model_config = {"frozen": True}


__all__ = ["FilterType", "CandleLength", "Candle", "FilterParams", "WeightEntry"]
