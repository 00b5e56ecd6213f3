"""
Filter design interfaces and the shared zero-phase filtering pipeline.

Concrete designs (Butterworth, Chebyshev I, Chebyshev II) implement
``_design_ba`` and ``_design_sos`` on AbstractFilterDesign; ``apply`` then
normalises DC gain, checks the series is long enough for forward-backward
filtering and runs the SOS cascade over it.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, runtime_checkable

import numpy as np
from scipy import signal

from fourier_fit.errors import FilterDesignError, InsufficientDataError, InvalidCutoffError
from fourier_fit.utils.logging import get_logger

log = get_logger(__name__)

NYQUIST_PERIOD: float = 2.0


@dataclass(frozen=True)
class FilterData:
    """
    Output of a filter run.

    ``b`` and ``a`` are transfer-function coefficients in ascending powers
    of z^-1, with ``b`` scaled so that H(1) == 1.
    """

    filtered: np.ndarray
    b: np.ndarray
    a: np.ndarray


def cutoff_period_to_nyquist(period: float) -> float:
    """
    Convert a cutoff period in samples to a fraction of the Nyquist frequency.

    A period of exactly two samples is the Nyquist frequency itself, which no
    digital low-pass accepts, so it is rejected together with shorter periods.
    """
    if period <= NYQUIST_PERIOD:
        raise InvalidCutoffError(period, NYQUIST_PERIOD)
    return NYQUIST_PERIOD / period


def normalize_lowpass_dc(b: np.ndarray, a: np.ndarray) -> np.ndarray:
    """Return ``b`` rescaled so the DC gain sum(b)/sum(a) equals one."""
    gain = np.sum(b) / np.sum(a)
    return np.asarray(b, dtype=float) / gain


def min_len_for_sosfiltfilt(sos: np.ndarray) -> int:
    """Smallest series length sosfiltfilt accepts with its default padding."""
    ntaps = 2 * len(sos) + 1
    bzeros = int(np.count_nonzero(sos[:, 2] == 0))
    azeros = int(np.count_nonzero(sos[:, 5] == 0))
    ntaps -= min(bzeros, azeros)
    return 3 * ntaps + 1


@runtime_checkable
class FilterDesign(Protocol):
    """
    Common interface for low-pass filter designs.

    Attributes
    ----------
    name : str
        Machine-friendly identifier used by the registry and the CLI.
    description : str
        Human-friendly summary of the design.
    """

    name: str
    description: str

    def apply(self, data: Sequence[float], cutoff: float, order: int) -> FilterData:
        """
        Design the filter and run it zero-phase over ``data``.

        Parameters
        ----------
        data : sequence of float
            Evenly sampled input series.
        cutoff : float
            Cutoff as a fraction of Nyquist, strictly between 0 and 1.
        order : int
            Filter order.
        """
        ...


class AbstractFilterDesign(abc.ABC):
    """
    ABC helper holding the filtering pipeline shared by every design.

    Subclasses set ``name``/``description`` and provide the coefficient and
    SOS constructors for their family.
    """

    name: str
    description: str

    @abc.abstractmethod
    def _design_ba(self, cutoff: float, order: int) -> Tuple[np.ndarray, np.ndarray]:
        raise NotImplementedError

    @abc.abstractmethod
    def _design_sos(self, cutoff: float, order: int) -> np.ndarray:
        raise NotImplementedError

    def _validate(self, cutoff: float, order: int) -> None:
        if order < 1:
            raise FilterDesignError(
                f"{self.description} filter order must be at least 1, got {order}",
                details={"filter": self.name, "order": order},
            )
        if not 0.0 < cutoff < 1.0:
            raise FilterDesignError(
                f"{self.description} cutoff must lie strictly between 0 and 1 "
                f"(fraction of Nyquist), got {cutoff}",
                details={"filter": self.name, "cutoff": cutoff},
            )

    def design(self, cutoff: float, order: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return DC-normalised (b, a) and the SOS cascade for the same filter."""
        self._validate(cutoff, order)
        try:
            b, a = self._design_ba(cutoff, order)
            sos = self._design_sos(cutoff, order)
        except ValueError as exc:
            raise FilterDesignError(
                f"{self.description} filter construction failed: {exc}",
                details={"filter": self.name, "cutoff": cutoff, "order": order},
                original_exception=exc,
            ) from exc
        return normalize_lowpass_dc(b, a), np.asarray(a, dtype=float), sos

    def apply(self, data: Sequence[float], cutoff: float, order: int) -> FilterData:
        b, a, sos = self.design(cutoff, order)
        samples = np.asarray(data, dtype=float)

        required = min_len_for_sosfiltfilt(sos)
        if samples.size < required:
            raise InsufficientDataError(required=required, actual=int(samples.size))

        filtered = signal.sosfiltfilt(sos, samples)
        log.debug(
            "Applied %s filter",
            self.name,
            extra={"filter": self.name, "cutoff": cutoff, "order": order, "samples": samples.size},
        )
        return FilterData(filtered=filtered, b=b, a=a)


__all__ = [
    "NYQUIST_PERIOD",
    "FilterData",
    "FilterDesign",
    "AbstractFilterDesign",
    "cutoff_period_to_nyquist",
    "normalize_lowpass_dc",
    "min_len_for_sosfiltfilt",
]
