"""
Pole/zero extraction for IIR filters given in powers of z^-1.

A transfer function H(z) = B(z^-1) / A(z^-1) is a pair of ordinary
polynomials in w = z^-1. Their roots come from the eigenvalues of the
companion matrix; the z-plane locations are the reciprocals.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from fourier_fit.errors import PolynomialError

INFINITE_ROOT = complex(float("inf"), float("inf"))


def poly_roots_ascending_real(coeffs: Sequence[float]) -> np.ndarray:
    """
    Roots of c[0] + c[1] w + ... + c[n] w^n.

    Trailing (highest-degree) zero coefficients are dropped first; a
    constant polynomial has no roots.

    Raises
    ------
    PolynomialError
        For an empty or identically zero coefficient list.
    """
    c = np.asarray(coeffs, dtype=float)
    if c.size == 0:
        raise PolynomialError("Empty polynomial", code="empty_polynomial")

    nonzero = np.flatnonzero(c)
    if nonzero.size == 0:
        raise PolynomialError("Zero polynomial", code="zero_polynomial")
    deg = int(nonzero[-1])
    if deg == 0:
        return np.empty(0, dtype=complex)

    monic = c[: deg + 1] / c[deg]

    # Companion matrix: first row holds -a_{deg-1} .. -a_0, ones on the subdiagonal.
    companion = np.zeros((deg, deg), dtype=complex)
    companion[0, :] = -monic[deg - 1 :: -1][:deg]
    companion[np.arange(1, deg), np.arange(0, deg - 1)] = 1.0

    try:
        return np.linalg.eigvals(companion)
    except np.linalg.LinAlgError as exc:
        raise PolynomialError(
            f"eigvals failed: {exc}", code="eigvals_failed", original_exception=exc
        ) from exc


def _reciprocal(w: complex) -> complex:
    if w == 0:
        return INFINITE_ROOT
    return 1.0 / w


def iir_zeros_poles_z(
    b: Sequence[float], a: Sequence[float]
) -> Tuple[List[complex], List[complex]]:
    """Return (zeros, poles) in the z-plane for coefficients in powers of z^-1."""
    zeros_w = poly_roots_ascending_real(b)
    poles_w = poly_roots_ascending_real(a)
    zeros = [_reciprocal(complex(w)) for w in zeros_w]
    poles = [_reciprocal(complex(w)) for w in poles_w]
    return zeros, poles


def is_stable(poles: Sequence[complex]) -> bool:
    """True when every pole is finite and strictly inside the unit circle."""
    finite = [p for p in poles if np.isfinite(p.real) and np.isfinite(p.imag)]
    return all(abs(p) < 1.0 for p in finite) and len(finite) == len(poles)


__all__ = ["INFINITE_ROOT", "poly_roots_ascending_real", "iir_zeros_poles_z", "is_stable"]
