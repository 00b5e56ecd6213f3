import cmath

import numpy as np
import pytest

from fourier_fit.analysis import iir_zeros_poles_z, is_stable, poly_roots_ascending_real
from fourier_fit.analysis.roots import INFINITE_ROOT
from fourier_fit.errors import PolynomialError
from fourier_fit.filters import ButterworthFilter, ChebyshevIFilter, ChebyshevIIFilter

CUTOFF = 2.0 / 4.2


def _sorted_real(roots):
    return sorted(float(np.real(r)) for r in roots)


def test_quadratic_roots():
    # 2 - 3w + w^2 = (w - 1)(w - 2)
    roots = poly_roots_ascending_real([2.0, -3.0, 1.0])
    assert _sorted_real(roots) == pytest.approx([1.0, 2.0])


def test_trailing_zero_coefficients_are_trimmed():
    roots = poly_roots_ascending_real([2.0, -3.0, 1.0, 0.0, 0.0])
    assert len(roots) == 2
    assert _sorted_real(roots) == pytest.approx([1.0, 2.0])


def test_complex_pair():
    # 1 + w^2 has roots +-j
    roots = poly_roots_ascending_real([1.0, 0.0, 1.0])
    assert sorted(np.imag(roots)) == pytest.approx([-1.0, 1.0])
    assert np.allclose(np.real(roots), 0.0)


def test_constant_polynomial_has_no_roots():
    assert poly_roots_ascending_real([3.0]).size == 0
    assert poly_roots_ascending_real([3.0, 0.0]).size == 0


def test_empty_polynomial():
    with pytest.raises(PolynomialError, match="Empty polynomial"):
        poly_roots_ascending_real([])


def test_zero_polynomial():
    with pytest.raises(PolynomialError, match="Zero polynomial") as excinfo:
        poly_roots_ascending_real([0.0, 0.0])
    assert excinfo.value.code == "zero_polynomial"


def test_root_at_origin_maps_to_infinity():
    zeros, poles = iir_zeros_poles_z([0.0, 1.0], [1.0, -0.5])
    assert zeros == [INFINITE_ROOT]
    assert len(poles) == 1
    assert abs(poles[0] - 0.5) < 1e-12


def test_butterworth_zeros_sit_at_minus_one():
    b, a, _ = ButterworthFilter().design(CUTOFF, 4)
    zeros, poles = iir_zeros_poles_z(b, a)
    assert len(zeros) == 4
    assert len(poles) == 4
    for z in zeros:
        assert abs(z - (-1.0)) < 1e-2


@pytest.mark.parametrize(
    "design",
    [ButterworthFilter(), ChebyshevIFilter(ripple_db=5.0), ChebyshevIIFilter(attenuation_db=40.0)],
    ids=lambda d: d.name,
)
def test_designed_filters_are_stable(design):
    b, a, _ = design.design(CUTOFF, 4)
    _, poles = iir_zeros_poles_z(b, a)
    assert is_stable(poles)


def test_poles_come_in_conjugate_pairs():
    b, a, _ = ChebyshevIFilter(ripple_db=5.0).design(CUTOFF, 4)
    _, poles = iir_zeros_poles_z(b, a)
    conjugates = [p.conjugate() for p in poles]
    for p in poles:
        assert min(abs(p - c) for c in conjugates) < 1e-6


def test_is_stable_rejects_unit_circle_and_infinite_poles():
    assert not is_stable([1.0 + 0j])
    assert not is_stable([cmath.rect(1.2, 0.3)])
    assert not is_stable([0.5 + 0j, INFINITE_ROOT])
    assert is_stable([0.5 + 0.5j, 0.5 - 0.5j])
    assert is_stable([])
