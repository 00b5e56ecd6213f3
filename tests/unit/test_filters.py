from __future__ import annotations

import numpy as np
import pytest

from fourier_fit.errors import FilterDesignError, InsufficientDataError, InvalidCutoffError
from fourier_fit.filters import (
    NYQUIST_PERIOD,
    ButterworthFilter,
    ChebyshevIFilter,
    ChebyshevIIFilter,
    FilterDesign,
    cutoff_period_to_nyquist,
    min_len_for_sosfiltfilt,
    normalize_lowpass_dc,
    resolve_filter,
)

ORDER = 4
CUTOFF = cutoff_period_to_nyquist(4.2)
ORDER_4_MIN_SAMPLES = 16

ALL_DESIGNS = [
    ButterworthFilter(),
    ChebyshevIFilter(ripple_db=5.0),
    ChebyshevIIFilter(attenuation_db=40.0),
]


class TestCutoffConversion:
    def test_period_maps_to_fraction_of_nyquist(self):
        assert cutoff_period_to_nyquist(4.0) == pytest.approx(0.5)
        assert cutoff_period_to_nyquist(20.0) == pytest.approx(0.1)

    def test_period_below_nyquist_is_rejected(self):
        with pytest.raises(InvalidCutoffError, match="below the nyquist period of 2.0"):
            cutoff_period_to_nyquist(1.5)

    def test_period_equal_to_nyquist_is_rejected(self):
        with pytest.raises(InvalidCutoffError):
            cutoff_period_to_nyquist(NYQUIST_PERIOD)


def test_normalize_lowpass_dc_forces_unity_gain():
    b = np.array([1.0, 2.0, 1.0])
    a = np.array([2.0, 0.5, 0.5])
    nb = normalize_lowpass_dc(b, a)
    assert np.sum(nb) / np.sum(a) == pytest.approx(1.0)


@pytest.mark.parametrize("design", ALL_DESIGNS, ids=lambda d: d.name)
class TestDesigns:
    def test_satisfies_protocol(self, design):
        assert isinstance(design, FilterDesign)

    def test_coefficients_have_order_plus_one_taps_and_unity_dc(self, design):
        b, a, sos = design.design(CUTOFF, ORDER)
        assert len(b) == ORDER + 1
        assert len(a) == ORDER + 1
        assert sos.shape == (ORDER // 2, 6)
        assert np.sum(b) / np.sum(a) == pytest.approx(1.0)

    def test_filtered_series_keeps_length(self, design, demo):
        result = design.apply(demo, CUTOFF, ORDER)
        assert result.filtered.shape == demo.shape
        assert np.all(np.isfinite(result.filtered))

    def test_short_series_reports_required_length(self, design):
        with pytest.raises(InsufficientDataError) as excinfo:
            design.apply(np.ones(ORDER_4_MIN_SAMPLES - 1), CUTOFF, ORDER)
        assert excinfo.value.required == ORDER_4_MIN_SAMPLES
        assert str(excinfo.value) == (
            f"Requires {ORDER_4_MIN_SAMPLES} points for filtering. Got {ORDER_4_MIN_SAMPLES - 1}"
        )

    def test_exact_minimum_length_is_accepted(self, design):
        result = design.apply(np.ones(ORDER_4_MIN_SAMPLES), CUTOFF, ORDER)
        assert result.filtered.size == ORDER_4_MIN_SAMPLES

    def test_rejects_zero_order(self, design):
        with pytest.raises(FilterDesignError, match="order must be at least 1"):
            design.design(CUTOFF, 0)

    def test_rejects_cutoff_outside_unit_interval(self, design):
        with pytest.raises(FilterDesignError, match="strictly between 0 and 1"):
            design.design(1.0, ORDER)


def test_min_len_matches_scipy_padding_rule():
    _, _, sos = ButterworthFilter().design(CUTOFF, ORDER)
    assert min_len_for_sosfiltfilt(sos) == ORDER_4_MIN_SAMPLES


def test_butterworth_passes_constant_series_unchanged():
    data = np.full(64, 80.0)
    result = ButterworthFilter().apply(data, CUTOFF, ORDER)
    assert np.allclose(result.filtered, 80.0, atol=1e-6)


def test_butterworth_keeps_slow_demo_signal(demo):
    result = ButterworthFilter().apply(demo, CUTOFF, ORDER)
    assert np.max(np.abs(result.filtered - demo)) < 0.05


def test_butterworth_removes_fast_oscillation():
    n = np.arange(256)
    slow = np.sin(2 * np.pi * n / 64.0)
    fast = 0.5 * np.cos(np.pi * n)  # two-sample period, at Nyquist
    result = ButterworthFilter().apply(slow + fast, CUTOFF, ORDER)
    interior = slice(32, -32)
    assert np.max(np.abs(result.filtered[interior] - slow[interior])) < 0.05


def test_chebyshev_designs_reject_non_positive_parameters():
    with pytest.raises(FilterDesignError, match="ripple must be positive"):
        ChebyshevIFilter(ripple_db=0.0)
    with pytest.raises(FilterDesignError, match="attenuation must be positive"):
        ChebyshevIIFilter(attenuation_db=-3.0)


def test_resolve_filter_passes_design_parameters():
    design = resolve_filter("chebyshev1", ripple_db=1.5)
    assert isinstance(design, ChebyshevIFilter)
    assert design.ripple_db == 1.5


def test_resolve_filter_unknown_name():
    with pytest.raises(ValueError, match="Unknown filter 'bessel'"):
        resolve_filter("bessel")
