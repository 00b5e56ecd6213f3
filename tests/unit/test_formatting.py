import pytest

from fourier_fit.utils.formatting import fmt_complex, fmt_roots, fmt_tick


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0.00"),
        (0.5, "0.50"),
        (-3.14159, "-3.14"),
        (12.345, "12.3"),
        (250.4, "250"),
        (0.005, "5.00e-03"),
        (-0.001, "-1.00e-03"),
        (12345.0, "1.23e+04"),
    ],
)
def test_fmt_tick(value, expected):
    assert fmt_tick(value) == expected


def test_fmt_complex_signs_both_parts():
    assert fmt_complex(complex(0.5, -0.25)) == "+0.500000 -0.250000j"
    assert fmt_complex(complex(-1.0, 0.0)) == "-1.000000 +0.000000j"


def test_fmt_roots():
    assert fmt_roots([]) == "(none)"
    assert fmt_roots([1 + 1j, 1 - 1j]) == "+1.000000 +1.000000j\n+1.000000 -1.000000j"
