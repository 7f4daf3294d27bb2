import re

import pytest
from hypothesis import given
from hypothesis.strategies import floats
from pytest import approx

from phasor_utils import InvalidArgument, eng_notation

ENG_RE = re.compile(r"^(-?\d+\.\d+)e([+-]\d{3,})$")


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.4142135623730951, "1.4142e+000"),
        (45.0, "45.0000e+000"),
        (-90.08814727, "-90.0881e+000"),
        (0.6095065752, "609.5066e-003"),
        (47002.6595, "47.0027e+003"),
        (5.000108898e-9, "5.0001e-009"),
        (1500, "1.5000e+003"),
        (0.000047, "47.0000e-006"),
        (-0.02, "-20.0000e-003"),
        (1e12, "1.0000e+012"),
        (1, "1.0000e+000"),
    ],
)
def test_eng_notation_examples(value, expected):
    assert eng_notation(value) == expected


def test_eng_notation_zero():
    assert eng_notation(0) == "0.0000e+000"
    assert eng_notation(-0.0) == "0.0000e+000"


def test_eng_notation_non_finite():
    assert eng_notation(float("nan")) == "NaN"
    assert eng_notation(float("inf")) == "Inf"
    assert eng_notation(float("-inf")) == "-Inf"


def test_eng_notation_rounds_half_away_from_zero():
    assert eng_notation(2.5, digits=0) == "3e+000"
    assert eng_notation(-2.5, digits=0) == "-3e+000"
    assert eng_notation(1.00005) == "1.0001e+000"


def test_eng_notation_carries_rounding_into_next_exponent():
    assert eng_notation(999.99995) == "1.0000e+003"
    assert eng_notation(-999.99995) == "-1.0000e+003"
    assert eng_notation(999.99994) == "999.9999e+000"


def test_eng_notation_digits():
    assert eng_notation(0.00012345, digits=2) == "123.45e-006"
    assert eng_notation(0.00012345, digits=6) == "123.450000e-006"


@pytest.mark.parametrize("digits", [-1, 1.5, True, "4"])
def test_eng_notation_raises_on_bad_digits(digits):
    with pytest.raises(InvalidArgument, match="digits"):
        eng_notation(1.0, digits=digits)


@given(floats(allow_nan=False, allow_infinity=False).filter(lambda x: x != 0))
def test_eng_notation_mantissa_and_exponent_ranges(value: float):
    match = ENG_RE.match(eng_notation(value))
    assert match is not None
    mantissa, exponent = float(match.group(1)), int(match.group(2))
    assert exponent % 3 == 0
    assert 1 <= abs(mantissa) < 1000
    assert float(eng_notation(value)) == approx(value, rel=1e-4)
