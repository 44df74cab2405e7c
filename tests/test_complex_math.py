import math
import pytest
from core.complex_math import (Complex, add, sub, mul, div, magnitude, phase_radians,
                               phase_degrees, exp_j, INFINITE)

def test_basic_arithmetic_matches_builtin_complex():
    a, b = Complex(1.5, -2.0), Complex(-0.25, 3.0)
    for op, expected in [(add, (1.5 - 2j) + (-0.25 + 3j)),
                         (sub, (1.5 - 2j) - (-0.25 + 3j)),
                         (mul, (1.5 - 2j) * (-0.25 + 3j)),
                         (div, (1.5 - 2j) / (-0.25 + 3j))]:
        result = op(a, b)
        assert complex(result) == pytest.approx(expected)

def test_div_by_zero_returns_infinite_sentinel():
    result = div(Complex(1.0, 1.0), Complex(0.0, 0.0))
    assert result == INFINITE
    assert math.isinf(result.re) and math.isinf(result.im)
    assert not result.is_finite()

def test_magnitude_and_phase():
    c = Complex(3.0, 4.0)
    assert magnitude(c) == 5.0
    assert phase_radians(Complex(0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert phase_degrees(Complex(-1.0, 0.0)) == pytest.approx(180.0)

def test_values_are_immutable():
    c = Complex(1.0, 2.0)
    with pytest.raises(AttributeError):
        c.re = 5.0
    add(c, Complex(1.0, 1.0))
    assert c == Complex(1.0, 2.0)

def test_exp_j_is_unit_phasor():
    p = exp_j(0.3)
    assert magnitude(p) == pytest.approx(1.0)
    assert phase_radians(p) == pytest.approx(0.3)
