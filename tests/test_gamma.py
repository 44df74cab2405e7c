import math
import numpy as np
import pytest
from core.complex_math import Complex, magnitude, phase_degrees
from core.gamma import (to_gamma, to_impedance, screen_to_gamma, gamma_to_screen, clamp_to_disk,
                        to_gamma_array, to_impedance_array, OPEN_CIRCUIT_RESISTANCE)
from core.impedance import Impedance

@pytest.mark.parametrize("r", [0.0, 0.01, 0.2, 1.0, 2.5, 10.0, 100.0])
@pytest.mark.parametrize("x", [-50.0, -1.0, -0.3, 0.0, 0.7, 3.0, 25.0])
def test_round_trip(r, x):
    z = to_impedance(to_gamma(Impedance(r, x)))
    assert z.r == pytest.approx(r, abs=1e-6)
    assert z.x == pytest.approx(x, abs=1e-6)

def test_match_has_zero_gamma():
    assert magnitude(to_gamma(Impedance(1, 0))) == 0

def test_short_circuit_gamma():
    gamma = to_gamma(Impedance(0, 0))
    assert magnitude(gamma) == pytest.approx(1.0)
    assert phase_degrees(gamma) == pytest.approx(180.0)

def test_open_circuit_returns_finite_resistance():
    z = to_impedance(Complex(1.0, 0.0))
    assert z == Impedance(OPEN_CIRCUIT_RESISTANCE, 0.0)
    assert z.is_finite()

def test_active_gamma_does_not_crash():
    z = to_impedance(Complex(-1.5, 0.2))
    assert z.is_finite()
    assert z.r < 0

def test_screen_flips_y():
    gamma = screen_to_gamma(0.3, 0.4)
    assert gamma == Complex(0.3, -0.4)

def test_screen_outside_disk_is_clamped():
    gamma = screen_to_gamma(3.0, 4.0)
    assert magnitude(gamma) == pytest.approx(0.99)
    assert gamma.re == pytest.approx(0.99 * 0.6)
    assert gamma.im == pytest.approx(-0.99 * 0.8)
    assert to_impedance(gamma).r > 0

def test_clamp_leaves_inside_points():
    assert clamp_to_disk(0.5, -0.5) == (0.5, -0.5)

def test_gamma_to_screen_inverts_mapping():
    center, radius = (100.0, 80.0), 50.0
    x, y = gamma_to_screen(Complex(0.2, 0.6), center, radius)
    u, v = (x - center[0]) / radius, (y - center[1]) / radius
    gamma = screen_to_gamma(u, v)
    assert gamma.re == pytest.approx(0.2)
    assert gamma.im == pytest.approx(0.6)

def test_vectorized_versions_agree_with_scalar():
    zs = np.array([0.5 + 0.5j, 2 - 1j, 1 + 0j, 0j])
    gammas = to_gamma_array(zs)
    for z, g in zip(zs, gammas):
        scalar = to_gamma(Impedance(z.real, z.imag))
        np.testing.assert_allclose(g, complex(scalar), atol=1e-12)
    np.testing.assert_allclose(to_impedance_array(gammas), zs, atol=1e-9)
    assert to_impedance_array(np.array([1 + 0j]))[0] == OPEN_CIRCUIT_RESISTANCE
