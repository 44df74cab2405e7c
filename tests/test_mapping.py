import pytest
from core.impedance import Impedance
from interaction.mapping import CanvasGeometry, screen_to_impedance, screen_to_raw_impedance

CENTER = (200.0, 200.0)
RADIUS = 100.0

canvas = CanvasGeometry(CENTER, RADIUS)

def test_center_is_match():
    assert screen_to_impedance(200.0, 200.0, CENTER, RADIUS) == Impedance(1.0, 0.0)

def test_upper_half_is_inductive():
    z = screen_to_raw_impedance(200.0, 150.0, CENTER, RADIUS)
    assert z.r == pytest.approx(0.6)
    assert z.x == pytest.approx(0.8)

def test_lower_half_is_capacitive():
    z = screen_to_raw_impedance(200.0, 250.0, CENTER, RADIUS)
    assert z.x == pytest.approx(-0.8)

def test_near_match_snaps_exactly():
    x, y = canvas.impedance_to_screen(Impedance(1.05, 0.04))
    assert screen_to_impedance(x, y, CENTER, RADIUS) == Impedance(1.0, 0.0)

def test_far_from_catalog_stays_raw():
    x, y = canvas.impedance_to_screen(Impedance(1.3, 0.0))
    z = screen_to_impedance(x, y, CENTER, RADIUS)
    assert z.r == pytest.approx(1.3)
    assert z.x == pytest.approx(0.0, abs=1e-12)

def test_outside_disk_is_clamped():
    z = screen_to_raw_impedance(500.0, 200.0, CENTER, RADIUS)
    # Γ clamped to 0.99 on the real axis
    assert z.r == pytest.approx(199.0)
    assert z.x == pytest.approx(0.0, abs=1e-9)

def test_resistance_never_negative_on_boundary():
    z = screen_to_raw_impedance(200.0, 500.0, CENTER, RADIUS)
    assert z.r >= 0.0

def test_degenerate_canvas():
    assert screen_to_impedance(10.0, 10.0, CENTER, 0.0) is None
    assert not CanvasGeometry(CENTER, 0.0).contains(200.0, 200.0)

def test_contains_uses_tolerance():
    assert canvas.contains(300.4, 200.0)
    assert not canvas.contains(302.0, 200.0)

def test_impedance_to_screen():
    x, y = canvas.impedance_to_screen(Impedance(2.0, 0.0))
    assert x == pytest.approx(200.0 + 100.0 / 3)
    assert y == pytest.approx(200.0)
