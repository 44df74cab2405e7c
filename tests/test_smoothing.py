import math
import pytest
from interaction.smoothing import PointSmoother, smoothing_factor

def test_factor_depends_on_elapsed_time_only():
    tau = 0.05
    one_step = smoothing_factor(0.032, tau)
    two_steps = 1 - (1 - smoothing_factor(0.016, tau)) ** 2
    assert one_step == pytest.approx(two_steps)
    assert one_step == pytest.approx(1 - math.exp(-0.032 / tau))

def test_reduced_motion_is_instant():
    assert smoothing_factor(0.001, 0.05, reduced_motion=True) == 1.0
    smoother = PointSmoother(0.05, reduced_motion=True)
    smoother.jump((0.0, 0.0))
    assert smoother.step((10.0, -4.0), 0.001) == (10.0, -4.0)

def test_zero_dt_does_not_move():
    assert smoothing_factor(0.0, 0.05) == 0.0

def test_same_lag_at_different_refresh_rates():
    target = (100.0, 50.0)
    fast, slow = PointSmoother(0.1), PointSmoother(0.1)
    fast.jump((0.0, 0.0))
    slow.jump((0.0, 0.0))
    for _ in range(144):
        fast.step(target, 1 / 144)
    for _ in range(60):
        slow.step(target, 1 / 60)
    assert fast.position[0] == pytest.approx(slow.position[0])
    assert fast.position[1] == pytest.approx(slow.position[1])

def test_first_step_places_point():
    smoother = PointSmoother(0.05)
    assert smoother.step((3.0, 4.0), 0.016) == (3.0, 4.0)

def test_converges_to_target():
    smoother = PointSmoother(0.05)
    smoother.jump((0.0, 0.0))
    for _ in range(200):
        smoother.step((1.0, 1.0), 0.016)
    assert smoother.position == (pytest.approx(1.0), pytest.approx(1.0))

def test_invalid_time_constant_rejected():
    with pytest.raises(ValueError):
        PointSmoother(-1.0)
    with pytest.raises(ValueError):
        PointSmoother(math.inf)
