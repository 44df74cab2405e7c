# interaction/smoothing.py
"""
Exponential smoothing of the displayed point toward its target.

The per-step factor is ``1 - exp(-dt / tau)``, so the perceived lag depends
only on elapsed time, not on how often ``step`` is called.
"""
import math
from typing import Optional, Tuple

Position = Tuple[float, float]


def smoothing_factor(dt: float, time_constant: float, reduced_motion: bool = False) -> float:
    if reduced_motion or time_constant <= 0:
        return 1.0
    if dt <= 0:
        return 0.0
    return 1.0 - math.exp(-dt / time_constant)


class PointSmoother:
    def __init__(self, time_constant: float = 0.05, reduced_motion: bool = False) -> None:
        if not (math.isfinite(time_constant) and time_constant >= 0):
            raise ValueError(f"Time constant must be finite and >= 0, got {time_constant}")
        self.time_constant = time_constant
        self.reduced_motion = reduced_motion
        self.position: Optional[Position] = None

    def jump(self, position: Optional[Position]) -> None:
        """Place the point without animation (or clear it with None)."""
        self.position = position

    def step(self, target: Position, dt: float) -> Position:
        if self.position is None:
            self.position = target
            return target
        alpha = smoothing_factor(dt, self.time_constant, self.reduced_motion)
        if alpha >= 1.0:
            self.position = target
            return target
        x, y = self.position
        self.position = (x + (target[0] - x) * alpha, y + (target[1] - y) * alpha)
        return self.position
