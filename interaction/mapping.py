# interaction/mapping.py
"""
Pointer (canvas pixel) coordinates to the normalized impedance domain.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from core.gamma import screen_to_gamma, to_impedance, to_gamma, gamma_to_screen
from core.impedance import Impedance
from interaction.snapping import SNAP_THRESHOLD, snap_impedance

# Slack when deciding whether a pointer is on the chart.
UNIT_CIRCLE_TOLERANCE = 1.01


@dataclass(frozen=True)
class CanvasGeometry:
    """Chart center and radius in canvas pixels; owned by the rendering layer."""
    center: Tuple[float, float]
    radius: float

    def normalize(self, x: float, y: float) -> Tuple[float, float]:
        return (x - self.center[0]) / self.radius, (y - self.center[1]) / self.radius

    def contains(self, x: float, y: float, tolerance: float = UNIT_CIRCLE_TOLERANCE) -> bool:
        if self.radius <= 0:
            return False
        u, v = self.normalize(x, y)
        return u * u + v * v <= tolerance

    def impedance_to_screen(self, z: Impedance) -> Tuple[float, float]:
        return gamma_to_screen(to_gamma(z), self.center, self.radius)


def screen_to_raw_impedance(x: float, y: float, center: Tuple[float, float],
                            radius: float) -> Optional[Impedance]:
    """Unsnapped impedance under the pointer; None for a degenerate canvas."""
    if radius <= 0:
        return None
    u, v = CanvasGeometry(center, radius).normalize(x, y)
    z = to_impedance(screen_to_gamma(u, v))
    # rounding on the |Γ| = 1 boundary
    return Impedance(max(0.0, z.r), z.x)


def screen_to_impedance(x: float, y: float, center: Tuple[float, float], radius: float,
                        threshold: float = SNAP_THRESHOLD) -> Optional[Impedance]:
    raw = screen_to_raw_impedance(x, y, center, radius)
    if raw is None:
        return None
    return snap_impedance(raw, threshold)
