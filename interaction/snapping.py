# interaction/snapping.py
"""
Magnetic snapping of live impedances to a fixed catalog of canonical points.
"""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from core.impedance import Impedance
from utils.logging_config import get_logger

logger = get_logger(__name__)

SNAP_THRESHOLD = 0.15
SNAP_HYSTERESIS = 1.5


@dataclass(frozen=True)
class SnapPoint:
    target: Impedance
    label: str


# Catalog order decides ties. r = 5 stands in for the open circuit.
SNAP_POINTS: Tuple[SnapPoint, ...] = (
    SnapPoint(Impedance(1.0, 0.0), "Match"),
    SnapPoint(Impedance(0.0, 0.0), "Short"),
    SnapPoint(Impedance(5.0, 0.0), "Open"),
    SnapPoint(Impedance(1.0, 1.0), "+jX"),
    SnapPoint(Impedance(1.0, -1.0), "-jX"),
)


def find_snap_point(z: Impedance, threshold: float = SNAP_THRESHOLD,
                    catalog: Sequence[SnapPoint] = SNAP_POINTS) -> Optional[SnapPoint]:
    """First catalog entry strictly within ``threshold`` of ``z``, if any."""
    limit = threshold * threshold
    for point in catalog:
        if z.distance_squared(point.target) < limit:
            return point
    return None


def snap_impedance(z: Impedance, threshold: float = SNAP_THRESHOLD,
                   catalog: Sequence[SnapPoint] = SNAP_POINTS) -> Impedance:
    """Return the snap target verbatim when ``z`` is close enough, else ``z`` unchanged."""
    point = find_snap_point(z, threshold, catalog)
    return point.target if point is not None else z


class SnapTracker:
    """
    Stateful snapping with hysteresis: a point captures the impedance inside
    ``threshold`` and only releases it beyond ``threshold * hysteresis``.
    """
    def __init__(self, threshold: float = SNAP_THRESHOLD, hysteresis: float = SNAP_HYSTERESIS,
                 catalog: Sequence[SnapPoint] = SNAP_POINTS) -> None:
        if not (math.isfinite(threshold) and threshold > 0):
            raise ValueError(f"Snap threshold must be positive and finite, got {threshold}")
        if not (math.isfinite(hysteresis) and hysteresis >= 1):
            raise ValueError(f"Snap hysteresis must be finite and >= 1, got {hysteresis}")
        self.threshold = threshold
        self.release_distance = threshold * hysteresis
        self.catalog = tuple(catalog)
        self.active: Optional[SnapPoint] = None

    @property
    def is_snapped(self) -> bool:
        return self.active is not None

    def update(self, raw: Impedance) -> Impedance:
        """Feed the raw impedance under the pointer; returns the value to display."""
        if self.active is not None:
            if raw.distance_squared(self.active.target) <= self.release_distance ** 2:
                return self.active.target
            logger.debug(f"Released snap '{self.active.label}'")
            self.active = None

        point = find_snap_point(raw, self.threshold, self.catalog)
        if point is not None:
            logger.debug(f"Snapped to '{point.label}'")
            self.active = point
            return point.target
        return raw

    def reset(self) -> None:
        self.active = None
