# core/chart_geometry.py
"""
Point sets for the Smith chart grid, in Γ-plane coordinates.

Pure geometry for whatever renders the chart; nothing here draws.
"""
from typing import List, Tuple

import numpy as np

from core.rf_parameters import gamma_magnitude_for_vswr

CIRCLE_RES, REACTANCE_RES, UNIT_CIRCLE_CLIP = 500, 2000, 0.999
RESISTANCE_VALUES = (0, 0.2, 0.5, 1, 2, 5)
REACTANCE_VALUES = (0.2, 0.5, 1, 2, 5)
VSWR_VALUES = (1.5, 2, 3, 5)
CONDUCTANCE_VALUES = (0.2, 0.5, 1, 2)
MIN_ARC_POINTS = 10

Points = List[Tuple[float, float]]


def _circle(center_x: float, center_y: float, radius: float, res: int = CIRCLE_RES):
    theta = np.linspace(-np.pi, np.pi, res)
    return center_x + radius * np.cos(theta), center_y + radius * np.sin(theta)


def _inside(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    return x**2 + y**2 <= UNIT_CIRCLE_CLIP


def resistance_circle(r: float) -> Points:
    """Constant-resistance circle: center (r/(1+r), 0), radius 1/(1+r)."""
    x, y = _circle(r / (1 + r), 0.0, 1 / (1 + r))
    mask = _inside(x, y)
    return list(zip(x[mask].tolist(), y[mask].tolist()))


def conductance_circle(g: float) -> Points:
    """Constant-conductance circle of the admittance overlay (mirror of the resistance circle)."""
    return [(-px, py) for px, py in resistance_circle(g)]


def reactance_arcs(xval: float) -> List[Points]:
    """
    Constant-reactance arcs for +xval and -xval, clipped to the unit disk.

    Each circle is centered at (1, ±1/x) with radius 1/|x|; the clipped
    circle may split into several runs, short runs are discarded.
    """
    if xval == 0:
        raise ValueError("x = 0 is the real axis, not an arc")
    arcs: List[Points] = []
    radius = 1 / abs(xval)
    for s in (+1, -1):
        x, y = _circle(1.0, s * radius, radius, REACTANCE_RES)
        current: Points = []
        for px, py, valid in zip(x.tolist(), y.tolist(), _inside(x, y).tolist()):
            if valid:
                current.append((px, py))
            elif current:
                if len(current) >= MIN_ARC_POINTS:
                    arcs.append(current)
                current = []
        if len(current) >= MIN_ARC_POINTS:
            arcs.append(current)
    return arcs


def vswr_circle(vswr: float) -> Points:
    """Constant-VSWR circle centered on the match point."""
    x, y = _circle(0.0, 0.0, gamma_magnitude_for_vswr(vswr))
    return list(zip(x.tolist(), y.tolist()))


def unit_circle() -> Points:
    x, y = _circle(0.0, 0.0, 1.0)
    return list(zip(x.tolist(), y.tolist()))


def smith_grid(show_vswr: bool = False, show_admittance: bool = False) -> dict:
    """All grid curves keyed by kind."""
    grid = {
        "unit": [unit_circle()],
        # r = 0 coincides with the unit circle and clips away entirely
        "resistance": [c for c in map(resistance_circle, RESISTANCE_VALUES) if c],
        "reactance": [arc for xv in REACTANCE_VALUES for arc in reactance_arcs(xv)],
    }
    if show_vswr:
        grid["vswr"] = [vswr_circle(v) for v in VSWR_VALUES]
    if show_admittance:
        grid["conductance"] = [conductance_circle(g) for g in CONDUCTANCE_VALUES]
    return grid
