# core/gamma.py
"""
Bidirectional transform between normalized impedance and reflection coefficient.

    Γ = (z - 1) / (z + 1)        z = (1 + Γ) / (1 - Γ)
"""
from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from core.complex_math import Complex, ONE, add, sub, div, magnitude_squared
from core.impedance import Impedance

# |1 - Γ|² below this is treated as the open-circuit point.
OPEN_CIRCUIT_EPS = 1e-12
# Finite stand-in for infinite resistance at the open circuit.
OPEN_CIRCUIT_RESISTANCE = 1e6
# Pointer input outside the unit disk is pulled back to this radius.
DISK_CLAMP_RADIUS = 0.99


def to_gamma(z: Impedance) -> Complex:
    zc = z.to_complex()
    return div(sub(zc, ONE), add(zc, ONE))


def to_impedance(gamma: Complex) -> Impedance:
    denom = sub(ONE, gamma)
    if magnitude_squared(denom) < OPEN_CIRCUIT_EPS:
        return Impedance(OPEN_CIRCUIT_RESISTANCE, 0.0)
    return Impedance.from_complex(div(add(ONE, gamma), denom))


def clamp_to_disk(u: float, v: float, radius: float = DISK_CLAMP_RADIUS) -> Tuple[float, float]:
    """Radially clamp (u, v) to ``radius`` when it lies outside the unit disk."""
    mag_sq = u * u + v * v
    if mag_sq > 1.0:
        scale = radius / math.sqrt(mag_sq)
        return u * scale, v * scale
    return u, v


def screen_to_gamma(u: float, v: float) -> Complex:
    """
    Map a unit-disk screen coordinate to Γ.

    Screen Y grows downwards, so Γ = (u, -v). Points outside the disk are
    clamped first; pointer input never produces |Γ| > 1.
    """
    u, v = clamp_to_disk(u, v)
    return Complex(u, -v)


def gamma_to_screen(gamma: Complex, center: Tuple[float, float], radius: float) -> Tuple[float, float]:
    cx, cy = center
    return cx + gamma.re * radius, cy - gamma.im * radius


def to_gamma_array(z: np.ndarray) -> np.ndarray:
    """Vectorized Γ for an array of complex normalized impedances."""
    z = np.asarray(z, dtype=complex)
    with np.errstate(divide="ignore", invalid="ignore"):
        gamma = (z - 1) / (z + 1)
    return np.where(z == -1, complex(np.inf, np.inf), gamma)


def to_impedance_array(gamma: np.ndarray) -> np.ndarray:
    """Vectorized inverse of ``to_gamma_array`` with the same open-circuit sentinel."""
    gamma = np.asarray(gamma, dtype=complex)
    denom = 1 - gamma
    is_open = np.abs(denom) ** 2 < OPEN_CIRCUIT_EPS
    safe = np.where(is_open, 1.0, denom)
    return np.where(is_open, complex(OPEN_CIRCUIT_RESISTANCE, 0.0), (1 + gamma) / safe)
