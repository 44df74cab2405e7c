# core/transmission_line.py
"""
Lossless transmission-line rotation on the Γ plane.

Moving ``l`` wavelengths toward the generator rotates Γ by the round-trip
phase 2βl = 4πl, so the result repeats every half wavelength.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from core.complex_math import Complex, exp_j, mul
from core.gamma import to_gamma, to_impedance, to_gamma_array, to_impedance_array
from core.impedance import Impedance
from core.rf_parameters import TOTAL_REFLECTION

SPEED_OF_LIGHT = 299_792_458.0


def rotate(gamma_load: Complex, length_wavelengths: float) -> Complex:
    """Γ_in = Γ_load · e^{-j4πl}."""
    # Reduce first so large lengths keep full phase precision.
    turns = math.fmod(length_wavelengths, 0.5)
    return mul(gamma_load, exp_j(-4 * math.pi * turns))


def input_impedance(z_load: Impedance, length_wavelengths: float) -> Impedance:
    """Normalized impedance seen at the input of a lossless line."""
    return to_impedance(rotate(to_gamma(z_load), length_wavelengths))


def electrical_length(physical_length_m: float, frequency_hz: float, velocity_factor: float = 1.0) -> float:
    """Physical line length expressed in wavelengths."""
    if frequency_hz <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency_hz}")
    if not 0 < velocity_factor <= 1:
        raise ValueError(f"Velocity factor must be in (0, 1], got {velocity_factor}")
    wavelength = velocity_factor * SPEED_OF_LIGHT / frequency_hz
    return physical_length_m / wavelength


@dataclass
class LineSweep:
    """Γ, z and VSWR along a line for a set of electrical lengths."""
    lengths: np.ndarray
    gamma: np.ndarray
    impedance: np.ndarray

    @property
    def vswr(self) -> np.ndarray:
        mag = np.abs(self.gamma)
        with np.errstate(divide="ignore"):
            return np.where(mag < TOTAL_REFLECTION, (1 + mag) / (1 - mag), np.inf)

    def to_dataframe(self):
        import pandas as pd
        return pd.DataFrame({
            "length_wl": self.lengths,
            "gamma_re": self.gamma.real,
            "gamma_im": self.gamma.imag,
            "r": self.impedance.real,
            "x": self.impedance.imag,
            "vswr": self.vswr,
        })


def sweep_line(z_load: Impedance, lengths: Iterable[float]) -> LineSweep:
    """Evaluate the input impedance for every length in ``lengths``."""
    lengths = np.asarray(list(lengths), dtype=float)
    gamma_load = to_gamma_array(np.array([complex(z_load.r, z_load.x)]))[0]
    gamma = gamma_load * np.exp(-4j * np.pi * np.fmod(lengths, 0.5))
    return LineSweep(lengths=lengths, gamma=gamma, impedance=to_impedance_array(gamma))
