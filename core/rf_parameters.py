# core/rf_parameters.py
"""
Derived RF quantities for a normalized load impedance.

Everything here is a pure function of ``z``; results are recomputed per query.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum

from core.complex_math import Complex, magnitude, phase_degrees
from core.gamma import to_gamma
from core.impedance import Impedance

# |Γ| at or above this is treated as total reflection.
TOTAL_REFLECTION = 0.9999
# |Γ| at or below this is treated as no reflection.
NO_REFLECTION = 0.0001
Q_MIN_RESISTANCE = 0.01
EDGE_GAMMA = 0.95
EDGE_REAL = 0.8
REACTANCE_DEAD_ZONE = 0.05
MATCH_GAMMA_THRESHOLD = 0.05


class Region(Enum):
    MATCH = "match"
    INDUCTIVE = "inductive"
    CAPACITIVE = "capacitive"
    SHORT = "short"
    OPEN = "open"


class MatchQuality(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    OK = "ok"
    POOR = "poor"


@dataclass(frozen=True)
class RFParameters:
    gamma: Complex
    gamma_mag: float
    gamma_angle_deg: float
    vswr: float
    return_loss_db: float
    mismatch_loss_db: float
    power_delivered_pct: float
    q_factor: float
    region: Region

    @property
    def match_quality(self) -> MatchQuality:
        return match_quality(self.vswr)


def vswr_from_magnitude(gamma_mag: float) -> float:
    if gamma_mag < TOTAL_REFLECTION:
        return (1 + gamma_mag) / (1 - gamma_mag)
    return math.inf


def return_loss_db(gamma_mag: float) -> float:
    if gamma_mag > NO_REFLECTION:
        # leading 0.0 keeps total reflection at +0.0 dB, not -0.0
        return 0.0 - 20 * math.log10(gamma_mag)
    return math.inf


def mismatch_loss_db(gamma_mag: float) -> float:
    if gamma_mag < TOTAL_REFLECTION:
        return -10 * math.log10(1 - gamma_mag * gamma_mag)
    return math.inf


def power_delivered_pct(gamma_mag: float) -> float:
    return (1 - gamma_mag * gamma_mag) * 100


def q_factor(z: Impedance) -> float:
    # A lossless reactive load has no finite Q.
    if z.r > Q_MIN_RESISTANCE:
        return abs(z.x) / z.r
    return math.inf


def classify_region(z: Impedance, gamma: Complex, gamma_mag: float) -> Region:
    if gamma_mag > EDGE_GAMMA:
        if gamma.re < -EDGE_REAL:
            return Region.SHORT
        if gamma.re > EDGE_REAL:
            return Region.OPEN
        return Region.INDUCTIVE if gamma.im > 0 else Region.CAPACITIVE
    if z.x > REACTANCE_DEAD_ZONE:
        return Region.INDUCTIVE
    if z.x < -REACTANCE_DEAD_ZONE:
        return Region.CAPACITIVE
    return Region.MATCH


def match_quality(vswr: float) -> MatchQuality:
    if vswr <= 1.5:
        return MatchQuality.EXCELLENT
    if vswr <= 2:
        return MatchQuality.GOOD
    if vswr <= 3:
        return MatchQuality.OK
    return MatchQuality.POOR


def gamma_magnitude_for_vswr(vswr: float) -> float:
    """Radius of the constant-VSWR circle on the Γ plane."""
    if vswr < 1:
        raise ValueError(f"VSWR must be >= 1, got {vswr}")
    if math.isinf(vswr):
        return 1.0
    return (vswr - 1) / (vswr + 1)


def is_matched(gamma_mag: float, threshold: float = MATCH_GAMMA_THRESHOLD) -> bool:
    return gamma_mag < threshold


def calculate_rf_parameters(z: Impedance) -> RFParameters:
    """
    Derive all RF parameters for ``z``.

    Raises:
        DomainError: if ``z`` has negative resistance or is not finite.
    """
    z.validate_passive()
    gamma = to_gamma(z)
    gamma_mag = magnitude(gamma)
    return RFParameters(
        gamma=gamma,
        gamma_mag=gamma_mag,
        gamma_angle_deg=phase_degrees(gamma),
        vswr=vswr_from_magnitude(gamma_mag),
        return_loss_db=return_loss_db(gamma_mag),
        mismatch_loss_db=mismatch_loss_db(gamma_mag),
        power_delivered_pct=power_delivered_pct(gamma_mag),
        q_factor=q_factor(z),
        region=classify_region(z, gamma, gamma_mag),
    )
