# core/matching.py
"""
L-section (one series, one shunt element) matching network synthesis.

Two topologies are used depending on the load resistance R_L relative to Z0:

* ``series-shunt`` (R_L > Z0): series element at the source, shunt element
  across the load.
* ``shunt-series`` (R_L < Z0): shunt element at the source, series element
  next to the load.

Each topology has two roots, giving up to two alternative networks. Component
values are returned in nH / pF; display clamping happens only in
``format_component_value``.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from components.factory import element_for_reactance, element_for_susceptance
from components.single_impedance_component import SingleImpedanceComponent
from core.exceptions import SynthesisError, SmithError
from core.impedance import Impedance, DEFAULT_Z0
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Loads this close to 1 + j0 need no network.
MATCH_TOLERANCE = 0.05
DISPLAY_MIN = 0.01
DISPLAY_MAX = 999


class MatchStatus(Enum):
    MATCHED = "matched"   # no network needed
    SOLVED = "solved"
    FAILED = "failed"


class Topology(Enum):
    NONE = "none"
    SERIES_SHUNT = "series-shunt"
    SHUNT_SERIES = "shunt-series"


@dataclass(frozen=True)
class MatchingSolution:
    """
    One L-section. ``series_reactance`` is in ohms and ``shunt_susceptance``
    in siemens; either element may be absent when its root is zero.
    """
    topology: Topology
    series: Optional[SingleImpedanceComponent]
    shunt: Optional[SingleImpedanceComponent]
    series_reactance: float
    shunt_susceptance: float

    @property
    def series_type(self) -> Optional[str]:
        return self.series.symbol if self.series else None

    @property
    def series_value(self) -> Optional[float]:
        return self.series.display_value if self.series else None

    @property
    def shunt_type(self) -> Optional[str]:
        return self.shunt.symbol if self.shunt else None

    @property
    def shunt_value(self) -> Optional[float]:
        return self.shunt.display_value if self.shunt else None


@dataclass(frozen=True)
class MatchResult:
    status: MatchStatus
    topology: Topology = Topology.NONE
    q: Optional[float] = None
    solutions: Tuple[MatchingSolution, ...] = field(default_factory=tuple)
    reason: Optional[str] = None

    @property
    def needs_network(self) -> bool:
        return self.status is not MatchStatus.MATCHED

    @property
    def ok(self) -> bool:
        return self.status is not MatchStatus.FAILED

    @classmethod
    def failure(cls, reason: str) -> "MatchResult":
        logger.warning(f"Matching synthesis failed: {reason}")
        return cls(MatchStatus.FAILED, reason=reason)


def _series_shunt_roots(R_L: float, X_L: float, Z0: float):
    """(X, B) pairs for the R_L > Z0 case, positive root first."""
    mag_sq = R_L * R_L + X_L * X_L
    root = math.sqrt(R_L / Z0) * math.sqrt(mag_sq - Z0 * R_L)
    pairs = []
    for sign in (1, -1):
        B = (X_L + sign * root) / mag_sq
        if B == 0:
            continue
        X = 1 / B + X_L * Z0 / R_L - Z0 / (B * R_L)
        pairs.append((X, B))
    return pairs


def _shunt_series_roots(R_L: float, X_L: float, Z0: float, Q: float):
    """(X, B) pairs for the R_L < Z0 case, positive root first."""
    return [(sign * Q * R_L - X_L, sign * Q / Z0) for sign in (1, -1)]


def _build_solution(topology: Topology, X: float, B: float, f: float) -> Optional[MatchingSolution]:
    if not (math.isfinite(X) and math.isfinite(B)):
        return None
    series = element_for_reactance("series", X, f) if X != 0 else None
    shunt = element_for_susceptance("shunt", B, f) if B != 0 else None
    if series is None and shunt is None:
        return None
    return MatchingSolution(topology, series, shunt, X, B)


def synthesize(z: Impedance, frequency_hz: float, z0: float = DEFAULT_Z0) -> MatchResult:
    """
    Synthesize L-section networks matching normalized load ``z`` to ``z0``.

    Domain problems (negative or zero resistance, bad frequency) come back as a
    ``FAILED`` result; nothing is raised.
    """
    if not (z.is_finite() and math.isfinite(frequency_hz) and math.isfinite(z0)):
        return MatchResult.failure("load impedance and frequency must be finite")
    if z0 <= 0:
        return MatchResult.failure(f"reference impedance must be positive, got {z0}")
    if frequency_hz <= 0:
        return MatchResult.failure(f"design frequency must be positive, got {frequency_hz}")
    if z.r < 0:
        return MatchResult.failure(f"negative load resistance r={z.r} is not passive")

    if abs(z.r - 1) < MATCH_TOLERANCE and abs(z.x) < MATCH_TOLERANCE:
        logger.debug(f"Load {z} already matched; no network needed")
        return MatchResult(MatchStatus.MATCHED)

    R_L = z.r * z0
    X_L = z.x * z0
    if R_L == 0:
        return MatchResult.failure("a lossless load (R_L = 0) cannot be matched with an L-section")

    if R_L > z0:
        topology = Topology.SERIES_SHUNT
        Q = math.sqrt((R_L - z0) / z0)
        pairs = _series_shunt_roots(R_L, X_L, z0)
    elif R_L < z0:
        topology = Topology.SHUNT_SERIES
        Q = math.sqrt(z0 / R_L - 1)
        pairs = _shunt_series_roots(R_L, X_L, z0, Q)
    else:
        # Resistance already equals Z0: a single series element cancels X_L.
        topology = Topology.SERIES_SHUNT
        Q = 0.0
        pairs = [(-X_L, 0.0)]

    solutions = []
    try:
        for X, B in pairs:
            solution = _build_solution(topology, X, B, frequency_hz)
            if solution is not None:
                solutions.append(solution)
    except (SmithError, ValueError, ZeroDivisionError) as exc:
        return MatchResult.failure(str(exc))

    if not solutions:
        return MatchResult.failure(f"no realizable network for load {z}")

    logger.debug(f"Synthesized {len(solutions)} {topology.value} network(s) for {z}, Q={Q:.3f}")
    return MatchResult(MatchStatus.SOLVED, topology, Q, tuple(solutions))


def synthesize_or_raise(z: Impedance, frequency_hz: float, z0: float = DEFAULT_Z0) -> MatchResult:
    """Same as ``synthesize`` but raises ``SynthesisError`` on failure."""
    result = synthesize(z, frequency_hz, z0)
    if result.status is MatchStatus.FAILED:
        raise SynthesisError(result.reason)
    return result


def network_input_impedance(solution: MatchingSolution, z_load: Impedance,
                            frequency_hz: float, z0: float = DEFAULT_Z0) -> complex:
    """
    Impedance in ohms looking into the network terminated by ``z_load``,
    recombined from the synthesized component values.
    """
    Z = z_load.to_ohms(z0)
    series = solution.series.impedance(frequency_hz) if solution.series else 0j
    shunt_y = solution.shunt.admittance(frequency_hz) if solution.shunt else 0j

    if solution.topology is Topology.SHUNT_SERIES:
        return 1 / (shunt_y + 1 / (Z + series))
    if shunt_y == 0:
        return Z + series
    return series + 1 / (shunt_y + 1 / Z)


def format_component_value(value: Optional[float], kind: Optional[str]) -> str:
    """Display string for a component value, clamped to the readable range."""
    if value is None or kind is None:
        return "-"
    unit = "nH" if kind == "L" else "pF"
    if value < DISPLAY_MIN:
        return f"< {DISPLAY_MIN} {unit}"
    if value > DISPLAY_MAX:
        return f"> {DISPLAY_MAX} {unit}"
    return f"{value:.2f} {unit}"
