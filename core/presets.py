# core/presets.py
"""
Starting loads for common engineering scenarios.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from core.impedance import Impedance


class SmithMode(Enum):
    ANTENNA = "antenna"
    POWER = "power"
    FILTER = "filter"
    LINE = "line"


@dataclass(frozen=True)
class ModePreset:
    impedance: Impedance
    label: str
    description: str
    show_admittance: bool = False
    line_length: float = 0.0  # wavelengths, 0..0.5


MODE_PRESETS = MappingProxyType({
    SmithMode.ANTENNA: ModePreset(
        Impedance(1.5, 0.8), "Antenna Match",
        "50Ω source to 75Ω load - typical antenna impedance transformation"),
    SmithMode.POWER: ModePreset(
        Impedance(0.5, -0.5), "Power Amplifier",
        "Conjugate matching for maximum power transfer (Rs = RL*)"),
    SmithMode.FILTER: ModePreset(
        Impedance(1.0, 2.0), "Filter Design",
        "LC network design - path through upper/lower half-planes",
        show_admittance=True),
    SmithMode.LINE: ModePreset(
        Impedance(2.0, 1.0), "Transmission Line",
        "Impedance transformation along λ/8 line section",
        line_length=0.125),
})


def get_preset(mode) -> ModePreset:
    """Look up a preset by ``SmithMode`` or its string value."""
    try:
        return MODE_PRESETS[SmithMode(mode)]
    except ValueError as exc:
        raise ValueError(f"Unknown Smith mode '{mode}'") from exc
