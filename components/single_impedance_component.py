import numpy as np
from utils.units import to_display_unit, DISPLAY_SYMBOLS

PLACEMENTS = ("series", "shunt")


class SingleImpedanceComponent:
    """
    One lumped element (resistor, inductor or capacitor) placed either in
    series with the signal path or in shunt to ground.

    ``value`` is stored in SI units (Ω, H, F).
    """
    type_name: str = "undefined"
    symbol: str = "?"  # "R", "L" or "C"

    def __init__(self, id: str, value: float, placement: str = "series") -> None:
        if placement not in PLACEMENTS:
            raise ValueError(f"Placement must be one of {PLACEMENTS}, got '{placement}'")
        self.id = id
        self.value = float(value)
        self.placement = placement

    def impedance_expr(self, freq: float, value: float) -> complex:
        """
        Subclasses (Resistor, Capacitor, etc.) must override.
        Returns Z as a complex number for the device.
        """
        raise NotImplementedError("Impedance expression not implemented.")

    def impedance(self, freq: float) -> complex:
        return complex(self.impedance_expr(freq, self.value))

    def admittance(self, freq: float) -> complex:
        Z = self.impedance(freq)
        if abs(Z) < 1e-30:
            # zero impedance (short) → very large Y
            return complex(1e12)
        return 1.0 / Z

    @property
    def display_value(self) -> float:
        """Value in nH, pF or Ω."""
        return to_display_unit(self.value, self.symbol)

    @property
    def display_unit(self) -> str:
        return DISPLAY_SYMBOLS[self.symbol]

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} {self.id} {self.placement} "
                f"{self.display_value:.4g} {self.display_unit}>")


def angular_frequency(freq: float) -> float:
    if not np.isfinite(freq) or freq <= 0:
        raise ValueError(f"Frequency must be positive and finite, got {freq}")
    return 2 * np.pi * freq
