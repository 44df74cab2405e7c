import numpy as np
from components.single_impedance_component import SingleImpedanceComponent, angular_frequency

class CapacitorComponent(SingleImpedanceComponent):
    type_name = "capacitor"
    symbol = "C"

    def impedance_expr(self, f: float, C: float) -> complex:
        """
        Compute the impedance of a capacitor at a given frequency.
        
        :param f: Frequency in Hz.
        :param C: Capacitance in Farads.
        :return: The impedance as a complex number.
        """
        return 1 / (1j * 2 * np.pi * f * C)

    @classmethod
    def from_reactance(cls, id: str, X: float, f: float, placement: str = "series") -> "CapacitorComponent":
        """Capacitor with reactance -|X| at ``f``."""
        return cls(id, 1 / (angular_frequency(f) * abs(X)), placement)

    @classmethod
    def from_susceptance(cls, id: str, B: float, f: float, placement: str = "shunt") -> "CapacitorComponent":
        """Capacitor with susceptance +|B| at ``f``."""
        return cls(id, abs(B) / angular_frequency(f), placement)
