import numpy as np
from components.single_impedance_component import SingleImpedanceComponent, angular_frequency

class InductorComponent(SingleImpedanceComponent):
    type_name = "inductor"
    symbol = "L"

    def impedance_expr(self, f: float, L: float) -> complex:
        """
        Compute the impedance of an inductor.
        
        :param f: Frequency in Hz.
        :param L: Inductance in Henries.
        :return: The impedance as a complex number.
        """
        return 1j * 2 * np.pi * f * L

    @classmethod
    def from_reactance(cls, id: str, X: float, f: float, placement: str = "series") -> "InductorComponent":
        """Inductor with reactance +|X| at ``f``."""
        return cls(id, abs(X) / angular_frequency(f), placement)

    @classmethod
    def from_susceptance(cls, id: str, B: float, f: float, placement: str = "shunt") -> "InductorComponent":
        """Inductor with susceptance -|B| at ``f``."""
        return cls(id, 1 / (angular_frequency(f) * abs(B)), placement)
