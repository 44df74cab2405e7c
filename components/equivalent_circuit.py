# components/equivalent_circuit.py
"""
Series R + L/C model of a normalized impedance at one frequency.
"""
from dataclasses import dataclass
from typing import Optional

from components.factory import element_for_reactance
from components.resistor import ResistorComponent
from components.single_impedance_component import SingleImpedanceComponent
from core.impedance import Impedance, DEFAULT_Z0
from core.rf_parameters import REACTANCE_DEAD_ZONE


@dataclass(frozen=True)
class EquivalentCircuit:
    resistor: ResistorComponent
    reactive: Optional[SingleImpedanceComponent]  # None: plain wire

    @property
    def kind(self) -> str:
        if self.reactive is None:
            return "resistive"
        return "inductive" if self.reactive.symbol == "L" else "capacitive"

    def impedance(self, freq: float) -> complex:
        z = self.resistor.impedance(freq)
        if self.reactive is not None:
            z += self.reactive.impedance(freq)
        return z


def equivalent_circuit(z: Impedance, freq: float, z0: float = DEFAULT_Z0) -> EquivalentCircuit:
    """
    Build the equivalent series model of ``z``.

    Reactance within the ±0.05 dead zone is drawn as a wire.
    """
    z.validate_passive()
    resistor = ResistorComponent("R", z.r * z0)
    if abs(z.x) <= REACTANCE_DEAD_ZONE:
        return EquivalentCircuit(resistor, None)
    return EquivalentCircuit(resistor, element_for_reactance("X", z.x * z0, freq))
