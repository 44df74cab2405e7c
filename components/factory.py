# components/factory.py
from typing import Type, Dict
from components.single_impedance_component import SingleImpedanceComponent
from components.resistor import ResistorComponent
from components.capacitor import CapacitorComponent
from components.inductor import InductorComponent
from core.exceptions import SmithError

# Keyed by both type_name and schematic symbol.
_component_registry: Dict[str, Type[SingleImpedanceComponent]] = {}
for _cls in (ResistorComponent, CapacitorComponent, InductorComponent):
    _component_registry[_cls.type_name] = _cls
    _component_registry[_cls.symbol.lower()] = _cls


def get_component_class(type_name: str) -> Type[SingleImpedanceComponent]:
    if not isinstance(type_name, str):
        raise SmithError("Component type name must be a string.")
    comp_class = _component_registry.get(type_name.lower())
    if comp_class is None:
        raise SmithError(f"Unknown component type: {type_name}")
    return comp_class


def element_for_reactance(id: str, X: float, f: float) -> SingleImpedanceComponent:
    """Series element realizing reactance ``X``: positive → inductor, negative → capacitor."""
    if X == 0:
        raise SmithError(f"Element '{id}' needs a non-zero reactance.")
    cls = InductorComponent if X > 0 else CapacitorComponent
    return cls.from_reactance(id, X, f, placement="series")


def element_for_susceptance(id: str, B: float, f: float) -> SingleImpedanceComponent:
    """Shunt element realizing susceptance ``B``: positive → capacitor, negative → inductor."""
    if B == 0:
        raise SmithError(f"Element '{id}' needs a non-zero susceptance.")
    cls = CapacitorComponent if B > 0 else InductorComponent
    return cls.from_susceptance(id, B, f, placement="shunt")
