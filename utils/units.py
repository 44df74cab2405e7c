# utils/units.py
import pint

ureg = pint.UnitRegistry()

# Display units for synthesized component values.
DISPLAY_UNITS = {"L": "nanohenry", "C": "picofarad", "R": "ohm"}
DISPLAY_SYMBOLS = {"L": "nH", "C": "pF", "R": "Ω"}
BASE_UNITS = {"L": "henry", "C": "farad", "R": "ohm"}


def parse_quantity(expr: str, unit: str) -> float:
    """
    Parse a string such as "1 GHz" or "2.2 nH" and return its magnitude in ``unit``.

    :param expr: The expression string.
    :param unit: Target unit understood by pint (e.g. "hertz").
    :return: The magnitude as a float.
    :raises ValueError: If the expression cannot be parsed or has the wrong dimension.
    """
    try:
        quantity = ureg.Quantity(expr)
        if quantity.dimensionless:
            return float(quantity.magnitude)
        return float(quantity.to(unit).magnitude)
    except Exception as e:
        raise ValueError(f"Could not parse '{expr}' as a quantity in {unit}: {e}")


def parse_frequency(value) -> float:
    """Frequency in Hz from a number (already Hz) or a string with units."""
    if isinstance(value, (int, float)):
        return float(value)
    return parse_quantity(str(value), "hertz")


def to_display_unit(value_si: float, kind: str) -> float:
    """Convert an SI component value (H, F, Ω) to its display unit (nH, pF, Ω)."""
    if kind not in BASE_UNITS:
        raise ValueError(f"Unknown component kind '{kind}'")
    return float(ureg.Quantity(value_si, BASE_UNITS[kind]).to(DISPLAY_UNITS[kind]).magnitude)


def from_display_unit(value: float, kind: str) -> float:
    """Inverse of ``to_display_unit``."""
    if kind not in BASE_UNITS:
        raise ValueError(f"Unknown component kind '{kind}'")
    return float(ureg.Quantity(value, DISPLAY_UNITS[kind]).to(BASE_UNITS[kind]).magnitude)
