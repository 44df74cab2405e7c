# core/impedance.py
"""
Normalized impedance value type.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from core.complex_math import Complex, ONE, div
from core.exceptions import DomainError

DEFAULT_Z0 = 50.0


@dataclass(frozen=True, slots=True)
class Impedance:
    """
    Impedance normalized to a reference Z0: z = r + jx.

    Passive loads have ``r >= 0``. Negative resistance is not clamped here;
    ``validate_passive`` reports it as a ``DomainError``.
    """
    r: float
    x: float

    @classmethod
    def from_ohms(cls, value: complex, z0: float = DEFAULT_Z0) -> "Impedance":
        if z0 <= 0:
            raise DomainError(f"Reference impedance must be positive, got {z0}")
        return cls(value.real / z0, value.imag / z0)

    @classmethod
    def from_complex(cls, value: Complex) -> "Impedance":
        return cls(value.re, value.im)

    def to_complex(self) -> Complex:
        return Complex(self.r, self.x)

    def to_ohms(self, z0: float = DEFAULT_Z0) -> complex:
        return complex(self.r * z0, self.x * z0)

    def admittance(self) -> "Impedance":
        """Normalized admittance y = g + jb = 1/z (infinite at a short)."""
        y = div(ONE, self.to_complex())
        return Impedance(y.re, y.im)

    def distance_squared(self, other: "Impedance") -> float:
        dr = self.r - other.r
        dx = self.x - other.x
        return dr * dr + dx * dx

    def is_finite(self) -> bool:
        return math.isfinite(self.r) and math.isfinite(self.x)

    def validate_passive(self) -> "Impedance":
        if not self.is_finite():
            raise DomainError(f"Impedance must be finite, got r={self.r}, x={self.x}")
        if self.r < 0:
            raise DomainError(f"Negative resistance r={self.r} is not a passive load")
        return self

    def __str__(self) -> str:
        sign = "+" if self.x >= 0 else "-"
        return f"{self.r:.3f} {sign} j{abs(self.x):.3f}"


MATCH = Impedance(1.0, 0.0)
SHORT = Impedance(0.0, 0.0)
