# core/complex_math.py
"""
Minimal complex arithmetic for the Smith chart engine.

Values are immutable; every operation returns a fresh ``Complex``.
"""
from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Complex:
    re: float
    im: float

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        return cls(float(value.real), float(value.imag))

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def is_finite(self) -> bool:
        return math.isfinite(self.re) and math.isfinite(self.im)


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
# Returned by div() when the denominator vanishes.
INFINITE = Complex(math.inf, math.inf)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)


def sub(a: Complex, b: Complex) -> Complex:
    return Complex(a.re - b.re, a.im - b.im)


def mul(a: Complex, b: Complex) -> Complex:
    return Complex(a.re * b.re - a.im * b.im, a.re * b.im + a.im * b.re)


def div(a: Complex, b: Complex) -> Complex:
    """
    Divide ``a`` by ``b``.

    A zero denominator yields ``INFINITE`` instead of raising, so callers can
    detect the open-circuit locus without guarding every call.
    """
    denom = b.re * b.re + b.im * b.im
    if denom == 0:
        return INFINITE
    return Complex(
        (a.re * b.re + a.im * b.im) / denom,
        (a.im * b.re - a.re * b.im) / denom,
    )


def magnitude(c: Complex) -> float:
    return math.hypot(c.re, c.im)


def magnitude_squared(c: Complex) -> float:
    return c.re * c.re + c.im * c.im


def phase_radians(c: Complex) -> float:
    return math.atan2(c.im, c.re)


def phase_degrees(c: Complex) -> float:
    return math.degrees(phase_radians(c))


def exp_j(theta: float) -> Complex:
    """Unit phasor e^{j*theta}."""
    return Complex(math.cos(theta), math.sin(theta))
