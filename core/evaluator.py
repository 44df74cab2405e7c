# core/evaluator.py
"""
Query surface for presentation code.

Every query returns a plain value. Domain errors are caught here and returned
as ``QueryFailure`` so a render loop never sees an exception or a NaN.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from core.complex_math import Complex
from core.exceptions import SmithError
from core.gamma import to_gamma, to_impedance
from core.impedance import Impedance, DEFAULT_Z0
from core.matching import MatchResult, synthesize
from core.rf_parameters import RFParameters, calculate_rf_parameters
from core.transmission_line import rotate
from inout.config import EngineConfig, apply_log_level


@dataclass(frozen=True)
class QueryFailure:
    """Explicit failure value for a query that hit a domain error."""
    query: str
    reason: str

    def __bool__(self) -> bool:
        return False


class EvaluationContext:
    def __init__(self, z0: float = DEFAULT_Z0, default_frequency_hz: float = 1e9):
        if not (math.isfinite(z0) and z0 > 0):
            raise SmithError(f"Reference impedance must be positive, got {z0}")
        self.z0 = z0
        self.default_frequency_hz = default_frequency_hz

    def __repr__(self):
        return f"<EvaluationContext z0={self.z0} f={self.default_frequency_hz:g}>"


class Evaluator:
    """
    Pure queries against one reference impedance.
    """
    def __init__(self, context: EvaluationContext = None):
        self.context = context or EvaluationContext()

    @classmethod
    def from_config(cls, config: EngineConfig) -> "Evaluator":
        apply_log_level(config)
        return cls(EvaluationContext(config.z0, config.default_frequency_hz))

    def _fail(self, query: str, exc: Exception) -> QueryFailure:
        logging.warning(f"{query} failed: {exc}")
        return QueryFailure(query, str(exc))

    def gamma_of(self, z: Impedance) -> Union[Complex, QueryFailure]:
        try:
            return to_gamma(z.validate_passive())
        except SmithError as e:
            return self._fail("gamma_of", e)

    def impedance_of(self, gamma: Complex) -> Union[Impedance, QueryFailure]:
        # |Γ| > 1 is allowed (active load); only non-finite input is rejected.
        if not gamma.is_finite():
            return QueryFailure("impedance_of", f"reflection coefficient {gamma} is not finite")
        return to_impedance(gamma)

    def rf_parameters_of(self, z: Impedance) -> Union[RFParameters, QueryFailure]:
        try:
            return calculate_rf_parameters(z)
        except SmithError as e:
            return self._fail("rf_parameters_of", e)

    def rotate_along_line(self, gamma: Complex, length_wavelengths: float) -> Union[Complex, QueryFailure]:
        if not (gamma.is_finite() and math.isfinite(length_wavelengths)):
            return QueryFailure("rotate_along_line", "reflection coefficient and length must be finite")
        return rotate(gamma, length_wavelengths)

    def synthesize_match(self, impedance_ohms: complex, frequency_hz: Optional[float] = None) -> MatchResult:
        if frequency_hz is None:
            frequency_hz = self.context.default_frequency_hz
        z = Impedance(impedance_ohms.real / self.context.z0, impedance_ohms.imag / self.context.z0)
        return synthesize(z, frequency_hz, self.context.z0)


_default = Evaluator()


def gamma_of(z: Impedance) -> Union[Complex, QueryFailure]:
    return _default.gamma_of(z)


def impedance_of(gamma: Complex) -> Union[Impedance, QueryFailure]:
    return _default.impedance_of(gamma)


def rf_parameters_of(z: Impedance) -> Union[RFParameters, QueryFailure]:
    return _default.rf_parameters_of(z)


def rotate_along_line(gamma: Complex, length_wavelengths: float) -> Union[Complex, QueryFailure]:
    return _default.rotate_along_line(gamma, length_wavelengths)


def synthesize_match(impedance_ohms: complex, frequency_hz: Optional[float] = None) -> MatchResult:
    return _default.synthesize_match(impedance_ohms, frequency_hz)
