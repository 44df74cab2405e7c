import math
import pytest
from core.exceptions import SynthesisError
from core.impedance import Impedance
from core.matching import (synthesize, synthesize_or_raise, network_input_impedance,
                           format_component_value, MatchStatus, Topology)

Z0 = 50.0
FREQ = 1e9


def reflection(z_in: complex) -> float:
    return abs((z_in - Z0) / (z_in + Z0))


def test_resistive_load_above_z0(mismatched_load):
    result = synthesize(mismatched_load, FREQ)
    assert result.status is MatchStatus.SOLVED
    assert result.topology is Topology.SERIES_SHUNT
    assert result.q == pytest.approx(1.0)
    assert len(result.solutions) == 2

    first, second = result.solutions
    assert (first.series_type, first.shunt_type) == ("L", "C")
    assert (second.series_type, second.shunt_type) == ("C", "L")
    assert first.series_reactance == pytest.approx(50.0)
    assert first.shunt_susceptance == pytest.approx(0.01)
    for solution in result.solutions:
        z_in = network_input_impedance(solution, mismatched_load, FREQ)
        assert reflection(z_in) == pytest.approx(0.0, abs=1e-9)

def test_component_values_in_nano_and_pico_units(mismatched_load):
    first = synthesize(mismatched_load, FREQ).solutions[0]
    omega = 2 * math.pi * FREQ
    assert first.series_value == pytest.approx(50.0 / omega * 1e9)   # nH
    assert first.shunt_value == pytest.approx(0.01 / omega * 1e12)   # pF

@pytest.mark.parametrize("z", [
    Impedance(3.0, 1.5), Impedance(1.5, 0.8), Impedance(2.0, -4.0), Impedance(8.0, 0.0),
    Impedance(0.5, -0.5), Impedance(0.2, 0.0), Impedance(0.3, 2.0), Impedance(0.05, -0.7),
])
def test_complex_loads_reach_match(z):
    result = synthesize(z, 2.4e9)
    assert result.status is MatchStatus.SOLVED
    expected = Topology.SERIES_SHUNT if z.r > 1 else Topology.SHUNT_SERIES
    assert result.topology is expected
    assert 1 <= len(result.solutions) <= 2
    for solution in result.solutions:
        z_in = network_input_impedance(solution, z, 2.4e9)
        assert reflection(z_in) == pytest.approx(0.0, abs=1e-8)

def test_load_below_z0_q_and_order():
    result = synthesize(Impedance(0.5, 0.0), FREQ)
    assert result.topology is Topology.SHUNT_SERIES
    assert result.q == pytest.approx(1.0)
    first, second = result.solutions
    assert (first.shunt_type, first.series_type) == ("C", "L")
    assert (second.shunt_type, second.series_type) == ("L", "C")

def test_already_matched_needs_no_network():
    result = synthesize(Impedance(1.0, 0.0), FREQ)
    assert result.status is MatchStatus.MATCHED
    assert not result.needs_network
    assert result.solutions == ()
    assert synthesize(Impedance(1.04, -0.04), FREQ).status is MatchStatus.MATCHED

def test_resistance_equal_to_z0_uses_single_series_element():
    z = Impedance(1.0, 0.6)
    result = synthesize(z, FREQ)
    assert result.status is MatchStatus.SOLVED
    assert len(result.solutions) == 1
    solution = result.solutions[0]
    assert solution.series_type == "C"
    assert solution.shunt is None
    assert reflection(network_input_impedance(solution, z, FREQ)) == pytest.approx(0.0, abs=1e-9)

@pytest.mark.parametrize("z, freq", [
    (Impedance(0.0, 0.0), FREQ),
    (Impedance(0.0, 0.8), FREQ),
    (Impedance(-0.5, 0.0), FREQ),
    (Impedance(2.0, 0.0), 0.0),
    (Impedance(2.0, 0.0), -1e6),
    (Impedance(math.inf, 0.0), FREQ),
    (Impedance(2.0, 0.0), math.nan),
])
def test_domain_failures_are_results_not_exceptions(z, freq, dummy_logger):
    result = synthesize(z, freq)
    assert result.status is MatchStatus.FAILED
    assert not result.ok
    assert result.reason
    assert result.solutions == ()
    assert "Matching synthesis failed" in dummy_logger.text

def test_synthesize_or_raise():
    with pytest.raises(SynthesisError):
        synthesize_or_raise(Impedance(0.0, 0.0), FREQ)
    assert synthesize_or_raise(Impedance(2.0, 0.0), FREQ).ok

def test_custom_reference_impedance():
    z = Impedance(1.0, 0.0)  # 75 Ω in a 75 Ω system
    assert synthesize(z, FREQ, z0=75.0).status is MatchStatus.MATCHED
    load = Impedance(100 / 75, 0.0)
    result = synthesize(load, FREQ, z0=75.0)
    for solution in result.solutions:
        z_in = network_input_impedance(solution, load, FREQ, z0=75.0)
        assert z_in.real == pytest.approx(75.0)
        assert z_in.imag == pytest.approx(0.0, abs=1e-8)

@pytest.mark.parametrize("value, kind, text", [
    (0.001, "L", "< 0.01 nH"),
    (5000.0, "C", "> 999 pF"),
    (12.346, "L", "12.35 nH"),
    (None, None, "-"),
])
def test_format_component_value(value, kind, text):
    assert format_component_value(value, kind) == text
