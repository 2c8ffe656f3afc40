"""
Tests for the forward rounding pipelines and the exact numeric helpers.
"""

import logging

import pytest
from decimal import Decimal
from fractions import Fraction

from nws_rounding.core import (
    PIPELINE_STEPS,
    SETTLEMENT_STEPS,
    ConvertStep,
    Pipeline,
    RoundStep,
    TemperatureDomainError,
    TemperatureUnit,
)
from nws_rounding.engine.pipeline import (
    run_steps,
    simulate,
    simulate_asos,
    simulate_metar,
    trace_steps,
)
from nws_rounding.utils.numeric import (
    allocate_percentages,
    format_range,
    require_whole,
    round_half_up,
    to_fraction,
)


# =============================================================================
# ROUNDING CONVENTION
# =============================================================================


class TestRoundHalfUp:
    """Ties go toward +inf."""

    def test_positive_tie_rounds_up(self):
        assert round_half_up(Fraction(139, 2)) == 70  # 69.5

    def test_negative_tie_rounds_up(self):
        assert round_half_up(Fraction(-5, 2)) == -2
        assert round_half_up(Fraction(-1, 2)) == 0

    def test_non_ties(self):
        assert round_half_up(Fraction("69.4999")) == 69
        assert round_half_up(Fraction("-2.51")) == -3
        assert round_half_up(Fraction(0)) == 0

    def test_python_round_differs_on_even_ties(self):
        # Built-in round() is banker's rounding; the engine must not use it
        assert round(68.5) == 68
        assert round_half_up(Fraction("68.5")) == 69


class TestToFraction:
    """Exact input conversion."""

    def test_float_uses_decimal_repr(self):
        assert to_fraction(0.1) == Fraction(1, 10)
        assert to_fraction(70.45) == Fraction(7045, 100)

    def test_int_and_decimal(self):
        assert to_fraction(70) == Fraction(70)
        assert to_fraction(Decimal("20.5")) == Fraction(41, 2)

    def test_rejects_non_finite(self):
        with pytest.raises(TemperatureDomainError):
            to_fraction(float("nan"))
        with pytest.raises(TemperatureDomainError):
            to_fraction(float("inf"))

    def test_rejects_bool_and_strings(self):
        with pytest.raises(TemperatureDomainError):
            to_fraction(True)
        with pytest.raises(TemperatureDomainError):
            to_fraction("70")

    def test_require_whole(self):
        assert require_whole(70) == 70
        assert require_whole(70.0) == 70
        with pytest.raises(TemperatureDomainError):
            require_whole(70.5)


class TestHelpers:

    def test_format_range(self):
        assert format_range(68.5, 70.5) == "68.5° – 70.5°"
        assert format_range(68.9, 70.7, decimals=2) == "68.90° – 70.70°"

    def test_allocate_percentages_residual_goes_to_largest(self):
        # 37.5 -> 38 and 62.5 -> 63 sum to 101; the larger bucket absorbs it
        assert allocate_percentages([Fraction(3, 10), Fraction(1, 2)]) == [38, 62]

    def test_allocate_percentages_tie_goes_to_first(self):
        third = Fraction(1, 3)
        assert allocate_percentages([third, third, third]) == [34, 33, 33]

    def test_allocate_percentages_rejects_zero_total(self):
        with pytest.raises(ValueError):
            allocate_percentages([Fraction(0)])


# =============================================================================
# ASOS SIMULATION
# =============================================================================


class TestSimulateASOS:
    """Five-step F -> C -> F chain."""

    def test_seed_scenario(self):
        steps = simulate_asos(69.7)
        assert steps.original == 69.7
        assert steps.rounded_f == 70
        assert steps.celsius_exact == pytest.approx(21.11, abs=0.01)
        assert steps.rounded_c == 21
        assert steps.fahrenheit_exact == pytest.approx(69.8)
        assert steps.displayed_f == 70

    def test_tie_on_first_rounding(self):
        assert simulate_asos(69.5).rounded_f == 70
        assert simulate_asos(69.49).rounded_f == 69

    def test_decimal_input_is_not_perturbed(self):
        # 70.45 must not be read as 70.4500000000000028...
        assert simulate_asos(70.45).rounded_f == 70

    def test_double_conversion_drift(self):
        # 71°F -> 21.67°C -> 22°C -> 71.6°F -> 72°F
        steps = simulate_asos(71.0)
        assert steps.rounded_c == 22
        assert steps.displayed_f == 72

    def test_negative_values(self):
        steps = simulate_asos(-0.5)
        assert steps.rounded_f == 0
        # 0°F -> -17.78°C -> -18°C -> -0.4°F -> 0°F
        assert steps.rounded_c == -18
        assert steps.displayed_f == 0

    def test_out_of_range_rejected(self):
        with pytest.raises(TemperatureDomainError):
            simulate_asos(150.1)
        with pytest.raises(TemperatureDomainError):
            simulate_asos(-51)

    def test_nan_rejected(self):
        with pytest.raises(TemperatureDomainError):
            simulate_asos(float("nan"))

    def test_trace_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="nws_rounding.engine.pipeline"):
            simulate_asos(69.7)
        assert "ASOS 69.7°F -> 70°F" in caplog.text
        assert "-> 21°C -> 69.8°F -> 70°F" in caplog.text


# =============================================================================
# METAR SIMULATION
# =============================================================================


class TestSimulateMETAR:
    """Three-step C -> F chain."""

    def test_seed_scenario(self):
        steps = simulate_metar(20.7)
        assert steps.rounded_c == 21
        assert steps.fahrenheit_exact == pytest.approx(69.8)
        assert steps.displayed_f == 70

    def test_tie_on_celsius_rounding(self):
        assert simulate_metar(20.5).rounded_c == 21
        assert simulate_metar(-0.5).rounded_c == 0

    def test_range_is_checked_in_celsius(self):
        # 65°C is 149°F, 66°C is 150.8°F
        assert simulate_metar(65).displayed_f == 149
        with pytest.raises(TemperatureDomainError):
            simulate_metar(66)

    def test_trace_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="nws_rounding.engine.pipeline"):
            simulate_metar(20.7)
        assert "METAR 20.7°C -> 21°C -> 69.8°F -> 70°F" in caplog.text


# =============================================================================
# GENERIC STEP EXECUTION
# =============================================================================


class TestRunSteps:

    def test_pipeline_tables(self):
        assert len(PIPELINE_STEPS[Pipeline.ASOS]) == 5
        assert len(PIPELINE_STEPS[Pipeline.METAR]) == 3
        assert SETTLEMENT_STEPS == (RoundStep(TemperatureUnit.FAHRENHEIT),)

    def test_trace_matches_simulator(self):
        trace = trace_steps(Fraction("69.7"), PIPELINE_STEPS[Pipeline.ASOS])
        assert trace == (70, Fraction(190, 9), 21, Fraction(349, 5), 70)

    def test_settlement_rounding(self):
        assert run_steps(70.5, SETTLEMENT_STEPS) == 71
        assert run_steps(70.49, SETTLEMENT_STEPS) == 70

    def test_chain_must_end_in_rounding(self):
        steps = (ConvertStep(TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS),)
        with pytest.raises(ValueError):
            run_steps(70, steps)

    def test_simulate_dispatch(self):
        assert simulate(69.7, "asos") == 70
        assert simulate(69.7, "ASOS") == 70
        assert simulate(20.7, Pipeline.METAR) == 70

    def test_simulate_unknown_pipeline(self):
        with pytest.raises(TemperatureDomainError):
            simulate(70, "synop")
