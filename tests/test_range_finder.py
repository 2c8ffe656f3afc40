"""
Tests for the range finder (display -> interval of true readings).
"""

import logging

import pytest

from nws_rounding.core import (
    Pipeline,
    RoundingConsistencyError,
    TemperatureDomainError,
    TemperatureUnit,
    UnreachableDisplayError,
)
from nws_rounding.engine import range_finder
from nws_rounding.engine.pipeline import simulate
from nws_rounding.engine.range_finder import (
    celsius_candidates,
    fahrenheit_feeders,
    find_asos_range,
    find_celsius_range,
    find_metar_range,
    find_range,
    find_range_from_celsius,
)


# =============================================================================
# TEST DATA HELPERS
# =============================================================================

EPSILON = 0.001

# Displays reachable by both pipelines between 60°F and 80°F
REACHABLE_60_80 = [61, 63, 64, 66, 68, 70, 72, 73, 75, 77, 79]
UNREACHABLE_60_80 = [60, 62, 65, 67, 69, 71, 74, 76, 78, 80]


def reachable_ranges(pipeline: str, low: int = -40, high: int = 140):
    """Yield every range for reachable displays in [low, high]."""
    for displayed in range(low, high + 1):
        try:
            yield find_range(displayed, pipeline)
        except UnreachableDisplayError:
            continue


def sample_points(rng, count: int = 9):
    """Evenly spaced points in [min_true, max_true), plus one just below max."""
    step = rng.width / count
    points = [rng.min_true + i * step for i in range(count)]
    points.append(rng.max_true - EPSILON)
    return points


# =============================================================================
# CANDIDATE SEARCH
# =============================================================================


class TestCandidates:

    def test_celsius_candidates(self):
        assert celsius_candidates(70) == [21]
        assert celsius_candidates(72) == [22]
        assert celsius_candidates(71) == []

    def test_fahrenheit_feeders(self):
        # 69°F -> 20.56°C and 70°F -> 21.11°C both round to 21°C
        assert fahrenheit_feeders(21) == [69, 70]
        # Only 68°F rounds to 20°C
        assert fahrenheit_feeders(20) == [68]

    def test_reachable_displays(self):
        for displayed in REACHABLE_60_80:
            assert len(celsius_candidates(displayed)) == 1, displayed
        for displayed in UNREACHABLE_60_80:
            assert celsius_candidates(displayed) == [], displayed


# =============================================================================
# ASOS RANGES
# =============================================================================


class TestFindASOSRange:

    def test_seed_scenario(self):
        rng = find_range(70, "asos")
        assert rng.pipeline == Pipeline.ASOS
        assert rng.true_unit == TemperatureUnit.FAHRENHEIT
        assert rng.min_true == 68.5
        assert rng.max_true == 70.5
        assert rng.uncertainty == 1.0
        assert rng.intermediate_value == 21
        assert rng.intermediate_values == (21,)
        assert not rng.is_ambiguous

        midpoint = (rng.min_true + rng.max_true) / 2
        assert simulate(midpoint, "asos") == 70

    def test_single_feeder_range(self):
        rng = find_asos_range(68)
        assert (rng.min_true, rng.max_true) == (67.5, 68.5)
        assert rng.uncertainty == 0.5

    def test_unreachable_display(self):
        with pytest.raises(UnreachableDisplayError) as exc_info:
            find_asos_range(71)
        assert exc_info.value.displayed_value == 71
        assert isinstance(exc_info.value, RoundingConsistencyError)

    def test_default_pipeline_is_asos(self):
        assert find_range(70) == find_asos_range(70)

    def test_float_whole_display_accepted(self):
        assert find_range(70.0) == find_range(70)


# =============================================================================
# METAR RANGES
# =============================================================================


class TestFindMETARRange:

    def test_seed_scenario(self):
        rng = find_range(70, "metar")
        assert rng.pipeline == Pipeline.METAR
        assert rng.true_unit == TemperatureUnit.CELSIUS
        assert (rng.min_true, rng.max_true) == (20.5, 21.5)
        assert rng.min_f == pytest.approx(68.9)
        assert rng.max_f == pytest.approx(70.7)
        assert rng.uncertainty_f == pytest.approx(0.9)
        assert rng.intermediate_value == 21

    def test_narrower_than_asos_at_seed(self):
        asos = find_range(70, "asos")
        metar = find_range(70, "metar")
        assert (metar.max_f - metar.min_f) < (asos.max_f - asos.min_f)

    def test_unreachable_display(self):
        with pytest.raises(UnreachableDisplayError):
            find_metar_range(71)


# =============================================================================
# CELSIUS ENTRY POINTS
# =============================================================================


class TestCelsiusEntryPoints:

    def test_find_celsius_range(self):
        rng = find_celsius_range(21)
        assert rng.pipeline is None
        assert rng.displayed_value == 21
        assert rng.displayed_unit == TemperatureUnit.CELSIUS
        assert (rng.min_true, rng.max_true) == (20.5, 21.5)
        assert (rng.min_c, rng.max_c) == (20.5, 21.5)
        assert rng.min_f == pytest.approx(68.9)
        assert rng.max_f == pytest.approx(70.7)
        assert rng.uncertainty == 0.5

    def test_find_range_from_celsius_matches_fahrenheit_search(self):
        assert find_range_from_celsius(21, "asos") == find_range(70, "asos")
        assert find_range_from_celsius(22, "asos") == find_range(72, "asos")
        assert find_range_from_celsius(21, "metar") == find_range(70, "metar")

    def test_find_range_from_celsius_reports_display(self):
        rng = find_range_from_celsius(22, Pipeline.ASOS)
        assert rng.displayed_value == 72
        assert (rng.min_true, rng.max_true) == (70.5, 72.5)

    def test_celsius_domain(self):
        with pytest.raises(TemperatureDomainError):
            find_celsius_range(66)
        with pytest.raises(TemperatureDomainError):
            find_celsius_range(21.5)


# =============================================================================
# DOMAIN ERRORS
# =============================================================================


class TestDomainErrors:

    @pytest.mark.parametrize("displayed", [151, -51, 70.5])
    def test_bad_display(self, displayed):
        with pytest.raises(TemperatureDomainError):
            find_range(displayed, "asos")

    def test_unknown_pipeline(self):
        with pytest.raises(TemperatureDomainError):
            find_range(70, "synop")

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            find_range(200)


# =============================================================================
# MULTIPLE INTERMEDIATES / CONSISTENCY
# =============================================================================


class TestAmbiguousIntermediates:

    def test_multiple_candidates_are_flagged(self, monkeypatch, caplog):
        monkeypatch.setattr(range_finder, "celsius_candidates", lambda displayed_f: [20, 21])

        with caplog.at_level(logging.WARNING, logger="nws_rounding.engine.range_finder"):
            rng = find_asos_range(70)

        assert rng.intermediate_value is None
        assert rng.intermediate_values == (20, 21)
        assert rng.is_ambiguous
        # 68°F feeds 20°C, 69-70°F feed 21°C
        assert (rng.min_true, rng.max_true) == (67.5, 70.5)
        assert "reachable from 2" in caplog.text

    def test_missing_feeders_raise(self, monkeypatch):
        monkeypatch.setattr(range_finder, "fahrenheit_feeders", lambda rounded_c: [])
        with pytest.raises(RoundingConsistencyError):
            find_asos_range(70)


# =============================================================================
# ROUND-TRIP PROPERTIES
# =============================================================================


class TestRoundTrip:
    """Every range reproduces its display and nothing else."""

    @pytest.mark.parametrize("pipeline", ["asos", "metar"])
    def test_containment(self, pipeline):
        for rng in reachable_ranges(pipeline):
            for x in sample_points(rng):
                assert simulate(x, pipeline) == rng.displayed_value, (rng, x)

    @pytest.mark.parametrize("pipeline", ["asos", "metar"])
    def test_boundaries_excluded(self, pipeline):
        for rng in reachable_ranges(pipeline):
            assert simulate(rng.max_true, pipeline) != rng.displayed_value, rng
            assert simulate(rng.min_true - EPSILON, pipeline) != rng.displayed_value, rng

    @pytest.mark.parametrize("pipeline", ["asos", "metar"])
    def test_neighbours_never_produced(self, pipeline):
        for rng in reachable_ranges(pipeline):
            neighbours = {rng.displayed_value - 1, rng.displayed_value + 1}
            for x in sample_points(rng):
                assert simulate(x, pipeline) not in neighbours

    def test_native_widths(self):
        # ASOS ranges span whole °F, METAR ranges exactly one °C
        for displayed in range(-40, 141):
            try:
                asos = find_range(displayed, "asos")
                metar = find_range(displayed, "metar")
            except UnreachableDisplayError:
                continue
            assert asos.width in (1.0, 2.0)
            assert metar.width == 1.0

    def test_fahrenheit_width_double_conversion_wider(self):
        # 70°F: ASOS 68.5-70.5 against METAR 68.9-70.7
        asos = find_range(70, "asos")
        metar = find_range(70, "metar")
        assert asos.max_f - asos.min_f == pytest.approx(2.0)
        assert metar.max_f - metar.min_f == pytest.approx(1.8)
        assert asos.max_f - asos.min_f >= metar.max_f - metar.min_f

    @pytest.mark.parametrize("displayed", [68, 77])
    def test_fahrenheit_width_single_feeder_narrower(self, displayed):
        # Only one whole °F feeds the Celsius value, so ASOS spans 1°F
        # while METAR still spans a full °C (1.8°F)
        asos = find_range(displayed, "asos")
        metar = find_range(displayed, "metar")
        assert asos.max_f - asos.min_f == pytest.approx(1.0)
        assert metar.max_f - metar.min_f == pytest.approx(1.8)
        assert asos.max_f - asos.min_f < metar.max_f - metar.min_f
