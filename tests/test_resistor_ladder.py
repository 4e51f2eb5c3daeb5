"""
Tests for the resistor ladder threshold generator.
"""

import logging

import numpy as np
import pytest

from flash_adc.errors import ConfigurationError
from flash_adc.converter import (
    FlashADCConfiguration,
    ResistorLadder,
    generate_thresholds,
    thresholds_are_monotonic
)


class TestThresholds:
    """Threshold derivation from resistor values."""

    def test_four_equal_resistors(self):
        """Four equal resistors across 1 V give quarter-scale thresholds."""
        assert generate_thresholds([1, 1, 1, 1]) == [0.25, 0.5, 0.75]

    @pytest.mark.parametrize("number_of_resistors", [2, 3, 4, 8, 16, 255])
    def test_threshold_count(self, number_of_resistors):
        """N resistors give N-1 thresholds (boundary taps dropped)."""
        resistor_values = np.linspace(1.0, 2.0, number_of_resistors)
        ladder = ResistorLadder(resistor_values)

        assert len(ladder.thresholds()) == number_of_resistors - 1
        assert ladder.get_number_of_thresholds() == number_of_resistors - 1

    def test_two_resistors_give_one_threshold(self):
        assert generate_thresholds([1.0, 3.0]) == [0.25]

    def test_ladder_points_boundaries(self):
        """First ladder point is 0 and the last is the supply."""
        points = ResistorLadder([1, 1, 1, 1]).ladder_points()
        assert points[0] == 0.0
        assert points[-1] == 1.0
        assert len(points) == 5

    def test_ladder_points_boundaries_uneven(self):
        points = ResistorLadder([1.0, 2.0, 3.0, 4.0]).ladder_points()
        assert points[0] == 0.0
        assert points[-1] == pytest.approx(1.0)
        np.testing.assert_allclose(points, [0.0, 0.1, 0.3, 0.6, 1.0])

    def test_supply_voltage_scales_thresholds(self):
        thresholds = generate_thresholds([1, 1, 1, 1], supply_voltage=3.3)
        np.testing.assert_allclose(thresholds, [0.825, 1.65, 2.475])

    def test_order_is_preserved(self):
        """Thresholds follow ladder order and are not sorted."""
        thresholds = generate_thresholds([3.0, 1.0])
        assert thresholds == [0.75]

        ladder = ResistorLadder([1.0, -0.5, 1.0, 1.0])
        np.testing.assert_allclose(ladder.thresholds(), [0.4, 0.2, 0.6])
        assert not ladder.is_monotonic()

    def test_positive_resistors_are_monotonic(self):
        ladder = ResistorLadder([5.0, 1.0, 3.0, 0.5])
        assert ladder.is_monotonic()
        assert thresholds_are_monotonic(ladder.thresholds())

    def test_total_resistance(self):
        assert ResistorLadder([1.0, 2.0, 3.0]).total_resistance == 6.0


class TestValidation:
    """Configuration errors are raised before a ladder is built."""

    @pytest.mark.parametrize("resistor_values", [[], [1.0]])
    def test_too_few_resistors(self, resistor_values):
        with pytest.raises(ConfigurationError):
            ResistorLadder(resistor_values)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            generate_thresholds([1.0])

    @pytest.mark.parametrize("supply_voltage", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_supply_voltage(self, supply_voltage):
        with pytest.raises(ConfigurationError):
            ResistorLadder([1, 1], supply_voltage=supply_voltage)

    @pytest.mark.parametrize("bad_value", [float("nan"), float("inf")])
    def test_non_finite_resistor(self, bad_value):
        with pytest.raises(ConfigurationError):
            ResistorLadder([1.0, bad_value, 1.0])

    def test_zero_total_resistance(self):
        with pytest.raises(ConfigurationError):
            ResistorLadder([1.0, -1.0])

    def test_non_positive_resistor_warns_by_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            ladder = ResistorLadder([1.0, 0.0, 1.0])

        assert "Non-positive resistor values" in caplog.text
        np.testing.assert_allclose(ladder.thresholds(), [0.5, 0.5])

    def test_non_positive_resistor_rejected_in_strict_mode(self):
        with pytest.raises(ConfigurationError):
            ResistorLadder([1.0, 0.0, 1.0], strict_resistor_check=True)

    @pytest.mark.parametrize("resistor_values", [[1.0, "x"], [1.0, None], None])
    def test_non_numeric_resistor(self, resistor_values):
        with pytest.raises(ConfigurationError, match="Resistor values must be numbers"):
            ResistorLadder(resistor_values)

    def test_non_numeric_supply_voltage(self):
        with pytest.raises(ConfigurationError, match="Supply voltage must be a number"):
            ResistorLadder([1.0, 1.0], supply_voltage="high")


class TestFlashADCConfiguration:
    """Configuration dataclass."""

    def test_values_are_normalized(self):
        config = FlashADCConfiguration([1, 2, 3], supply_voltage=2)
        assert config.resistor_values == (1.0, 2.0, 3.0)
        assert config.supply_voltage == 2.0
        assert config.get_number_of_comparators() == 2

    def test_invalid_configuration(self):
        with pytest.raises(ConfigurationError):
            FlashADCConfiguration([1.0])

    def test_strict_configuration(self):
        with pytest.raises(ConfigurationError):
            FlashADCConfiguration([1.0, -2.0, 4.0], strict_resistor_check=True)

    def test_uniform(self):
        config = FlashADCConfiguration.uniform(8, resistance_ohms=500.0, supply_voltage=2.0)
        assert config.resistor_values == (500.0,) * 8
        assert config.get_number_of_comparators() == 7

    def test_summary_dict(self):
        summary = FlashADCConfiguration([1.0, 1.0, 2.0]).get_summary_dict()
        assert summary["number_of_resistors"] == 3
        assert summary["number_of_comparators"] == 2
        assert summary["total_resistance_ohms"] == 4.0

    def test_non_numeric_resistor_in_configuration(self):
        with pytest.raises(ConfigurationError):
            FlashADCConfiguration([1.0, "x", 1.0])
