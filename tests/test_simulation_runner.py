"""
Tests for the simulation orchestration layer.
"""

import logging

import numpy as np
import pytest

from flash_adc.errors import ConfigurationError
from flash_adc.simulation import SimulationConfiguration, SimulationResults, SimulationRunner


class TestSimulationConfiguration:
    """Parameter validation."""

    def test_defaults(self):
        config = SimulationConfiguration()
        assert config.nyquist_frequency_hz == config.sampling_frequency_hz / 2.0
        assert config.get_adc_configuration().get_number_of_comparators() == 7

    def test_non_numeric_resistor(self):
        with pytest.raises(ConfigurationError):
            SimulationConfiguration(resistor_values=[1.0, "x"])

    def test_unknown_waveform(self):
        with pytest.raises(ConfigurationError):
            SimulationConfiguration(waveform="sawtooth")

    def test_signal_above_nyquist(self):
        with pytest.raises(ConfigurationError):
            SimulationConfiguration(sampling_frequency_hz=1000.0, signal_frequency_hz=600.0)

    def test_too_few_samples(self):
        with pytest.raises(ConfigurationError):
            SimulationConfiguration(number_of_samples=0)

    def test_invalid_ladder_rejected_by_runner(self):
        with pytest.raises(ConfigurationError):
            SimulationRunner(SimulationConfiguration(resistor_values=[1.0]))

    def test_swing_outside_ladder_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            SimulationConfiguration(signal_amplitude=0.6, direct_current_offset=0.5)
        assert "exceeds the ladder range" in caplog.text

    def test_summary_dict(self):
        summary = SimulationConfiguration(waveform="ramp").get_summary_dict()
        assert summary["waveform"] == "ramp"
        assert summary["number_of_resistors"] == 8


class TestSimulationRunner:
    """End-to-end runs."""

    def test_ramp_visits_every_code(self):
        config = SimulationConfiguration(resistor_values=[1.0] * 8, waveform="ramp", number_of_samples=2048)
        results = SimulationRunner(config).run()

        assert isinstance(results, SimulationResults)
        assert results.simulation_completed
        assert results.minimum_code == 0
        assert results.maximum_code == 7
        assert results.number_of_distinct_codes == 8
        assert results.is_thermometer_code
        assert results.thresholds_monotonic
        assert results.peak_dnl_lsb == pytest.approx(0.0, abs=1e-9)
        assert results.peak_inl_lsb == pytest.approx(0.0, abs=1e-9)

    def test_ramp_codes_fall_as_input_rises(self):
        """Inverted polarity: a rising ramp yields non-increasing codes."""
        config = SimulationConfiguration(resistor_values=[1.0] * 4, waveform="ramp", number_of_samples=256)
        codes = SimulationRunner(config).run().signals.output_codes

        assert codes[0] == 3
        assert codes[-1] == 0
        assert np.all(np.diff(codes) <= 0)

    def test_signal_container_is_filled(self):
        config = SimulationConfiguration(number_of_samples=512)
        signals = SimulationRunner(config).run().signals

        assert signals.validate()
        assert signals.get_number_of_samples() == 512
        assert signals.get_number_of_comparators() == 7
        assert signals.comparator_bit_matrix.shape == (7, 512)
        np.testing.assert_array_equal(signals.output_codes, signals.comparator_bit_matrix.sum(axis=0))

    @pytest.mark.parametrize("waveform", ["ramp", "sine", "square", "triangle", "constant"])
    def test_all_waveforms(self, waveform):
        config = SimulationConfiguration(waveform=waveform, number_of_samples=256)
        results = SimulationRunner(config).run()
        assert results.simulation_completed
        assert results.code_histogram.sum() == 256

    def test_constant_input(self):
        config = SimulationConfiguration(
            resistor_values=[1.0] * 4, waveform="constant", direct_current_offset=0.6, number_of_samples=10
        )
        results = SimulationRunner(config).run()
        assert results.minimum_code == results.maximum_code == 1

    def test_non_monotonic_ladder_reports_bubbles(self):
        config = SimulationConfiguration(resistor_values=[1.0, -0.5, 1.0, 1.0], waveform="ramp", number_of_samples=500)
        results = SimulationRunner(config).run()

        assert not results.thresholds_monotonic
        assert not results.is_thermometer_code
        assert results.total_bubbles > 0

    def test_metrics_dict(self):
        results = SimulationRunner(SimulationConfiguration(number_of_samples=64)).run()
        metrics = results.get_metrics_dict()
        assert metrics["simulation_completed"] is True
        assert set(metrics) >= {"minimum_code", "maximum_code", "total_bubbles", "peak_inl_lsb"}

    def test_print_summary(self, capsys):
        SimulationRunner(SimulationConfiguration(number_of_samples=64)).run().print_summary()
        output = capsys.readouterr().out
        assert "FLASH ADC SIMULATION RESULTS" in output
        assert "Code Range" in output


class TestResistorSweep:
    """Comparing ladders on the same input."""

    def test_run_with_different_resistors_keeps_configuration(self):
        runner = SimulationRunner(SimulationConfiguration(waveform="ramp", number_of_samples=128))
        results = runner.run_with_different_resistors([1.0, 1.0, 1.0])

        assert results.configuration.resistor_values == (1.0, 1.0, 1.0)
        assert len(runner.configuration.resistor_values) == 8

    def test_sweep_picks_most_linear_valid_ladder(self):
        runner = SimulationRunner(SimulationConfiguration(waveform="ramp", number_of_samples=500))
        sweep = runner.sweep_resistor_configurations([
            [1.0, 2.0, 1.0, 1.0],
            [1.0, 1.0, 1.0, 1.0],
            [1.0, -0.5, 1.0, 1.0],
        ])

        assert sweep['best_resistor_values'] == (1.0, 1.0, 1.0, 1.0)
        assert sweep['best_peak_inl_lsb'] == pytest.approx(0.0, abs=1e-9)
        assert len(sweep['all_results']) == 3
        assert sweep['all_results'][2]['total_bubbles'] > 0
