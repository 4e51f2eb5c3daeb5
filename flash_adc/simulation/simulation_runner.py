"""
Simulation Runner
=================

This module provides the main simulation orchestration class that
coordinates all components of the flash ADC simulation.

The SimulationRunner class handles:
1. Input signal generation
2. Lazy, sample-by-sample conversion
3. Vectorized conversion (cross-checked against step 2)
4. Performance metric calculation
5. Results aggregation

This is the main entry point for running simulations.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..errors import ConfigurationError, FlashADCError
from ..signals.analog_signal_generator import AnalogSignalGenerator
from ..signals.signal_container import SignalContainer
from ..signals.synchronous_signal import Signal
from ..converter.configuration import FlashADCConfiguration
from ..converter.flash_adc_converter import FlashADC
from ..converter.resistor_ladder import convert_ladder_parameters
from ..metrics.static_linearity import compute_dnl_inl
from ..metrics.thermometer_code import count_bubbles, compute_code_histogram

log = logging.getLogger(__name__)

SUPPORTED_WAVEFORMS = ("ramp", "sine", "square", "triangle", "constant")


@dataclass
class SimulationConfiguration:
    """
    Configuration parameters for a flash ADC simulation.

    Attributes:
        resistor_values: Ladder resistances (Ohm), ground end first.
        supply_voltage: Voltage across the ladder (V).
        strict_resistor_check: Reject non-positive resistor values.
        waveform: Input waveform, one of SUPPORTED_WAVEFORMS.
        number_of_samples: Total samples to simulate.
        sampling_frequency_hz: Conversion rate of the ADC.
        signal_frequency_hz: Frequency of periodic input waveforms.
        signal_amplitude: Peak amplitude of periodic input waveforms (V).
        direct_current_offset: DC level of the input (V). Also the
            voltage of the "constant" waveform.
    """
    # Converter parameters
    resistor_values: Sequence[float] = field(default_factory=lambda: [1000.0] * 8)
    supply_voltage: float = 1.0
    strict_resistor_check: bool = False

    # Signal parameters
    waveform: str = "sine"
    number_of_samples: int = 1024
    sampling_frequency_hz: float = 1_000_000.0
    signal_frequency_hz: float = 1000.0
    signal_amplitude: float = 0.45
    direct_current_offset: float = 0.5

    # Derived parameters (calculated in __post_init__)
    nyquist_frequency_hz: float = 0.0

    def __post_init__(self) -> None:
        """Validate and auto-calculate parameters after initialization."""
        values, self.supply_voltage = convert_ladder_parameters(
            self.resistor_values, self.supply_voltage
        )
        self.resistor_values = tuple(values)
        self.nyquist_frequency_hz = self.sampling_frequency_hz / 2.0
        self._validate()

    def _validate(self) -> None:
        """Validate configuration parameters."""
        if self.waveform not in SUPPORTED_WAVEFORMS:
            raise ConfigurationError(
                f"Unknown waveform '{self.waveform}'. "
                f"Supported: {', '.join(SUPPORTED_WAVEFORMS)}"
            )

        if self.number_of_samples < 1:
            raise ConfigurationError("Number of samples must be at least 1")

        if self.sampling_frequency_hz <= 0:
            raise ConfigurationError("Sampling frequency must be positive")

        if self.waveform in ("sine", "square", "triangle"):
            if self.signal_frequency_hz <= 0:
                raise ConfigurationError("Signal frequency must be positive")

            if self.signal_frequency_hz >= self.nyquist_frequency_hz:
                raise ConfigurationError(
                    f"Signal frequency ({self.signal_frequency_hz} Hz) must be below "
                    f"the Nyquist frequency ({self.nyquist_frequency_hz} Hz)"
                )

            if self.signal_amplitude < 0:
                raise ConfigurationError("Signal amplitude must be non-negative")

            lowest_voltage: float = self.direct_current_offset - self.signal_amplitude
            highest_voltage: float = self.direct_current_offset + self.signal_amplitude
            if lowest_voltage < 0 or highest_voltage > self.supply_voltage:
                log.warning(
                    "Input swing [%.3g, %.3g] V exceeds the ladder range [0, %.3g] V; "
                    "codes will saturate",
                    lowest_voltage, highest_voltage, self.supply_voltage
                )

    def get_adc_configuration(self) -> FlashADCConfiguration:
        """Return the converter part of this configuration."""
        return FlashADCConfiguration(
            resistor_values=self.resistor_values,
            supply_voltage=self.supply_voltage,
            strict_resistor_check=self.strict_resistor_check
        )

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "number_of_resistors": len(self.resistor_values),
            "supply_voltage": self.supply_voltage,
            "waveform": self.waveform,
            "number_of_samples": self.number_of_samples,
            "sampling_frequency_hz": self.sampling_frequency_hz,
            "signal_frequency_hz": self.signal_frequency_hz,
            "signal_amplitude": self.signal_amplitude,
            "direct_current_offset": self.direct_current_offset
        }


@dataclass
class SimulationResults:
    """
    Container for all simulation results.

    Attributes:
        configuration: The SimulationConfiguration used for this run.
        signals: SignalContainer with all signal data.
        minimum_code: Smallest code observed.
        maximum_code: Largest code observed.
        number_of_distinct_codes: How many different codes occurred.
        code_histogram: Occurrence count of every possible code.
        total_bubbles: Thermometer-code bubbles summed over all samples.
        is_thermometer_code: True if no sample contained a bubble.
        thresholds_monotonic: True if the ladder thresholds never decrease.
        peak_dnl_lsb: Largest |DNL| of the ladder (LSB).
        peak_inl_lsb: Largest |INL| of the ladder (LSB).
        simulation_completed: Whether simulation finished successfully.
    """
    # Configuration used
    configuration: SimulationConfiguration

    # Signals
    signals: SignalContainer

    # Code statistics
    minimum_code: int = 0
    maximum_code: int = 0
    number_of_distinct_codes: int = 0
    code_histogram: Optional[np.ndarray] = None

    # Thermometer code
    total_bubbles: int = 0
    is_thermometer_code: bool = True
    thresholds_monotonic: bool = True

    # Static linearity
    peak_dnl_lsb: float = 0.0
    peak_inl_lsb: float = 0.0

    simulation_completed: bool = False

    def print_summary(self) -> None:
        """Print a formatted summary of the simulation results."""
        print("\n" + "=" * 70)
        print("FLASH ADC SIMULATION RESULTS")
        print("=" * 70)

        # Configuration section
        print("\n--- Configuration ---")
        print(f"  Resistors:               {len(self.configuration.resistor_values)}")
        print(f"  Comparators:             {self.signals.get_number_of_comparators()}")
        print(f"  Supply Voltage:          {self.configuration.supply_voltage:.3f} V")
        print(f"  Waveform:                {self.configuration.waveform}")
        print(f"  Sampling Frequency:      {self.configuration.sampling_frequency_hz / 1e6:.3f} MHz")
        print(f"  Number of Samples:       {self.configuration.number_of_samples}")

        thresholds_text: str = ", ".join(
            f"{threshold:.4f}" for threshold in self.signals.threshold_voltages
        )
        print(f"  Thresholds:              [{thresholds_text}]")

        # Code section
        print("\n--- Output Codes ---")
        print(f"  Code Range:              {self.minimum_code} .. {self.maximum_code}")
        print(f"  Distinct Codes:          {self.number_of_distinct_codes}")

        # Thermometer section
        print("\n--- Thermometer Code ---")
        monotonic_status: str = "yes" if self.thresholds_monotonic else "NO"
        print(f"  Monotonic Thresholds:    {monotonic_status}")
        print(f"  Bubbles:                 {self.total_bubbles}")
        if not self.is_thermometer_code:
            print("  WARNING: Comparator outputs are not a valid thermometer code!")

        # Linearity section
        print("\n--- Static Linearity ---")
        print(f"  DNL (peak):              {self.peak_dnl_lsb:.3f} LSB")
        print(f"  INL (peak):              {self.peak_inl_lsb:.3f} LSB")

        print("\n--- Status ---")
        print(f"  Simulation Completed:    {'Yes' if self.simulation_completed else 'No'}")

        print("\n" + "=" * 70)

    def get_metrics_dict(self) -> Dict[str, Any]:
        """
        Return all metrics as a dictionary.

        Returns:
            Dict containing all simulation metrics.
        """
        return {
            "minimum_code": self.minimum_code,
            "maximum_code": self.maximum_code,
            "number_of_distinct_codes": self.number_of_distinct_codes,
            "total_bubbles": self.total_bubbles,
            "is_thermometer_code": self.is_thermometer_code,
            "thresholds_monotonic": self.thresholds_monotonic,
            "peak_dnl_lsb": self.peak_dnl_lsb,
            "peak_inl_lsb": self.peak_inl_lsb,
            "simulation_completed": self.simulation_completed
        }


class SimulationRunner:
    """
    Main simulation orchestrator for flash ADC evaluation.

    Usage:
        config = SimulationConfiguration(
            resistor_values=[1.0] * 8,
            waveform="ramp"
        )
        runner = SimulationRunner(config)
        results = runner.run()
        results.print_summary()

    Attributes:
        configuration: The SimulationConfiguration for this runner.
        signal_generator: The AnalogSignalGenerator instance.
        adc: The FlashADC instance.
    """

    def __init__(self, configuration: SimulationConfiguration) -> None:
        """
        Initialize the simulation runner with a configuration.

        Args:
            configuration: SimulationConfiguration with all parameters.
        """
        self.configuration: SimulationConfiguration = configuration

        # ===== CREATE SIGNAL GENERATOR =====
        self.signal_generator: AnalogSignalGenerator = AnalogSignalGenerator(
            sampling_frequency_hz=configuration.sampling_frequency_hz,
            number_of_samples=configuration.number_of_samples,
            supply_voltage=configuration.supply_voltage
        )

        # ===== CREATE CONVERTER =====
        self.adc: FlashADC = FlashADC(configuration.get_adc_configuration())

    def _generate_input_signal(self) -> Signal:
        """Build the configured input waveform."""
        config = self.configuration
        generator = self.signal_generator

        if config.waveform == "ramp":
            return generator.generate_ramp(0.0, config.supply_voltage)
        if config.waveform == "constant":
            return generator.generate_constant(config.direct_current_offset)
        if config.waveform == "sine":
            return generator.generate_sinusoidal_signal(
                signal_frequency_hz=config.signal_frequency_hz,
                amplitude=config.signal_amplitude,
                direct_current_offset=config.direct_current_offset
            )
        if config.waveform == "square":
            return generator.generate_square_wave(
                signal_frequency_hz=config.signal_frequency_hz,
                amplitude=config.signal_amplitude,
                direct_current_offset=config.direct_current_offset
            )
        return generator.generate_triangle_wave(
            signal_frequency_hz=config.signal_frequency_hz,
            amplitude=config.signal_amplitude,
            direct_current_offset=config.direct_current_offset
        )

    def run(self) -> SimulationResults:
        """
        Execute the complete simulation.

        Returns:
            SimulationResults containing all outputs and metrics.

        Raises:
            FlashADCError: If the lazy and vectorized conversions disagree.
        """
        config = self.configuration

        log.info(
            "Running simulation: %d comparators, %s input, %d samples",
            self.adc.get_number_of_comparators(), config.waveform, config.number_of_samples
        )

        # ===== STEP 1: GENERATE INPUT SIGNAL =====
        log.debug("[1/5] Generating input signal")
        input_signal: Signal = self._generate_input_signal()
        input_samples: np.ndarray = input_signal.to_array()
        time_axis: np.ndarray = self.signal_generator.get_time_axis()

        # ===== STEP 2: LAZY CONVERSION =====
        log.debug("[2/5] Converting sample by sample")
        lazy_codes: np.ndarray = self.adc.convert(input_signal).to_array(dtype=np.int64)

        # ===== STEP 3: VECTORIZED CONVERSION =====
        log.debug("[3/5] Converting vectorized block")
        output_codes, bit_matrix = self.adc.convert_samples_with_bits(input_samples)

        if not np.array_equal(lazy_codes, output_codes):
            mismatches: int = int(np.sum(lazy_codes != output_codes))
            raise FlashADCError(
                f"Lazy and vectorized conversions disagree on {mismatches} samples"
            )

        # ===== STEP 4: CALCULATE METRICS =====
        log.debug("[4/5] Calculating metrics")
        bubbles_per_sample: np.ndarray = count_bubbles(bit_matrix)
        code_histogram: np.ndarray = compute_code_histogram(
            output_codes, self.adc.get_number_of_codes()
        )
        dnl, inl = compute_dnl_inl(self.adc.threshold_voltages, config.supply_voltage)

        # ===== STEP 5: PACKAGE RESULTS =====
        log.debug("[5/5] Packaging results")
        signals: SignalContainer = SignalContainer(
            time_axis_seconds=time_axis,
            input_samples=input_samples,
            threshold_voltages=self.adc.threshold_voltages,
            comparator_bit_matrix=bit_matrix,
            output_codes=output_codes,
            sampling_frequency_hz=config.sampling_frequency_hz,
            supply_voltage=config.supply_voltage
        )
        signals.validate()

        total_bubbles: int = int(np.sum(bubbles_per_sample))
        results: SimulationResults = SimulationResults(
            configuration=config,
            signals=signals,
            minimum_code=int(np.min(output_codes)),
            maximum_code=int(np.max(output_codes)),
            number_of_distinct_codes=int(np.count_nonzero(code_histogram)),
            code_histogram=code_histogram,
            total_bubbles=total_bubbles,
            is_thermometer_code=total_bubbles == 0,
            thresholds_monotonic=self.adc.resistor_ladder.is_monotonic(),
            peak_dnl_lsb=float(np.max(np.abs(dnl))) if len(dnl) else 0.0,
            peak_inl_lsb=float(np.max(np.abs(inl))),
            simulation_completed=True
        )

        log.info(
            "Simulation complete: codes %d..%d, %d bubbles",
            results.minimum_code, results.maximum_code, total_bubbles
        )

        return results

    def run_with_different_resistors(self, resistor_values: Sequence[float]) -> SimulationResults:
        """
        Run the same simulation with another resistor ladder.

        The runner's own configuration is left unchanged.
        """
        configuration: SimulationConfiguration = dataclasses.replace(
            self.configuration, resistor_values=resistor_values
        )
        return SimulationRunner(configuration).run()

    def sweep_resistor_configurations(
        self,
        resistor_configurations: List[Sequence[float]]
    ) -> Dict[str, Any]:
        """
        Compare several resistor ladders on the same input.

        Args:
            resistor_configurations: Ladders to evaluate.

        Returns:
            Dict with the ladder of lowest peak INL among those producing a
            valid thermometer code, and per-ladder metrics.
        """
        results_list: list = []
        best_inl: float = float('inf')
        best_resistor_values: Optional[Sequence[float]] = None

        for resistor_values in resistor_configurations:
            result = self.run_with_different_resistors(resistor_values)
            results_list.append({
                'resistor_values': tuple(resistor_values),
                'peak_dnl_lsb': result.peak_dnl_lsb,
                'peak_inl_lsb': result.peak_inl_lsb,
                'total_bubbles': result.total_bubbles,
                'is_thermometer_code': result.is_thermometer_code
            })

            log.info(
                "Ladder %s: INL=%.3f LSB, DNL=%.3f LSB, %d bubbles",
                tuple(resistor_values), result.peak_inl_lsb,
                result.peak_dnl_lsb, result.total_bubbles
            )

            if result.is_thermometer_code and result.peak_inl_lsb < best_inl:
                best_inl = result.peak_inl_lsb
                best_resistor_values = tuple(resistor_values)

        return {
            'best_resistor_values': best_resistor_values,
            'best_peak_inl_lsb': best_inl,
            'all_results': results_list
        }
