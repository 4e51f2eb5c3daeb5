"""
Analog Signal Generator
=======================

This module provides a class for generating the sampled analog input
of a flash ADC simulation.

In the context of an ADC:
- Input: A continuous voltage, observed once per clock tick
- Output: The discrete code produced by the converter at that tick

Every generated waveform is returned as a finite synchronous Signal
that shares the generator's sample clock, so any two waveforms from
the same generator are sample-aligned.
"""

import logging
from typing import Dict, Optional

import numpy as np
from scipy import signal as scipy_signal

from .synchronous_signal import Signal
from ..errors import ConfigurationError

log = logging.getLogger(__name__)


class AnalogSignalGenerator:
    """
    Generates sampled analog test signals for flash ADC simulation.

    The natural input range of the converter is [0, supply_voltage]; the
    generator warns (but does not clip) when a waveform leaves that range,
    since out-of-range behavior is part of what the model is used to study.

    Attributes:
        sampling_frequency_hz (float): The conversion rate of the ADC.
        number_of_samples (int): Total number of samples to generate.
        supply_voltage (float): Full-scale voltage of the resistor ladder.
    """

    def __init__(
        self,
        sampling_frequency_hz: float,
        number_of_samples: int,
        supply_voltage: float = 1.0
    ) -> None:
        """
        Initialize the analog signal generator.

        Args:
            sampling_frequency_hz: The sampling rate in Hertz (Hz).
            number_of_samples: How many samples to generate.
            supply_voltage: Full-scale ladder voltage. Default 1.0.

        Raises:
            ConfigurationError: If any parameter is invalid.
        """
        # ===== INPUT VALIDATION =====
        if sampling_frequency_hz <= 0:
            raise ConfigurationError(
                f"Sampling frequency must be positive. "
                f"Received: {sampling_frequency_hz} Hz"
            )

        if number_of_samples < 1:
            raise ConfigurationError(
                f"Number of samples must be at least 1. "
                f"Received: {number_of_samples}"
            )

        if supply_voltage <= 0:
            raise ConfigurationError(
                f"Supply voltage must be positive. Received: {supply_voltage} V"
            )

        # ===== STORE PARAMETERS =====
        self.sampling_frequency_hz: float = sampling_frequency_hz
        self.number_of_samples: int = number_of_samples
        self.supply_voltage: float = supply_voltage

        # Time instant of each sample
        self.time_axis_seconds: np.ndarray = (
            np.arange(self.number_of_samples) / self.sampling_frequency_hz
        )

    def generate_ramp(
        self,
        start_voltage: float = 0.0,
        stop_voltage: Optional[float] = None
    ) -> Signal:
        """
        Generate a linear ramp from start_voltage to stop_voltage (inclusive).

        A slow full-scale ramp visits every output code and is the standard
        stimulus for measuring a converter's transfer characteristic.
        """
        if stop_voltage is None:
            stop_voltage = self.supply_voltage

        samples: np.ndarray = np.linspace(
            start_voltage, stop_voltage, self.number_of_samples
        )
        return self._to_signal(samples, "ramp")

    def generate_sinusoidal_signal(
        self,
        signal_frequency_hz: float,
        amplitude: float = 0.5,
        phase_radians: float = 0.0,
        direct_current_offset: float = 0.5
    ) -> Signal:
        """
        Generate a sampled sine wave.

        signal[n] = amplitude * sin(2 * π * frequency * t[n] + phase) + dc_offset

        The default offset of 0.5 centers the wave in a 1 V ladder.
        """
        self._check_frequency(signal_frequency_hz)

        angular_frequency_radians_per_second: float = 2.0 * np.pi * signal_frequency_hz
        samples: np.ndarray = (
            amplitude * np.sin(
                angular_frequency_radians_per_second * self.time_axis_seconds
                + phase_radians
            )
            + direct_current_offset
        )
        return self._to_signal(samples, "sine")

    def generate_square_wave(
        self,
        signal_frequency_hz: float,
        amplitude: float = 0.5,
        direct_current_offset: float = 0.5,
        duty_cycle: float = 0.5
    ) -> Signal:
        """Generate a square wave alternating between offset ± amplitude."""
        self._check_frequency(signal_frequency_hz)

        if not 0.0 <= duty_cycle <= 1.0:
            raise ConfigurationError(
                f"Duty cycle must be in [0, 1]. Received: {duty_cycle}"
            )

        phase: np.ndarray = 2.0 * np.pi * signal_frequency_hz * self.time_axis_seconds
        samples: np.ndarray = (
            amplitude * scipy_signal.square(phase, duty=duty_cycle)
            + direct_current_offset
        )
        return self._to_signal(samples, "square")

    def generate_triangle_wave(
        self,
        signal_frequency_hz: float,
        amplitude: float = 0.5,
        direct_current_offset: float = 0.5
    ) -> Signal:
        """Generate a symmetric triangle wave between offset ± amplitude."""
        self._check_frequency(signal_frequency_hz)

        phase: np.ndarray = 2.0 * np.pi * signal_frequency_hz * self.time_axis_seconds
        samples: np.ndarray = (
            amplitude * scipy_signal.sawtooth(phase, width=0.5)
            + direct_current_offset
        )
        return self._to_signal(samples, "triangle")

    def generate_constant(self, voltage: float) -> Signal:
        """Generate a DC input held at ``voltage``."""
        samples: np.ndarray = np.full(self.number_of_samples, float(voltage))
        return self._to_signal(samples, "constant")

    def _check_frequency(self, signal_frequency_hz: float) -> None:
        """Check the signal frequency against the Nyquist limit."""
        if signal_frequency_hz <= 0:
            raise ConfigurationError(
                f"Signal frequency must be positive. "
                f"Received: {signal_frequency_hz} Hz"
            )

        nyquist_frequency_hz: float = self.sampling_frequency_hz / 2.0
        if signal_frequency_hz >= nyquist_frequency_hz:
            raise ConfigurationError(
                f"Signal frequency ({signal_frequency_hz} Hz) must be less than "
                f"Nyquist frequency ({nyquist_frequency_hz} Hz)."
            )

    def _to_signal(self, samples: np.ndarray, waveform_name: str) -> Signal:
        """Wrap generated samples in a Signal, warning on out-of-range input."""
        if np.min(samples) < 0.0 or np.max(samples) > self.supply_voltage:
            log.warning(
                "%s input spans [%.4g, %.4g] V, outside the ladder range [0, %.4g] V",
                waveform_name, np.min(samples), np.max(samples), self.supply_voltage
            )
        return Signal.from_samples(samples)

    def get_time_axis(self) -> np.ndarray:
        """Return the time axis."""
        return self.time_axis_seconds.copy()

    def get_signal_parameters_summary(
        self,
        signal_frequency_hz: float
    ) -> Dict[str, float]:
        """
        Calculate and return useful signal parameters for analysis.

        Args:
            signal_frequency_hz: The frequency of the signal being analyzed.

        Returns:
            dict: Dictionary containing signal parameters.
        """
        signal_duration_seconds: float = self.number_of_samples / self.sampling_frequency_hz

        return {
            "samples_per_period": self.sampling_frequency_hz / signal_frequency_hz,
            "number_of_complete_periods": signal_frequency_hz * signal_duration_seconds,
            "nyquist_frequency_hz": self.sampling_frequency_hz / 2.0,
            "total_duration_seconds": signal_duration_seconds,
        }
