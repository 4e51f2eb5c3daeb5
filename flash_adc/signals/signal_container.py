"""
Signal Container
================

This module provides a data class for storing and organizing signals
throughout the flash ADC simulation pipeline.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from ..errors import AlignmentError


@dataclass
class SignalContainer:
    """
    Container for storing signals at various stages of the flash ADC pipeline.

    The signal flow in a flash ADC is:
    [Analog Input] → [Comparator Array] → [Thermometer Code] →
    [Decoder] → [Output Code]

    Attributes:
        time_axis_seconds: Time values for each sample point.
        input_samples: The analog input voltage at each sample.
        threshold_voltages: Reference voltage of each comparator.
        comparator_bit_matrix: Comparator outputs, shape (comparators, samples).
        output_codes: Decoded integer code at each sample.
    """
    # Required attributes
    time_axis_seconds: np.ndarray
    input_samples: np.ndarray
    threshold_voltages: np.ndarray

    # Optional attributes (filled during simulation)
    comparator_bit_matrix: Optional[np.ndarray] = None
    output_codes: Optional[np.ndarray] = None

    # Metadata
    sampling_frequency_hz: float = 0.0
    supply_voltage: float = 1.0

    def validate(self) -> bool:
        """Validate that all signals are sample-aligned."""
        expected_length: int = len(self.time_axis_seconds)

        if len(self.input_samples) != expected_length:
            raise AlignmentError("Input signal length mismatch")

        if self.comparator_bit_matrix is not None:
            if self.comparator_bit_matrix.shape != (
                len(self.threshold_voltages), expected_length
            ):
                raise AlignmentError(
                    f"Comparator bit matrix shape {self.comparator_bit_matrix.shape} "
                    f"does not match ({len(self.threshold_voltages)}, {expected_length})"
                )

        if self.output_codes is not None:
            if len(self.output_codes) != expected_length:
                raise AlignmentError("Output code length mismatch")

        return True

    def get_number_of_samples(self) -> int:
        """Return the number of samples in the container."""
        return len(self.time_axis_seconds)

    def get_number_of_comparators(self) -> int:
        """Return the number of comparator channels."""
        return len(self.threshold_voltages)
