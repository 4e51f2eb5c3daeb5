"""
Comparator Module
=================

This module provides the comparator array of the flash ADC.

Each comparator compares the SAME input signal against its own
threshold voltage, one sample per clock tick, without any state.

Decision rule:

    bit = 0  if threshold <= input
    bit = 1  otherwise

A tie (input exactly equal to the threshold) gives 0. There is no
tolerance band.

NOTE ON POLARITY: with this rule a bit is asserted when the threshold is
ABOVE the input, so the decoded code DECREASES as the input rises. A
conventional flash ADC asserts a bit when the input exceeds the
threshold. The inverted polarity is kept as-is.

A NaN input is not trapped: ``threshold <= nan`` is False under IEEE
ordering, so every comparator outputs 1.
"""

from typing import List, Sequence

import numpy as np

from ..signals.synchronous_signal import Signal


def comparator(input_sample: float, threshold_voltage: float) -> int:
    """
    One-bit quantizer.

    Returns 0 when the threshold is at or below the input, 1 otherwise.
    """
    if threshold_voltage <= input_sample:
        return 0
    return 1


class Comparator:
    """
    A single ideal comparator with a fixed threshold.

    Instances are callable so they can be mapped directly over a Signal.

    Attributes:
        threshold_voltage (float): Reference voltage on the (-) input.
    """

    def __init__(self, threshold_voltage: float) -> None:
        self.threshold_voltage: float = float(threshold_voltage)

    def compare(self, input_sample: float) -> int:
        """Compare one input sample against the threshold."""
        return comparator(input_sample, self.threshold_voltage)

    __call__ = compare

    def __repr__(self) -> str:
        return f"Comparator(threshold_voltage={self.threshold_voltage!r})"


class ComparatorArray:
    """
    A bank of independent comparators, one per threshold.

    Channel k of the output belongs to threshold k. All channels read the
    same input signal and share nothing else.

    Attributes:
        threshold_voltages (np.ndarray): Thresholds in ladder order.
        comparators (List[Comparator]): One comparator per threshold.
    """

    def __init__(self, threshold_voltages: Sequence[float]) -> None:
        """
        Initialize the comparator array.

        Args:
            threshold_voltages: Comparator thresholds in ladder order.
                The order is kept; thresholds are never sorted.
        """
        self.threshold_voltages: np.ndarray = np.asarray(threshold_voltages, dtype=float)
        self.comparators: List[Comparator] = [
            Comparator(threshold_voltage)
            for threshold_voltage in self.threshold_voltages
        ]

    def compare(self, input_signal: Signal) -> List[Signal]:
        """
        Produce one lazy bit signal per comparator.

        Args:
            input_signal: The analog input signal.

        Returns:
            List of bit signals, index k driven by threshold k.
        """
        return [input_signal.map(comparator_k) for comparator_k in self.comparators]

    def compare_samples(self, samples: np.ndarray) -> np.ndarray:
        """
        Evaluate every comparator on a finite block of samples at once.

        Equivalent to materializing compare() on the same samples.

        Args:
            samples: 1D array of input voltages.

        Returns:
            np.ndarray: Integer bit matrix of shape (comparators, samples).
        """
        samples = np.atleast_1d(np.asarray(samples, dtype=float))

        # threshold <= input  →  0, otherwise 1 (NaN compares False → 1)
        threshold_reached: np.ndarray = (
            self.threshold_voltages[:, np.newaxis] <= samples[np.newaxis, :]
        )
        return np.where(threshold_reached, 0, 1).astype(np.int64)

    def get_number_of_comparators(self) -> int:
        """Return the number of comparators."""
        return len(self.comparators)


def compare_network(input_signal: Signal, threshold_voltages: Sequence[float]) -> List[Signal]:
    """Apply a comparator per threshold to the same input signal."""
    return ComparatorArray(threshold_voltages).compare(input_signal)
