"""
Static Linearity Metrics
========================

Static metrics describe how far a converter's code transitions are from
those of an ideal, uniformly spaced ladder.

For a ladder of N resistors across a supply V:

    LSB            = V / N
    ideal_tap[k]   = (k + 1) * LSB            k = 0 .. N-2

The transition between two adjacent codes happens exactly at a
threshold voltage, so the width of each inner code is the spacing
between neighbouring thresholds:

    DNL[k] = (threshold[k+1] - threshold[k]) / LSB - 1     in LSB
    INL[k] = (threshold[k] - ideal_tap[k]) / LSB             in LSB

An ideal ladder has DNL = INL = 0 everywhere. A DNL of -1 means a code
is missing (two thresholds coincide).
"""

from typing import Tuple

import numpy as np


def compute_least_significant_bit(supply_voltage: float, number_of_resistors: int) -> float:
    """Return the ideal code width (V) of a ladder with ``number_of_resistors``."""
    return supply_voltage / number_of_resistors


def compute_ideal_thresholds(number_of_resistors: int, supply_voltage: float = 1.0) -> np.ndarray:
    """Return the N-1 thresholds of a ladder of N equal resistors."""
    least_significant_bit: float = compute_least_significant_bit(
        supply_voltage, number_of_resistors
    )
    return np.arange(1, number_of_resistors) * least_significant_bit


def compute_dnl_inl(
    threshold_voltages: np.ndarray,
    supply_voltage: float = 1.0
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute DNL and INL from the comparator thresholds.

    Args:
        threshold_voltages: The M = N-1 thresholds in ladder order.
        supply_voltage: Voltage across the ladder.

    Returns:
        Tuple of (DNL with M-1 entries, INL with M entries), both in LSB.
    """
    threshold_voltages = np.asarray(threshold_voltages, dtype=float)
    number_of_resistors: int = len(threshold_voltages) + 1

    least_significant_bit: float = compute_least_significant_bit(
        supply_voltage, number_of_resistors
    )
    ideal_thresholds: np.ndarray = compute_ideal_thresholds(
        number_of_resistors, supply_voltage
    )

    dnl: np.ndarray = np.diff(threshold_voltages) / least_significant_bit - 1.0
    inl: np.ndarray = (threshold_voltages - ideal_thresholds) / least_significant_bit

    return dnl, inl


def compute_transfer_characteristic(
    adc_instance,
    number_of_points: int = 1001
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sweep a ramp across the full input range and record the output codes.

    Args:
        adc_instance: FlashADC to characterize.
        number_of_points: Number of ramp samples from 0 V to the supply.

    Returns:
        Tuple of (input voltages, output codes).
    """
    if number_of_points < 2:
        raise ValueError(
            f"Number of points must be at least 2. Received: {number_of_points}"
        )

    input_voltages: np.ndarray = np.linspace(
        0.0, adc_instance.configuration.supply_voltage, number_of_points
    )
    codes: np.ndarray = adc_instance.convert_samples(input_voltages)

    return input_voltages, codes
