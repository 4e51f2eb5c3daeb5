"""
Resistor Ladder Module
======================

The resistor ladder is the threshold generator of a flash ADC.

A chain of N resistors is connected between ground and the supply
voltage. The tap between resistor k and resistor k+1 sits at the
voltage-divider potential:

    V_tap[k] = supply * (r_1 + ... + r_k) / (r_1 + ... + r_N)

Walking up the ladder gives N+1 cumulative points, starting at 0 V and
ending at the supply. The two boundary points would drive comparators
that are always low or always high, so they are discarded and the N-1
interior taps become the comparator thresholds.

Example (supply = 1 V, four equal resistors):
    ladder points = [0.0, 0.25, 0.5, 0.75, 1.0]
    thresholds    = [0.25, 0.5, 0.75]
"""

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from ..errors import ConfigurationError

log = logging.getLogger(__name__)


def convert_ladder_parameters(
    resistor_values: Sequence[float],
    supply_voltage: float = 1.0
) -> Tuple[List[float], float]:
    """
    Convert resistor values and supply voltage to floats.

    Raises:
        ConfigurationError: If a resistor value or the supply voltage is
            not a number.
    """
    try:
        values: List[float] = [float(resistance) for resistance in resistor_values]
    except (TypeError, ValueError) as error:
        raise ConfigurationError(
            f"Resistor values must be numbers. Received: {resistor_values!r}"
        ) from error

    try:
        supply: float = float(supply_voltage)
    except (TypeError, ValueError) as error:
        raise ConfigurationError(
            f"Supply voltage must be a number. Received: {supply_voltage!r}"
        ) from error

    return values, supply


def validate_resistor_values(
    resistor_values: Sequence[float],
    supply_voltage: float = 1.0,
    strict_resistor_check: bool = False
) -> None:
    """
    Check a resistor list and supply voltage before building a ladder.

    Non-positive resistor values are accepted with a logged warning, unless
    ``strict_resistor_check`` is set, in which case they are rejected.

    Raises:
        ConfigurationError: If fewer than two resistors are given, a value is
            not finite, the total resistance is zero, the supply voltage is
            not positive, or (strict mode) a resistor value is not positive.
    """
    if len(resistor_values) < 2:
        raise ConfigurationError(
            f"A resistor ladder needs at least 2 resistors to produce a threshold. "
            f"Received: {len(resistor_values)}"
        )

    if not math.isfinite(supply_voltage) or supply_voltage <= 0:
        raise ConfigurationError(
            f"Supply voltage must be positive and finite. Received: {supply_voltage} V"
        )

    for position, resistance in enumerate(resistor_values):
        if not math.isfinite(resistance):
            raise ConfigurationError(
                f"Resistor {position} must be finite. Received: {resistance} Ohm"
            )

    non_positive_positions: List[int] = [
        position for position, resistance in enumerate(resistor_values)
        if resistance <= 0
    ]
    if non_positive_positions:
        if strict_resistor_check:
            raise ConfigurationError(
                f"Resistor values must be positive. Non-positive values at "
                f"positions {non_positive_positions}"
            )
        log.warning(
            "Non-positive resistor values at positions %s; thresholds may be "
            "non-monotonic and the output is no longer a thermometer code",
            non_positive_positions
        )

    if sum(resistor_values) == 0:
        raise ConfigurationError("Total ladder resistance must not be zero")


def thresholds_are_monotonic(threshold_voltages: Sequence[float]) -> bool:
    """Return True if the thresholds are non-decreasing in ladder order."""
    return bool(np.all(np.diff(np.asarray(threshold_voltages, dtype=float)) >= 0))


class ResistorLadder:
    """
    Voltage-divider ladder producing the comparator thresholds.

    Attributes:
        resistor_values (np.ndarray): Resistances in ladder order (Ohm),
            from the ground end to the supply end.
        supply_voltage (float): Voltage across the whole ladder.
        total_resistance (float): Sum of all resistor values.
    """

    def __init__(
        self,
        resistor_values: Sequence[float],
        supply_voltage: float = 1.0,
        strict_resistor_check: bool = False
    ) -> None:
        """
        Initialize the resistor ladder.

        Args:
            resistor_values: At least two resistances, in ladder order.
            supply_voltage: Voltage across the ladder. Default 1.0 V.
            strict_resistor_check: Reject non-positive resistor values
                instead of warning about them.

        Raises:
            ConfigurationError: See validate_resistor_values().
        """
        values, supply = convert_ladder_parameters(resistor_values, supply_voltage)
        validate_resistor_values(values, supply, strict_resistor_check)

        self.resistor_values: np.ndarray = np.asarray(values, dtype=float)
        self.supply_voltage: float = supply
        self.total_resistance: float = float(np.sum(self.resistor_values))

    def ladder_points(self) -> np.ndarray:
        """
        Return all N+1 cumulative tap voltages, boundaries included.

        points[0] = 0 and points[N] = supply (up to floating-point rounding).
        """
        voltage_steps: np.ndarray = (
            self.supply_voltage * self.resistor_values / self.total_resistance
        )
        return np.concatenate(([0.0], np.cumsum(voltage_steps)))

    def thresholds(self) -> np.ndarray:
        """Return the N-1 interior tap voltages in ladder order."""
        return self.ladder_points()[1:-1]

    def get_number_of_resistors(self) -> int:
        """Return N, the number of resistors."""
        return len(self.resistor_values)

    def get_number_of_thresholds(self) -> int:
        """Return N-1, the number of comparator thresholds."""
        return len(self.resistor_values) - 1

    def is_monotonic(self) -> bool:
        """Return True if the thresholds never decrease along the ladder."""
        return thresholds_are_monotonic(self.thresholds())


def generate_thresholds(
    resistor_values: Sequence[float],
    supply_voltage: float = 1.0
) -> List[float]:
    """
    Convert an ordered resistor list into comparator threshold voltages.

    >>> generate_thresholds([1, 1, 1, 1])
    [0.25, 0.5, 0.75]
    """
    return ResistorLadder(resistor_values, supply_voltage).thresholds().tolist()
