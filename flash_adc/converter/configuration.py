"""
Flash ADC Configuration
=======================

Holds the static parameters of a flash ADC: the resistor ladder and the
supply voltage. The supply voltage is an explicit parameter (default
1.0 V) so the same ladder can be reused at any full-scale voltage.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from .resistor_ladder import convert_ladder_parameters, validate_resistor_values


@dataclass
class FlashADCConfiguration:
    """
    Configuration parameters for a flash ADC.

    Attributes:
        resistor_values: Ladder resistances (Ohm), ground end first.
            At least 2 values; N resistors give N-1 comparators.
        supply_voltage: Voltage across the ladder (V).
        strict_resistor_check: If True, non-positive resistor values raise
            ConfigurationError. If False they are accepted with a warning.
    """
    resistor_values: Sequence[float]
    supply_voltage: float = 1.0
    strict_resistor_check: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate parameters after initialization."""
        values, self.supply_voltage = convert_ladder_parameters(
            self.resistor_values, self.supply_voltage
        )
        self.resistor_values = tuple(values)

        validate_resistor_values(
            self.resistor_values,
            self.supply_voltage,
            self.strict_resistor_check
        )

    @classmethod
    def uniform(
        cls,
        number_of_resistors: int,
        resistance_ohms: float = 1000.0,
        supply_voltage: float = 1.0
    ) -> "FlashADCConfiguration":
        """
        Build an ideal ladder of equal resistors.

        A b-bit flash ADC uses 2^b resistors and 2^b - 1 comparators.
        """
        return cls(
            resistor_values=[resistance_ohms] * number_of_resistors,
            supply_voltage=supply_voltage
        )

    def get_number_of_comparators(self) -> int:
        """Return the number of comparators (N-1)."""
        return len(self.resistor_values) - 1

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "number_of_resistors": len(self.resistor_values),
            "number_of_comparators": self.get_number_of_comparators(),
            "total_resistance_ohms": sum(self.resistor_values),
            "supply_voltage": self.supply_voltage,
            "strict_resistor_check": self.strict_resistor_check
        }
