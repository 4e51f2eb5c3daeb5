"""
Error Types
===========

Exceptions raised by the flash ADC model.

Both concrete errors derive from ValueError so callers that already guard
parameter validation with ``except ValueError`` keep working.
"""


class FlashADCError(Exception):
    """Base class for all flash ADC model errors."""


class ConfigurationError(FlashADCError, ValueError):
    """
    Raised when a converter or simulation is configured with invalid values.

    Examples: fewer than two resistors, a non-positive supply voltage,
    or (in strict mode) a non-positive resistor value.
    """


class AlignmentError(FlashADCError, ValueError):
    """
    Raised when signals that are not sample-aligned are combined point-wise.
    """
