"""
Flash ADC Reference Model Package
=================================

This package provides a discrete-time, synchronous reference model of a
flash analog-to-digital converter (ADC). It is intended for teaching and
verifying flash-ADC quantization behavior one sample per clock tick.

The conversion pipeline is:
[Resistor Ladder] → [Comparator Array] → [Thermometer Decoder]

Package Structure:
- signals/: Synchronous signal abstraction and test input generation
- converter/: Resistor ladder, comparators, decoder and the flash ADC
- metrics/: Static linearity and thermometer-code statistics
- simulation/: Simulation orchestration
"""

import logging

from .errors import FlashADCError, ConfigurationError, AlignmentError
from .converter import FlashADC, FlashADCConfiguration, flash_adc
from .signals import Signal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "FlashADCError",
    "ConfigurationError",
    "AlignmentError",
    "FlashADC",
    "FlashADCConfiguration",
    "flash_adc",
    "Signal",
]
