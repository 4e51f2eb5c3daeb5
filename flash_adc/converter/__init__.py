"""
Converter Module
================

This module contains the flash ADC components: the resistor ladder that
generates thresholds, the comparator array and the thermometer decoder.
"""

from .configuration import FlashADCConfiguration
from .resistor_ladder import (
    ResistorLadder,
    generate_thresholds,
    convert_ladder_parameters,
    thresholds_are_monotonic,
    validate_resistor_values
)
from .comparator import Comparator, ComparatorArray, comparator, compare_network
from .decoder import ThermometerDecoder, decode
from .flash_adc_converter import FlashADC, flash_adc

__all__ = [
    "FlashADCConfiguration",
    "ResistorLadder",
    "generate_thresholds",
    "thresholds_are_monotonic",
    "convert_ladder_parameters",
    "validate_resistor_values",
    "Comparator",
    "ComparatorArray",
    "comparator",
    "compare_network",
    "ThermometerDecoder",
    "decode",
    "FlashADC",
    "flash_adc",
]
