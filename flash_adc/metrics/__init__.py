"""
Metrics Module
==============

This module contains functions for characterizing a flash ADC:
- Static linearity (LSB, DNL, INL, transfer characteristic)
- Thermometer-code statistics (bubbles, code histogram)
"""

from .static_linearity import (
    compute_least_significant_bit,
    compute_ideal_thresholds,
    compute_dnl_inl,
    compute_transfer_characteristic
)
from .thermometer_code import (
    count_bubbles,
    is_thermometer_code,
    compute_code_histogram
)

__all__ = [
    "compute_least_significant_bit",
    "compute_ideal_thresholds",
    "compute_dnl_inl",
    "compute_transfer_characteristic",
    "count_bubbles",
    "is_thermometer_code",
    "compute_code_histogram",
]
