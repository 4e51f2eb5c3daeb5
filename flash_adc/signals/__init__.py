"""
Signals Module
==============

This module contains the synchronous signal abstraction and the classes
for generating and storing the signals of a flash ADC simulation.
"""

from .synchronous_signal import Signal, map_sy, zip_with_sy, fold_sy
from .analog_signal_generator import AnalogSignalGenerator
from .signal_container import SignalContainer

__all__ = [
    "Signal",
    "map_sy",
    "zip_with_sy",
    "fold_sy",
    "AnalogSignalGenerator",
    "SignalContainer",
]
