"""
Simulation Module
=================

This module provides the simulation orchestration layer that ties
together all components of the flash ADC simulation.
"""

from .simulation_runner import SimulationRunner, SimulationConfiguration, SimulationResults

__all__ = ["SimulationRunner", "SimulationConfiguration", "SimulationResults"]
