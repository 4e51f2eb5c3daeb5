"""
Flash ADC Examples
==================

This script demonstrates the flash ADC reference model.

Examples include:
1. Converting a few samples with the flash_adc() pipeline
2. Running a full simulation and printing the summary
3. Converting an unbounded input lazily
4. Comparing ideal and mismatched resistor ladders

Usage:
    python examples/flash_adc_example.py

Or import and use functions:
    from examples.flash_adc_example import example_pipeline
"""

import logging

import numpy as np

from flash_adc import FlashADC, FlashADCConfiguration, Signal, flash_adc
from flash_adc.converter import generate_thresholds
from flash_adc.simulation import SimulationConfiguration, SimulationRunner


def example_pipeline():
    """
    Example 1: Four equal resistors, three comparators.

    NOTE: codes fall as the input rises (bit = 1 when threshold > input).
    """
    print("\n" + "=" * 60)
    print("EXAMPLE 1: flash_adc() pipeline")
    print("=" * 60)

    resistors = [1.0, 1.0, 1.0, 1.0]
    print(f"  Thresholds: {generate_thresholds(resistors)}")

    input_signal = Signal.from_samples([0.1, 0.3, 0.6, 0.9, 0.5])
    codes = flash_adc(resistors, input_signal).to_list()

    for sample, code in zip(input_signal, codes):
        print(f"  input = {sample:.2f} V  →  code = {code}")


def example_simulation():
    """
    Example 2: 3-bit converter driven by a full-scale ramp.
    """
    print("\n" + "=" * 60)
    print("EXAMPLE 2: Ramp simulation of a 3-bit flash ADC")
    print("=" * 60)

    config = SimulationConfiguration(
        resistor_values=[1000.0] * 8,
        waveform="ramp",
        number_of_samples=2048
    )
    results = SimulationRunner(config).run()
    results.print_summary()


def example_unbounded_input():
    """
    Example 3: A lazy, infinite sine input, truncated only at the output.
    """
    print("\n" + "=" * 60)
    print("EXAMPLE 3: Unbounded input")
    print("=" * 60)

    adc = FlashADC(FlashADCConfiguration.uniform(16))
    sine = Signal.from_function(lambda n: 0.5 + 0.45 * np.sin(2.0 * np.pi * n / 32.0))

    first_period = adc.convert(sine).take(32).to_list()
    print(f"  First period of codes: {first_period}")


def example_mismatched_ladder():
    """
    Example 4: Compare ladders with growing resistor mismatch.
    """
    print("\n" + "=" * 60)
    print("EXAMPLE 4: Resistor mismatch sweep")
    print("=" * 60)

    rng = np.random.default_rng(seed=7)
    ladders = [[1000.0] * 8]
    for sigma in (0.01, 0.05, 0.2):
        ladders.append((1000.0 * (1.0 + sigma * rng.standard_normal(8))).tolist())

    runner = SimulationRunner(SimulationConfiguration(waveform="ramp", number_of_samples=2048))
    sweep = runner.sweep_resistor_configurations(ladders)

    for entry in sweep['all_results']:
        print(f"  INL = {entry['peak_inl_lsb']:.3f} LSB, "
              f"DNL = {entry['peak_dnl_lsb']:.3f} LSB, "
              f"bubbles = {entry['total_bubbles']}")


def run_all_examples():
    """
    Run all examples in sequence.
    """
    example_pipeline()
    example_simulation()
    example_unbounded_input()
    example_mismatched_ladder()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_all_examples()
