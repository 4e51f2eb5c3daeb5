"""
Flash ADC Module
================

This is the CORE module of the flash ADC model. It wires the three
stages together:

================================================================================
ARCHITECTURE
================================================================================

                 Vdd
                  │
                 [R_N]
                  ├──────────── V_thr[N-2] ──►(-)
                  │                               [CMP N-2]──► bit[N-2] ──┐
                 ...                     input ──►(+)                      │
                  ├──────────── V_thr[1]   ──►(-)                          │
                 [R_2]                            [CMP 1]  ──► bit[1]   ──┼──►[Decoder]──► code
                  ├──────────── V_thr[0]   ──►(-)                          │
                 [R_1]                   input ──►(+)                      │
                  │                               [CMP 0]  ──► bit[0]   ──┘
                 GND

    flash_adc(resistors, input) = decode(compare(input, thresholds(resistors)))

All stages are stateless: code[n] depends only on input[n] and the
static thresholds. Every comparator decides in the same clock tick, so
the conversion completes in one cycle (no successive approximation).

Two evaluation paths produce identical codes:
- convert():         lazy, sample-by-sample on synchronous Signals
                     (works with unbounded inputs)
- convert_samples(): vectorized numpy evaluation of a finite block,
                     all channels and all samples at once
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .configuration import FlashADCConfiguration
from .resistor_ladder import ResistorLadder, generate_thresholds
from .comparator import ComparatorArray, compare_network
from .decoder import ThermometerDecoder, decode
from ..signals.synchronous_signal import Signal

log = logging.getLogger(__name__)


class FlashADC:
    """
    Flash ADC built from a resistor ladder, a comparator array and a decoder.

    Attributes:
        configuration (FlashADCConfiguration): Ladder and supply parameters.
        resistor_ladder (ResistorLadder): Threshold generator.
        threshold_voltages (np.ndarray): The N-1 comparator thresholds.
        comparator_array (ComparatorArray): One comparator per threshold.
        decoder (ThermometerDecoder): Point-wise summing decoder.
    """

    def __init__(self, configuration: FlashADCConfiguration) -> None:
        """
        Initialize the flash ADC.

        Args:
            configuration: Validated ladder configuration.
        """
        self.configuration: FlashADCConfiguration = configuration

        # ===== THRESHOLD GENERATOR =====
        self.resistor_ladder: ResistorLadder = ResistorLadder(
            resistor_values=configuration.resistor_values,
            supply_voltage=configuration.supply_voltage,
            strict_resistor_check=configuration.strict_resistor_check
        )
        self.threshold_voltages: np.ndarray = self.resistor_ladder.thresholds()

        if not self.resistor_ladder.is_monotonic():
            log.warning(
                "Thresholds %s are not monotonic; outputs may contain "
                "thermometer-code bubbles",
                np.round(self.threshold_voltages, 6).tolist()
            )

        # ===== COMPARATORS AND DECODER =====
        self.comparator_array: ComparatorArray = ComparatorArray(self.threshold_voltages)
        self.decoder: ThermometerDecoder = ThermometerDecoder()

        log.debug(
            "Flash ADC with %d comparators, thresholds=%s",
            self.get_number_of_comparators(),
            self.threshold_voltages.tolist()
        )

    def convert_bits(self, input_signal: Signal) -> List[Signal]:
        """Return the comparator bit signals for an input signal."""
        return self.comparator_array.compare(input_signal)

    def convert(self, input_signal: Signal) -> Signal:
        """
        Convert an input signal into a lazy signal of integer codes.

        Args:
            input_signal: Analog input, one voltage per clock tick.
                May be unbounded.

        Returns:
            Signal of codes in [0, number_of_comparators].
        """
        return self.decoder.decode(
            self.convert_bits(input_signal),
            reference_signal=input_signal
        )

    def convert_samples_with_bits(self, samples: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Convert a finite block of samples, also returning the comparator bits.

        Returns:
            Tuple of (codes with shape (samples,), bits with shape
            (comparators, samples)).
        """
        bit_matrix: np.ndarray = self.comparator_array.compare_samples(samples)
        codes: np.ndarray = self.decoder.decode_samples(bit_matrix)
        return codes, bit_matrix

    def convert_samples(self, samples: np.ndarray) -> np.ndarray:
        """Convert a finite block of samples into a code array."""
        codes, _ = self.convert_samples_with_bits(samples)
        return codes

    def get_number_of_comparators(self) -> int:
        """Return the number of comparators (N-1 for N resistors)."""
        return self.comparator_array.get_number_of_comparators()

    def get_number_of_codes(self) -> int:
        """Return the number of distinct output codes (comparators + 1)."""
        return self.get_number_of_comparators() + 1


def flash_adc(
    resistor_values: Sequence[float],
    input_signal: Signal,
    supply_voltage: float = 1.0
) -> Signal:
    """
    Convert an input signal with a flash ADC built from ``resistor_values``.

    Pure function of its inputs. The resistor list is validated before the
    pipeline is built.

    Args:
        resistor_values: At least two ladder resistances, ground end first.
        input_signal: Analog input signal.
        supply_voltage: Voltage across the ladder. Default 1.0 V.

    Returns:
        Signal of integer codes, sample-aligned with the input.

    Raises:
        ConfigurationError: If the resistor list is invalid.
    """
    threshold_voltages: List[float] = generate_thresholds(resistor_values, supply_voltage)
    return decode(
        compare_network(input_signal, threshold_voltages),
        reference_signal=input_signal
    )
