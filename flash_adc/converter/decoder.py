"""
Thermometer Decoder Module
==========================

Turns the comparator outputs into one integer code per sample.

The decoder is a point-wise sum: at every clock tick, the code is the
number of comparators whose bit is 1. The bit signals are folded left to
right with point-wise addition; since addition is associative the fold
order does not change the result.
"""

import operator
from typing import Optional, Sequence

import numpy as np

from ..signals.synchronous_signal import Signal, fold_sy


class ThermometerDecoder:
    """Population-count decoder for thermometer-coded comparator outputs."""

    def decode(
        self,
        bit_signals: Sequence[Signal],
        reference_signal: Optional[Signal] = None
    ) -> Signal:
        """
        Sum the bit signals point-wise.

        Args:
            bit_signals: Sample-aligned bit signals, one per comparator.
            reference_signal: Clock reference used only when there are no
                bit signals, so the all-zero code keeps its length. Without
                it, zero channels decode to an infinite zero signal.

        Returns:
            Signal of integer codes.

        Raises:
            AlignmentError: If the bit signals are not sample-aligned.
        """
        if len(bit_signals) == 0:
            if reference_signal is None:
                return Signal.constant(0)
            return reference_signal.map(lambda _: 0)

        return fold_sy(operator.add, list(bit_signals))

    def decode_samples(self, bit_matrix: np.ndarray) -> np.ndarray:
        """
        Decode a (comparators, samples) bit matrix into a code array.

        A matrix with zero rows decodes to all-zero codes.
        """
        bit_matrix = np.asarray(bit_matrix, dtype=np.int64)
        if bit_matrix.ndim != 2:
            raise ValueError(
                f"Bit matrix must be 2D (comparators, samples). "
                f"Received shape: {bit_matrix.shape}"
            )
        return bit_matrix.sum(axis=0)


def decode(
    bit_signals: Sequence[Signal],
    reference_signal: Optional[Signal] = None
) -> Signal:
    """Point-wise sum of bit signals. See ThermometerDecoder.decode()."""
    return ThermometerDecoder().decode(bit_signals, reference_signal)
