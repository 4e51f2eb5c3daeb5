"""
Thermometer Code Statistics
===========================

With monotonic thresholds the comparator outputs form a thermometer
code. Under the comparator rule used by this model (bit = 1 when the
threshold is above the input) a valid code word, read in ladder order,
is a run of 0s followed by a run of 1s:

    0 0 0 1 1     valid
    0 1 0 1 1     bubble at position 1

A bubble is a position k where bit[k] = 1 and bit[k+1] = 0. Bubbles
appear only when the ladder produces non-monotonic thresholds, e.g.
with non-positive resistor values.
"""

import numpy as np


def count_bubbles(bit_matrix: np.ndarray) -> np.ndarray:
    """
    Count thermometer-code bubbles in every sample.

    Args:
        bit_matrix: Comparator outputs, shape (comparators, samples).

    Returns:
        np.ndarray: Number of bubbles per sample.
    """
    bit_matrix = np.asarray(bit_matrix, dtype=np.int64)
    if bit_matrix.shape[0] < 2:
        return np.zeros(bit_matrix.shape[1], dtype=np.int64)

    falling_edges: np.ndarray = (bit_matrix[:-1, :] == 1) & (bit_matrix[1:, :] == 0)
    return falling_edges.sum(axis=0)


def is_thermometer_code(bit_matrix: np.ndarray) -> bool:
    """Return True if no sample of the bit matrix contains a bubble."""
    return not np.any(count_bubbles(bit_matrix))


def compute_code_histogram(codes: np.ndarray, number_of_codes: int) -> np.ndarray:
    """
    Count how often each output code occurs.

    Args:
        codes: Output codes, integers in [0, number_of_codes - 1].
        number_of_codes: Number of possible codes (comparators + 1).

    Returns:
        np.ndarray: Occurrence count for every code.
    """
    return np.bincount(np.asarray(codes, dtype=np.int64), minlength=number_of_codes)
