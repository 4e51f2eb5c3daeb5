"""
Tests for the comparator and the comparator array.

The comparator uses an inverted polarity:
bit = 0 when threshold <= input, 1 otherwise. A conventional flash ADC
uses the opposite polarity; these tests pin the current behavior.
"""

import math

import numpy as np
import pytest

from flash_adc.converter import Comparator, ComparatorArray, comparator, compare_network
from flash_adc.signals import Signal


class TestComparator:
    """Single comparator decisions."""

    def test_threshold_below_input(self):
        assert comparator(0.6, 0.25) == 0

    def test_threshold_above_input(self):
        assert comparator(0.6, 0.75) == 1

    @pytest.mark.parametrize("voltage", [0.0, 0.25, 0.5, 1.0, -3.0])
    def test_tie_gives_zero(self, voltage):
        """Input exactly equal to the threshold outputs 0."""
        assert comparator(voltage, voltage) == 0

    def test_no_tolerance_band(self):
        assert comparator(0.5 - 1e-15, 0.5) == 1

    def test_nan_input_asserts_bit(self):
        """NaN compares False, so the bit is 1."""
        assert comparator(math.nan, 0.5) == 1

    def test_comparator_object_is_callable(self):
        comparator_half = Comparator(0.5)
        assert comparator_half(0.7) == 0
        assert comparator_half.compare(0.3) == 1
        assert comparator_half.threshold_voltage == 0.5


class TestComparatorArray:
    """Bank of comparators sharing one input."""

    def test_scenario_bits(self):
        """Thresholds [0.25, 0.5, 0.75] and input 0.6 give bits [0, 0, 1]."""
        bit_signals = compare_network(Signal.from_samples([0.6]), [0.25, 0.5, 0.75])
        assert [bits.to_list() for bits in bit_signals] == [[0], [0], [1]]

    def test_one_signal_per_threshold(self):
        array = ComparatorArray([0.1, 0.2, 0.3, 0.4])
        bit_signals = array.compare(Signal.from_samples([0.0, 0.5]))

        assert array.get_number_of_comparators() == 4
        assert len(bit_signals) == 4
        assert all(bits.length == 2 for bits in bit_signals)

    def test_no_thresholds(self):
        assert ComparatorArray([]).compare(Signal.from_samples([0.3])) == []

    def test_bits_are_binary(self):
        rng = np.random.default_rng(seed=1)
        samples = rng.uniform(-0.5, 1.5, size=200)
        bit_matrix = ComparatorArray([0.2, 0.4, 0.6, 0.8]).compare_samples(samples)
        assert set(np.unique(bit_matrix)) <= {0, 1}

    def test_vectorized_matches_lazy(self):
        thresholds = [0.25, 0.5, 0.75]
        samples = [0.0, 0.25, 0.3, 0.5, 0.6, 0.75, 0.9, 1.0, math.nan]
        array = ComparatorArray(thresholds)

        lazy_bits = np.array([bits.to_list() for bits in array.compare(Signal.from_samples(samples))])
        vectorized_bits = array.compare_samples(np.array(samples))

        assert vectorized_bits.shape == (3, len(samples))
        np.testing.assert_array_equal(lazy_bits, vectorized_bits)

    def test_compare_samples_scalar(self):
        bit_matrix = ComparatorArray([0.5]).compare_samples(0.7)
        assert bit_matrix.shape == (1, 1)
        assert bit_matrix[0, 0] == 0
