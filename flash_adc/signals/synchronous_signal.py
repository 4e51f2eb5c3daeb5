"""
Synchronous Signal
==================

This module provides the synchronous signal abstraction used by every
stage of the flash ADC model.

A synchronous signal is an ordered sequence of samples indexed by a
discrete global clock: sample n of every signal belongs to the same
clock tick n. Signals are combined ONLY point-wise, sample index by
sample index, which requires the signals to be sample-aligned.

Signals are lazy. A Signal wraps a factory that produces a fresh iterator
each time the signal is iterated, so a signal can be replayed by
regenerating it from its definition. Nothing is memoized.

Process constructors (named after the synchronous model of computation):
    map_sy(f, s)          y[n] = f(s[n])
    zip_with_sy(f, a, b)  y[n] = f(a[n], b[n])
    fold_sy(f, [s1..sk])  y[n] = f(...f(f(s1[n], s2[n]), s3[n])..., sk[n])
"""

import functools
import itertools
import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

import numpy as np

from ..errors import AlignmentError

log = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# Marks the end of an iterator inside the aligned zip
_END_OF_SIGNAL = object()


class Signal(Generic[T]):
    """
    A lazy, possibly infinite, synchronous sequence of samples.

    Attributes:
        length (Optional[int]): Number of samples when known up front.
            None means the length is unknown or the signal is infinite.
    """

    def __init__(
        self,
        iterator_factory: Callable[[], Iterator[T]],
        length: Optional[int] = None
    ) -> None:
        """
        Create a signal from an iterator factory.

        Args:
            iterator_factory: Zero-argument callable returning a NEW iterator
                over the samples every time it is called.
            length: Number of samples, if known. None for unknown/infinite.
        """
        if length is not None and length < 0:
            raise ValueError(f"Signal length must be non-negative. Received: {length}")

        self._iterator_factory: Callable[[], Iterator[T]] = iterator_factory
        self.length: Optional[int] = length

    # ===== CONSTRUCTORS =====

    @classmethod
    def from_samples(cls, samples: Iterable[T]) -> "Signal[T]":
        """
        Create a finite signal from a sequence of samples.

        The samples are copied once, so the resulting signal can be
        iterated any number of times.
        """
        if isinstance(samples, np.ndarray):
            stored_samples: tuple = tuple(samples.tolist())
        else:
            stored_samples = tuple(samples)
        return cls(lambda: iter(stored_samples), len(stored_samples))

    @classmethod
    def from_function(
        cls,
        sample_function: Callable[[int], T],
        length: Optional[int] = None
    ) -> "Signal[T]":
        """
        Create a signal whose sample n is ``sample_function(n)``.

        With length None the signal is infinite.
        """
        if length is None:
            return cls(lambda: map(sample_function, itertools.count()))
        return cls(lambda: map(sample_function, range(length)), length)

    @classmethod
    def constant(cls, value: T, length: Optional[int] = None) -> "Signal[T]":
        """Create a signal repeating ``value`` (infinite when length is None)."""
        if length is None:
            return cls(lambda: itertools.repeat(value))
        return cls(lambda: itertools.repeat(value, length), length)

    # ===== ITERATION =====

    def __iter__(self) -> Iterator[T]:
        return self._iterator_factory()

    def is_bounded(self) -> bool:
        """Return True if the number of samples is known."""
        return self.length is not None

    # ===== COMBINATORS =====

    def map(self, function: Callable[[T], U]) -> "Signal[U]":
        """Apply ``function`` to every sample: y[n] = function(x[n])."""
        return Signal(lambda: map(function, self._iterator_factory()), self.length)

    def zip_with(
        self,
        other: "Signal[U]",
        function: Callable[[T, U], V]
    ) -> "Signal[V]":
        """
        Combine two sample-aligned signals point-wise.

        y[n] = function(self[n], other[n])

        Raises:
            AlignmentError: Immediately if both lengths are known and differ,
                or during iteration at the first index where one signal
                ends before the other.
        """
        if (
            self.length is not None
            and other.length is not None
            and self.length != other.length
        ):
            raise AlignmentError(
                f"Cannot combine signals of different lengths point-wise. "
                f"Received lengths {self.length} and {other.length}"
            )

        length: Optional[int] = self.length if self.length is not None else other.length
        return Signal(lambda: _zip_aligned(self, other, function), length)

    def take(self, number_of_samples: int) -> "Signal[T]":
        """Return the first ``number_of_samples`` samples as a new signal."""
        if number_of_samples < 0:
            raise ValueError(
                f"Number of samples must be non-negative. Received: {number_of_samples}"
            )

        length: Optional[int] = None
        if self.length is not None:
            length = min(number_of_samples, self.length)

        return Signal(
            lambda: itertools.islice(self._iterator_factory(), number_of_samples),
            length
        )

    # ===== MATERIALIZATION =====

    def to_list(self) -> List[T]:
        """Collect all samples of a FINITE signal into a list."""
        return list(self._iterator_factory())

    def to_array(self, dtype=None) -> np.ndarray:
        """Collect all samples of a FINITE signal into a numpy array."""
        return np.fromiter(self._iterator_factory(), dtype=dtype or float)

    def __repr__(self) -> str:
        length_text: str = "unbounded" if self.length is None else str(self.length)
        return f"Signal(length={length_text})"


def _zip_aligned(
    left: Signal,
    right: Signal,
    function: Callable
) -> Iterator:
    """Yield function(left[n], right[n]) and fail if one signal ends early."""
    left_iterator = iter(left)
    right_iterator = iter(right)

    for sample_index in itertools.count():
        left_sample = next(left_iterator, _END_OF_SIGNAL)
        right_sample = next(right_iterator, _END_OF_SIGNAL)

        if left_sample is _END_OF_SIGNAL and right_sample is _END_OF_SIGNAL:
            return

        if left_sample is _END_OF_SIGNAL or right_sample is _END_OF_SIGNAL:
            ended: str = "left" if left_sample is _END_OF_SIGNAL else "right"
            raise AlignmentError(
                f"Signals are not sample-aligned: the {ended} signal ended "
                f"at sample index {sample_index} while the other continued"
            )

        yield function(left_sample, right_sample)


def map_sy(function: Callable[[T], U], signal: Signal[T]) -> Signal[U]:
    """Process constructor: y[n] = function(x[n])."""
    return signal.map(function)


def zip_with_sy(
    function: Callable[[T, U], V],
    first_signal: Signal[T],
    second_signal: Signal[U]
) -> Signal[V]:
    """Process constructor: y[n] = function(a[n], b[n])."""
    return first_signal.zip_with(second_signal, function)


def fold_sy(function: Callable[[T, T], T], signals: Sequence[Signal[T]]) -> Signal[T]:
    """
    Left-fold a non-empty list of signals with a point-wise binary operator.

    All signals are advanced together, one sample each per clock tick, so
    the cost per tick does not nest with the number of signals.

    Raises:
        ValueError: If ``signals`` is empty.
        AlignmentError: Immediately if two known lengths differ, or during
            iteration at the first index where one signal ends early.
    """
    if len(signals) == 0:
        raise ValueError("Cannot fold an empty list of signals")

    signals = list(signals)
    known_lengths: List[int] = [
        signal.length for signal in signals if signal.length is not None
    ]
    if len(set(known_lengths)) > 1:
        raise AlignmentError(
            f"Cannot combine signals of different lengths point-wise. "
            f"Received lengths {sorted(set(known_lengths))}"
        )

    length: Optional[int] = known_lengths[0] if known_lengths else None

    log.debug("Folded %d signals point-wise", len(signals))
    return Signal(lambda: _fold_aligned(signals, function), length)


def _fold_aligned(signals: List[Signal], function: Callable) -> Iterator:
    """Yield reduce(function, [s[n] for s in signals]) in lock-step."""
    iterators: List[Iterator] = [iter(signal) for signal in signals]

    for sample_index in itertools.count():
        samples: List = [next(iterator, _END_OF_SIGNAL) for iterator in iterators]
        ended: List[int] = [
            position for position, sample in enumerate(samples)
            if sample is _END_OF_SIGNAL
        ]

        if len(ended) == len(samples):
            return

        if ended:
            raise AlignmentError(
                f"Signals are not sample-aligned: signal(s) {ended} ended "
                f"at sample index {sample_index} while the others continued"
            )

        yield functools.reduce(function, samples)
