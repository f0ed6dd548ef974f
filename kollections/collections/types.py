"""
Callable shapes accepted by the collection operations.

Indexed variants always receive the zero-based position first, followed by
the element (and the accumulator, for folds).
"""

from collections.abc import Callable
from typing import Protocol

type Supplier[R] = Callable[[], R]

type Consumer[T] = Callable[[T], object]
type IndexedConsumer[T] = Callable[[int, T], object]

type Selector[T, R] = Callable[[T], R]
type Transform[T, R] = Callable[[T], R]
type IndexedTransform[T, R] = Callable[[int, T], R]

type Predicate[T] = Callable[[T], bool]
type IndexedPredicate[T] = Callable[[int, T], bool]

type Accumulator[S, T] = Callable[[S, T], S]
type IndexedAccumulator[S, T] = Callable[[int, S, T], S]

type Comparator[T] = Callable[[T, T], int]
"""Negative when the first argument orders before the second, zero when equal, positive otherwise."""

type Comparison[T] = Callable[[T], int]
"""Compares an element against a fixed target: negative when the element orders before it."""


class Writable(Protocol):
    """Anything text can be appended to, such as ``io.StringIO`` or an open text file."""

    def write(self, text: str, /) -> object: ...
