"""
The mutable, ordered list at the heart of the package.

``MutableList`` owns a builtin ``list`` as its growable buffer and exposes it through
the ``collections.abc.MutableSequence`` protocol plus a Kotlin-style set of
functional combinators. Operations fall in two families:

* Copying operations (``map``, ``filter``, ``sorted_with``, ``plus``, ...) return a
  new ``MutableList`` and never touch the receiver.
* In-place operations (``add``, ``remove_all``, ``sort_with``, ``plus_assign``, ...)
  mutate the receiver and keep its identity.

Elements are stored by reference: copies are shallow.

Mutating a list while one of its own operations iterates over it (for example from
inside a ``for_each`` action) is not supported and has undefined results.
"""

from __future__ import annotations

import io
import logging
import random as _random
import sys
from collections.abc import (
    Awaitable,
    Callable,
    Container,
    Iterable,
    Iterator,
    MutableMapping,
    MutableSequence,
    Sequence,
)
from functools import cmp_to_key
from numbers import Real
from typing import Any, Literal, Self, cast, overload, override

import numpy.typing as npt
from pydantic import ValidationError

from kollections.collections.exceptions import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    InvalidArgumentError,
    NoNonNullResultError,
    NoSuchElementError,
    RangeError,
)
from kollections.collections.functions.compare_values import compare_values
from kollections.collections.functions.deep_equals import deep_equals
from kollections.collections.functions.is_collection import is_collection
from kollections.collections.functions.is_pair import is_pair
from kollections.collections.join_options import JoinOptions
from kollections.collections.numeric.typed_array_converter import to_typed_array
from kollections.collections.types import (
    Accumulator,
    Comparator,
    Comparison,
    Consumer,
    IndexedAccumulator,
    IndexedConsumer,
    IndexedPredicate,
    IndexedTransform,
    Predicate,
    Selector,
    Supplier,
    Transform,
    Writable,
)
from kollections.coroutines.await_all import await_all, await_all_async

logger = logging.getLogger(__name__)

type _KeyKind = Literal["none", "number", "string"]


class _Membership[E](Container[E]):
    """Equality lookup over a materialized collection, hashed when possible."""

    def __init__(self, elements: Iterable[E]) -> None:
        self._items: list[E] = list(elements)
        self._lookup: Container[E]
        try:
            self._lookup = set(self._items)
        except TypeError:
            # unhashable elements
            self._lookup = self._items

    @override
    def __contains__(self, value: object) -> bool:
        try:
            return value in self._lookup
        except TypeError:
            # unhashable probe against a hashed lookup
            return value in self._items

    def __len__(self) -> int:
        return len(self._items)


def _key_kind(value: object) -> _KeyKind | None:
    if value is None:
        return "none"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Real) and not isinstance(value, bool):
        return "number"
    return None


def _append_flattened(destination: MutableSequence[Any], value: object) -> None:
    if is_collection(value):
        destination.extend(value)
    else:
        destination.append(value)


class MutableList[T](MutableSequence[T]):
    """
    A dynamically sized, index-addressable, mutable sequence of ``T``.

    Indices ``0..size - 1`` are always occupied and ``size`` is the single source of
    truth for every bounds check. Plain indexing (``lst[i]``, ``lst[a:b]``) follows
    Python's rules, including negative indices; the named accessors (``get``,
    ``set``, ``add_at``, ``remove_at``) only accept indices inside the list and raise
    ``IndexOutOfRangeError`` otherwise.

    Operations that may legitimately find nothing exist in two forms: the plain form
    raises (``EmptyCollectionError``, ``NoSuchElementError``, ``NoNonNullResultError``)
    and the ``*_or_none`` form returns ``None``.

    Example:
        ```python
        from kollections import list_of

        numbers = list_of(3, 1, 2)
        numbers.sort_with(lambda a, b: a - b)  # numbers is now [1, 2, 3]
        numbers.chunked(2)  # [[1, 2], [3]]
        numbers.binary_search(2)  # 1
        list_of().remove_first_or_none()  # None
        ```
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: list[T] = list(elements)

    @classmethod
    def of(cls, *elements: T) -> MutableList[T]:
        return cls(elements)

    @classmethod
    def from_iterable[S](
        cls, iterable: Iterable[S], transform: Transform[S, T] | None = None
    ) -> MutableList[T]:
        """Builds a list from ``iterable``, optionally transforming every element."""
        if transform is None:
            return cls(cast(Iterable[T], iterable))

        return cls(transform(element) for element in iterable)

    @staticmethod
    def is_list(obj: object) -> bool:
        return isinstance(obj, MutableList)

    # MutableSequence protocol

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> MutableList[T]: ...

    @override
    def __getitem__(self, index: int | slice) -> T | MutableList[T]:
        if isinstance(index, slice):
            return MutableList(self._elements[index])
        return self._elements[index]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    @override
    def __setitem__(self, index: int | slice, value: Any) -> None:
        self._elements[index] = value

    @override
    def __delitem__(self, index: int | slice) -> None:
        del self._elements[index]

    @override
    def __len__(self) -> int:
        return len(self._elements)

    @override
    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    @override
    def __contains__(self, value: object) -> bool:
        return value in self._elements

    @override
    def insert(self, index: int, value: T) -> None:
        self.add_at(index, value)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"MutableList({self._elements!r})"

    @override
    def __str__(self) -> str:
        return self.join_to_string(prefix="[", postfix="]")

    def __add__(self, other: Iterable[T]) -> MutableList[T]:
        return self.plus(other)

    @override
    def __iadd__(self, other: Iterable[T]) -> Self:
        self.plus_assign(other)
        return self

    def __sub__(self, other: Iterable[T]) -> MutableList[T]:
        return self.minus(other)

    def __isub__(self, other: Iterable[T]) -> Self:
        self.minus_assign(other)
        return self

    # Size and bounds

    @property
    def size(self) -> int:
        return len(self._elements)

    @property
    def length(self) -> int:
        return len(self._elements)

    @property
    def last_index(self) -> int:
        return len(self._elements) - 1

    @property
    def indices(self) -> range:
        return range(len(self._elements))

    def is_empty(self) -> bool:
        return not self._elements

    def is_not_empty(self) -> bool:
        return bool(self._elements)

    def if_empty[R](self, default_value: Supplier[R]) -> MutableList[T] | R:
        """Returns this list, or ``default_value()`` when it is empty."""
        return default_value() if self.is_empty() else self

    @staticmethod
    def _check_index_overflow(index: int) -> None:
        if index > sys.maxsize:
            raise IndexOverflowError(
                f"Index {index} overflows the largest index {sys.maxsize}."
            )

    def _check_element_index(self, index: int) -> None:
        self._check_index_overflow(index)
        if not 0 <= index < len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))

    def _check_position_index(self, index: int) -> None:
        self._check_index_overflow(index)
        if not 0 <= index <= len(self._elements):
            raise IndexOutOfRangeError(index, len(self._elements))

    def _check_range(self, from_index: int, to_index: int) -> None:
        self._check_index_overflow(from_index)
        self._check_index_overflow(to_index)
        if from_index > to_index:
            raise RangeError(
                f"fromIndex ({from_index}) is greater than toIndex ({to_index})."
            )
        if from_index < 0:
            raise RangeError(f"fromIndex ({from_index}) is less than zero.")
        if to_index > len(self._elements):
            raise RangeError(
                f"toIndex ({to_index}) is greater than size ({len(self._elements)})."
            )

    @staticmethod
    def _check_count(n: int) -> None:
        if n < 0:
            raise InvalidArgumentError(f"Requested element count {n} is less than zero.")

    def _indexed(self) -> Iterator[tuple[int, T]]:
        return enumerate(self._elements)

    # Structural mutation

    def add(self, element: T) -> bool:
        """Appends ``element``. Always returns ``True``."""
        self._elements.append(element)
        return True

    def add_at(self, index: int, element: T) -> None:
        """
        Inserts ``element`` before ``index``, shifting the tail to the right.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size]``.
        """
        self._check_position_index(index)
        self._elements.insert(index, element)

    def add_all(self, elements: Iterable[T]) -> bool:
        """Appends every element of ``elements``; returns whether the size increased."""
        items = list(elements)
        self._elements.extend(items)
        return len(items) > 0

    def add_all_at(self, index: int, elements: Iterable[T]) -> bool:
        self._check_position_index(index)
        items = list(elements)
        self._elements[index:index] = items
        return len(items) > 0

    def set(self, index: int, value: T) -> T:
        """
        Replaces the element at ``index`` and returns ``value``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size - 1]``.
        """
        self._check_element_index(index)
        self._elements[index] = value
        return value

    def remove_at(self, index: int) -> T:
        """Removes and returns the element at ``index``, shifting the tail to the left."""
        self._check_element_index(index)
        return self._elements.pop(index)

    @override
    def remove(self, element: T) -> bool:  # type: ignore[override]
        """
        Removes the first occurrence of ``element``.

        Unlike ``list.remove`` this never raises: the result tells whether the
        element was found.
        """
        index = self.index_of(element)
        if index < 0:
            return False

        del self._elements[index]
        return True

    def remove_first(self) -> T:
        if not self._elements:
            raise EmptyCollectionError("List is empty.")
        return self._elements.pop(0)

    def remove_first_or_none(self) -> T | None:
        return self._elements.pop(0) if self._elements else None

    def remove_last(self) -> T:
        if not self._elements:
            raise EmptyCollectionError("List is empty.")
        return self._elements.pop()

    def remove_last_or_none(self) -> T | None:
        return self._elements.pop() if self._elements else None

    def _to_predicate(self, predicate_or_elements: Predicate[T] | Iterable[T]) -> Predicate[T]:
        if is_collection(predicate_or_elements):
            lookup = _Membership(predicate_or_elements)
            return lambda element: element in lookup

        if callable(predicate_or_elements):
            return predicate_or_elements

        raise InvalidArgumentError(
            f"Expected a predicate or a collection of elements but found {predicate_or_elements!r}"
        )

    def _filter_in_place(
        self, predicate: Predicate[T], predicate_result_to_remove: bool
    ) -> bool:
        # Stable single pass over every index; survivors are moved to the front.
        elements = self._elements
        write_index = 0
        for read_index in range(len(elements)):
            element = elements[read_index]
            if bool(predicate(element)) == predicate_result_to_remove:
                continue
            if write_index != read_index:
                elements[write_index] = element
            write_index += 1

        if write_index < len(elements):
            del elements[write_index:]
            return True

        return False

    def retain_all(self, predicate_or_elements: Predicate[T] | Iterable[T]) -> bool:
        """
        Keeps only the elements matching a predicate, or contained in a collection.

        Args:
            predicate_or_elements: A predicate, or a collection whose members are kept.

        Returns:
            bool: Whether any element was removed.
        """
        return self._filter_in_place(self._to_predicate(predicate_or_elements), False)

    def remove_all(self, predicate_or_elements: Predicate[T] | Iterable[T]) -> bool:
        """
        Removes every element matching a predicate, or contained in a collection.

        Survivors keep their relative order.

        Args:
            predicate_or_elements: A predicate, or a collection whose members are removed.

        Returns:
            bool: Whether any element was removed.

        Example:
            ```python
            numbers = list_of(1, 2, 3, 4, 5)
            numbers.remove_all(lambda n: n % 2 == 0)  # True, numbers is [1, 3, 5]
            numbers.remove_all([5, 6])  # True, numbers is [1, 3]
            ```
        """
        return self._filter_in_place(self._to_predicate(predicate_or_elements), True)

    @override
    def clear(self) -> None:
        self._elements.clear()

    # Element access

    def get(self, index: int) -> T:
        self._check_element_index(index)
        return self._elements[index]

    def get_or_none(self, index: int) -> T | None:
        return self._elements[index] if 0 <= index < len(self._elements) else None

    def get_or_else(self, index: int, default_value: Callable[[int], T]) -> T:
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return default_value(index)

    def element_at(self, index: int) -> T:
        return self.get(index)

    def element_at_or_none(self, index: int) -> T | None:
        return self.get_or_none(index)

    def element_at_or_else(self, index: int, default_value: Callable[[int], T]) -> T:
        return self.get_or_else(index, default_value)

    def component1(self) -> T:
        return self.get(0)

    def component2(self) -> T:
        return self.get(1)

    def component3(self) -> T:
        return self.get(2)

    def component4(self) -> T:
        return self.get(3)

    def component5(self) -> T:
        return self.get(4)

    def first(self, predicate: Predicate[T] | None = None) -> T:
        """
        Returns the first element, or the first element matching ``predicate``.

        Raises:
            EmptyCollectionError: If the list is empty.
            NoSuchElementError: If no element matches ``predicate``.
        """
        if not self._elements:
            raise EmptyCollectionError("List is empty.")
        if predicate is None:
            return self._elements[0]

        for element in self._elements:
            if predicate(element):
                return element

        raise NoSuchElementError("Collection contains no element matching the predicate.")

    def first_or_none(self, predicate: Predicate[T] | None = None) -> T | None:
        if predicate is None:
            return self._elements[0] if self._elements else None

        for element in self._elements:
            if predicate(element):
                return element
        return None

    def last(self, predicate: Predicate[T] | None = None) -> T:
        if not self._elements:
            raise EmptyCollectionError("List is empty.")
        if predicate is None:
            return self._elements[-1]

        for element in reversed(self._elements):
            if predicate(element):
                return element

        raise NoSuchElementError("List contains no element matching the predicate.")

    def last_or_none(self, predicate: Predicate[T] | None = None) -> T | None:
        if predicate is None:
            return self._elements[-1] if self._elements else None

        for element in reversed(self._elements):
            if predicate(element):
                return element
        return None

    def find(self, predicate: Predicate[T]) -> T | None:
        return self.first_or_none(predicate)

    def find_last(self, predicate: Predicate[T]) -> T | None:
        return self.last_or_none(predicate)

    def single(self, predicate: Predicate[T] | None = None) -> T:
        """
        Returns the only element, or the only element matching ``predicate``.

        Raises:
            EmptyCollectionError: If the list is empty.
            NoSuchElementError: If no element matches ``predicate``.
            InvalidArgumentError: If more than one element qualifies.
        """
        if not self._elements:
            raise EmptyCollectionError("List is empty.")

        if predicate is None:
            if len(self._elements) > 1:
                raise InvalidArgumentError("List has more than one element.")
            return self._elements[0]

        matches = [element for element in self._elements if predicate(element)]
        if not matches:
            raise NoSuchElementError(
                "Collection contains no element matching the predicate."
            )
        if len(matches) > 1:
            raise InvalidArgumentError(
                "Collection contains more than one matching element."
            )
        return matches[0]

    def single_or_none(self, predicate: Predicate[T] | None = None) -> T | None:
        if predicate is None:
            return self._elements[0] if len(self._elements) == 1 else None

        matches = [element for element in self._elements if predicate(element)]
        return matches[0] if len(matches) == 1 else None

    def random(self, rng: _random.Random | None = None) -> T:
        """
        Returns a uniformly chosen element.

        Args:
            rng: The generator to draw from; the module-level one when omitted.

        Raises:
            EmptyCollectionError: If the list is empty.
        """
        if not self._elements:
            raise EmptyCollectionError("Collection is empty.")
        choice = rng.choice if rng is not None else _random.choice
        return choice(self._elements)

    def random_or_none(self, rng: _random.Random | None = None) -> T | None:
        return self.random(rng) if self._elements else None

    # Queries

    def contains(self, element: T) -> bool:
        return element in self._elements

    def contains_all(self, elements: Iterable[T]) -> bool:
        return all(element in self._elements for element in elements)

    def index_of(self, element: T) -> int:
        """Index of the first occurrence of ``element``, or ``-1``."""
        try:
            return self._elements.index(element)
        except ValueError:
            return -1

    def last_index_of(self, element: T) -> int:
        for index in range(len(self._elements) - 1, -1, -1):
            if self._elements[index] == element:
                return index
        return -1

    def index_of_first(self, predicate: Predicate[T]) -> int:
        for index, element in enumerate(self._elements):
            if predicate(element):
                return index
        return -1

    def index_of_last(self, predicate: Predicate[T]) -> int:
        for index in range(len(self._elements) - 1, -1, -1):
            if predicate(self._elements[index]):
                return index
        return -1

    def all(self, predicate: Predicate[T]) -> bool:
        return all(predicate(element) for element in self._elements)

    def any(self, predicate: Predicate[T] | None = None) -> bool:
        if predicate is None:
            return bool(self._elements)
        return any(predicate(element) for element in self._elements)

    def none(self, predicate: Predicate[T] | None = None) -> bool:
        if predicate is None:
            return not self._elements
        return not any(predicate(element) for element in self._elements)

    @override
    def count(self, predicate: Predicate[T] | None = None) -> int:  # type: ignore[override]
        """
        Number of elements matching ``predicate``, or the size when it is omitted.

        Note that this takes a predicate, not a value as ``list.count`` does:
        ``numbers.count(lambda n: n == 3)``.
        """
        if predicate is None:
            return len(self._elements)
        return sum(1 for element in self._elements if predicate(element))

    # Transform / functional core

    def map[R](self, transform: Transform[T, R]) -> MutableList[R]:
        return self.map_to(MutableList[R](), transform)

    def map_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: Transform[T, R]
    ) -> C:
        for element in self._elements:
            destination.append(transform(element))
        return destination

    def map_indexed[R](self, transform: IndexedTransform[T, R]) -> MutableList[R]:
        return self.map_indexed_to(MutableList[R](), transform)

    def map_indexed_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: IndexedTransform[T, R]
    ) -> C:
        for index, element in self._indexed():
            destination.append(transform(index, element))
        return destination

    def map_not_none[R](self, transform: Transform[T, R | None]) -> MutableList[R]:
        """Applies ``transform`` to every element and keeps the results that are not ``None``."""
        return self.map_not_none_to(MutableList[R](), transform)

    def map_not_none_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: Transform[T, R | None]
    ) -> C:
        for element in self._elements:
            result = transform(element)
            if result is not None:
                destination.append(result)
        return destination

    def map_indexed_not_none[R](
        self, transform: IndexedTransform[T, R | None]
    ) -> MutableList[R]:
        return self.map_indexed_not_none_to(MutableList[R](), transform)

    def map_indexed_not_none_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: IndexedTransform[T, R | None]
    ) -> C:
        for index, element in self._indexed():
            result = transform(index, element)
            if result is not None:
                destination.append(result)
        return destination

    def filter(self, predicate: Predicate[T]) -> MutableList[T]:
        return self.filter_to(MutableList[T](), predicate)

    def filter_to[C: MutableSequence[Any]](
        self, destination: C, predicate: Predicate[T]
    ) -> C:
        for element in self._elements:
            if predicate(element):
                destination.append(element)
        return destination

    def filter_indexed(self, predicate: IndexedPredicate[T]) -> MutableList[T]:
        return self.filter_indexed_to(MutableList[T](), predicate)

    def filter_indexed_to[C: MutableSequence[Any]](
        self, destination: C, predicate: IndexedPredicate[T]
    ) -> C:
        for index, element in self._indexed():
            if predicate(index, element):
                destination.append(element)
        return destination

    def filter_not(self, predicate: Predicate[T]) -> MutableList[T]:
        return self.filter_not_to(MutableList[T](), predicate)

    def filter_not_to[C: MutableSequence[Any]](
        self, destination: C, predicate: Predicate[T]
    ) -> C:
        for element in self._elements:
            if not predicate(element):
                destination.append(element)
        return destination

    def filter_not_none(self) -> MutableList[T]:
        return self.filter_not_none_to(MutableList[T]())

    def filter_not_none_to[C: MutableSequence[Any]](self, destination: C) -> C:
        for element in self._elements:
            if element is not None:
                destination.append(element)
        return destination

    def filter_is_instance[R](self, cls: type[R]) -> MutableList[R]:
        return self.filter_is_instance_to(MutableList[R](), cls)

    def filter_is_instance_to[R, C: MutableSequence[Any]](
        self, destination: C, cls: type[R]
    ) -> C:
        for element in self._elements:
            if isinstance(element, cls):
                destination.append(element)
        return destination

    def for_each(self, action: Consumer[T]) -> None:
        for element in self._elements:
            action(element)

    def for_each_indexed(self, action: IndexedConsumer[T]) -> None:
        for index, element in self._indexed():
            action(index, element)

    def on_each(self, action: Consumer[T]) -> Self:
        """Runs ``action`` on every element and returns this list, for chaining."""
        self.for_each(action)
        return self

    def on_each_indexed(self, action: IndexedConsumer[T]) -> Self:
        self.for_each_indexed(action)
        return self

    def flat_map[R](self, transform: Transform[T, Iterable[R] | R]) -> MutableList[R]:
        """
        Transforms every element and splices the results into one flat list.

        A result that is a collection contributes all of its elements; any other result
        (strings and mappings included) contributes itself.

        Example:
            ```python
            list_of(1, 2).flat_map(lambda n: [n] * n)  # [1, 2, 2]
            list_of("ab", "c").flat_map(lambda s: s.upper())  # ["AB", "C"]
            ```
        """
        return self.flat_map_to(MutableList[R](), transform)

    def flat_map_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: Transform[T, Iterable[R] | R]
    ) -> C:
        for element in self._elements:
            _append_flattened(destination, transform(element))
        return destination

    def flat_map_indexed[R](
        self, transform: IndexedTransform[T, Iterable[R] | R]
    ) -> MutableList[R]:
        return self.flat_map_indexed_to(MutableList[R](), transform)

    def flat_map_indexed_to[R, C: MutableSequence[Any]](
        self, destination: C, transform: IndexedTransform[T, Iterable[R] | R]
    ) -> C:
        for index, element in self._indexed():
            _append_flattened(destination, transform(index, element))
        return destination

    def flatten(self) -> MutableList[Any]:
        """Splices every nested collection element into one flat list, one level deep."""
        result = MutableList[Any]()
        for element in self._elements:
            _append_flattened(result, element)
        return result

    def fold[R](self, initial: R, operation: Accumulator[R, T]) -> R:
        accumulator = initial
        for element in self._elements:
            accumulator = operation(accumulator, element)
        return accumulator

    def fold_indexed[R](self, initial: R, operation: IndexedAccumulator[R, T]) -> R:
        accumulator = initial
        for index, element in self._indexed():
            accumulator = operation(index, accumulator, element)
        return accumulator

    def fold_right[R](self, initial: R, operation: Callable[[T, R], R]) -> R:
        """Accumulates from the last element to the first, starting with ``initial``."""
        accumulator = initial
        for element in reversed(self._elements):
            accumulator = operation(element, accumulator)
        return accumulator

    def fold_right_indexed[R](
        self, initial: R, operation: Callable[[int, T, R], R]
    ) -> R:
        """Like ``fold_right``; ``operation`` also receives the element's original index."""
        accumulator = initial
        for index in range(len(self._elements) - 1, -1, -1):
            accumulator = operation(index, self._elements[index], accumulator)
        return accumulator

    def reduce[S](self, operation: Accumulator[S, T]) -> S:
        """
        Accumulates from left to right, seeded with the first element.

        Raises:
            EmptyCollectionError: If the list is empty.
        """
        if not self._elements:
            raise EmptyCollectionError("Empty list can't be reduced.")

        accumulator = cast(S, self._elements[0])
        for element in self._elements[1:]:
            accumulator = operation(accumulator, element)
        return accumulator

    def reduce_or_none[S](self, operation: Accumulator[S, T]) -> S | None:
        return self.reduce(operation) if self._elements else None

    def reduce_indexed[S](self, operation: IndexedAccumulator[S, T]) -> S:
        if not self._elements:
            raise EmptyCollectionError("Empty list can't be reduced.")

        accumulator = cast(S, self._elements[0])
        for index in range(1, len(self._elements)):
            accumulator = operation(index, accumulator, self._elements[index])
        return accumulator

    def reduce_indexed_or_none[S](self, operation: IndexedAccumulator[S, T]) -> S | None:
        return self.reduce_indexed(operation) if self._elements else None

    def reduce_right[S](self, operation: Callable[[T, S], S]) -> S:
        """Accumulates from right to left, seeded with the last element."""
        if not self._elements:
            raise EmptyCollectionError("Empty list can't be reduced.")

        accumulator = cast(S, self._elements[-1])
        for index in range(len(self._elements) - 2, -1, -1):
            accumulator = operation(self._elements[index], accumulator)
        return accumulator

    def reduce_right_or_none[S](self, operation: Callable[[T, S], S]) -> S | None:
        return self.reduce_right(operation) if self._elements else None

    def reduce_right_indexed[S](self, operation: Callable[[int, T, S], S]) -> S:
        if not self._elements:
            raise EmptyCollectionError("Empty list can't be reduced.")

        accumulator = cast(S, self._elements[-1])
        for index in range(len(self._elements) - 2, -1, -1):
            accumulator = operation(index, self._elements[index], accumulator)
        return accumulator

    def reduce_right_indexed_or_none[S](
        self, operation: Callable[[int, T, S], S]
    ) -> S | None:
        return self.reduce_right_indexed(operation) if self._elements else None

    def running_fold[R](self, initial: R, operation: Accumulator[R, T]) -> MutableList[R]:
        """
        Every intermediate accumulator of ``fold``, seed included.

        The result has ``size + 1`` elements.

        Example:
            ```python
            list_of(1, 2, 3).running_fold(0, lambda acc, n: acc + n)  # [0, 1, 3, 6]
            ```
        """
        result = MutableList[R]([initial])
        accumulator = initial
        for element in self._elements:
            accumulator = operation(accumulator, element)
            result.append(accumulator)
        return result

    def running_fold_indexed[R](
        self, initial: R, operation: IndexedAccumulator[R, T]
    ) -> MutableList[R]:
        result = MutableList[R]([initial])
        accumulator = initial
        for index, element in self._indexed():
            accumulator = operation(index, accumulator, element)
            result.append(accumulator)
        return result

    def running_reduce[S](self, operation: Accumulator[S, T]) -> MutableList[S]:
        """Every intermediate accumulator of ``reduce``; ``size`` elements, empty for an empty list."""
        if not self._elements:
            return MutableList[S]()

        accumulator = cast(S, self._elements[0])
        result = MutableList[S]([accumulator])
        for element in self._elements[1:]:
            accumulator = operation(accumulator, element)
            result.append(accumulator)
        return result

    def running_reduce_indexed[S](
        self, operation: IndexedAccumulator[S, T]
    ) -> MutableList[S]:
        if not self._elements:
            return MutableList[S]()

        accumulator = cast(S, self._elements[0])
        result = MutableList[S]([accumulator])
        for index in range(1, len(self._elements)):
            accumulator = operation(index, accumulator, self._elements[index])
            result.append(accumulator)
        return result

    def scan[R](self, initial: R, operation: Accumulator[R, T]) -> MutableList[R]:
        return self.running_fold(initial, operation)

    def scan_indexed[R](
        self, initial: R, operation: IndexedAccumulator[R, T]
    ) -> MutableList[R]:
        return self.running_fold_indexed(initial, operation)

    def partition(
        self, predicate: Predicate[T]
    ) -> tuple[MutableList[T], MutableList[T]]:
        """Splits into ``(matches, rest)`` in one pass; both keep the original order."""
        matches = MutableList[T]()
        rest = MutableList[T]()
        for element in self._elements:
            if predicate(element):
                matches.append(element)
            else:
                rest.append(element)
        return matches, rest

    def first_not_none_of[R](self, transform: Transform[T, R | None]) -> R:
        """
        The first result of ``transform`` that is not ``None``.

        Raises:
            NoNonNullResultError: If every element was transformed to ``None``.
        """
        for element in self._elements:
            result = transform(element)
            if result is not None:
                return result

        raise NoNonNullResultError(
            "No element of the collection was transformed to a non-null value."
        )

    def first_not_none_of_or_none[R](self, transform: Transform[T, R | None]) -> R | None:
        for element in self._elements:
            result = transform(element)
            if result is not None:
                return result
        return None

    def sum_of(self, selector: Selector[T, Any]) -> Any:
        total: Any = 0
        for element in self._elements:
            total += selector(element)
        return total

    def sum_by(self, selector: Selector[T, Any]) -> Any:
        logger.warning("sum_by is deprecated, use sum_of instead.")
        return self.sum_of(selector)

    # Search

    def binary_search_with(
        self,
        comparison: Comparison[T],
        from_index: int = 0,
        to_index: int | None = None,
    ) -> int:
        """
        Searches ``[from_index, to_index)`` with a comparison against a fixed target.

        The range must be sorted so that ``comparison`` is negative before the target,
        zero on it and positive after it.

        Args:
            comparison: Compares one element against the sought target.
            from_index: First index of the searched range.
            to_index: End of the searched range (exclusive); the size when omitted.

        Returns:
            int: The index of a matching element, or ``-(insertion_point + 1)`` when
            there is none, where ``insertion_point`` is the index at which the target
            would be inserted to keep the range sorted.

        Raises:
            RangeError: If ``from_index > to_index``, ``from_index < 0`` or
                ``to_index > size``.

        Example:
            ```python
            letters = list_of("a", "b", "c")
            letters.binary_search_with(lambda s: (s > "b") - (s < "b"), 0, 3)  # 1
            letters.binary_search_with(lambda s: (s > "bb") - (s < "bb"))  # -3
            ```
        """
        end = len(self._elements) if to_index is None else to_index
        self._check_range(from_index, end)

        low = from_index
        high = end - 1
        while low <= high:
            mid = (low + high) >> 1
            compare = comparison(self._elements[mid])

            if compare < 0:
                low = mid + 1
            elif compare > 0:
                high = mid - 1
            else:
                return mid

        return -(low + 1)

    def binary_search(
        self,
        element: T | None,
        comparator: Comparator[Any] | None = None,
        from_index: int = 0,
        to_index: int | None = None,
    ) -> int:
        """
        Searches for ``element`` in a range sorted by ``comparator``.

        The natural ordering (``None`` first) is used when ``comparator`` is omitted.
        The result follows the same encoding as ``binary_search_with``.
        """
        compare = comparator if comparator is not None else compare_values
        return self.binary_search_with(
            lambda value: compare(value, element), from_index, to_index
        )

    def binary_search_by[K](
        self,
        key: K | None,
        selector: Selector[T, K | None],
        from_index: int = 0,
        to_index: int | None = None,
    ) -> int | None:
        """
        Searches for ``key`` in a range sorted by the keys ``selector`` derives.

        The search only applies when every derived key, and ``key`` itself, is either
        ``None`` or of one comparable kind (all strings or all real numbers).

        Returns:
            int | None: The ``binary_search_with`` result, or ``None`` when the keys are
            not comparable.
        """
        end = len(self._elements) if to_index is None else to_index
        self._check_range(from_index, end)

        kinds = {
            _key_kind(selector(element)) for element in self._elements[from_index:end]
        }
        kinds.add(_key_kind(key))
        kinds.discard("none")
        if None in kinds or len(kinds) > 1:
            logger.debug("binary_search_by skipped: selected keys are not comparable")
            return None

        return self.binary_search_with(
            lambda value: compare_values(selector(value), key), from_index, end
        )

    # Extremes

    def _extremum[V](
        self, selector: Selector[T, V], replaces: Callable[[V, V], bool]
    ) -> tuple[T, V]:
        if not self._elements:
            raise EmptyCollectionError("List is empty.")

        best = self._elements[0]
        best_value = selector(best)
        for element in self._elements[1:]:
            value = selector(element)
            if replaces(value, best_value):
                best, best_value = element, value
        return best, best_value

    def max(self) -> T:
        return self._extremum(lambda element: element, lambda value, best: best < value)[0]  # type: ignore[operator]

    def max_or_none(self) -> T | None:
        return self.max() if self._elements else None

    def min(self) -> T:
        return self._extremum(lambda element: element, lambda value, best: best > value)[0]  # type: ignore[operator]

    def min_or_none(self) -> T | None:
        return self.min() if self._elements else None

    def max_by(self, selector: Selector[T, Any]) -> T:
        """
        The first element yielding the largest value of ``selector``.

        Raises:
            EmptyCollectionError: If the list is empty.
        """
        return self._extremum(selector, lambda value, best: best < value)[0]

    def max_by_or_none(self, selector: Selector[T, Any]) -> T | None:
        return self.max_by(selector) if self._elements else None

    def min_by(self, selector: Selector[T, Any]) -> T:
        return self._extremum(selector, lambda value, best: best > value)[0]

    def min_by_or_none(self, selector: Selector[T, Any]) -> T | None:
        return self.min_by(selector) if self._elements else None

    def max_of[R](self, selector: Selector[T, R]) -> R:
        """The largest value of ``selector`` among all elements."""
        return self._extremum(selector, lambda value, best: best < value)[1]  # type: ignore[operator]

    def max_of_or_none[R](self, selector: Selector[T, R]) -> R | None:
        return self.max_of(selector) if self._elements else None

    def min_of[R](self, selector: Selector[T, R]) -> R:
        return self._extremum(selector, lambda value, best: best > value)[1]  # type: ignore[operator]

    def min_of_or_none[R](self, selector: Selector[T, R]) -> R | None:
        return self.min_of(selector) if self._elements else None

    def max_of_with[R](self, comparator: Comparator[R], selector: Selector[T, R]) -> R:
        return self._extremum(
            selector, lambda value, best: comparator(best, value) < 0
        )[1]

    def max_of_with_or_none[R](
        self, comparator: Comparator[R], selector: Selector[T, R]
    ) -> R | None:
        return self.max_of_with(comparator, selector) if self._elements else None

    def min_of_with[R](self, comparator: Comparator[R], selector: Selector[T, R]) -> R:
        return self._extremum(
            selector, lambda value, best: comparator(best, value) > 0
        )[1]

    def min_of_with_or_none[R](
        self, comparator: Comparator[R], selector: Selector[T, R]
    ) -> R | None:
        return self.min_of_with(comparator, selector) if self._elements else None

    def max_with(self, comparator: Comparator[T]) -> T:
        return self._extremum(
            lambda element: element, lambda value, best: comparator(best, value) < 0
        )[0]

    def max_with_or_none(self, comparator: Comparator[T]) -> T | None:
        return self.max_with(comparator) if self._elements else None

    def min_with(self, comparator: Comparator[T]) -> T:
        return self._extremum(
            lambda element: element, lambda value, best: comparator(best, value) > 0
        )[0]

    def min_with_or_none(self, comparator: Comparator[T]) -> T | None:
        return self.min_with(comparator) if self._elements else None

    # Ordering

    def sort(self) -> None:
        """Sorts in place by natural ordering."""
        self._elements.sort()

    def sort_descending(self) -> None:
        self._elements.sort(reverse=True)

    def sorted(self) -> MutableList[T]:
        result = self.copy()
        result.sort()
        return result

    def sorted_descending(self) -> MutableList[T]:
        result = self.copy()
        result.sort_descending()
        return result

    def sort_with(self, comparator: Comparator[T]) -> None:
        """
        Sorts in place with ``comparator``. The sort is stable.

        Example:
            ```python
            numbers = list_of(3, 1, 2)
            numbers.sort_with(lambda a, b: a - b)  # numbers is now [1, 2, 3]
            ```
        """
        self._elements.sort(key=cmp_to_key(comparator))

    def sorted_with(self, comparator: Comparator[T]) -> MutableList[T]:
        """Returns a sorted copy; this list is left untouched."""
        result = self.copy()
        result.sort_with(comparator)
        return result

    @staticmethod
    def _selector_key[K](
        selector: Selector[T, K], comparator: Comparator[K] | None
    ) -> Callable[[T], Any]:
        wrap = cmp_to_key(comparator if comparator is not None else compare_values)
        return lambda element: wrap(selector(element))

    def sort_by[K](
        self, selector: Selector[T, K], comparator: Comparator[K] | None = None
    ) -> None:
        """
        Sorts in place by the key ``selector`` derives.

        Keys are ordered with ``comparator``, or naturally (``None`` first) when omitted.
        """
        self._elements.sort(key=self._selector_key(selector, comparator))

    def sort_by_descending[K](
        self, selector: Selector[T, K], comparator: Comparator[K] | None = None
    ) -> None:
        self._elements.sort(key=self._selector_key(selector, comparator), reverse=True)

    def sorted_by[K](
        self, selector: Selector[T, K], comparator: Comparator[K] | None = None
    ) -> MutableList[T]:
        result = self.copy()
        result.sort_by(selector, comparator)
        return result

    def sorted_by_descending[K](
        self, selector: Selector[T, K], comparator: Comparator[K] | None = None
    ) -> MutableList[T]:
        result = self.copy()
        result.sort_by_descending(selector, comparator)
        return result

    @override
    def reverse(self) -> None:
        self._elements.reverse()

    def reversed(self) -> MutableList[T]:
        return MutableList(self._elements[::-1])

    def shuffle(self, rng: _random.Random | None = None) -> None:
        """
        Shuffles in place (Fisher-Yates).

        Every index from the last down to 1 is swapped with a uniformly chosen index
        in ``[0, index]``.
        """
        randint = rng.randint if rng is not None else _random.randint
        elements = self._elements
        for index in range(len(elements) - 1, 0, -1):
            other = randint(0, index)
            elements[index], elements[other] = elements[other], elements[index]

    def shuffled(self, rng: _random.Random | None = None) -> MutableList[T]:
        result = self.copy()
        result.shuffle(rng)
        return result

    # Slicing

    def drop(self, n: int) -> MutableList[T]:
        """All elements except the first ``n``."""
        self._check_count(n)
        return MutableList(self._elements[n:])

    def drop_last(self, n: int) -> MutableList[T]:
        self._check_count(n)
        return self.take(max(len(self._elements) - n, 0))

    def drop_while(self, predicate: Predicate[T]) -> MutableList[T]:
        """All elements from the first one that does not match ``predicate`` on."""
        for index, element in enumerate(self._elements):
            if not predicate(element):
                return MutableList(self._elements[index:])
        return MutableList[T]()

    def drop_last_while(self, predicate: Predicate[T]) -> MutableList[T]:
        for index in range(len(self._elements) - 1, -1, -1):
            if not predicate(self._elements[index]):
                return self.take(index + 1)
        return MutableList[T]()

    def take(self, n: int) -> MutableList[T]:
        """The first ``n`` elements."""
        self._check_count(n)
        return MutableList(self._elements[:n])

    def take_last(self, n: int) -> MutableList[T]:
        self._check_count(n)
        if n == 0:
            return MutableList[T]()
        return MutableList(self._elements[-n:])

    def take_while(self, predicate: Predicate[T]) -> MutableList[T]:
        for index, element in enumerate(self._elements):
            if not predicate(element):
                return MutableList(self._elements[:index])
        return self.copy()

    def take_last_while(self, predicate: Predicate[T]) -> MutableList[T]:
        for index in range(len(self._elements) - 1, -1, -1):
            if not predicate(self._elements[index]):
                return MutableList(self._elements[index + 1 :])
        return self.copy()

    def sub_list(self, from_index: int, to_index: int) -> MutableList[T]:
        """
        Copy of the elements in ``[from_index, to_index)``.

        Raises:
            RangeError: If the range is not inside the list.
        """
        self._check_range(from_index, to_index)
        return MutableList(self._elements[from_index:to_index])

    def slice(self, indices: Iterable[int]) -> MutableList[T]:
        """Copy of the elements at ``indices``, in the order given."""
        result = MutableList[T]()
        for index in indices:
            result.append(self.get(index))
        return result

    # Iteration

    def iterator(self) -> Iterator[T]:
        return iter(self._elements)

    def as_iterable(self) -> Iterable[T]:
        yield from self._elements

    def list_iterator(self, index: int = 0) -> Iterator[T]:
        """Iterates from ``index`` to the end."""
        self._check_position_index(index)
        return iter(self._elements[index:])

    def with_index(self) -> Iterator[tuple[int, T]]:
        """Yields ``(index, element)`` pairs."""
        return self._indexed()

    # Grouping and associative conversion

    def associate[K, V](self, transform: Transform[T, tuple[K, V]]) -> dict[K, V]:
        """
        Builds a dict from the ``(key, value)`` pairs ``transform`` returns.

        When two elements yield the same key, the later one wins.
        """
        return self.associate_to(dict[K, V](), transform)

    def associate_to[K, V, M: MutableMapping[Any, Any]](
        self, destination: M, transform: Transform[T, tuple[K, V]]
    ) -> M:
        for element in self._elements:
            key, value = transform(element)
            destination[key] = value
        return destination

    def associate_by[K](
        self,
        key_selector: Selector[T, K],
        value_transform: Transform[T, Any] | None = None,
    ) -> dict[K, Any]:
        """
        Builds a dict keyed by ``key_selector``; values are the elements themselves or
        ``value_transform(element)``. The last element with a given key wins.
        """
        return self.associate_by_to(dict[K, Any](), key_selector, value_transform)

    def associate_by_to[K, M: MutableMapping[Any, Any]](
        self,
        destination: M,
        key_selector: Selector[T, K],
        value_transform: Transform[T, Any] | None = None,
    ) -> M:
        for element in self._elements:
            value = element if value_transform is None else value_transform(element)
            destination[key_selector(element)] = value
        return destination

    def associate_with[V](self, value_selector: Selector[T, V]) -> dict[T, V]:
        return self.associate_with_to(dict[T, V](), value_selector)

    def associate_with_to[V, M: MutableMapping[Any, Any]](
        self, destination: M, value_selector: Selector[T, V]
    ) -> M:
        for element in self._elements:
            destination[element] = value_selector(element)
        return destination

    def group_by[K](
        self,
        key_selector: Selector[T, K],
        value_transform: Transform[T, Any] | None = None,
    ) -> dict[K, MutableList[Any]]:
        """
        Groups elements by the key ``key_selector`` derives.

        Keys appear in first-seen order and every group keeps the elements' original
        relative order.

        Example:
            ```python
            words = list_of("apple", "avocado", "banana")
            words.group_by(lambda w: w[0])  # {"a": ["apple", "avocado"], "b": ["banana"]}
            words.group_by(lambda w: w[0], len)  # {"a": [5, 7], "b": [6]}
            ```
        """
        return self.group_by_to(dict[K, MutableList[Any]](), key_selector, value_transform)

    def group_by_to[K, M: MutableMapping[Any, Any]](
        self,
        destination: M,
        key_selector: Selector[T, K],
        value_transform: Transform[T, Any] | None = None,
    ) -> M:
        for element in self._elements:
            key = key_selector(element)
            group = destination.get(key)
            if group is None:
                group = MutableList[Any]()
                destination[key] = group
            group.append(element if value_transform is None else value_transform(element))
        return destination

    def to_map(self) -> dict[Any, Any]:
        """
        Converts a list of pairs into a dict.

        When any element is not a two-element pair, the list is read as a record
        instead: every index maps to its element.
        """
        if all(is_pair(element) for element in self._elements):
            return {pair[0]: pair[1] for pair in cast(list[Sequence[Any]], self._elements)}

        logger.debug("to_map: elements are not pairs, mapping indices to elements")
        return dict(enumerate(self._elements))

    def unzip(self) -> tuple[MutableList[Any], MutableList[Any]] | None:
        """
        Splits a list of pairs into the list of first and the list of second components.

        Returns:
            tuple[MutableList[Any], MutableList[Any]] | None: ``None`` when any element
            is not a two-element pair.
        """
        if not all(is_pair(element) for element in self._elements):
            logger.debug("unzip: elements are not pairs")
            return None

        firsts = MutableList[Any]()
        seconds = MutableList[Any]()
        for pair in cast(list[Sequence[Any]], self._elements):
            firsts.append(pair[0])
            seconds.append(pair[1])
        return firsts, seconds

    # Windowing, pairing, chunking

    @staticmethod
    def _check_window_size_step(size: int, step: int) -> None:
        if (
            isinstance(size, bool)
            or isinstance(step, bool)
            or not isinstance(size, int)
            or not isinstance(step, int)
        ):
            raise InvalidArgumentError(
                f"Both size {size!r} and step {step!r} must be integers."
            )
        if size <= 0 or step <= 0:
            if size != step:
                raise InvalidArgumentError(
                    f"Both size {size} and step {step} must be greater than zero."
                )
            raise InvalidArgumentError(f"size {size} must be greater than zero.")

    def windowed[R](
        self,
        size: int,
        step: int = 1,
        partial_windows: bool = False,
        transform: Transform[MutableList[T], R] | None = None,
    ) -> MutableList[Any]:
        """
        Sliding windows of ``size`` elements, each starting ``step`` after the previous one.

        Windows near the end that would have fewer than ``size`` elements are kept only
        when ``partial_windows`` is true.

        Args:
            size: Number of elements in a full window.
            step: Distance between the starts of two consecutive windows.
            partial_windows: Whether to keep the shorter trailing windows.
            transform: Applied to every window; windows are returned as-is when omitted.

        Raises:
            InvalidArgumentError: If ``size`` or ``step`` is not a positive integer.

        Example:
            ```python
            numbers = list_of(1, 2, 3, 4, 5)
            numbers.windowed(3)  # [[1, 2, 3], [2, 3, 4], [3, 4, 5]]
            numbers.windowed(2, 2)  # [[1, 2], [3, 4]]
            numbers.windowed(2, 2, partial_windows=True)  # [[1, 2], [3, 4], [5]]
            ```
        """
        self._check_window_size_step(size, step)

        result = MutableList[Any]()
        total = len(self._elements)
        for start in range(0, total, step):
            window = MutableList(self._elements[start : start + size])
            if len(window) < size and not partial_windows:
                break
            result.append(window if transform is None else transform(window))
        return result

    def chunked[R](
        self, size: int, transform: Transform[MutableList[T], R] | None = None
    ) -> MutableList[Any]:
        """
        Splits into consecutive chunks of ``size`` elements; the last may be shorter.

        Raises:
            InvalidArgumentError: If ``size`` is not a positive integer.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidArgumentError(
                f"Expected size to be an integer greater than 0 but found {size}"
            )
        return self.windowed(size, size, True, transform)

    @overload
    def zip[R](self, other: Iterable[R]) -> MutableList[tuple[T, R]]: ...

    @overload
    def zip[R, V](
        self, other: Iterable[R], transform: Callable[[T, R], V]
    ) -> MutableList[V]: ...

    def zip[R, V](
        self, other: Iterable[R], transform: Callable[[T, R], V] | None = None
    ) -> MutableList[Any]:
        """Pairs elements by position, up to the shorter of the two lengths."""
        if transform is None:
            return MutableList(zip(self._elements, other))
        return MutableList(transform(a, b) for a, b in zip(self._elements, other))

    @overload
    def zip_with_next(self) -> MutableList[tuple[T, T]]: ...

    @overload
    def zip_with_next[R](self, transform: Callable[[T, T], R]) -> MutableList[R]: ...

    def zip_with_next[R](
        self, transform: Callable[[T, T], R] | None = None
    ) -> MutableList[Any]:
        """Pairs every element with its successor: ``size - 1`` pairs, none for ``size <= 1``."""
        pairs = zip(self._elements, self._elements[1:])
        if transform is None:
            return MutableList(pairs)
        return MutableList(transform(a, b) for a, b in pairs)

    # Conversion and set operations

    def distinct(self) -> MutableList[T]:
        """Drops later duplicates, keeping first occurrences in their original order."""
        return self.distinct_by(lambda element: element)

    def distinct_by[K](self, selector: Selector[T, K]) -> MutableList[T]:
        seen: set[Any] = set()
        seen_unhashable: list[Any] = []
        result = MutableList[T]()
        for element in self._elements:
            key = selector(element)
            try:
                if key in seen:
                    continue
                seen.add(key)
            except TypeError:
                if key in seen_unhashable:
                    continue
                seen_unhashable.append(key)
            result.append(element)
        return result

    def to_set(self) -> set[T]:
        return set(self._elements)

    def to_sorted_set(self, comparator: Comparator[T] | None = None) -> MutableList[T]:
        """
        Sorted, duplicate-free copy.

        Elements the ordering considers equal are duplicates: only the first of them is
        kept. Python has no sorted set type, so the result is a ``MutableList``.
        """
        compare: Comparator[Any] = comparator if comparator is not None else compare_values
        result = MutableList[T]()
        for element in self.sorted_with(compare):
            if result.is_empty() or compare(result.last(), element) != 0:
                result.append(element)
        return result

    def union(self, other: Iterable[T] = ()) -> set[T]:
        return set(self._elements).union(other)

    def intersect(self, other: Iterable[T]) -> set[T]:
        """Distinct elements present both in this list and in ``other``."""
        lookup = _Membership(other)
        if not lookup:
            return set()
        return {element for element in self._elements if element in lookup}

    def subtract(self, other: Iterable[T]) -> set[T]:
        lookup = _Membership(other)
        return {element for element in self._elements if element not in lookup}

    def plus(self, element_or_elements: T | Iterable[T]) -> MutableList[T]:
        """
        Copy with an element, or every element of a collection, appended.

        A ``str`` or mapping argument is one element; use ``plus_element`` to append
        any other collection as a single element.
        """
        result = self.copy()
        result.plus_assign(element_or_elements)
        return result

    def plus_element(self, element: T) -> MutableList[T]:
        result = self.copy()
        result.append(element)
        return result

    def plus_assign(self, element_or_elements: T | Iterable[T]) -> None:
        if is_collection(element_or_elements):
            self.add_all(cast(Iterable[T], element_or_elements))
        else:
            self.add(cast(T, element_or_elements))

    def minus(self, element_or_elements: T | Iterable[T]) -> MutableList[T]:
        """
        Copy without an element, or without any element of a collection.

        A single element only loses its first occurrence; every occurrence of a
        collection's members is removed.
        """
        if is_collection(element_or_elements):
            lookup = _Membership(cast(Iterable[T], element_or_elements))
            return self.filter_not(lambda element: element in lookup)
        return self.minus_element(cast(T, element_or_elements))

    def minus_element(self, element: T) -> MutableList[T]:
        result = self.copy()
        result.remove(element)
        return result

    def minus_assign(self, element_or_elements: T | Iterable[T]) -> None:
        if is_collection(element_or_elements):
            self.remove_all(cast(Iterable[T], element_or_elements))
        else:
            self.remove(cast(T, element_or_elements))

    def copy(self) -> MutableList[T]:
        """Shallow copy with an independent buffer."""
        return MutableList(self._elements)

    def to_mutable_list(self) -> MutableList[T]:
        return self.copy()

    def to_list(self) -> list[T]:
        return list(self._elements)

    def equals(self, other: object) -> bool:
        """
        Deep structural equality.

        Nested sequences are compared element by element regardless of their concrete
        type, and mappings key by key.
        """
        return deep_equals(self._elements, other)

    def to_int8_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "int8")

    def to_uint8_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "uint8")

    def to_uint8_clamped_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "uint8_clamped")

    def to_int16_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "int16")

    def to_uint16_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "uint16")

    def to_int32_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "int32")

    def to_uint32_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "uint32")

    def to_int64_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "int64")

    def to_uint64_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "uint64")

    def to_float32_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "float32")

    def to_float64_array(self) -> npt.NDArray[Any]:
        return to_typed_array(self._elements, "float64")

    # Formatting

    @staticmethod
    def _join_options(
        separator: str | JoinOptions,
        prefix: str,
        postfix: str,
        limit: int,
        truncated: str,
        transform: Transform[Any, str] | None,
    ) -> JoinOptions:
        if isinstance(separator, JoinOptions):
            return separator

        try:
            return JoinOptions(
                separator=separator,
                prefix=prefix,
                postfix=postfix,
                limit=limit,
                truncated=truncated,
                transform=transform,
            )
        except ValidationError as error:
            raise InvalidArgumentError(f"Invalid join options: {error}") from error

    def join_to[W: Writable](
        self,
        buffer: W,
        separator: str | JoinOptions = ", ",
        prefix: str = "",
        postfix: str = "",
        limit: int = -1,
        truncated: str = "...",
        transform: Transform[T, str] | None = None,
    ) -> W:
        """
        Writes the rendered elements to ``buffer`` and returns it.

        ``separator`` may be a ``JoinOptions``, in which case the other option
        arguments are ignored.

        Raises:
            InvalidArgumentError: If the option arguments are invalid, such as a
                ``limit`` below ``-1``.

        Example:
            ```python
            buffer = io.StringIO()
            list_of(1, 2, 3).join_to(buffer, limit=2, prefix="(", postfix=")")
            buffer.getvalue()  # "(1, 2, ...)"
            ```
        """
        options = self._join_options(separator, prefix, postfix, limit, truncated, transform)

        buffer.write(options.prefix)
        count = 0
        for element in self._elements:
            count += 1
            if count > 1:
                buffer.write(options.separator)
            if options.limit < 0 or count <= options.limit:
                buffer.write(options.render(element))
            else:
                break

        if 0 <= options.limit < count:
            buffer.write(options.truncated)
        buffer.write(options.postfix)
        return buffer

    def join_to_string(
        self,
        separator: str | JoinOptions = ", ",
        prefix: str = "",
        postfix: str = "",
        limit: int = -1,
        truncated: str = "...",
        transform: Transform[T, str] | None = None,
    ) -> str:
        return self.join_to(
            io.StringIO(), separator, prefix, postfix, limit, truncated, transform
        ).getvalue()

    # Async

    async def await_all_async(self) -> set[Any]:
        """Waits for every awaitable element concurrently; see ``await_all_async``."""
        return await await_all_async(
            cast(list[Awaitable[Any] | Any], self._elements)
        )

    def await_all(self) -> set[Any]:
        return await_all(cast(list[Awaitable[Any] | Any], self._elements))
