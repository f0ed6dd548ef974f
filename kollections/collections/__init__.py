"""
Kotlin-style collections for Python.

This package provides ``MutableList``, a mutable ordered sequence with a large set
of functional combinators (mapping, filtering, folding, grouping, searching,
windowing, set and map conversion), and the factories that build it.

Copying operations always return new lists, in-place operations keep the
receiver's identity, and every operation that may find nothing has both a raising
form and a ``*_or_none`` form that returns ``None``.
"""

from .exceptions import (
    CollectionError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    InvalidArgumentError,
    NoNonNullResultError,
    NoSuchElementError,
    RangeError,
)
from .functions.empty_list import empty_list
from .functions.list_of import list_of
from .functions.list_of_not_none import list_of_not_none
from .join_options import JoinOptions
from .mutable_list import MutableList

__all__: list[str] = [
    "CollectionError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "IndexOverflowError",
    "InvalidArgumentError",
    "JoinOptions",
    "MutableList",
    "NoNonNullResultError",
    "NoSuchElementError",
    "RangeError",
    "empty_list",
    "list_of",
    "list_of_not_none",
]
