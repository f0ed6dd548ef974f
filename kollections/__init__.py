"""kollections: Kotlin-style mutable lists for Python."""

from kollections.collections import (
    CollectionError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    InvalidArgumentError,
    JoinOptions,
    MutableList,
    NoNonNullResultError,
    NoSuchElementError,
    RangeError,
    empty_list,
    list_of,
    list_of_not_none,
)
from kollections.coroutines.await_all import await_all, await_all_async

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
    "await_all",
    "await_all_async",
    "empty_list",
    "list_of",
    "list_of_not_none",
]
