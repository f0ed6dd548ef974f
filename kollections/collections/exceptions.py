"""
Exceptions raised by the collection operations.

Every exception also derives from the builtin exception a Python caller would
reach for first, so ``except IndexError`` around ``remove_at`` or
``except ValueError`` around ``chunked`` keeps working.

Operations that may legitimately find nothing come in two forms: the plain
form raises one of the ``NoSuchElementError`` family, the ``*_or_none`` form
returns ``None`` instead.
"""


class CollectionError(Exception):
    """Base class for every error raised by a collection operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoSuchElementError(CollectionError, LookupError):
    """Raised when no element satisfies a query."""


class EmptyCollectionError(NoSuchElementError):
    """Raised when an operation needs at least one element and the list is empty."""


class NoNonNullResultError(NoSuchElementError):
    """Raised when every transformed value of the list was ``None``."""


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised when an index is outside the valid bounds of the list."""

    def __init__(self, index: int, size: int, message: str | None = None):
        super().__init__(message or f"Index {index} out of bounds for length {size}")
        self.index = index
        self.size = size


class InvalidArgumentError(CollectionError, ValueError):
    """Raised when an argument violates an operation's precondition."""


class RangeError(InvalidArgumentError):
    """Raised when a ``[from_index, to_index)`` range is inconsistent with the list."""


class IndexOverflowError(CollectionError, OverflowError):
    """Raised when a computed index exceeds the largest representable index."""
