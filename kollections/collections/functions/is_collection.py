from collections.abc import Iterable, Mapping
from typing import Any, TypeGuard


def is_collection(value: object) -> TypeGuard[Iterable[Any]]:
    """
    Tells whether ``value`` should be treated as a group of elements.

    Strings, bytes and mappings are iterable but are treated as single values.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False

    return isinstance(value, Iterable)
