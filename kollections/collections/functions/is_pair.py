from collections.abc import MutableSequence
from typing import Any, TypeGuard


def is_pair(value: object) -> TypeGuard[tuple[Any, Any] | list[Any]]:
    """Tells whether ``value`` is a two-element tuple, list or mutable sequence."""
    if isinstance(value, (tuple, list, MutableSequence)):
        return len(value) == 2

    return False
