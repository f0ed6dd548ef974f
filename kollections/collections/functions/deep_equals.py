from collections.abc import Mapping, Sequence
from typing import TypeGuard


def _is_nested_sequence(value: object) -> TypeGuard[Sequence[object]]:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def deep_equals(first: object, second: object) -> bool:
    """
    Structural equality for nested sequences and key/value records.

    Two sequences are equal when they have the same length and their elements are
    pairwise deep-equal, regardless of the concrete sequence type. Two mappings are
    equal when they hold the same keys and deep-equal values for every key. Anything
    else falls back to ``==``.

    Example:
        ```python
        deep_equals([1, (2, 3)], (1, [2, 3]))  # True
        deep_equals([{"a": [1]}], [{"a": (1,)}])  # True
        ```
    """
    if _is_nested_sequence(first) and _is_nested_sequence(second):
        if len(first) != len(second):
            return False

        return all(deep_equals(a, b) for a, b in zip(first, second))

    if isinstance(first, Mapping) and isinstance(second, Mapping):
        if first.keys() != second.keys():
            return False

        return all(deep_equals(first[key], second[key]) for key in first)

    return first == second
