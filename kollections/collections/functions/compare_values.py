from typing import Any


def compare_values(first: Any, second: Any) -> int:
    """
    Compares two values by their natural ordering, ``None`` ordering first.

    Returns:
        int: negative when ``first`` orders before ``second``, zero when they are
        equal and positive otherwise.
    """
    if first is second:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1

    return (first > second) - (first < second)
