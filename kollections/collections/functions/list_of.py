from kollections.collections.mutable_list import MutableList


def list_of[T](*elements: T) -> MutableList[T]:
    """
    Creates a list holding ``elements`` in the given order.

    Example:
        ```python
        list_of(1, 2, 3).chunked(2)  # [[1, 2], [3]]
        ```
    """
    return MutableList.of(*elements)
