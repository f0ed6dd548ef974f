from kollections.collections.mutable_list import MutableList


def list_of_not_none[T](*elements: T | None) -> MutableList[T]:
    """Creates a list of the given elements, dropping every ``None``."""
    return MutableList[T](element for element in elements if element is not None)
