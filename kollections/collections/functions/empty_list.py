from kollections.collections.mutable_list import MutableList


def empty_list[T]() -> MutableList[T]:
    return MutableList[T]()
