"""
Basic Usage Example

This example demonstrates the everyday operations of kollections' MutableList:
building lists, transforming them, grouping, windowing and waiting for pending values.
"""

import asyncio
import logging

from kollections import JoinOptions, list_of, list_of_not_none

logging.basicConfig(level=logging.DEBUG)


# Example 1: Copying versus in-place operations
numbers = list_of(5, 3, 8, 1, 9, 2)

print("SORTING:")
print(numbers.sorted_with(lambda a, b: a - b))  # a sorted copy
print(numbers)  # untouched
numbers.sort_with(lambda a, b: a - b)
print(numbers)  # sorted in place
print("\n" + "-" * 50 + "\n")


# Example 2: Transforming and folding
print("TRANSFORMING:")
evens, odds = numbers.partition(lambda n: n % 2 == 0)
print(f"evens={evens} odds={odds}")
print(numbers.map(lambda n: n * n).filter(lambda n: n > 10))
print(numbers.running_fold(0, lambda acc, n: acc + n))
print(list_of_not_none(1, None, 3).map_indexed(lambda i, n: f"{i}:{n}"))
print("\n" + "-" * 50 + "\n")


# Example 3: Searching a sorted list
print("SEARCHING:")
index = numbers.binary_search(8)
print(f"8 is at index {index}")

missing = numbers.binary_search(4)
print(f"4 would be inserted at index {-missing - 1}")
print("\n" + "-" * 50 + "\n")


# Example 4: Grouping and windowing
words = list_of("apple", "avocado", "banana", "blueberry", "cherry")

print("GROUPING AND WINDOWING:")
print(words.group_by(lambda w: w[0], len))
print(words.associate_by(len))
print(words.chunked(2))
print(words.windowed(3, 2, partial_windows=True))
print(words.zip_with_next(lambda a, b: a[0] == b[0]))
print("\n" + "-" * 50 + "\n")


# Example 5: Joining
print("JOINING:")
print(words.join_to_string(limit=3))
print(words.join_to_string(JoinOptions(separator=" | ", prefix="<", postfix=">")))
print("\n" + "-" * 50 + "\n")


# Example 6: Waiting for pending values
async def lookup(word: str) -> int:
    await asyncio.sleep(0.01)
    return len(word)


print("AWAITING:")
print(words.map(lookup).await_all())
