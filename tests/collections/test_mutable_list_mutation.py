"""Tests for the structural mutation operations of MutableList."""

import pytest

from kollections import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    MutableList,
    empty_list,
    list_of,
)


class TestAdd:
    """Tests for add, add_at, add_all and add_all_at."""

    def test_add_appends_and_returns_true(self):
        """Tests that add appends at the end."""
        numbers = list_of(1, 2)

        assert numbers.add(3) is True
        assert numbers == [1, 2, 3]

    def test_add_at_shifts_tail_right(self):
        """Tests that add_at inserts before the given index."""
        letters = list_of("a", "c")

        letters.add_at(1, "b")
        letters.add_at(3, "d")
        letters.add_at(0, "_")

        assert letters == ["_", "a", "b", "c", "d"]

    def test_add_at_accepts_falsy_elements(self):
        """Tests that zero, empty strings and None are inserted like any other value."""
        values = list_of(1, 2)

        values.add_at(1, 0)
        values.add_at(0, None)
        values.add_at(0, "")

        assert values == ["", None, 1, 0, 2]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_add_at_rejects_index_outside_bounds(self, index):
        """Tests that add_at only accepts indices in [0, size]."""
        numbers = list_of(1, 2)

        with pytest.raises(IndexOutOfRangeError):
            numbers.add_at(index, 9)

        assert numbers == [1, 2]

    def test_out_of_range_is_an_index_error(self):
        """Tests that callers catching IndexError also catch out-of-range errors."""
        with pytest.raises(IndexError):
            list_of(1).add_at(5, 1)

    def test_add_all_reports_whether_size_increased(self):
        """Tests the return value of add_all."""
        numbers = list_of(1)

        assert numbers.add_all([2, 3]) is True
        assert numbers.add_all([]) is False
        assert numbers.add_all(n for n in range(4, 6)) is True
        assert numbers == [1, 2, 3, 4, 5]

    def test_add_all_at_inserts_block(self):
        """Tests that add_all_at keeps the inserted block in order."""
        numbers = list_of(1, 5)

        assert numbers.add_all_at(1, [2, 3, 4]) is True
        assert numbers == [1, 2, 3, 4, 5]

        with pytest.raises(IndexOutOfRangeError):
            numbers.add_all_at(7, [0])

    def test_insert_and_append_follow_add_at(self):
        """Tests the MutableSequence entry points."""
        numbers = empty_list()

        numbers.append(2)
        numbers.insert(0, 1)
        numbers.extend([3, 4])

        assert numbers == [1, 2, 3, 4]
        with pytest.raises(IndexOutOfRangeError):
            numbers.insert(10, 5)


class TestRemove:
    """Tests for the removal operations."""

    def test_remove_at_returns_removed_element(self):
        """Tests that remove_at shifts the tail left."""
        letters = list_of("a", "b", "c")

        assert letters.remove_at(1) == "b"
        assert letters == ["a", "c"]

    @pytest.mark.parametrize("index", [-1, 2])
    def test_remove_at_rejects_invalid_index(self, index):
        """Tests that remove_at only accepts existing indices."""
        with pytest.raises(IndexOutOfRangeError):
            list_of(1, 2).remove_at(index)

    def test_remove_first_occurrence(self):
        """Tests that remove drops only the first equal element."""
        numbers = list_of(1, 2, 1)

        assert numbers.remove(1) is True
        assert numbers == [2, 1]

    def test_remove_element_at_index_zero(self):
        """Tests that the element at index zero can be removed."""
        numbers = list_of(7, 8)

        assert numbers.remove(7) is True
        assert numbers == [8]

    def test_remove_missing_element_returns_false(self):
        """Tests that remove reports absence instead of raising."""
        numbers = list_of(1, 2)

        assert numbers.remove(3) is False
        assert numbers == [1, 2]

    def test_remove_first_and_last(self):
        """Tests popping from either end."""
        numbers = list_of(1, 2, 3)

        assert numbers.remove_first() == 1
        assert numbers.remove_last() == 3
        assert numbers == [2]

    def test_remove_first_or_none_on_empty_list(self):
        """Tests that the sentinel forms return None on an empty list."""
        assert list_of().remove_first_or_none() is None
        assert list_of().remove_last_or_none() is None

    def test_remove_first_on_empty_list_raises(self):
        """Tests that the plain forms raise on an empty list."""
        with pytest.raises(EmptyCollectionError):
            list_of().remove_first()

        with pytest.raises(EmptyCollectionError):
            list_of().remove_last()

    def test_empty_collection_is_a_lookup_error(self):
        """Tests the builtin base of EmptyCollectionError."""
        with pytest.raises(LookupError):
            empty_list().remove_first()


class TestInPlaceCompaction:
    """Tests for retain_all and remove_all."""

    def test_remove_all_by_predicate_keeps_order(self):
        """Tests that survivors keep their relative order."""
        numbers = list_of(1, 2, 3, 4, 5, 6)

        assert numbers.remove_all(lambda n: n % 2 == 0) is True
        assert numbers == [1, 3, 5]

    def test_remove_all_processes_last_index(self):
        """Tests that the last element is inspected too."""
        numbers = list_of(1, 3, 4)

        assert numbers.remove_all(lambda n: n == 4) is True
        assert numbers == [1, 3]

    def test_remove_all_by_elements(self):
        """Tests removal of every occurrence of a collection's members."""
        numbers = list_of(1, 2, 1, 3, 2)

        assert numbers.remove_all([1, 2]) is True
        assert numbers == [3]

    def test_remove_all_without_matches(self):
        """Tests that nothing changes when nothing matches."""
        numbers = list_of(1, 2)

        assert numbers.remove_all(lambda n: n > 10) is False
        assert numbers.remove_all([]) is False
        assert numbers == [1, 2]

    def test_remove_all_with_unhashable_elements(self):
        """Tests membership removal of unhashable elements."""
        rows = list_of([1], [2], [3])

        rows.remove_all([[2]])

        assert rows == [[1], [3]]

    def test_remove_all_unhashable_receiver_hashable_argument(self):
        """Tests removal by equality when only the receiver holds unhashable elements."""
        mixed = list_of([1], 3, [2], 3)

        assert mixed.remove_all([3]) is True
        assert mixed == [[1], [2]]

    def test_retain_all_unhashable_receiver_hashable_argument(self):
        """Tests that unhashable receiver elements are simply not retained."""
        mixed = list_of([1], 3, [2])

        assert mixed.retain_all([3]) is True
        assert mixed == [3]

    def test_minus_unhashable_receiver_hashable_argument(self):
        """Tests the copying and assigning minus forms over unhashable elements."""
        mixed = list_of([1], 3, [2])

        assert mixed.minus([3]) == [[1], [2]]
        assert mixed == [[1], 3, [2]]

        mixed -= [3]
        assert mixed == [[1], [2]]

    def test_retain_all_by_predicate(self):
        """Tests that retain_all keeps matching elements, last one included."""
        numbers = list_of(5, 1, 6, 2, 7)

        assert numbers.retain_all(lambda n: n > 4) is True
        assert numbers == [5, 6, 7]

    def test_retain_all_by_elements(self):
        """Tests that retain_all accepts a collection."""
        letters = list_of("a", "b", "c", "a")

        letters.retain_all({"a", "c"})

        assert letters == ["a", "c", "a"]

    def test_retain_all_rejects_non_callable_scalar(self):
        """Tests that a value that is neither predicate nor collection is rejected."""
        with pytest.raises(InvalidArgumentError):
            list_of(1).retain_all(3)

    def test_compaction_keeps_identity(self):
        """Tests that compaction mutates the receiver in place."""
        numbers = list_of(1, 2, 3)
        same = numbers

        numbers.remove_all(lambda n: n == 2)

        assert same is numbers
        assert same == [1, 3]


class TestSetAndClear:
    """Tests for set and clear."""

    def test_set_replaces_and_returns_value(self):
        """Tests that set returns the new value."""
        numbers = list_of(1, 2, 3)

        assert numbers.set(1, 20) == 20
        assert numbers == [1, 20, 3]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_set_rejects_invalid_index(self, index):
        """Tests the bounds check of set."""
        with pytest.raises(IndexOutOfRangeError):
            list_of(1, 2, 3).set(index, 0)

    def test_clear_keeps_identity(self):
        """Tests that clear resets the size of the same list."""
        numbers = list_of(1, 2, 3)
        same = numbers

        numbers.clear()

        assert same is numbers
        assert numbers.size == 0
        assert numbers.is_empty()


class TestArithmetic:
    """Tests for plus, minus and their assigning forms."""

    def test_plus_returns_copy(self):
        """Tests that plus leaves the receiver untouched."""
        numbers = list_of(1, 2)

        assert numbers.plus(3) == [1, 2, 3]
        assert numbers.plus([3, 4]) == [1, 2, 3, 4]
        assert numbers + [5] == [1, 2, 5]
        assert numbers == [1, 2]

    def test_plus_element_keeps_collection_whole(self):
        """Tests that plus_element appends a collection as one element."""
        pairs = list_of((1, 2))

        assert pairs.plus_element((3, 4)) == [(1, 2), (3, 4)]

    def test_plus_treats_strings_as_single_elements(self):
        """Tests that a string argument is not split into characters."""
        assert list_of("a").plus("bc") == ["a", "bc"]

    def test_plus_assign_mutates(self):
        """Tests the in-place forms."""
        numbers = list_of(1)
        same = numbers

        numbers.plus_assign(2)
        numbers.plus_assign([3, 4])
        numbers += [5]

        assert same is numbers
        assert numbers == [1, 2, 3, 4, 5]

    def test_minus_returns_copy(self):
        """Tests minus with one element and with a collection."""
        numbers = list_of(1, 2, 1, 3)

        assert numbers.minus(1) == [2, 1, 3]
        assert numbers.minus([1, 3]) == [2]
        assert numbers - [2] == [1, 1, 3]
        assert numbers == [1, 2, 1, 3]

    def test_minus_first_element(self):
        """Tests that minus can drop the element at index zero."""
        assert list_of(1, 2).minus_element(1) == [2]

    def test_minus_assign_mutates(self):
        """Tests the in-place forms of minus."""
        numbers = list_of(1, 2, 1, 3)

        numbers.minus_assign(1)
        assert numbers == [2, 1, 3]

        numbers -= [1, 3]
        assert numbers == [2]
