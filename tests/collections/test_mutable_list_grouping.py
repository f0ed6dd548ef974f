"""Tests for the associative conversions of MutableList."""

from collections import OrderedDict

from kollections import MutableList, list_of


class TestAssociate:
    """Tests for associate, associate_by and associate_with."""

    def test_associate_last_key_wins(self):
        """Tests that a later element overwrites an earlier one with the same key."""
        words = list_of("a", "bb", "cc")

        assert words.associate(lambda w: (len(w), w)) == {1: "a", 2: "cc"}

    def test_associate_by_key_only(self):
        """Tests that values default to the elements themselves."""
        words = list_of("apple", "banana", "avocado")

        assert words.associate_by(lambda w: w[0]) == {"a": "avocado", "b": "banana"}

    def test_associate_by_with_value_transform(self):
        """Tests the two-selector form."""
        words = list_of("apple", "kiwi")

        assert words.associate_by(lambda w: w[0], len) == {"a": 5, "k": 4}

    def test_associate_with_keys_by_element(self):
        """Tests that associate_with keys the dict by the elements."""
        words = list_of("a", "bb")

        assert words.associate_with(len) == {"a": 1, "bb": 2}

    def test_associate_to_destination(self):
        """Tests that the destination forms fill the caller's mapping."""
        destination: dict[str, int] = {"z": 0}

        returned = list_of("a").associate_to(destination, lambda w: (w, 1))
        list_of("bb").associate_by_to(destination, lambda w: w, len)
        list_of("ccc").associate_with_to(destination, len)

        assert returned is destination
        assert destination == {"z": 0, "a": 1, "bb": 2, "ccc": 3}


class TestGroupBy:
    """Tests for group_by and group_by_to."""

    def test_group_by_keeps_first_seen_key_order(self):
        """Tests key order and in-group order."""
        words = list_of("banana", "apple", "blueberry", "avocado", "cherry")

        groups = words.group_by(lambda w: w[0])

        assert list(groups) == ["b", "a", "c"]
        assert groups["b"] == ["banana", "blueberry"]
        assert groups["a"] == ["apple", "avocado"]
        assert isinstance(groups["c"], MutableList)

    def test_group_by_with_value_transform(self):
        """Tests grouping transformed values."""
        words = list_of("apple", "avocado", "banana")

        assert words.group_by(lambda w: w[0], len) == {"a": [5, 7], "b": [6]}

    def test_group_by_to_appends_to_existing_groups(self):
        """Tests that existing groups in the destination are extended."""
        destination = OrderedDict(even=list_of(0))

        list_of(1, 2, 3, 4).group_by_to(
            destination, lambda n: "even" if n % 2 == 0 else "odd"
        )

        assert destination["even"] == [0, 2, 4]
        assert destination["odd"] == [1, 3]

    def test_group_by_on_empty_list(self):
        """Tests that an empty list has no groups."""
        assert list_of().group_by(lambda n: n) == {}


class TestPairs:
    """Tests for to_map and unzip."""

    def test_to_map_from_pairs(self):
        """Tests conversion of key/value pairs."""
        pairs = list_of(("a", 1), ("b", 2), ("a", 3))

        assert pairs.to_map() == {"a": 3, "b": 2}

    def test_to_map_accepts_list_pairs(self):
        """Tests that two-element lists count as pairs."""
        assert list_of(["x", 1]).to_map() == {"x": 1}

    def test_to_map_falls_back_to_indices(self):
        """Tests that a list of non-pairs maps indices to elements."""
        letters = list_of("a", "b")

        assert letters.to_map() == {0: "a", 1: "b"}

    def test_to_map_mixed_elements(self):
        """Tests that one non-pair switches the whole list to the index form."""
        mixed = list_of(("a", 1), "b")

        assert mixed.to_map() == {0: ("a", 1), 1: "b"}

    def test_unzip(self):
        """Tests splitting pairs into their components."""
        result = list_of((1, "a"), (2, "b")).unzip()

        assert result is not None
        firsts, seconds = result
        assert firsts == [1, 2]
        assert seconds == ["a", "b"]

    def test_unzip_non_pairs(self):
        """Tests that non-pairs cannot be unzipped."""
        assert list_of((1, 2, 3)).unzip() is None
        assert list_of(1, 2).unzip() is None

    def test_unzip_empty(self):
        """Tests that an empty list unzips into two empty lists."""
        assert list_of().unzip() == ([], [])
