import numpy as np
import pytest

from kollections import InvalidArgumentError
from kollections.collections.numeric.typed_array_converter import to_typed_array


class TestToTypedArray:
    """Tests for the fixed-width numeric conversion."""

    def test_int8_wraps_out_of_range_values(self):
        """Tests two's complement wrapping."""
        result = to_typed_array([1, 255, 256, -1], "int8")

        assert result.dtype == np.int8
        assert result.tolist() == [1, -1, 0, -1]

    def test_uint8_clamped(self):
        """Tests saturation, rounding and NaN handling."""
        result = to_typed_array([-5, 1.5, 2.5, 300, float("nan")], "uint8_clamped")

        assert result.tolist() == [0, 2, 2, 255, 0]

    def test_uint8_clamped_infinities(self):
        """Tests that infinities saturate."""
        result = to_typed_array([float("inf"), float("-inf")], "uint8_clamped")

        assert result.tolist() == [255, 0]

    def test_empty_input(self):
        """Tests that an empty input gives an empty array of the right type."""
        result = to_typed_array([], "uint16")

        assert result.dtype == np.uint16
        assert result.size == 0

    def test_float32_rounds_to_nearest(self):
        """Tests that float32 keeps the nearest representable value."""
        result = to_typed_array([0.1], "float32")

        assert result[0] == np.float32(0.1)

    def test_integer_kinds_reject_floats(self):
        """Tests that floats are not truncated into integer kinds."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_typed_array([1, 1.5], "int32")

        assert "index 1" in exc_info.value.message

    def test_rejects_booleans(self):
        """Tests that booleans are not numbers here."""
        with pytest.raises(InvalidArgumentError):
            to_typed_array([True], "uint8")

    def test_unknown_kind(self):
        """Tests that only known kinds are accepted."""
        with pytest.raises(InvalidArgumentError):
            to_typed_array([1], "int128")  # type: ignore[arg-type]
