import pytest

from kollections import JoinOptions


class TestJoinOptions:
    """Tests for the JoinOptions model."""

    def test_defaults(self):
        """Tests the default rendering options."""
        options = JoinOptions()

        assert options.separator == ", "
        assert options.prefix == ""
        assert options.postfix == ""
        assert options.limit == -1
        assert options.truncated == "..."
        assert options.transform is None

    def test_render_uses_str_without_transform(self):
        """Tests the default element rendering."""
        assert JoinOptions().render(None) == "None"

    def test_render_uses_transform(self):
        """Tests a custom element rendering."""
        options = JoinOptions(transform=lambda value: f"<{value}>")

        assert options.render(1) == "<1>"

    def test_limit_below_minus_one_is_rejected(self):
        """Tests the limit validation."""
        with pytest.raises(ValueError):
            JoinOptions(limit=-2)

    def test_limit_zero_is_accepted(self):
        """Tests that zero is a valid limit."""
        assert JoinOptions(limit=0).limit == 0

    def test_options_are_frozen(self):
        """Tests that options cannot be changed after creation."""
        options = JoinOptions()

        with pytest.raises(ValueError):
            options.separator = "; "  # type: ignore[misc]
