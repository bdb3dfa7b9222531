from dataclasses import FrozenInstanceError

import pytest

from intervalcmp import Interval


class TestInterval:
    """Tests for the Interval value type."""

    def test_inverted_interval_is_accepted(self):
        """left > right is a legal value, not an error."""
        ivl = Interval(left=5, right=4)
        assert ivl.left == 5
        assert ivl.right == 4
        assert ivl.is_inverted

    def test_degenerate_interval_is_not_inverted(self):
        assert not Interval(left=3, right=3).is_inverted

    def test_frozen(self):
        ivl = Interval(left=1, right=3)
        with pytest.raises(FrozenInstanceError):
            ivl.left = 2  # type: ignore[misc]

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            Interval(1, 3)  # type: ignore[misc]

    @pytest.mark.parametrize("bad", [1.5, "1", None, True])
    def test_rejects_non_int_bounds(self, bad):
        with pytest.raises(TypeError, match="left bound must be an int"):
            Interval(left=bad, right=3)
        with pytest.raises(TypeError, match="right bound must be an int"):
            Interval(left=1, right=bad)

    def test_str(self):
        assert str(Interval(left=-2, right=7)) == "Interval[-2, 7]"

    def test_equality_and_hash(self):
        a = Interval(left=1, right=3)
        b = Interval(left=1, right=3)
        assert a == b
        assert {a, b} == {a}
