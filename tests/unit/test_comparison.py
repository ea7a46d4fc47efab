"""Tests for BigVal comparisons."""

import pytest

from bigval import BigVal, ParseError, Scale


class TestBooleanLogic:
    """100 coins compared against every operand encoding."""

    @pytest.mark.parametrize(
        ("equal", "below", "above"),
        [
            (100, 99, 101),
            ("100", "99", "101"),
            ("0x64", "0x63", "0x65"),
            (BigVal("0x64", Scale.NORMAL), BigVal("0x63", Scale.NORMAL), BigVal("0x65", Scale.NORMAL)),
        ],
        ids=["number", "string", "hex", "bigval"],
    )
    def test_comparisons(self, equal, below, above):
        """eq/gte/gt/lte/lt agree for every operand encoding."""
        a = BigVal(100, Scale.NORMAL)
        assert a.eq(equal) is True
        assert a.gte(equal) is True
        assert a.gt(equal) is False
        assert a.gt(below) is True
        assert a.lte(equal) is True
        assert a.lt(equal) is False
        assert a.lt(above) is True

    def test_gte_and_gt(self):
        """255 >= 254 and not 255 > 255."""
        assert BigVal(255).gte(254) is True
        assert BigVal(255).gt(255) is False

    def test_invalid_operand(self):
        """Unparseable operands raise ParseError."""
        with pytest.raises(ParseError):
            BigVal(1).lt("abc")


class TestScaleAwareComparison:
    """Comparisons align operand scales first."""

    def test_equal_across_scales(self, one_ether, one_ether_wei):
        """1 coin equals 10^18 wei in both directions."""
        assert one_ether.eq(one_ether_wei)
        assert one_ether_wei.eq(one_ether)

    def test_smallest_value_is_not_a_coin_amount(self):
        """A wei value of 100 is not 100 coins."""
        assert not BigVal(100, Scale.NORMAL).eq(BigVal(100))
        assert BigVal(100, Scale.NORMAL).gt(BigVal(100))

    def test_bare_number_at_receiver_scale(self, one_ether):
        """Bare numbers compare at the receiver's scale."""
        assert one_ether.eq(1)
        assert one_ether.lt(10**18)


class TestOperators:
    """Tests for Python comparison operators."""

    def test_rich_comparisons(self):
        """Comparison operators delegate to the named methods."""
        a = BigVal(5)
        assert a == 5
        assert a != 6
        assert a < "6"
        assert a <= BigVal(5)
        assert a > "0x4"
        assert a >= 5.0

    def test_reflected_comparisons(self):
        """Bare numbers on the left are supported."""
        a = BigVal(5)
        assert 5 == a
        assert 4 < a
        assert 6 >= a

    def test_equality_with_non_numbers(self):
        """Non-numeric values are unequal rather than errors."""
        a = BigVal(5)
        assert (a == "five") is False
        assert (a == object()) is False
        assert (a == None) is False  # noqa: E711
        assert a != "five"

    def test_ordering_with_unsupported_type(self):
        """Ordering against unsupported types raises TypeError."""
        with pytest.raises(TypeError):
            BigVal(5) < object()

    def test_unhashable(self):
        """BigVal is unhashable since equality is numeric across scales."""
        with pytest.raises(TypeError):
            hash(BigVal(5))

    def test_sorting(self):
        """Lists of BigVal sort numerically."""
        values = [BigVal("0x10"), BigVal("2.5"), BigVal(-1)]
        assert [v.to_string() for v in sorted(values)] == ["-1", "2.5", "16"]
