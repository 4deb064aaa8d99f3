"""Tests for tick generation and formatting."""

import pytest

from attainment.visualization.ticks import (
    FormatSpecifier,
    format_value,
    precision_fixed,
    stringify,
    tick_format,
    tick_step,
    ticks,
)


class TestTicks:
    """Tests for nice tick generation."""

    def test_attainment_extent(self):
        """[24, 66] with about 4 ticks should give tens."""
        assert ticks(24, 66, 4) == [30, 40, 50, 60]

    def test_unit_interval(self):
        """[0, 1] with 5 ticks should step by 0.2."""
        assert ticks(0, 1, 5) == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])

    def test_step_of_twenty(self):
        """[0, 100] with 5 ticks should step by 20."""
        assert ticks(0, 100, 5) == [0, 20, 40, 60, 80, 100]

    def test_reversed_domain(self):
        """Descending domains should give descending ticks."""
        assert ticks(66, 24, 4) == [60, 50, 40, 30]

    def test_equal_bounds(self):
        """A single-point domain gives a single tick."""
        assert ticks(5, 5, 3) == [5]

    def test_zero_count(self):
        """Zero or negative counts give no ticks."""
        assert ticks(0, 10, 0) == []
        assert ticks(0, 10, -1) == []

    def test_fractional_count(self):
        """Non-integer counts such as width / 64 should work."""
        assert ticks(24, 66, 260 / 64) == [30, 40, 50, 60]

    def test_tick_step(self):
        """tick_step should report the spacing between ticks."""
        assert tick_step(0, 100, 5) == 20
        assert tick_step(0, 1, 5) == pytest.approx(0.2)
        assert tick_step(100, 0, 5) == -20


class TestFormatSpecifier:
    """Tests for format specifier parsing."""

    def test_parse_fields(self):
        """Grouping, precision and type should be parsed."""
        spec = FormatSpecifier.parse(",.2f")
        assert spec.grouping == ","
        assert spec.precision == 2
        assert spec.type == "f"

    def test_str_round_trip(self):
        """str() should rebuild the specifier."""
        for text in [",f", ".0%", ">8,.1f", "+d", ""]:
            assert str(FormatSpecifier.parse(text)) == text

    def test_invalid(self):
        """Invalid specifiers should raise ValueError."""
        with pytest.raises(ValueError, match="invalid format"):
            FormatSpecifier.parse("not a spec")


class TestFormatValue:
    """Tests for format_value."""

    def test_grouped_fixed(self):
        """Grouped fixed point rounds and adds commas."""
        assert format_value(",.0f")(12345.6) == "12,346"

    def test_default_fixed_precision(self):
        """'f' without precision uses Python's six decimals."""
        assert format_value(",f")(1234.5) == "1,234.500000"

    def test_integer_type_rounds_floats(self):
        """'d' should accept float values."""
        assert format_value("d")(30.0) == "30"
        assert format_value("d")(29.6) == "30"

    def test_percent(self):
        """'%' multiplies by 100."""
        assert format_value(".0%")(0.25) == "25%"


class TestTickFormat:
    """Tests for tick_format precision selection."""

    def test_integer_steps(self):
        """Steps of ten need no decimals."""
        assert tick_format(24, 66, 4)(30) == "30"

    def test_fractional_steps(self):
        """Steps of 0.2 need one decimal."""
        assert tick_format(0, 1, 5)(0.4) == "0.4"

    def test_grouping(self):
        """Default format groups thousands."""
        assert tick_format(0, 10000, 5)(2000) == "2,000"

    def test_percent_precision(self):
        """'%' without precision drops two decimals from the step precision."""
        assert tick_format(0, 1, 5, "%")(0.4) == "40%"

    def test_explicit_precision_kept(self):
        """A given precision is not overridden."""
        assert tick_format(0, 1, 5, ".2f")(0.4) == "0.40"

    def test_degenerate_domain(self):
        """Equal bounds fall back to the plain specifier."""
        assert tick_format(50, 50, 5, ".1f")(50) == "50.0"

    def test_precision_fixed(self):
        """Precision should count decimals of the step."""
        assert precision_fixed(10) == 0
        assert precision_fixed(0.2) == 1
        assert precision_fixed(0.05) == 2
        assert precision_fixed(0) == 0


class TestStringify:
    """Tests for plain labels."""

    def test_integral_float(self):
        """Integral floats drop the decimal point."""
        assert stringify(30.0) == "30"

    def test_fractional_float(self):
        """Other floats use their shortest repr."""
        assert stringify(28.5) == "28.5"

    def test_non_numeric(self):
        """Categories pass through str()."""
        assert stringify("Northeast") == "Northeast"
        assert stringify(7) == "7"
