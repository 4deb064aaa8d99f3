"""Tests for bottom axis drawing."""

import pytest

from attainment.visualization.axis import axis_bottom, extend_tick_lines, remove_domain
from attainment.visualization.scales import BandScale, LinearScale
from attainment.visualization.svg import append, create_svg, find_all


@pytest.fixture
def axis_group():
    """Empty group inside a root <svg>."""
    return append(create_svg(320, 50), "g")


def _ticks(axis):
    return find_all(axis, "svg:g[@class='tick']")


def _labels(axis):
    return [tick.find("{http://www.w3.org/2000/svg}text").text for tick in _ticks(axis)]


def _offsets(axis):
    return [tick.get("transform") for tick in _ticks(axis)]


class TestLinearAxis:
    """Tests for axes over linear scales."""

    def test_group_attributes(self, axis_group):
        """Axis group carries text styling."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5)
        assert axis_group.get("fill") == "none"
        assert axis_group.get("font-size") == "10"
        assert axis_group.get("font-family") == "sans-serif"
        assert axis_group.get("text-anchor") == "middle"

    def test_ticks_and_labels(self, axis_group):
        """Ticks come from the scale and sit half a pixel right."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5)
        assert _labels(axis_group) == ["0", "20", "40", "60", "80", "100"]
        assert _offsets(axis_group)[1] == "translate(64.5,0)"

    def test_domain_path(self, axis_group):
        """Baseline path spans the range."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5)
        (domain,) = find_all(axis_group, "svg:path[@class='domain']")
        assert domain.get("d") == "M0.5,6V0.5H320.5V6"

    def test_tick_line_and_label_position(self, axis_group):
        """Lines hang below the axis and labels sit below the lines."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5, tick_size=6)
        tick = _ticks(axis_group)[0]
        line = tick.find("{http://www.w3.org/2000/svg}line")
        text = tick.find("{http://www.w3.org/2000/svg}text")
        assert line.get("y2") == "6"
        assert text.get("y") == "9"
        assert text.get("dy") == "0.71em"

    def test_specifier(self, axis_group):
        """Specifier reaches the scale's tick formatter."""
        axis_bottom(axis_group, LinearScale((0, 1), (0, 320)), ticks=5, specifier="%")
        assert _labels(axis_group)[1] == "20%"

    def test_explicit_values_and_format(self, axis_group):
        """Explicit tick values and formatter override the scale."""
        axis_bottom(
            axis_group,
            LinearScale((0, 100), (0, 320)),
            tick_values=[25, 75],
            tick_format=lambda v: f"{v}%",
        )
        assert _labels(axis_group) == ["25%", "75%"]
        assert _offsets(axis_group) == ["translate(80.5,0)", "translate(240.5,0)"]


class TestBandAxis:
    """Tests for axes over band scales."""

    def test_ticks_at_band_centres(self, axis_group):
        """Band scales tick each category at its centre."""
        axis_bottom(axis_group, BandScale(["a", "b", "c"], (0, 320), round=True))
        assert _labels(axis_group) == ["a", "b", "c"]
        assert _offsets(axis_group)[0] == "translate(54.5,0)"


class TestAxisEditing:
    """Tests for post-processing helpers."""

    def test_remove_domain(self, axis_group):
        """Baseline path is removed."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5)
        remove_domain(axis_group)
        assert find_all(axis_group, "svg:path") == []

    def test_extend_tick_lines(self, axis_group):
        """Every tick line gets the given y1."""
        axis_bottom(axis_group, LinearScale((0, 100), (0, 320)), ticks=5)
        extend_tick_lines(axis_group, -10)
        lines = find_all(axis_group, "svg:g[@class='tick']/svg:line")
        assert lines
        assert all(line.get("y1") == "-10" for line in lines)
