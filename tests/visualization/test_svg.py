"""Tests for SVG element helpers."""

from attainment.visualization.svg import (
    SVG_NS,
    XLINK_NS,
    append,
    create_svg,
    find_all,
    format_attr,
    set_attrs,
    svg_tag,
    to_string,
)


class TestFormatAttr:
    """Tests for attribute text formatting."""

    def test_integral_float(self):
        """Integral floats drop the decimal point."""
        assert format_attr(80.0) == "80"
        assert format_attr(-10.0) == "-10"

    def test_fractional_float(self):
        """Other floats keep their digits."""
        assert format_attr(54.5) == "54.5"

    def test_sequence(self):
        """Sequences are space separated."""
        assert format_attr((0, 0, 320.0, 50)) == "0 0 320 50"


class TestElements:
    """Tests for element creation."""

    def test_create_svg(self):
        """Root element declares the namespace and size."""
        svg = create_svg(320, 50, view_box=(0, 0, 320, 50))
        assert svg.tag == svg_tag("svg")
        assert svg.get("width") == "320"
        assert svg.get("viewBox") == "0 0 320 50"
        assert f'xmlns="{SVG_NS}"' in to_string(svg)

    def test_attribute_names(self):
        """Underscores become hyphens; trailing underscore is dropped."""
        svg = create_svg(10, 10)
        text = append(svg, "text", text="Percent", text_anchor="start", class_="title")
        assert text.get("text-anchor") == "start"
        assert text.get("class") == "title"
        assert text.text == "Percent"

    def test_xlink_href(self):
        """Prefixed names resolve to their namespace."""
        svg = create_svg(10, 10)
        image = set_attrs(append(svg, "image"), **{"xlink:href": "data:,"})
        assert image.get(f"{{{XLINK_NS}}}href") == "data:,"

    def test_none_skipped(self):
        """None values are not written."""
        svg = create_svg("100%", None)
        assert svg.get("height") is None

    def test_find_all(self):
        """Prefixed paths find SVG descendants."""
        svg = create_svg(10, 10)
        group = append(svg, "g")
        append(group, "rect")
        append(group, "rect")
        assert len(find_all(svg, ".//svg:rect")) == 2
