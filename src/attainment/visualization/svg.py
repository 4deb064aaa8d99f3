"""SVG element helpers built on lxml.

Attribute names given as keyword arguments may use underscores for
hyphens (text_anchor -> text-anchor) and a trailing underscore for
reserved words (class_ -> class). Prefixed names such as
"xlink:href" resolve to their namespace. Integral floats are written
without a decimal point.
"""

from typing import Any, Optional

from lxml import etree

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
NSMAP = {None: SVG_NS, "xlink": XLINK_NS}

# Prefix map for findall()/xpath() queries on rendered nodes
NAMESPACES = {"svg": SVG_NS, "xlink": XLINK_NS}

_PREFIXES = {"xlink": XLINK_NS}


def svg_tag(name: str) -> str:
    """Qualified tag name in the SVG namespace."""
    return f"{{{SVG_NS}}}{name}"


def _attr_name(name: str) -> str:
    if ":" in name:
        prefix, local = name.split(":", 1)
        return f"{{{_PREFIXES[prefix]}}}{local}"
    return name.rstrip("_").replace("_", "-")


def format_attr(value: Any) -> str:
    """Attribute text for a value."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return " ".join(format_attr(v) for v in value)
    return str(value)


def set_attrs(el: etree._Element, **attrs: Any) -> etree._Element:
    """Set attributes on an element, skipping None values."""
    for name, value in attrs.items():
        if value is not None:
            el.set(_attr_name(name), format_attr(value))
    return el


def create_svg(width: Any, height: Any, view_box: Optional[tuple] = None) -> etree._Element:
    """Create a root <svg> element declaring the SVG and xlink namespaces."""
    root = etree.Element(svg_tag("svg"), nsmap=NSMAP)
    return set_attrs(root, width=width, height=height, viewBox=view_box)


def append(parent: etree._Element, tag: str, text: Optional[str] = None, **attrs: Any) -> etree._Element:
    """Append a child element and return it."""
    child = etree.SubElement(parent, svg_tag(tag))
    set_attrs(child, **attrs)
    if text is not None:
        child.text = text
    return child


def find_all(el: etree._Element, path: str) -> list[etree._Element]:
    """Find descendants with an "svg:"-prefixed path, e.g. ".//svg:rect"."""
    return el.findall(path, NAMESPACES)


def to_string(el: etree._Element, pretty: bool = False) -> str:
    """Serialize an element to SVG text."""
    return etree.tostring(el, encoding="unicode", pretty_print=pretty)
