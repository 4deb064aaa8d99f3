"""Bottom axis drawing for legends.

Draws tick marks and labels below a position scale into an SVG group:

    <g fill="none" font-size="10" font-family="sans-serif" text-anchor="middle">
      <path class="domain" .../>
      <g class="tick" transform="translate(x,0)"><line/><text/></g>
      ...
    </g>

Ticks sit half a pixel off the scale position so one-pixel lines stay crisp.
Band scales place ticks at band centres.
"""

import math
from typing import Any, Callable, Optional, Sequence

from lxml import etree

from .scales import PositionScale
from .svg import append, find_all, format_attr, set_attrs
from .ticks import stringify

DEFAULT_TICK_COUNT = 10
DEFAULT_TICK_PADDING = 3
PIXEL_OFFSET = 0.5


def _position(scale: PositionScale, offset: float) -> Callable[[Any], Optional[float]]:
    if not scale.bandwidth:
        return scale

    center = max(0, scale.bandwidth - offset * 2) / 2
    if scale.round:
        center = math.floor(center + 0.5)

    def position(value: Any) -> Optional[float]:
        x = scale(value)
        return None if x is None else x + center

    return position


def axis_bottom(
    parent: etree._Element,
    scale: PositionScale,
    ticks: Optional[float] = None,
    specifier: Optional[str] = None,
    tick_format: Optional[Callable[[Any], str]] = None,
    tick_values: Optional[Sequence[Any]] = None,
    tick_size: float = 6,
    tick_padding: float = DEFAULT_TICK_PADDING,
    offset: float = PIXEL_OFFSET,
) -> etree._Element:
    """Draw a bottom-oriented axis into `parent`.

    Args:
        parent: Group element receiving the axis
        scale: Position scale mapping tick values to pixels
        ticks: Approximate tick count (ignored when tick_values given)
        specifier: Format spec passed to the scale's tick formatter
        tick_format: Label formatter; overrides the scale's formatter
        tick_values: Explicit tick values
        tick_size: Tick line length in pixels
        tick_padding: Gap between tick line and label
        offset: Sub-pixel shift applied to every tick

    Returns:
        The parent element, for chaining
    """
    count = DEFAULT_TICK_COUNT if ticks is None else ticks

    if tick_values is not None:
        values = list(tick_values)
    else:
        values = scale.ticks(count)
        if values is None:
            values = list(scale.domain)

    label = tick_format or scale.tick_format(count, specifier) or stringify
    position = _position(scale, offset)

    set_attrs(
        parent,
        fill="none",
        font_size=10,
        font_family="sans-serif",
        text_anchor="middle",
    )

    range0 = scale.range[0] + offset
    range1 = scale.range[-1] + offset
    append(
        parent,
        "path",
        class_="domain",
        stroke="currentColor",
        d=(
            f"M{format_attr(range0)},{format_attr(tick_size)}"
            f"V{format_attr(offset)}"
            f"H{format_attr(range1)}"
            f"V{format_attr(tick_size)}"
        ),
    )

    spacing = max(tick_size, 0) + tick_padding
    for value in values:
        x = position(value)
        if x is None:
            continue
        tick = append(parent, "g", class_="tick", transform=f"translate({format_attr(x + offset)},0)")
        append(tick, "line", stroke="currentColor", y2=tick_size)
        append(tick, "text", text=str(label(value)), fill="currentColor", y=spacing, dy="0.71em")

    return parent


def remove_domain(axis: etree._Element) -> None:
    """Remove the axis baseline path."""
    for path in find_all(axis, "svg:path[@class='domain']"):
        axis.remove(path)


def extend_tick_lines(axis: etree._Element, y1: float) -> None:
    """Stretch tick lines upward so they cross the swatches above the axis."""
    for line in find_all(axis, "svg:g[@class='tick']/svg:line"):
        set_attrs(line, y1=y1)
