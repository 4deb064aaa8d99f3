"""Color legends for choropleth maps.

render_legend() turns a color scale and layout options into a standalone
SVG node of exactly width x height pixels. The drawing strategy follows
the scale's kind tag:

- CONTINUOUS: n-texel gradient image, one texel per color stop
- SEQUENTIAL: 256-texel gradient image sampled from the interpolator
- THRESHOLD: one rectangle per color between breakpoint ticks
- ORDINAL: one band per category, separated by a 1px gap

Scales without stops or samples render a degenerate legend with no
ticks; gradient kinds draw a single-texel ramp.

Every legend gets a bottom axis without a baseline and a bold title. For
all kinds except ORDINAL the tick lines extend up through the swatches
as separators.

Example:
    >>> from attainment.visualization import GREENS_9, QuantizeScale
    >>> node = legend(QuantizeScale((24, 66), GREENS_9), title="Percent", width=260)
    >>> node.width, node.height
    (260, 50)
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

import numpy as np
from lxml import etree
from PIL import Image

from .axis import axis_bottom, extend_tick_lines, remove_domain
from .colors import NEUTRAL_COLOR, interpolate_round
from .ramp import DEFAULT_SAMPLES, from_data_url, ramp, to_data_url
from .scales import BandScale, ColorScale, LinearScale, PositionScale, ScaleKind, quantile
from .svg import XLINK_NS, append, create_svg, find_all, format_attr, set_attrs, to_string
from .ticks import DEFAULT_SPECIFIER, format_value, stringify

logger = logging.getLogger(__name__)

TickFormat = Union[str, Callable[[Any], str], None]


class UnsupportedScaleKind(TypeError):
    """Raised when a color scale has no kind the legend renderer supports."""


@dataclass(frozen=True)
class LegendOptions:
    """Layout options for a legend.

    Defaults that depend on other fields (height, margin_bottom, ticks)
    are filled in at construction.

    Attributes:
        color: Color scale to describe (required)
        title: Bold label above the swatches
        tick_size: Tick line length in pixels
        width: Legend width in pixels
        height: Legend height in pixels (default 44 + tick_size)
        margin_top: Space above the swatches, holding the title
        margin_right: Space right of the swatches
        margin_bottom: Space below the swatches, holding the axis
            (default 16 + tick_size)
        margin_left: Space left of the swatches
        ticks: Approximate tick count (default width / 64)
        tick_format: Format spec string or label function
        tick_values: Explicit tick values
    """

    color: ColorScale
    title: str = ""
    tick_size: float = 6
    width: float = 320
    height: Optional[float] = None
    margin_top: float = 18
    margin_right: float = 0
    margin_bottom: Optional[float] = None
    margin_left: float = 0
    ticks: Optional[float] = None
    tick_format: TickFormat = None
    tick_values: Optional[Sequence[Any]] = None

    def __post_init__(self):
        if self.height is None:
            object.__setattr__(self, "height", 44 + self.tick_size)
        if self.margin_bottom is None:
            object.__setattr__(self, "margin_bottom", 16 + self.tick_size)
        if self.ticks is None:
            object.__setattr__(self, "ticks", self.width / 64)
        if self.tick_values is not None:
            object.__setattr__(self, "tick_values", tuple(self.tick_values))

        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Legend size must be positive, got {self.width}x{self.height}"
            )

    @property
    def plot_left(self) -> float:
        return self.margin_left

    @property
    def plot_right(self) -> float:
        return self.width - self.margin_right

    @property
    def plot_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom


@dataclass
class LegendNode:
    """Rendered legend: a root <svg> element plus its size and kind."""

    element: etree._Element
    width: float
    height: float
    kind: ScaleKind

    def to_string(self, pretty: bool = False) -> str:
        """Serialize the legend to SVG text."""
        return to_string(self.element, pretty=pretty)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the legend to an SVG file and return its path."""
        path = Path(path)
        path.write_text(self.to_string(pretty=True), encoding="utf-8")
        return path

    def ramp_images(self) -> list[Image.Image]:
        """Decode the gradient images embedded in the legend."""
        return [
            from_data_url(image.get(f"{{{XLINK_NS}}}href"))
            for image in find_all(self.element, ".//svg:image")
        ]


@dataclass
class _AxisPlan:
    """Position scale and tick settings produced by a branch builder."""

    scale: PositionScale
    tick_values: Optional[Sequence[Any]]
    tick_format: TickFormat
    extend_ticks: bool = True


# =============================================================================
# BRANCH BUILDERS
# =============================================================================

def _draw_ramp(svg: etree._Element, options: LegendOptions, image: Image.Image) -> None:
    set_attrs(
        append(
            svg,
            "image",
            x=options.plot_left,
            y=options.margin_top,
            width=options.plot_right - options.plot_left,
            height=options.plot_height,
            preserveAspectRatio="none",
            style="image-rendering: pixelated",
        ),
        **{"xlink:href": to_data_url(image)},
    )


def _continuous(svg: etree._Element, options: LegendOptions) -> _AxisPlan:
    color = options.color
    stops = min(len(color.domain), len(color.range))
    n = max(1, stops)

    x = color.position_scale(
        np.linspace(options.plot_left, options.plot_right, n).tolist()
    )
    sampled = color.with_domain(np.linspace(0.0, 1.0, n).tolist())
    _draw_ramp(svg, options, ramp(lambda t: sampled(t) or NEUTRAL_COLOR, n))

    tick_values = options.tick_values
    if not stops and tick_values is None:
        tick_values = []

    return _AxisPlan(x, tick_values, options.tick_format)


def _sequential(svg: etree._Element, options: LegendOptions) -> _AxisPlan:
    color = options.color
    x = color.with_interpolator(interpolate_round(options.plot_left, options.plot_right))
    n = DEFAULT_SAMPLES if color.domain else 1
    _draw_ramp(svg, options, ramp(color.interpolator, n))

    tick_values = options.tick_values
    tick_format = options.tick_format

    # Quantile-ranked scales cannot generate ticks: label sample quantiles
    if not color.supports_ticks:
        if tick_values is None:
            count = max(1, math.floor(options.ticks + 1.5)) if color.domain else 0
            tick_values = [quantile(color.domain, p) for p in np.linspace(0.0, 1.0, count)]
        if not callable(tick_format):
            tick_format = format_value(DEFAULT_SPECIFIER if tick_format is None else tick_format)

    return _AxisPlan(x, tick_values, tick_format)


def _threshold(svg: etree._Element, options: LegendOptions) -> _AxisPlan:
    color = options.color
    thresholds = color.breakpoints()

    if options.tick_format is None:
        threshold_format = stringify
    elif isinstance(options.tick_format, str):
        threshold_format = format_value(options.tick_format)
    else:
        threshold_format = options.tick_format

    x = LinearScale(
        (-1, len(color.range) - 1),
        (options.plot_left, options.plot_right),
        round=True,
    )

    swatches = append(svg, "g")
    for i, fill in enumerate(color.range):
        append(
            swatches,
            "rect",
            x=x(i - 1),
            y=options.margin_top,
            width=x(i) - x(i - 1),
            height=options.plot_height,
            fill=fill,
        )

    return _AxisPlan(
        x,
        list(range(len(thresholds))),
        lambda i: threshold_format(thresholds[i]),
    )


def _ordinal(svg: etree._Element, options: LegendOptions) -> _AxisPlan:
    color = options.color
    x = BandScale(color.domain, (options.plot_left, options.plot_right), round=True)

    swatches = append(svg, "g")
    for value in color.domain:
        append(
            swatches,
            "rect",
            x=x(value),
            y=options.margin_top,
            width=max(0, x.bandwidth - 1),
            height=options.plot_height,
            fill=color(value),
        )

    return _AxisPlan(x, options.tick_values, options.tick_format, extend_ticks=False)


_BUILDERS = {
    ScaleKind.CONTINUOUS: _continuous,
    ScaleKind.SEQUENTIAL: _sequential,
    ScaleKind.THRESHOLD: _threshold,
    ScaleKind.ORDINAL: _ordinal,
}


# =============================================================================
# RENDERING
# =============================================================================

def render_legend(options: LegendOptions) -> LegendNode:
    """Render a color legend.

    Args:
        options: Legend layout options, including the color scale

    Returns:
        LegendNode wrapping an <svg> of exactly width x height pixels

    Raises:
        UnsupportedScaleKind: If the color scale has no supported kind
        ValueError: If the color scale yields colors that cannot be drawn
    """
    kind = getattr(options.color, "kind", None)
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise UnsupportedScaleKind(
            f"Cannot draw a legend for {type(options.color).__name__}: "
            f"expected one of {[k.value for k in _BUILDERS]}"
        )

    width, height = options.width, options.height
    logger.debug(f"Rendering {kind.value} legend {width}x{height} titled {options.title!r}")

    svg = create_svg(width, height, view_box=(0, 0, width, height))
    set_attrs(svg, style="overflow: visible; display: block;")

    plan = builder(svg, options)
    tick_format = plan.tick_format

    axis = append(svg, "g", transform=f"translate(0,{format_attr(height - options.margin_bottom)})")
    axis_bottom(
        axis,
        plan.scale,
        ticks=options.ticks,
        specifier=tick_format if isinstance(tick_format, str) else None,
        tick_format=tick_format if callable(tick_format) else None,
        tick_values=plan.tick_values,
        tick_size=options.tick_size,
    )
    if plan.extend_ticks:
        extend_tick_lines(axis, options.margin_top + options.margin_bottom - height)
    remove_domain(axis)

    append(
        axis,
        "text",
        text=options.title,
        x=options.margin_left,
        y=options.margin_top + options.margin_bottom - height - 6,
        fill="currentColor",
        text_anchor="start",
        font_weight="bold",
        class_="title",
    )

    return LegendNode(svg, width, height, kind)


def legend(color: ColorScale, **options: Any) -> LegendNode:
    """Shortcut for render_legend(LegendOptions(color=color, **options))."""
    return render_legend(LegendOptions(color=color, **options))
