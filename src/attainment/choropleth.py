"""Choropleth assembly for the educational attainment map.

Builds the county color scale from the education data, resolves county
fill colors, and places the legend on the map surface. Drawing county
and state geometry is left to the map renderer; this module only
provides the colors and the legend it embeds.

Example:
    >>> df = load_education(path)
    >>> scale = build_color_scale(df)
    >>> surface = create_surface()
    >>> attach_legend(surface, build_legend(scale))
"""

import copy
import logging
import math
from typing import Literal, Optional, Sequence

import numpy as np
import pandas as pd
from lxml import etree

from attainment.visualization import (
    GREENS_9,
    ColorScale,
    ContinuousColorScale,
    LegendNode,
    QuantileScale,
    QuantizeScale,
    SequentialScale,
    legend,
    piecewise_interpolator,
)
from attainment.visualization.svg import append, create_svg, format_attr

logger = logging.getLogger(__name__)

PAGE_TITLE = "Educational Attainment in the USA"
PAGE_DESCRIPTION = "Percentage of people 25+ with bachelors or higher (2010 - 2014)"

# Map surface (viewBox units)
MAP_WIDTH = 975
MAP_HEIGHT = 610

# Legend placement on the map surface
LEGEND_OFFSET = (610, 20)
LEGEND_WIDTH = 260
LEGEND_TITLE = "Percent"
# Whole-percent tick labels
LEGEND_TICK_FORMAT = ".0f"

ScaleMethod = Literal["quantize", "quantile", "linear", "sequential"]
SCALE_METHODS = ("quantize", "quantile", "linear", "sequential")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def attainment_extent(df: pd.DataFrame) -> tuple[int, int]:
    """Rounded (min, max) of county attainment percentages.

    Raises:
        ValueError: If there are no percentages
    """
    pct = df["bachelors_or_higher"].dropna()
    if pct.empty:
        raise ValueError("No attainment values to build a color scale from")
    return _round_half_up(pct.min()), _round_half_up(pct.max())


def build_color_scale(
    df: pd.DataFrame,
    method: ScaleMethod = "quantize",
    scheme: Sequence[str] = GREENS_9,
) -> ColorScale:
    """Build the county color scale.

    Args:
        df: Education DataFrame from load_education()
        method: One of:
            - "quantize": equal-width bins over the rounded extent
            - "quantile": bins holding equal numbers of counties
            - "linear": color stops spread evenly over the rounded extent
            - "sequential": continuous interpolation across the scheme
        scheme: Ordered colors, light to dark

    Returns:
        Color scale tagged with the matching legend kind

    Raises:
        ValueError: If the method is unknown or there is no data
    """
    if method not in SCALE_METHODS:
        raise ValueError(f"Invalid scale method: {method}. Must be one of {SCALE_METHODS}")

    if method == "quantile":
        scale = QuantileScale(df["bachelors_or_higher"].tolist(), scheme)
    else:
        lo, hi = attainment_extent(df)
        if method == "quantize":
            scale = QuantizeScale((lo, hi), scheme)
        elif method == "linear":
            scale = ContinuousColorScale(np.linspace(lo, hi, len(scheme)).tolist(), scheme)
        else:
            scale = SequentialScale(piecewise_interpolator(scheme), (lo, hi))

    logger.debug(f"Built {method} color scale ({scale.kind.value}) over {len(df)} counties")
    return scale


def county_fills(df: pd.DataFrame, scale: ColorScale) -> dict[int, Optional[str]]:
    """Map county FIPS code to fill color."""
    return {
        int(fips): scale(float(pct))
        for fips, pct in zip(df["fips"], df["bachelors_or_higher"])
    }


def build_legend(
    scale: ColorScale,
    title: str = LEGEND_TITLE,
    width: int = LEGEND_WIDTH,
    tick_format: Optional[str] = LEGEND_TICK_FORMAT,
) -> LegendNode:
    """Render the map legend for a county color scale.

    Args:
        scale: Color scale from build_color_scale()
        title: Bold label above the swatches
        width: Legend width in pixels
        tick_format: Format spec for tick labels (None for the scale default)
    """
    return legend(scale, title=title, width=width, tick_format=tick_format)


def create_surface() -> etree._Element:
    """Create the map's root <svg>, scaled to the page width."""
    return create_svg("100%", None, view_box=(0, 0, MAP_WIDTH, MAP_HEIGHT))


def attach_legend(
    surface: etree._Element,
    node: LegendNode,
    offset: tuple[float, float] = LEGEND_OFFSET,
) -> etree._Element:
    """Place a copy of the legend on the map surface.

    Args:
        surface: Map root <svg> from create_surface()
        node: Rendered legend
        offset: (x, y) position of the legend's top-left corner

    Returns:
        The translated group holding the legend
    """
    x, y = offset
    group = append(surface, "g", transform=f"translate({format_attr(x)},{format_attr(y)})")
    element = copy.deepcopy(node.element)
    element.set("id", "legend")
    group.append(element)
    return group
