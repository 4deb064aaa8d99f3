"""Visualization utilities for attainment maps.

This module provides the color scales, palettes and legend renderer
shared by the choropleth, the CLI and the dashboard.
"""

from .colors import (
    # Palettes
    GREENS_9,
    hex_to_rgb,
    interpolate_greens,
    interpolate_rgb,
    parse_color,
    piecewise_interpolator,
    rgb_to_hex,
)
from .legend import (
    # Legends
    LegendNode,
    LegendOptions,
    UnsupportedScaleKind,
    legend,
    render_legend,
)
from .scales import (
    # Scales
    BandScale,
    ColorScale,
    ContinuousColorScale,
    LinearScale,
    OrdinalScale,
    QuantileScale,
    QuantizeScale,
    ScaleKind,
    SequentialQuantileScale,
    SequentialScale,
    ThresholdScale,
    quantile,
)

__all__ = [
    "GREENS_9",
    "hex_to_rgb",
    "rgb_to_hex",
    "parse_color",
    "interpolate_rgb",
    "interpolate_greens",
    "piecewise_interpolator",
    "ScaleKind",
    "ColorScale",
    "ContinuousColorScale",
    "SequentialScale",
    "SequentialQuantileScale",
    "QuantizeScale",
    "QuantileScale",
    "ThresholdScale",
    "OrdinalScale",
    "LinearScale",
    "BandScale",
    "quantile",
    "LegendOptions",
    "LegendNode",
    "UnsupportedScaleKind",
    "legend",
    "render_legend",
]
