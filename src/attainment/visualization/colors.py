"""Color parsing, interpolation and palettes for attainment legends.

This module provides the color primitives shared by scales and legends:
- Palettes: the 9-step Greens scheme used by the county choropleth
- Parsing: hex ("#rgb", "#rrggbb") and functional ("rgb(r, g, b)") colors
- Interpolation: RGB interpolation between two colors or across many stops

Interpolators return hex strings so their output can be fed back into
parse_color() and used directly as SVG fill values.
"""

import math
import re
from typing import Callable, Sequence

# =============================================================================
# PALETTES
# =============================================================================

# Light to dark greens, 9 steps (ColorBrewer Greens)
GREENS_9 = (
    "#f7fcf5",
    "#e5f5e0",
    "#c7e9c0",
    "#a1d99b",
    "#74c476",
    "#41ab5d",
    "#238b45",
    "#006d2c",
    "#00441b",
)

# Ramp fill for color scales with no usable stops
NEUTRAL_COLOR = "#cccccc"

_RGB_FUNCTION = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$"
)


# =============================================================================
# PARSING
# =============================================================================

def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., "#ADD8E6" or "#abc")

    Returns:
        Tuple of (R, G, B) values (0-255)

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex color
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to hex color string.

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)

    Returns:
        Hex color string (e.g., "#add8e6")
    """
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_color(color: str) -> tuple[int, int, int]:
    """Parse a hex or rgb() color string.

    Args:
        color: Color such as "#74c476", "#fff" or "rgb(116, 196, 118)"

    Returns:
        Tuple of (R, G, B) values (0-255)

    Raises:
        ValueError: If the color format is not recognised

    Examples:
        >>> parse_color("#74c476")
        (116, 196, 118)
        >>> parse_color("rgb(1, 2, 3)")
        (1, 2, 3)
    """
    text = color.strip().lower()
    if text.startswith("#"):
        return hex_to_rgb(text)

    match = _RGB_FUNCTION.match(text)
    if match is None:
        raise ValueError(f"Unsupported color format: {color!r}")
    return tuple(min(255, int(c)) for c in match.groups())


# =============================================================================
# INTERPOLATION
# =============================================================================

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def interpolate_rgb(start: str, end: str) -> Callable[[float], str]:
    """Interpolate between two colors in RGB space.

    Channels are rounded to the nearest integer, so t=0 and t=1 return
    exactly the start and end colors.

    Args:
        start: Color at t=0
        end: Color at t=1

    Returns:
        Function mapping t in [0, 1] to a hex color
    """
    a = parse_color(start)
    b = parse_color(end)

    def interpolate(t: float) -> str:
        channels = (
            max(0, min(255, _round_half_up(x * (1 - t) + y * t)))
            for x, y in zip(a, b)
        )
        return rgb_to_hex(*channels)

    return interpolate


def piecewise_interpolator(colors: Sequence[str]) -> Callable[[float], str]:
    """Interpolate across evenly spaced color stops.

    Args:
        colors: Ordered color stops (at least one)

    Returns:
        Function mapping t in [0, 1] to a hex color; t outside [0, 1]
        is clamped to the end stops.

    Examples:
        >>> interp = piecewise_interpolator(["#000000", "#ffffff"])
        >>> interp(0.5)
        '#808080'
    """
    if not colors:
        raise ValueError("At least one color stop is required")

    stops = [interpolate_rgb(a, b) for a, b in zip(colors, colors[1:])]
    first = rgb_to_hex(*parse_color(colors[0]))
    if not stops:
        return lambda t: first

    last = len(stops)

    def interpolate(t: float) -> str:
        t = max(0.0, min(1.0, t))
        i = min(last - 1, math.floor(t * last))
        return stops[i](t * last - i)

    return interpolate


# Continuous counterpart of GREENS_9, for sequential legends
interpolate_greens = piecewise_interpolator(GREENS_9)


def interpolate_round(start: float, end: float) -> Callable[[float], int]:
    """Interpolate between two numbers and round to the nearest integer."""

    def interpolate(t: float) -> int:
        return _round_half_up(start * (1 - t) + end * t)

    return interpolate
