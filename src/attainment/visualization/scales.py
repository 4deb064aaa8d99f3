"""Color scales and position scales for legends.

Every color scale carries an explicit ScaleKind tag chosen by the class the
caller builds. The legend renderer dispatches on that tag:

- CONTINUOUS: ContinuousColorScale (piecewise-linear color stops)
- SEQUENTIAL: SequentialScale, SequentialQuantileScale (interpolator over [0, 1])
- THRESHOLD: QuantizeScale, QuantileScale, ThresholdScale (ordered breakpoints)
- ORDINAL: OrdinalScale (categories to colors)

Position scales (LinearScale, BandScale, and sequential scales built with a
pixel interpolator) map domain values to pixel offsets and drive axis ticks.

Example:
    >>> from attainment.visualization.colors import GREENS_9
    >>> color = QuantizeScale((24, 66), GREENS_9)
    >>> color.kind
    <ScaleKind.THRESHOLD: 'threshold'>
    >>> color(30)
    '#e5f5e0'
"""

import bisect
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Hashable, Optional, Protocol, Sequence

import numpy as np

from .colors import interpolate_rgb, interpolate_round
from .ticks import tick_format as _tick_format
from .ticks import ticks as _ticks


class ScaleKind(Enum):
    """Legend rendering strategy for a color scale."""

    CONTINUOUS = "continuous"
    SEQUENTIAL = "sequential"
    THRESHOLD = "threshold"
    ORDINAL = "ordinal"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def quantile(values: Sequence[float], p: float) -> float:
    """p-quantile using linear interpolation between order statistics.

    Missing values are ignored. Returns NaN when no values remain.

    Examples:
        >>> quantile([1, 2, 3, 4], 0.5)
        2.5
    """
    data = np.asarray([v for v in values if not _is_missing(v)], dtype=float)
    if data.size == 0:
        return math.nan
    return float(np.quantile(data, p))


def _interpolate_number(a: float, b: float) -> Callable[[float], float]:
    return lambda t: a * (1 - t) + b * t


def _normalize(a: float, b: float) -> Callable[[float], float]:
    if b == a:
        return lambda x: 0.5
    return lambda x: (x - a) / (b - a)


def _piecewise(
    domain: Sequence[float],
    output: Sequence[Any],
    interpolate: Callable[[Any, Any], Callable[[float], Any]],
) -> Callable[[float], Any]:
    """Map a domain onto an output list segment by segment.

    Only the first min(len(domain), len(output)) entries are used. Values
    outside the domain extrapolate from the nearest segment.
    """
    j = min(len(domain), len(output)) - 1
    if j < 0:
        return lambda x: None

    d = list(domain[: j + 1])
    r = list(output[: j + 1])
    if j == 0:
        value = interpolate(r[0], r[0])(0.5)
        return lambda x: value

    if d[-1] < d[0]:
        d.reverse()
        r.reverse()

    segments = [
        (_normalize(d[i], d[i + 1]), interpolate(r[i], r[i + 1]))
        for i in range(j)
    ]

    def scale(x: float) -> Any:
        i = bisect.bisect_right(d, x, 1, j) - 1
        normalize, interp = segments[i]
        return interp(normalize(x))

    return scale


# =============================================================================
# POSITION SCALES
# =============================================================================

class PositionScale(Protocol):
    """Interface shared by scales that place axis ticks.

    ticks() and tick_format() return None when the scale cannot generate
    them; the axis then falls back to the domain and plain labels.
    """

    domain: tuple
    range: tuple
    bandwidth: float
    round: bool

    def __call__(self, value: Any) -> Optional[float]: ...

    def ticks(self, count: float) -> Optional[list]: ...

    def tick_format(
        self, count: float, specifier: Optional[str] = None
    ) -> Optional[Callable[[Any], str]]: ...


class LinearScale:
    """Piecewise-linear numeric scale.

    Attributes:
        domain: Ordered input stops
        range: Output stops (pixels)
        round: Whether outputs are rounded to integers
    """

    bandwidth = 0.0

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range: Sequence[float] = (0.0, 1.0),
        round: bool = False,
    ):
        self.domain = tuple(domain)
        self.range = tuple(range)
        self.round = round
        self._scale = _piecewise(
            self.domain,
            self.range,
            interpolate_round if round else _interpolate_number,
        )

    def __call__(self, value: Any) -> Optional[float]:
        if _is_missing(value):
            return None
        return self._scale(value)

    def ticks(self, count: float = 10) -> list:
        if not self.domain:
            return []
        return _ticks(self.domain[0], self.domain[-1], count)

    def tick_format(
        self, count: float = 10, specifier: Optional[str] = None
    ) -> Callable[[Any], str]:
        if not self.domain:
            return _tick_format(0, 0, count, specifier)
        return _tick_format(self.domain[0], self.domain[-1], count, specifier)


class BandScale:
    """Evenly divides a pixel range into one band per category.

    No padding; leftover space from rounding is split evenly on both ends.

    Attributes:
        domain: Category values, in order
        range: Pixel extent (start, stop)
        round: Whether band starts and width are rounded to integers
        step: Distance between band starts
        bandwidth: Width of each band
    """

    def __init__(
        self,
        domain: Sequence[Hashable],
        range: Sequence[float] = (0.0, 1.0),
        round: bool = False,
    ):
        self.domain = tuple(dict.fromkeys(domain))
        self.range = (range[0], range[-1])
        self.round = round

        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)

        step = (stop - start) / max(1, n)
        if round:
            step = math.floor(step)
        start += (stop - start - step * n) * 0.5
        bandwidth = step
        if round:
            start = math.floor(start + 0.5)
            bandwidth = math.floor(bandwidth + 0.5)

        positions = (start + step * np.arange(n)).tolist()
        if round:
            positions = [int(p) for p in positions]
        if reverse:
            positions.reverse()

        self.step = step
        self.bandwidth = bandwidth
        self._positions = dict(zip(self.domain, positions))

    def __call__(self, value: Any) -> Optional[float]:
        return self._positions.get(value)

    def ticks(self, count: float = 10) -> None:
        return None

    def tick_format(self, count: float = 10, specifier: Optional[str] = None) -> None:
        return None


# =============================================================================
# COLOR SCALES
# =============================================================================

class ColorScale(ABC):
    """Base class for value-to-color scales.

    Attributes:
        kind: Legend rendering strategy for this scale
        domain: Input values (stops, extent, samples, breakpoints or categories)
        range: Output colors
        unknown: Returned for missing or unmapped inputs
    """

    kind: ScaleKind
    domain: tuple
    range: tuple
    unknown: Optional[str] = None

    @abstractmethod
    def __call__(self, value: Any) -> Optional[str]:
        """Map a domain value to a color."""
        pass


class ContinuousColorScale(ColorScale):
    """Piecewise-linear scale from numeric stops to colors.

    Example:
        >>> scale = ContinuousColorScale([0, 100], ["#000000", "#ffffff"])
        >>> scale(50)
        '#808080'
    """

    kind = ScaleKind.CONTINUOUS

    def __init__(
        self,
        domain: Sequence[float],
        colors: Sequence[str],
        unknown: Optional[str] = None,
    ):
        self.domain = tuple(float(d) for d in domain)
        self.range = tuple(colors)
        self.unknown = unknown
        self._scale = _piecewise(self.domain, self.range, interpolate_rgb)

    def __call__(self, value: Any) -> Optional[str]:
        if _is_missing(value):
            return self.unknown
        color = self._scale(value)
        # No stops: every value is unmapped
        return self.unknown if color is None else color

    def with_domain(self, domain: Sequence[float]) -> "ContinuousColorScale":
        """Copy of this scale with different domain stops."""
        return ContinuousColorScale(domain, self.range, self.unknown)

    def position_scale(self, pixels: Sequence[float]) -> LinearScale:
        """Copy of this scale mapping the same stops to rounded pixels."""
        return LinearScale(self.domain, pixels, round=True)


class SequentialScale(ColorScale):
    """Maps a numeric extent linearly onto an interpolator over [0, 1].

    Built with a numeric interpolator (see with_interpolator) the scale
    doubles as a position scale.
    """

    kind = ScaleKind.SEQUENTIAL
    supports_ticks = True
    bandwidth = 0.0
    round = False

    def __init__(
        self,
        interpolator: Callable[[float], Any],
        domain: Sequence[float] = (0.0, 1.0),
        unknown: Optional[str] = None,
    ):
        self.interpolator = interpolator
        self.domain = tuple(float(d) for d in domain)
        self.unknown = unknown

    @property
    def range(self) -> tuple:
        """Interpolator output at both ends of [0, 1]."""
        return (self.interpolator(0.0), self.interpolator(1.0))

    def __call__(self, value: Any) -> Any:
        if _is_missing(value):
            return self.unknown
        if not self.domain:
            return self.interpolator(0.5)
        d0, d1 = self.domain[0], self.domain[-1]
        t = 0.5 if d1 == d0 else (value - d0) / (d1 - d0)
        return self.interpolator(t)

    def with_interpolator(self, interpolator: Callable[[float], Any]) -> "SequentialScale":
        """Copy of this scale with a different interpolator."""
        return type(self)(interpolator, self.domain, self.unknown)

    def ticks(self, count: float = 10) -> Optional[list]:
        if not self.domain:
            return []
        return _ticks(self.domain[0], self.domain[-1], count)

    def tick_format(
        self, count: float = 10, specifier: Optional[str] = None
    ) -> Optional[Callable[[Any], str]]:
        if not self.domain:
            return _tick_format(0, 0, count, specifier)
        return _tick_format(self.domain[0], self.domain[-1], count, specifier)


class SequentialQuantileScale(SequentialScale):
    """Maps a value to its quantile rank in a sample, then to the interpolator.

    Cannot generate ticks: legends label it with quantiles of the sample.
    """

    supports_ticks = False

    def __init__(
        self,
        interpolator: Callable[[float], Any],
        samples: Sequence[float],
        unknown: Optional[str] = None,
    ):
        values = sorted(float(v) for v in samples if not _is_missing(v))
        super().__init__(interpolator, values, unknown)

    def __call__(self, value: Any) -> Any:
        if _is_missing(value):
            return self.unknown
        n = len(self.domain)
        if n == 0:
            return self.unknown
        if n == 1:
            return self.interpolator(0.0)
        return self.interpolator((bisect.bisect_right(self.domain, value, 1) - 1) / (n - 1))

    def ticks(self, count: float = 10) -> None:
        return None

    def tick_format(self, count: float = 10, specifier: Optional[str] = None) -> None:
        return None


class _BreakpointScale(ColorScale):
    """Shared lookup for scales that bin values at ordered breakpoints."""

    kind = ScaleKind.THRESHOLD

    @abstractmethod
    def breakpoints(self) -> list[float]:
        """Ordered values separating adjacent colors."""
        pass

    def __call__(self, value: Any) -> Optional[str]:
        if _is_missing(value) or not self.range:
            return self.unknown
        bounds = self.breakpoints()
        hi = min(len(bounds), len(self.range) - 1)
        return self.range[bisect.bisect_right(bounds, value, 0, hi)]

    def _color_index(self, color: str) -> int:
        try:
            return self.range.index(color)
        except ValueError:
            raise ValueError(f"Color {color!r} is not in the scale range") from None


class QuantizeScale(_BreakpointScale):
    """Splits a numeric extent into equal-width bins, one per color.

    Example:
        >>> scale = QuantizeScale((0, 100), ["#000", "#888", "#fff"])
        >>> [round(t, 2) for t in scale.breakpoints()]
        [33.33, 66.67]
    """

    def __init__(
        self,
        extent: Sequence[float],
        colors: Sequence[str],
        unknown: Optional[str] = None,
    ):
        x0, x1 = float(extent[0]), float(extent[-1])
        self.domain = (x0, x1)
        self.range = tuple(colors)
        self.unknown = unknown

        n = max(0, len(self.range) - 1)
        i = np.arange(n)
        self._thresholds = (((i + 1) * x1 - (i - n) * x0) / (n + 1)).tolist()

    def breakpoints(self) -> list[float]:
        return list(self._thresholds)

    def invert_extent(self, color: str) -> tuple[float, float]:
        """Extent of domain values mapped to `color`.

        Raises:
            ValueError: If the color is not in the range
        """
        i = self._color_index(color)
        x0, x1 = self.domain
        bounds = self._thresholds
        if not bounds:
            return (x0, x1)
        if i < 1:
            return (x0, bounds[0])
        if i >= len(bounds):
            return (bounds[-1], x1)
        return (bounds[i - 1], bounds[i])


class QuantileScale(_BreakpointScale):
    """Bins a sample so each color covers an equal share of the values."""

    def __init__(
        self,
        samples: Sequence[float],
        colors: Sequence[str],
        unknown: Optional[str] = None,
    ):
        self.domain = tuple(sorted(float(v) for v in samples if not _is_missing(v)))
        self.range = tuple(colors)
        self.unknown = unknown

        # An empty sample has no breakpoints: every value maps to the first color
        q = len(self.range) if self.domain else 0
        self._quantiles = [quantile(self.domain, i / q) for i in range(1, q)]

    def breakpoints(self) -> list[float]:
        return list(self._quantiles)

    def invert_extent(self, color: str) -> tuple[Optional[float], Optional[float]]:
        """Extent of domain values mapped to `color`; None bounds for an empty sample.

        Raises:
            ValueError: If the color is not in the range
        """
        i = self._color_index(color)
        if not self.domain:
            return (None, None)
        bounds = self._quantiles
        lo = bounds[i - 1] if 0 < i <= len(bounds) else self.domain[0]
        hi = bounds[i] if i < len(bounds) else self.domain[-1]
        return (lo, hi)


class ThresholdScale(_BreakpointScale):
    """Bins values at explicit breakpoints.

    With k breakpoints the scale uses k + 1 colors.

    Example:
        >>> scale = ThresholdScale([10, 20, 30], ["a", "b", "c", "d"])
        >>> scale(5), scale(10), scale(35)
        ('a', 'b', 'd')
    """

    def __init__(
        self,
        breakpoints: Sequence[float],
        colors: Sequence[str],
        unknown: Optional[str] = None,
    ):
        self.domain = tuple(breakpoints)
        self.range = tuple(colors)
        self.unknown = unknown

    def breakpoints(self) -> list[float]:
        return list(self.domain)

    def invert_extent(self, color: str) -> tuple[Optional[float], Optional[float]]:
        """Breakpoints bounding `color`; None for the open ends.

        Raises:
            ValueError: If the color is not in the range
        """
        i = self._color_index(color)
        lo = self.domain[i - 1] if 0 < i <= len(self.domain) else None
        hi = self.domain[i] if i < len(self.domain) else None
        return (lo, hi)


class OrdinalScale(ColorScale):
    """Maps categories to colors, cycling colors when there are fewer.

    Lookups never extend the domain; unknown categories map to `unknown`.
    """

    kind = ScaleKind.ORDINAL

    def __init__(
        self,
        categories: Sequence[Hashable],
        colors: Sequence[str],
        unknown: Optional[str] = None,
    ):
        self.domain = tuple(dict.fromkeys(categories))
        self.range = tuple(colors)
        self.unknown = unknown
        self._index = {value: i for i, value in enumerate(self.domain)}

    def __call__(self, value: Any) -> Optional[str]:
        i = self._index.get(value)
        if i is None or not self.range:
            return self.unknown
        return self.range[i % len(self.range)]
