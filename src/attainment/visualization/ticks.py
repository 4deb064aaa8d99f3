"""Nice tick generation and numeric tick formatting.

Ticks are spaced at 1, 2 or 5 times a power of ten so that axis labels
read as round numbers. Formatting uses Python's format specification
mini-language; tick_format() fills in a precision derived from the tick
step when the specifier does not give one.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

DEFAULT_SPECIFIER = ",f"

_SPECIFIER = re.compile(
    r"^(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<alternate>#)?"
    r"(?P<zero>0)?"
    r"(?P<width>\d+)?"
    r"(?P<grouping>[,_])?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[bcdeEfFgGnosxX%])?$"
)

_INTEGER_TYPES = set("bcdoxX")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# =============================================================================
# TICK GENERATION
# =============================================================================

def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def ticks(start: float, stop: float, count: float) -> list[float]:
    """Generate about `count` nicely rounded values between start and stop.

    Args:
        start: First domain value
        stop: Last domain value (may be less than start)
        count: Approximate number of ticks wanted

    Returns:
        Tick values in the same direction as start -> stop

    Examples:
        >>> ticks(24, 66, 4)
        [30, 40, 50, 60]
        >>> ticks(0, 1, 5)
        [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]
    """
    if not count > 0:
        return []
    if start == stop:
        return [start]

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    if not math.isfinite(stop - start):
        return []

    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []

    if inc < 0:
        values = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        values = [(i1 + i) * inc for i in range(i2 - i1 + 1)]

    if reverse:
        values.reverse()
    return values


def tick_increment(start: float, stop: float, count: float) -> float:
    """Signed tick increment; negative values mean 1 / -increment."""
    return _tick_spec(start, stop, count)[2]


def tick_step(start: float, stop: float, count: float) -> float:
    """Distance between adjacent ticks for the given domain and count."""
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    inc = tick_increment(lo, hi, count)
    step = 1 / -inc if inc < 0 else inc
    return -step if reverse else step


# =============================================================================
# FORMATTING
# =============================================================================

@dataclass(frozen=True)
class FormatSpecifier:
    """Parsed Python format specification.

    Attributes mirror the fields of the format mini-language:
    [[fill]align][sign][#][0][width][grouping][.precision][type]
    """

    fill: str = ""
    align: str = ""
    sign: str = ""
    alternate: str = ""
    zero: str = ""
    width: str = ""
    grouping: str = ""
    precision: Optional[int] = None
    type: str = ""

    @classmethod
    def parse(cls, specifier: str) -> "FormatSpecifier":
        """Parse a specifier string.

        Raises:
            ValueError: If the specifier is not a valid format spec
        """
        match = _SPECIFIER.match(specifier)
        if match is None:
            raise ValueError(f"invalid format: {specifier}")

        groups = {k: v or "" for k, v in match.groupdict().items()}
        precision = match.group("precision")
        groups["precision"] = int(precision) if precision is not None else None
        return cls(**groups)

    def __str__(self) -> str:
        precision = f".{self.precision}" if self.precision is not None else ""
        return (
            f"{self.fill}{self.align}{self.sign}{self.alternate}{self.zero}"
            f"{self.width}{self.grouping}{precision}{self.type}"
        )


def format_value(specifier: str) -> Callable[[Any], str]:
    """Build a formatter from a format specification string.

    Integer presentation types round float values first, so "d" can be
    used for tick values that happen to be floats.

    Args:
        specifier: Format spec such as ",f", ".0%" or "d"

    Returns:
        Function formatting a number to a string

    Raises:
        ValueError: If the specifier is invalid

    Examples:
        >>> format_value(",.0f")(12345.6)
        '12,346'
        >>> format_value("d")(30.0)
        '30'
    """
    spec = FormatSpecifier.parse(specifier)
    text = str(spec)

    if spec.type in _INTEGER_TYPES:
        return lambda value: format(_round_half_up(value), text)
    return lambda value: format(value, text)


def precision_fixed(step: float) -> int:
    """Number of decimals needed to tell apart values `step` apart."""
    step = abs(step)
    if step == 0 or not math.isfinite(step):
        return 0
    return max(0, -math.floor(math.log10(step)))


def tick_format(
    start: float,
    stop: float,
    count: float,
    specifier: Optional[str] = None,
) -> Callable[[Any], str]:
    """Formatter for ticks generated over [start, stop] with `count`.

    Args:
        start: First domain value
        stop: Last domain value
        count: Approximate tick count passed to ticks()
        specifier: Optional format spec; defaults to ",f"

    Returns:
        Function formatting a tick value

    Examples:
        >>> tick_format(24, 66, 4)(30)
        '30'
        >>> tick_format(0, 1, 5)(0.4)
        '0.4'
    """
    spec = FormatSpecifier.parse(specifier if specifier is not None else DEFAULT_SPECIFIER)

    if spec.precision is None and spec.type in ("f", "%") and start != stop and count > 0:
        precision = precision_fixed(tick_step(start, stop, count))
        if spec.type == "%":
            precision -= 2
        spec = replace(spec, precision=max(0, precision))

    return format_value(str(spec))


def stringify(value: Any) -> str:
    """Plain label for a value; integral floats drop the decimal point."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
