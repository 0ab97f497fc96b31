"""
Range Mapping - Uniform Floats to Bounded Numbers

TigerStyle: One raw draw in, one bounded value out.

A raw value in [0, 1) picks one of the ``steps_count + 1`` grid points
``min + k * precision`` inside [min, max]. Grid arithmetic is exact
(decimal on the shortest repr of each bound), so any finite range works
and binary drift such as 0.49999999999999994 surfaces as 0.5.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext
from fractions import Fraction

from .constants import RANGE_DECIMAL_GUARD_DIGITS
from .models import Number, NumericOptions


def _exact(value: Number) -> Decimal:
    return Decimal(repr(value))


def _round_decimal(exact: Decimal, places: int, rounding: str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(Decimal(1).scaleb(-places), rounding=rounding)


def decimal_places(value: Number) -> int:
    """Number of decimal places in the shortest repr of ``value``.

    0.01 -> 2, 0.5 -> 1, 1e-05 -> 5, 10 -> 0.
    """
    exponent = _exact(value).as_tuple().exponent
    return -exponent if exponent < 0 else 0


def quantize(value: Number, places: int) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Works on the shortest decimal repr of the float, so 0.285 rounds to
    0.29 even though its binary value is slightly below.
    """
    assert places >= 0, f"places ({places}) must be non-negative"
    return float(_round_decimal(_exact(value), places, ROUND_HALF_UP))


def is_integral(value: Number) -> bool:
    """True for ints and for floats with no fractional part."""
    return isinstance(value, int) or float(value).is_integer()


@dataclass(frozen=True)
class NumericRange:
    """Effective bounds after defaults and clamping.

    TigerStyle: min <= max always holds here; callers' max < min is
    clamped to max = min rather than rejected.
    """

    min: Number
    max: Number
    precision: Number

    def __post_init__(self) -> None:
        assert self.min <= self.max, f"min ({self.min}) must be <= max ({self.max})"
        assert self.precision > 0, f"precision ({self.precision}) must be positive"

    @classmethod
    def from_options(cls, options: NumericOptions, precision_default: Number) -> NumericRange:
        """Resolve defaults of ``options`` into a new range."""
        precision = options.precision if options.precision is not None else precision_default
        return cls(min=options.min, max=max(options.max, options.min), precision=precision)

    @property
    def integral(self) -> bool:
        """True when every grid point is an integer."""
        return is_integral(self.min) and is_integral(self.precision)

    @property
    def places(self) -> int:
        """Decimal places of the grid: those of the step or of min, whichever has more."""
        return max(decimal_places(self.precision), decimal_places(self.min))

    def _digits(self) -> int:
        """Decimal context precision that keeps grid arithmetic exact."""
        magnitude = max(abs(_exact(self.min)), abs(_exact(self.max))).adjusted() + 1
        return max(28, magnitude + self.places + RANGE_DECIMAL_GUARD_DIGITS)

    @property
    def steps_count(self) -> int:
        """Index of the last grid point that is still <= max."""
        if self.integral and is_integral(self.max):
            return (int(self.max) - int(self.min)) // int(self.precision)
        with localcontext() as ctx:
            ctx.prec = self._digits()
            span = (_exact(self.max) - _exact(self.min)) / _exact(self.precision)
            return int(span.to_integral_value(rounding=ROUND_FLOOR))

    def step_index(self, raw: float) -> int:
        """Map a raw draw in [0, 1) to a grid index in [0, steps_count]."""
        assert 0.0 <= raw < 1.0, f"raw ({raw}) must be in [0, 1)"
        # Exact rational product: steps_count may exceed the float range
        return int(Fraction(raw) * (self.steps_count + 1))

    def grid_point(self, index: int, places: int) -> float:
        """Value of grid point ``index``, rounded half up to ``places`` decimals."""
        with localcontext() as ctx:
            ctx.prec = self._digits()
            exact = _exact(self.min) + index * _exact(self.precision)
        return float(_round_decimal(exact, places, ROUND_HALF_UP))

    def clamp(self, value: Number) -> Number:
        """Limit ``value`` to [min, max]."""
        return min(max(value, self.min), self.max)


def map_number(raw: float, bounds: NumericRange) -> Number:
    """Map a raw draw to a grid point, keeping integers as ``int``.

    Returns an int when min and precision are both integral, otherwise a
    float rounded to the grid's decimal places, so an off-grid min such as
    0.125 with step 0.25 keeps its three decimals.
    """
    index = bounds.step_index(raw)

    if bounds.integral:
        value = int(bounds.min) + index * int(bounds.precision)
        return int(bounds.clamp(value))

    return float(bounds.clamp(bounds.grid_point(index, bounds.places)))


def map_float(raw: float, bounds: NumericRange) -> float:
    """Map a raw draw to a float with exactly the step's decimal places.

    Results are clamped to [min, max] rounded inwards to those places. When
    no such value exists (min=0.33, max=0.34, step 0.1) min rounded half
    up is returned.
    """
    places = decimal_places(bounds.precision)
    value = bounds.grid_point(bounds.step_index(raw), places)

    low = float(_round_decimal(_exact(bounds.min), places, ROUND_CEILING))
    high = float(_round_decimal(_exact(bounds.max), places, ROUND_FLOOR))
    if low > high:
        return quantize(bounds.min, places)
    return float(min(max(value, low), high))
