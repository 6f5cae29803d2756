"""
Euclidean building blocks for spaces and slices.

Intervals and complex regions bound the coordinates of a hyperbolic space;
interval data records how each interval is subdivided by a slice.
"""
import copy
import numpy as np
from typing import Iterable, Tuple

from .common import DEFAULT_PRECISION, Precision


class RealInterval:
    """Closed real interval [lower, upper]."""

    def __init__(self, lower: float = 0.0, upper: float = 0.0, precision: Precision = DEFAULT_PRECISION):
        self.lower, self.upper = float(lower), float(upper)
        self.precision = precision

    def set(self, lower: float, upper: float):
        """Set both bounds, ordering them."""
        self.lower, self.upper = (float(upper), float(lower)) if lower > upper else (float(lower), float(upper))

    def initialize(self):
        if self.lower > self.upper:
            self.lower, self.upper = self.upper, self.lower

    @property
    def length(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.upper + self.lower) * 0.5

    def contains(self, value: float) -> bool:
        le = self.precision.is_less_equal
        return le(self.lower, value) and le(value, self.upper)

    def contains_co(self, value: float) -> bool:
        p = self.precision
        return p.is_less_equal(self.lower, value) and p.is_less(value, self.upper)

    def contains_oc(self, value: float) -> bool:
        p = self.precision
        return p.is_less(self.lower, value) and p.is_less_equal(value, self.upper)

    def contains_oo(self, value: float) -> bool:
        p = self.precision
        return p.is_less(self.lower, value) and p.is_less(value, self.upper)

    def closest(self, value: float) -> float:
        if value < self.lower:
            return self.lower
        return self.upper if self.upper < value else value

    def distance(self, value: float) -> float:
        return abs(value - self.closest(value))

    def extend(self, value: float) -> "RealInterval":
        self.lower -= value
        self.upper += value
        return self

    def __iadd__(self, shift: float):
        self.lower += shift
        self.upper += shift
        return self

    def __isub__(self, shift: float):
        self.lower -= shift
        self.upper -= shift
        return self

    def __imul__(self, factor: float):
        self.lower *= factor
        self.upper *= factor
        return self

    def __itruediv__(self, factor: float):
        self.lower /= factor
        self.upper /= factor
        return self

    def __add__(self, shift: float):
        out = self.copy()
        out += shift
        return out

    def __sub__(self, shift: float):
        out = self.copy()
        out -= shift
        return out

    def __mul__(self, factor: float):
        out = self.copy()
        out *= factor
        return out

    __rmul__ = __mul__

    def __truediv__(self, factor: float):
        out = self.copy()
        out /= factor
        return out

    def __eq__(self, other):
        if not isinstance(other, RealInterval):
            return NotImplemented
        eq = self.precision.is_equal
        return eq(self.lower, other.lower) and eq(self.upper, other.upper)

    __hash__ = None

    def copy(self) -> "RealInterval":
        return RealInterval(self.lower, self.upper, self.precision)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lower, self.upper)

    def __repr__(self):
        return f"RealInterval({self.lower!r}, {self.upper!r})"


class ComplexRegion:
    """Axis-aligned rectangle in the complex plane, real x imag."""

    def __init__(self, real: RealInterval = None, imag: RealInterval = None,
                 precision: Precision = DEFAULT_PRECISION):
        self.precision = precision
        self.real = real if real is not None else RealInterval(precision=precision)
        self.imag = imag if imag is not None else RealInterval(precision=precision)

    @classmethod
    def from_bounds(cls, real: Tuple[float, float], imag: Tuple[float, float],
                    precision: Precision = DEFAULT_PRECISION) -> "ComplexRegion":
        region = cls(RealInterval(*real, precision=precision), RealInterval(*imag, precision=precision), precision)
        region.initialize()
        return region

    def initialize(self):
        self.real.initialize()
        self.imag.initialize()

    # Corners: bottom-left, bottom-right, top-left, top-right
    @property
    def bl(self) -> complex:
        return complex(self.real.lower, self.imag.lower)

    @property
    def br(self) -> complex:
        return complex(self.real.upper, self.imag.lower)

    @property
    def tl(self) -> complex:
        return complex(self.real.lower, self.imag.upper)

    @property
    def tr(self) -> complex:
        return complex(self.real.upper, self.imag.upper)

    def corners(self) -> Tuple[complex, complex, complex, complex]:
        return (self.bl, self.br, self.tl, self.tr)

    def set_bl_tr(self, bl: complex, tr: complex):
        self.real.lower, self.imag.lower = bl.real, bl.imag
        self.real.upper, self.imag.upper = tr.real, tr.imag
        self.initialize()

    def contains(self, value: complex) -> bool:
        return self.real.contains(value.real) and self.imag.contains(value.imag)

    def closest(self, value: complex) -> complex:
        return complex(self.real.closest(value.real), self.imag.closest(value.imag))

    def distance(self, value: complex) -> float:
        return abs(value - self.closest(value))

    def distance2(self, value: complex) -> float:
        d = value - self.closest(value)
        return d.real * d.real + d.imag * d.imag

    def extend(self, value: float) -> "ComplexRegion":
        self.real.extend(value)
        self.imag.extend(value)
        return self

    @property
    def area(self) -> float:
        return abs(self.real.length) * abs(self.imag.length)

    def __eq__(self, other):
        if not isinstance(other, ComplexRegion):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    __hash__ = None

    def copy(self) -> "ComplexRegion":
        return ComplexRegion(self.real.copy(), self.imag.copy(), self.precision)

    def __repr__(self):
        return f"ComplexRegion({self.real!r}, {self.imag!r})"


class IntervalData:
    """Subdivision of one interval: a resolution and the resulting stride."""

    def __init__(self, resolution: int = 1, stride: float = 0.0, precision: Precision = DEFAULT_PRECISION):
        self.resolution = int(resolution)
        self.stride = float(stride)
        self.precision = precision

    def set_data(self, resolution: int, length: float):
        assert resolution > 0 and length > 0.0, "interval data needs a positive resolution and length"
        self.resolution = int(resolution)
        self.stride = length / float(resolution)

    def subinterval_at(self, interval: RealInterval, loc: int) -> RealInterval:
        lower = interval.lower + loc * self.stride
        return RealInterval(lower, lower + self.stride, interval.precision)

    def __eq__(self, other):
        if not isinstance(other, IntervalData):
            return NotImplemented
        return self.resolution == other.resolution and self.precision.is_equal(self.stride, other.stride)

    __hash__ = None

    def copy(self) -> "IntervalData":
        return copy.copy(self)

    def __repr__(self):
        return f"IntervalData(resolution={self.resolution}, stride={self.stride!r})"


class RegionData:
    """Real and imaginary ``IntervalData`` of one free coordinate."""

    def __init__(self, real: IntervalData = None, imag: IntervalData = None):
        self.real = real if real is not None else IntervalData()
        self.imag = imag if imag is not None else IntervalData()

    def __eq__(self, other):
        if not isinstance(other, RegionData):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    __hash__ = None

    def copy(self) -> "RegionData":
        return RegionData(self.real.copy(), self.imag.copy())

    def __repr__(self):
        return f"RegionData({self.real!r}, {self.imag!r})"


def euclidean_measure(intervals: Iterable[RealInterval]) -> float:
    """Product of the absolute lengths of the given intervals."""
    lengths = np.fromiter((abs(iv.length) for iv in intervals), dtype=np.float64)
    return float(np.prod(lengths)) if lengths.size else 1.0
