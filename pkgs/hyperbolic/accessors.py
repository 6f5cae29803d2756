"""
Coordinate accessor policies.

An accessor tells a structure layer how to create, copy, compare and print
one coordinate kind, and how to reach its "common" slots: the real and
imaginary parts of a free coordinate, or the single part of a real one. All
coordinates composed into one structure must share a common type, which is
what lets the layers iterate their slots without caring whether a slot is a
real part, an imaginary part or r.
"""
from typing import Tuple

from .common import Part, Precision
from .euclidean import ComplexRegion, IntervalData, RealInterval, RegionData
from . import textio
from .exceptions import ParseError

REAL_ONLY: Tuple[Part, ...] = (Part.REAL,)
REAL_IMAG: Tuple[Part, ...] = (Part.REAL, Part.IMAG)


class Accessor:
    """Base policy: an immutable scalar coordinate whose only slot is itself."""
    common_type: type = float
    parts: Tuple[Part, ...] = REAL_ONLY

    def create(self, precision: Precision):
        return 0.0

    def common(self, value, part: Part):
        return value

    def replace(self, value, part: Part, common):
        """Return ``value`` with the ``part`` slot set to ``common``."""
        return common

    def copy(self, value):
        return value

    def equal(self, lhs, rhs, precision: Precision) -> bool:
        return lhs == rhs

    def format(self, value, precision: Precision) -> str:
        return str(value)

    def parse(self, text: str, precision: Precision):
        raise NotImplementedError(f"{type(self).__name__} has no text form")

    def __repr__(self):
        return f"{type(self).__name__}()"


class RealAccessor(Accessor):
    """Real coordinate (r or height of a point)."""

    def equal(self, lhs, rhs, precision):
        return precision.is_equal(lhs, rhs)

    def format(self, value, precision):
        return textio.format_real(value, precision)

    def parse(self, text, precision):
        return textio.parse_real(text)


class ComplexAccessor(Accessor):
    """Complex free coordinate with real and imaginary float slots."""
    parts = REAL_IMAG

    def create(self, precision):
        return 0j

    def common(self, value, part):
        return value.real if part is Part.REAL else value.imag

    def replace(self, value, part, common):
        if part is Part.REAL:
            return complex(common, value.imag)
        return complex(value.real, common)

    def equal(self, lhs, rhs, precision):
        return precision.is_equal_cx(lhs, rhs)

    def format(self, value, precision):
        return textio.format_complex(value, precision)

    def parse(self, text, precision):
        return textio.parse_complex(text)


class IntervalAccessor(Accessor):
    """Bounding interval of a real coordinate (r or height of a space)."""
    common_type = RealInterval

    def create(self, precision):
        return RealInterval(precision=precision)

    def copy(self, value):
        return value.copy()

    def equal(self, lhs, rhs, precision):
        return lhs == rhs

    def format(self, value, precision):
        return textio.format_pair(precision.format(value.lower), precision.format(value.upper))

    def parse(self, text, precision):
        lower, upper = textio.expect_elements(text, 2)
        return RealInterval(textio.parse_real(lower), textio.parse_real(upper), precision)


class RegionAccessor(Accessor):
    """Bounding region of a free coordinate; its slots are the two intervals."""
    common_type = RealInterval
    parts = REAL_IMAG

    def create(self, precision):
        return ComplexRegion(precision=precision)

    def common(self, value, part):
        return value.real if part is Part.REAL else value.imag

    def replace(self, value, part, common):
        if part is Part.REAL:
            value.real = common
        else:
            value.imag = common
        return value

    def copy(self, value):
        return value.copy()

    def equal(self, lhs, rhs, precision):
        return lhs == rhs

    def format(self, value, precision):
        return textio.format_pair(INTERVAL.format(value.real, precision), INTERVAL.format(value.imag, precision))

    def parse(self, text, precision):
        real, imag = textio.expect_elements(text, 2)
        return ComplexRegion(INTERVAL.parse(real, precision), INTERVAL.parse(imag, precision), precision)


class IntervalDataAccessor(Accessor):
    """Fitted subdivision of a real axis."""
    common_type = IntervalData

    def create(self, precision):
        return IntervalData(precision=precision)

    def copy(self, value):
        return value.copy()

    def equal(self, lhs, rhs, precision):
        return lhs == rhs

    def format(self, value, precision):
        return textio.format_sequence([str(value.resolution), precision.format(value.stride)])

    def parse(self, text, precision):
        resolution, stride = textio.expect_elements(text, 2)
        try:
            res = int(resolution)
        except ValueError:
            raise ParseError(1, resolution, "Not an integer resolution") from None
        return IntervalData(res, textio.parse_real(stride), precision)


class RegionDataAccessor(Accessor):
    """Fitted subdivision of the real and imaginary axes of a free coordinate."""
    common_type = IntervalData
    parts = REAL_IMAG

    def create(self, precision):
        return RegionData(IntervalData(precision=precision), IntervalData(precision=precision))

    def common(self, value, part):
        return value.real if part is Part.REAL else value.imag

    def replace(self, value, part, common):
        if part is Part.REAL:
            value.real = common
        else:
            value.imag = common
        return value

    def copy(self, value):
        return value.copy()

    def equal(self, lhs, rhs, precision):
        return lhs == rhs

    def format(self, value, precision):
        return textio.format_pair(INTERVAL_DATA.format(value.real, precision),
                                  INTERVAL_DATA.format(value.imag, precision))

    def parse(self, text, precision):
        real, imag = textio.expect_elements(text, 2)
        return RegionData(INTERVAL_DATA.parse(real, precision), INTERVAL_DATA.parse(imag, precision))


COMPLEX = ComplexAccessor()
REAL = RealAccessor()
INTERVAL = IntervalAccessor()
REGION = RegionAccessor()
INTERVAL_DATA = IntervalDataAccessor()
REGION_DATA = RegionDataAccessor()
