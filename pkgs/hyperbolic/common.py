"""
Common data structures and numeric tolerances shared across the package.

Contains the ``Precision`` context (passed explicitly wherever a tolerance is
needed), the ``Part`` selector used by accessors and the epsilon-aware
comparison and rounding helpers.
"""
import math
from enum import Enum
from dataclasses import dataclass


class Part(Enum):
    """Selects the real or imaginary common slot of a coordinate."""
    REAL = 0
    IMAG = 1


@dataclass(frozen=True)
class Precision:
    """Numeric tolerance context.

    ``zero`` is the absolute tolerance for equality and the bias applied by
    ``floor``/``ceil``; ``stream`` is the number of significant digits used
    by the bracketed text format.
    """
    zero: float = 1e-10
    stream: int = 12

    def is_equal(self, lhs: float, rhs: float) -> bool:
        return abs(lhs - rhs) <= self.zero

    def is_zero(self, value: float) -> bool:
        return abs(value) <= self.zero

    def is_less(self, lhs: float, rhs: float) -> bool:
        return lhs < rhs and not self.is_equal(lhs, rhs)

    def is_less_equal(self, lhs: float, rhs: float) -> bool:
        return lhs < rhs or self.is_equal(lhs, rhs)

    def is_greater(self, lhs: float, rhs: float) -> bool:
        return self.is_less(rhs, lhs)

    def is_equal_cx(self, lhs: complex, rhs: complex) -> bool:
        return self.is_equal(lhs.real, rhs.real) and self.is_equal(lhs.imag, rhs.imag)

    def floor(self, value: float) -> int:
        """Floor biased upwards by ``zero`` so 2.9999999999 floors to 3."""
        return int(math.floor(value + self.zero))

    def ceil(self, value: float) -> int:
        """Ceiling biased downwards by ``zero`` so 2.0000000001 ceils to 2."""
        return int(math.ceil(value - self.zero))

    def format(self, value: float) -> str:
        return f"{value:.{self.stream}g}"


DEFAULT_PRECISION = Precision()
