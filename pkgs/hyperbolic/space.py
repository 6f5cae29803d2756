"""
Bounded regions of hyperbolic space.

A space is a hyperbolic structure whose zetas are complex regions and whose
r and height are real intervals.
"""
import math
from typing import Sequence, Tuple

from .accessors import INTERVAL, REGION
from .common import DEFAULT_PRECISION, Precision
from .dimension import DimensionSpec
from .euclidean import ComplexRegion, RealInterval, euclidean_measure
from .exceptions import DimensionError
from .structure import HyperbolicStructure, check_same_dimension

Bounds = Tuple[float, float]


class HyperbolicSpace:
    """Product of a region per zeta and an interval for r and height."""

    def __init__(self, dimension, precision: Precision = DEFAULT_PRECISION):
        self.structure = HyperbolicStructure(dimension, REGION, INTERVAL, INTERVAL, precision)

    @classmethod
    def from_bounds(cls, zetas: Sequence[Tuple[Bounds, Bounds]], r: Bounds, height: Bounds,
                    dimension=None, precision: Precision = DEFAULT_PRECISION) -> "HyperbolicSpace":
        """``zetas`` holds one ``((re_lo, re_hi), (im_lo, im_hi))`` per free coordinate."""
        if dimension is None:
            dimension = len(zetas) + 1
        space = cls(dimension, precision)
        if len(zetas) != space.spec.free_count:
            raise DimensionError(f"expected {space.spec.free_count} zeta regions, got {len(zetas)}")
        s = space.structure
        s.zetas[:] = [ComplexRegion.from_bounds(re, im, precision) for re, im in zetas]
        s.r = RealInterval(*r, precision=precision)
        s.height = RealInterval(*height, precision=precision)
        space.initialize()
        return space

    @classmethod
    def unit(cls, dimension, precision: Precision = DEFAULT_PRECISION) -> "HyperbolicSpace":
        """[0, 1] on every slot, height included."""
        space = cls(dimension, precision)
        for loc in range(space.hyperbolic_end):
            space.common_at(loc).set(0.0, 1.0)
        return space

    @property
    def spec(self) -> DimensionSpec:
        return self.structure.spec

    @property
    def precision(self) -> Precision:
        return self.structure.precision

    @property
    def zetas(self):
        return self.structure.zetas

    @property
    def r(self) -> RealInterval:
        return self.structure.r

    @property
    def height(self) -> RealInterval:
        return self.structure.height

    @property
    def heisenberg_end(self) -> int:
        return self.structure.heisenberg_end

    @property
    def hyperbolic_end(self) -> int:
        return self.structure.hyperbolic_end

    def zeta_at(self, i: int) -> ComplexRegion:
        return self.structure.zeta_at(i)

    def common_at(self, loc: int) -> RealInterval:
        return self.structure.common_at(loc)

    def commons(self, stop=None):
        return self.structure.commons(stop)

    def initialize(self):
        """Order the bounds of every interval."""
        for interval in self.commons():
            interval.initialize()

    def contains(self, point) -> bool:
        check_same_dimension(self, point)
        return all(iv.contains(x) for iv, x in zip(self.commons(), point.commons()))

    def heisenberg_measure(self) -> float:
        return euclidean_measure(self.commons(self.heisenberg_end))

    def slot_name(self, loc: int) -> str:
        """``zeta_0.re``, ``zeta_0.im``, ..., ``r``, ``height``."""
        if loc < self.structure.zeta_reim_end:
            return f"zeta_{loc // 2}.{'re' if loc % 2 == 0 else 'im'}"
        return 'r' if loc < self.heisenberg_end else 'height'

    def degenerate_axis(self):
        """First heisenberg slot whose length is not positive and finite, or None."""
        for loc, interval in enumerate(self.commons(self.heisenberg_end)):
            length = interval.length
            if not (math.isfinite(length) and length > 0.0):
                return loc
        return None

    def has_measure(self) -> bool:
        if self.degenerate_axis() is not None:
            return False
        m = self.heisenberg_measure()
        return math.isfinite(m) and m > 0.0

    def copy(self) -> "HyperbolicSpace":
        out = HyperbolicSpace.__new__(HyperbolicSpace)
        out.structure = self.structure.copy()
        return out

    def __eq__(self, other):
        if not isinstance(other, HyperbolicSpace):
            return NotImplemented
        return self.structure == other.structure

    __hash__ = None

    def to_text(self) -> str:
        return self.structure.to_text()

    def read_text(self, text: str):
        self.structure.read_text(text)
        self.initialize()

    @classmethod
    def parse(cls, text: str, dimension, precision: Precision = DEFAULT_PRECISION) -> "HyperbolicSpace":
        space = cls(dimension, precision)
        space.read_text(text)
        return space

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"HyperbolicSpace(N={self.spec.dimension}, {self.to_text()})"
