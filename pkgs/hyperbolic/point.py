"""
Points of complex hyperbolic space in horospherical coordinates.

A point is a hyperbolic structure (zetas, r, height) plus the dependent
coordinate

    dependent = -1/2 * sum |zeta_i|^2 - height/2  +  i * r

The dependent coordinate is never set directly. ``initialize()`` recomputes
it from scratch; every other mutator (translate, negate, scale, set_height,
set_r and the slice incrementors) updates it with a closed-form delta that
agrees with ``initialize()`` up to rounding.
"""
import functools
import sys
from typing import List, Sequence

from .accessors import COMPLEX, REAL
from .common import DEFAULT_PRECISION, Precision
from .dimension import DimensionSpec
from .exceptions import DimensionError
from .structure import HyperbolicStructure, check_same_dimension
from .utils import hermitian_inner_product, hermitian_quadratic_product
from . import textio


@functools.total_ordering
class HyperbolicPoint:
    """A point of N-dimensional complex hyperbolic space.

    Ordering is lexicographic over the hyperbolic slots with epsilon
    equality. It is arbitrary and carries no geometric meaning; it exists
    so points can live in sorted containers.
    """

    def __init__(self, dimension, precision: Precision = DEFAULT_PRECISION):
        self.structure = HyperbolicStructure(dimension, COMPLEX, REAL, REAL, precision)
        self._dependent = 0j

    @classmethod
    def from_coordinates(cls, zetas: Sequence[complex], r: float, height: float,
                         dimension=None, precision: Precision = DEFAULT_PRECISION) -> "HyperbolicPoint":
        """Build an initialized point; N defaults to ``len(zetas) + 1``."""
        if dimension is None:
            dimension = len(zetas) + 1
        point = cls(dimension, precision)
        if len(zetas) != point.spec.free_count:
            raise DimensionError(f"expected {point.spec.free_count} zetas, got {len(zetas)}")
        point.structure.zetas[:] = [complex(z) for z in zetas]
        point.structure.r = float(r)
        point.structure.height = float(height)
        point.initialize()
        return point

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def spec(self) -> DimensionSpec:
        return self.structure.spec

    @property
    def precision(self) -> Precision:
        return self.structure.precision

    @property
    def zetas(self) -> List[complex]:
        return self.structure.zetas

    @property
    def r(self) -> float:
        return self.structure.r

    @property
    def height(self) -> float:
        return self.structure.height

    @property
    def dependent(self) -> complex:
        return self._dependent

    @property
    def zeta_reim_end(self) -> int:
        return self.structure.zeta_reim_end

    @property
    def heisenberg_end(self) -> int:
        return self.structure.heisenberg_end

    @property
    def hyperbolic_end(self) -> int:
        return self.structure.hyperbolic_end

    def zeta_at(self, i: int) -> complex:
        return self.structure.zeta_at(i)

    def common_at(self, loc: int) -> float:
        return self.structure.common_at(loc)

    def commons(self, stop=None):
        return self.structure.commons(stop)

    # Raw writes; the caller must initialize() afterwards.
    def set_zeta_at(self, i: int, value: complex):
        self.structure.set_zeta_at(i, complex(value))

    def set_common_at(self, loc: int, value: float):
        self.structure.set_common_at(loc, float(value))

    # ------------------------------------------------------------------
    # Invariant maintenance
    # ------------------------------------------------------------------
    def initialize(self):
        """Recompute the dependent coordinate from the other coordinates."""
        s = self.structure
        self._dependent = complex(-0.5 * hermitian_quadratic_product(s.zetas) - 0.5 * s.height, s.r)

    def set_height(self, height: float):
        s = self.structure
        self._dependent += 0.5 * (s.height - height)
        s.height = float(height)

    def set_r(self, r: float):
        self.structure.r = float(r)
        self._set_dependent_imag(self.structure.r)

    def _shift_dependent(self, delta: float):
        self._dependent += delta

    def _set_dependent_imag(self, r: float):
        self._dependent = complex(self._dependent.real, r)

    def translate(self, other: "HyperbolicPoint") -> "HyperbolicPoint":
        """Add ``other``'s heisenberg slots to this point's; height is kept."""
        check_same_dimension(self, other)
        s, w = self.structure, other.structure.zetas
        z = s.zetas
        delta = -hermitian_inner_product(z, w).real - 0.5 * hermitian_quadratic_product(w)
        z[:] = [a + b for a, b in zip(z, w)]
        s.r += other.r
        self._dependent = complex(self._dependent.real + delta, s.r)
        return self

    def subtract(self, other: "HyperbolicPoint") -> "HyperbolicPoint":
        return self.translate(-other)

    def negate(self) -> "HyperbolicPoint":
        """Negate the heisenberg slots in place."""
        s = self.structure
        s.zetas[:] = [-z for z in s.zetas]
        s.r = -s.r
        self._set_dependent_imag(s.r)
        return self

    def scale(self, factor: float) -> "HyperbolicPoint":
        """Multiply the heisenberg slots by ``factor``; height is kept."""
        s = self.structure
        s.zetas[:] = [z * factor for z in s.zetas]
        s.r *= factor
        k2 = factor * factor
        real = self._dependent.real * k2 + 0.5 * (k2 - 1.0) * s.height
        self._dependent = complex(real, s.r)
        return self

    def divide(self, factor: float) -> "HyperbolicPoint":
        return self.scale(1.0 / factor)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __iadd__(self, other):
        return self.translate(other)

    def __isub__(self, other):
        return self.subtract(other)

    def __imul__(self, factor):
        return self.scale(factor)

    def __itruediv__(self, factor):
        return self.divide(factor)

    def __add__(self, other):
        return self.copy().translate(other)

    def __sub__(self, other):
        return self.copy().subtract(other)

    def __mul__(self, factor):
        return self.copy().scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, factor):
        return self.copy().divide(factor)

    def __neg__(self):
        # New point, freshly initialized; negate() is the in-place form
        out = HyperbolicPoint(self.spec, self.precision)
        out.structure.zetas[:] = [-z for z in self.zetas]
        out.structure.r = -self.r
        out.structure.height = self.height
        out.initialize()
        return out

    def __eq__(self, other):
        if not isinstance(other, HyperbolicPoint):
            return NotImplemented
        return self.structure == other.structure

    def __lt__(self, other):
        if not isinstance(other, HyperbolicPoint):
            return NotImplemented
        eq = self.precision.is_equal
        for a, b in zip(self.commons(), other.commons()):
            if eq(a, b):
                continue
            return a < b
        return False

    __hash__ = None

    # ------------------------------------------------------------------
    # Views and text
    # ------------------------------------------------------------------
    def point_coordinates(self) -> List[complex]:
        """Projective C^(N+1) coordinates: 1, the zetas, then the dependent."""
        return [1 + 0j] + list(self.zetas) + [self._dependent]

    def pretty_print(self, stream=None):
        out = stream if stream is not None else sys.stdout
        for c in self.point_coordinates():
            out.write(textio.format_complex(c, self.precision) + "\n")

    def copy(self) -> "HyperbolicPoint":
        out = HyperbolicPoint.__new__(HyperbolicPoint)
        out.structure = self.structure.copy()
        out._dependent = self._dependent
        return out

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def to_text(self) -> str:
        return self.structure.to_text()

    def read_text(self, text: str):
        """Parse ``[[[z...],r],height]`` and re-initialize."""
        self.structure.read_text(text)
        self.initialize()

    @classmethod
    def parse(cls, text: str, dimension, precision: Precision = DEFAULT_PRECISION) -> "HyperbolicPoint":
        point = cls(dimension, precision)
        point.read_text(text)
        return point

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"HyperbolicPoint(N={self.spec.dimension}, {self.to_text()}, dependent={self._dependent!r})"
