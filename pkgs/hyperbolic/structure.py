"""
Layered coordinate structures.

Each layer owns the layer beneath it plus one more scalar, and exposes the
merged "common" slot view by delegation:

    ZetaArray            slots [0, zeta_reim_end)        zeta_0.re, zeta_0.im, ...
    HeisenbergStructure  slots [0, heisenberg_end)       ... + r
    HyperbolicStructure  slots [0, hyperbolic_end)       ... + height

The coordinate kinds are chosen through accessors, so the same layers hold
points (complex zetas, real r/height), spaces (regions and intervals) and
slice data (interval data). Every accessor composed into one structure must
share a common type.
"""
from typing import Iterator, List, Optional

from .accessors import Accessor, COMPLEX, REAL
from .common import DEFAULT_PRECISION, Part, Precision
from .dimension import DimensionSpec, as_spec
from .exceptions import AccessorMismatch, DimensionError, IndexOutOfRange
from . import textio


def check_accessors(*accessors: Accessor):
    """Raise ``AccessorMismatch`` unless all accessors share a common type."""
    kinds = {a.common_type for a in accessors}
    if len(kinds) > 1:
        names = ', '.join(f"{a!r}->{a.common_type.__name__}" for a in accessors)
        raise AccessorMismatch(f"accessors disagree on the common representation: {names}")


def check_same_dimension(lhs, rhs):
    if lhs.spec.dimension != rhs.spec.dimension:
        raise DimensionError(f"dimension mismatch: {lhs.spec.dimension} != {rhs.spec.dimension}")


class ZetaArray:
    """The free coordinates, each contributing a real and an imaginary slot."""

    def __init__(self, dimension, accessor: Accessor = COMPLEX, precision: Precision = DEFAULT_PRECISION):
        self.spec: DimensionSpec = as_spec(dimension)
        if len(accessor.parts) != 2:
            raise AccessorMismatch(f"{accessor!r} has no imaginary part and cannot hold a zeta coordinate")
        self.accessor = accessor
        self.precision = precision
        self.zetas: List = [accessor.create(precision) for _ in range(self.spec.free_count)]

    @property
    def zeta_reim_end(self) -> int:
        return self.spec.zeta_real_size

    def zeta_at(self, i: int):
        if not 0 <= i < self.spec.free_count:
            raise IndexOutOfRange("zeta", i, self.spec.free_count)
        return self.zetas[i]

    def set_zeta_at(self, i: int, value):
        if not 0 <= i < self.spec.free_count:
            raise IndexOutOfRange("zeta", i, self.spec.free_count)
        self.zetas[i] = value

    def common_at(self, loc: int):
        if not 0 <= loc < self.zeta_reim_end:
            raise IndexOutOfRange("zeta slot", loc, self.zeta_reim_end)
        i, part = divmod(loc, 2)
        return self.accessor.common(self.zetas[i], Part(part))

    def set_common_at(self, loc: int, value):
        if not 0 <= loc < self.zeta_reim_end:
            raise IndexOutOfRange("zeta slot", loc, self.zeta_reim_end)
        i, part = divmod(loc, 2)
        self.zetas[i] = self.accessor.replace(self.zetas[i], Part(part), value)

    def commons(self, stop: Optional[int] = None) -> Iterator:
        for loc in range(self.zeta_reim_end if stop is None else stop):
            yield self.common_at(loc)

    def copy(self) -> "ZetaArray":
        out = ZetaArray.__new__(ZetaArray)
        out.spec, out.accessor, out.precision = self.spec, self.accessor, self.precision
        out.zetas = [self.accessor.copy(z) for z in self.zetas]
        return out

    def __eq__(self, other):
        if not isinstance(other, ZetaArray):
            return NotImplemented
        if self.spec != other.spec:
            return False
        eq = self.accessor.equal
        return all(eq(a, b, self.precision) for a, b in zip(self.zetas, other.zetas))

    __hash__ = None

    def to_text(self) -> str:
        return textio.format_sequence([self.accessor.format(z, self.precision) for z in self.zetas])

    def read_text(self, text: str):
        elements = textio.expect_elements(text, self.spec.free_count)
        self.zetas = [self.accessor.parse(e, self.precision) for e in elements]

    def __str__(self):
        return self.to_text()


class HeisenbergStructure:
    """Free coordinates plus the real ``r`` coordinate."""

    def __init__(self, dimension, zeta_accessor: Accessor = COMPLEX, r_accessor: Accessor = REAL,
                 precision: Precision = DEFAULT_PRECISION):
        check_accessors(zeta_accessor, r_accessor)
        self.zeta_array = ZetaArray(dimension, zeta_accessor, precision)
        self.r_accessor = r_accessor
        self.r = r_accessor.create(precision)

    @property
    def spec(self) -> DimensionSpec:
        return self.zeta_array.spec

    @property
    def precision(self) -> Precision:
        return self.zeta_array.precision

    @property
    def zeta_reim_end(self) -> int:
        return self.spec.zeta_real_size

    @property
    def heisenberg_end(self) -> int:
        return self.spec.heisenberg_size

    @property
    def zetas(self) -> List:
        return self.zeta_array.zetas

    def common_at(self, loc: int):
        if loc == self.zeta_reim_end:
            return self.r_accessor.common(self.r, Part.REAL)
        if not 0 <= loc < self.heisenberg_end:
            raise IndexOutOfRange("heisenberg slot", loc, self.heisenberg_end)
        return self.zeta_array.common_at(loc)

    def set_common_at(self, loc: int, value):
        if loc == self.zeta_reim_end:
            self.r = self.r_accessor.replace(self.r, Part.REAL, value)
        elif 0 <= loc < self.heisenberg_end:
            self.zeta_array.set_common_at(loc, value)
        else:
            raise IndexOutOfRange("heisenberg slot", loc, self.heisenberg_end)

    def commons(self, stop: Optional[int] = None) -> Iterator:
        for loc in range(self.heisenberg_end if stop is None else stop):
            yield self.common_at(loc)

    def copy(self) -> "HeisenbergStructure":
        out = HeisenbergStructure.__new__(HeisenbergStructure)
        out.zeta_array = self.zeta_array.copy()
        out.r_accessor = self.r_accessor
        out.r = self.r_accessor.copy(self.r)
        return out

    def __eq__(self, other):
        if not isinstance(other, HeisenbergStructure):
            return NotImplemented
        return (self.zeta_array == other.zeta_array
                and self.r_accessor.equal(self.r, other.r, self.precision))

    __hash__ = None

    def to_text(self) -> str:
        return textio.format_sequence([self.zeta_array.to_text(), self.r_accessor.format(self.r, self.precision)])

    def read_text(self, text: str):
        zetas, r = textio.expect_elements(text, 2)
        self.zeta_array.read_text(zetas)
        self.r = self.r_accessor.parse(r, self.precision)

    def __str__(self):
        return self.to_text()


class HyperbolicStructure:
    """Heisenberg structure plus the real ``height`` coordinate."""

    def __init__(self, dimension, zeta_accessor: Accessor = COMPLEX, r_accessor: Accessor = REAL,
                 height_accessor: Accessor = REAL, precision: Precision = DEFAULT_PRECISION):
        check_accessors(zeta_accessor, r_accessor, height_accessor)
        self.heisenberg = HeisenbergStructure(dimension, zeta_accessor, r_accessor, precision)
        self.height_accessor = height_accessor
        self.height = height_accessor.create(precision)

    @property
    def spec(self) -> DimensionSpec:
        return self.heisenberg.spec

    @property
    def precision(self) -> Precision:
        return self.heisenberg.precision

    @property
    def zeta_reim_end(self) -> int:
        return self.spec.zeta_real_size

    @property
    def heisenberg_end(self) -> int:
        return self.spec.heisenberg_size

    @property
    def hyperbolic_end(self) -> int:
        return self.spec.hyperbolic_size

    @property
    def zetas(self) -> List:
        return self.heisenberg.zeta_array.zetas

    @property
    def r(self):
        return self.heisenberg.r

    @r.setter
    def r(self, value):
        self.heisenberg.r = value

    def zeta_at(self, i: int):
        return self.heisenberg.zeta_array.zeta_at(i)

    def set_zeta_at(self, i: int, value):
        self.heisenberg.zeta_array.set_zeta_at(i, value)

    def common_at(self, loc: int):
        if loc == self.heisenberg_end:
            return self.height_accessor.common(self.height, Part.REAL)
        if not 0 <= loc < self.hyperbolic_end:
            raise IndexOutOfRange("hyperbolic slot", loc, self.hyperbolic_end)
        return self.heisenberg.common_at(loc)

    def set_common_at(self, loc: int, value):
        if loc == self.heisenberg_end:
            self.height = self.height_accessor.replace(self.height, Part.REAL, value)
        elif 0 <= loc < self.hyperbolic_end:
            self.heisenberg.set_common_at(loc, value)
        else:
            raise IndexOutOfRange("hyperbolic slot", loc, self.hyperbolic_end)

    def commons(self, stop: Optional[int] = None) -> Iterator:
        for loc in range(self.hyperbolic_end if stop is None else stop):
            yield self.common_at(loc)

    def copy(self) -> "HyperbolicStructure":
        out = HyperbolicStructure.__new__(HyperbolicStructure)
        out.heisenberg = self.heisenberg.copy()
        out.height_accessor = self.height_accessor
        out.height = self.height_accessor.copy(self.height)
        return out

    def __eq__(self, other):
        if not isinstance(other, HyperbolicStructure):
            return NotImplemented
        return (self.heisenberg == other.heisenberg
                and self.height_accessor.equal(self.height, other.height, self.precision))

    __hash__ = None

    def to_text(self) -> str:
        return textio.format_sequence([self.heisenberg.to_text(),
                                       self.height_accessor.format(self.height, self.precision)])

    def read_text(self, text: str):
        heisenberg, height = textio.expect_elements(text, 2)
        self.heisenberg.read_text(heisenberg)
        self.height = self.height_accessor.parse(height, self.precision)

    def __str__(self):
        return self.to_text()
