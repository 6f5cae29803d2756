"""
Incrementors: fixed-stride moves along one heisenberg slot of a point.

An incrementor adds its stride to one slot and patches the point's
dependent coordinate with the matching closed-form delta, so a walk over a
slice never has to recompute the quadratic form. A slice keeps four sets of
incrementors (forward, reverse, reset, rreset), each a heisenberg structure
whose zeta slots hold ``ZetaIncrementor`` pairs and whose r slot holds an
``RIncrementor``.
"""
from .accessors import Accessor, REAL_IMAG, REAL_ONLY
from .common import DEFAULT_PRECISION, Part, Precision
from .structure import HeisenbergStructure


class Incrementor:
    """Adds ``stride`` to heisenberg slot ``slot`` of a point."""

    def __init__(self, slot: int, stride: float = 0.0):
        self.slot = slot
        self.set_stride(stride)

    def set_stride(self, stride: float):
        self.stride = float(stride)

    def __call__(self, point):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Incrementor):
            return NotImplemented
        return type(self) is type(other) and self.slot == other.slot and self.stride == other.stride

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(slot={self.slot}, stride={self.stride!r})"


class ZetaIncrementor(Incrementor):
    """Moves the real or imaginary part of one zeta.

    With x the moved part, -1/2 x^2 becomes -1/2 (x + s)^2, so the dependent
    coordinate's real part shifts by -x*s - s^2/2.
    """

    def __init__(self, slot: int, stride: float = 0.0):
        self.index, part = divmod(slot, 2)
        self.part = Part(part)
        super().__init__(slot, stride)

    def set_stride(self, stride: float):
        self.stride = float(stride)
        self._qf = -0.5 * self.stride * self.stride

    def __call__(self, point):
        zetas = point.structure.heisenberg.zeta_array.zetas
        z = zetas[self.index]
        s = self.stride
        if self.part is Part.REAL:
            x = z.real
            zetas[self.index] = complex(x + s, z.imag)
        else:
            x = z.imag
            zetas[self.index] = complex(z.real, x + s)
        point._shift_dependent(self._qf - x * s)


class RIncrementor(Incrementor):
    """Moves r; the dependent coordinate's imaginary part follows it."""

    def __call__(self, point):
        heisenberg = point.structure.heisenberg
        heisenberg.r += self.stride
        point._set_dependent_imag(heisenberg.r)


class ZetaIncrementorPair:
    """Real and imaginary incrementors of one zeta."""

    def __init__(self, index: int = 0):
        self.real = ZetaIncrementor(2 * index)
        self.imag = ZetaIncrementor(2 * index + 1)

    def copy(self) -> "ZetaIncrementorPair":
        out = ZetaIncrementorPair.__new__(ZetaIncrementorPair)
        out.real = ZetaIncrementor(self.real.slot, self.real.stride)
        out.imag = ZetaIncrementor(self.imag.slot, self.imag.stride)
        return out

    def __eq__(self, other):
        if not isinstance(other, ZetaIncrementorPair):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    __hash__ = None


class ZetaIncrementorAccessor(Accessor):
    common_type = Incrementor
    parts = REAL_IMAG

    def create(self, precision):
        return ZetaIncrementorPair()

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

    def format(self, value, precision):
        return f"({precision.format(value.real.stride)},{precision.format(value.imag.stride)})"


class RIncrementorAccessor(Accessor):
    common_type = Incrementor
    parts = REAL_ONLY

    def create(self, precision):
        return RIncrementor(0)

    def copy(self, value):
        return RIncrementor(value.slot, value.stride)

    def format(self, value, precision):
        return precision.format(value.stride)


ZETA_INCREMENTOR = ZetaIncrementorAccessor()
R_INCREMENTOR = RIncrementorAccessor()


class HeisenbergIncrementor:
    """One incrementor per heisenberg slot, reachable via ``common_at``."""

    def __init__(self, dimension, precision: Precision = DEFAULT_PRECISION):
        self.structure = HeisenbergStructure(dimension, ZETA_INCREMENTOR, R_INCREMENTOR, precision)
        zetas = self.structure.zetas
        zetas[:] = [ZetaIncrementorPair(i) for i in range(len(zetas))]
        self.structure.r = RIncrementor(self.structure.zeta_reim_end)

    @property
    def spec(self):
        return self.structure.spec

    @property
    def heisenberg_end(self) -> int:
        return self.structure.heisenberg_end

    def common_at(self, loc: int) -> Incrementor:
        return self.structure.common_at(loc)

    def set_stride_at(self, loc: int, stride: float):
        self.common_at(loc).set_stride(stride)

    def strides(self):
        return [inc.stride for inc in self.structure.commons()]

    def apply(self, loc: int, point):
        self.structure.common_at(loc)(point)

    def __eq__(self, other):
        if not isinstance(other, HeisenbergIncrementor):
            return NotImplemented
        return self.structure == other.structure

    __hash__ = None

    def __str__(self):
        return self.structure.to_text()
