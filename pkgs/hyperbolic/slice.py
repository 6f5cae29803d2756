"""
Heisenberg slices: a space cut into a regular grid.

The slice fits a per-axis sub-resolution to a requested total resolution
so that all axes get roughly the same stride, then produces grid points
and cubes from a global grid index and the incrementors that move between
neighbouring cells.

Grid indices are mixed radix over the heisenberg slots, lowest slot
(zeta_0.re) first and r last:

    loc = d_0 + res_0 * (d_1 + res_1 * (... + res_{k-1} * d_k))
"""
import logging
from typing import List, Union

from .accessors import INTERVAL_DATA, REGION_DATA
from .common import Precision
from .cube import HeisenbergCube
from .euclidean import IntervalData
from .exceptions import DegenerateSpace
from .incrementor import HeisenbergIncrementor
from .iterators import DEFAULT_REFRESH, CubeIterator, SlicePointIterator
from .point import HyperbolicPoint
from .space import HyperbolicSpace
from .structure import HeisenbergStructure, check_same_dimension
from .utils import location_digits, set_bits

logger = logging.getLogger(__name__)


class HeisenbergSlice:
    """Grid over the heisenberg slots of a ``HyperbolicSpace``.

    The realized ``resolution`` is the product of the fitted per-axis
    sub-resolutions and is usually not the requested one; re-read it after
    every ``set_resolution``. Points of the grid all sit at the lower bound
    of the space's height interval.

    ``generation`` increases on every refit. Iterators remember the
    generation they were built for and must be ``update()``-d after a refit
    before they step again.
    """

    def __init__(self, space: HyperbolicSpace, resolution: int = 1):
        self.space = space.copy()
        self.data = HeisenbergStructure(self.spec, REGION_DATA, INTERVAL_DATA, self.precision)
        self.forward = HeisenbergIncrementor(self.spec, self.precision)
        self.reverse = HeisenbergIncrementor(self.spec, self.precision)
        self.reset = HeisenbergIncrementor(self.spec, self.precision)
        self.rreset = HeisenbergIncrementor(self.spec, self.precision)
        self.requested_resolution = resolution
        self.resolution = 1
        self.generation = 0
        self.set_resolution(resolution)

    @property
    def spec(self):
        return self.space.spec

    @property
    def precision(self) -> Precision:
        return self.space.precision

    @property
    def heisenberg_end(self) -> int:
        return self.spec.heisenberg_size

    def interval_data_at(self, loc: int) -> IntervalData:
        return self.data.common_at(loc)

    @property
    def resolutions(self) -> List[int]:
        return [d.resolution for d in self.data.commons()]

    @property
    def strides(self) -> List[float]:
        return [d.stride for d in self.data.commons()]

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def initialize(self) -> int:
        """Refit after the space was changed in place."""
        return self.set_resolution(self.requested_resolution)

    def set_resolution(self, resolution: int) -> int:
        """Fit per-axis sub-resolutions to ``resolution``; returns the realized one."""
        if int(resolution) < 1:
            raise ValueError(f"resolution must be >= 1, got {resolution!r}")
        resolution = int(resolution)
        self.space.initialize()
        axis = self.space.degenerate_axis()
        if axis is not None:
            interval = self.space.common_at(axis)
            raise DegenerateSpace(f"axis {self.space.slot_name(axis)} has no positive finite length: "
                                  f"{interval}")
        if not self.space.has_measure():
            raise DegenerateSpace(f"heisenberg measure underflows to {self.space.heisenberg_measure()!r}")

        exp = 1.0 / self.heisenberg_end
        res = float(resolution) ** exp
        length = self.space.heisenberg_measure() ** exp
        correction = res / length

        realized = 1
        for loc in range(self.heisenberg_end):
            interval_length = self.space.common_at(loc).length
            sub = max(self.precision.ceil(correction * interval_length), 1)
            self.data.common_at(loc).set_data(sub, interval_length)
            realized *= sub

        self.requested_resolution = resolution
        self.resolution = realized
        self._initialize_incrementors()
        self.generation += 1
        logger.debug(f"Slice fitted: requested={resolution}, realized={realized}, "
                     f"resolutions={self.resolutions}")
        return realized

    def _initialize_incrementors(self):
        for loc in range(self.heisenberg_end):
            data = self.data.common_at(loc)
            stride = data.stride
            full = (data.resolution - 1) * stride
            self.forward.set_stride_at(loc, stride)
            self.reverse.set_stride_at(loc, -stride)
            self.reset.set_stride_at(loc, -full)
            self.rreset.set_stride_at(loc, full)

    # ------------------------------------------------------------------
    # Index -> geometry
    # ------------------------------------------------------------------
    def point_at(self, loc: int) -> HyperbolicPoint:
        """Lower corner of cell ``loc``.

        Indices past the grid are virtual: every full wrap moves r up by the
        length of the r interval (down, for negative indices).
        """
        point = HyperbolicPoint(self.spec, self.precision)
        s = point.structure
        s.height = self.space.height.lower
        digits = location_digits(loc, self.resolutions)
        for slot, digit in enumerate(digits):
            lower = self.space.common_at(slot).lower
            s.set_common_at(slot, lower + self.data.common_at(slot).stride * digit)
        wraps = loc // self.resolution
        if wraps:
            s.r += wraps * self.space.r.length
        point.initialize()
        return point

    def cube_at(self, loc: Union[int, HyperbolicPoint]) -> HeisenbergCube:
        """Cube of cell ``loc``, or the cube based at a given point."""
        if isinstance(loc, HyperbolicPoint):
            check_same_dimension(self, loc)
            base = loc
        else:
            base = self.point_at(loc)
        cube = HeisenbergCube.filled(base)
        for i, vertex in enumerate(cube.vertices):
            for b in set_bits(i):
                self.forward.common_at(b)(vertex)
        return cube

    def subspace_at(self, loc: int) -> HyperbolicSpace:
        """The cell ``loc`` as a space of its own; height is the full interval."""
        subspace = HyperbolicSpace(self.spec, self.precision)
        s = subspace.structure
        s.height = self.space.height.copy()
        digits = location_digits(loc, self.resolutions)
        for slot, digit in enumerate(digits):
            interval = self.data.common_at(slot).subinterval_at(self.space.common_at(slot), digit)
            s.set_common_at(slot, interval)
        return subspace

    def location_at(self, point: HyperbolicPoint) -> int:
        """Index of the cell whose lower corner plus one stride lies just below ``point``.

        Points outside the space, or within the first stride of any axis,
        map to 0.
        """
        check_same_dimension(self, point)
        p = self.precision
        loc, scale = 0, 1
        for slot in range(self.heisenberg_end):
            x = point.common_at(slot)
            interval = self.space.common_at(slot)
            data = self.data.common_at(slot)
            if p.is_less(x, interval.lower + data.stride) or p.is_greater(x, interval.upper):
                return 0
            q = max((x - interval.lower) / data.stride - 1.0, 0.0)
            loc += p.floor(q) * scale
            scale *= data.resolution
        return loc

    # ------------------------------------------------------------------
    # Iterators
    # ------------------------------------------------------------------
    def slice_begin(self, refresh: int = DEFAULT_REFRESH) -> SlicePointIterator:
        return SlicePointIterator(self, 0, refresh)

    def slice_end(self, refresh: int = DEFAULT_REFRESH) -> SlicePointIterator:
        return SlicePointIterator(self, self.resolution, refresh)

    def cube_begin(self, refresh: int = DEFAULT_REFRESH) -> CubeIterator:
        return CubeIterator(self, 0, refresh)

    def cube_end(self, refresh: int = DEFAULT_REFRESH) -> CubeIterator:
        return CubeIterator(self, self.resolution, refresh)

    def cube_shallow_end(self) -> CubeIterator:
        return CubeIterator(self, self.resolution, shallow=True)

    def __eq__(self, other):
        if not isinstance(other, HeisenbergSlice):
            return NotImplemented
        return self.space == other.space and self.data == other.data

    __hash__ = None

    def __repr__(self):
        return (f"HeisenbergSlice(N={self.spec.dimension}, resolution={self.resolution}, "
                f"resolutions={self.resolutions})")
