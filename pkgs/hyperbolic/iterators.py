"""
Odometer iterators over a Heisenberg slice.

Both iterators keep a global grid index and its mixed-radix digits, and move
their payload (a cube, or a point) with the slice's incrementors instead of
recomputing it from the index. Every ``refresh`` steps the payload is
recomputed from the index to bound floating point drift.

The last digit is never wrapped: stepping past the final cell keeps
counting (virtual cells above the space) and stepping back past index 0
gives index -1 with every lower digit at its maximum.
"""
import logging
from typing import Iterator, Optional

from .cube import HeisenbergCube
from .point import HyperbolicPoint
from .utils import location_digits

logger = logging.getLogger(__name__)

DEFAULT_REFRESH = 65536


class _Odometer:
    """Mixed-radix counter shared by the cube and point iterators."""

    def __init__(self, slice_, index: int, refresh: int):
        if refresh < 1:
            raise ValueError(f"refresh interval must be >= 1, got {refresh!r}")
        self.slice = slice_
        self.index = int(index)
        self.refresh = int(refresh)
        self.generation = slice_.generation
        self._build_digits()

    def _build_digits(self):
        self.digits = location_digits(self.index, self.slice.resolutions, wrap_last=False)

    # Payload hooks
    def _tick(self):
        pass

    def _move(self, incrementor, axis: int):
        raise NotImplementedError

    def _rebuild_due(self) -> bool:
        raise NotImplementedError

    def _rebuild(self):
        raise NotImplementedError

    def _step(self, incrementor, axis: int):
        if self._rebuild_due():
            self._rebuild()
            logger.debug(f"{type(self).__name__} refreshed at index {self.index}")
        else:
            self._move(incrementor, axis)

    def _check_generation(self):
        assert self.generation == self.slice.generation, \
            "slice was refitted; call update() before stepping"

    def increment(self):
        self._check_generation()
        self._tick()
        sl = self.slice
        resolutions = sl.resolutions
        last = len(self.digits) - 1
        for axis in range(last):
            self.digits[axis] += 1
            if self.digits[axis] == resolutions[axis]:
                self._move(sl.reset, axis)
                self.digits[axis] = 0
            else:
                self.index += 1
                self._step(sl.forward, axis)
                return self
        self.digits[last] += 1
        self.index += 1
        self._step(sl.forward, last)
        return self

    def decrement(self):
        self._check_generation()
        self._tick()
        sl = self.slice
        resolutions = sl.resolutions
        last = len(self.digits) - 1
        for axis in range(last):
            if self.digits[axis] == 0:
                self._move(sl.rreset, axis)
                self.digits[axis] = resolutions[axis] - 1
            else:
                self.digits[axis] -= 1
                self.index -= 1
                self._step(sl.reverse, axis)
                return self
        self.digits[last] -= 1
        self.index -= 1
        self._step(sl.reverse, last)
        return self

    def resync(self):
        """Recompute the payload exactly from the current index."""
        self._rebuild()
        return self

    def advance(self, steps: int):
        """Step ``steps`` times, backwards for negative ``steps``."""
        move = self.increment if steps >= 0 else self.decrement
        for _ in range(abs(steps)):
            move()
        return self

    def __eq__(self, other):
        if not isinstance(other, _Odometer):
            return NotImplemented
        return self.index == other.index

    __hash__ = None


class CubeIterator(_Odometer):
    """Walks the cells of a slice, materializing each cell's hypercube.

    A shallow iterator carries no cube; it only serves as an end marker
    since equality looks at the index alone.
    """

    def __init__(self, slice_, index: int = 0, refresh: int = DEFAULT_REFRESH, shallow: bool = False):
        super().__init__(slice_, index, refresh)
        self.cube: Optional[HeisenbergCube] = None if shallow else slice_.cube_at(self.index)

    @property
    def shallow(self) -> bool:
        return self.cube is None

    def _move(self, incrementor, axis):
        if self.cube is None:
            return
        inc = incrementor.common_at(axis)
        for vertex in self.cube.vertices:
            inc(vertex)

    def _rebuild_due(self):
        return self.cube is not None and self.index % self.refresh == 0

    def _rebuild(self):
        if self.cube is not None:
            self.cube = self.slice.cube_at(self.index)

    def update(self):
        """Resynchronize with the slice after a refit."""
        sl = self.slice
        if self.cube is None:
            self.index = sl.resolution
        else:
            self.index = sl.location_at(self.cube.back)
            self.cube = sl.cube_at(self.index)
        self._build_digits()
        self.generation = sl.generation
        logger.debug(f"CubeIterator updated to index {self.index} of {sl.resolution}")
        return self

    def __repr__(self):
        return f"CubeIterator(index={self.index}, digits={self.digits}, shallow={self.shallow})"


class SlicePointIterator(_Odometer):
    """Walks the grid points (cell lower corners) of a slice.

    ``not_finished`` turns false once a forward step reaches the end.
    """

    def __init__(self, slice_, index: int = 0, refresh: int = DEFAULT_REFRESH):
        super().__init__(slice_, index, refresh)
        self.point: HyperbolicPoint = slice_.point_at(self.index)
        self.count = 0
        self.not_finished = self.index < slice_.resolution

    def _tick(self):
        self.count += 1

    def _move(self, incrementor, axis):
        incrementor.common_at(axis)(self.point)

    def _rebuild_due(self):
        return self.count >= self.refresh

    def _rebuild(self):
        self.count = 0
        self.point = self.slice.point_at(self.index)

    def increment(self):
        super().increment()
        if self.digits[-1] >= self.slice.resolutions[-1]:
            self.not_finished = False
        return self

    def __bool__(self):
        return self.not_finished

    def prepare_update(self):
        """Move the point to the back vertex of its cell ahead of ``update()``."""
        self.point = self.slice.cube_at(self.index).back

    def update(self):
        """Resynchronize with the slice after a refit."""
        sl = self.slice
        self.index = sl.location_at(self.point)
        self.point = sl.point_at(self.index)
        self._build_digits()
        self.not_finished = self.index < sl.resolution
        self.count = 0
        self.generation = sl.generation
        logger.debug(f"SlicePointIterator updated to index {self.index} of {sl.resolution}")
        return self

    def __repr__(self):
        return f"SlicePointIterator(index={self.index}, digits={self.digits})"


def iter_cubes(slice_, refresh: int = DEFAULT_REFRESH) -> Iterator[HeisenbergCube]:
    """Yield the cube of every cell in index order.

    The same cube object is moved in place between yields; copy it to keep it.
    """
    it = CubeIterator(slice_, 0, refresh)
    end = slice_.cube_shallow_end()
    while it != end:
        yield it.cube
        it.increment()


def iter_points(slice_, refresh: int = DEFAULT_REFRESH) -> Iterator[HyperbolicPoint]:
    """Yield every grid point in index order; the point is moved in place."""
    it = SlicePointIterator(slice_, 0, refresh)
    while it:
        yield it.point
        it.increment()
