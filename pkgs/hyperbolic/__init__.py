"""
Heisenberg slices of complex hyperbolic space.

Grid discretization of bounded regions of N-dimensional complex hyperbolic
space, with incremental odometer traversal of grid points and hypercubes.
"""

from .common import DEFAULT_PRECISION, Part, Precision
from .dimension import DimensionSpec, as_spec, dimension_spec
from .exceptions import (
    AccessorMismatch,
    DegenerateSpace,
    DimensionError,
    HyperbolicError,
    IndexOutOfRange,
    ParseError,
)
from .euclidean import ComplexRegion, IntervalData, RealInterval, RegionData, euclidean_measure
from .structure import HeisenbergStructure, HyperbolicStructure, ZetaArray
from .point import HyperbolicPoint
from .cube import HeisenbergCube
from .space import HyperbolicSpace
from .incrementor import HeisenbergIncrementor, Incrementor, RIncrementor, ZetaIncrementor
from .iterators import DEFAULT_REFRESH, CubeIterator, SlicePointIterator, iter_cubes, iter_points
from .slice import HeisenbergSlice
from .effect import cube_phi, cube_phi_midpoint, vertex_phi

__all__ = [
    'DEFAULT_PRECISION', 'Part', 'Precision',
    'DimensionSpec', 'as_spec', 'dimension_spec',
    'AccessorMismatch', 'DegenerateSpace', 'DimensionError', 'HyperbolicError',
    'IndexOutOfRange', 'ParseError',
    'ComplexRegion', 'IntervalData', 'RealInterval', 'RegionData', 'euclidean_measure',
    'HeisenbergStructure', 'HyperbolicStructure', 'ZetaArray',
    'HyperbolicPoint', 'HeisenbergCube', 'HyperbolicSpace',
    'HeisenbergIncrementor', 'Incrementor', 'RIncrementor', 'ZetaIncrementor',
    'DEFAULT_REFRESH', 'CubeIterator', 'SlicePointIterator', 'iter_cubes', 'iter_points',
    'HeisenbergSlice',
    'cube_phi', 'cube_phi_midpoint', 'vertex_phi',
]
