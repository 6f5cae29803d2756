"""
Dimension constants for N-dimensional complex hyperbolic objects.

Every structure, point, cube and slice carries a ``DimensionSpec`` so that
the sizes of its slot lists are fixed at construction time.
"""
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import DimensionError


@dataclass(frozen=True)
class DimensionSpec:
    """Sizes derived from the complex hyperbolic dimension N (N >= 1).

    - ``free_count``: number of free complex (zeta) coordinates, N - 1
    - ``zeta_real_size``: real slots contributed by the zetas, 2(N - 1)
    - ``heisenberg_size``: real dimension of a horosphere, 2N - 1
    - ``hyperbolic_size``: heisenberg slots plus the height, 2N
    - ``hypercube_size``: vertices of a unit Heisenberg hypercube, 2^(2N - 1)
    """
    dimension: int

    def __post_init__(self):
        if not isinstance(self.dimension, int) or self.dimension < 1:
            raise DimensionError(f"hyperbolic dimension must be an integer >= 1, got {self.dimension!r}")

    @property
    def free_count(self) -> int:
        return self.dimension - 1

    @property
    def zeta_real_size(self) -> int:
        return 2 * (self.dimension - 1)

    @property
    def heisenberg_size(self) -> int:
        return 2 * self.dimension - 1

    @property
    def hyperbolic_size(self) -> int:
        return 2 * self.dimension

    @property
    def hypercube_size(self) -> int:
        return 1 << self.heisenberg_size

    # Aliases matching the vocabulary of the data model
    hypercube_vertex_count = hypercube_size


@lru_cache(maxsize=None)
def dimension_spec(dimension: int) -> DimensionSpec:
    """Return the shared (immutable) spec for dimension N."""
    return DimensionSpec(dimension)


def as_spec(dimension) -> DimensionSpec:
    """Accept either an int N or an existing ``DimensionSpec``."""
    if isinstance(dimension, DimensionSpec):
        return dimension
    return dimension_spec(dimension)
