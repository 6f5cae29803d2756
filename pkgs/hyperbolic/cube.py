"""
Heisenberg hypercubes: the 2^(2N-1) vertices of one grid cell.
"""
from typing import Iterator, List

from .common import DEFAULT_PRECISION, Precision
from .dimension import DimensionSpec, as_spec
from .exceptions import IndexOutOfRange
from .point import HyperbolicPoint
from . import textio


class HeisenbergCube:
    """Vertices of a unit heisenberg hypercube.

    Vertex i is vertex 0 moved one forward stride along every slot b whose
    bit is set in i. Two cubes are equal when their front (vertex 0) and
    back (last vertex) are equal.
    """

    def __init__(self, dimension, precision: Precision = DEFAULT_PRECISION):
        self.spec: DimensionSpec = as_spec(dimension)
        self.precision = precision
        self.vertices: List[HyperbolicPoint] = [HyperbolicPoint(self.spec, precision)
                                                for _ in range(self.spec.hypercube_size)]

    @classmethod
    def filled(cls, point: HyperbolicPoint) -> "HeisenbergCube":
        """Cube with every vertex a copy of ``point``."""
        cube = cls.__new__(cls)
        cube.spec, cube.precision = point.spec, point.precision
        cube.vertices = [point.copy() for _ in range(point.spec.hypercube_size)]
        return cube

    @property
    def front(self) -> HyperbolicPoint:
        return self.vertices[0]

    @property
    def back(self) -> HyperbolicPoint:
        return self.vertices[-1]

    def vertex_at(self, i: int) -> HyperbolicPoint:
        if not 0 <= i < len(self.vertices):
            raise IndexOutOfRange("vertex", i, len(self.vertices))
        return self.vertices[i]

    def midpoint(self) -> HyperbolicPoint:
        """Slot-wise mean of front and back, height of the front."""
        front, back = self.front, self.back
        mid = HyperbolicPoint(self.spec, self.precision)
        s = mid.structure
        s.zetas[:] = [(a + b) * 0.5 for a, b in zip(front.zetas, back.zetas)]
        s.r = (front.r + back.r) * 0.5
        s.height = front.height
        mid.initialize()
        return mid

    def __len__(self):
        return len(self.vertices)

    def __iter__(self) -> Iterator[HyperbolicPoint]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> HyperbolicPoint:
        return self.vertex_at(i)

    def __eq__(self, other):
        if not isinstance(other, HeisenbergCube):
            return NotImplemented
        return self.front == other.front and self.back == other.back

    __hash__ = None

    def copy(self) -> "HeisenbergCube":
        out = HeisenbergCube.__new__(HeisenbergCube)
        out.spec, out.precision = self.spec, self.precision
        out.vertices = [v.copy() for v in self.vertices]
        return out

    def to_text(self) -> str:
        return textio.format_sequence([v.to_text() for v in self.vertices])

    def read_text(self, text: str):
        elements = textio.expect_elements(text, self.spec.hypercube_size)
        for vertex, element in zip(self.vertices, elements):
            vertex.read_text(element)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"HeisenbergCube(N={self.spec.dimension}, front={self.front}, back={self.back})"
