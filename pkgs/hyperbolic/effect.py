"""
Effect of a centre point on a hypercube.

For a vertex v and a centre c, with h = sum_i zeta_v,i * conj(zeta_c,i):

    phi(v) = 2 * (sqrt(t - (r_v - r_c + Im h)^2) + Re h
                  + Re dep_v + height_v / 2 + Re dep_c)

A vertex fails (-1) when the square root has no real value or phi is not
clearly positive. The cube's value is the minimum over its vertices, or -1
as soon as one vertex fails.
"""
import numpy as np

from .cube import HeisenbergCube
from .point import HyperbolicPoint
from .structure import check_same_dimension

FAIL = -1.0


def _vertex_arrays(cube: HeisenbergCube):
    vertices = cube.vertices
    zetas = np.array([v.zetas for v in vertices], dtype=np.complex128)
    r = np.fromiter((v.r for v in vertices), dtype=np.float64, count=len(vertices))
    dep = np.fromiter((v.dependent.real for v in vertices), dtype=np.float64, count=len(vertices))
    height = np.fromiter((v.height for v in vertices), dtype=np.float64, count=len(vertices))
    return zetas, r, dep, height


def vertex_phi(cube: HeisenbergCube, center: HyperbolicPoint, threshold: float) -> np.ndarray:
    """phi for every vertex; failed vertices hold -1."""
    check_same_dimension(cube, center)
    zetas, r, dep, height = _vertex_arrays(cube)
    c = np.asarray(center.zetas, dtype=np.complex128)
    h = zetas @ np.conj(c) if c.size else np.zeros(len(r), dtype=np.complex128)

    imag = r - center.r + h.imag
    imag *= imag
    fits = imag <= threshold

    phi = np.full(len(r), FAIL)
    root = np.sqrt(threshold - imag[fits])
    phi[fits] = 2.0 * (root + h.real[fits] + dep[fits] + 0.5 * height[fits] + center.dependent.real)

    zero = cube.precision.zero
    phi[fits & (phi <= zero)] = FAIL
    return phi


def cube_phi(cube: HeisenbergCube, center: HyperbolicPoint, threshold: float) -> float:
    """Minimum of phi over the cube, or -1 if any vertex fails."""
    phi = vertex_phi(cube, center, threshold)
    if np.any(phi < 0.0):
        return FAIL
    return float(phi.min())


def cube_phi_midpoint(cube: HeisenbergCube, threshold: float) -> float:
    """``cube_phi`` centred on the cube's own midpoint."""
    return cube_phi(cube, cube.midpoint(), threshold)
