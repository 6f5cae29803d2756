"""Tests for cube effect evaluation."""

import math

import numpy as np
import pytest

from pkgs.hyperbolic import HeisenbergSlice, HyperbolicPoint, HyperbolicSpace, cube_phi, cube_phi_midpoint, vertex_phi


def reference_phi(vertex, center, threshold):
    h = sum(z * w.conjugate() for z, w in zip(vertex.zetas, center.zetas))
    imag = (vertex.r - center.r + h.imag) ** 2
    if imag > threshold:
        return -1.0
    phi = 2.0 * (math.sqrt(threshold - imag) + h.real + vertex.dependent.real
                 + 0.5 * vertex.height + center.dependent.real)
    return -1.0 if phi <= 1e-10 else phi


class TestVertexPhi:
    """Test the per-vertex effect."""

    def test_matches_reference(self, slice64):
        for i in (0, 17, 42, 63):
            cube = slice64.cube_at(i)
            center = cube.midpoint()
            phi = vertex_phi(cube, center, 2.0)
            expected = [reference_phi(v, center, 2.0) for v in cube]
            assert phi == pytest.approx(expected)

    def test_closed_form(self):
        # phi = 2 (sqrt(t - (r_v - r_c + Im h)^2) - |z_v - z_c|^2 / 2 - height_c / 2)
        space = HyperbolicSpace.from_bounds([((1.0, 2.0), (-1.0, 0.0))], (0.0, 1.0), (0.0, 1.0))
        cube = HeisenbergSlice(space, 8).cube_at(0)
        center = HyperbolicPoint.from_coordinates([1.5 - 0.5j], 0.5, 0.0)
        phi = vertex_phi(cube, center, 4.0)
        for v, value in zip(cube, phi):
            h = v.zetas[0] * center.zetas[0].conjugate()
            closed = 2.0 * (math.sqrt(4.0 - (v.r - center.r + h.imag) ** 2)
                            - 0.5 * abs(v.zetas[0] - center.zetas[0]) ** 2)
            assert value == pytest.approx(closed)

    def test_dimension_one(self):
        cube = HeisenbergSlice(HyperbolicSpace.unit(1), 4).cube_at(1)
        center = cube.midpoint()
        phi = vertex_phi(cube, center, 1.0)
        assert phi.shape == (2,)
        assert phi == pytest.approx([reference_phi(v, center, 1.0) for v in cube])


class TestCubePhi:
    """Test the cube minimum."""

    def test_minimum_over_vertices(self, slice8):
        cube = slice8.cube_at(5)
        center = cube.midpoint()
        assert cube_phi(cube, center, 100.0) == pytest.approx(np.min(vertex_phi(cube, center, 100.0)))
        assert cube_phi_midpoint(cube, 100.0) == pytest.approx(cube_phi(cube, center, 100.0))

    def test_threshold_too_small_fails(self, slice8):
        cube = slice8.cube_at(0)
        # the origin vertex sits 0.25 below the midpoint in r
        assert cube_phi_midpoint(cube, 0.01) == -1.0

    def test_tall_center_fails(self, slice8):
        cube = slice8.cube_at(0)
        center = HyperbolicPoint.from_coordinates([0.25 + 0.25j], 0.25, 10.0)
        assert np.all(vertex_phi(cube, center, 1.0) == -1.0)
        assert cube_phi(cube, center, 1.0) == -1.0

    def test_one_failing_vertex_fails_cube(self, slice8):
        cube = slice8.cube_at(0)
        center = HyperbolicPoint.from_coordinates([0j], 0.0, 0.0)
        # vertices with r = 0.5 need t >= 0.25
        phi = vertex_phi(cube, center, 0.2)
        assert np.any(phi == -1.0) and np.any(phi > 0.0)
        assert cube_phi(cube, center, 0.2) == -1.0
