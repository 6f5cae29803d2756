"""Tests for Heisenberg hypercubes."""

import pytest

from conftest import assert_consistent
from pkgs.hyperbolic import HeisenbergCube, HyperbolicPoint, IndexOutOfRange


class TestCubeBasics:
    """Test construction and access."""

    def test_vertex_count(self):
        assert len(HeisenbergCube(1)) == 2
        assert len(HeisenbergCube(2)) == 8
        assert len(HeisenbergCube(3)) == 32

    def test_vertex_bounds(self):
        cube = HeisenbergCube(2)
        with pytest.raises(IndexOutOfRange):
            cube.vertex_at(8)
        with pytest.raises(IndexOutOfRange):
            cube[-1]

    def test_filled_copies(self):
        p = HyperbolicPoint.from_coordinates([1j], 1.0, 0.0)
        cube = HeisenbergCube.filled(p)
        cube.vertices[3].set_r(5.0)
        assert cube.front.r == 1.0
        assert p.r == 1.0


class TestCubeGeometry:
    """Test cubes produced by a slice."""

    def test_vertex_bits(self, slice8):
        cube = slice8.cube_at(0)
        # vertex 5 = bits 0 and 2: zeta real part and r
        v = cube.vertex_at(5)
        assert v.zetas[0] == 0.5 + 0j
        assert v.r == 0.5
        for vertex in cube:
            assert_consistent(vertex)

    def test_midpoint(self, slice8):
        mid = slice8.cube_at(0).midpoint()
        assert mid.zetas[0] == pytest.approx(0.25 + 0.25j)
        assert mid.r == pytest.approx(0.25)
        assert mid.height == 0.0
        assert_consistent(mid)

    def test_equality_uses_front_and_back(self, slice8):
        a, b = slice8.cube_at(3), slice8.cube_at(3)
        b.vertices[2].set_r(42.0)
        assert a == b
        b.back.set_r(42.0)
        assert a != b

    def test_copy_is_deep(self, slice8):
        a = slice8.cube_at(1)
        b = a.copy()
        b.front.set_height(9.0)
        assert a.front.height == 0.0

    def test_text_roundtrip(self, slice8):
        cube = slice8.cube_at(6)
        other = HeisenbergCube(2)
        other.read_text(cube.to_text())
        assert other == cube
        assert all(x == y for x, y in zip(other, cube))
        assert other.back.dependent == pytest.approx(cube.back.dependent)
