"""Tests for hyperbolic points and dependent-coordinate maintenance."""

import io

import pytest

from conftest import assert_consistent, random_point
from pkgs.hyperbolic import DimensionError, HyperbolicPoint


class TestInitialize:
    """Test the dependent coordinate baseline."""

    def test_zero_point(self):
        p = HyperbolicPoint(3)
        assert p.dependent == 0j
        assert list(p.commons()) == [0.0] * 6

    def test_known_value(self):
        p = HyperbolicPoint.from_coordinates([1 + 1j], 2.0, 4.0)
        # -1/2 * |1+i|^2 - 4/2 = -3
        assert p.dependent == pytest.approx(-3 + 2j)

    def test_dimension_one(self):
        p = HyperbolicPoint.from_coordinates([], 1.5, 2.0)
        assert p.spec.dimension == 1
        assert p.dependent == pytest.approx(-1 + 1.5j)

    def test_wrong_zeta_count(self):
        with pytest.raises(DimensionError):
            HyperbolicPoint.from_coordinates([1j, 2j], 0.0, 0.0, dimension=2)

    def test_raw_writes_need_initialize(self):
        p = HyperbolicPoint(2)
        p.set_zeta_at(0, 2 + 0j)
        assert p.dependent == 0j
        p.initialize()
        assert p.dependent.real == pytest.approx(-2.0)


class TestIncrementalUpdates:
    """Closed-form dependent updates agree with a full recomputation."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_set_height(self, rng, n):
        for _ in range(25):
            p = random_point(rng, n)
            p.set_height(rng.uniform(-3, 3))
            assert_consistent(p)

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_set_r(self, rng, n):
        for _ in range(25):
            p = random_point(rng, n)
            p.set_r(rng.uniform(-3, 3))
            assert_consistent(p)
            assert p.dependent.imag == p.r

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_translate(self, rng, n):
        for _ in range(25):
            p, q = random_point(rng, n), random_point(rng, n)
            expected_zetas = [a + b for a, b in zip(p.zetas, q.zetas)]
            height = p.height
            p.translate(q)
            assert_consistent(p)
            assert p.zetas == pytest.approx(expected_zetas)
            assert p.height == height

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_negate(self, rng, n):
        for _ in range(25):
            p = random_point(rng, n)
            r = p.r
            p.negate()
            assert_consistent(p)
            assert p.r == -r

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_scale_and_divide(self, rng, n):
        for _ in range(25):
            p = random_point(rng, n)
            k = rng.uniform(-4, 4)
            p.scale(k)
            assert_consistent(p)
            p.divide(rng.uniform(0.5, 3))
            assert_consistent(p)

    def test_subtract(self, rng):
        p, q = random_point(rng, 3), random_point(rng, 3)
        original = p.copy()
        p.subtract(q)
        assert_consistent(p)
        p.translate(q)
        assert p == original

    def test_long_chain(self, rng):
        p = random_point(rng, 4)
        for _ in range(500):
            p += random_point(rng, 4, scale=0.1)
            p *= rng.uniform(0.9, 1.1)
            p.set_height(rng.uniform(0, 1))
        assert_consistent(p, tol=1e-8)

    def test_mismatched_dimension(self, rng):
        with pytest.raises(DimensionError):
            random_point(rng, 2).translate(random_point(rng, 3))


class TestOperators:
    """Test operator forms and copy semantics."""

    def test_binary_operators_copy(self, rng):
        p, q = random_point(rng, 3), random_point(rng, 3)
        before = p.copy()
        total = p + q
        assert p == before
        assert_consistent(total)
        assert_consistent(p - q)
        assert_consistent(p * 2.0)
        assert_consistent(2.0 * p)
        assert_consistent(p / 4.0)

    def test_unary_negation_returns_new_point(self, rng):
        p = random_point(rng, 3)
        before = p.copy()
        n = -p
        assert p == before
        assert n.zetas == pytest.approx([-z for z in p.zetas])
        assert n.r == -p.r
        assert n.height == p.height
        assert_consistent(n)

    def test_in_place_operators(self, rng):
        p, q = random_point(rng, 2), random_point(rng, 2)
        p -= q
        p /= 3.0
        assert_consistent(p)

    def test_copy_is_independent(self, rng):
        p = random_point(rng, 3)
        q = p.copy()
        q.set_zeta_at(0, 100j)
        q.set_r(50.0)
        assert p.zetas[0] != 100j
        assert p.r != 50.0


class TestOrdering:
    """Lexicographic, epsilon tolerant ordering."""

    def test_lexicographic(self):
        a = HyperbolicPoint.from_coordinates([1 + 0j], 0.0, 0.0)
        b = HyperbolicPoint.from_coordinates([1 + 1j], 0.0, 0.0)
        c = HyperbolicPoint.from_coordinates([2 + 0j], -5.0, 0.0)
        assert a < b < c
        assert sorted([c, a, b]) == [a, b, c]
        assert c > a

    def test_epsilon_ties(self):
        a = HyperbolicPoint.from_coordinates([1 + 0j], 0.0, 0.0)
        b = HyperbolicPoint.from_coordinates([1 + 1e-12j], 0.0, 0.0)
        assert a == b
        assert not a < b and not b < a


class TestViews:
    """Test projective coordinates and text."""

    def test_point_coordinates(self):
        p = HyperbolicPoint.from_coordinates([1 + 1j, 2j], 3.0, 1.0)
        coords = p.point_coordinates()
        assert len(coords) == p.spec.dimension + 1
        assert coords[0] == 1 + 0j
        assert coords[1:3] == [1 + 1j, 2j]
        assert coords[-1] == p.dependent

    def test_pretty_print(self):
        p = HyperbolicPoint.from_coordinates([1 + 1j], 3.0, 0.0)
        out = io.StringIO()
        p.pretty_print(out)
        lines = out.getvalue().splitlines()
        assert lines == ["(1,0)", "(1,1)", "(-1,3)"]

    def test_text_roundtrip_reinitializes(self, rng):
        p = random_point(rng, 3)
        q = HyperbolicPoint.parse(p.to_text(), 3)
        assert q == p
        assert q.dependent == pytest.approx(p.dependent)
