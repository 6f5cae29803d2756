"""Tests for dimension constants and numeric helpers."""

import pytest

from pkgs.hyperbolic import DimensionError, DimensionSpec, Precision, as_spec, dimension_spec
from pkgs.hyperbolic.utils import (
    hermitian_inner_product, hermitian_quadratic_product, location_digits, location_from_digits,
    set_bits, vertex_bits
)


class TestDimensionSpec:
    """Test derived sizes."""

    @pytest.mark.parametrize("n", range(1, 7))
    def test_sizes(self, n):
        spec = DimensionSpec(n)
        assert spec.free_count == n - 1
        assert spec.zeta_real_size == 2 * (n - 1)
        assert spec.heisenberg_size == 2 * n - 1
        assert spec.hyperbolic_size == 2 * n
        assert spec.hypercube_size == 2 ** (2 * n - 1)
        assert spec.hypercube_vertex_count == spec.hypercube_size

    def test_n2_scenario(self):
        spec = dimension_spec(2)
        assert spec.heisenberg_size == 3
        assert spec.hypercube_size == 8

    @pytest.mark.parametrize("bad", [0, -1, 2.0, "2"])
    def test_invalid_dimension(self, bad):
        with pytest.raises(DimensionError):
            DimensionSpec(bad)

    def test_dimension_error_is_value_error(self):
        with pytest.raises(ValueError):
            dimension_spec(0)

    def test_cached_and_as_spec(self):
        assert dimension_spec(3) is dimension_spec(3)
        spec = DimensionSpec(4)
        assert as_spec(spec) is spec
        assert as_spec(4) == spec


class TestPrecision:
    """Test epsilon comparisons and rounding."""

    def test_equality(self):
        p = Precision()
        assert p.is_equal(1.0, 1.0 + 1e-12)
        assert not p.is_equal(1.0, 1.0 + 1e-6)
        assert p.is_zero(-1e-11)
        assert p.is_equal_cx(1 + 1j, 1 + (1 + 1e-12) * 1j)

    def test_ordering(self):
        p = Precision()
        assert p.is_less(1.0, 2.0)
        assert not p.is_less(1.0, 1.0 + 1e-12)
        assert p.is_less_equal(1.0 + 1e-12, 1.0)
        assert p.is_greater(2.0, 1.0)

    def test_biased_rounding(self):
        p = Precision()
        assert p.floor(2.99999999999) == 3
        assert p.floor(2.5) == 2
        assert p.floor(-0.5) == -1
        assert p.ceil(2.00000000001) == 2
        assert p.ceil(2.1) == 3

    def test_custom_tolerance(self):
        p = Precision(zero=1e-3, stream=4)
        assert p.is_equal(1.0, 1.0005)
        assert p.format(1.0 / 3.0) == "0.3333"


class TestUtils:
    """Test Hermitian forms and mixed-radix helpers."""

    def test_quadratic_product(self):
        assert hermitian_quadratic_product([]) == 0.0
        assert hermitian_quadratic_product([3 + 4j, 1j]) == pytest.approx(26.0)

    def test_inner_product_conjugates_rhs(self):
        assert hermitian_inner_product([1j], [1j]) == pytest.approx(1.0)
        assert hermitian_inner_product([1 + 0j], [1j]) == pytest.approx(-1j)
        assert hermitian_inner_product([], []) == 0j

    def test_location_digits(self):
        assert location_digits(5, [2, 2, 2]) == [1, 0, 1]
        assert location_digits(11, [2, 2, 2]) == [1, 1, 0]
        assert location_digits(11, [2, 2, 2], wrap_last=False) == [1, 1, 2]
        assert location_digits(-1, [2, 3, 4], wrap_last=False) == [1, 2, -1]

    def test_location_roundtrip(self):
        resolutions = [3, 4, 5]
        for loc in range(60):
            assert location_from_digits(location_digits(loc, resolutions), resolutions) == loc

    def test_bits(self):
        assert vertex_bits(5, 3) == (1, 0, 1)
        assert list(set_bits(0)) == []
        assert list(set_bits(13)) == [0, 2, 3]
