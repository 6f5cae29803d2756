"""Tests for intervals, regions and interval data."""

import pytest

from pkgs.hyperbolic import ComplexRegion, IntervalData, RealInterval, RegionData, euclidean_measure


class TestRealInterval:
    """Test the closed real interval."""

    def test_ordering(self):
        iv = RealInterval(2.0, 1.0)
        iv.initialize()
        assert iv.as_tuple() == (1.0, 2.0)
        iv.set(3.0, -1.0)
        assert iv.as_tuple() == (-1.0, 3.0)

    def test_measures(self):
        iv = RealInterval(1.0, 3.0)
        assert iv.length == 2.0
        assert iv.midpoint == 2.0

    def test_containment(self):
        iv = RealInterval(0.0, 1.0)
        assert iv.contains(1.0 + 1e-12)
        assert not iv.contains(1.1)
        assert iv.contains_co(0.0) and not iv.contains_co(1.0)
        assert iv.contains_oc(1.0) and not iv.contains_oc(0.0)
        assert iv.contains_oo(0.5) and not iv.contains_oo(0.0)

    def test_closest_and_distance(self):
        iv = RealInterval(0.0, 1.0)
        assert iv.closest(-2.0) == 0.0
        assert iv.closest(0.3) == 0.3
        assert iv.distance(3.0) == 2.0

    def test_arithmetic(self):
        iv = RealInterval(0.0, 1.0)
        assert (iv + 2.0).as_tuple() == (2.0, 3.0)
        assert (iv * 2.0).as_tuple() == (0.0, 2.0)
        assert (iv / 2.0).as_tuple() == (0.0, 0.5)
        iv -= 1.0
        assert iv.as_tuple() == (-1.0, 0.0)
        assert iv.extend(0.5).as_tuple() == (-1.5, 0.5)

    def test_equality(self):
        assert RealInterval(0.0, 1.0) == RealInterval(1e-12, 1.0)
        assert RealInterval(0.0, 1.0) != RealInterval(0.0, 1.1)


class TestComplexRegion:
    """Test the complex region."""

    def test_from_bounds_orders(self):
        region = ComplexRegion.from_bounds((1.0, 0.0), (0.0, 2.0))
        assert region.real.as_tuple() == (0.0, 1.0)
        assert region.area == 2.0

    def test_corners(self):
        region = ComplexRegion.from_bounds((0.0, 1.0), (0.0, 2.0))
        assert region.corners() == (0j, 1 + 0j, 2j, 1 + 2j)
        region.set_bl_tr(1 + 1j, -1 - 1j)
        assert region.bl == -1 - 1j and region.tr == 1 + 1j

    def test_contains_and_distance(self):
        region = ComplexRegion.from_bounds((0.0, 1.0), (0.0, 2.0))
        assert region.contains(0.5 + 1j)
        assert not region.contains(1.5 + 1j)
        assert region.closest(2 + 3j) == 1 + 2j
        assert region.distance2(2 + 3j) == pytest.approx(2.0)
        assert region.distance(1 + 3j) == pytest.approx(1.0)

    def test_copy_is_deep(self):
        region = ComplexRegion.from_bounds((0.0, 1.0), (0.0, 1.0))
        other = region.copy()
        other.extend(1.0)
        assert region.real.as_tuple() == (0.0, 1.0)
        assert region != other


class TestIntervalData:
    """Test per-axis subdivision data."""

    def test_set_data(self):
        data = IntervalData()
        data.set_data(4, 2.0)
        assert data.resolution == 4
        assert data.stride == 0.5

    def test_subinterval(self):
        data = IntervalData(4, 0.5)
        sub = data.subinterval_at(RealInterval(1.0, 3.0), 2)
        assert sub.as_tuple() == (2.0, 2.5)

    def test_rejects_non_positive(self):
        with pytest.raises(AssertionError):
            IntervalData().set_data(0, 1.0)
        with pytest.raises(AssertionError):
            IntervalData().set_data(2, 0.0)

    def test_region_data(self):
        rd = RegionData(IntervalData(2, 0.5), IntervalData(3, 0.25))
        assert rd == rd.copy()
        assert rd != RegionData(IntervalData(2, 0.5), IntervalData(3, 0.3))


class TestMeasure:
    """Test the euclidean measure."""

    def test_product(self):
        assert euclidean_measure([RealInterval(0.0, 2.0), RealInterval(1.0, 4.0)]) == 6.0

    def test_empty(self):
        assert euclidean_measure([]) == 1.0
