"""Tests for bounded hyperbolic spaces."""

import pytest

from pkgs.hyperbolic import DimensionError, HyperbolicPoint, HyperbolicSpace


class TestHyperbolicSpace:
    """Test space construction, containment and measure."""

    def test_from_bounds(self):
        space = HyperbolicSpace.from_bounds([((2.0, 0.0), (0.0, 3.0))], (0.0, 0.5), (1.0, 2.0))
        assert space.spec.dimension == 2
        assert space.zeta_at(0).real.as_tuple() == (0.0, 2.0)
        assert space.heisenberg_measure() == pytest.approx(3.0)
        assert space.has_measure()

    def test_wrong_region_count(self):
        with pytest.raises(DimensionError):
            HyperbolicSpace.from_bounds([], (0.0, 1.0), (0.0, 1.0), dimension=2)

    def test_unit(self):
        space = HyperbolicSpace.unit(3)
        assert all(iv.as_tuple() == (0.0, 1.0) for iv in space.commons())
        assert space.heisenberg_measure() == 1.0

    def test_degenerate(self):
        space = HyperbolicSpace.unit(2)
        space.r.set(1.0, 1.0)
        assert not space.has_measure()
        assert not HyperbolicSpace(2).has_measure()

    def test_degenerate_axis(self):
        space = HyperbolicSpace.unit(3)
        assert space.degenerate_axis() is None
        space.zeta_at(1).imag.set(0.25, 0.25)
        assert space.degenerate_axis() == 3
        assert space.slot_name(3) == 'zeta_1.im'
        assert not space.has_measure()

    def test_slot_names(self):
        space = HyperbolicSpace.unit(2)
        names = [space.slot_name(loc) for loc in range(space.hyperbolic_end)]
        assert names == ['zeta_0.re', 'zeta_0.im', 'r', 'height']

    def test_small_space_has_measure(self):
        space = HyperbolicSpace.from_bounds([((0.0, 1e-4), (0.0, 1e-4))], (0.0, 1e-4), (0.0, 1.0))
        assert space.heisenberg_measure() == pytest.approx(1e-12)
        assert space.has_measure()

    def test_contains(self):
        space = HyperbolicSpace.unit(2)
        assert space.contains(HyperbolicPoint.from_coordinates([0.5 + 0.5j], 1.0, 0.0))
        assert not space.contains(HyperbolicPoint.from_coordinates([0.5 + 1.5j], 0.5, 0.0))
        assert not space.contains(HyperbolicPoint.from_coordinates([0.5j], 0.5, 2.0))
        with pytest.raises(DimensionError):
            space.contains(HyperbolicPoint(3))

    def test_initialize_orders_bounds(self):
        space = HyperbolicSpace.unit(2)
        space.height.lower, space.height.upper = 3.0, -1.0
        space.initialize()
        assert space.height.as_tuple() == (-1.0, 3.0)

    def test_text_roundtrip(self):
        space = HyperbolicSpace.from_bounds([((-1.0, 1.0), (0.0, 0.5))], (0.0, 2.0), (0.25, 1.0))
        other = HyperbolicSpace.parse(space.to_text(), 2)
        assert other == space
        assert other is not space

    def test_copy_is_deep(self):
        space = HyperbolicSpace.unit(2)
        other = space.copy()
        other.zeta_at(0).extend(1.0)
        assert space.zeta_at(0).real.as_tuple() == (0.0, 1.0)
