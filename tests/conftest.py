"""Shared fixtures for the slice engine tests."""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pkgs.hyperbolic import HeisenbergSlice, HyperbolicPoint, HyperbolicSpace


def random_point(rng, dimension, scale=2.0):
    """Initialized point with uniformly random coordinates in [-scale, scale]."""
    free = dimension - 1
    zetas = rng.uniform(-scale, scale, free) + 1j * rng.uniform(-scale, scale, free)
    r, height = rng.uniform(-scale, scale, 2)
    return HyperbolicPoint.from_coordinates(list(zetas), r, height, dimension=dimension)


def assert_consistent(point, tol=1e-9):
    """The dependent coordinate agrees with a full recomputation."""
    fresh = point.copy()
    fresh.initialize()
    assert abs(point.dependent - fresh.dependent) < tol


@pytest.fixture
def rng():
    return np.random.default_rng(20240917)


@pytest.fixture
def unit_space():
    return HyperbolicSpace.unit(2)


@pytest.fixture
def slice8(unit_space):
    """N=2 unit slice fitted to 2 x 2 x 2."""
    return HeisenbergSlice(unit_space, 8)


@pytest.fixture
def slice64(unit_space):
    """N=2 unit slice fitted to 4 x 4 x 4."""
    return HeisenbergSlice(unit_space, 64)
