"""
Engine runtime components for slice traversal and recording.

This package contains the orchestration classes that sit on top of the pure
geometry in ``pkgs.hyperbolic``.
"""

from .recorder import SimpleRecorder
from .traversal import SliceTraversal, point_drift
from .schemas import (
    IntervalConfig, RegionConfig, SpaceConfig, SliceRequest, WalkRequest, WalkResult
)

__all__ = [
    'SimpleRecorder', 'SliceTraversal', 'point_drift',
    'IntervalConfig', 'RegionConfig', 'SpaceConfig', 'SliceRequest', 'WalkRequest', 'WalkResult'
]
