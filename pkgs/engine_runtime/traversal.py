"""
Slice traversal runner.

Walks every cell (or grid point) of a Heisenberg slice with an odometer
iterator, evaluates the cube effect of each cell against its midpoint and
samples the drift between the incrementally moved payload and a fresh
``point_at`` of the current index. A drift above tolerance is logged and
resynchronized.
"""
import logging
import time
from typing import Dict, Optional, Tuple

import numpy as np

from pkgs.hyperbolic import (
    DEFAULT_REFRESH, CubeIterator, HeisenbergSlice, HyperbolicPoint, SlicePointIterator, cube_phi_midpoint
)
from .recorder import SimpleRecorder

logger = logging.getLogger(__name__)


def point_drift(current: HyperbolicPoint, exact: HyperbolicPoint) -> float:
    """Largest absolute difference over the hyperbolic slots and the dependent coordinate."""
    slots = np.abs(np.fromiter(current.commons(), dtype=np.float64)
                   - np.fromiter(exact.commons(), dtype=np.float64))
    return float(max(slots.max(initial=0.0), abs(current.dependent - exact.dependent)))


class SliceTraversal:
    """Cube or point walk over a slice with a drift guard."""

    def __init__(self, slice_: HeisenbergSlice, refresh: int = DEFAULT_REFRESH,
                 recorder: Optional[SimpleRecorder] = None):
        self.slice = slice_
        self.refresh = refresh
        self.recorder = recorder
        self.cursor = None
        self.kind = 'cubes'
        self.direction = 'forward'
        self.resyncs = 0

    def start(self, kind: str = 'cubes', direction: str = 'forward'):
        """Place a fresh cursor at the first cell of the walk."""
        if direction not in ('forward', 'backward'):
            raise ValueError(f"Unknown direction: {direction}")
        index = 0 if direction == 'forward' else self.slice.resolution - 1
        if kind == 'cubes':
            self.cursor = CubeIterator(self.slice, index, self.refresh)
        elif kind == 'points':
            self.cursor = SlicePointIterator(self.slice, index, self.refresh)
        else:
            raise ValueError(f"Unknown walk kind: {kind}")
        self.kind, self.direction = kind, direction
        self.resyncs = 0
        logger.info(f"Traversal started: kind={kind}, direction={direction}, "
                    f"resolution={self.slice.resolution}, refresh={self.refresh}")
        return self.cursor

    @property
    def finished(self) -> bool:
        if self.cursor is None:
            return False
        if self.direction == 'forward':
            return self.cursor.index >= self.slice.resolution
        return self.cursor.index < 0

    def current_point(self) -> HyperbolicPoint:
        if self.kind == 'cubes':
            return self.cursor.cube.front
        return self.cursor.point

    def drift(self) -> float:
        return point_drift(self.current_point(), self.slice.point_at(self.cursor.index))

    def enforce_drift_guard(self, tolerance: float) -> Tuple[float, bool]:
        """Measure drift; resynchronize the cursor when it exceeds ``tolerance``."""
        drift = self.drift()
        if drift > tolerance:
            logger.warning(f"Drift guard violated at index {self.cursor.index}: "
                           f"drift={drift:.3e} > {tolerance:.1e}, resynchronizing")
            self.cursor.resync()
            self.resyncs += 1
            return drift, False
        return drift, True

    def walk(self, threshold: float = 1.0, max_steps: Optional[int] = None,
             drift_interval: int = 1024, drift_tolerance: float = 1e-8) -> Dict:
        """Step the cursor until the walk ends or ``max_steps`` cells were visited."""
        if self.cursor is None:
            self.start(self.kind, self.direction)

        move = self.cursor.increment if self.direction == 'forward' else self.cursor.decrement
        start_index = self.cursor.index
        steps = passed = failed = 0
        min_phi = None
        max_drift = 0.0
        t0 = time.time()

        while not self.finished and (max_steps is None or steps < max_steps):
            if self.kind == 'cubes':
                phi = cube_phi_midpoint(self.cursor.cube, threshold)
                if phi < 0.0:
                    failed += 1
                else:
                    passed += 1
                    min_phi = phi if min_phi is None else min(min_phi, phi)
            steps += 1

            if steps % drift_interval == 0:
                drift, guard_ok = self.enforce_drift_guard(drift_tolerance)
                max_drift = max(max_drift, drift)
                if self.recorder:
                    self.recorder.log({
                        'index': self.cursor.index,
                        'drift': drift,
                        'guard_ok': guard_ok,
                        'passed': passed,
                        'failed': failed
                    })

            move()

        elapsed = time.time() - t0
        result = {
            'kind': self.kind,
            'direction': self.direction,
            'steps': steps,
            'start_index': start_index,
            'end_index': self.cursor.index,
            'finished': self.finished,
            'resolution': self.slice.resolution,
            'passed': passed,
            'failed': failed,
            'min_phi': min_phi,
            'max_drift': max_drift,
            'resyncs': self.resyncs,
            'elapsed': elapsed
        }
        if self.recorder:
            self.recorder.log({k: v for k, v in result.items() if k not in ('kind', 'direction')})
        logger.info(f"Traversal walked {steps} cells from {start_index} to {self.cursor.index} "
                    f"({passed} passed, {failed} failed) in {elapsed:.3f}s")
        return result

    def prepare_update(self):
        """Call before refitting the slice."""
        if isinstance(self.cursor, SlicePointIterator) and not self.finished:
            self.cursor.prepare_update()

    def cancel_update(self):
        """Undo ``prepare_update()`` when the refit did not happen."""
        if isinstance(self.cursor, SlicePointIterator) and not self.finished:
            self.cursor.resync()
            logger.info(f"Traversal refit cancelled; cursor kept at index {self.cursor.index}")

    def update(self):
        """Call after refitting the slice."""
        if self.cursor is None:
            return
        if self.finished:
            # a finished walk stays finished at the new resolution
            index = self.slice.resolution if self.direction == 'forward' else -1
            self.cursor = type(self.cursor)(self.slice, index, self.refresh)
        else:
            self.cursor.update()
        logger.info(f"Traversal cursor updated to index {self.cursor.index} of {self.slice.resolution}")
