"""
Slice engine service providing a clean API over the Heisenberg slice engine.

This service wraps ``HeisenbergSlice`` and ``SliceTraversal`` to provide a
high-level API for initialization, walking, refitting and state snapshots.
"""
import logging
import time
from typing import Dict, Any, Optional

from pkgs.hyperbolic import HeisenbergSlice
from pkgs.engine_runtime import SimpleRecorder, SliceTraversal, SliceRequest, WalkRequest, WalkResult

logger = logging.getLogger(__name__)


class SliceEngineService:
    """High-level service wrapper for the Heisenberg slice engine."""

    def __init__(self, cfg: Optional[Dict[str, Any]] = None):
        """Initialize the engine service with configuration."""
        self.cfg = cfg or {}
        self.slice: Optional[HeisenbergSlice] = None
        self.traversal: Optional[SliceTraversal] = None
        self.recorder: Optional[SimpleRecorder] = None
        self.request: Optional[SliceRequest] = None
        self._initialized = False
        self._walk_count = 0

        logger.info("SliceEngineService created with configuration")

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self, req: SliceRequest) -> Dict[str, Any]:
        """Build the slice described by ``req``."""
        try:
            if req.enable_recorder:
                self.recorder = SimpleRecorder(enabled=True)
                self.recorder.set_metadata(
                    dimension=req.space.dimension,
                    requested_resolution=req.resolution,
                    config_hash=str(hash(req.model_dump_json()))
                )

            space = req.space.build(req.precision())
            self.slice = HeisenbergSlice(space, req.resolution)
            self.traversal = SliceTraversal(self.slice, refresh=req.refresh, recorder=self.recorder)
            self.request = req

            self._initialized = True
            self._walk_count = 0

            logger.info(f"Engine initialized: N={req.space.dimension}, "
                        f"requested={req.resolution}, realized={self.slice.resolution}")

            return {
                'success': True,
                'resolution': self.slice.resolution,
                'resolutions': self.slice.resolutions,
                'message': 'Engine initialized successfully'
            }

        except Exception as e:
            logger.error(f"Engine initialization failed: {e}")
            return {
                'success': False,
                'message': f'Initialization failed: {str(e)}'
            }

    def walk(self, req: WalkRequest) -> WalkResult:
        """Walk the slice, continuing from the current cursor unless restarting."""
        if not self._initialized:
            return WalkResult(success=False, message="Engine not initialized")

        try:
            t = self.traversal
            if req.restart or t.cursor is None or t.kind != req.kind or t.direction != req.direction:
                t.start(req.kind, req.direction)

            result = t.walk(
                threshold=req.threshold,
                max_steps=req.max_steps,
                drift_interval=req.drift_interval,
                drift_tolerance=req.drift_tolerance
            )
            self._walk_count += 1

            return WalkResult(
                success=True,
                message=f"Walk {self._walk_count} completed",
                metrics={'walk_count': self._walk_count},
                **result
            )

        except Exception as e:
            logger.error(f"Walk failed: {e}")
            return WalkResult(
                success=False,
                kind=req.kind,
                direction=req.direction,
                resolution=self.slice.resolution if self.slice else 0,
                message=f"Walk failed: {str(e)}"
            )

    def set_resolution(self, resolution: int) -> Dict[str, Any]:
        """Refit the slice and move the live cursor onto the new grid."""
        if not self._initialized:
            return {
                'success': False,
                'message': 'Engine not initialized'
            }

        try:
            self.traversal.prepare_update()
            try:
                realized = self.slice.set_resolution(resolution)
            except Exception:
                # the slice is unchanged; put the cursor back on its own index
                self.traversal.cancel_update()
                raise
            self.traversal.update()

            logger.info(f"Slice refitted: requested={resolution}, realized={realized}")

            return {
                'success': True,
                'resolution': realized,
                'cursor_index': self.traversal.cursor.index if self.traversal.cursor else None,
                'message': 'Resolution updated'
            }

        except Exception as e:
            logger.error(f"Resolution update failed: {e}")
            return {
                'success': False,
                'message': f'Resolution update failed: {str(e)}'
            }

    def snapshot(self) -> Dict[str, Any]:
        """Return summary snapshot of current engine state."""
        if not self._initialized:
            return {
                'initialized': False,
                'message': 'Engine not initialized'
            }

        try:
            cursor = self.traversal.cursor
            snapshot = {
                'initialized': True,
                'walk_count': self._walk_count,
                'timestamp': time.time(),
                'dimension': self.slice.spec.dimension,
                'requested_resolution': self.slice.requested_resolution,
                'resolution': self.slice.resolution,
                'resolutions': self.slice.resolutions,
                'strides': self.slice.strides,
                'space': self.slice.space.to_text(),
                'cursor_index': cursor.index if cursor is not None else None,
                'finished': self.traversal.finished
            }

            if self.recorder:
                snapshot['recorder_summary'] = self.recorder.get_summary()

            return snapshot

        except Exception as e:
            logger.error(f"Snapshot creation failed: {e}")
            return {
                'initialized': True,
                'error': str(e),
                'message': 'Snapshot creation failed'
            }

    def reset(self) -> Dict[str, Any]:
        """Drop the cursor and recordings; the slice is kept."""
        if not self._initialized:
            return {
                'success': False,
                'message': 'Engine not initialized'
            }

        self.traversal.cursor = None
        self._walk_count = 0
        if self.recorder:
            self.recorder.clear()

        logger.info("Engine reset")

        return {
            'success': True,
            'message': 'Engine reset successfully'
        }

    def save_recordings(self, base_path: str) -> Dict[str, Any]:
        """Save recorder data to specified path."""
        if not self.recorder:
            return {
                'success': False,
                'message': 'No recorder available'
            }

        try:
            self.recorder.dump_all_formats(base_path)
            summary = self.recorder.get_summary()

            return {
                'success': True,
                'message': f'Recordings saved to {base_path}',
                'summary': summary
            }

        except Exception as e:
            logger.error(f"Recording save failed: {e}")
            return {
                'success': False,
                'message': f'Save failed: {str(e)}'
            }

    def shutdown(self) -> Dict[str, Any]:
        """Gracefully shutdown the engine service."""
        self._initialized = False
        self.slice = None
        self.traversal = None
        self.recorder = None
        self.request = None

        logger.info("Engine service shutdown completed")

        return {
            'success': True,
            'message': 'Engine shutdown completed'
        }
