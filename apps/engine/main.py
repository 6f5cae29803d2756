#!/usr/bin/env python3
"""
Main CLI entrypoint for the Heisenberg slice engine.

Loads configuration, initializes the engine service, walks the slice and
saves snapshots and recordings, with graceful shutdown handling.
"""
import argparse
import signal
import sys
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic import ValidationError

from apps.engine.engine_service import SliceEngineService
from pkgs.engine_runtime import SliceRequest, WalkRequest
from pkgs.observability import setup_logging

logger = logging.getLogger('EngineMain')

DEFAULT_CONFIG: Dict[str, Any] = {
    'slice': {
        'space': {'dimension': 2},
        'resolution': 4096,
        'refresh': 65536,
        'precision_zero': 1e-10,
        'enable_recorder': True
    },
    'walk': {
        'kind': 'cubes',
        'direction': 'forward',
        'threshold': 1.0,
        'drift_interval': 1024,
        'drift_tolerance': 1e-8,
        'chunk_steps': 1024
    },
    'output': {
        'recordings_path': './recordings/walk',
        'snapshot_path': './snapshots'
    }
}


class EngineRunner:
    """Main runner for the engine with graceful shutdown support."""

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()
        self.engine = SliceEngineService(self.config)
        self.running = False
        self.shutdown_requested = False

        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file, falling back to the defaults."""
        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            logger.info(f"Loaded configuration from {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to load config from {self.config_path}: {e}")
            loaded = {}

        config = {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
        for section, values in loaded.items():
            if isinstance(values, dict) and section in config:
                config[section].update(values)
            else:
                config[section] = values
        return config

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals gracefully."""
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        self.shutdown_requested = True

    def _save_snapshot(self, tag: str):
        """Save engine snapshot."""
        try:
            snapshot = self.engine.snapshot()
            snapshot_path = Path(self.config['output']['snapshot_path'])
            snapshot_path.mkdir(parents=True, exist_ok=True)

            snapshot_file = snapshot_path / f"snapshot_{tag}.yaml"
            with open(snapshot_file, 'w') as f:
                yaml.safe_dump(snapshot, f, default_flow_style=False)

            logger.info(f"Saved snapshot to {snapshot_file}")

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to save snapshot: {e}")

    def _save_recordings(self):
        """Save all recordings."""
        recordings_path = self.config['output']['recordings_path']
        result = self.engine.save_recordings(recordings_path)

        if result['success']:
            logger.info(f"Recordings saved: {result['message']}")
        else:
            logger.error(f"Failed to save recordings: {result['message']}")

    def initialize(self) -> bool:
        """Initialize the engine."""
        try:
            req = SliceRequest(**self.config['slice'])
        except ValidationError as e:
            logger.error(f"Invalid slice configuration: {e}")
            return False

        result = self.engine.init(req)
        if result['success']:
            logger.info(f"Engine initialized successfully: realized resolution {result['resolution']}")
            return True
        logger.error(f"Engine initialization failed: {result['message']}")
        return False

    def run_walk(self) -> bool:
        """Walk the whole slice in chunks so shutdown requests are honoured."""
        if not self.initialize():
            return False

        walk_cfg = dict(self.config['walk'])
        chunk_steps = walk_cfg.pop('chunk_steps', 1024)
        try:
            req = WalkRequest(max_steps=chunk_steps, **walk_cfg)
        except ValidationError as e:
            logger.error(f"Invalid walk configuration: {e}")
            return False

        self.running = True
        total_steps = passed = failed = 0
        try:
            while not self.shutdown_requested:
                result = self.engine.walk(req)
                if not result.success:
                    logger.error(f"Walk failed: {result.message}")
                    return False

                total_steps += result.steps
                passed += result.passed
                failed += result.failed
                logger.info(f"Index {result.end_index}/{result.resolution}: "
                            f"{passed} passed, {failed} failed, max drift {result.max_drift:.2e}")

                if result.finished or result.steps == 0:
                    break

            if self.shutdown_requested:
                logger.info("Shutdown requested, stopping walk...")

            logger.info(f"Walk completed: {total_steps} cells, {passed} passed, {failed} failed")

            self._save_snapshot("final")
            self._save_recordings()
            return True

        finally:
            self.running = False

    def shutdown(self):
        """Gracefully shutdown the engine."""
        result = self.engine.shutdown()
        if result['success']:
            logger.info("Engine shutdown completed")
        else:
            logger.error(f"Engine shutdown error: {result['message']}")


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Heisenberg Slice Engine')
    parser.add_argument(
        '--config', '-c',
        default='configs/default.yaml',
        help='Path to configuration file (default: configs/default.yaml)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "INFO")

    runner = EngineRunner(args.config)

    try:
        success = runner.run_walk()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    finally:
        runner.shutdown()


if __name__ == '__main__':
    main()
