"""
Engine application package.

Contains the high-level service wrapper and CLI entrypoint for the
Heisenberg slice engine.
"""

from .engine_service import SliceEngineService

__all__ = ['SliceEngineService']
