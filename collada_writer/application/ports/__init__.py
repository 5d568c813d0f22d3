"""Port interfaces for external dependencies.

This module defines the protocols that infrastructure adapters implement,
so use cases can be wired with real or silent implementations.
"""

from .services import LoggerPort, SceneLoaderPort

__all__ = [
    "LoggerPort",
    "SceneLoaderPort",
]
