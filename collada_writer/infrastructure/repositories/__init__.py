"""Repository implementations for scene sources.

Scene descriptions are read from TOML files into domain records.
"""

from .scene_loader import SceneLoader, document_from_mapping

__all__ = [
    "SceneLoader",
    "document_from_mapping",
]
