"""Infrastructure I/O layer.

The element-at-a-time ``StreamWriter`` and the COLLADA writers and reader
built on it.

Internal modules should import from the defining modules to avoid cycles.
"""

from .exceptions import (
    ColladaInfrastructureError,
    SceneParseError,
    SceneSourceError,
    SceneSourceNotFoundError,
    StreamStateError,
)
from .stream_writer import StreamWriter

__all__ = [
    "ColladaInfrastructureError",
    "SceneParseError",
    "SceneSourceError",
    "SceneSourceNotFoundError",
    "StreamStateError",
    "StreamWriter",
]
