"""Infrastructure layer for the COLLADA writer.

This layer contains the XML stream, the element writers, logging adapters
and scene loaders. It implements the ports defined in the application layer.
"""

__all__ = []
