"""Application layer for the COLLADA writer.

This layer contains use cases and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .models import WriteDocumentRequest, WriteDocumentResponse

# Import WriteDocumentUseCase from its module; it pulls in the writers.

__all__ = [
    "WriteDocumentRequest",
    "WriteDocumentResponse",
]
