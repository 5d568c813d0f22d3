"""COLLADA Writer package.

This package writes COLLADA 1.4.1 documents from in-memory element records.
Every optional attribute of a record is a slot that tracks whether it was
set; only set slots are written.

Features:
- Camera optics (perspective and orthographic) with profile extras
- Node transformations (lookat, matrix, rotate, scale, skew, translate)
- Asset metadata, camera and visual scene libraries
- TOML scene descriptions and a ``collada-writer`` command line
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("collada-writer")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from collada_writer.domain.entities import (
    Asset,
    Camera,
    ColladaDocument,
    ExtraTechnique,
    FieldSlot,
    Lookat,
    Matrix,
    Node,
    Optic,
    OpticKind,
    Rotate,
    Scale,
    Skew,
    Transformation,
    TransformationKind,
    Translate,
    VisualScene,
)
from collada_writer.domain.exceptions import (
    ColladaError,
    InvalidValue,
    SchemaViolation,
    UnsetFieldAccess,
)
from collada_writer.infrastructure.io.collada.document_writer import (
    DocumentWriter,
    serialize_document,
    write_document_file,
)
from collada_writer.infrastructure.io.collada.reader import read_document
from collada_writer.infrastructure.io.stream_writer import StreamWriter

__all__ = [
    "__version__",
    # Records
    "Asset",
    "Camera",
    "ColladaDocument",
    "ExtraTechnique",
    "FieldSlot",
    "Node",
    "Optic",
    "OpticKind",
    "VisualScene",
    # Transformations
    "Lookat",
    "Matrix",
    "Rotate",
    "Scale",
    "Skew",
    "Transformation",
    "TransformationKind",
    "Translate",
    # Errors
    "ColladaError",
    "InvalidValue",
    "SchemaViolation",
    "UnsetFieldAccess",
    # Writing
    "DocumentWriter",
    "StreamWriter",
    "serialize_document",
    "write_document_file",
    "read_document",
]
