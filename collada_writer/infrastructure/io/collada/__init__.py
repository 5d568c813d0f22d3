"""COLLADA 1.4.1 element writers and reader."""

from .document_writer import (
    DocumentWriter,
    serialize_document,
    validate_document,
    write_document_file,
)
from .element_writer import prepare_fields, write_fields, write_record
from .extra_writer import write_extra
from .optic_writer import TYPE_SPECIFIC_WRITERS, add_type_specific_infos, write_optic
from .reader import read_document, read_document_file, read_optic, read_transformation
from .schema import (
    ASSET_SCHEMA,
    CONTRIBUTOR_SCHEMA,
    OPTIC_SCHEMAS,
    ORTHOGRAPHIC_SCHEMA,
    PERSPECTIVE_SCHEMA,
    ElementSchema,
    FieldSpec,
)
from .transformation_writer import transformation_text, write_transformation

__all__ = [
    # Document
    "DocumentWriter",
    "serialize_document",
    "validate_document",
    "write_document_file",
    # Records
    "TYPE_SPECIFIC_WRITERS",
    "add_type_specific_infos",
    "prepare_fields",
    "transformation_text",
    "write_extra",
    "write_fields",
    "write_optic",
    "write_record",
    "write_transformation",
    # Reader
    "read_document",
    "read_document_file",
    "read_optic",
    "read_transformation",
    # Schema
    "ASSET_SCHEMA",
    "CONTRIBUTOR_SCHEMA",
    "OPTIC_SCHEMAS",
    "ORTHOGRAPHIC_SCHEMA",
    "PERSPECTIVE_SCHEMA",
    "ElementSchema",
    "FieldSpec",
]
