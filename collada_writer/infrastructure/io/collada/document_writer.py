"""COLLADA document writer.

The whole document is validated before the first element is written:
references and ids are checked, required slots are verified and every value
is formatted once. Writing then only has to walk the records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ....constants import Constraints, Defaults
from ....domain.exceptions import SchemaViolation
from ...logging.null_logger import NullLogger
from ..stream_writer import StreamWriter
from ..xml_utils import format_value
from .asset_writer import write_asset
from .constants import (
    ATTRIBUTE_VERSION,
    ATTRIBUTE_XMLNS,
    COLLADA_NS,
    COLLADA_VERSION,
    ELEMENT_COLLADA,
)
from .element_writer import prepare_fields
from .extra_writer import prepare_extra
from .library_writer import write_library_cameras, write_library_visual_scenes, write_scene
from .schema import ASSET_SCHEMA, CONTRIBUTOR_SCHEMA, OPTIC_SCHEMAS
from .transformation_writer import transformation_text

if TYPE_CHECKING:
    from pathlib import Path

    from ....application.ports.services import LoggerPort
    from ....config import WriterConfig
    from ....domain.entities.field_slot import FieldSlot
    from ....domain.entities.scene import ColladaDocument


def _check_attribute(slot: FieldSlot[Any]) -> None:
    if slot.is_set():
        format_value(slot.get(), name=slot.name or "attribute")


def validate_document(document: ColladaDocument) -> None:
    """Check a document without writing it.

    Raises:
        SchemaViolation: duplicate ids, dangling references or missing
            required slots.
        InvalidValue: a value that cannot be written (e.g. NaN).
    """
    seen: set[str] = set()

    def claim(identifier: str, element: str) -> None:
        if identifier in seen:
            raise SchemaViolation(f"Duplicate id '{identifier}' on <{element}>")
        seen.add(identifier)

    prepare_fields(document.asset.fields, CONTRIBUTOR_SCHEMA)
    prepare_fields(document.asset.fields, ASSET_SCHEMA)

    camera_ids: set[str] = set()
    for camera in document.cameras:
        claim(camera.id, "camera")
        _check_attribute(camera.name)
        camera_ids.add(camera.id)
        prepare_fields(camera.optic.fields, OPTIC_SCHEMAS[camera.optic.kind])
        prepare_extra(camera.optic.extra)

    scene_ids: set[str] = set()
    for scene in document.visual_scenes:
        claim(scene.id, "visual_scene")
        _check_attribute(scene.name)
        scene_ids.add(scene.id)
        for node in scene.iter_nodes():
            claim(node.id, "node")
            _check_attribute(node.name)
            _check_attribute(node.node_type)
            for transformation in node.transformations:
                transformation_text(transformation)
                _check_attribute(transformation.sid)
            for camera_id in node.instance_cameras:
                if camera_id not in camera_ids:
                    raise SchemaViolation(
                        f"Node '{node.id}' instantiates unknown camera '{camera_id}'"
                    )

    if document.instance_visual_scene.is_set():
        target = document.instance_visual_scene.get()
        if target not in scene_ids:
            raise SchemaViolation(f"Scene instantiates unknown visual scene '{target}'")


class DocumentWriter:
    def __init__(
        self,
        *,
        indent: int = Defaults.INDENT,
        xml_declaration: bool = Defaults.XML_DECLARATION,
        collada_version: str = COLLADA_VERSION,
        logger: LoggerPort | None = None,
    ) -> None:
        if collada_version not in Constraints.SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported COLLADA version: {collada_version!r}")
        self.collada_version = collada_version
        self.indent = indent
        self.xml_declaration = xml_declaration
        self.logger = logger or NullLogger()

    @classmethod
    def from_config(
        cls, config: WriterConfig, logger: LoggerPort | None = None
    ) -> DocumentWriter:
        return cls(
            indent=config.indent,
            xml_declaration=config.xml_declaration,
            collada_version=config.collada_version,
            logger=logger,
        )

    def write(self, document: ColladaDocument, stream: StreamWriter) -> None:
        validate_document(document)

        stream.start_document(
            ELEMENT_COLLADA,
            {ATTRIBUTE_XMLNS: COLLADA_NS, ATTRIBUTE_VERSION: self.collada_version},
        )
        write_asset(stream, document.asset)
        write_library_cameras(
            stream, document.cameras, on_element=self.logger.log_element_written
        )
        write_library_visual_scenes(
            stream, document.visual_scenes, on_element=self.logger.log_element_written
        )
        if document.instance_visual_scene.is_set():
            write_scene(stream, document.instance_visual_scene.get())
        stream.end_document()

    def serialize(self, document: ColladaDocument, *, source: Path | None = None) -> str:
        self.logger.log_document_start(source, self.collada_version)
        stream = self._new_stream()
        self.write(document, stream)
        text = stream.getvalue()
        self.logger.log_document_complete(None, document.element_counts())
        return text

    def write_file(
        self, document: ColladaDocument, output: Path, *, source: Path | None = None
    ) -> Path:
        self.logger.log_document_start(source, self.collada_version)
        stream = self._new_stream()
        self.write(document, stream)
        stream.write(output)
        self.logger.log_document_complete(output, document.element_counts())
        return output

    def _new_stream(self) -> StreamWriter:
        return StreamWriter(indent=self.indent, xml_declaration=self.xml_declaration)


def serialize_document(
    document: ColladaDocument, *, indent: int = Defaults.INDENT
) -> str:
    return DocumentWriter(indent=indent).serialize(document)


def write_document_file(
    document: ColladaDocument, output: Path, *, indent: int = Defaults.INDENT
) -> Path:
    return DocumentWriter(indent=indent).write_file(document, output)
