"""Reader for documents produced by the writer.

Only elements that are present become set slots, so reading a document and
serializing it again reproduces the original text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any
from xml.etree import ElementTree as ET

from ....domain.entities.asset import Asset
from ....domain.entities.extra import ExtraTechnique
from ....domain.entities.math_types import as_float
from ....domain.entities.optic import Optic, OpticKind
from ....domain.entities.scene import Camera, ColladaDocument, Node, VisualScene
from ....domain.entities.transformation import (
    Lookat,
    Matrix,
    Rotate,
    Scale,
    Skew,
    Transformation,
    TransformationKind,
    Translate,
)
from ....domain.exceptions import InvalidValue, SchemaViolation
from ..xml_utils import format_value, local_name
from .constants import (
    ATTRIBUTE_ID,
    ATTRIBUTE_METER,
    ATTRIBUTE_NAME,
    ATTRIBUTE_PROFILE,
    ATTRIBUTE_SID,
    ATTRIBUTE_TYPE,
    ATTRIBUTE_URL,
    ELEMENT_ASSET,
    ELEMENT_CAMERA,
    ELEMENT_COLLADA,
    ELEMENT_CONTRIBUTOR,
    ELEMENT_EXTRA,
    ELEMENT_INSTANCE_CAMERA,
    ELEMENT_INSTANCE_VISUAL_SCENE,
    ELEMENT_LIBRARY_CAMERAS,
    ELEMENT_LIBRARY_VISUAL_SCENES,
    ELEMENT_NODE,
    ELEMENT_OPTICS,
    ELEMENT_SCENE,
    ELEMENT_TECHNIQUE,
    ELEMENT_TECHNIQUE_COMMON,
    ELEMENT_UNIT,
    ELEMENT_VISUAL_SCENE,
)
from .schema import ASSET_SCHEMA, CONTRIBUTOR_SCHEMA, OPTIC_SCHEMAS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from xml.etree.ElementTree import Element

_INT_RE = re.compile(r"^[+-]?\d+$")

_ASSET_SETTERS: dict[str, str] = {
    "author": "set_author",
    "authoring_tool": "set_authoring_tool",
    "comments": "set_comments",
    "copyright": "set_copyright",
    "source_data": "set_source_data",
    "created": "set_created",
    "keywords": "set_keywords",
    "modified": "set_modified",
    "revision": "set_revision",
    "subject": "set_subject",
    "title": "set_title",
    "up_axis": "set_up_axis",
}


def _children(element: Element, name: str) -> Iterator[Element]:
    return (child for child in element if local_name(child.tag) == name)


def _child(element: Element, name: str) -> Element | None:
    return next(_children(element, name), None)


def _floats(element: Element) -> list[float]:
    text = (element.text or "").split()
    try:
        return [float(token) for token in text]
    except ValueError as e:
        raise InvalidValue(
            f"<{local_name(element.tag)}> contains non-numeric data: {element.text!r}"
        ) from e


def _expect(values: list[float], count: int, element: str) -> list[float]:
    if len(values) != count:
        raise InvalidValue(f"<{element}> expects {count} values, got {len(values)}")
    return values


def _id_from_url(url: str) -> str:
    return url[1:] if url.startswith("#") else url


def _writes_back(value: Any, text: str) -> bool:
    try:
        return format_value(value) == text
    except InvalidValue:
        return False


def _extra_value(text: str) -> Any:
    """Parse extra parameter text back into a typed value.

    A typed value is kept only when writing it reproduces ``text``; anything
    else (``"007"``, ``"1e5"``, ``"nan"``) stays a string.
    """
    value: Any
    if text in ("true", "false"):
        value = text == "true"
    elif _INT_RE.match(text):
        value = int(text)
    else:
        try:
            numbers = tuple(float(token) for token in text.split())
        except ValueError:
            return text
        if not numbers:
            return text
        value = numbers[0] if len(numbers) == 1 else numbers
    return value if _writes_back(value, text) else text


def read_extra(element: Element, extra: ExtraTechnique) -> None:
    for technique in _children(element, ELEMENT_TECHNIQUE):
        profile = technique.get(ATTRIBUTE_PROFILE, "")
        for param in technique:
            extra.add_parameter(profile, local_name(param.tag), _extra_value(param.text or ""))


def read_optic(element: Element) -> Optic:
    """Read an ``<optics>`` element into an ``Optic``."""
    common = _child(element, ELEMENT_TECHNIQUE_COMMON)
    if common is None or len(common) == 0:
        raise SchemaViolation("<optics> has no <technique_common> content")
    kind_element = common[0]
    try:
        kind = OpticKind(local_name(kind_element.tag))
    except ValueError:
        raise SchemaViolation(
            f"Unsupported optic kind <{local_name(kind_element.tag)}>"
        ) from None

    optic = Optic(kind)
    schema = OPTIC_SCHEMAS[kind]
    for child in kind_element:
        specs = schema.spec_for_tag(local_name(child.tag))
        if not specs:
            raise SchemaViolation(f"Unexpected <{local_name(child.tag)}> in <{kind.value}>")
        (value,) = _expect(_floats(child), 1, specs[0].tag)
        optic.fields[specs[0].field].set(value)

    extra = _child(element, ELEMENT_EXTRA)
    if extra is not None:
        read_extra(extra, optic.extra)
    return optic


def _read_lookat(values: list[float]) -> Lookat:
    _expect(values, 9, "lookat")
    return Lookat(
        eye_position=values[0:3],
        interest_position=values[3:6],
        up_position=values[6:9],
    )


def _read_matrix(values: list[float]) -> Matrix:
    return Matrix(matrix=_expect(values, 16, "matrix"))


def _read_rotate(values: list[float]) -> Rotate:
    _expect(values, 4, "rotate")
    return Rotate(axis=values[0:3], angle=values[3])


def _read_scale(values: list[float]) -> Scale:
    return Scale(scale=_expect(values, 3, "scale"))


def _read_skew(values: list[float]) -> Skew:
    _expect(values, 7, "skew")
    return Skew(angle=values[0], rotate_axis=values[1:4], translate_axis=values[4:7])


def _read_translate(values: list[float]) -> Translate:
    return Translate(translation=_expect(values, 3, "translate"))


TRANSFORMATION_READERS: dict[TransformationKind, Callable[[list[float]], Transformation]] = {
    TransformationKind.LOOKAT: _read_lookat,
    TransformationKind.MATRIX: _read_matrix,
    TransformationKind.ROTATE: _read_rotate,
    TransformationKind.SCALE: _read_scale,
    TransformationKind.SKEW: _read_skew,
    TransformationKind.TRANSLATE: _read_translate,
}


def read_transformation(element: Element) -> Transformation:
    kind = TransformationKind(local_name(element.tag))
    transformation = TRANSFORMATION_READERS[kind](_floats(element))
    sid = element.get(ATTRIBUTE_SID)
    if sid is not None:
        transformation.set_sid(sid)
    return transformation


def read_asset(element: Element) -> Asset:
    asset = Asset()
    contributor = _child(element, ELEMENT_CONTRIBUTOR)
    if contributor is not None:
        for child in contributor:
            name = local_name(child.tag)
            if name in CONTRIBUTOR_SCHEMA.field_names():
                getattr(asset, _ASSET_SETTERS[name])(child.text or "")
    for child in element:
        name = local_name(child.tag)
        if name == ELEMENT_UNIT:
            _read_unit(child, asset)
        elif name in ASSET_SCHEMA.field_names():
            getattr(asset, _ASSET_SETTERS[name])(child.text or "")
    return asset


def _read_unit(element: Element, asset: Asset) -> None:
    unit_name = element.get(ATTRIBUTE_NAME)
    meter = element.get(ATTRIBUTE_METER)
    if unit_name is None or meter is None:
        raise SchemaViolation("<unit> requires both name and meter")
    asset.set_unit(unit_name, as_float(meter, name="unit_meter"))


def _set_optional_name(element: Element, record: Camera | Node | VisualScene) -> None:
    name = element.get(ATTRIBUTE_NAME)
    if name is not None:
        record.set_name(name)


def read_camera(element: Element) -> Camera:
    optics = _child(element, ELEMENT_OPTICS)
    if optics is None:
        raise SchemaViolation(f"<camera id='{element.get(ATTRIBUTE_ID)}'> has no <optics>")
    camera = Camera(id=element.get(ATTRIBUTE_ID, ""), optic=read_optic(optics))
    _set_optional_name(element, camera)
    return camera


def read_node(element: Element) -> Node:
    node = Node(id=element.get(ATTRIBUTE_ID, ""))
    _set_optional_name(element, node)
    node_type = element.get(ATTRIBUTE_TYPE)
    if node_type is not None:
        node.set_node_type(node_type)
    transformation_tags = {kind.value for kind in TransformationKind}
    for child in element:
        name = local_name(child.tag)
        if name in transformation_tags:
            node.add_transformation(read_transformation(child))
        elif name == ELEMENT_INSTANCE_CAMERA:
            node.add_instance_camera(_id_from_url(child.get(ATTRIBUTE_URL, "")))
        elif name == ELEMENT_NODE:
            node.add_child(read_node(child))
    return node


def read_visual_scene(element: Element) -> VisualScene:
    scene = VisualScene(id=element.get(ATTRIBUTE_ID, ""))
    _set_optional_name(element, scene)
    for child in _children(element, ELEMENT_NODE):
        scene.add_node(read_node(child))
    return scene


def read_document(text: str | bytes) -> ColladaDocument:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise SchemaViolation(f"Document is not well-formed XML: {e}") from e
    if local_name(root.tag) != ELEMENT_COLLADA:
        raise SchemaViolation(f"Root element must be <COLLADA>, got <{local_name(root.tag)}>")

    asset_element = _child(root, ELEMENT_ASSET)
    document = ColladaDocument(
        asset=read_asset(asset_element) if asset_element is not None else Asset()
    )
    for library in _children(root, ELEMENT_LIBRARY_CAMERAS):
        for camera in _children(library, ELEMENT_CAMERA):
            document.add_camera(read_camera(camera))
    for library in _children(root, ELEMENT_LIBRARY_VISUAL_SCENES):
        for scene in _children(library, ELEMENT_VISUAL_SCENE):
            document.add_visual_scene(read_visual_scene(scene))
    scene_element = _child(root, ELEMENT_SCENE)
    if scene_element is not None:
        instance = _child(scene_element, ELEMENT_INSTANCE_VISUAL_SCENE)
        if instance is not None:
            document.set_scene(_id_from_url(instance.get(ATTRIBUTE_URL, "")))
    return document


def read_document_file(path: Path) -> ColladaDocument:
    return read_document(path.read_bytes())
