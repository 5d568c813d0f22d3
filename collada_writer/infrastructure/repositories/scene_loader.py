"""Load scene descriptions from TOML into ``ColladaDocument`` records.

A scene file looks like::

    [asset]
    title = "Turntable"
    author = "layout"
    created = 2024-05-01T09:30:00Z
    unit = { name = "centimeter", meter = 0.01 }
    up_axis = "Z_UP"

    [[cameras]]
    id = "main_cam"
    perspective = { x_fov = 45.0, aspect_ratio = 1.78 }
    extra.OpenCOLLADA = { shiftx = 0.0 }

    [[visual_scenes]]
    id = "scene"

    [[visual_scenes.nodes]]
    id = "cam_node"
    cameras = ["main_cam"]
    transformations = [
        { type = "translate", translation = [0.0, 1.5, 10.0] },
        { type = "rotate", axis = [0.0, 1.0, 0.0], angle = 30.0, sid = "yaw" },
    ]

    [scene]
    visual_scene = "scene"

Only keys present in the file become set slots.
"""

from collections.abc import Callable, Mapping
from pathlib import Path
import tomllib
from typing import Any, cast

from ...domain.entities.asset import Asset
from ...domain.entities.optic import Optic, OpticKind
from ...domain.entities.scene import Camera, ColladaDocument, Node, VisualScene
from ...domain.entities.transformation import (
    Lookat,
    Matrix,
    Rotate,
    Scale,
    Skew,
    Transformation,
    TransformationKind,
    Translate,
)
from ...domain.exceptions import ColladaError
from ..io.exceptions import SceneParseError, SceneSourceNotFoundError

_ASSET_TEXT_KEYS = (
    "author",
    "authoring_tool",
    "comments",
    "copyright",
    "source_data",
    "keywords",
    "revision",
    "subject",
    "title",
)


def _table(data: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, Mapping):
        raise SceneParseError(f"{where}.{key} must be a table")
    return cast("Mapping[str, Any]", value)


def _tables(data: Mapping[str, Any], key: str, where: str) -> list[Mapping[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise SceneParseError(f"{where}.{key} must be an array of tables")
    return cast("list[Mapping[str, Any]]", value)


def _required(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise SceneParseError(f"{where} is missing required key '{key}'")
    return data[key]


def _load_asset(data: Mapping[str, Any]) -> Asset:
    asset = Asset()
    for key in _ASSET_TEXT_KEYS:
        if key in data:
            getattr(asset, f"set_{key}")(data[key])
    if "created" in data:
        asset.set_created(data["created"])
    if "modified" in data:
        asset.set_modified(data["modified"])
    if "unit" in data:
        unit = _table(data, "unit", "asset")
        asset.set_unit(_required(unit, "name", "asset.unit"), _required(unit, "meter", "asset.unit"))
    if "up_axis" in data:
        asset.set_up_axis(data["up_axis"])
    return asset


def _load_optic(data: Mapping[str, Any], where: str) -> Optic:
    kinds = [kind for kind in OpticKind if kind.value in data]
    if len(kinds) != 1:
        expected = " or ".join(kind.value for kind in OpticKind)
        raise SceneParseError(f"{where} must define exactly one of {expected}")
    kind = kinds[0]
    optic = Optic(kind, **_table(data, kind.value, where))
    for profile, params in _table(data, "extra", where).items():
        if not isinstance(params, Mapping):
            raise SceneParseError(f"{where}.extra.{profile} must be a table")
        for name, value in params.items():
            optic.extra.add_parameter(profile, name, value)
    return optic


def _load_camera(data: Mapping[str, Any], where: str) -> Camera:
    camera = Camera(id=_required(data, "id", where), optic=_load_optic(data, where))
    if "name" in data:
        camera.set_name(data["name"])
    return camera


_TRANSFORMATION_BUILDERS: dict[
    TransformationKind, Callable[[Mapping[str, Any]], Transformation]
] = {
    TransformationKind.LOOKAT: lambda d: Lookat(
        eye_position=_required(d, "eye", "lookat"),
        interest_position=_required(d, "interest", "lookat"),
        up_position=d.get("up", (0.0, 1.0, 0.0)),
    ),
    TransformationKind.MATRIX: lambda d: Matrix(matrix=_required(d, "matrix", "matrix")),
    TransformationKind.ROTATE: lambda d: Rotate(
        axis=_required(d, "axis", "rotate"), angle=_required(d, "angle", "rotate")
    ),
    TransformationKind.SCALE: lambda d: Scale(scale=_required(d, "scale", "scale")),
    TransformationKind.SKEW: lambda d: Skew(
        angle=_required(d, "angle", "skew"),
        rotate_axis=_required(d, "rotate_axis", "skew"),
        translate_axis=_required(d, "translate_axis", "skew"),
    ),
    TransformationKind.TRANSLATE: lambda d: Translate(
        translation=_required(d, "translation", "translate")
    ),
}


def _load_transformation(data: Mapping[str, Any], where: str) -> Transformation:
    raw_kind = _required(data, "type", where)
    try:
        kind = TransformationKind(raw_kind)
    except ValueError:
        raise SceneParseError(f"{where} has unknown transformation type {raw_kind!r}") from None
    transformation = _TRANSFORMATION_BUILDERS[kind](data)
    if "sid" in data:
        transformation.set_sid(data["sid"])
    return transformation


def _load_node(data: Mapping[str, Any], where: str) -> Node:
    node = Node(id=_required(data, "id", where))
    where = f"node '{node.id}'"
    if "name" in data:
        node.set_name(data["name"])
    if "type" in data:
        node.set_node_type(data["type"])
    for index, item in enumerate(_tables(data, "transformations", where)):
        node.add_transformation(_load_transformation(item, f"{where} transformation {index}"))
    cameras = data.get("cameras", [])
    if not isinstance(cameras, list):
        raise SceneParseError(f"{where}.cameras must be an array of camera ids")
    for camera_id in cameras:
        node.add_instance_camera(camera_id)
    for index, child in enumerate(_tables(data, "children", where)):
        node.add_child(_load_node(child, f"{where} child {index}"))
    return node


def _load_visual_scene(data: Mapping[str, Any], where: str) -> VisualScene:
    scene = VisualScene(id=_required(data, "id", where))
    if "name" in data:
        scene.set_name(data["name"])
    for index, node in enumerate(_tables(data, "nodes", f"visual_scene '{scene.id}'")):
        scene.add_node(_load_node(node, f"visual_scene '{scene.id}' node {index}"))
    return scene


def document_from_mapping(data: Mapping[str, Any]) -> ColladaDocument:
    """Build a document from parsed scene data.

    Raises:
        SceneParseError: the data does not describe a valid scene.
    """
    try:
        document = ColladaDocument(asset=_load_asset(_table(data, "asset", "scene file")))
        for index, camera in enumerate(_tables(data, "cameras", "scene file")):
            document.add_camera(_load_camera(camera, f"camera {index}"))
        for index, scene in enumerate(_tables(data, "visual_scenes", "scene file")):
            document.add_visual_scene(_load_visual_scene(scene, f"visual_scene {index}"))
        scene_table = _table(data, "scene", "scene file")
        if "visual_scene" in scene_table:
            document.set_scene(scene_table["visual_scene"])
    except ColladaError as e:
        raise SceneParseError(str(e)) from e
    return document


class SceneLoader:
    pass

    def load(self, path: Path) -> ColladaDocument:
        if not path.exists():
            raise SceneSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise SceneSourceNotFoundError(f"Not a file: {path}")
        try:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as e:
            raise SceneParseError(f"Failed to parse scene file {path}: {e}") from e
        return document_from_mapping(data)
