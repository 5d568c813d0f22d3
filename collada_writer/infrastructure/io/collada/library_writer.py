"""Writers for ``<library_cameras>``, ``<library_visual_scenes>`` and ``<scene>``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..xml_utils import url_ref
from .constants import (
    ATTRIBUTE_ID,
    ATTRIBUTE_NAME,
    ATTRIBUTE_TYPE,
    ATTRIBUTE_URL,
    ELEMENT_CAMERA,
    ELEMENT_INSTANCE_CAMERA,
    ELEMENT_INSTANCE_VISUAL_SCENE,
    ELEMENT_LIBRARY_CAMERAS,
    ELEMENT_LIBRARY_VISUAL_SCENES,
    ELEMENT_NODE,
    ELEMENT_SCENE,
    ELEMENT_VISUAL_SCENE,
)
from .optic_writer import write_optic
from .transformation_writer import write_transformation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ....domain.entities.field_slot import FieldSlot
    from ....domain.entities.scene import Camera, Node, VisualScene
    from ..stream_writer import StreamWriter

    ElementCallback = Callable[[str, str], None]


def _append_optional(stream: StreamWriter, name: str, slot: FieldSlot[object]) -> None:
    if slot.is_set():
        stream.append_attribute(name, slot.get())


def write_camera(stream: StreamWriter, camera: Camera) -> None:
    token = stream.open_element(ELEMENT_CAMERA)
    stream.append_attribute(ATTRIBUTE_ID, camera.id)
    _append_optional(stream, ATTRIBUTE_NAME, camera.name)
    write_optic(stream, camera.optic)
    stream.close_to(token)


def write_library_cameras(
    stream: StreamWriter,
    cameras: Sequence[Camera],
    on_element: ElementCallback | None = None,
) -> bool:
    if not cameras:
        return False
    stream.open_element(ELEMENT_LIBRARY_CAMERAS)
    for camera in cameras:
        write_camera(stream, camera)
        if on_element is not None:
            on_element(ELEMENT_CAMERA, camera.id)
    stream.close_element()
    return True


def write_node(
    stream: StreamWriter, node: Node, on_element: ElementCallback | None = None
) -> None:
    token = stream.open_element(ELEMENT_NODE)
    stream.append_attribute(ATTRIBUTE_ID, node.id)
    _append_optional(stream, ATTRIBUTE_NAME, node.name)
    _append_optional(stream, ATTRIBUTE_TYPE, node.node_type)
    for transformation in node.transformations:
        write_transformation(stream, transformation)
    for camera_id in node.instance_cameras:
        stream.open_element(ELEMENT_INSTANCE_CAMERA)
        stream.append_attribute(ATTRIBUTE_URL, url_ref(camera_id))
        stream.close_element()
    for child in node.children:
        write_node(stream, child, on_element)
    stream.close_to(token)
    if on_element is not None:
        on_element(ELEMENT_NODE, node.id)


def write_visual_scene(
    stream: StreamWriter,
    scene: VisualScene,
    on_element: ElementCallback | None = None,
) -> None:
    token = stream.open_element(ELEMENT_VISUAL_SCENE)
    stream.append_attribute(ATTRIBUTE_ID, scene.id)
    _append_optional(stream, ATTRIBUTE_NAME, scene.name)
    for node in scene.nodes:
        write_node(stream, node, on_element)
    stream.close_to(token)
    if on_element is not None:
        on_element(ELEMENT_VISUAL_SCENE, scene.id)


def write_library_visual_scenes(
    stream: StreamWriter,
    scenes: Sequence[VisualScene],
    on_element: ElementCallback | None = None,
) -> bool:
    if not scenes:
        return False
    stream.open_element(ELEMENT_LIBRARY_VISUAL_SCENES)
    for scene in scenes:
        write_visual_scene(stream, scene, on_element)
    stream.close_element()
    return True


def write_scene(stream: StreamWriter, visual_scene_id: str) -> None:
    stream.open_element(ELEMENT_SCENE)
    stream.open_element(ELEMENT_INSTANCE_VISUAL_SCENE)
    stream.append_attribute(ATTRIBUTE_URL, url_ref(visual_scene_id))
    stream.close_element()
    stream.close_element()
