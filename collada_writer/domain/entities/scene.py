"""Scene-graph records: cameras, nodes, visual scenes and the document.

Children, transformations and camera instances are kept in the order the
caller added them; nothing here reorders or deduplicates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import re
from typing import TYPE_CHECKING

from ...constants import Patterns
from ..exceptions import InvalidValue
from .asset import Asset
from .field_slot import FieldSlot, slot_field
from .math_types import as_text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .optic import Optic
    from .transformation import Transformation

_ID_RE = re.compile(Patterns.ELEMENT_ID)


def validate_id(value: str, *, element: str) -> str:
    if not isinstance(value, str) or not _ID_RE.match(value):
        raise InvalidValue(f"Invalid id for <{element}>: {value!r}")
    return value


class NodeType(StrEnum):
    NODE = "NODE"
    JOINT = "JOINT"


@dataclass
class Camera:
    id: str
    optic: Optic
    name: FieldSlot[str] = slot_field("name")

    def __post_init__(self) -> None:
        validate_id(self.id, element="camera")

    def set_name(self, name: str) -> None:
        self.name.set(as_text(name, name="name"))


@dataclass
class Node:
    id: str
    name: FieldSlot[str] = slot_field("name")
    node_type: FieldSlot[NodeType] = slot_field("type")
    transformations: list[Transformation] = field(default_factory=list)
    instance_cameras: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_id(self.id, element="node")

    def set_name(self, name: str) -> None:
        self.name.set(as_text(name, name="name"))

    def set_node_type(self, node_type: NodeType | str) -> None:
        try:
            self.node_type.set(NodeType(node_type))
        except ValueError:
            raise InvalidValue(f"Unknown node type: {node_type!r}") from None

    def add_transformation(self, transformation: Transformation) -> Transformation:
        self.transformations.append(transformation)
        return transformation

    def add_instance_camera(self, camera_id: str) -> None:
        self.instance_cameras.append(validate_id(camera_id, element="instance_camera"))

    def add_child(self, node: Node) -> Node:
        self.children.append(node)
        return node

    def iter_nodes(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            yield from child.iter_nodes()


@dataclass
class VisualScene:
    id: str
    name: FieldSlot[str] = slot_field("name")
    nodes: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_id(self.id, element="visual_scene")

    def set_name(self, name: str) -> None:
        self.name.set(as_text(name, name="name"))

    def add_node(self, node: Node) -> Node:
        self.nodes.append(node)
        return node

    def iter_nodes(self) -> Iterator[Node]:
        for node in self.nodes:
            yield from node.iter_nodes()


@dataclass
class ColladaDocument:
    asset: Asset = field(default_factory=Asset)
    cameras: list[Camera] = field(default_factory=list)
    visual_scenes: list[VisualScene] = field(default_factory=list)
    instance_visual_scene: FieldSlot[str] = slot_field("instance_visual_scene")

    def add_camera(self, camera: Camera) -> Camera:
        self.cameras.append(camera)
        return camera

    def add_visual_scene(self, scene: VisualScene) -> VisualScene:
        self.visual_scenes.append(scene)
        return scene

    def set_scene(self, visual_scene_id: str) -> None:
        self.instance_visual_scene.set(
            validate_id(visual_scene_id, element="instance_visual_scene")
        )

    def iter_nodes(self) -> Iterator[Node]:
        for scene in self.visual_scenes:
            yield from scene.iter_nodes()

    def element_counts(self) -> dict[str, int]:
        nodes = list(self.iter_nodes())
        return {
            "cameras": len(self.cameras),
            "visual_scenes": len(self.visual_scenes),
            "nodes": len(nodes),
            "transformations": sum(len(node.transformations) for node in nodes),
        }
