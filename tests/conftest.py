from datetime import UTC, datetime

import pytest

from collada_writer.domain.entities import (
    Camera,
    ColladaDocument,
    Node,
    Optic,
    Rotate,
    Translate,
    VisualScene,
)

FIXED_TIME = datetime(2024, 5, 1, 9, 30, tzinfo=UTC)

COLLADA_ENV_VARS = (
    "COLLADA_INDENT",
    "COLLADA_AUTHORING_TOOL",
    "COLLADA_UNIT_NAME",
    "COLLADA_UNIT_METER",
    "COLLADA_UP_AXIS",
)

SCENE_TOML = """\
[asset]
title = "Turntable"
author = "layout"
created = 2024-05-01T09:30:00Z
modified = 2024-05-01T09:30:00Z
unit = { name = "centimeter", meter = 0.01 }
up_axis = "Z_UP"

[[cameras]]
id = "main_cam"
name = "Main"
perspective = { x_fov = 45.0, aspect_ratio = 1.78 }

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
"""


@pytest.fixture(autouse=True)
def _clean_collada_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep COLLADA_* variables from the developer's shell out of the tests."""
    for name in COLLADA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def perspective_optic() -> Optic:
    return Optic.perspective(x_fov=45.0, aspect_ratio=1.78)


@pytest.fixture
def sample_document(perspective_optic: Optic) -> ColladaDocument:
    """A small complete document: one camera on a transformed node."""
    document = ColladaDocument()
    document.asset.set_created(FIXED_TIME)
    document.asset.set_modified(FIXED_TIME)
    document.asset.set_title("Turntable")
    document.add_camera(Camera(id="main_cam", optic=perspective_optic))

    node = Node(id="cam_node")
    node.add_transformation(Translate(translation=(0.0, 1.5, 10.0)))
    rotate = Rotate(axis=(0.0, 1.0, 0.0), angle=30.0)
    rotate.set_sid("yaw")
    node.add_transformation(rotate)
    node.add_instance_camera("main_cam")

    scene = VisualScene(id="scene")
    scene.add_node(node)
    document.add_visual_scene(scene)
    document.set_scene("scene")
    return document


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "turntable.toml"
    path.write_text(SCENE_TOML)
    return path
