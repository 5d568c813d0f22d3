"""Tests for SceneLoader."""

from datetime import UTC, datetime

import numpy as np
import pytest

from collada_writer.domain.entities import Lookat, OpticKind, Rotate, Translate
from collada_writer.infrastructure.io.exceptions import (
    SceneParseError,
    SceneSourceNotFoundError,
)
from collada_writer.infrastructure.repositories import SceneLoader, document_from_mapping


class TestSceneLoader:
    """Tests for loading TOML scene files."""

    @pytest.fixture
    def loader(self):
        return SceneLoader()

    def test_load_scene_file(self, loader, scene_file):
        document = loader.load(scene_file)

        assert document.asset.title == "Turntable"
        assert document.asset.author == "layout"
        assert document.asset.created == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
        assert document.asset.unit_name == "centimeter"
        assert document.asset.unit_meter == 0.01
        assert document.asset.up_axis == "Z_UP"

        camera = document.cameras[0]
        assert camera.id == "main_cam"
        assert camera.name.get() == "Main"
        assert camera.optic.kind is OpticKind.PERSPECTIVE
        assert camera.optic.fields.set_names() == ("x_fov", "aspect_ratio")

        node = document.visual_scenes[0].nodes[0]
        assert node.instance_cameras == ["main_cam"]
        translate, rotate = node.transformations
        assert isinstance(translate, Translate)
        np.testing.assert_array_equal(translate.translation, [0.0, 1.5, 10.0])
        assert isinstance(rotate, Rotate)
        assert rotate.sid.get() == "yaw"
        assert document.instance_visual_scene.get() == "scene"

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(SceneSourceNotFoundError):
            loader.load(tmp_path / "missing.toml")

    def test_directory_is_not_a_scene(self, loader, tmp_path):
        with pytest.raises(SceneSourceNotFoundError):
            loader.load(tmp_path)

    def test_invalid_toml(self, loader, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[[cameras]\nid = ")

        with pytest.raises(SceneParseError, match="broken.toml"):
            loader.load(path)


class TestDocumentFromMapping:
    """Tests for building documents from parsed scene data."""

    def test_empty_mapping_gives_empty_document(self):
        document = document_from_mapping({})

        assert document.cameras == []
        assert document.visual_scenes == []
        assert not document.instance_visual_scene.is_set()
        assert document.asset.fields.set_names() == ()

    def test_orthographic_camera_with_extra(self):
        document = document_from_mapping(
            {
                "cameras": [
                    {
                        "id": "top",
                        "orthographic": {"x_mag": 2.0},
                        "extra": {"MAYA": {"film_offset": [0.0, 0.1], "locked": True}},
                    }
                ]
            }
        )

        optic = document.cameras[0].optic
        assert optic.kind is OpticKind.ORTHOGRAPHIC
        assert optic.extra.parameters("MAYA") == (
            ("film_offset", (0.0, 0.1)),
            ("locked", True),
        )

    def test_camera_needs_exactly_one_optic_kind(self):
        with pytest.raises(SceneParseError, match="exactly one"):
            document_from_mapping(
                {
                    "cameras": [
                        {
                            "id": "cam",
                            "perspective": {"x_fov": 45.0},
                            "orthographic": {"x_mag": 1.0},
                        }
                    ]
                }
            )

    def test_wrong_kind_field_is_a_parse_error(self):
        with pytest.raises(SceneParseError, match="x_mag"):
            document_from_mapping(
                {"cameras": [{"id": "cam", "perspective": {"x_mag": 1.0}}]}
            )

    def test_missing_id(self):
        with pytest.raises(SceneParseError, match="'id'"):
            document_from_mapping({"visual_scenes": [{"name": "anonymous"}]})

    def test_lookat_and_nested_children(self):
        document = document_from_mapping(
            {
                "visual_scenes": [
                    {
                        "id": "scene",
                        "nodes": [
                            {
                                "id": "rig",
                                "type": "JOINT",
                                "children": [
                                    {
                                        "id": "aim",
                                        "transformations": [
                                            {
                                                "type": "lookat",
                                                "eye": [0, 0, 10],
                                                "interest": [0, 0, 0],
                                            }
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            }
        )

        rig = document.visual_scenes[0].nodes[0]
        (lookat,) = rig.children[0].transformations
        assert isinstance(lookat, Lookat)
        np.testing.assert_array_equal(lookat.up_position, [0.0, 1.0, 0.0])

    def test_unknown_transformation_type(self):
        with pytest.raises(SceneParseError, match="shear"):
            document_from_mapping(
                {
                    "visual_scenes": [
                        {
                            "id": "scene",
                            "nodes": [{"id": "n", "transformations": [{"type": "shear"}]}],
                        }
                    ]
                }
            )

    def test_domain_errors_become_parse_errors(self):
        with pytest.raises(SceneParseError) as exc_info:
            document_from_mapping({"asset": {"up_axis": "W_UP"}})

        assert exc_info.value.__cause__ is not None

    def test_tables_must_be_tables(self):
        with pytest.raises(SceneParseError, match="array of tables"):
            document_from_mapping({"cameras": {"id": "cam"}})

    def test_name_must_be_text(self):
        with pytest.raises(SceneParseError, match="name must be a string"):
            document_from_mapping(
                {
                    "cameras": [
                        {"id": "cam", "name": {"a": 1}, "perspective": {"x_fov": 45.0}}
                    ]
                }
            )

    def test_extra_parameter_names_must_be_element_names(self):
        with pytest.raises(SceneParseError, match="bad name"):
            document_from_mapping(
                {
                    "cameras": [
                        {
                            "id": "cam",
                            "perspective": {"x_fov": 45.0},
                            "extra": {"MAYA": {"bad name": 1.0}},
                        }
                    ]
                }
            )
