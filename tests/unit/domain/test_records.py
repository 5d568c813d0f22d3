"""Tests for asset metadata, extras and the scene graph records."""

from datetime import UTC, datetime

import numpy as np
import pytest

from collada_writer.domain.entities import (
    Asset,
    Camera,
    ColladaDocument,
    ExtraTechnique,
    Node,
    NodeType,
    Optic,
    Rotate,
    Translate,
    UpAxis,
    VisualScene,
)
from collada_writer.domain.exceptions import InvalidValue, SchemaViolation


class TestAsset:
    """Tests for the Asset record."""

    def test_new_asset_has_no_set_slots(self):
        assert Asset().fields.set_names() == ()

    def test_created_accepts_iso_string(self):
        asset = Asset()
        asset.set_created("2024-05-01T09:30:00+00:00")

        assert asset.created == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)

    def test_invalid_timestamp_raises(self):
        with pytest.raises(InvalidValue, match="created"):
            Asset().set_created("yesterday")

    def test_set_unit_sets_both_slots(self):
        asset = Asset()
        asset.set_unit("centimeter", 0.01)

        assert asset.unit_name == "centimeter"
        assert asset.unit_meter == 0.01

    def test_unit_meter_must_be_positive(self):
        with pytest.raises(InvalidValue):
            Asset().set_unit("nothing", 0.0)

    def test_up_axis_accepts_string(self):
        asset = Asset()
        asset.set_up_axis("Z_UP")

        assert asset.up_axis is UpAxis.Z_UP

    def test_unknown_up_axis_raises(self):
        with pytest.raises(InvalidValue):
            Asset().set_up_axis("W_UP")

    def test_text_setter_rejects_non_strings(self):
        with pytest.raises(InvalidValue):
            Asset().set_title(42)  # type: ignore[arg-type]

    def test_has_contributor(self):
        asset = Asset()
        assert not asset.has_contributor()

        asset.set_author("layout")
        assert asset.has_contributor()

    def test_unknown_slot_raises(self):
        with pytest.raises(SchemaViolation):
            Asset().fields["camera"]

    def test_copy_is_independent(self):
        asset = Asset()
        asset.set_title("A")

        duplicate = asset.copy()
        duplicate.set_title("B")

        assert asset.title == "A"
        assert duplicate != asset


class TestExtraTechnique:
    """Tests for profile-specific extra parameters."""

    def test_parameters_keep_insertion_order(self):
        extra = ExtraTechnique()
        extra.add_parameter("MAYA", "film_width", 1.4)
        extra.add_parameter("MAYA", "film_height", 0.8)

        assert extra.parameters("MAYA") == (("film_width", 1.4), ("film_height", 0.8))

    def test_readding_a_name_replaces_in_place(self):
        extra = ExtraTechnique()
        extra.add_parameter("MAYA", "a", 1)
        extra.add_parameter("MAYA", "b", 2)
        extra.add_parameter("MAYA", "a", 3)

        assert extra.parameters("MAYA") == (("a", 3), ("b", 2))

    def test_sequences_become_float_tuples(self):
        extra = ExtraTechnique()
        extra.add_parameter("OpenCOLLADA", "offset", np.array([1, 2]))

        assert extra.parameters("OpenCOLLADA") == (("offset", (1.0, 2.0)),)

    def test_empty_profile_raises(self):
        with pytest.raises(InvalidValue):
            ExtraTechnique().add_parameter("", "a", 1)

    @pytest.mark.parametrize("name", ["bad name", "a<b", "1st", "", "ns:tag"])
    def test_parameter_name_must_be_an_element_name(self, name):
        with pytest.raises(InvalidValue, match="XML element name"):
            ExtraTechnique().add_parameter("MAYA", name, 1)

    def test_unsupported_value_raises(self):
        with pytest.raises(InvalidValue):
            ExtraTechnique().add_parameter("MAYA", "a", object())

    def test_is_empty(self):
        extra = ExtraTechnique()
        assert extra.is_empty()

        extra.add_parameter("MAYA", "a", True)
        assert not extra.is_empty()
        assert extra.profiles() == ("MAYA",)


class TestSceneGraph:
    """Tests for cameras, nodes, visual scenes and the document."""

    def test_invalid_id_raises(self):
        with pytest.raises(InvalidValue):
            Node(id="has space")

    def test_camera_name_is_optional(self):
        camera = Camera(id="cam", optic=Optic.perspective(x_fov=45.0))

        assert not camera.name.is_set()
        camera.set_name("Main camera")
        assert camera.name.get() == "Main camera"

    @pytest.mark.parametrize(
        "record",
        [
            Camera(id="cam", optic=Optic.perspective(x_fov=45.0)),
            Node(id="node"),
            VisualScene(id="scene"),
        ],
        ids=["camera", "node", "visual_scene"],
    )
    def test_name_must_be_text(self, record):
        with pytest.raises(InvalidValue, match="name must be a string"):
            record.set_name({"a": 1})

        assert not record.name.is_set()

    def test_sid_must_be_text(self):
        rotate = Rotate()

        with pytest.raises(InvalidValue, match="sid must be a string"):
            rotate.set_sid(7)

        assert not rotate.sid.is_set()

    def test_node_type(self):
        node = Node(id="hip")
        node.set_node_type("JOINT")

        assert node.node_type.get() is NodeType.JOINT
        with pytest.raises(InvalidValue):
            node.set_node_type("BONE")

    def test_transformations_keep_caller_order(self):
        node = Node(id="n")
        first = node.add_transformation(Rotate(angle=10.0))
        second = node.add_transformation(Translate())
        third = node.add_transformation(Rotate(angle=20.0))

        assert node.transformations == [first, second, third]

    def test_iter_nodes_is_depth_first(self):
        root = Node(id="root")
        child = root.add_child(Node(id="child"))
        child.add_child(Node(id="grandchild"))
        root.add_child(Node(id="sibling"))
        scene = VisualScene(id="scene")
        scene.add_node(root)

        assert [node.id for node in scene.iter_nodes()] == [
            "root",
            "child",
            "grandchild",
            "sibling",
        ]

    def test_element_counts(self, sample_document: ColladaDocument):
        assert sample_document.element_counts() == {
            "cameras": 1,
            "visual_scenes": 1,
            "nodes": 1,
            "transformations": 2,
        }

    def test_set_scene_validates_id(self):
        with pytest.raises(InvalidValue):
            ColladaDocument().set_scene("#scene")
