"""Tests for transformation emission."""

import numpy as np
import pytest

from collada_writer.domain.entities import Lookat, Matrix, Rotate, Scale, Skew, Translate
from collada_writer.domain.exceptions import InvalidValue
from collada_writer.infrastructure.io.collada.transformation_writer import (
    transformation_text,
    write_transformation,
)
from collada_writer.infrastructure.io.stream_writer import StreamWriter


class TestTransformationText:
    """Values are flattened in the order the schema declares."""

    def test_lookat_is_eye_interest_up(self):
        lookat = Lookat(
            eye_position=(0.0, 2.0, 10.0),
            interest_position=(0.0, 0.0, 0.0),
            up_position=(0.0, 1.0, 0.0),
        )

        assert transformation_text(lookat) == "0.0 2.0 10.0 0.0 0.0 0.0 0.0 1.0 0.0"

    def test_matrix_is_row_major(self):
        matrix = Matrix(matrix=np.arange(16, dtype=float).reshape(4, 4))

        assert transformation_text(matrix).split()[:5] == ["0.0", "1.0", "2.0", "3.0", "4.0"]

    def test_rotate_is_axis_then_angle(self):
        assert transformation_text(Rotate(axis=(0, 0, 1), angle=90)) == "0.0 0.0 1.0 90.0"

    def test_skew_is_angle_then_axes(self):
        skew = Skew(angle=15.0, rotate_axis=(0, 1, 0), translate_axis=(1, 0, 0))

        assert transformation_text(skew) == "15.0 0.0 1.0 0.0 1.0 0.0 0.0"

    def test_scale_and_translate(self):
        assert transformation_text(Scale(scale=(2, 2, 2))) == "2.0 2.0 2.0"
        assert transformation_text(Translate(translation=(0, 1.5, -3))) == "0.0 1.5 -3.0"

    def test_nan_component_raises(self):
        translate = Translate(translation=(0.0, float("nan"), 0.0))

        with pytest.raises(InvalidValue):
            transformation_text(translate)


class TestWriteTransformation:
    def _render(self, transformation) -> str:
        stream = StreamWriter(xml_declaration=False)
        stream.start_document("node")
        write_transformation(stream, transformation)
        stream.end_document()
        return stream.getvalue()

    def test_sid_written_only_when_set(self):
        rotate = Rotate(axis=(0, 1, 0), angle=30)

        assert "<rotate>0.0 1.0 0.0 30.0</rotate>" in self._render(rotate)

        rotate.set_sid("yaw")
        assert '<rotate sid="yaw">0.0 1.0 0.0 30.0</rotate>' in self._render(rotate)

    def test_invalid_transformation_leaves_stream_untouched(self):
        stream = StreamWriter()
        stream.start_document("node")

        with pytest.raises(InvalidValue):
            write_transformation(stream, Rotate(angle=float("inf")))

        assert stream.depth == 1
