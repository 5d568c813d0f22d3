"""Writer for node transformations.

``TRANSFORMATION_VALUES`` maps each kind to the function that flattens its
data into the value order the schema declares for that element.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import chain
from typing import TYPE_CHECKING, Any

from ....domain.entities.transformation import (
    Lookat,
    Matrix,
    Rotate,
    Scale,
    Skew,
    TransformationKind,
    Translate,
)
from ..xml_utils import format_values
from .constants import ATTRIBUTE_SID

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ....domain.entities.transformation import Transformation
    from ..stream_writer import StreamWriter


def _lookat_values(t: Lookat) -> Iterable[float]:
    return chain(t.eye_position, t.interest_position, t.up_position)


def _matrix_values(t: Matrix) -> Iterable[float]:
    return t.matrix.ravel(order="C")


def _rotate_values(t: Rotate) -> Iterable[float]:
    return (*t.axis, t.angle)


def _scale_values(t: Scale) -> Iterable[float]:
    return t.scale


def _skew_values(t: Skew) -> Iterable[float]:
    return (t.angle, *t.rotate_axis, *t.translate_axis)


def _translate_values(t: Translate) -> Iterable[float]:
    return t.translation


TRANSFORMATION_VALUES: dict[TransformationKind, Callable[[Any], Iterable[float]]] = {
    TransformationKind.LOOKAT: _lookat_values,
    TransformationKind.MATRIX: _matrix_values,
    TransformationKind.ROTATE: _rotate_values,
    TransformationKind.SCALE: _scale_values,
    TransformationKind.SKEW: _skew_values,
    TransformationKind.TRANSLATE: _translate_values,
}


def transformation_text(transformation: Transformation) -> str:
    values = TRANSFORMATION_VALUES[transformation.kind](transformation)
    return format_values(values, name=transformation.kind.value)


def write_transformation(stream: StreamWriter, transformation: Transformation) -> str:
    text = transformation_text(transformation)
    stream.open_element(transformation.kind.value)
    if transformation.sid.is_set():
        stream.append_attribute(ATTRIBUTE_SID, transformation.sid.get())
    stream.append_text(text)
    stream.close_element()
    return transformation.kind.value
