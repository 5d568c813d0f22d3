"""Node transformations.

The six COLLADA transformation kinds form a closed variant. Each kind is its
own dataclass whose ``kind`` is a class-level constant, so an instance can
never claim or switch to another kind. Vector data is held in owned
``float64`` arrays: setters and ``clone()`` copy, they never alias.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

import numpy as np

from .field_slot import FieldSlot, slot_field
from .math_types import (
    as_float,
    as_matrix4,
    as_text,
    as_vector3,
    identity_matrix,
    unit_y,
    zero_vector,
)

if TYPE_CHECKING:
    from typing import Self

    from .math_types import Matrix4, Vector3


class TransformationKind(StrEnum):
    LOOKAT = "lookat"
    MATRIX = "matrix"
    ROTATE = "rotate"
    SCALE = "scale"
    SKEW = "skew"
    TRANSLATE = "translate"


def _copy_value(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, FieldSlot):
        return value.copy()
    return value


class _TransformationOps:
    """Shared behaviour of every transformation kind."""

    kind: ClassVar[TransformationKind]
    sid: FieldSlot[str]

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind":
            raise AttributeError("Transformation kind is fixed at construction")
        super().__setattr__(name, value)

    def set_sid(self, sid: str) -> None:
        self.sid.set(as_text(sid, name="sid"))

    def clone(self) -> Self:
        copies = {f.name: _copy_value(getattr(self, f.name)) for f in fields(self)}  # type: ignore[arg-type]
        return replace(self, **copies)  # type: ignore[type-var]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        for f in fields(self):  # type: ignore[arg-type]
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if isinstance(mine, np.ndarray):
                if not np.array_equal(mine, theirs):
                    return False
            elif mine != theirs:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class Lookat(_TransformationOps):
    """A ``<lookat>``: eye position, interest point and up direction.

    The eye position defines the translation, the interest point the pitch
    and yaw, and the up direction the roll of the transform.
    """

    kind: ClassVar[TransformationKind] = TransformationKind.LOOKAT

    eye_position: Vector3 = field(default_factory=zero_vector)
    interest_position: Vector3 = field(default_factory=zero_vector)
    up_position: Vector3 = field(default_factory=unit_y)
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.eye_position = as_vector3(self.eye_position, name="eye_position")
        self.interest_position = as_vector3(
            self.interest_position, name="interest_position"
        )
        self.up_position = as_vector3(self.up_position, name="up_position")

    def set_eye_position(self, value: Any) -> None:
        self.eye_position = as_vector3(value, name="eye_position")

    def set_interest_position(self, value: Any) -> None:
        self.interest_position = as_vector3(value, name="interest_position")

    def set_up_position(self, value: Any) -> None:
        self.up_position = as_vector3(value, name="up_position")


@dataclass(eq=False)
class Matrix(_TransformationOps):
    """A ``<matrix>``: a 4x4 column-vector matrix, stored row-major."""

    kind: ClassVar[TransformationKind] = TransformationKind.MATRIX

    matrix: Matrix4 = field(default_factory=identity_matrix)
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.matrix = as_matrix4(self.matrix, name="matrix")

    def set_matrix(self, value: Any) -> None:
        self.matrix = as_matrix4(value, name="matrix")


@dataclass(eq=False)
class Rotate(_TransformationOps):
    """A ``<rotate>``: rotation of ``angle`` degrees about ``axis``."""

    kind: ClassVar[TransformationKind] = TransformationKind.ROTATE

    axis: Vector3 = field(default_factory=unit_y)
    angle: float = 0.0
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.axis = as_vector3(self.axis, name="axis")
        self.angle = as_float(self.angle, name="angle")

    def set_axis(self, value: Any) -> None:
        self.axis = as_vector3(value, name="axis")

    def set_angle(self, value: float) -> None:
        self.angle = as_float(value, name="angle")


@dataclass(eq=False)
class Scale(_TransformationOps):
    kind: ClassVar[TransformationKind] = TransformationKind.SCALE

    scale: Vector3 = field(default_factory=lambda: np.ones(3, dtype=np.float64))
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.scale = as_vector3(self.scale, name="scale")

    def set_scale(self, value: Any) -> None:
        self.scale = as_vector3(value, name="scale")


@dataclass(eq=False)
class Skew(_TransformationOps):
    """A ``<skew>``: ``angle`` degrees along ``rotate_axis`` / ``translate_axis``."""

    kind: ClassVar[TransformationKind] = TransformationKind.SKEW

    angle: float = 0.0
    rotate_axis: Vector3 = field(default_factory=unit_y)
    translate_axis: Vector3 = field(
        default_factory=lambda: np.array((1.0, 0.0, 0.0), dtype=np.float64)
    )
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.angle = as_float(self.angle, name="angle")
        self.rotate_axis = as_vector3(self.rotate_axis, name="rotate_axis")
        self.translate_axis = as_vector3(self.translate_axis, name="translate_axis")

    def set_angle(self, value: float) -> None:
        self.angle = as_float(value, name="angle")

    def set_rotate_axis(self, value: Any) -> None:
        self.rotate_axis = as_vector3(value, name="rotate_axis")

    def set_translate_axis(self, value: Any) -> None:
        self.translate_axis = as_vector3(value, name="translate_axis")


@dataclass(eq=False)
class Translate(_TransformationOps):
    kind: ClassVar[TransformationKind] = TransformationKind.TRANSLATE

    translation: Vector3 = field(default_factory=zero_vector)
    sid: FieldSlot[str] = slot_field("sid")

    def __post_init__(self) -> None:
        self.translation = as_vector3(self.translation, name="translation")

    def set_translation(self, value: Any) -> None:
        self.translation = as_vector3(value, name="translation")


Transformation: TypeAlias = Lookat | Matrix | Rotate | Scale | Skew | Translate

TRANSFORMATION_TYPES: dict[TransformationKind, type[Transformation]] = {
    TransformationKind.LOOKAT: Lookat,
    TransformationKind.MATRIX: Matrix,
    TransformationKind.ROTATE: Rotate,
    TransformationKind.SCALE: Scale,
    TransformationKind.SKEW: Skew,
    TransformationKind.TRANSLATE: Translate,
}
