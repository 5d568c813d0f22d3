"""Camera optics.

An ``Optic`` is a tagged variant over ``OpticKind``. The kind is fixed when
the optic is created and decides which slots exist: perspective optics carry
field-of-view values, orthographic optics carry magnifications, and both
share the aspect ratio and the clipping planes.

Accessors return the raw slot value whether or not it was set (``None`` when
it never was); only the writer decides what gets emitted.
"""

from __future__ import annotations

from enum import StrEnum

from ..exceptions import SchemaViolation
from .extra import ExtraTechnique
from .field_slot import SlotTable
from .math_types import as_float


class OpticKind(StrEnum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


SHARED_OPTIC_FIELDS = ("aspect_ratio", "z_near", "z_far")

OPTIC_FIELDS: dict[OpticKind, tuple[str, ...]] = {
    OpticKind.PERSPECTIVE: ("x_fov", "y_fov", *SHARED_OPTIC_FIELDS),
    OpticKind.ORTHOGRAPHIC: ("x_mag", "y_mag", *SHARED_OPTIC_FIELDS),
}


class Optic:
    __slots__ = ("_kind", "extra", "fields")

    def __init__(self, kind: OpticKind | str, **values: float | None) -> None:
        try:
            self._kind = OpticKind(kind)
        except ValueError:
            raise SchemaViolation(f"Unknown optic kind: {kind!r}") from None
        self.fields = SlotTable(self._kind.value, OPTIC_FIELDS[self._kind])
        self.extra = ExtraTechnique()
        for name, value in values.items():
            if value is not None:
                self._set(name, value)

    @classmethod
    def perspective(
        cls,
        *,
        x_fov: float | None = None,
        y_fov: float | None = None,
        aspect_ratio: float | None = None,
        z_near: float | None = None,
        z_far: float | None = None,
    ) -> Optic:
        return cls(
            OpticKind.PERSPECTIVE,
            x_fov=x_fov,
            y_fov=y_fov,
            aspect_ratio=aspect_ratio,
            z_near=z_near,
            z_far=z_far,
        )

    @classmethod
    def orthographic(
        cls,
        *,
        x_mag: float | None = None,
        y_mag: float | None = None,
        aspect_ratio: float | None = None,
        z_near: float | None = None,
        z_far: float | None = None,
    ) -> Optic:
        return cls(
            OpticKind.ORTHOGRAPHIC,
            x_mag=x_mag,
            y_mag=y_mag,
            aspect_ratio=aspect_ratio,
            z_near=z_near,
            z_far=z_far,
        )

    @property
    def kind(self) -> OpticKind:
        return self._kind

    def _set(self, name: str, value: float) -> None:
        if name not in self.fields:
            raise SchemaViolation(
                f"{self._kind.value} optic has no field '{name}'"
            )
        self.fields[name].set(as_float(value, name=name))

    def set_z_far(self, value: float) -> None:
        """The distance to the far clipping plane."""
        self._set("z_far", value)

    def set_z_near(self, value: float) -> None:
        """The distance to the near clipping plane."""
        self._set("z_near", value)

    def set_aspect_ratio(self, value: float) -> None:
        """Width over height of the field of view.

        When left unset, consumers derive it from the field of view and the
        current viewport.
        """
        self._set("aspect_ratio", value)

    def set_x_fov(self, value: float) -> None:
        """Horizontal field of view in degrees (perspective only)."""
        self._set("x_fov", value)

    def set_y_fov(self, value: float) -> None:
        """Vertical field of view in degrees (perspective only)."""
        self._set("y_fov", value)

    def set_x_mag(self, value: float) -> None:
        """Horizontal magnification (orthographic only).

        The orthographic viewport becomes ``[[-xmag, xmag], [-ymag, ymag]]``.
        """
        self._set("x_mag", value)

    def set_y_mag(self, value: float) -> None:
        """Vertical magnification (orthographic only)."""
        self._set("y_mag", value)

    @property
    def z_far(self) -> float | None:
        return self.fields.raw("z_far")

    @property
    def z_near(self) -> float | None:
        return self.fields.raw("z_near")

    @property
    def aspect_ratio(self) -> float | None:
        return self.fields.raw("aspect_ratio")

    @property
    def x_fov(self) -> float | None:
        return self.fields.raw("x_fov")

    @property
    def y_fov(self) -> float | None:
        return self.fields.raw("y_fov")

    @property
    def x_mag(self) -> float | None:
        return self.fields.raw("x_mag")

    @property
    def y_mag(self) -> float | None:
        return self.fields.raw("y_mag")

    def copy(self) -> Optic:
        duplicate = Optic(self._kind)
        duplicate.fields = self.fields.copy()
        duplicate.extra = self.extra.copy()
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optic):
            return NotImplemented
        return (
            self._kind == other._kind
            and self.fields == other.fields
            and self.extra == other.extra
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Optic({self._kind.value}, {self.fields!r})"
