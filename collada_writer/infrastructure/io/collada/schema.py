"""Schema tables for conditional emission.

Each ``ElementSchema`` lists a record's slots in the order the COLLADA 1.4.1
schema declares their elements, together with the groups of which at least
one slot must be set, and the groups whose slots are set all together or not
at all. Consecutive fields sharing a tag and carrying an
``attribute`` are written as attributes of a single element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ....domain.entities.optic import OpticKind

if TYPE_CHECKING:
    from ....domain.entities.field_slot import SlotTable


@dataclass(frozen=True, slots=True)
class FieldSpec:
    field: str
    tag: str
    attribute: str | None = None


@dataclass(frozen=True, slots=True)
class ElementSchema:
    element: str
    fields: tuple[FieldSpec, ...]
    required: tuple[tuple[str, ...], ...] = ()
    together: tuple[tuple[str, ...], ...] = ()

    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.field for spec in self.fields)

    def missing_groups(self, table: SlotTable) -> list[tuple[str, ...]]:
        return [
            group
            for group in self.required
            if not any(name in table and table[name].is_set() for name in group)
        ]

    def partial_groups(self, table: SlotTable) -> list[tuple[str, ...]]:
        partial = []
        for group in self.together:
            states = {name in table and table[name].is_set() for name in group}
            if len(states) > 1:
                partial.append(group)
        return partial

    def spec_for_tag(self, tag: str) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.tag == tag)


PERSPECTIVE_SCHEMA = ElementSchema(
    element="perspective",
    fields=(
        FieldSpec("x_fov", "xfov"),
        FieldSpec("y_fov", "yfov"),
        FieldSpec("aspect_ratio", "aspect_ratio"),
        FieldSpec("z_near", "znear"),
        FieldSpec("z_far", "zfar"),
    ),
    required=(("x_fov", "y_fov"),),
)

ORTHOGRAPHIC_SCHEMA = ElementSchema(
    element="orthographic",
    fields=(
        FieldSpec("x_mag", "xmag"),
        FieldSpec("y_mag", "ymag"),
        FieldSpec("aspect_ratio", "aspect_ratio"),
        FieldSpec("z_near", "znear"),
        FieldSpec("z_far", "zfar"),
    ),
    required=(("x_mag", "y_mag"),),
)

OPTIC_SCHEMAS: dict[OpticKind, ElementSchema] = {
    OpticKind.PERSPECTIVE: PERSPECTIVE_SCHEMA,
    OpticKind.ORTHOGRAPHIC: ORTHOGRAPHIC_SCHEMA,
}

CONTRIBUTOR_SCHEMA = ElementSchema(
    element="contributor",
    fields=(
        FieldSpec("author", "author"),
        FieldSpec("authoring_tool", "authoring_tool"),
        FieldSpec("comments", "comments"),
        FieldSpec("copyright", "copyright"),
        FieldSpec("source_data", "source_data"),
    ),
)

ASSET_SCHEMA = ElementSchema(
    element="asset",
    fields=(
        FieldSpec("created", "created"),
        FieldSpec("keywords", "keywords"),
        FieldSpec("modified", "modified"),
        FieldSpec("revision", "revision"),
        FieldSpec("subject", "subject"),
        FieldSpec("title", "title"),
        FieldSpec("unit_meter", "unit", attribute="meter"),
        FieldSpec("unit_name", "unit", attribute="name"),
        FieldSpec("up_axis", "up_axis"),
    ),
    required=(("created",), ("modified",)),
    together=(("unit_meter", "unit_name"),),
)
