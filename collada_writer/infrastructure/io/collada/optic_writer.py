"""Writer for ``<optics>``.

The kind-specific part of an optic (``<perspective>`` or
``<orthographic>``) is dispatched through ``TYPE_SPECIFIC_WRITERS``; the
shared envelope (``<optics><technique_common>`` plus extras) is written
here once for every kind.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ....domain.entities.optic import OpticKind
from .constants import ELEMENT_OPTICS, ELEMENT_TECHNIQUE_COMMON
from .element_writer import prepare_fields, write_record
from .extra_writer import emit_extra, prepare_extra
from .schema import (
    OPTIC_SCHEMAS,
    ORTHOGRAPHIC_SCHEMA,
    PERSPECTIVE_SCHEMA,
    ElementSchema,
)

if TYPE_CHECKING:
    from ....domain.entities.optic import Optic
    from ..stream_writer import StreamWriter


def _type_specific_writer(
    schema: ElementSchema,
) -> Callable[[StreamWriter, Optic], list[str]]:
    def add_type_specific_infos(stream: StreamWriter, optic: Optic) -> list[str]:
        return write_record(stream, optic.fields, schema)

    return add_type_specific_infos


TYPE_SPECIFIC_WRITERS: dict[OpticKind, Callable[[StreamWriter, Optic], list[str]]] = {
    OpticKind.PERSPECTIVE: _type_specific_writer(PERSPECTIVE_SCHEMA),
    OpticKind.ORTHOGRAPHIC: _type_specific_writer(ORTHOGRAPHIC_SCHEMA),
}


def add_type_specific_infos(stream: StreamWriter, optic: Optic) -> list[str]:
    """Write the kind element of ``optic`` and return the child tags written."""
    return TYPE_SPECIFIC_WRITERS[optic.kind](stream, optic)


def write_optic(stream: StreamWriter, optic: Optic) -> list[str]:
    # Validated up front so a failing optic leaves the stream untouched.
    prepare_fields(optic.fields, OPTIC_SCHEMAS[optic.kind])
    extra = prepare_extra(optic.extra)

    token = stream.open_element(ELEMENT_OPTICS)
    stream.open_element(ELEMENT_TECHNIQUE_COMMON)
    written = add_type_specific_infos(stream, optic)
    stream.close_element()
    emit_extra(stream, extra)
    stream.close_to(token)
    return written
