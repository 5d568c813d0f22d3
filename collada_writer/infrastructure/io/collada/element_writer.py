"""Conditional emission of element records.

Only slots marked set are written, in the order given by the record's
``ElementSchema``. Required groups are checked and every value is formatted
before the first element is opened, so a failing record never leaves a
partially written element on the stream.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING

from ....domain.exceptions import SchemaViolation
from ..xml_utils import format_value

if TYPE_CHECKING:
    from ....domain.entities.field_slot import SlotTable
    from ..stream_writer import StreamWriter
    from .schema import ElementSchema, FieldSpec

PreparedField = tuple["FieldSpec", str]


def check_required(table: SlotTable, schema: ElementSchema) -> None:
    """Raise ``SchemaViolation`` for an unset required group or a half-set pair."""
    missing = schema.missing_groups(table)
    if missing:
        described = ", ".join(" or ".join(group) for group in missing)
        raise SchemaViolation(f"<{schema.element}> requires {described}")
    partial = schema.partial_groups(table)
    if partial:
        described = ", ".join(" and ".join(group) for group in partial)
        raise SchemaViolation(
            f"<{schema.element}> requires {described} to be set together"
        )


def prepare_fields(table: SlotTable, schema: ElementSchema) -> list[PreparedField]:
    """Return the formatted set slots of ``table`` in schema order.

    Raises:
        SchemaViolation: a required group is entirely unset.
        InvalidValue: a set value cannot be written (e.g. NaN).
    """
    check_required(table, schema)
    prepared: list[PreparedField] = []
    for spec in schema.fields:
        if spec.field not in table:
            continue
        slot = table[spec.field]
        if not slot.is_set():
            continue
        prepared.append((spec, format_value(slot.get(), name=spec.field)))
    return prepared


def emit_fields(stream: StreamWriter, prepared: list[PreparedField]) -> list[str]:
    written: list[str] = []
    for tag_name, group in groupby(prepared, key=lambda item: item[0].tag):
        stream.open_element(tag_name)
        for spec, text in group:
            if spec.attribute:
                stream.append_attribute(spec.attribute, text)
            else:
                stream.append_text(text)
        stream.close_element()
        written.append(tag_name)
    return written


def write_fields(
    stream: StreamWriter, table: SlotTable, schema: ElementSchema
) -> list[str]:
    """Write the set slots of ``table`` as children of the current element.

    Returns the tag names written, in order.
    """
    return emit_fields(stream, prepare_fields(table, schema))


def write_record(
    stream: StreamWriter, table: SlotTable, schema: ElementSchema
) -> list[str]:
    """Write ``<schema.element>`` containing the set slots of ``table``."""
    prepared = prepare_fields(table, schema)
    stream.open_element(schema.element)
    written = emit_fields(stream, prepared)
    stream.close_element()
    return written
