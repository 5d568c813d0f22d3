from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import ELEMENT_ASSET
from .element_writer import emit_fields, prepare_fields
from .schema import ASSET_SCHEMA, CONTRIBUTOR_SCHEMA

if TYPE_CHECKING:
    from ....domain.entities.asset import Asset
    from ..stream_writer import StreamWriter


def write_asset(stream: StreamWriter, asset: Asset) -> list[str]:
    """Write ``<asset>``; ``<contributor>`` only when one of its slots is set.

    Raises:
        SchemaViolation: ``created`` or ``modified`` is unset.
    """
    contributor = prepare_fields(asset.fields, CONTRIBUTOR_SCHEMA)
    fields = prepare_fields(asset.fields, ASSET_SCHEMA)

    written: list[str] = []
    stream.open_element(ELEMENT_ASSET)
    if contributor:
        stream.open_element(CONTRIBUTOR_SCHEMA.element)
        emit_fields(stream, contributor)
        stream.close_element()
        written.append(CONTRIBUTOR_SCHEMA.element)
    written.extend(emit_fields(stream, fields))
    stream.close_element()
    return written
