from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from ..xml_utils import format_text, format_value
from .constants import ATTRIBUTE_PROFILE, ELEMENT_EXTRA, ELEMENT_TECHNIQUE

if TYPE_CHECKING:
    from ....domain.entities.extra import ExtraTechnique
    from ..stream_writer import StreamWriter

PreparedTechnique: TypeAlias = tuple[str, list[tuple[str, str]]]


def prepare_extra(extra: ExtraTechnique) -> list[PreparedTechnique]:
    return [
        (
            format_text(profile, name="profile"),
            [(name, format_value(value, name=name)) for name, value in params],
        )
        for profile in extra.profiles()
        if (params := extra.parameters(profile))
    ]


def emit_extra(stream: StreamWriter, prepared: list[PreparedTechnique]) -> bool:
    if not prepared:
        return False
    stream.open_element(ELEMENT_EXTRA)
    for profile, params in prepared:
        stream.open_element(ELEMENT_TECHNIQUE)
        stream.append_attribute(ATTRIBUTE_PROFILE, profile)
        for name, text in params:
            stream.open_element(name)
            stream.append_text(text)
            stream.close_element()
        stream.close_element()
    stream.close_element()
    return True


def write_extra(stream: StreamWriter, extra: ExtraTechnique) -> bool:
    """Write ``<extra>`` with one ``<technique>`` per profile.

    Nothing is written when no profile has parameters. Returns whether the
    element was written.
    """
    return emit_extra(stream, prepare_extra(extra))
