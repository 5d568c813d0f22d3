"""Profile-specific ``<extra>`` techniques attached to an element.

Each profile (e.g. ``MAYA``, ``OpenCOLLADA``) holds an ordered set of named
parameters. Parameters keep the order in which they were first added; adding
a name again replaces its value in place.
"""

from __future__ import annotations

from collections.abc import Sequence
import re
from typing import TypeAlias

from ...constants import Patterns
from ..exceptions import InvalidValue
from .math_types import as_float

ExtraValue: TypeAlias = bool | int | float | str | tuple[float, ...]

_NAME_RE = re.compile(Patterns.XML_NAME)


def _normalize(name: str, value: object) -> ExtraValue:
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Sequence):
        return tuple(as_float(item, name=name) for item in value)
    if hasattr(value, "tolist"):
        return _normalize(name, value.tolist())  # numpy arrays and scalars
    raise InvalidValue(
        f"Extra parameter '{name}' has unsupported type {type(value).__name__}"
    )


class ExtraTechnique:
    __slots__ = ("_profiles",)

    def __init__(self) -> None:
        self._profiles: dict[str, dict[str, ExtraValue]] = {}

    def add_parameter(self, profile: str, name: str, value: object) -> None:
        if not isinstance(profile, str) or not profile:
            raise InvalidValue("Extra technique profile must not be empty")
        if not isinstance(name, str) or not _NAME_RE.match(name):
            raise InvalidValue(
                f"Parameter name {name!r} for profile '{profile}' is not an XML element name"
            )
        params = self._profiles.setdefault(profile, {})
        params[name] = _normalize(name, value)

    def profiles(self) -> tuple[str, ...]:
        return tuple(self._profiles)

    def parameters(self, profile: str) -> tuple[tuple[str, ExtraValue], ...]:
        return tuple(self._profiles.get(profile, {}).items())

    def is_empty(self) -> bool:
        return not any(self._profiles.values())

    def copy(self) -> ExtraTechnique:
        duplicate = ExtraTechnique()
        duplicate._profiles = {
            profile: dict(params) for profile, params in self._profiles.items()
        }
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtraTechnique):
            return NotImplemented
        return self._profiles == other._profiles

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ExtraTechnique({self._profiles!r})"
