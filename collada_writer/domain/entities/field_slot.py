"""Optional, typed attribute with explicit presence tracking.

A slot distinguishes "never set" from "set to a legitimately zero value".
Writers consult ``is_set()`` before reading a slot for output; record
accessors read ``value`` directly and may see ``None`` for unset slots.
"""

from __future__ import annotations

import copy
from dataclasses import field
from functools import partial
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np

from ..exceptions import SchemaViolation, UnsetFieldAccess

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")


class FieldSlot(Generic[T]):
    __slots__ = ("_is_set", "_value", "name")

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._value: T | None = None
        self._is_set = False

    def set(self, value: T) -> None:
        self._value = value
        self._is_set = True

    def get(self) -> T:
        if not self._is_set:
            raise UnsetFieldAccess(self.name)
        return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        return self._is_set

    def clear(self) -> None:
        self._value = None
        self._is_set = False

    @property
    def value(self) -> T | None:
        return self._value

    def copy(self) -> FieldSlot[T]:
        duplicate: FieldSlot[T] = FieldSlot(self.name)
        if self._is_set:
            value = self._value
            if isinstance(value, np.ndarray):
                value = value.copy()
            else:
                value = copy.deepcopy(value)
            duplicate.set(value)  # type: ignore[arg-type]
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSlot):
            return NotImplemented
        if self._is_set != other._is_set:
            return False
        if not self._is_set:
            return True
        if isinstance(self._value, np.ndarray) or isinstance(other._value, np.ndarray):
            return bool(np.array_equal(self._value, other._value))
        return bool(self._value == other._value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._is_set:
            return f"FieldSlot({self.name!r}, unset)"
        return f"FieldSlot({self.name!r}, {self._value!r})"


def slot_field(name: str) -> Any:
    return field(default_factory=partial(FieldSlot, name))


class SlotTable:
    """Closed set of named slots belonging to one element kind.

    The table is the accessor interface writers use to reach a record's
    slots; asking for a name outside the element's set raises
    ``SchemaViolation``.
    """

    __slots__ = ("_element", "_slots")

    def __init__(self, element: str, names: Iterable[str]) -> None:
        self._element = element
        self._slots: dict[str, FieldSlot[Any]] = {
            name: FieldSlot(name) for name in names
        }

    @property
    def element(self) -> str:
        return self._element

    def __getitem__(self, name: str) -> FieldSlot[Any]:
        try:
            return self._slots[name]
        except KeyError:
            raise SchemaViolation(
                f"<{self._element}> has no field '{name}'"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def names(self) -> tuple[str, ...]:
        return tuple(self._slots)

    def set_names(self) -> tuple[str, ...]:
        return tuple(name for name, item in self._slots.items() if item.is_set())

    def raw(self, name: str) -> Any:
        item = self._slots.get(name)
        return item.value if item is not None else None

    def copy(self) -> SlotTable:
        duplicate = SlotTable(self._element, ())
        duplicate._slots = {name: item.copy() for name, item in self._slots.items()}
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlotTable):
            return NotImplemented
        return self._element == other._element and self._slots == other._slots

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={self._slots[name].value!r}" for name in self.set_names()
        )
        return f"SlotTable({self._element!r}, {values})"
