from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from ..exceptions import InvalidValue
from .field_slot import SlotTable
from .math_types import as_float, as_text

CONTRIBUTOR_FIELDS = ("author", "authoring_tool", "comments", "copyright", "source_data")
ASSET_FIELDS = (
    *CONTRIBUTOR_FIELDS,
    "created",
    "keywords",
    "modified",
    "revision",
    "subject",
    "title",
    "unit_name",
    "unit_meter",
    "up_axis",
)


class UpAxis(StrEnum):
    X_UP = "X_UP"
    Y_UP = "Y_UP"
    Z_UP = "Z_UP"


def _as_timestamp(value: datetime | str, name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError as e:
        raise InvalidValue(f"{name} must be an ISO 8601 timestamp, got {value!r}") from e


class Asset:
    """Document metadata written as ``<asset>``.

    ``created`` and ``modified`` are required by the schema; every other
    slot is optional.
    """

    __slots__ = ("fields",)

    def __init__(self) -> None:
        self.fields = SlotTable("asset", ASSET_FIELDS)

    def _set_text(self, name: str, value: str) -> None:
        self.fields[name].set(as_text(value, name=name))

    def set_author(self, value: str) -> None:
        self._set_text("author", value)

    def set_authoring_tool(self, value: str) -> None:
        self._set_text("authoring_tool", value)

    def set_comments(self, value: str) -> None:
        self._set_text("comments", value)

    def set_copyright(self, value: str) -> None:
        self._set_text("copyright", value)

    def set_source_data(self, value: str) -> None:
        self._set_text("source_data", value)

    def set_keywords(self, value: str) -> None:
        self._set_text("keywords", value)

    def set_revision(self, value: str) -> None:
        self._set_text("revision", value)

    def set_subject(self, value: str) -> None:
        self._set_text("subject", value)

    def set_title(self, value: str) -> None:
        self._set_text("title", value)

    def set_created(self, value: datetime | str) -> None:
        self.fields["created"].set(_as_timestamp(value, "created"))

    def set_modified(self, value: datetime | str) -> None:
        self.fields["modified"].set(_as_timestamp(value, "modified"))

    def set_unit(self, name: str, meter: float) -> None:
        meter = as_float(meter, name="unit_meter")
        if meter <= 0:
            raise InvalidValue(f"unit_meter must be positive, got {meter}")
        self.fields["unit_name"].set(as_text(name, name="unit_name"))
        self.fields["unit_meter"].set(meter)

    def set_up_axis(self, value: UpAxis | str) -> None:
        try:
            self.fields["up_axis"].set(UpAxis(value))
        except ValueError:
            raise InvalidValue(f"Unknown up axis: {value!r}") from None

    @property
    def author(self) -> str | None:
        return self.fields.raw("author")

    @property
    def authoring_tool(self) -> str | None:
        return self.fields.raw("authoring_tool")

    @property
    def title(self) -> str | None:
        return self.fields.raw("title")

    @property
    def created(self) -> datetime | None:
        return self.fields.raw("created")

    @property
    def modified(self) -> datetime | None:
        return self.fields.raw("modified")

    @property
    def unit_name(self) -> str | None:
        return self.fields.raw("unit_name")

    @property
    def unit_meter(self) -> float | None:
        return self.fields.raw("unit_meter")

    @property
    def up_axis(self) -> UpAxis | None:
        return self.fields.raw("up_axis")

    def has_contributor(self) -> bool:
        return any(self.fields[name].is_set() for name in CONTRIBUTOR_FIELDS)

    def copy(self) -> Asset:
        duplicate = Asset()
        duplicate.fields = self.fields.copy()
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.fields == other.fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Asset({self.fields!r})"
