from collections.abc import Iterable
from datetime import datetime
from enum import Enum
import math
import re
from typing import Any

import numpy as np

from ...constants import Patterns
from ...domain.exceptions import InvalidValue

_FORBIDDEN_CHARS_RE = re.compile(Patterns.XML_FORBIDDEN_CHARS)


def tag(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def local_name(name: str) -> str:
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def format_float(value: Any, *, name: str = "value") -> str:
    """Format a number using the shortest text that reads back identically.

    Raises:
        InvalidValue: for NaN, infinities and non-numeric input.
    """
    if isinstance(value, bool):
        raise InvalidValue(f"{name} must be numeric, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidValue(f"{name} must be numeric, got {value!r}") from e
    if not math.isfinite(number):
        raise InvalidValue(f"{name} must be finite, got {number!r}")
    return repr(number)


def format_values(values: Iterable[Any], *, name: str = "values") -> str:
    return " ".join(format_float(value, name=name) for value in values)


def format_text(value: str, *, name: str = "value") -> str:
    """Return ``value`` unchanged if XML 1.0 can carry it."""
    match = _FORBIDDEN_CHARS_RE.search(value)
    if match:
        raise InvalidValue(
            f"{name} contains a character XML cannot carry: {match.group()!r}"
        )
    return value


def format_value(value: Any, *, name: str = "value") -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return format_text(value, name=name)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value, name=name)
    if isinstance(value, np.ndarray):
        return format_values(value.ravel(), name=name)
    if isinstance(value, (tuple, list)):
        return format_values(value, name=name)
    raise InvalidValue(f"{name} has unsupported type {type(value).__name__}")


def url_ref(identifier: str) -> str:
    return f"#{identifier}"
