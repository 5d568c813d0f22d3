"""Element-at-a-time XML writer.

Callers drive the writer with open/attribute/text/close calls in document
order; the writer keeps the stack of open elements and serializes the
finished tree with ``xml.etree.ElementTree``.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, TypeAlias
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

from .exceptions import StreamStateError
from .xml_utils import format_value, format_values

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


class StreamWriter:
    def __init__(self, *, indent: int = 2, xml_declaration: bool = True) -> None:
        if indent < 0:
            raise ValueError(f"indent must be non-negative, got {indent}")
        self.indent = indent
        self.xml_declaration = xml_declaration
        self._root: XmlElement | None = None
        self._stack: list[XmlElement] = []
        self._finished = False

    @property
    def depth(self) -> int:
        return len(self._stack)

    def start_document(
        self, name: str, attributes: Mapping[str, Any] | None = None
    ) -> int:
        if self._root is not None:
            raise StreamStateError("Document already started")
        self._root = ET.Element(name)
        self._stack.append(self._root)
        for key, value in (attributes or {}).items():
            self.append_attribute(key, value)
        return 0

    def open_element(self, name: str) -> int:
        """Open a child of the current element.

        Returns a token identifying the new element for ``close_to``.
        """
        parent = self._current(f"open <{name}>")
        token = len(self._stack)
        self._stack.append(ET.SubElement(parent, name))
        return token

    def append_attribute(self, name: str, value: Any) -> None:
        element = self._current(f"set attribute '{name}'")
        element.set(name, format_value(value, name=name))

    def append_text(self, text: str) -> None:
        element = self._current("append text")
        if len(element):
            raise StreamStateError(
                f"<{element.tag}> already has child elements; mixed content is not written"
            )
        element.text = (element.text or "") + text

    def append_values(self, values: Iterable[Any], *, name: str = "values") -> None:
        text = format_values(values, name=name)
        element = self._current("append values")
        if element.text:
            text = f" {text}"
        self.append_text(text)

    def close_element(self) -> None:
        if len(self._stack) <= 1:
            raise StreamStateError("No open element to close")
        self._stack.pop()

    def close_to(self, token: int) -> None:
        """Close elements until the one opened with ``token`` is closed."""
        if token < 1 or token >= len(self._stack):
            raise StreamStateError(f"Cannot close to depth {token}")
        del self._stack[token:]

    def end_document(self) -> None:
        if self._root is None:
            raise StreamStateError("Document was never started")
        self._stack.clear()
        self._finished = True

    def getvalue(self) -> str:
        root = self._finished_root()
        if self.indent:
            ET.indent(root, space=" " * self.indent)
        body = ET.tostring(root, encoding="unicode", short_empty_elements=True)
        prefix = XML_DECLARATION if self.xml_declaration else ""
        return f"{prefix}{body}\n"

    def write(self, output: Path | IO[bytes]) -> None:
        data = self.getvalue().encode("utf-8")
        if isinstance(output, Path):
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(data)
        else:
            output.write(data)

    def _current(self, action: str) -> XmlElement:
        if self._finished:
            raise StreamStateError(f"Cannot {action}: document already ended")
        if not self._stack:
            raise StreamStateError(f"Cannot {action}: no open element")
        return self._stack[-1]

    def _finished_root(self) -> XmlElement:
        if self._root is None or not self._finished:
            raise StreamStateError("Document is not complete; call end_document()")
        return self._root
