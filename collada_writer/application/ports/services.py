from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.scene import ColladaDocument


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_document_start(self, source: Path | None, collada_version: str) -> None: ...

    def log_element_written(self, element: str, identifier: str) -> None: ...

    def log_document_complete(
        self, output: Path | None, element_counts: dict[str, int]
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class SceneLoaderPort(Protocol):
    pass

    def load(self, path: Path) -> ColladaDocument: ...
