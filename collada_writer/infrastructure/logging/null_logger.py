from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_document_start(self, source: Path | None, collada_version: str) -> None:
        return None

    @override
    def log_element_written(self, element: str, identifier: str) -> None:
        return None

    @override
    def log_document_complete(
        self, output: Path | None, element_counts: dict[str, int]
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
