from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    element: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "documents_written": 0,
        "elements_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_document_start(self, source: Path | None, collada_version: str) -> None:
        label = source.name if source is not None else "<memory>"
        self.set_context(source=label, operation="write")
        self.verbose(f"Writing COLLADA {collada_version} document from {label}")

    @override
    def log_element_written(self, element: str, identifier: str) -> None:
        self._stats["elements_written"] += 1
        self.set_context(element=element)
        self.debug(f"  Wrote <{element}> {identifier}")

    @override
    def log_document_complete(
        self, output: Path | None, element_counts: dict[str, int]
    ) -> None:
        self._stats["documents_written"] += 1
        target = str(output) if output is not None else "<memory>"
        summary = ", ".join(f"{count} {name}" for name, count in element_counts.items())
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            self.debug(f"  Finished in {self._context.elapsed_ms():.1f} ms")
        self.verbose(f"  Contents: {summary}" if summary else "  Contents: empty")
        self.success(f"Wrote {target}")
        self.clear_context()

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Writer Statistics:[/dim]")
            self.console.print(
                f"[dim]  Documents written: {self._stats['documents_written']}[/dim]"
            )
            self.console.print(
                f"[dim]  Elements written: {self._stats['elements_written']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [part for part in (self._context.source, self._context.element) if part]
        return escape(f"[{':'.join(parts)}] ") if parts else ""
