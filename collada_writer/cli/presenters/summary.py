from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from rich.console import Console


@dataclass(frozen=True, slots=True)
class SummaryRequest:
    scene_file: Path
    element_counts: Mapping[str, int]
    errors: list[str]
    output_path: Path | None = None
    title: str = "Document Summary"


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: SummaryRequest) -> None:
        self.console.print()
        if request.element_counts:
            self.console.print(self._build_counts_table(request))
        if request.errors:
            for error in request.errors:
                self.console.print(f"[red]✗[/red] {escape(error)}")
            return
        if request.output_path is not None:
            self.console.print(
                f"[green]✓[/green] Output: [bold]{escape(str(request.output_path))}[/bold]"
            )

    @staticmethod
    def _build_counts_table(request: SummaryRequest) -> Table:
        table = Table(
            title=f"{request.title}: {request.scene_file.name}",
            show_header=True,
            header_style="bold cyan",
            title_style="bold magenta",
        )
        table.add_column("Element", style="cyan", no_wrap=True, min_width=24)
        table.add_column("Count", justify="right", style="yellow", no_wrap=True)
        for name, count in request.element_counts.items():
            table.add_row(name.replace("_", " "), str(count))
        return table
