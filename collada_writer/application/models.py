from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import WriterConfig


def _empty_str_list() -> list[str]:
    return []


def _empty_counts() -> dict[str, int]:
    return {}


@dataclass(slots=True)
class WriteDocumentRequest:
    scene_file: Path
    output_path: Path | None = None
    config: WriterConfig | None = None
    dry_run: bool = False
    verbose: int = 0

    def resolved_output_path(self) -> Path:
        if self.output_path is not None:
            return self.output_path
        return self.scene_file.with_suffix(Defaults.OUTPUT_SUFFIX)


@dataclass(slots=True)
class WriteDocumentResponse:
    scene_file: Path
    output_path: Path | None = None
    element_counts: dict[str, int] = field(default_factory=_empty_counts)
    document_text: str | None = None
    errors: list[str] = field(default_factory=_empty_str_list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0
