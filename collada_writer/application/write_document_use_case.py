from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
import traceback
from typing import TYPE_CHECKING

from ..config import WriterConfig
from ..domain.exceptions import ColladaError
from ..infrastructure.io.collada.document_writer import DocumentWriter
from ..infrastructure.io.exceptions import ColladaInfrastructureError
from .models import WriteDocumentResponse

if TYPE_CHECKING:
    from ..domain.entities.asset import Asset
    from .models import WriteDocumentRequest
    from .ports.services import LoggerPort, SceneLoaderPort

VERBOSE_TRACEBACK_LEVEL = 2


def apply_asset_defaults(
    asset: Asset, config: WriterConfig, *, now: datetime | None = None
) -> list[str]:
    """Fill unset asset slots from ``config`` and the current time.

    Slots the scene already sets are never overwritten. Returns the names of
    the slots that were filled.
    """
    timestamp = now or datetime.now(UTC)
    filled: list[str] = []
    if not asset.fields["created"].is_set():
        asset.set_created(timestamp)
        filled.append("created")
    if not asset.fields["modified"].is_set():
        asset.set_modified(timestamp)
        filled.append("modified")
    if config.authoring_tool and not asset.fields["authoring_tool"].is_set():
        asset.set_authoring_tool(config.authoring_tool)
        filled.append("authoring_tool")
    if not asset.fields["unit_name"].is_set():
        asset.set_unit(config.unit_name, config.unit_meter)
        filled.append("unit")
    if not asset.fields["up_axis"].is_set():
        asset.set_up_axis(config.up_axis)
        filled.append("up_axis")
    return filled


@dataclass(slots=True)
class WriteDocumentDependencies:
    logger: LoggerPort
    scene_loader: SceneLoaderPort


class WriteDocumentUseCase:
    pass

    def __init__(self, dependencies: WriteDocumentDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._scene_loader = dependencies.scene_loader

    def execute(self, request: WriteDocumentRequest) -> WriteDocumentResponse:
        response = WriteDocumentResponse(scene_file=request.scene_file)
        config = request.config or WriterConfig()
        try:
            document = self._scene_loader.load(request.scene_file)
            filled = apply_asset_defaults(document.asset, config)
            if filled:
                self.logger.verbose(f"Asset defaults applied: {', '.join(filled)}")
            writer = DocumentWriter.from_config(config, logger=self.logger)
            if request.dry_run:
                response.document_text = writer.serialize(
                    document, source=request.scene_file
                )
            else:
                response.output_path = writer.write_file(
                    document,
                    request.resolved_output_path(),
                    source=request.scene_file,
                )
            response.element_counts = document.element_counts()
        except (ColladaError, ColladaInfrastructureError, OSError) as exc:
            response.errors.append(str(exc))
            self.logger.error(f"{request.scene_file.name}: {exc}")
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
        return response
