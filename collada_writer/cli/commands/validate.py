"""Validate command - Check a scene description without writing a file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.write_document_use_case import apply_asset_defaults
from ...domain.exceptions import ColladaError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.collada.document_writer import validate_document
from ...infrastructure.io.exceptions import SceneSourceError
from ..presenters.summary import SummaryPresenter, SummaryRequest

console = Console()


@click.command()
@click.argument("scene_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a collada_writer.toml config file (default: ./collada_writer.toml)",
)
def validate_command(scene_file: Path, config_file: Path | None) -> None:
    """Validate a TOML scene description.

    The scene is loaded and checked exactly as ``write`` would check it:
    ids are unique, every camera and visual scene reference resolves, every
    required value is set and every value can be written.

    Examples:

    \b
        collada-writer validate turntable.toml
    """
    container = DependencyContainer(console=console, config_file=config_file)
    errors: list[str] = []
    counts: dict[str, int] = {}
    try:
        document = container.create_scene_loader().load(scene_file)
        apply_asset_defaults(document.asset, container.create_config())
        validate_document(document)
        counts = document.element_counts()
    except (ColladaError, SceneSourceError) as exc:
        errors.append(str(exc))

    SummaryPresenter(console).present(
        SummaryRequest(
            scene_file=scene_file,
            element_counts=counts,
            errors=errors,
            title="Validation",
        )
    )
    if errors:
        raise click.ClickException(f"{scene_file.name} is not a valid scene")
    console.print(f"[green]✓[/green] {scene_file.name} is valid")
