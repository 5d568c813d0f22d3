"""Write command - Convert a TOML scene description into a COLLADA document.

This module is a thin adapter between the Click CLI framework and the
application layer's WriteDocumentUseCase: it parses arguments, builds the
WriteDocumentRequest, calls the use case and formats the response.
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import WriteDocumentRequest
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter, SummaryRequest

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.argument("scene_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .dae file (default: SCENE_FILE with a .dae suffix)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a collada_writer.toml config file (default: ./collada_writer.toml)",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the document instead of writing a file",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def write_command(
    scene_file: Path,
    output_path: Path | None,
    config_file: Path | None,
    to_stdout: bool,
    verbose: int,
) -> None:
    """Write a COLLADA 1.4.1 document from a TOML scene description.

    Only the values present in the scene file are written; unset asset
    metadata is filled from the config (authoring tool, unit, up axis) and
    the current time.

    Examples:

    \b
        # Write turntable.dae next to the scene file
        collada-writer write turntable.toml

    \b
        # Choose the output file and show what was written
        collada-writer write turntable.toml -o out/shot010.dae -v
    """
    # Keep stdout for the document itself when it is being piped
    container = DependencyContainer(
        verbose=verbose,
        console=err_console if to_stdout else console,
        config_file=config_file,
    )
    request = WriteDocumentRequest(
        scene_file=scene_file,
        output_path=output_path,
        config=container.create_config(),
        dry_run=to_stdout,
        verbose=verbose,
    )
    response = container.create_write_document_use_case().execute(request)

    if to_stdout and response.document_text is not None:
        click.echo(response.document_text, nl=False)
    else:
        SummaryPresenter(container.console).present(
            SummaryRequest(
                scene_file=scene_file,
                element_counts=response.element_counts,
                errors=response.errors,
                output_path=response.output_path,
            )
        )
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(f"Failed to write {scene_file.name}")
