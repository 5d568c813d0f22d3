import click

from .commands.validate import validate_command
from .commands.write import write_command


@click.group()
@click.version_option(package_name="collada-writer")
def app() -> None:
    pass


app.add_command(write_command, name="write")
app.add_command(validate_command, name="validate")
__all__ = ["app"]
