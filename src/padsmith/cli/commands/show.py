"""Show command."""

from pathlib import Path

import click

from padsmith.cli.errors import report_errors
from padsmith.cli.options import config_option
from padsmith.services import MappingStore


@click.command(name="show")
@config_option
@report_errors("show mapping")
def show(config_path: Path):
    """Print the mapping file as it would be saved."""
    store = MappingStore()
    store.print(store.read(config_path))
