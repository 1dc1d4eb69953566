"""Validate command."""

from pathlib import Path

import click

from padsmith.cli.errors import report_errors
from padsmith.cli.options import config_option, product_id_option
from padsmith.services import MappingStore


@click.command(name="validate")
@config_option
@product_id_option
@report_errors("validate mapping")
def validate(config_path: Path, product_id: int | None):
    """Check that the mapping can be programmed onto the target pad.

    \b
    Examples:
      padsmith validate
      padsmith validate -c office.json --product-id 0x8890
    """
    report = MappingStore().validate(config_path, product_id)

    for warning in report.warnings:
        click.echo(f"WARNING: {warning}", err=True)
    click.echo(f"OK: mapping is valid for {report.family.label}")
