"""Shared click options and parameter types."""

from pathlib import Path

import click

from padsmith.services import DEFAULT_MAPPING_FILE


class ProductIdType(click.ParamType):
    """USB product id given as hex (0x8840) or decimal."""

    name = "product_id"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            product_id = int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not a product id (e.g. 0x8840)", param, ctx)
        if not 0 <= product_id <= 0xFFFF:
            self.fail(f"{value!r} is out of range (0x0000-0xffff)", param, ctx)
        return product_id


PRODUCT_ID = ProductIdType()

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_MAPPING_FILE,
    envvar="PADSMITH_CONFIG",
    show_default=True,
    help="Mapping file (default: mapping.json next to the program)",
)

product_id_option = click.option(
    "--product-id",
    "-p",
    type=PRODUCT_ID,
    default=None,
    help="Target pad product id, e.g. 0x8840 or 0x8890 (default: no family limits)",
)
