"""Commands that create or reshape a mapping file."""

from pathlib import Path

import click

from padsmith.cli.errors import report_errors
from padsmith.cli.options import config_option
from padsmith.models import KnobPart, MAX_LAYERS, Macropad, Orientation
from padsmith.services import MappingStore

GEOMETRY_RANGE = click.IntRange(1, 10)
KNOB_RANGE = click.IntRange(0, 10)


@click.command(name="init")
@config_option
@click.option("--rows", "-r", type=GEOMETRY_RANGE, default=2, show_default=True, help="Button rows")
@click.option("--cols", type=GEOMETRY_RANGE, default=3, show_default=True, help="Button columns")
@click.option("--knobs", "-k", type=KNOB_RANGE, default=1, show_default=True, help="Rotary encoders")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing mapping file")
@report_errors("create mapping")
def init(config_path: Path, rows: int, cols: int, knobs: int, force: bool):
    """Write a factory-default mapping (3 layers, all keys unbound)."""
    store = MappingStore()
    path = store.resolve(config_path)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    store.save(Macropad.create_default(rows, cols, knobs), path)
    click.echo(f"Created {rows}x{cols} mapping with {knobs} knob(s): {path}")


@click.command(name="layout")
@config_option
@click.option("--rows", "-r", type=GEOMETRY_RANGE, default=None, help="Button rows")
@click.option("--cols", type=GEOMETRY_RANGE, default=None, help="Button columns")
@click.option("--knobs", "-k", type=KNOB_RANGE, default=None, help="Rotary encoders")
@click.option("--layers", "-l", type=click.IntRange(1, MAX_LAYERS), default=None, help="Layer count")
@click.option(
    "--orientation",
    "-o",
    type=click.Choice([o.value for o in Orientation], case_sensitive=False),
    default=None,
    help="Pad rotation",
)
@report_errors("change layout")
def layout(
    config_path: Path,
    rows: int | None,
    cols: int | None,
    knobs: int | None,
    layers: int | None,
    orientation: str | None,
):
    """Change the device geometry, keeping every key that still fits.

    \b
    Examples:
      padsmith layout --rows 3 --cols 4
      padsmith layout --layers 1 --orientation clockwise
    """
    store = MappingStore()
    macropad = store.read(config_path)
    device = macropad.device

    macropad.apply_layout(
        rows=device.rows if rows is None else rows,
        cols=device.cols if cols is None else cols,
        knobs=device.knobs if knobs is None else knobs,
        layers=layers,
        orientation=Orientation(orientation.lower()) if orientation else None,
    )
    store.save(macropad, config_path)
    click.echo(
        f"Applied: {device.layers} layers, {device.rows}x{device.cols} grid, "
        f"{device.knobs} knob(s), {device.orientation.value}"
    )


@click.command(name="set")
@config_option
@click.option("--layer", "-l", type=click.IntRange(1, MAX_LAYERS), default=1, show_default=True)
@click.option("--row", type=click.IntRange(min=1), default=None, help="Button row (1-based)")
@click.option("--col", type=click.IntRange(min=1), default=None, help="Button column (1-based)")
@click.option("--knob", type=click.IntRange(min=1), default=None, help="Knob number (1-based)")
@click.option(
    "--part",
    type=click.Choice([p.value for p in KnobPart]),
    default=KnobPart.PRESS.value,
    show_default=True,
    help="Knob motion",
)
@click.option("--delay", "-d", type=click.IntRange(0, 0xFFFF), default=None, help="Delay in ms")
@click.argument("mapping")
@report_errors("update mapping")
def set_key(
    config_path: Path,
    layer: int,
    row: int | None,
    col: int | None,
    knob: int | None,
    part: str,
    delay: int | None,
    mapping: str,
):
    """Bind MAPPING to one button or knob motion.

    \b
    Examples:
      padsmith set --row 1 --col 1 "ctrl-c,ctrl-v"
      padsmith set --knob 1 --part cw volup
    """
    if knob is None and (row is None or col is None):
        raise click.UsageError("Give either --row and --col, or --knob")

    store = MappingStore()
    macropad = store.read(config_path)
    try:
        if knob is not None:
            button = macropad.get_knob(layer - 1, knob - 1).part(KnobPart(part))
            target = f"layer {layer} knob {knob} {part}"
        else:
            button = macropad.get_button(layer - 1, row - 1, col - 1)
            target = f"layer {layer} row {row} btn {col}"
    except IndexError as e:
        raise click.ClickException(str(e)) from e

    button.mapping = mapping
    if delay is not None:
        button.delay = delay
    store.save(macropad, config_path)
    click.echo(f"{target}: {mapping!r}")
