"""Reference listings: key names and device families."""

import click

from padsmith.devices import FAMILIES, UNCONSTRAINED, DelayPolicy
from padsmith.keys import key_names, media_names, modifier_names, mouse_names
from padsmith.models import LedColor


@click.command(name="keys")
def keys():
    """List every token a mapping may use."""
    click.echo(f"Modifiers: {', '.join(f'{name}-' for name in modifier_names())}")
    click.echo(f"Media:     {', '.join(media_names())}")
    click.echo(f"Mouse:     {', '.join(mouse_names())}")
    click.echo(f"Keys:      {', '.join(key_names())}")
    click.echo()
    click.echo("Use commas to sequence keys (ctrl-c,ctrl-v) and dashes for combos (shift-a).")


@click.command(name="families")
def families():
    """List supported device families and their limits."""
    for family in (*FAMILIES, UNCONSTRAINED):
        click.echo(f"{family.family} ({family.label})")
        click.echo(f"    Max keys per button: {family.max_key_presses}")
        if family.delay_policy is DelayPolicy.IGNORED:
            click.echo("    Delay: not supported (ignored)")
        else:
            click.echo(f"    Delay: up to {family.max_delay} ms")
        if family.modifiers_on_first_key_only:
            click.echo("    Modifiers: first key of a mapping only")
        if family.allowed_media is not None:
            allowed = ", ".join(sorted(code.name.lower() for code in family.allowed_media))
            click.echo(f"    Media keys: {allowed}")
        if family.led_modes:
            modes = ", ".join(f"{mode.id}={mode.name}" for mode in family.led_modes)
            click.echo(f"    LED modes: {modes}")
        click.echo()

    click.echo(f"LED colors: {', '.join(color.value for color in LedColor)}")
