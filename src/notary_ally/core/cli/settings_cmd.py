"""notary-ally settings: persisted preferences."""

from __future__ import annotations

import click

from .common import app_context


@click.group()
def settings() -> None:
    """View or change preferences."""


@settings.command("dark-mode")
@click.argument("state", type=click.Choice(["on", "off"]), required=False)
@click.pass_context
def dark_mode(ctx: click.Context, state: str | None) -> None:
    """Show or set the dark-mode preference."""
    pref = app_context(ctx).dark_mode
    if state is not None:
        pref.set(state == "on")
    click.echo(f"Dark mode: {'on' if pref.get() else 'off'}")
