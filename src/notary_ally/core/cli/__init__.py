"""Notary Ally CLI: appointments, mileage, journal, location and settings."""

import click

from notary_ally import __version__

from .common import build_context


@click.group()
@click.version_option(version=__version__, package_name="notary-ally")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML/JSON config file.")
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Override the data directory.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, data_dir: str | None) -> None:
    """Notary Ally: appointments, mileage and an electronic journal for notaries."""
    if ctx.obj is None:
        ctx.obj = build_context(config_file=config_file, data_dir=data_dir)


# Register subcommands
from .appointments_cmd import appointments
from .journal_cmd import journal
from .location_cmd import location
from .mileage_cmd import mileage
from .settings_cmd import settings

main.add_command(appointments)
main.add_command(mileage)
main.add_command(journal)
main.add_command(location)
main.add_command(settings)
