"""notary-ally mileage: calculate trip distances and keep the mileage log."""

from __future__ import annotations

import click

from .common import app_context, export_dir, handle_errors


@click.group()
def mileage() -> None:
    """Track mileage between signings."""


@mileage.command("calculate")
@click.option("--from", "start", required=True, help="Start location.")
@click.option("--to", "end", required=True, help="End location.")
@click.option("--date", default=None, help="Trip date (YYYY-MM-DD). Defaults to today.")
@click.option("--log/--no-log", "log_it", default=False, help="Also record the trip in the mileage log.")
@click.pass_context
@handle_errors
def calculate(ctx: click.Context, start: str, end: str, date: str | None, log_it: bool) -> None:
    """Calculate the driving distance between two locations."""
    workflow = app_context(ctx).mileage_workflow(date=date)
    workflow.set_start_location(start)
    workflow.set_end_location(end)
    miles = workflow.calculate()
    if miles is None:
        click.echo(f"Error: {workflow.error}", err=True)
        ctx.exit(1)
    click.echo(f"Calculated Distance: {miles:.1f} miles")
    if log_it:
        entry = workflow.log_trip()
        click.echo(f"Logged trip {entry.id}")


@mileage.command("list")
@click.pass_context
def list_(ctx: click.Context) -> None:
    """List logged trips, newest first, with the running total."""
    log = app_context(ctx).mileage
    if not log:
        click.echo("No trips logged yet.")
        return
    for entry in log:
        click.echo(f"{entry.id}  {entry.date}  {entry.start_location} -> {entry.end_location}  {entry.miles:.1f} mi")
    click.echo(f"Total: {log.total_miles():.1f} miles")


@mileage.command("export")
@click.option("--output", "-o", type=click.Path(file_okay=False), default=None, help="Directory to write into.")
@click.pass_context
@handle_errors
def export(ctx: click.Context, output: str | None) -> None:
    """Export the mileage log to mileage_log.csv."""
    from notary_ally.export import export_mileage

    path = export_mileage(app_context(ctx).mileage.all()).save(export_dir(ctx, output))
    click.echo(f"Wrote {path}")
