"""notary-ally appointments: add, update, list and export appointments."""

from __future__ import annotations

import click

from .common import app_context, export_dir, handle_errors


@click.group()
def appointments() -> None:
    """Manage appointments."""


@appointments.command("add")
@click.option("--client", "client_name", required=True, help="Client name.")
@click.option("--date", required=True, help="Appointment date (YYYY-MM-DD).")
@click.option("--time", required=True, help="Appointment time (HH:MM).")
@click.option("--location", required=True, help="Where the signing takes place.")
@click.pass_context
@handle_errors
def add(ctx: click.Context, client_name: str, date: str, time: str, location: str) -> None:
    """Add a new appointment."""
    editor = app_context(ctx).appointment_editor()
    editor.draft.client_name = client_name
    editor.draft.date = date
    editor.draft.time = time
    editor.draft.location = location
    appointment = editor.submit()
    click.echo(f"Added appointment {appointment.id}")


@appointments.command("update")
@click.argument("appointment_id")
@click.option("--client", "client_name", default=None, help="New client name.")
@click.option("--date", default=None, help="New date (YYYY-MM-DD).")
@click.option("--time", default=None, help="New time (HH:MM).")
@click.option("--location", default=None, help="New location.")
@click.pass_context
@handle_errors
def update(
    ctx: click.Context,
    appointment_id: str,
    client_name: str | None,
    date: str | None,
    time: str | None,
    location: str | None,
) -> None:
    """Edit an existing appointment; unspecified fields keep their value."""
    editor = app_context(ctx).appointment_editor()
    draft = editor.begin_edit(appointment_id)
    if client_name is not None:
        draft.client_name = client_name
    if date is not None:
        draft.date = date
    if time is not None:
        draft.time = time
    if location is not None:
        draft.location = location
    appointment = editor.submit()
    click.echo(f"Updated appointment {appointment.id}")


@appointments.command("list")
@click.pass_context
def list_(ctx: click.Context) -> None:
    """List appointments, newest first."""
    items = app_context(ctx).appointments.all()
    if not items:
        click.echo("No appointments scheduled.")
        return
    for app in items:
        click.echo(f"{app.id}  {app.date} {app.time}  {app.client_name} @ {app.location}")


@appointments.command("export")
@click.option("--output", "-o", type=click.Path(file_okay=False), default=None, help="Directory to write into.")
@click.pass_context
@handle_errors
def export(ctx: click.Context, output: str | None) -> None:
    """Export appointments to appointments.csv."""
    from notary_ally.export import export_appointments

    path = export_appointments(app_context(ctx).appointments.all()).save(export_dir(ctx, output))
    click.echo(f"Wrote {path}")
