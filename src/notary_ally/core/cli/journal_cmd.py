"""notary-ally journal: record notarial acts and export the journal."""

from __future__ import annotations

import json

import click

from notary_ally.core.exceptions import ValidationError
from notary_ally.records.models import NotarizationType

from .common import app_context, export_dir, handle_errors


@click.group()
def journal() -> None:
    """Electronic notary journal (entries cannot be edited)."""


@journal.command("add")
@click.option(
    "--type",
    "notarization_type",
    type=click.Choice([t.value for t in NotarizationType]),
    default=NotarizationType.ACKNOWLEDGMENT.value,
    show_default=True,
)
@click.option("--signer", "signer_name", required=True, help="Signer's full name.")
@click.option("--address", "signer_address", required=True, help="Signer's address.")
@click.option("--id-number", "signer_id_number", required=True)
@click.option("--id-state", "signer_id_state", required=True)
@click.option("--id-issued", "signer_id_issue_date", required=True, help="ID issue date (YYYY-MM-DD).")
@click.option("--id-expires", "signer_id_expiration_date", required=True, help="ID expiration date (YYYY-MM-DD).")
@click.option(
    "--signature",
    "signature_image",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Image file of the captured signature.",
)
@click.option(
    "--strokes",
    "strokes_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of pen strokes: [[[x, y], ...], ...].",
)
@click.pass_context
@handle_errors
def add(
    ctx: click.Context,
    notarization_type: str,
    signer_name: str,
    signer_address: str,
    signer_id_number: str,
    signer_id_state: str,
    signer_id_issue_date: str,
    signer_id_expiration_date: str,
    signature_image: str | None,
    strokes_file: str | None,
) -> None:
    """Record a notarial act with the signer's signature."""
    from notary_ally.signature import load_image_data_url

    form = app_context(ctx).journal_form()
    form.set_notarization_type(notarization_type)
    form.draft.signer_name = signer_name
    form.draft.signer_address = signer_address
    form.draft.signer_id_number = signer_id_number
    form.draft.signer_id_state = signer_id_state
    form.draft.signer_id_issue_date = signer_id_issue_date
    form.draft.signer_id_expiration_date = signer_id_expiration_date

    signature_data_url = None
    if signature_image:
        try:
            signature_data_url = load_image_data_url(signature_image)
        except OSError as e:
            raise ValidationError(f"Could not read signature image: {e}") from e
    elif strokes_file:
        try:
            with open(strokes_file) as f:
                strokes = json.load(f)
            for stroke in strokes:
                form.signature_pad.add_stroke(stroke)
        except (OSError, ValueError, TypeError) as e:
            raise ValidationError(f"Could not read signature strokes: {e}") from e

    entry = form.submit(signature_data_url)
    click.echo(f"Recorded journal entry {entry.id}")


@journal.command("list")
@click.pass_context
def list_(ctx: click.Context) -> None:
    """List journal entries, newest first."""
    entries = app_context(ctx).journal.all()
    if not entries:
        click.echo("No journal entries recorded.")
        return
    for entry in entries:
        click.echo(
            f"{entry.id}  {entry.notarization_type}  {entry.signer_name}  "
            f"ID: {entry.signer_id_number} ({entry.signer_id_state})"
        )


@journal.command("export")
@click.option("--output", "-o", type=click.Path(file_okay=False), default=None, help="Directory to write into.")
@click.pass_context
@handle_errors
def export(ctx: click.Context, output: str | None) -> None:
    """Export the journal to journal_entries.csv (signatures are not included)."""
    from notary_ally.export import export_journal

    path = export_journal(app_context(ctx).journal.all()).save(export_dir(ctx, output))
    click.echo(f"Wrote {path}")
