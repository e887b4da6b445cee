"""CSV export for appointments, mileage and journal entries.

Format:
    - header line of bare column labels
    - one line per record, in collection order (newest first)
    - every value wrapped in double quotes, inner quotes doubled
    - rows joined with ``\\n``, no trailing newline

The signature image is never exported.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from ..core.exceptions import NothingToExportError
from ..records.models import Appointment, JournalEntry, MileageEntry, normalize_timestamp

CSV_MIME_TYPE = "text/csv;charset=utf-8"

APPOINTMENTS_FILENAME = "appointments.csv"
MILEAGE_FILENAME = "mileage_log.csv"
JOURNAL_FILENAME = "journal_entries.csv"


@dataclass(frozen=True)
class CsvColumn:
    """A header label and how to render one record's value as text."""

    label: str
    render: Callable[[Any], str]


@dataclass(frozen=True)
class CsvDocument:
    filename: str
    content: str
    mime_type: str = CSV_MIME_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")

    def save(self, directory: str | Path) -> Path:
        """Write the document to ``directory/filename`` and return the path."""
        target_dir = Path(directory).expanduser()
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / self.filename
        path.write_bytes(self.to_bytes())
        logger.info(f"Exported {self.filename} ({len(self.content)} chars) to {path}")
        return path


def quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_csv(
    records: Sequence[Any],
    columns: Sequence[CsvColumn],
    filename: str,
    empty_message: str = "Nothing to export.",
) -> CsvDocument:
    """Render records as a CSV document.

    Raises:
        NothingToExportError: records is empty; no document is produced.
    """
    if not records:
        raise NothingToExportError(empty_message)

    header = ",".join(column.label for column in columns)
    rows = [",".join(quote_field(column.render(record)) for column in columns) for record in records]
    return CsvDocument(filename=filename, content="\n".join([header, *rows]))


APPOINTMENT_COLUMNS: tuple[CsvColumn, ...] = (
    CsvColumn("ID", lambda a: a.id),
    CsvColumn("Client Name", lambda a: a.client_name),
    CsvColumn("Date", lambda a: a.date),
    CsvColumn("Time", lambda a: a.time),
    CsvColumn("Location", lambda a: a.location),
)

MILEAGE_COLUMNS: tuple[CsvColumn, ...] = (
    CsvColumn("ID", lambda m: m.id),
    CsvColumn("Date", lambda m: m.date),
    CsvColumn("Start Location", lambda m: m.start_location),
    CsvColumn("End Location", lambda m: m.end_location),
    CsvColumn("Miles", lambda m: f"{m.miles:.1f}"),
)

JOURNAL_COLUMNS: tuple[CsvColumn, ...] = (
    CsvColumn("ID", lambda j: j.id),
    CsvColumn("Date", lambda j: normalize_timestamp(j.date)),
    CsvColumn("Notarization Type", lambda j: str(j.notarization_type)),
    CsvColumn("Signer Name", lambda j: j.signer_name),
    CsvColumn("Signer Address", lambda j: j.signer_address),
    CsvColumn("Signer ID Number", lambda j: j.signer_id_number),
    CsvColumn("Signer ID State", lambda j: j.signer_id_state),
    CsvColumn("Signer ID Issue Date", lambda j: j.signer_id_issue_date),
    CsvColumn("Signer ID Expiration Date", lambda j: j.signer_id_expiration_date),
)


def export_appointments(appointments: Sequence[Appointment]) -> CsvDocument:
    return export_csv(appointments, APPOINTMENT_COLUMNS, APPOINTMENTS_FILENAME, "No appointments to export.")


def export_mileage(entries: Sequence[MileageEntry]) -> CsvDocument:
    return export_csv(entries, MILEAGE_COLUMNS, MILEAGE_FILENAME, "No mileage entries to export.")


def export_journal(entries: Sequence[JournalEntry]) -> CsvDocument:
    return export_csv(entries, JOURNAL_COLUMNS, JOURNAL_FILENAME, "No journal entries to export.")
