"""CSV export of record collections."""

from .csv_export import (
    APPOINTMENT_COLUMNS,
    JOURNAL_COLUMNS,
    MILEAGE_COLUMNS,
    CsvColumn,
    CsvDocument,
    export_appointments,
    export_csv,
    export_journal,
    export_mileage,
    quote_field,
)

__all__ = [
    "APPOINTMENT_COLUMNS",
    "JOURNAL_COLUMNS",
    "MILEAGE_COLUMNS",
    "CsvColumn",
    "CsvDocument",
    "export_appointments",
    "export_csv",
    "export_journal",
    "export_mileage",
    "quote_field",
]
