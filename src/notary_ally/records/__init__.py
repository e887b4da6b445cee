"""Domain records and their persisted collections."""

from .collections import (
    APPOINTMENTS_KEY,
    DARK_MODE_KEY,
    JOURNAL_KEY,
    MILEAGE_KEY,
    AppointmentCollection,
    JournalCollection,
    MileageCollection,
    RecordCollection,
)
from .ids import IdGenerator
from .models import (
    Appointment,
    AppointmentDraft,
    JournalDraft,
    JournalEntry,
    LocationInfo,
    MileageDraft,
    MileageEntry,
    NotarizationType,
)

__all__ = [
    "APPOINTMENTS_KEY",
    "DARK_MODE_KEY",
    "JOURNAL_KEY",
    "MILEAGE_KEY",
    "Appointment",
    "AppointmentCollection",
    "AppointmentDraft",
    "IdGenerator",
    "JournalCollection",
    "JournalDraft",
    "JournalEntry",
    "LocationInfo",
    "MileageCollection",
    "MileageDraft",
    "MileageEntry",
    "NotarizationType",
    "RecordCollection",
]
