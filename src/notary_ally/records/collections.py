"""Persisted record collections.

Each collection is an ordered, newest-first list of one record type stored
as a JSON array under its own store key. Every mutation rewrites the whole
array. Records are never removed; the journal is an audit record.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from loguru import logger

from ..core.store import KeyValueStore, PersistedValue
from .ids import IdGenerator
from .models import (
    Appointment,
    AppointmentDraft,
    JournalDraft,
    JournalEntry,
    MileageDraft,
    MileageEntry,
)

APPOINTMENTS_KEY = "notary_appointments"
MILEAGE_KEY = "notary_mileage"
JOURNAL_KEY = "notary_journal"
DARK_MODE_KEY = "notary_dark_mode"

R = TypeVar("R", Appointment, MileageEntry, JournalEntry)


class RecordCollection(Generic[R]):
    """Newest-first persisted list of records.

    Subclasses set ``record_type`` and ``key``.
    """

    record_type: type
    key: str
    label: str = "record"

    def __init__(self, store: KeyValueStore, id_generator: IdGenerator | None = None):
        self._state: PersistedValue[list[dict[str, Any]]] = PersistedValue(store, self.key, [])
        self._ids = id_generator or IdGenerator()
        self._records: list[R] = self._decode(self._state.get())
        for record in self._records:
            self._ids.observe(record.id)

    def _decode(self, raw: Any) -> list[R]:
        if not isinstance(raw, list):
            logger.warning(f"Stored value for '{self.key}' is not a list; starting empty")
            return []
        records: list[R] = []
        for item in raw:
            try:
                records.append(self.record_type.from_dict(item))
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping unreadable {self.label} in '{self.key}': {e}")
        return records

    def _persist(self) -> None:
        self._state.set([record.to_dict() for record in self._records])

    def add(self, draft) -> R:
        """Validate draft, give it a fresh id, put it first and persist."""
        draft.validate()
        record = draft.to_record(self._ids())
        self._records.insert(0, record)
        self._persist()
        logger.debug(f"Added {self.label} {record.id} ({len(self._records)} total)")
        return record

    def get(self, record_id: str) -> R | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def all(self) -> list[R]:
        """Snapshot of the records, newest first."""
        return list(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def reload(self) -> None:
        """Drop in-memory records and re-read them from the store."""
        self._records = self._decode(self._state.reload())


class AppointmentCollection(RecordCollection[Appointment]):
    record_type = Appointment
    key = APPOINTMENTS_KEY
    label = "appointment"

    def add(self, draft: AppointmentDraft) -> Appointment:
        return super().add(draft)

    def update(self, appointment: Appointment) -> bool:
        """Replace the appointment with the same id in place.

        Returns False, without writing anything, when no appointment matches.
        """
        appointment.validate()
        for index, existing in enumerate(self._records):
            if existing.id == appointment.id:
                self._records[index] = appointment
                self._persist()
                logger.debug(f"Updated appointment {appointment.id}")
                return True
        logger.debug(f"No appointment with id {appointment.id}; nothing updated")
        return False


class MileageCollection(RecordCollection[MileageEntry]):
    record_type = MileageEntry
    key = MILEAGE_KEY
    label = "mileage entry"

    def add(self, draft: MileageDraft) -> MileageEntry:
        return super().add(draft)

    def total_miles(self) -> float:
        return sum(entry.miles for entry in self._records)


class JournalCollection(RecordCollection[JournalEntry]):
    record_type = JournalEntry
    key = JOURNAL_KEY
    label = "journal entry"

    def add(self, draft: JournalDraft) -> JournalEntry:
        return super().add(draft)
