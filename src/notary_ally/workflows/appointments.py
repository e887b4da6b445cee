"""Appointment editor: one form used both to add and to edit appointments.

The editor holds a draft copy while editing. ``submit`` adds a new
appointment, or updates the one being edited, then resets the form.
"""

from __future__ import annotations

from ..core.exceptions import ValidationError
from ..records.collections import AppointmentCollection
from ..records.models import Appointment, AppointmentDraft


class AppointmentEditor:
    def __init__(self, appointments: AppointmentCollection):
        self.appointments = appointments
        self.draft = AppointmentDraft()
        self.editing_id: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def begin_edit(self, appointment_id: str) -> AppointmentDraft:
        """Load a copy of an existing appointment into the form."""
        appointment = self.appointments.get(appointment_id)
        if appointment is None:
            raise ValidationError(f"No appointment with id {appointment_id}.")
        self.editing_id = appointment.id
        self.draft = appointment.to_draft()
        return self.draft

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.draft = AppointmentDraft()

    def submit(self) -> Appointment:
        """Add or update from the draft; the form is cleared only on success."""
        self.draft.validate()
        if self.editing_id is not None:
            appointment = self.draft.to_record(self.editing_id)
            if not self.appointments.update(appointment):
                raise ValidationError(f"No appointment with id {self.editing_id}.")
        else:
            appointment = self.appointments.add(self.draft)
        self.cancel_edit()
        return appointment
