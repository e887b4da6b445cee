"""Journal entry form.

A notarial journal is append-only: the form can only record new entries.
The entry timestamp is taken at submission, not from user input.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from ..core.exceptions import ValidationError
from ..records.collections import JournalCollection
from ..records.models import JournalDraft, JournalEntry, NotarizationType, format_timestamp
from ..signature import SignaturePad


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JournalForm:
    def __init__(
        self,
        journal: JournalCollection,
        signature_pad: SignaturePad | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.journal = journal
        self.signature_pad = signature_pad or SignaturePad()
        self._clock = clock
        self.draft = JournalDraft()

    def set_notarization_type(self, value: NotarizationType | str) -> None:
        try:
            self.draft.notarization_type = NotarizationType(value)
        except ValueError as e:
            raise ValidationError(f"Unknown notarization type: {value}") from e

    def clear(self) -> None:
        self.draft = JournalDraft()
        self.signature_pad.clear()

    def submit(self, signature_data_url: str | None = None) -> JournalEntry:
        """Record the entry.

        The signature comes from ``signature_data_url`` when given, otherwise
        from the signature pad.
        """
        if signature_data_url is None:
            if self.signature_pad.is_empty():
                raise ValidationError("Please provide a signature.")
            signature_data_url = self.signature_pad.to_data_url()

        draft = JournalDraft(
            notarization_type=self.draft.notarization_type,
            signer_name=self.draft.signer_name,
            signer_id_number=self.draft.signer_id_number,
            signer_id_state=self.draft.signer_id_state,
            signer_id_issue_date=self.draft.signer_id_issue_date,
            signer_id_expiration_date=self.draft.signer_id_expiration_date,
            signer_address=self.draft.signer_address,
            signature_data_url=signature_data_url,
            date=format_timestamp(self._clock()),
        )
        entry = self.journal.add(draft)
        self.clear()
        return entry
