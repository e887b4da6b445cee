"""Domain records: appointments, mileage entries and notarial journal entries.

Records serialize to dicts with camelCase keys, which is the stored JSON
shape. Drafts are the same records without an ``id``; they validate user
input and turn into records once an id is assigned.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any, ClassVar

from ..core.exceptions import ValidationError


class NotarizationType(StrEnum):
    ACKNOWLEDGMENT = "Acknowledgment"
    JURAT = "Jurat"
    COPY_CERTIFICATION = "Copy Certification"
    OATH_OR_AFFIRMATION = "Oath or Affirmation"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _missing(obj: Any, names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not str(getattr(obj, name) or "").strip()]


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    dt = dt.astimezone(UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def normalize_timestamp(value: str) -> str:
    """Re-render a stored ISO timestamp in the canonical ``...mmmZ`` form.

    Values that don't parse are returned unchanged.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return value
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return format_timestamp(parsed)


def today_iso() -> str:
    return date.today().isoformat()


class _Serializable:
    """camelCase dict conversion shared by records."""

    def to_dict(self) -> dict[str, Any]:
        return {_camel(k): v for k, v in asdict(self).items()}  # type: ignore[call-overload]

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Build from a stored dict.

        Raises:
            TypeError: data is not a dict, a required key is missing, or a
                text field holds a non-string.
            ValueError: a field holds a value of the right type but out of range.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a dict, got {type(data).__name__}")
        kwargs = {}
        for f in fields(cls):  # type: ignore[arg-type]
            camel = _camel(f.name)
            if camel in data:
                kwargs[f.name] = data[camel]
            elif f.name in data:
                kwargs[f.name] = data[f.name]
            else:
                continue
            if f.type == "str" and not isinstance(kwargs[f.name], str):
                raise TypeError(f"{camel} must be a string, got {type(kwargs[f.name]).__name__}")
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Appointments
# ---------------------------------------------------------------------------


@dataclass
class AppointmentDraft(_Serializable):
    client_name: str = ""
    date: str = ""
    time: str = ""
    location: str = ""

    REQUIRED: ClassVar[tuple[str, ...]] = ("client_name", "date", "time", "location")

    def validate(self) -> None:
        missing = _missing(self, self.REQUIRED)
        if missing:
            raise ValidationError(f"Missing required appointment field(s): {', '.join(map(_camel, missing))}.")

    def to_record(self, record_id: str) -> Appointment:
        return Appointment(id=record_id, **asdict(self))


@dataclass
class Appointment(_Serializable):
    id: str
    client_name: str
    date: str
    time: str
    location: str

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Appointment id is required.")
        self.to_draft().validate()

    def to_draft(self) -> AppointmentDraft:
        return AppointmentDraft(client_name=self.client_name, date=self.date, time=self.time, location=self.location)


# ---------------------------------------------------------------------------
# Mileage
# ---------------------------------------------------------------------------


@dataclass
class MileageDraft(_Serializable):
    date: str = ""
    start_location: str = ""
    end_location: str = ""
    miles: float | None = None

    def validate(self) -> None:
        missing = _missing(self, ("date", "start_location", "end_location"))
        if missing:
            raise ValidationError(f"Missing required mileage field(s): {', '.join(map(_camel, missing))}.")
        if self.miles is None:
            raise ValidationError("Please calculate miles before logging the trip.")
        if isinstance(self.miles, bool) or not isinstance(self.miles, int | float) or not self.miles > 0:
            raise ValidationError("Calculated distance must be greater than zero.")

    def to_record(self, record_id: str) -> MileageEntry:
        return MileageEntry(
            id=record_id,
            date=self.date,
            start_location=self.start_location,
            end_location=self.end_location,
            miles=float(self.miles),  # type: ignore[arg-type]
        )


@dataclass
class MileageEntry(_Serializable):
    id: str
    date: str
    start_location: str
    end_location: str
    miles: float

    def __post_init__(self):
        if isinstance(self.miles, bool) or not isinstance(self.miles, int | float | str):
            raise TypeError(f"miles must be a number, got {type(self.miles).__name__}")
        self.miles = float(self.miles)
        if not math.isfinite(self.miles):
            raise ValueError(f"miles must be finite, got {self.miles}")


# ---------------------------------------------------------------------------
# Journal
# ---------------------------------------------------------------------------


@dataclass
class JournalDraft(_Serializable):
    """A journal entry before it is recorded.

    ``date`` is left empty by callers; it is stamped when the entry is
    submitted and is never user-editable.
    """

    notarization_type: NotarizationType = NotarizationType.ACKNOWLEDGMENT
    signer_name: str = ""
    signer_id_number: str = ""
    signer_id_state: str = ""
    signer_id_issue_date: str = ""
    signer_id_expiration_date: str = ""
    signer_address: str = ""
    signature_data_url: str = ""
    date: str = ""

    REQUIRED: ClassVar[tuple[str, ...]] = (
        "signer_name",
        "signer_id_number",
        "signer_id_state",
        "signer_id_issue_date",
        "signer_id_expiration_date",
        "signer_address",
    )

    def validate(self) -> None:
        # Imported here to keep Pillow off the import path of plain model use.
        from ..signature import is_blank_data_url

        if not self.signature_data_url or is_blank_data_url(self.signature_data_url):
            raise ValidationError("Please provide a signature.")
        missing = _missing(self, self.REQUIRED)
        if missing:
            raise ValidationError(f"Missing required journal field(s): {', '.join(map(_camel, missing))}.")
        try:
            NotarizationType(self.notarization_type)
        except ValueError as e:
            raise ValidationError(f"Unknown notarization type: {self.notarization_type}") from e
        if not self.date:
            raise ValidationError("Journal entry date is required.")

    def to_record(self, record_id: str) -> JournalEntry:
        data = asdict(self)
        data["notarization_type"] = NotarizationType(self.notarization_type)
        return JournalEntry(id=record_id, **data)


@dataclass
class JournalEntry(_Serializable):
    id: str
    date: str
    notarization_type: NotarizationType
    signer_name: str
    signer_id_number: str
    signer_id_state: str
    signer_id_issue_date: str
    signer_id_expiration_date: str
    signer_address: str
    signature_data_url: str

    def __post_init__(self):
        if not isinstance(self.notarization_type, NotarizationType):
            self.notarization_type = NotarizationType(self.notarization_type)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["notarizationType"] = self.notarization_type.value
        return data


# ---------------------------------------------------------------------------
# Location (transient)
# ---------------------------------------------------------------------------


@dataclass
class LocationInfo(_Serializable):
    latitude: float
    longitude: float
    county: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
