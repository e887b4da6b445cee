"""Tests for notary_ally.records.models."""

import pytest

from notary_ally.core.exceptions import ValidationError
from notary_ally.records.models import (
    Appointment,
    AppointmentDraft,
    JournalDraft,
    JournalEntry,
    LocationInfo,
    MileageDraft,
    MileageEntry,
    NotarizationType,
    normalize_timestamp,
)


def _journal_draft(signature):
    return JournalDraft(
        notarization_type=NotarizationType.JURAT,
        signer_name="John Smith",
        signer_id_number="D1234567",
        signer_id_state="TX",
        signer_id_issue_date="2020-01-01",
        signer_id_expiration_date="2028-01-01",
        signer_address="1 Elm St",
        signature_data_url=signature,
        date="2024-05-01T10:00:00.000Z",
    )


class TestNotarizationType:
    def test_values(self):
        assert [t.value for t in NotarizationType] == [
            "Acknowledgment",
            "Jurat",
            "Copy Certification",
            "Oath or Affirmation",
        ]


class TestAppointment:
    def test_camel_case_dict(self):
        app = Appointment(id="1", client_name="Jane Doe", date="2024-05-01", time="10:00", location="123 Main St")
        assert app.to_dict() == {
            "id": "1",
            "clientName": "Jane Doe",
            "date": "2024-05-01",
            "time": "10:00",
            "location": "123 Main St",
        }
        assert Appointment.from_dict(app.to_dict()) == app

    def test_draft_requires_all_fields(self):
        with pytest.raises(ValidationError, match="clientName"):
            AppointmentDraft(date="2024-05-01", time="10:00", location="x").validate()

    def test_whitespace_only_is_missing(self):
        with pytest.raises(ValidationError, match="location"):
            AppointmentDraft(client_name="a", date="b", time="c", location="   ").validate()

    def test_to_record(self):
        app = AppointmentDraft("Jane", "2024-05-01", "10:00", "Here").to_record("id-1")
        assert app.id == "id-1"
        assert app.to_draft() == AppointmentDraft("Jane", "2024-05-01", "10:00", "Here")


class TestMileage:
    def test_roundtrip(self):
        entry = MileageEntry(id="1", date="2024-05-01", start_location="A", end_location="B", miles=42.5)
        data = entry.to_dict()
        assert data["startLocation"] == "A"
        assert data["miles"] == 42.5
        assert MileageEntry.from_dict(data) == entry

    def test_miles_coerced_to_float(self):
        entry = MileageEntry(id="1", date="d", start_location="A", end_location="B", miles="7")
        assert entry.miles == 7.0
        assert isinstance(entry.miles, float)

    @pytest.mark.parametrize(
        ("miles", "error"),
        [(None, TypeError), (False, TypeError), ("abc", ValueError), ("inf", ValueError), (float("nan"), ValueError)],
    )
    def test_miles_must_be_finite_number(self, miles, error):
        with pytest.raises(error):
            MileageEntry(id="1", date="d", start_location="A", end_location="B", miles=miles)

    def test_from_dict_rejects_non_string_text(self):
        with pytest.raises(TypeError, match="startLocation"):
            MileageEntry.from_dict({"id": "1", "date": "d", "startLocation": 3, "endLocation": "B", "miles": 1})
        with pytest.raises(TypeError):
            MileageEntry.from_dict(["not", "a", "dict"])

    @pytest.mark.parametrize("miles", [None, 0, -3.2])
    def test_draft_rejects_non_positive_miles(self, miles):
        draft = MileageDraft(date="2024-05-01", start_location="A", end_location="B", miles=miles)
        with pytest.raises(ValidationError):
            draft.validate()

    def test_draft_requires_locations(self):
        with pytest.raises(ValidationError, match="endLocation"):
            MileageDraft(date="2024-05-01", start_location="A", miles=3.0).validate()


class TestJournal:
    def test_roundtrip_keeps_signature(self, signature_data_url):
        entry = _journal_draft(signature_data_url).to_record("id-1")
        data = entry.to_dict()
        assert data["notarizationType"] == "Jurat"
        assert data["signatureDataUrl"] == signature_data_url
        restored = JournalEntry.from_dict(data)
        assert restored == entry
        assert restored.notarization_type is NotarizationType.JURAT

    def test_valid_draft(self, signature_data_url):
        _journal_draft(signature_data_url).validate()

    def test_signature_required_first(self, blank_signature_data_url):
        draft = _journal_draft(blank_signature_data_url)
        draft.signer_name = ""
        with pytest.raises(ValidationError, match="signature"):
            draft.validate()

    def test_fields_required(self, signature_data_url):
        draft = _journal_draft(signature_data_url)
        draft.signer_id_state = ""
        with pytest.raises(ValidationError, match="signerIdState"):
            draft.validate()

    def test_unknown_type(self, signature_data_url):
        draft = _journal_draft(signature_data_url)
        draft.notarization_type = "Protest"
        with pytest.raises(ValidationError, match="Unknown notarization type"):
            draft.validate()


class TestTimestamps:
    def test_normalize(self):
        assert normalize_timestamp("2024-05-01T10:00:00Z") == "2024-05-01T10:00:00.000Z"
        assert normalize_timestamp("2024-05-01T12:00:00.123456+02:00") == "2024-05-01T10:00:00.123Z"

    def test_unparseable_passthrough(self):
        assert normalize_timestamp("yesterday") == "yesterday"


def test_location_info():
    assert LocationInfo(latitude=1.0, longitude=2.0, county="X").ok
    assert not LocationInfo(latitude=0, longitude=0, county="", error="Geolocation Error: denied").ok
