"""Tests for the notary_ally exception hierarchy."""

import pytest

from notary_ally.core.exceptions import (
    APIError,
    ConfigurationError,
    CountyLookupError,
    DistanceLookupError,
    DistanceParseError,
    EmptyCountyError,
    GeolocationError,
    LookupServiceError,
    NotaryAllyError,
    NothingToExportError,
    SecretNotFoundError,
    ValidationError,
    WorkflowBusyError,
)
from notary_ally.core.storage import StorageError, StoragePermissionError, StorageQuotaError


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            SecretNotFoundError,
            ValidationError,
            APIError,
            LookupServiceError,
            CountyLookupError,
            EmptyCountyError,
            DistanceLookupError,
            DistanceParseError,
            GeolocationError,
            NothingToExportError,
            WorkflowBusyError,
            StorageError,
            StoragePermissionError,
            StorageQuotaError,
        ],
    )
    def test_all_inherit_from_base(self, exc_class):
        assert issubclass(exc_class, NotaryAllyError)

    def test_lookup_errors_are_api_errors(self):
        assert issubclass(CountyLookupError, APIError)
        assert issubclass(DistanceParseError, DistanceLookupError)
        assert issubclass(EmptyCountyError, CountyLookupError)

    def test_parse_and_transport_failures_distinguishable(self):
        assert not issubclass(DistanceLookupError, DistanceParseError)
        assert not issubclass(CountyLookupError, EmptyCountyError)

    def test_message_preserved(self):
        with pytest.raises(ValidationError, match="Please provide a signature."):
            raise ValidationError("Please provide a signature.")
