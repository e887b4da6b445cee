"""
Notary Ally exception hierarchy.

All exceptions inherit from NotaryAllyError, so a front end can catch
library-level errors in one place while still distinguishing failure modes.
"""


class NotaryAllyError(Exception):
    """Base exception class for all notary_ally errors."""


class ConfigurationError(NotaryAllyError):
    """Raised for configuration errors (missing credentials, invalid values)."""


class SecretNotFoundError(ConfigurationError):
    """Raised when a required secret cannot be found in any provider."""


class ValidationError(NotaryAllyError):
    """Raised when user input fails validation. The message is user-facing."""


class APIError(NotaryAllyError):
    """Raised for remote service communication errors."""


class LookupServiceError(APIError):
    """Raised when the text-completion lookup cannot produce a result."""


class CountyLookupError(LookupServiceError):
    """Raised when a county cannot be resolved from coordinates."""


class EmptyCountyError(CountyLookupError):
    """Raised when the service answered with an empty county name."""


class DistanceLookupError(LookupServiceError):
    """Raised when a driving distance cannot be resolved."""


class DistanceParseError(DistanceLookupError):
    """Raised when the service answer does not start with a number."""


class GeolocationError(NotaryAllyError):
    """Raised when the platform cannot provide a position fix."""


class NothingToExportError(NotaryAllyError):
    """Raised when an export is requested for an empty collection."""


class WorkflowBusyError(NotaryAllyError):
    """Raised when a workflow action is triggered while a lookup is in flight."""
