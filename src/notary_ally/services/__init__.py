"""External lookups."""

from .lookup import LookupService, parse_county, parse_distance

__all__ = ["LookupService", "parse_county", "parse_distance"]
