"""County and driving-distance lookups through a text-completion model.

The model is asked for a bare answer ("only the county name", "only the
number") and the free text that comes back is coerced into a ``str`` or a
``float``. Every call is a single round trip: no retry, no cache.

Failures surface as ``LookupServiceError`` subclasses with stable messages;
callers never see litellm's exception types.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from loguru import logger

from ..core.exceptions import (
    ConfigurationError,
    CountyLookupError,
    DistanceLookupError,
    DistanceParseError,
    EmptyCountyError,
)
from ..core.llm import LLMClient

COUNTY_PROMPT = (
    "Based on the latitude {lat} and longitude {lon}, what is the county? "
    "Please provide only the county name and nothing else. For example: 'Los Angeles County'"
)
DISTANCE_PROMPT = (
    'What is the driving distance in miles between "{start}" and "{end}"? '
    "Please provide only the number, with up to one decimal place. For example: 42.5"
)

COUNTY_FAILED = "Could not determine county. Please try again."
DISTANCE_FAILED = "Could not calculate mileage. Please check locations and try again."
DISTANCE_UNPARSEABLE = "Could not parse a valid distance from the response."
MISSING_CREDENTIAL = "API key not configured. Set llm.api_key in secrets or the provider's API key env var."

# Leading decimal literal, e.g. "42.5" in "42.5 miles".
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

CredentialSource = str | Callable[[], str | None] | None


def parse_distance(text: str) -> float:
    """Parse the number at the start of text (after trimming).

    Raises:
        DistanceParseError: text does not start with a finite number.
    """
    match = _LEADING_NUMBER.match(text.strip())
    if not match:
        raise DistanceParseError(DISTANCE_UNPARSEABLE)
    value = float(match.group(0))
    if not math.isfinite(value):
        raise DistanceParseError(DISTANCE_UNPARSEABLE)
    return value


def parse_county(text: str) -> str:
    """Trim the answer; an empty answer is an error."""
    county = text.strip()
    if not county:
        raise EmptyCountyError(COUNTY_FAILED)
    return county


class LookupService:
    """Resolve counties and distances with an LLM.

    Args:
        credential: API key, or a zero-arg callable returning one. Checked on
            every call, before any request is made.
        model: litellm model string.
        client_factory: Builds the LLMClient for a given key (tests swap this).
    """

    def __init__(
        self,
        credential: CredentialSource = None,
        model: str | None = None,
        temperature: float = 0.0,
        timeout: float | None = None,
        client_factory: Callable[[str], LLMClient] | None = None,
    ):
        self._credential = credential
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self._client_factory = client_factory or self._default_client

    def _default_client(self, api_key: str) -> LLMClient:
        return LLMClient(model=self.model, api_key=api_key, temperature=self.temperature, timeout=self.timeout)

    def _require_client(self) -> LLMClient:
        credential = self._credential() if callable(self._credential) else self._credential
        if not credential:
            raise ConfigurationError(MISSING_CREDENTIAL)
        return self._client_factory(credential)

    # -- county -------------------------------------------------------------

    def resolve_county(self, lat: float, lon: float) -> str:
        client = self._require_client()
        try:
            text = client.ask(COUNTY_PROMPT.format(lat=lat, lon=lon))
        except Exception as e:
            logger.error(f"County lookup failed ({type(e).__name__}): {e}")
            raise CountyLookupError(COUNTY_FAILED) from e
        return parse_county(text)

    async def aresolve_county(self, lat: float, lon: float) -> str:
        client = self._require_client()
        try:
            text = await client.aask(COUNTY_PROMPT.format(lat=lat, lon=lon))
        except Exception as e:
            logger.error(f"County lookup failed ({type(e).__name__}): {e}")
            raise CountyLookupError(COUNTY_FAILED) from e
        return parse_county(text)

    # -- distance -----------------------------------------------------------

    def resolve_distance(self, start: str, end: str) -> float:
        client = self._require_client()
        try:
            text = client.ask(DISTANCE_PROMPT.format(start=start, end=end))
        except Exception as e:
            logger.error(f"Mileage lookup failed ({type(e).__name__}): {e}")
            raise DistanceLookupError(DISTANCE_FAILED) from e
        distance = parse_distance(text)
        logger.debug(f"Distance {start!r} -> {end!r}: {distance}")
        return distance

    async def aresolve_distance(self, start: str, end: str) -> float:
        client = self._require_client()
        try:
            text = await client.aask(DISTANCE_PROMPT.format(start=start, end=end))
        except Exception as e:
            logger.error(f"Mileage lookup failed ({type(e).__name__}): {e}")
            raise DistanceLookupError(DISTANCE_FAILED) from e
        return parse_distance(text)
