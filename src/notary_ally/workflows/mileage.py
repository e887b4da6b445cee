"""Two-step mileage workflow: calculate the distance, then log the trip.

States::

    IDLE --calculate--> CALCULATING --ok--> CALCULATED --log_trip--> IDLE
                                    \\-err-> FAILED --calculate--> CALCULATING

Editing a location after a calculation leaves the result in place, so a trip
can be logged with a distance computed for different endpoints.
"""

from __future__ import annotations

from enum import StrEnum

from loguru import logger

from ..core.exceptions import NotaryAllyError, ValidationError, WorkflowBusyError
from ..records.collections import MileageCollection
from ..records.models import MileageDraft, MileageEntry, today_iso
from ..services.lookup import LookupService

MISSING_LOCATIONS = "Please enter both start and end locations."
NOT_CALCULATED = "Please calculate miles before logging the trip."
NOT_POSITIVE = "Calculated distance must be greater than zero."
UNKNOWN_ERROR = "An unknown error occurred."


class MileageState(StrEnum):
    IDLE = "idle"
    CALCULATING = "calculating"
    CALCULATED = "calculated"
    FAILED = "failed"


class MileageWorkflow:
    """Draft state for one trip plus the calculate/log transitions."""

    def __init__(self, entries: MileageCollection, lookup: LookupService, date: str | None = None):
        self.entries = entries
        self.lookup = lookup
        self.date = date or today_iso()
        self.start_location = ""
        self.end_location = ""
        self.calculated_miles: float | None = None
        self.error: str | None = None
        self.state = MileageState.IDLE

    # -- inputs -------------------------------------------------------------

    def set_start_location(self, value: str) -> None:
        self.start_location = value

    def set_end_location(self, value: str) -> None:
        self.end_location = value

    def set_date(self, value: str) -> None:
        self.date = value

    @property
    def can_calculate(self) -> bool:
        """False while a lookup is in flight (the control is disabled)."""
        return self.state != MileageState.CALCULATING

    # -- calculate ----------------------------------------------------------

    def _begin_calculation(self) -> bool:
        if not self.can_calculate:
            raise WorkflowBusyError("A mileage calculation is already in progress.")
        if not self.start_location or not self.end_location:
            self.error = MISSING_LOCATIONS
            self.state = MileageState.IDLE
            return False
        self.state = MileageState.CALCULATING
        self.error = None
        self.calculated_miles = None
        return True

    def _finish(self, miles: float) -> float:
        self.calculated_miles = miles
        self.state = MileageState.CALCULATED
        return miles

    def _fail(self, error: BaseException) -> None:
        self.error = (str(error) if isinstance(error, NotaryAllyError) else "") or UNKNOWN_ERROR
        self.calculated_miles = None
        self.state = MileageState.FAILED
        logger.info(f"Mileage calculation failed: {self.error} ({type(error).__name__})")

    def calculate(self) -> float | None:
        """Look up the distance. Returns it, or None on validation/lookup failure (see ``error``).

        Any other exception, cancellation included, leaves the workflow FAILED
        with ``UNKNOWN_ERROR`` and propagates.
        """
        if not self._begin_calculation():
            return None
        try:
            miles = self.lookup.resolve_distance(self.start_location, self.end_location)
        except NotaryAllyError as e:
            self._fail(e)
            return None
        except BaseException as e:
            self._fail(e)
            raise
        return self._finish(miles)

    async def acalculate(self) -> float | None:
        """Async version of calculate(); only this workflow waits on the lookup."""
        if not self._begin_calculation():
            return None
        try:
            miles = await self.lookup.aresolve_distance(self.start_location, self.end_location)
        except NotaryAllyError as e:
            self._fail(e)
            return None
        except BaseException as e:
            self._fail(e)
            raise
        return self._finish(miles)

    # -- commit -------------------------------------------------------------

    def log_trip(self) -> MileageEntry:
        """Commit the calculated trip to the mileage log.

        Raises:
            ValidationError: no positive calculated distance, or missing fields.
                Nothing is added.
        """
        if self.state != MileageState.CALCULATED or self.calculated_miles is None:
            self.error = NOT_CALCULATED
            raise ValidationError(NOT_CALCULATED)
        if not self.calculated_miles > 0:
            self.error = NOT_POSITIVE
            raise ValidationError(NOT_POSITIVE)

        draft = MileageDraft(
            date=self.date,
            start_location=self.start_location,
            end_location=self.end_location,
            miles=self.calculated_miles,
        )
        try:
            entry = self.entries.add(draft)
        except ValidationError as e:
            self.error = str(e)
            raise

        self.start_location = ""
        self.end_location = ""
        self.calculated_miles = None
        self.error = None
        self.state = MileageState.IDLE
        return entry
