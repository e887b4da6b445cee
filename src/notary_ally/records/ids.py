"""Record id generation.

Ids are ISO-8601 UTC timestamps of the creation instant. Two records created
within the same clock tick would share an id, so the generator never hands
out a timestamp at or before the last one it issued: it steps forward one
microsecond instead.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

_ONE_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class IdGenerator:
    """Strictly increasing timestamp ids for one process."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._last: datetime | None = None

    def __call__(self) -> str:
        now = self._clock().astimezone(UTC)
        if self._last is not None and now <= self._last:
            now = self._last + _ONE_TICK
        self._last = now
        return now.isoformat(timespec="microseconds").replace("+00:00", "Z")

    def observe(self, existing_id: str) -> None:
        """Never issue an id at or before existing_id (used when loading stored records)."""
        try:
            seen = datetime.fromisoformat(existing_id.replace("Z", "+00:00"))
        except ValueError:
            return
        if seen.tzinfo is None:
            seen = seen.replace(tzinfo=UTC)
        if self._last is None or seen > self._last:
            self._last = seen
