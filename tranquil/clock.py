"""
Timestamp and identifier source for engine output records.

This is the only non-deterministic input to the engine. Services take a
clock argument so tests can pin it with `FixedClock` and compare outputs
exactly.
"""

from dataclasses import dataclass
from datetime import datetime


class SystemClock:
    """Wall-clock time; ids are `<prefix>-<epoch millis>`."""

    def now(self) -> datetime:
        return datetime.now()

    def new_id(self, prefix: str, at: datetime) -> str:
        return f"{prefix}-{int(at.timestamp() * 1000)}"


@dataclass(frozen=True)
class FixedClock(SystemClock):
    """Always reports the same instant."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant
