"""Bounded histories: trend series, protocol traffic, audit trail, alerts.

Every store keeps a fixed number of entries and evicts the oldest on
overflow. Records are frozen once appended. Ids and timestamp labels are
assigned at append time, so ordering follows append sequence.

Trend and traffic stores read oldest first (chart order). Audit and alert
stores read newest first (operator list order).
"""

from __future__ import annotations

import uuid
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Deque, Generic, Iterator, Optional, Tuple, TypeVar

from chemview.models.constants import CAPACITIES

LABEL_FORMAT = "%H:%M:%S"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Direction(str, Enum):
    RX = "RX"
    TX = "TX"


@dataclass(frozen=True)
class Sample:
    timestamp_label: str
    value: float


@dataclass(frozen=True)
class TrafficRecord:
    id: str
    timestamp_label: str
    direction: Direction
    frame_text: str


@dataclass(frozen=True)
class AuditRecord:
    id: str
    timestamp_label: str
    message: str
    severity: Severity


@dataclass(frozen=True)
class AlertRecord:
    id: str
    timestamp_label: str
    message: str
    severity: Severity


def new_record_id() -> str:
    return uuid.uuid4().hex[:12]


def timestamp_label(clock: Callable[[], datetime] = datetime.now) -> str:
    return clock().strftime(LABEL_FORMAT)


T = TypeVar("T")


class BoundedLog(Generic[T]):
    """Fixed-capacity FIFO store.

    Args:
        capacity: Maximum number of entries kept.
        newest_first: Read order of snapshot(); eviction always drops the
            oldest entry either way.
        clock: Wall-clock source for timestamp labels.
    """

    def __init__(
        self,
        capacity: int,
        newest_first: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.newest_first = newest_first
        self._clock = clock
        self._entries: Deque[T] = deque(maxlen=capacity)

    def _push(self, entry: T) -> T:
        if self.newest_first:
            self._entries.appendleft(entry)
        else:
            self._entries.append(entry)
        return entry

    def _label(self) -> str:
        return timestamp_label(self._clock)

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._entries)

    def latest(self) -> Optional[T]:
        if not self._entries:
            return None
        return self._entries[0] if self.newest_first else self._entries[-1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entries))


class TrendSeries(BoundedLog[Sample]):
    """Time-ordered samples of one metric, oldest first."""

    def __init__(self, capacity: int = CAPACITIES["trend"], clock=datetime.now):
        super().__init__(capacity, newest_first=False, clock=clock)

    def append(self, sample: Sample) -> Sample:
        return self._push(sample)

    def record(self, value: float) -> Sample:
        """Append a value stamped with the current time label."""
        return self.append(Sample(timestamp_label=self._label(), value=float(value)))

    def values(self) -> Tuple[float, ...]:
        return tuple(s.value for s in self._entries)


class TrafficLog(BoundedLog[TrafficRecord]):
    """Synthetic protocol exchanges, oldest first."""

    def __init__(self, capacity: int = CAPACITIES["traffic"], clock=datetime.now):
        super().__init__(capacity, newest_first=False, clock=clock)

    def append(self, direction: Direction, frame_text: str) -> TrafficRecord:
        return self._push(
            TrafficRecord(
                id=new_record_id(),
                timestamp_label=self._label(),
                direction=Direction(direction),
                frame_text=frame_text,
            )
        )


class AuditLog(BoundedLog[AuditRecord]):
    """Operator and system events, newest first."""

    def __init__(self, capacity: int = CAPACITIES["audit"], clock=datetime.now):
        super().__init__(capacity, newest_first=True, clock=clock)

    def append(self, message: str, severity: Severity = Severity.LOW) -> AuditRecord:
        return self._push(
            AuditRecord(
                id=new_record_id(),
                timestamp_label=self._label(),
                message=message,
                severity=Severity(severity),
            )
        )


class AlertList(BoundedLog[AlertRecord]):
    """Most recent advisory alerts, newest first."""

    def __init__(self, capacity: int = CAPACITIES["alerts"], clock=datetime.now):
        super().__init__(capacity, newest_first=True, clock=clock)

    def append(self, message: str, severity: Severity) -> AlertRecord:
        return self._push(
            AlertRecord(
                id=new_record_id(),
                timestamp_label=self._label(),
                message=message,
                severity=Severity(severity),
            )
        )
