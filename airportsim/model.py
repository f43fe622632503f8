"""Runways, gates and the running statistics of an airport."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .airplane import Airplane


@dataclass
class Runway:
    """A runway that alternates between landings and take-offs."""

    permission: int = 0
    is_landing: bool = False
    is_taking_off: bool = False
    airplane: Airplane | None = None

    def status(self) -> str:
        """``'L'`` while landing, ``'T'`` while taking off, ``'F'`` when free."""
        if self.is_landing:
            return "L"
        if self.is_taking_off:
            return "T"
        return "F"


@dataclass
class Gate:
    """A gate where one airplane parks while passengers queue in groups.

    An occupied gate keeps its docking lock acquired until the airplane
    leaves; the passenger lock guards the queue of passenger groups.
    """

    passenger_groups: list[int] = field(default_factory=list)
    is_available: bool = True
    airplane: Airplane | None = None
    passenger_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )
    dock_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def total_passengers(self) -> int:
        """Number of passengers waiting at the gate, across all groups."""
        return sum(self.passenger_groups)


@dataclass
class Statistics:
    """Totals of service and wait times of departed airplanes, in whole seconds."""

    total_service_time: int = 0
    total_wait_time: int = 0
    count: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def record(self, service_seconds: float, wait_seconds: float) -> None:
        """Add one departure; durations are truncated to whole seconds."""
        with self._lock:
            self.total_service_time += int(service_seconds)
            self.total_wait_time += int(wait_seconds)
            self.count += 1

    def average_service_time(self) -> int | None:
        """Mean service time in whole seconds, or ``None`` before any departure."""
        with self._lock:
            if self.count == 0:
                return None
            return self.total_service_time // self.count

    def average_wait_time(self) -> int | None:
        """Mean wait time in whole seconds, or ``None`` before any departure."""
        with self._lock:
            if self.count == 0:
                return None
            return self.total_wait_time // self.count