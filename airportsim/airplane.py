"""Airplanes: fuel tank, seat map and the timestamps of their stay at the airport."""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import NamedTuple


class _Spec(NamedTuple):
    rows: int
    seats_per_row: int
    tank_capacity: int
    maneuver_seconds: int


class AirplaneType(Enum):
    """Size class of an airplane."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2
    MAX = 3


_SPECS = {
    AirplaneType.SMALL: _Spec(rows=4, seats_per_row=4, tank_capacity=70, maneuver_seconds=2),
    AirplaneType.MEDIUM: _Spec(rows=8, seats_per_row=5, tank_capacity=110, maneuver_seconds=3),
    AirplaneType.LARGE: _Spec(rows=10, seats_per_row=5, tank_capacity=150, maneuver_seconds=4),
    AirplaneType.MAX: _Spec(rows=15, seats_per_row=6, tank_capacity=220, maneuver_seconds=6),
}


class Airplane:
    """A single flight with its seat map and fuel state.

    ``maneuver_seconds`` is how long a take-off or a landing takes.
    Timestamps are ``time.monotonic()`` values, or ``None`` until reached.
    """

    def __init__(
        self,
        flight_number: int,
        airplane_type: AirplaneType | int,
        take_seat_delay: float = 0.1,
    ) -> None:
        self.airplane_type = AirplaneType(airplane_type)
        spec = _SPECS[self.airplane_type]
        self.flight_number = flight_number
        self.rows = spec.rows
        self.seats_per_row = spec.seats_per_row
        self.tank_capacity = spec.tank_capacity
        self.maneuver_seconds = spec.maneuver_seconds
        self.take_seat_delay = take_seat_delay
        self.current_fuel = 0
        self.is_refueling = False
        self.is_approved = False
        self.landing_time: float | None = None
        self.ready_to_take_off_time: float | None = None
        self.actual_take_off_time: float | None = None
        self._seats = [[False] * self.seats_per_row for _ in range(self.rows)]
        self._seat_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Airplane(flight_number={self.flight_number}, type={self.airplane_type.name})"

    def try_take_seat(self, family_size: int) -> bool:
        """Seat a family side by side in the first free run of seats.

        Returns ``False`` when no row has enough adjacent free seats.
        """
        with self._seat_lock:
            for row in self._seats:
                for start in range(self.seats_per_row - family_size + 1):
                    block = range(start, start + family_size)
                    if any(row[seat] for seat in block):
                        continue
                    for seat in block:
                        row[seat] = True
                        if self.take_seat_delay > 0:
                            time.sleep(self.take_seat_delay)
                    return True
            return False

    def seats_snapshot(self) -> list[list[bool]]:
        """Return a copy of the seat map, row by row; ``True`` marks a taken seat."""
        with self._seat_lock:
            return [list(row) for row in self._seats]

    def all_seats_taken(self) -> bool:
        """Whether every seat on board is occupied."""
        return all(all(row) for row in self.seats_snapshot())

    def is_ready_for_departure(self) -> bool:
        """Full tank, no refuelling in progress and every seat taken."""
        return (
            self.current_fuel == self.tank_capacity
            and not self.is_refueling
            and self.all_seats_taken()
        )