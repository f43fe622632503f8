"""Fuel tankers that serve airplanes parked at the gates."""

from __future__ import annotations

import time
from typing import Any

from .airplane import Airplane

_FUEL_STEP = 10
_IDLE_SECONDS = 0.5


class Tanker:
    """A fuel truck with a limited tank that refills itself when empty.

    The airport it serves must provide ``queue_lock``, ``gates`` (each with
    an ``airplane`` attribute), ``stopped()`` and ``pause(seconds)``.
    """

    def __init__(self, fuel_capacity: int = 150, refill_time: float = 3.0) -> None:
        self.fuel_capacity = fuel_capacity
        self.fuel_level = fuel_capacity
        self.refill_time = refill_time
        self.is_refilling = False

    def __repr__(self) -> str:
        return f"Tanker(fuel={self.fuel_level}/{self.fuel_capacity})"

    def refill(self) -> None:
        """Drive off to refill, which takes ``refill_time`` seconds."""
        self.is_refilling = True
        if self.refill_time > 0:
            time.sleep(self.refill_time)
        self.fuel_level = self.fuel_capacity
        self.is_refilling = False

    def claim_target(self, airport: Any) -> Airplane | None:
        """Mark the first parked airplane needing fuel as being refuelled and return it."""
        with airport.queue_lock:
            for gate in airport.gates:
                airplane = gate.airplane
                if (
                    airplane is not None
                    and airplane.current_fuel < airplane.tank_capacity
                    and not airplane.is_refueling
                ):
                    airplane.is_refueling = True
                    return airplane
        return None

    def refuel(self, airplane: Airplane, tank_time: float) -> int:
        """Pump fuel in steps of ten units until the airplane is full.

        If the tanker runs dry it refills and stops serving this airplane.
        Returns the amount of fuel transferred.
        """
        transferred = 0
        while airplane.current_fuel < airplane.tank_capacity:
            if self.fuel_level <= 0:
                self.refill()
                break
            amount = min(
                _FUEL_STEP,
                self.fuel_level,
                airplane.tank_capacity - airplane.current_fuel,
            )
            self.fuel_level -= amount
            airplane.current_fuel += amount
            transferred += amount
            if tank_time > 0:
                time.sleep(tank_time)
        return transferred

    def release(self, airport: Any, airplane: Airplane) -> None:
        """Let other tankers serve the airplane again."""
        with airport.queue_lock:
            airplane.is_refueling = False

    def run(self, airport: Any, tank_time: float) -> None:
        """Serve the airport's gates until it is stopped."""
        while not airport.stopped():
            target = self.claim_target(airport)
            if target is None:
                airport.pause(_IDLE_SECONDS)
                continue
            try:
                self.refuel(target, tank_time)
            finally:
                self.release(airport, target)