"""The airport: runways, gates and tankers working on shared airplane queues."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import Callable, Sequence

from .airplane import Airplane, AirplaneType
from .display import render_state
from .model import Gate, Runway, Statistics
from .tanker import Tanker

_RUNWAY_IDLE = 0.1
_GATE_RETRY = 0.1
_STATUS_INTERVAL = 0.5
_SEATING_INTERVAL = 0.5
_PASSENGER_INTERVAL = 3.0
_DISPLAY_INTERVAL = 1.0
_ARRIVAL_GAP = (1, 4)
_GROUP_SIZE = (1, 5)
_GROUP_COUNT = (1, 4)


class Airport:
    """An airport whose runways, tankers and passengers work in background threads.

    Airplanes move from ``in_flight`` through ``in_service`` (parked at a gate)
    to ``waiting`` (ready for take-off) and then leave. Every step can also be
    driven by hand through the public methods.
    """

    def __init__(
        self,
        num_runways: int = 4,
        num_gates: int = 6,
        num_tankers: int = 3,
        tank_time: float = 0.5,
        seed: int | None = None,
    ) -> None:
        for name, value in (
            ("num_runways", num_runways),
            ("num_gates", num_gates),
            ("num_tankers", num_tankers),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        if tank_time < 0:
            raise ValueError(f"tank_time must not be negative, got {tank_time}")

        self.runways = [Runway() for _ in range(num_runways)]
        self.gates = [Gate() for _ in range(num_gates)]
        self.tankers = [Tanker() for _ in range(num_tankers)]
        self.tank_time = tank_time
        self.take_seat_delay = 0.1

        self.in_flight: list[Airplane] = []
        self.in_service: list[Airplane] = []
        self.waiting: list[Airplane] = []
        self.statistics = Statistics()
        self.queue_lock = threading.Lock()

        master = random.Random(seed)
        self._arrival_rng = random.Random(master.random())
        self._passenger_rng = random.Random(master.random())
        self._next_flight_number = 0
        self._stop_event = threading.Event()
        self._threads: list[threading.Thread] = []

    def __repr__(self) -> str:
        return (
            f"Airport(runways={len(self.runways)}, gates={len(self.gates)}, "
            f"tankers={len(self.tankers)})"
        )

    # -- airplane flow -----------------------------------------------------

    def add_airplane(self, airplane_type: AirplaneType | int) -> Airplane:
        """Put a new airplane with the next flight number into the air."""
        with self.queue_lock:
            airplane = Airplane(
                self._next_flight_number, airplane_type, self.take_seat_delay
            )
            self.in_flight.append(airplane)
            self._next_flight_number += 1
        return airplane

    def is_gate_available(self) -> bool:
        """Whether any gate is free."""
        return any(gate.is_available for gate in self.gates)

    def _pop_first(self, queue: list[Airplane]) -> Airplane | None:
        with self.queue_lock:
            return queue.pop(0) if queue else None

    def _dock(self) -> Gate | None:
        while True:
            for gate in self.gates:
                if gate.dock_lock.acquire(blocking=False):
                    return gate
            if self.pause(_GATE_RETRY):
                return None

    def manage_landing(self, runway: Runway) -> Airplane | None:
        """Land the first airplane in the air and park it at a gate.

        Returns the landed airplane, or ``None`` when nothing was waiting to land
        or the airport stopped before a gate became free.
        """
        airplane = self._pop_first(self.in_flight)
        if airplane is None:
            self.pause(_RUNWAY_IDLE)
            return None

        runway.is_landing = True
        runway.airplane = airplane

        gate = self._dock()
        if gate is None:
            with self.queue_lock:
                self.in_flight.insert(0, airplane)
            runway.is_landing = False
            runway.airplane = None
            return None

        self.pause(airplane.maneuver_seconds)

        with self.queue_lock:
            self.in_service.append(airplane)

        gate.is_available = False
        gate.airplane = airplane
        runway.is_landing = False
        runway.airplane = None
        airplane.landing_time = time.monotonic()
        return airplane

    def manage_taking_off(self, runway: Runway) -> Airplane | None:
        """Send the first airplane ready for departure off and free its gate.

        Returns the departed airplane, or ``None`` when none was waiting.
        """
        airplane = self._pop_first(self.waiting)
        if airplane is None:
            self.pause(_RUNWAY_IDLE)
            return None

        runway.is_taking_off = True
        runway.airplane = airplane
        now = time.monotonic()
        airplane.actual_take_off_time = now
        landed = airplane.landing_time if airplane.landing_time is not None else now
        ready = (
            airplane.ready_to_take_off_time
            if airplane.ready_to_take_off_time is not None
            else now
        )
        self.statistics.record(ready - landed, now - ready)

        self.pause(airplane.maneuver_seconds)

        gate = next(
            (
                g
                for g in self.gates
                if g.airplane is not None
                and g.airplane.flight_number == airplane.flight_number
            ),
            None,
        )
        if gate is not None:
            gate.is_available = True
            gate.airplane = None
            gate.dock_lock.release()
        runway.is_taking_off = False
        runway.airplane = None
        return airplane

    def run_runway_step(self, runway: Runway) -> Airplane | None:
        """One turn of a runway: land and take off alternately.

        Only take-offs happen while every gate is busy. Returns the airplane
        handled, if any.
        """
        if not self.is_gate_available():
            handled = self.manage_taking_off(runway)
        elif runway.permission % 2 == 0:
            handled = self.manage_landing(runway)
        else:
            handled = self.manage_taking_off(runway)
        runway.permission += 1
        return handled

    def check_status(self) -> list[Airplane]:
        """Move airplanes that are fuelled and fully boarded to the departure queue."""
        with self.queue_lock:
            ready = [a for a in self.in_service if a.is_ready_for_departure()]
            now = time.monotonic()
            for airplane in ready:
                self.in_service.remove(airplane)
                self.waiting.append(airplane)
                airplane.ready_to_take_off_time = now
        return ready

    # -- passengers --------------------------------------------------------

    def generate_passenger_groups(self) -> None:
        """Add one to four groups of one to five passengers to every gate."""
        rng = self._passenger_rng
        for gate in self.gates:
            with gate.passenger_lock:
                for _ in range(rng.randint(*_GROUP_COUNT)):
                    gate.passenger_groups.append(rng.randint(*_GROUP_SIZE))

    def seat_passengers(self) -> int:
        """Board queued groups onto the airplanes at the gates.

        Groups that find no adjacent free seats stay queued. Returns the
        number of groups seated.
        """
        seated = 0
        for gate in self.gates:
            with gate.passenger_lock:
                airplane = gate.airplane
                if airplane is None or not gate.passenger_groups:
                    continue
                remaining = []
                for size in gate.passenger_groups:
                    if airplane.try_take_seat(size):
                        seated += 1
                    else:
                        remaining.append(size)
                gate.passenger_groups = remaining
        return seated

    # -- display -----------------------------------------------------------

    def render(self) -> str:
        """The current status screen as text."""
        with self.queue_lock:
            return render_state(
                len(self.in_flight),
                len(self.in_service),
                len(self.waiting),
                self.statistics,
                self.runways,
                self.tankers,
                self.gates,
            )

    # -- background threads ------------------------------------------------

    def stopped(self) -> bool:
        """Whether :meth:`stop` has been called."""
        return self._stop_event.is_set()

    def pause(self, seconds: float) -> bool:
        """Wait up to ``seconds``, returning early with ``True`` once stopped."""
        if seconds <= 0:
            return self.stopped()
        return self._stop_event.wait(seconds)

    def _loop(self, interval: float, step: Callable[[], object]) -> None:
        while not self.stopped():
            step()
            self.pause(interval)

    def _generate_airplanes(self) -> None:
        rng = self._arrival_rng
        while not self.pause(rng.randint(*_ARRIVAL_GAP)):
            self.add_airplane(AirplaneType(rng.randint(0, len(AirplaneType) - 1)))

    def _generate_passengers(self) -> None:
        while not self.pause(_PASSENGER_INTERVAL):
            self.generate_passenger_groups()

    def _seat_loop(self) -> None:
        while not self.pause(_SEATING_INTERVAL):
            self.seat_passengers()

    def _display(self) -> None:
        self._loop(_DISPLAY_INTERVAL, lambda: print(self.render(), end="", flush=True))

    def start(self) -> None:
        """Start every background thread of the airport."""
        if self._threads:
            raise RuntimeError("airport already started")
        self._stop_event.clear()
        targets: list[tuple[Callable[..., object], tuple]] = [
            (self._generate_airplanes, ()),
            (self._display, ()),
            (self._loop, (_STATUS_INTERVAL, self.check_status)),
            (self._generate_passengers, ()),
            (self._seat_loop, ()),
        ]
        targets += [(tanker.run, (self, self.tank_time)) for tanker in self.tankers]
        targets += [
            (self._loop, (_RUNWAY_IDLE, lambda r=runway: self.run_runway_step(r)))
            for runway in self.runways
        ]
        for target, args in targets:
            thread = threading.Thread(target=target, args=args, daemon=True)
            self._threads.append(thread)
            thread.start()

    def stop(self) -> None:
        """Signal every thread to finish and wait for them."""
        self._stop_event.set()
        for thread in self._threads:
            thread.join()
        self._threads = []


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the airport simulation until interrupted."""
    parser = argparse.ArgumentParser(description="Simulate a busy airport.")
    parser.add_argument("--runways", type=_non_negative, default=4)
    parser.add_argument("--gates", type=_non_negative, default=6)
    parser.add_argument("--tankers", type=_non_negative, default=3)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    airport = Airport(args.runways, args.gates, args.tankers, seed=args.seed)
    airport.start()
    try:
        while not airport.pause(1.0):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        airport.stop()
    return 0