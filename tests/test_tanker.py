import threading

from airportsim.airplane import Airplane, AirplaneType
from airportsim.tanker import Tanker


class FakeGate:
    def __init__(self, airplane=None):
        self.airplane = airplane


class FakeAirport:
    def __init__(self, gates, rounds=10):
        self.queue_lock = threading.Lock()
        self.gates = gates
        self.rounds = rounds
        self.pauses = []

    def stopped(self):
        self.rounds -= 1
        return self.rounds < 0

    def pause(self, seconds):
        self.pauses.append(seconds)


def plane(kind, flight=1):
    return Airplane(flight, kind, take_seat_delay=0)


def test_defaults():
    tanker = Tanker()
    assert tanker.fuel_capacity == 150
    assert tanker.fuel_level == tanker.fuel_capacity
    assert tanker.is_refilling is False


def test_refill_restores_capacity():
    tanker = Tanker(refill_time=0)
    tanker.fuel_level = 0
    tanker.refill()
    assert tanker.fuel_level == tanker.fuel_capacity
    assert tanker.is_refilling is False


def test_refuel_small_airplane_fully():
    tanker = Tanker(refill_time=0)
    airplane = plane(AirplaneType.SMALL)
    moved = tanker.refuel(airplane, 0)
    assert airplane.current_fuel == airplane.tank_capacity
    assert moved == airplane.tank_capacity
    assert tanker.fuel_level == tanker.fuel_capacity - airplane.tank_capacity


def test_refuel_stops_when_tanker_runs_dry():
    tanker = Tanker(refill_time=0)
    airplane = plane(AirplaneType.MAX)
    moved = tanker.refuel(airplane, 0)
    assert airplane.current_fuel == tanker.fuel_capacity
    assert moved == tanker.fuel_capacity
    assert airplane.current_fuel < airplane.tank_capacity
    assert tanker.fuel_level == tanker.fuel_capacity


def test_refuel_handles_partial_steps():
    tanker = Tanker(fuel_capacity=25, refill_time=0)
    airplane = plane(AirplaneType.SMALL)
    tanker.refuel(airplane, 0)
    assert airplane.current_fuel == 25
    assert tanker.fuel_level == 25


def test_refuel_full_airplane_transfers_nothing():
    tanker = Tanker(refill_time=0)
    airplane = plane(AirplaneType.SMALL)
    airplane.current_fuel = airplane.tank_capacity
    assert tanker.refuel(airplane, 0) == 0
    assert tanker.fuel_level == tanker.fuel_capacity


def test_claim_target_skips_empty_full_and_busy():
    full = plane(AirplaneType.SMALL, 1)
    full.current_fuel = full.tank_capacity
    busy = plane(AirplaneType.SMALL, 2)
    busy.is_refueling = True
    wanted = plane(AirplaneType.MEDIUM, 3)
    airport = FakeAirport([FakeGate(), FakeGate(full), FakeGate(busy), FakeGate(wanted)])
    tanker = Tanker()
    assert tanker.claim_target(airport) is wanted
    assert wanted.is_refueling is True
    assert tanker.claim_target(airport) is None


def test_release_clears_flag():
    airplane = plane(AirplaneType.SMALL)
    airplane.is_refueling = True
    airport = FakeAirport([FakeGate(airplane)])
    Tanker().release(airport, airplane)
    assert airplane.is_refueling is False


def test_run_refuels_parked_airplanes_until_stopped():
    first = plane(AirplaneType.SMALL, 1)
    second = plane(AirplaneType.SMALL, 2)
    airport = FakeAirport([FakeGate(first), FakeGate(second)], rounds=5)
    tanker = Tanker(refill_time=0)
    tanker.run(airport, 0)
    assert first.current_fuel == first.tank_capacity
    assert second.current_fuel == second.tank_capacity
    assert not first.is_refueling and not second.is_refueling
    assert airport.pauses


def test_run_idles_without_airplanes():
    airport = FakeAirport([FakeGate(), FakeGate()], rounds=3)
    tanker = Tanker()
    tanker.run(airport, 0)
    assert airport.pauses == [0.5, 0.5, 0.5]
    assert tanker.fuel_level == tanker.fuel_capacity