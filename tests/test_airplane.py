import pytest

from airportsim.airplane import Airplane, AirplaneType


def make(kind=AirplaneType.SMALL, flight=1):
    return Airplane(flight, kind, take_seat_delay=0)


@pytest.mark.parametrize(
    "kind, rows, per_row, tank, seconds",
    [
        (AirplaneType.SMALL, 4, 4, 70, 2),
        (AirplaneType.MEDIUM, 8, 5, 110, 3),
        (AirplaneType.LARGE, 10, 5, 150, 4),
        (AirplaneType.MAX, 15, 6, 220, 6),
    ],
)
def test_type_specs(kind, rows, per_row, tank, seconds):
    plane = make(kind)
    assert (plane.rows, plane.seats_per_row, plane.tank_capacity, plane.maneuver_seconds) == (
        rows,
        per_row,
        tank,
        seconds,
    )
    assert plane.current_fuel == 0
    assert plane.is_refueling is False


def test_type_from_int():
    plane = Airplane(7, 2, take_seat_delay=0)
    assert plane.airplane_type is AirplaneType.LARGE
    assert plane.flight_number == 7


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Airplane(1, 9)


def test_new_airplane_has_empty_seats():
    plane = make(AirplaneType.MEDIUM)
    seats = plane.seats_snapshot()
    assert len(seats) == plane.rows
    assert all(len(row) == plane.seats_per_row for row in seats)
    assert not any(any(row) for row in seats)


def test_family_seated_together_in_first_row():
    plane = make()
    assert plane.try_take_seat(3) is True
    seats = plane.seats_snapshot()
    assert seats[0] == [True, True, True, False]
    assert not any(seats[1])


def test_family_moves_to_next_row_when_not_fitting():
    plane = make()
    assert plane.try_take_seat(3)
    assert plane.try_take_seat(2)
    seats = plane.seats_snapshot()
    assert seats[0] == [True, True, True, False]
    assert seats[1] == [True, True, False, False]


def test_single_fills_gap_in_first_row():
    plane = make()
    plane.try_take_seat(3)
    plane.try_take_seat(1)
    assert plane.seats_snapshot()[0] == [True, True, True, True]


def test_family_larger_than_row_rejected():
    plane = make()
    assert plane.try_take_seat(plane.seats_per_row + 1) is False
    assert not any(any(row) for row in plane.seats_snapshot())


def test_full_airplane_rejects_more():
    plane = make()
    for _ in range(plane.rows):
        assert plane.try_take_seat(plane.seats_per_row)
    assert plane.all_seats_taken() is True
    assert plane.try_take_seat(1) is False


def test_snapshot_is_a_copy():
    plane = make()
    snapshot = plane.seats_snapshot()
    snapshot[0][0] = True
    assert plane.seats_snapshot()[0][0] is False


def test_ready_for_departure_requires_everything():
    plane = make()
    for _ in range(plane.rows):
        plane.try_take_seat(plane.seats_per_row)
    assert plane.is_ready_for_departure() is False
    plane.current_fuel = plane.tank_capacity
    plane.is_refueling = True
    assert plane.is_ready_for_departure() is False
    plane.is_refueling = False
    assert plane.is_ready_for_departure() is True


def test_not_ready_with_free_seat():
    plane = make()
    plane.current_fuel = plane.tank_capacity
    plane.try_take_seat(1)
    assert plane.all_seats_taken() is False
    assert plane.is_ready_for_departure() is False