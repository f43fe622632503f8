"""Text rendering of the airport state as tables."""

from __future__ import annotations

from collections.abc import Sequence

from .model import Gate, Runway, Statistics
from .tanker import Tanker

_SEPARATOR = "=" * 88
_SEAT_COLUMN = 30


def _table(cell_width: int, count: int, rows: Sequence[tuple[Sequence[object], str]]) -> str:
    border = "+" + ("-" * (cell_width + 2) + "+") * count + "\n"
    lines = [border]
    for cells, label in rows:
        body = "".join(f" {str(cell):>{cell_width}} |" for cell in cells)
        lines.append(f"|{body}  <- {label}\n")
        lines.append(border)
    return "".join(lines)


def _flight(airplane) -> str:
    return "-" if airplane is None else str(airplane.flight_number)


def render_statistics(statistics: Statistics) -> str:
    """Average service and wait times, or nothing before the first departure."""
    if statistics.count <= 0:
        return ""
    return (
        "\n"
        f"Average service time for planes: {statistics.average_service_time()}s\n"
        f"Average wait time for planes: {statistics.average_wait_time()}s\n"
    )


def render_runways(runways: Sequence[Runway]) -> str:
    """Table of runway ids, states and the flights using them."""
    rows = [
        (range(len(runways)), "Runway ID"),
        ([runway.status() for runway in runways], "F: free, T: taking off, L: landing"),
        ([_flight(runway.airplane) for runway in runways], "Flight Number"),
    ]
    return "Runways: \n" + _table(2, len(runways), rows)


def render_gates(gates: Sequence[Gate]) -> str:
    """Table of gate ids, occupancy, parked flights, their fuel and queued passengers."""
    fuel = [
        "-" if gate.airplane is None
        else f"{gate.airplane.current_fuel}/{gate.airplane.tank_capacity}"
        for gate in gates
    ]
    rows = [
        (range(len(gates)), "Gate ID"),
        (["F" if gate.is_available else "B" for gate in gates], "F: free, B: busy"),
        ([_flight(gate.airplane) for gate in gates], "Flight number"),
        (fuel, "fuel status"),
        ([gate.total_passengers() for gate in gates], "all passengers"),
    ]
    return "Gates: \n" + _table(10, len(gates), rows)


def render_tankers(tankers: Sequence[Tanker]) -> str:
    """Table of tanker ids and their fuel levels."""
    rows = [
        (range(len(tankers)), "Tanker ID"),
        ([f"{t.fuel_level}/{t.fuel_capacity}" for t in tankers], "fuel status"),
    ]
    return "Tankers: \n" + _table(10, len(tankers), rows)


def render_seats(gates: Sequence[Gate]) -> str:
    """Seat maps of the airplanes at the gates, side by side; ``x`` marks a taken seat."""
    snapshots = [
        None if gate.airplane is None else gate.airplane.seats_snapshot()
        for gate in gates
    ]
    if all(snapshot is None for snapshot in snapshots):
        return "\n[INFO] No airplanes assigned to gates.\n"

    blank = " ".ljust(_SEAT_COLUMN)
    out = ["\n"]
    out.extend(f"Gate ID: {index}".ljust(_SEAT_COLUMN) for index in range(len(gates)))
    out.append("\n")

    max_rows = max(len(seats) for seats in snapshots if seats is not None)
    for row in range(max_rows):
        for seats in snapshots:
            if seats is None or row >= len(seats):
                out.append(blank)
                continue
            symbols = " ".join("x" if taken else "-" for taken in seats[row])
            out.append(f"| {symbols} |".ljust(_SEAT_COLUMN))
        out.append("\n")
    return "".join(out)


def render_state(
    in_flight: int,
    in_service: int,
    waiting: int,
    statistics: Statistics,
    runways: Sequence[Runway],
    tankers: Sequence[Tanker],
    gates: Sequence[Gate],
) -> str:
    """The full status screen: queue sizes, statistics and every table."""
    return "".join(
        [
            "\n\n",
            _SEPARATOR,
            "\n",
            f"in flight: {in_flight}\n",
            f"in service: {in_service}\n",
            f"waiting: {waiting}\n",
            "\n",
            render_statistics(statistics),
            render_runways(runways),
            render_tankers(tankers),
            render_gates(gates),
            render_seats(gates),
            "\n",
            _SEPARATOR,
            "\n\n",
        ]
    )