# airportsim

airportsim is a console simulation of a busy airport. Airplanes of four
sizes arrive at random intervals of one to four seconds and land on free
runways. Each plane then parks at a gate. Fuel tankers fill its tank while
groups of passengers board, and the members of a group always sit next to
each other in one row. When a plane has a full tank and every seat is taken,
it joins the queue for take-off. Its gate becomes free again once it leaves.

Each runway alternates between landings and take-offs. While every gate is
busy, runways handle take-offs only.

Every second the console shows:

- how many planes are in flight, in service and waiting to take off
- the average service time and the average wait time of the planes that have
  departed, in whole seconds
- each runway's state (`F` free, `T` taking off, `L` landing) and the flight
  on it
- each tanker's fuel level
- each gate's state (`F` free, `B` busy), the flight docked there, that
  flight's fuel and the number of passengers queued at the gate
- a seat map of every docked plane, where `x` marks a taken seat and `-` a
  free one

## Installation

```
pip install .
```

The package needs only the Python standard library, version 3.10 or later.

## Running

```
airportsim
```

The simulation runs until you stop it with Ctrl+C. Options:

| Option      | Default | Meaning                                 |
|-------------|---------|-----------------------------------------|
| `--runways` | 4       | number of runways                       |
| `--gates`   | 6       | number of gates                         |
| `--tankers` | 3       | number of fuel tankers                  |
| `--seed`    | none    | seed for arrivals and passenger groups  |

The counts must not be negative.

## Using it from Python

```python
from airportsim.airport import Airport
from airportsim.airplane import AirplaneType

airport = Airport(num_runways=2, num_gates=3, num_tankers=1, seed=42)
airport.add_airplane(AirplaneType.SMALL)
print(airport.render())
```

The plane types and their sizes:

| Type     | Rows | Seats per row | Tank | Take-off/landing |
|----------|------|---------------|------|------------------|
| `SMALL`  | 4    | 4             | 70   | 2 s              |
| `MEDIUM` | 8    | 5             | 110  | 3 s              |
| `LARGE`  | 10   | 5             | 150  | 4 s              |
| `MAX`    | 15   | 6             | 220  | 6 s              |

`Airport` also accepts `tank_time`, the pause after each 10-unit fuel
transfer, which defaults to 0.5 s. Each tanker carries 150 units. When a
tanker runs dry it spends 3 s refilling.

You can drive the simulation by hand with the single steps of `Airport`:

- `add_airplane`
- `manage_landing`
- `manage_taking_off`
- `run_runway_step`
- `check_status`
- `generate_passenger_groups`
- `seat_passengers`

Each step that moves a plane returns the airplane it handled. `start()` runs
every worker thread and `stop()` signals them to finish, then waits for them.

The modules:

- `airportsim.airplane`: `Airplane` and `AirplaneType`
- `airportsim.tanker`: `Tanker`
- `airportsim.model`: `Runway`, `Gate` and `Statistics`
- `airportsim.display`: the `render_*` functions that build the text tables
- `airportsim.airport`: `Airport` and the `main` command

## Limitations

The simulation is text only. It plays no sounds and has no graphical view.
It does not save its state between runs.

## Tests

```
pip install .[test]
pytest
```