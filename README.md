# vehiclesim

A small console simulation of vehicles moving in a 2D plane. Each vehicle has a
position, a speed, a heading in degrees (0 is east, 90 is north) and a length.
At every time step all vehicles move in a straight line along their heading.
A run stops when two vehicles are within the larger of their two lengths plus
a safety distance of each other, or once five simulated seconds have passed.
Every finished run is kept in a history so that it can be replayed step by
step.

## Installation

```
pip install .
```

## Interactive use

```
vehiclesim
```

The same menu can also be started with `python -m vehiclesim.cli`. It shows:

```
=== Vehicle Simulation Menu ===
1. Add Vehicle
2. View Vehicles
3. Start Simulation
4. View History
5. Replay Run
0. Exit
```

- **Add Vehicle** asks for an integer id, then the initial X and Y, the speed,
  the direction in degrees and the length in metres. If an answer is not a
  number, the program prints `Invalid input.` and does not add the vehicle.
- **Start Simulation** needs at least two vehicles. Otherwise it prints
  `Need at least 2 vehicles to start simulation.`
- **Replay Run** asks for a run id and prints `Run ID not found.` if there is
  no run with that id.

Answers are read as whitespace-separated tokens. A menu choice that is not an
integer is ignored and the menu is shown again. At the end of input the
program exits.

The menu uses a one-second time step and a five-metre safety distance, shows
speeds in m/s, and has logging turned on.

## Library use

```python
from vehiclesim.models import Settings, Vehicle
from vehiclesim.simulation import Simulation

sim = Simulation(Settings(time_step=0.5, safety_distance=5.0))
sim.add_vehicle(Vehicle(1, x=0, y=0, speed=1, direction=0, length=2))
sim.add_vehicle(Vehicle(2, x=20, y=0, speed=1, direction=180, length=2))
run = sim.start()
print(run.status, len(run.logs))
sim.view_history()
sim.replay_run(1)
```

### `vehiclesim.models`

- `Settings(time_step=1.0, safety_distance=5.0, speed_unit="m/s", enable_logging=True)`
  holds the configuration. `speed_unit` is only the label shown in the speed
  prompt. No conversion between units takes place.
- `Vehicle(id, x, y, speed, direction, length)` is a dataclass.
  `Vehicle.advance(dt)` moves the vehicle along its heading for `dt` seconds.
  `Vehicle.distance_to(other)` returns the straight-line distance between two
  vehicles.

### `vehiclesim.simulation`

- `Simulation(settings=None, out=None, sleep=None)` writes to `out` (standard
  output by default). After each step it waits by calling `sleep` with the time
  step in seconds, truncated to whole milliseconds. The default for `sleep` is
  `time.sleep`. Pass `sleep=lambda seconds: None` to run without pausing.
- `add_vehicle(vehicle)` stores a copy of the vehicle. The `vehicles` and
  `past_runs` properties return tuples of the current vehicles and of the
  finished runs.
- `view_vehicles()` and `view_history()` print the vehicles and the past runs.
- `start()` runs until a collision occurs or the time limit is reached. It
  records the run and returns it as a `RunRecord`. It raises `ValueError` when
  fewer than two vehicles are present.
- `replay_run(run_id)` prints the logged positions of a past run. It raises
  `KeyError` for an unknown id.
- `step(run)` moves every vehicle forward by one time step. When logging is on,
  it appends a `LogEntry` with copies of the vehicles to `run.logs`.
- `check_collision(vehicles)` reports whether any pair of the given vehicles is
  too close.
- `RunRecord` holds `run_id`, `status`, `logs` and `elapsed`. `RunStatus` is
  one of `RUNNING`, `COLLISION` or `STOPPED`.

The simulation keeps vehicles in place between runs, so a second `start()`
continues from the positions where the last run ended.

## What it does not do

Vehicles and run history exist only in memory. Nothing is saved to disk, and
everything is lost when the program exits. Vehicles cannot be edited or
removed once they have been added. Vehicles do not steer, brake or change
speed: the simulation only detects that vehicles are close and stops the run.

## Tests

```
pip install .[test]
pytest
```