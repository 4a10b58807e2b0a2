"""Step-based vehicle simulation with collision checks and a history of runs."""

from __future__ import annotations

import copy
import enum
import itertools
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, TextIO

from .models import Settings, Vehicle

MAX_SIMULATION_TIME = 5.0
"""Simulated seconds after which a run without collision is stopped."""

_SEPARATOR = "---------------------------------"


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class LogEntry:
    """State of all vehicles at one point in simulated time."""

    time: float
    positions: list[Vehicle] = field(default_factory=list)


class RunStatus(enum.Enum):
    """Outcome of a simulation run."""

    RUNNING = "Running"
    COLLISION = "Collision"
    STOPPED = "Stopped"


@dataclass
class RunRecord:
    """A simulation run: its id, status, elapsed time and logged steps."""

    run_id: int
    status: RunStatus = RunStatus.RUNNING
    logs: list[LogEntry] = field(default_factory=list)
    elapsed: float = 0.0


class Simulation:
    """Holds vehicles, runs the simulation and keeps past runs."""

    def __init__(
        self,
        settings: Settings | None = None,
        out: TextIO | None = None,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self._out = out if out is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep
        self._vehicles: list[Vehicle] = []
        self._past_runs: list[RunRecord] = []
        self._next_run_id = 1

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        """Vehicles currently in the simulation."""
        return tuple(self._vehicles)

    @property
    def past_runs(self) -> tuple[RunRecord, ...]:
        """Finished runs, oldest first."""
        return tuple(self._past_runs)

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Add a copy of ``vehicle`` to the simulation."""
        self._vehicles.append(copy.copy(vehicle))

    def view_vehicles(self) -> None:
        """Print every vehicle's id, position, speed, direction and length."""
        if not self._vehicles:
            self._print("No vehicles available.")
            return
        for v in self._vehicles:
            self._print(
                f"ID: {v.id} Pos({_fmt(v.x)},{_fmt(v.y)})"
                f" Speed: {_fmt(v.speed)} Dir: {_fmt(v.direction)}"
                f" Len: {_fmt(v.length)}"
            )

    def start(self) -> RunRecord:
        """Run until a collision or the time limit, record and return the run.

        Raises ValueError when fewer than two vehicles are present.
        """
        if len(self._vehicles) < 2:
            raise ValueError("Need at least 2 vehicles to start simulation.")

        run = RunRecord(run_id=self._next_run_id)
        self._next_run_id += 1

        self._print("\n🚗 Simulation started...\n")

        running = True
        while running:
            self.step(run)

            self._print(f"Time: {_fmt(run.elapsed)}s")
            for v in self._vehicles:
                self._print(f"  Vehicle {v.id} at ({_fmt(v.x)}, {_fmt(v.y)})")
            self._print(_SEPARATOR)
            self._out.flush()

            if self.check_collision(self._vehicles):
                self._print("\n💥 [ALERT] Collision imminent! Stopping simulation.")
                run.status = RunStatus.COLLISION
                running = False

            self._sleep(max(0, int(self.settings.time_step * 1000)) / 1000)

            if run.elapsed >= MAX_SIMULATION_TIME and run.status is RunStatus.RUNNING:
                self._print("\n⏹️  Max simulation time reached. Stopping.")
                running = False

        if run.status is RunStatus.RUNNING:
            run.status = RunStatus.STOPPED
        self._past_runs.append(run)

        self._print(f"\nSimulation ended. Status: {run.status.value}")
        return run

    def view_history(self) -> None:
        """Print id, number of logged steps and status of each past run."""
        if not self._past_runs:
            self._print("No past runs.")
            return
        for r in self._past_runs:
            self._print(f"Run ID: {r.run_id} Steps: {len(r.logs)} Status: {r.status.value}")

    def replay_run(self, run_id: int) -> None:
        """Print the logged positions of a past run step by step.

        Raises KeyError when no run has the given id.
        """
        run = next((r for r in self._past_runs if r.run_id == run_id), None)
        if run is None:
            raise KeyError(run_id)
        self._print(f"\n=== Replay of Run {run.run_id} ===")
        for entry in run.logs:
            self._print(f"Time: {_fmt(entry.time)}s")
            for v in entry.positions:
                self._print(f"  Vehicle {v.id} Pos({_fmt(v.x)}, {_fmt(v.y)})")
            self._print(_SEPARATOR)

    def step(self, run: RunRecord) -> None:
        """Advance all vehicles one time step and log the state into ``run``."""
        dt = self.settings.time_step
        run.elapsed += dt
        for v in self._vehicles:
            v.advance(dt)
        if self.settings.enable_logging:
            run.logs.append(
                LogEntry(time=run.elapsed, positions=[copy.copy(v) for v in self._vehicles])
            )

    def check_collision(self, vehicles: Iterable[Vehicle]) -> bool:
        """Return True if any two vehicles are within the longer length plus safety distance."""
        for a, b in itertools.combinations(list(vehicles), 2):
            min_dist = max(a.length, b.length) + self.settings.safety_distance
            if a.distance_to(b) <= min_dist:
                return True
        return False