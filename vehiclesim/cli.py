"""Interactive menu for building and running vehicle simulations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, TextIO, TypeVar

from .models import Settings, Vehicle
from .simulation import Simulation

_T = TypeVar("_T")

_MENU = (
    "\n=== Vehicle Simulation Menu ===\n"
    "1. Add Vehicle\n"
    "2. View Vehicles\n"
    "3. Start Simulation\n"
    "4. View History\n"
    "5. Replay Run\n"
    "0. Exit\n"
    "Choice: "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Console:
    """Reads whitespace-separated answers to prompts."""

    def __init__(self, stream_in: TextIO, out: TextIO) -> None:
        self._tokens = _tokens(stream_in)
        self._out = out

    def write(self, text: str) -> None:
        self._out.write(text)

    def ask(self, prompt: str, convert: Callable[[str], _T]) -> _T:
        self._out.write(prompt)
        self._out.flush()
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError from None
        return convert(token)


def _add_vehicle(console: _Console, sim: Simulation) -> None:
    unit = sim.settings.speed_unit
    try:
        vehicle = Vehicle(
            id=console.ask("Vehicle ID: ", int),
            x=console.ask("Initial X: ", float),
            y=console.ask("Initial Y: ", float),
            speed=console.ask(f"Speed ({unit}): ", float),
            direction=console.ask("Direction (degrees): ", float),
            length=console.ask("Length (m): ", float),
        )
    except ValueError:
        console.write("Invalid input.\n")
        return
    sim.add_vehicle(vehicle)
    console.write("Vehicle added successfully.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive simulation menu until the user exits."""
    parser = argparse.ArgumentParser(
        prog="vehiclesim", description="Interactive vehicle movement simulation."
    )
    parser.parse_args(argv)

    out = sys.stdout
    console = _Console(sys.stdin, out)
    sim = Simulation(Settings(1.0, 5.0, "m/s", True), out=out)

    try:
        while True:
            try:
                choice = console.ask(_MENU, int)
            except ValueError:
                continue
            if choice == 0:
                break
            if choice == 1:
                _add_vehicle(console, sim)
            elif choice == 2:
                sim.view_vehicles()
            elif choice == 3:
                try:
                    sim.start()
                except ValueError as exc:
                    console.write(f"{exc}\n")
            elif choice == 4:
                sim.view_history()
            elif choice == 5:
                try:
                    run_id = console.ask("Run ID: ", int)
                    sim.replay_run(run_id)
                except (ValueError, KeyError):
                    console.write("Run ID not found.\n")
    except EOFError:
        console.write("\n")

    console.write("Exiting program...\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())