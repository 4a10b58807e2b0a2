"""Simulation settings and the vehicle model."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration of a simulation run."""

    time_step: float = 1.0
    """Length of one simulation step in seconds."""
    safety_distance: float = 5.0
    """Extra clearance in metres kept between vehicles."""
    speed_unit: str = "m/s"
    """Unit shown to the user when entering speeds."""
    enable_logging: bool = True
    """Whether each step's vehicle positions are recorded."""


@dataclass
class Vehicle:
    """A vehicle moving in a straight line on the plane.

    Direction is in degrees: 0 is east, 90 is north.
    """

    id: int = 0
    x: float = 0.0
    y: float = 0.0
    speed: float = 0.0
    direction: float = 0.0
    length: float = 0.0

    def advance(self, dt: float) -> None:
        """Move the vehicle along its heading for ``dt`` seconds."""
        rad = math.radians(self.direction)
        self.x += math.cos(rad) * self.speed * dt
        self.y += math.sin(rad) * self.speed * dt

    def distance_to(self, other: Vehicle) -> float:
        """Return the straight-line distance between the two vehicles' positions."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)