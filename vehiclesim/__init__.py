"""Two-dimensional vehicle motion simulation with collision detection, run history and replay."""

__version__ = "0.1.0"
__all__ = ["models", "simulation", "cli"]