"""
WorldConfig: every tunable constant of the simulation in one place.

The reference behaviour uses bare literals (G = 1, launch mass in [3, 8),
unit fragment kick, 0.02 drag scale). They live here as named fields so
worlds with different constants can coexist.
"""

from dataclasses import dataclass


@dataclass
class WorldConfig:
    """Configuration for a simulation world."""

    # Sun (fixed attractor)
    sun_x: float = 0.0
    sun_y: float = 0.0
    sun_mass: float = 1000.0
    sun_radius: float = 30.0
    sun_color: str = "yellow"

    # Force model
    gravitational_constant: float = 1.0

    # Launched planets: mass ~ U[launch_mass_min, launch_mass_max)
    launch_mass_min: float = 3.0
    launch_mass_max: float = 8.0
    planet_radius_offset: float = 2.0  # radius = offset + mass

    # Fragmentation
    fragment_radius_offset: float = 1.0  # radius = offset + mass
    max_fragments: int = 10  # Cap on pieces per destroyed planet
    fragment_kick_speed: float = 1.0  # Magnitude of the random velocity kick

    # Drag gesture → launch velocity (pixel delta * scale)
    drag_velocity_scale: float = 0.02

    # Record (x, y, vx, vy) samples on every planet after each step
    record_trajectories: bool = False

    def __post_init__(self):
        if self.sun_mass <= 0:
            raise ValueError(f"sun_mass must be positive, got {self.sun_mass}")
        if self.sun_radius <= 0:
            raise ValueError(f"sun_radius must be positive, got {self.sun_radius}")
        if not 0 < self.launch_mass_min < self.launch_mass_max:
            raise ValueError(
                "launch mass range must satisfy 0 < min < max, got "
                f"[{self.launch_mass_min}, {self.launch_mass_max})"
            )
        if self.max_fragments < 1:
            raise ValueError(f"max_fragments must be >= 1, got {self.max_fragments}")
