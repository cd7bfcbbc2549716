"""
Bodies: the sun and the planets that move around it.

Both share a positional/renderable capability (Body). They are otherwise
distinct variants:
- Sun: fixed position, mass, radius. Never integrated, never destroyed.
- Planet: position and velocity mutated every frame, constant mass and
  radius, a permanent fragment flag and a write-once destroyed flag.

Planets are built from a PlanetConfig by the registry, which owns identity.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np


@dataclass(frozen=True)
class RenderableBody:
    """Read-only snapshot of a body for the presentation layer."""

    kind: Literal["sun", "planet"]
    planet_id: int | None  # None for the sun
    x: float
    y: float
    radius: float
    color: Any
    is_fragment: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y


class Body(ABC):
    """
    Common capability of everything in the world: a position, a radius
    and a color to draw it with.
    """

    def __init__(self, x: float, y: float, radius: float, color: Any = None):
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)
        self.color = color

    @property
    def position(self) -> tuple[float, float]:
        """Current position (x, y)."""
        return self.x, self.y

    def distance_to(self, other: "Body") -> float:
        """Distance between this body's center and another's."""
        return float(np.hypot(other.x - self.x, other.y - self.y))

    def overlaps(self, other: "Body") -> bool:
        """True if the two discs are closer than the sum of their radii."""
        return self.distance_to(other) < self.radius + other.radius

    @abstractmethod
    def to_renderable(self) -> RenderableBody:
        """Return an immutable snapshot for drawing."""
        ...


class Sun(Body):
    """The fixed massive attractor at the center of the world."""

    def __init__(self, x: float, y: float, mass: float, radius: float, color: Any = "yellow"):
        super().__init__(x, y, radius, color)
        self.mass = float(mass)

    def to_renderable(self) -> RenderableBody:
        return RenderableBody(
            kind="sun",
            planet_id=None,
            x=self.x,
            y=self.y,
            radius=self.radius,
            color=self.color,
        )

    def __repr__(self) -> str:
        return f"Sun(x={self.x:.3g}, y={self.y:.3g}, mass={self.mass:.3g}, radius={self.radius:.3g})"


@dataclass
class PlanetConfig:
    """Everything needed to construct a planet, minus its identity."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    mass: float = 1.0
    radius: float = 3.0
    color: Any = None
    is_fragment: bool = False

    def __post_init__(self):
        if self.mass <= 0:
            raise ValueError(f"Planet mass must be positive, got {self.mass}")
        if self.radius <= 0:
            raise ValueError(f"Planet radius must be positive, got {self.radius}")


class Planet(Body):
    """
    A mobile body.

    Velocity (vx, vy) is the per-frame displacement; the integrator adds
    force / mass to it and then adds it to the position.
    """

    def __init__(self, planet_id: int, config: PlanetConfig):
        super().__init__(config.x, config.y, config.radius, config.color)
        self.id = planet_id
        self.vx = float(config.vx)
        self.vy = float(config.vy)
        self.mass = float(config.mass)
        self._is_fragment = bool(config.is_fragment)
        self._is_destroyed = False

        # Each entry: (x, y, vx, vy), appended by the integrator when enabled
        self.trajectory: list[tuple[float, float, float, float]] = []

    @property
    def velocity(self) -> tuple[float, float]:
        """Current velocity (vx, vy)."""
        return self.vx, self.vy

    @property
    def speed(self) -> float:
        return float(np.hypot(self.vx, self.vy))

    @property
    def is_fragment(self) -> bool:
        """Fixed at creation."""
        return self._is_fragment

    @property
    def is_destroyed(self) -> bool:
        return self._is_destroyed

    @property
    def is_live(self) -> bool:
        return not self._is_destroyed

    def destroy(self) -> None:
        """Mark the planet destroyed. There is no way back."""
        self._is_destroyed = True

    def record_state(self) -> None:
        """Append the current state to the trajectory."""
        self.trajectory.append((self.x, self.y, self.vx, self.vy))

    def get_trajectory_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return trajectory as (x_array, y_array) for plotting."""
        if not self.trajectory:
            return np.array([]), np.array([])

        traj = np.array(self.trajectory)
        return traj[:, 0], traj[:, 1]

    def to_renderable(self) -> RenderableBody:
        return RenderableBody(
            kind="planet",
            planet_id=self.id,
            x=self.x,
            y=self.y,
            radius=self.radius,
            color=self.color,
            is_fragment=self._is_fragment,
        )

    def __repr__(self) -> str:
        kind = "fragment" if self._is_fragment else "planet"
        state = " destroyed" if self._is_destroyed else ""
        return (
            f"<Planet id={self.id} {kind}{state} pos=({self.x:.3g}, {self.y:.3g}) "
            f"vel=({self.vx:.3g}, {self.vy:.3g}) mass={self.mass:.3g}>"
        )
