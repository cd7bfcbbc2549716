"""
Integrator: per-frame velocity and position update.

Scheme (implicit unit time step):
1. v += F(planet, sun) / m                  (every planet, fragments included)
2. v += F(planet, other) / m                (non-fragments only, for every
                                             other non-fragment planet)
3. x += v

Planets are updated one at a time in registry order. Each planet reads
the positions the others have at that moment, including ones already
moved this frame (Gauss-Seidel order, not a simultaneous update).
Fragment-vs-anything planet gravity is skipped to keep fragment swarms
cheap; fragments only feel the sun.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planetsim.core.forces import acceleration_towards

if TYPE_CHECKING:
    from planetsim.core.bodies import Planet
    from planetsim.core.registry import BodyRegistry


@dataclass
class SequentialIntegrator:
    """Sequential semi-implicit Euler step over the registry."""

    gravitational_constant: float = 1.0
    record_trajectories: bool = False

    def step(self, registry: "BodyRegistry") -> None:
        """Advance every live planet by one frame."""
        for planet in registry:
            if planet.is_destroyed:
                continue
            self._accelerate(planet, registry)
            planet.x += planet.vx
            planet.y += planet.vy
            if self.record_trajectories:
                planet.record_state()

    def _accelerate(self, planet: "Planet", registry: "BodyRegistry") -> None:
        """Add this frame's velocity delta to planet."""
        G = self.gravitational_constant

        ax, ay = acceleration_towards(planet, registry.sun, G)
        planet.vx += ax
        planet.vy += ay

        if planet.is_fragment:
            return

        for other in registry:
            if other is planet or other.is_fragment or other.is_destroyed:
                continue
            ax, ay = acceleration_towards(planet, other, G)
            planet.vx += ax
            planet.vy += ay
