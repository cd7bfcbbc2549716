"""
Collision & fragmentation engine.

Runs once per frame, before integration, on the pre-update positions:

1. A planet closer to the sun than the sum of radii is destroyed and
   produces nothing (the sun absorbs it). Fragments included.
2. Otherwise a non-fragment planet P is checked against every other live
   non-fragment Q. The first overlapping Q wins: both are destroyed, both
   shatter into fragments, and P stops scanning. At most one planet
   collision per planet per frame.
3. Destroyed planets are removed, then the new fragments are appended.

Fragments are inert to planet collisions. Only the sun can remove them.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from planetsim.core.bodies import PlanetConfig
from planetsim.core.forces import distance

if TYPE_CHECKING:
    from planetsim.core.bodies import Planet
    from planetsim.core.config import WorldConfig
    from planetsim.core.registry import BodyRegistry

logger = logging.getLogger(__name__)


@dataclass
class CollisionReport:
    """What one collision pass did to the registry."""

    sun_impacts: list[int] = field(default_factory=list)  # Planet ids absorbed by the sun
    collisions: list[tuple[int, int]] = field(default_factory=list)  # (P.id, Q.id)
    fragments_spawned: int = 0
    removed: list["Planet"] = field(default_factory=list)

    @property
    def n_destroyed(self) -> int:
        return len(self.removed)

    def __bool__(self) -> bool:
        return bool(self.removed)


def create_fragments(
    parent: "Planet",
    rng: np.random.Generator,
    max_pieces: int = 10,
    kick_speed: float = 1.0,
    radius_offset: float = 1.0,
) -> list[PlanetConfig]:
    """
    Break a planet into fragments.

    pieces = min(max_pieces, ceil(mass)); each piece carries mass / pieces,
    starts at the parent's position and moves with the parent's velocity
    plus a kick of kick_speed in an independent uniform direction.

    Fragment masses sum to the parent mass; past the cap the pieces just
    get heavier.

    Args:
        parent: The planet being destroyed
        rng: Source of the random kick directions
        max_pieces: Upper bound on the number of fragments
        kick_speed: Magnitude of the random velocity kick
        radius_offset: Fragment radius = radius_offset + fragment mass

    Returns:
        Fragment configs, ready for BodyRegistry.append_fragments
    """
    pieces = min(max_pieces, math.ceil(parent.mass))
    mass = parent.mass / pieces
    angles = rng.uniform(0.0, 2.0 * np.pi, size=pieces)

    return [
        PlanetConfig(
            x=parent.x,
            y=parent.y,
            vx=parent.vx + kick_speed * float(np.cos(angle)),
            vy=parent.vy + kick_speed * float(np.sin(angle)),
            mass=mass,
            radius=radius_offset + mass,
            color=parent.color,
            is_fragment=True,
        )
        for angle in angles
    ]


class CollisionEngine:
    """Detects sun impacts and planet collisions, spawns fragments."""

    def __init__(self, config: "WorldConfig", rng: np.random.Generator):
        self.config = config
        self.rng = rng

    def _shatter(self, planet: "Planet") -> list[PlanetConfig]:
        return create_fragments(
            planet,
            self.rng,
            max_pieces=self.config.max_fragments,
            kick_speed=self.config.fragment_kick_speed,
            radius_offset=self.config.fragment_radius_offset,
        )

    def resolve(self, registry: "BodyRegistry") -> CollisionReport:
        """Run one collision pass over the registry and apply its outcome."""
        report = CollisionReport()
        sun = registry.sun
        planets = registry.planets
        fragments: list[PlanetConfig] = []

        for planet in planets:
            if planet.is_destroyed:
                continue

            if distance(planet, sun) < planet.radius + sun.radius:
                planet.destroy()
                report.sun_impacts.append(planet.id)
                logger.debug("planet %d fell into the sun", planet.id)
                continue

            if planet.is_fragment:
                continue

            for other in planets:
                if other is planet or other.is_destroyed or other.is_fragment:
                    continue

                if distance(planet, other) < planet.radius + other.radius:
                    fragments.extend(self._shatter(planet))
                    fragments.extend(self._shatter(other))
                    planet.destroy()
                    other.destroy()
                    report.collisions.append((planet.id, other.id))
                    logger.debug("planets %d and %d collided", planet.id, other.id)
                    break

        report.removed = registry.remove_destroyed()
        registry.append_fragments(fragments)
        report.fragments_spawned = len(fragments)
        return report
