"""
BodyRegistry: the sun plus the ordered collection of planets.

The registry is the single piece of shared mutable state in a world. It
owns planet identity and lifecycle; everything else goes through
add_planet / remove_destroyed / append_fragments.

Identity: ids come from a monotonically increasing counter and are never
reused, even after the planet holding one has been removed.
"""

from __future__ import annotations
from typing import Iterable, Iterator

from planetsim.core.bodies import Planet, PlanetConfig, Sun


class BodyRegistry:
    """Sun + planets in insertion order."""

    def __init__(self, sun: Sun):
        self.sun = sun
        self._planets: list[Planet] = []
        self._next_id = 0

    def _take_id(self) -> int:
        planet_id = self._next_id
        self._next_id += 1
        return planet_id

    @property
    def next_id(self) -> int:
        """Id the next inserted planet will receive."""
        return self._next_id

    def add_planet(self, config: PlanetConfig) -> Planet:
        """Construct a planet from config and append it."""
        planet = Planet(self._take_id(), config)
        self._planets.append(planet)
        return planet

    def remove_destroyed(self) -> list[Planet]:
        """
        Drop every destroyed planet, keeping survivors in their order.

        Returns:
            The removed planets, in their former order
        """
        removed = [p for p in self._planets if p.is_destroyed]
        if removed:
            self._planets = [p for p in self._planets if not p.is_destroyed]
        return removed

    def append_fragments(self, configs: Iterable[PlanetConfig]) -> list[Planet]:
        """Register fragment planets after the survivors, in the given order."""
        return [self.add_planet(config) for config in configs]

    @property
    def planets(self) -> tuple[Planet, ...]:
        """All registered planets (read-only view of the collection)."""
        return tuple(self._planets)

    @property
    def live_planets(self) -> tuple[Planet, ...]:
        """Registered planets not marked destroyed."""
        return tuple(p for p in self._planets if not p.is_destroyed)

    def get(self, planet_id: int) -> Planet | None:
        """Look up a registered planet by id."""
        for planet in self._planets:
            if planet.id == planet_id:
                return planet
        return None

    def count_fragments(self) -> int:
        return sum(1 for p in self._planets if p.is_fragment)

    def __len__(self) -> int:
        return len(self._planets)

    def __iter__(self) -> Iterator[Planet]:
        return iter(self.planets)

    def __contains__(self, planet: object) -> bool:
        return any(p is planet for p in self._planets)
