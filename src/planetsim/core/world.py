"""
World: the simulation step orchestrator and the core's public surface.

A World owns its registry, so several worlds (e.g. in tests) can coexist.
The presentation shell talks to it through three entry points:

- launch_planet / launch_from_drag: register a new planet
- step: advance one frame (collisions, then integration)
- get_renderable_bodies: immutable snapshot for drawing

There is no timing inside the core: the caller decides when to step.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from planetsim.core.bodies import Planet, PlanetConfig, RenderableBody, Sun
from planetsim.core.collisions import CollisionEngine, CollisionReport
from planetsim.core.config import WorldConfig
from planetsim.core.integrator import SequentialIntegrator
from planetsim.core.registry import BodyRegistry

logger = logging.getLogger(__name__)


@dataclass
class World:
    """
    One sun, many planets.

    Each step runs the collision pass on pre-update positions, then the
    sequential integrator over whatever survived.
    """

    config: WorldConfig = field(default_factory=WorldConfig)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    # Simulation state
    current_tick: int = field(default=0, init=False)
    last_report: CollisionReport | None = field(default=None, init=False)

    registry: BodyRegistry = field(init=False)
    collision_engine: CollisionEngine = field(init=False)
    integrator: SequentialIntegrator = field(init=False)

    def __post_init__(self):
        cfg = self.config
        sun = Sun(
            x=cfg.sun_x,
            y=cfg.sun_y,
            mass=cfg.sun_mass,
            radius=cfg.sun_radius,
            color=cfg.sun_color,
        )
        self.registry = BodyRegistry(sun)
        self.collision_engine = CollisionEngine(cfg, self.rng)
        self.integrator = SequentialIntegrator(
            gravitational_constant=cfg.gravitational_constant,
            record_trajectories=cfg.record_trajectories,
        )

    @property
    def sun(self) -> Sun:
        return self.registry.sun

    @property
    def planets(self) -> tuple[Planet, ...]:
        return self.registry.planets

    def add_planet(self, config: PlanetConfig) -> Planet:
        """Register a fully specified planet (tests, scripted scenarios)."""
        planet = self.registry.add_planet(config)
        if self.config.record_trajectories:
            planet.record_state()
        return planet

    def launch_planet(
        self,
        start_position: tuple[float, float],
        velocity: tuple[float, float],
        color: Any = None,
    ) -> Planet:
        """
        Launch a new non-fragment planet.

        Mass is drawn uniformly from [launch_mass_min, launch_mass_max);
        radius = planet_radius_offset + mass. Color is whatever the
        presentation layer passes in.
        """
        cfg = self.config
        mass = float(self.rng.uniform(cfg.launch_mass_min, cfg.launch_mass_max))
        planet = self.add_planet(
            PlanetConfig(
                x=start_position[0],
                y=start_position[1],
                vx=velocity[0],
                vy=velocity[1],
                mass=mass,
                radius=cfg.planet_radius_offset + mass,
                color=color,
            )
        )
        logger.debug("launched %r", planet)
        return planet

    def launch_from_drag(
        self,
        drag_start: tuple[float, float],
        drag_end: tuple[float, float],
        color: Any = None,
    ) -> Planet:
        """
        Launch from a drag gesture, slingshot style.

        The planet starts at drag_start and moves opposite to the drag:
        velocity = (drag_start - drag_end) * drag_velocity_scale.
        """
        scale = self.config.drag_velocity_scale
        velocity = (
            (drag_start[0] - drag_end[0]) * scale,
            (drag_start[1] - drag_end[1]) * scale,
        )
        return self.launch_planet(drag_start, velocity, color=color)

    def step(self) -> None:
        """Advance the world by one frame."""
        report = self.collision_engine.resolve(self.registry)
        self.integrator.step(self.registry)
        self.last_report = report
        self.current_tick += 1

        if report:
            logger.debug(
                "tick %d: %d sun impacts, %d collisions, %d fragments spawned",
                self.current_tick,
                len(report.sun_impacts),
                len(report.collisions),
                report.fragments_spawned,
            )

    def run(self, n_steps: int) -> dict:
        """
        Run the world for n_steps frames.

        Returns:
            Statistics dictionary
        """
        if n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {n_steps}")

        sun_impacts = 0
        collisions = 0
        fragments_spawned = 0

        for _ in range(n_steps):
            self.step()
            sun_impacts += len(self.last_report.sun_impacts)
            collisions += len(self.last_report.collisions)
            fragments_spawned += self.last_report.fragments_spawned

        stats = {
            "n_steps": n_steps,
            "tick": self.current_tick,
            "n_planets": len(self.registry),
            "n_fragments": self.registry.count_fragments(),
            "sun_impacts": sun_impacts,
            "collisions": collisions,
            "fragments_spawned": fragments_spawned,
        }
        logger.info(
            "ran %d steps: %d planets (%d fragments), %d sun impacts, %d collisions",
            n_steps,
            stats["n_planets"],
            stats["n_fragments"],
            sun_impacts,
            collisions,
        )
        return stats

    def get_renderable_bodies(self) -> tuple[RenderableBody, ...]:
        """Sun first, then every live planet in registry order."""
        return (self.sun.to_renderable(),) + tuple(
            planet.to_renderable() for planet in self.registry.live_planets
        )


def create_world(seed: int | None = None, **overrides) -> World:
    """
    Convenience factory for a world.

    Args:
        seed: Seed for the world's random generator (launch masses,
              fragment kicks). None draws fresh entropy.
        **overrides: WorldConfig fields to change from the defaults

    Returns:
        An empty world (sun only)
    """
    return World(config=WorldConfig(**overrides), rng=np.random.default_rng(seed))
