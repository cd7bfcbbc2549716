"""
Core engine.

This layer knows NOTHING about drawing, mouse input or frame timing.
It only knows:
- The sun and the planets (bodies, registry)
- Pairwise Newtonian gravity (forces)
- One sequential integration step (integrator)
- Sun impacts, planet collisions and fragments (collisions)
- The per-frame sequence collisions → integration (world)
"""

from planetsim.core.config import WorldConfig
from planetsim.core.forces import distance, gravitational_force, acceleration_towards
from planetsim.core.bodies import Body, Sun, Planet, PlanetConfig, RenderableBody
from planetsim.core.registry import BodyRegistry
from planetsim.core.integrator import SequentialIntegrator
from planetsim.core.collisions import CollisionEngine, CollisionReport, create_fragments
from planetsim.core.world import World, create_world

__all__ = [
    "WorldConfig",
    "distance",
    "gravitational_force",
    "acceleration_towards",
    "Body",
    "Sun",
    "Planet",
    "PlanetConfig",
    "RenderableBody",
    "BodyRegistry",
    "SequentialIntegrator",
    "CollisionEngine",
    "CollisionReport",
    "create_fragments",
    "World",
    "create_world",
]
