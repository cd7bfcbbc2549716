"""
Diagnostics derived from a world's state.

IMPORTANT: the engine never reads any of this. One-way derivation only.

The integrator is approximate (unit time step, sequential update, no
fragment gravity), so energy here is a monitoring quantity, not a
conserved one.
"""

from __future__ import annotations
from itertools import combinations
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.spatial.distance import cdist

if TYPE_CHECKING:
    from planetsim.core.bodies import Planet, Sun
    from planetsim.core.world import World


def positions_array(planets: Sequence["Planet"]) -> np.ndarray:
    """Planet positions as an (N, 2) array."""
    if not planets:
        return np.zeros((0, 2))
    return np.array([p.position for p in planets], dtype=np.float64)


def velocities_array(planets: Sequence["Planet"]) -> np.ndarray:
    """Planet velocities as an (N, 2) array."""
    if not planets:
        return np.zeros((0, 2))
    return np.array([p.velocity for p in planets], dtype=np.float64)


def masses_array(planets: Sequence["Planet"]) -> np.ndarray:
    return np.array([p.mass for p in planets], dtype=np.float64)


def total_mass(planets: Sequence["Planet"]) -> float:
    """Sum of planet masses (the sun is excluded)."""
    return float(masses_array(planets).sum())


def total_momentum(planets: Sequence["Planet"]) -> tuple[float, float]:
    """Total linear momentum Σ m·v of the planets."""
    if not planets:
        return 0.0, 0.0
    p = masses_array(planets)[:, None] * velocities_array(planets)
    px, py = p.sum(axis=0)
    return float(px), float(py)


def kinetic_energy(planets: Sequence["Planet"]) -> float:
    """Σ ½ m v²."""
    if not planets:
        return 0.0
    v2 = (velocities_array(planets) ** 2).sum(axis=1)
    return float(0.5 * (masses_array(planets) * v2).sum())


def potential_energy(
    planets: Sequence["Planet"],
    sun: "Sun",
    gravitational_constant: float = 1.0,
) -> float:
    """
    Gravitational potential energy of the interactions the integrator applies.

    Includes every planet-sun term and planet-planet terms between
    non-fragments only. Coincident pairs contribute nothing, matching the
    zero-force guard.
    """
    G = gravitational_constant
    energy = 0.0

    for p in planets:
        d = p.distance_to(sun)
        if d > 0:
            energy -= G * p.mass * sun.mass / d

    solid = [p for p in planets if not p.is_fragment]
    for a, b in combinations(solid, 2):
        d = a.distance_to(b)
        if d > 0:
            energy -= G * a.mass * b.mass / d

    return energy


def pairwise_distances(planets: Sequence["Planet"]) -> np.ndarray:
    """(N, N) matrix of center-to-center distances."""
    pos = positions_array(planets)
    return cdist(pos, pos)


def overlapping_pairs(
    planets: Sequence["Planet"],
    include_fragments: bool = False,
) -> list[tuple[int, int]]:
    """
    Id pairs whose discs overlap (distance < sum of radii).

    With include_fragments=False only pairs the collision engine would act
    on are returned.
    """
    if not include_fragments:
        planets = [p for p in planets if not p.is_fragment]
    if len(planets) < 2:
        return []

    dist = pairwise_distances(planets)
    radii = np.array([p.radius for p in planets])
    touching = dist < radii[:, None] + radii[None, :]

    i_idx, j_idx = np.nonzero(np.triu(touching, k=1))
    return [(planets[i].id, planets[j].id) for i, j in zip(i_idx, j_idx)]


def count_fragments(planets: Sequence["Planet"]) -> int:
    return sum(1 for p in planets if p.is_fragment)


def summarize(world: "World") -> dict:
    """Snapshot of the world's diagnostics."""
    planets = world.registry.live_planets
    sun = world.sun
    G = world.config.gravitational_constant

    ke = kinetic_energy(planets)
    pe = potential_energy(planets, sun, G)
    px, py = total_momentum(planets)

    return {
        "tick": world.current_tick,
        "n_planets": len(planets),
        "n_fragments": count_fragments(planets),
        "total_mass": total_mass(planets),
        "momentum": (px, py),
        "kinetic_energy": ke,
        "potential_energy": pe,
        "total_energy": ke + pe,
    }
