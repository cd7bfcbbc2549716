"""
Vector force model: pairwise Newtonian gravity between point masses.

Bodies are duck-typed: anything exposing x, y (and mass for forces) works,
so the same functions serve the sun, planets and fragments.
"""

from __future__ import annotations
from typing import Protocol

import numpy as np


class PointMass(Protocol):
    """Anything with a position and a mass."""

    x: float
    y: float
    mass: float


def distance(a, b) -> float:
    """Euclidean distance between the positions of a and b."""
    return float(np.hypot(b.x - a.x, b.y - a.y))


def gravitational_force(
    a: PointMass,
    b: PointMass,
    gravitational_constant: float = 1.0,
) -> tuple[float, float]:
    """
    Force on a due to b's gravity.

    F = G * m_a * m_b / d², directed from a towards b.

    Coincident positions (d == 0) give the zero vector rather than a
    division by zero.

    Returns:
        (fx, fy) force components
    """
    dx = b.x - a.x
    dy = b.y - a.y
    d = float(np.sqrt(dx**2 + dy**2))

    if d == 0:
        return 0.0, 0.0

    magnitude = gravitational_constant * a.mass * b.mass / d**2
    return magnitude * dx / d, magnitude * dy / d


def acceleration_towards(
    a: PointMass,
    b: PointMass,
    gravitational_constant: float = 1.0,
) -> tuple[float, float]:
    """Per-frame velocity delta of a due to b (force / m_a, unit time step)."""
    fx, fy = gravitational_force(a, b, gravitational_constant)
    return fx / a.mass, fy / a.mass
