"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def default_config():
    """Default world configuration: sun at (0, 0), mass 1000, radius 30."""
    from planetsim.core import WorldConfig
    return WorldConfig()


@pytest.fixture
def world(default_config, rng):
    """An empty world (sun only) with a seeded generator."""
    from planetsim.core import World
    return World(config=default_config, rng=rng)


@pytest.fixture
def orbiting_world(world):
    """World with one planet at (100, 0), mass 5, radius 7, moving (0, 0.5)."""
    from planetsim.core import PlanetConfig
    world.add_planet(PlanetConfig(x=100.0, y=0.0, vx=0.0, vy=0.5, mass=5.0, radius=7.0))
    return world


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
