"""
planetsim: a small gravitational n-body world.

One fixed massive attractor (the sun) and a dynamic set of planets that
attract each other and the sun, collide, and break into fragments.

Layers:
- core: the engine (forces, registry, integrator, collisions, world)
- analysis: derived diagnostics (mass, momentum, energy, separations)
- viz: matplotlib presentation shell (plots, drag-to-launch interaction)
"""

__version__ = "0.1.0"
