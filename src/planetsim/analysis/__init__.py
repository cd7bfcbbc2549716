"""
Analysis layer: derived quantities for monitoring and plots.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
"""

from planetsim.analysis.diagnostics import (
    positions_array,
    velocities_array,
    total_mass,
    total_momentum,
    kinetic_energy,
    potential_energy,
    pairwise_distances,
    overlapping_pairs,
    count_fragments,
    summarize,
)

__all__ = [
    "positions_array",
    "velocities_array",
    "total_mass",
    "total_momentum",
    "kinetic_energy",
    "potential_energy",
    "pairwise_distances",
    "overlapping_pairs",
    "count_fragments",
    "summarize",
]
