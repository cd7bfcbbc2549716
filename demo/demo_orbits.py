#!/usr/bin/env python3
"""
Demo: Planets Orbiting the Sun

Launches a few planets on near-circular orbits at different radii and
records their trajectories:
1. Circular speed v = sqrt(G * M / r) for each radius
2. Run the world and watch orbits precess (the integrator is approximate)
3. Plot trajectories over the final snapshot

Output: output/demo_orbits/orbits.png
"""

import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from planetsim.core import create_world
from planetsim.analysis import summarize
from planetsim.viz import plot_trajectories, random_planet_color, save_figure


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  ORBITS AROUND A FIXED SUN")
    print("=" * 60)

    world = create_world(seed=42, record_trajectories=True)
    rng = np.random.default_rng(7)
    G, M = world.config.gravitational_constant, world.sun.mass

    radii = [80.0, 140.0, 220.0, 320.0]
    print("\n1. Setup:")
    for i, r in enumerate(radii):
        angle = i * np.pi / 2
        v = np.sqrt(G * M / r)
        start = (r * np.cos(angle), r * np.sin(angle))
        velocity = (-v * np.sin(angle), v * np.cos(angle))
        planet = world.launch_planet(start, velocity, color=random_planet_color(rng))
        print(f"   planet {planet.id}: r={r:.0f}, v={v:.3f}, mass={planet.mass:.2f}")

    before = summarize(world)

    print("\n2. Running...")
    n_steps = 1500
    stats = world.run(n_steps)
    print(f"   {n_steps} steps completed")
    print(f"   Planets left: {stats['n_planets']} ({stats['n_fragments']} fragments)")
    print(f"   Collisions: {stats['collisions']}, sun impacts: {stats['sun_impacts']}")

    after = summarize(world)
    print("\n3. Diagnostics:")
    print(f"   Total energy: {before['total_energy']:.2f} → {after['total_energy']:.2f}")
    print(f"   Total mass:   {before['total_mass']:.2f} → {after['total_mass']:.2f}")

    print("\n4. Creating visualization...")
    fig, ax = plot_trajectories(
        world.planets,
        bodies=world.get_renderable_bodies(),
        title=f"Orbits after {n_steps} steps",
    )

    output_dir = Path("output/demo_orbits")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "orbits.png"
    save_figure(fig, output_path)
    plt.close()
    print(f"   Saved: {output_path}")


if __name__ == "__main__":
    main()
