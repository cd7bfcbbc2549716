#!/usr/bin/env python3
"""
Demo: Head-on Collision and Fragmentation

Two planets on crossing paths:
1. They collide and each shatters into min(10, ceil(mass)) fragments
2. Fragments fly apart with random unit kicks
3. Fragments only feel the sun; some eventually fall in

Output: output/demo_collision/collision.png
"""

import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from planetsim.core import create_world
from planetsim.analysis import summarize
from planetsim.viz import make_background_stars, plot_trajectories, plot_world, save_figure


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  COLLISION AND FRAGMENTATION")
    print("=" * 60)

    world = create_world(seed=1, record_trajectories=True)

    a = world.launch_planet((-150.0, 200.0), (1.5, 0.0), color="tomato")
    b = world.launch_planet((150.0, 200.0), (-1.5, 0.0), color="deepskyblue")
    print(f"\n1. Setup:")
    print(f"   {a}")
    print(f"   {b}")

    print("\n2. Running until impact...")
    tick = 0
    while not world.last_report or not world.last_report.collisions:
        world.step()
        tick += 1
        if tick > 500:
            print("   No collision within 500 steps")
            return
    report = world.last_report
    print(f"   Collision at tick {world.current_tick}: {report.collisions}")
    print(f"   Fragments spawned: {report.fragments_spawned}")

    stats = world.run(300)
    summary = summarize(world)
    print("\n3. After 300 more steps:")
    print(f"   Fragments left: {summary['n_fragments']}")
    print(f"   Absorbed by the sun: {stats['sun_impacts']}")
    print(f"   Mass left: {summary['total_mass']:.2f}")

    print("\n4. Creating visualization...")
    fig, axes = plt.subplots(1, 2, figsize=(14, 7))
    stars = make_background_stars(200, extent=400.0, rng=np.random.default_rng(0))
    plot_world(world.get_renderable_bodies(), ax=axes[0], stars=stars, title="Final snapshot")
    plot_trajectories(world.planets, ax=axes[1], title="Fragment trajectories")
    fig.tight_layout()

    output_dir = Path("output/demo_collision")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "collision.png"
    save_figure(fig, output_path)
    plt.close()
    print(f"   Saved: {output_path}")


if __name__ == "__main__":
    main()
