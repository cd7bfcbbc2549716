#!/usr/bin/env python3
"""
Demo: Interactive Sandbox

Click and drag anywhere to launch a planet: it starts where you pressed
and flies away from where you release (slingshot). Planets that touch
shatter; anything that touches the sun is gone.
"""

import logging

from planetsim.core import create_world
from planetsim.viz import InteractiveShell


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Drag with the mouse to launch planets. Close the window to quit.")
    world = create_world()
    shell = InteractiveShell(world, extent=400.0)
    shell.start()
    print(f"Simulated {world.current_tick} frames, {len(world.planets)} bodies left.")


if __name__ == "__main__":
    main()
