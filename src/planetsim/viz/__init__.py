"""
Visualization utilities (the presentation shell).

- World snapshots with background stars
- Trajectory plots
- Interactive drag-to-launch window
"""

from planetsim.viz.bodies import (
    random_planet_color,
    make_background_stars,
    draw_bodies,
    setup_space_axes,
    plot_world,
    plot_trajectories,
    save_figure,
)

from planetsim.viz.shell import InteractiveShell, drag_arrow_color

__all__ = [
    "random_planet_color",
    "make_background_stars",
    "draw_bodies",
    "setup_space_axes",
    "plot_world",
    "plot_trajectories",
    "save_figure",
    "InteractiveShell",
    "drag_arrow_color",
]
