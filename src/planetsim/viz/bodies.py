"""
Static drawing of a world snapshot.

Everything here works on RenderableBody snapshots (or Planet trajectories),
never on the live registry, so drawing can't observe a half-finished step.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

if TYPE_CHECKING:
    from planetsim.core.bodies import Planet, RenderableBody


SPACE_COLOR = "black"
STAR_COLOR = (1.0, 1.0, 1.0, 0.8)
DEFAULT_PLANET_COLOR = "deepskyblue"


def random_planet_color(rng: np.random.Generator) -> tuple[float, float, float]:
    """Random bright RGB color; channels in [30, 255] out of 255."""
    rgb = np.clip(rng.uniform(30.0, 285.0, size=3), 0.0, 255.0) / 255.0
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def make_background_stars(
    n_stars: int,
    extent: float,
    rng: np.random.Generator,
    max_size: float = 2.0,
) -> np.ndarray:
    """
    Decorative background stars.

    Returns:
        (n_stars, 3) array of (x, y, size), positions in [-extent, extent)
    """
    xy = rng.uniform(-extent, extent, size=(n_stars, 2))
    size = rng.uniform(0.0, max_size, size=(n_stars, 1))
    return np.hstack([xy, size])


def draw_bodies(ax: Axes, bodies: Sequence["RenderableBody"]) -> list[Circle]:
    """
    Add one filled circle per body to ax.

    The sun gets an extra translucent halo.

    Returns:
        The patches added, so callers can remove them on the next frame
    """
    patches = []
    for body in bodies:
        color = body.color if body.color is not None else DEFAULT_PLANET_COLOR
        if body.kind == "sun":
            halo = Circle(body.position, body.radius * 1.4, color=color, alpha=0.25, zorder=2)
            ax.add_patch(halo)
            patches.append(halo)

        alpha = 0.8 if body.is_fragment else 1.0
        disc = Circle(body.position, body.radius, color=color, alpha=alpha, zorder=3)
        ax.add_patch(disc)
        patches.append(disc)
    return patches


def setup_space_axes(ax: Axes, extent: float) -> None:
    """Black square axes spanning [-extent, extent] on both axes."""
    ax.set_facecolor(SPACE_COLOR)
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])


def plot_world(
    bodies: Sequence["RenderableBody"],
    ax: Axes | None = None,
    extent: float = 400.0,
    stars: np.ndarray | None = None,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Figure, Axes]:
    """
    Plot a snapshot of the world.

    Args:
        bodies: Output of World.get_renderable_bodies()
        ax: Existing axes (creates new if None)
        extent: Half-width of the visible square
        stars: Optional output of make_background_stars()
        title: Plot title

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    setup_space_axes(ax, extent)

    if stars is not None and len(stars):
        ax.scatter(stars[:, 0], stars[:, 1], s=stars[:, 2] ** 2, color=STAR_COLOR, zorder=1)

    draw_bodies(ax, bodies)

    if title:
        ax.set_title(title)

    return fig, ax


def plot_trajectories(
    planets: Sequence["Planet"],
    bodies: Sequence["RenderableBody"] | None = None,
    ax: Axes | None = None,
    extent: float = 400.0,
    title: str = "Planet Trajectories",
    figsize: tuple[float, float] = (8, 8),
    line_width: float = 1.0,
) -> tuple[Figure, Axes]:
    """
    Plot recorded trajectories (needs WorldConfig.record_trajectories).

    Args:
        planets: Planets with recorded trajectories
        bodies: Optional snapshot drawn on top (e.g. final state)
        ax: Existing axes (creates new if None)
        extent: Half-width of the visible square
        title: Plot title
        line_width: Trajectory line width

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    setup_space_axes(ax, extent)

    for planet in planets:
        x_traj, y_traj = planet.get_trajectory_arrays()
        if len(x_traj) == 0:
            continue
        color: Any = planet.color if planet.color is not None else DEFAULT_PLANET_COLOR
        ax.plot(x_traj, y_traj, color=color, linewidth=line_width, alpha=0.7, zorder=2)

    if bodies is not None:
        draw_bodies(ax, bodies)

    ax.set_title(title)
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
