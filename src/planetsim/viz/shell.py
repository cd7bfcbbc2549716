"""
Interactive matplotlib shell: drag to launch, animate to step.

Press the mouse somewhere, drag, release: a planet is launched at the press
point, flying away from the release point (slingshot). A FuncAnimation
callback calls World.step() and then redraws the snapshot.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.patches import FancyArrowPatch

from planetsim.viz.bodies import (
    draw_bodies,
    make_background_stars,
    random_planet_color,
    setup_space_axes,
    STAR_COLOR,
)

if TYPE_CHECKING:
    from planetsim.core.bodies import Planet
    from planetsim.core.world import World


def drag_arrow_color(length: float) -> tuple[float, float, float]:
    """Green for short drags, shading to red for long ones."""
    red = float(np.clip(2.5 * length, 0.0, 255.0)) / 255.0
    return red, 1.0 - red, 0.0


class InteractiveShell:
    """
    Presentation shell around a World.

    Owns a figure, turns mouse drags into launches and drives the world
    one step per animation frame.
    """

    def __init__(
        self,
        world: "World",
        extent: float = 400.0,
        n_stars: int = 200,
        interval_ms: int = 16,
        figsize: tuple[float, float] = (8, 8),
        rng: np.random.Generator | None = None,
    ):
        self.world = world
        self.extent = extent
        self.interval_ms = interval_ms
        self.rng = rng if rng is not None else np.random.default_rng()

        self.fig, self.ax = plt.subplots(figsize=figsize)
        setup_space_axes(self.ax, extent)

        stars = make_background_stars(n_stars, extent, self.rng)
        if n_stars:
            self.ax.scatter(stars[:, 0], stars[:, 1], s=stars[:, 2] ** 2, color=STAR_COLOR, zorder=1)

        self._drag_start: tuple[float, float] | None = None
        self._drag_end: tuple[float, float] | None = None
        self._body_patches = []
        self._arrow: FancyArrowPatch | None = None
        self.animation: FuncAnimation | None = None

        canvas = self.fig.canvas
        canvas.mpl_connect("button_press_event", self.on_press)
        canvas.mpl_connect("motion_notify_event", self.on_motion)
        canvas.mpl_connect("button_release_event", self.on_release)

        self.redraw()

    @property
    def is_dragging(self) -> bool:
        return self._drag_start is not None

    def _event_position(self, event) -> tuple[float, float] | None:
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return None
        return float(event.xdata), float(event.ydata)

    def on_press(self, event) -> None:
        position = self._event_position(event)
        if position is None:
            return
        self._drag_start = position
        self._drag_end = position

    def on_motion(self, event) -> None:
        if not self.is_dragging:
            return
        position = self._event_position(event)
        if position is not None:
            self._drag_end = position

    def on_release(self, event) -> "Planet | None":
        """Finish a drag and launch the planet it describes."""
        if not self.is_dragging:
            return None

        position = self._event_position(event)
        if position is not None:
            self._drag_end = position

        planet = self.world.launch_from_drag(
            self._drag_start,
            self._drag_end,
            color=random_planet_color(self.rng),
        )
        self._drag_start = None
        self._drag_end = None
        return planet

    def _draw_drag_arrow(self) -> None:
        if self._arrow is not None:
            self._arrow.remove()
            self._arrow = None

        if not self.is_dragging or self._drag_end == self._drag_start:
            return

        (x0, y0), (x1, y1) = self._drag_start, self._drag_end
        length = float(np.hypot(x1 - x0, y1 - y0))
        # Arrow head sits on the launch point
        self._arrow = FancyArrowPatch(
            (x1, y1),
            (x0, y0),
            arrowstyle="-|>",
            mutation_scale=15,
            color=drag_arrow_color(length),
            linewidth=2,
            zorder=4,
        )
        self.ax.add_patch(self._arrow)

    def redraw(self) -> list:
        """Replace the drawn bodies with the current snapshot."""
        for patch in self._body_patches:
            patch.remove()
        self._body_patches = draw_bodies(self.ax, self.world.get_renderable_bodies())
        self._draw_drag_arrow()

        artists = list(self._body_patches)
        if self._arrow is not None:
            artists.append(self._arrow)
        return artists

    def update(self, frame: int) -> list:
        """Animation callback: one simulation step, then one render."""
        self.world.step()
        return self.redraw()

    def start(self, show: bool = True) -> FuncAnimation:
        """Start the animation loop (blocks in plt.show() when show=True)."""
        self.animation = FuncAnimation(
            self.fig,
            self.update,
            interval=self.interval_ms,
            cache_frame_data=False,
        )
        if show:
            plt.show()
        return self.animation
