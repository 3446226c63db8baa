from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt

from pathgeom.PathSet import PathSet

BOUNDS_COLOR = "#c9a34b"
BEFORE_COLOR = "#9AA0A6"


def _plot(ax, drawing: PathSet, color: Optional[str] = None, marker: str = "o", label: Optional[str] = None):
    for i, path in enumerate(drawing.paths):
        pts = path.as_array()
        if len(pts) == 0:
            continue
        ax.plot(pts[:, 0], pts[:, 1], marker=marker, markersize=3, linewidth=1.0,
                color=color, label=label if i == 0 else None)


def _plot_bounds(ax, drawing: PathSet):
    r = drawing.bounds()
    xs = [r.tl.x, r.br.x, r.br.x, r.tl.x, r.tl.x]
    ys = [r.tl.y, r.tl.y, r.br.y, r.br.y, r.tl.y]
    ax.plot(xs, ys, linestyle="--", linewidth=0.8, color=BOUNDS_COLOR)


def show_paths(drawing: PathSet, before: Optional[PathSet] = None, show_bounds: bool = True):
    """Plot the paths in 2D; with before, overlay the unsimplified strokes."""
    fig, ax = plt.subplots(figsize=(8, 6))

    if before is not None:
        _plot(ax, before, color=BEFORE_COLOR, marker=".", label=f"before ({before.point_count()} pts)")
    _plot(ax, drawing, label=f"paths ({drawing.point_count()} pts)")
    if show_bounds:
        _plot_bounds(ax, drawing)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_aspect("equal", adjustable="datalim")
    # Screen coordinates: y grows downwards
    ax.invert_yaxis()
    ax.grid(True)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()

    grid_on = [True]

    def on_key(event):
        if event.key == 'g':
            grid_on[0] = not grid_on[0]
            ax.grid(grid_on[0])
            fig.canvas.draw_idle()

    fig.canvas.mpl_connect('key_press_event', on_key)
    plt.tight_layout()
    plt.show()
    return fig
