# tagcloud/core/render.py
"""
Matplotlib PNG rendering of a laid-out cloud: one filled box per placed rect.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle as RectPatch

from tagcloud.core.config import RENDER_HEIGHT_PX, RENDER_PAD_FRAC, RENDER_WIDTH_PX
from tagcloud.core.geometry import bottom
from tagcloud.core.types import Point, Rect


def set_axes_to_rects(
    ax: plt.Axes,
    rects: Sequence[Rect],
    center: Point,
    pad_frac: float = RENDER_PAD_FRAC,
) -> None:
    """Set xlim/ylim from rect extents (and center) with margin; equal aspect; hide axes."""
    xs = [center.x] + [r.x for r in rects] + [r.x + r.width for r in rects]
    ys = [center.y] + [r.y for r in rects] + [bottom(r) for r in rects]
    minx, maxx = min(xs), max(xs)
    miny, maxy = min(ys), max(ys)
    dx = max(1.0, (maxx - minx) * pad_frac)
    dy = max(1.0, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(miny - dy, maxy + dy)
    ax.set_aspect("equal", adjustable="datalim")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    # No constrained_layout: limits come from the rects
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])
    ax.axis("off")
    return fig, ax


def render_cloud(
    rects: Sequence[Rect],
    center: Point,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render placed rects around center. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig, ax = _new_fig(w, h)
    colors = matplotlib.colormaps["viridis"](np.linspace(0.0, 1.0, max(len(rects), 1)))
    for rect, color in zip(rects, colors):
        ax.add_patch(
            RectPatch(
                (rect.x, bottom(rect)),
                rect.width,
                rect.height,
                facecolor=color,
                edgecolor="black",
                linewidth=0.5,
                alpha=0.85,
            )
        )
    ax.plot([center.x], [center.y], marker="+", color="red", markersize=8, zorder=5)
    set_axes_to_rects(ax, rects, center)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
