# -*- coding: utf-8 -*-
"""
Text and matplotlib rendering of a map and a planned path.

Layers for the figure:
  - background (white), blocked cells (dark gray)
  - path (lime line, broken wherever it wraps around an edge)
  - start (green star), goal (red star)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .grid_map import GridMap, Cell


def mark_path(grid_map: GridMap, path: Optional[Sequence[Cell]]) -> List[str]:
    """Map rows with every path cell except start and goal set to the path symbol."""
    rows = [list(row) for row in grid_map.to_rows()]
    for r, c in path or ():
        if (r, c) in (grid_map.start, grid_map.goal):
            continue
        rows[r][c] = grid_map.symbols.path
    return ["".join(row) for row in rows]


def to_text(rows: Sequence[str]) -> str:
    return "\n".join(rows)


def _split_at_wraps(path: Sequence[Cell]) -> List[List[Cell]]:
    # Consecutive cells more than one step apart are a wraparound edge
    segments: List[List[Cell]] = [[path[0]]]
    for prev, cur in zip(path, path[1:]):
        if abs(cur[0] - prev[0]) + abs(cur[1] - prev[1]) > 1:
            segments.append([])
        segments[-1].append(cur)
    return segments


def render_map(grid_map: GridMap, path: Optional[Sequence[Cell]] = None, ax=None, title=None):
    """Draw `grid_map` (and `path` if given) on a matplotlib axis; returns the axis."""
    import matplotlib.pyplot as plt

    H, W = grid_map.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W/5), max(3, H/5)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    rgb[grid_map.grid] = 0.2
    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if path:
        for seg in _split_at_wraps(path):
            rr, cc = zip(*seg)
            ax.plot(cc, rr, color="lime", lw=2, alpha=0.8, marker="o" if len(seg) == 1 else None)

    sr, sc = grid_map.start
    gr, gc = grid_map.goal
    ax.plot(sc, sr, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.text(sc+0.2, sr-0.2, "S", color="k", fontsize=8)
    ax.plot(gc, gr, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
    ax.text(gc+0.2, gr-0.2, "G", color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_figure(grid_map: GridMap, path: Optional[Sequence[Cell]], out_path: str, title=None) -> str:
    import matplotlib.pyplot as plt

    ax = render_map(grid_map, path, title=title)
    fig = ax.figure
    fig.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path
