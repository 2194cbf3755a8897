#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random toroidal map generator.

Blocked cells are sampled independently at a target density; start and goal
are placed on distinct free cells. With ensure_status the generator resamples
until the goal is (or is not) reachable from the start under wraparound.

Reproducibility: pass an explicit np.random.Generator.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .grid_map import GridMap, SymbolMap, DEFAULT_SYMBOLS, DELTAS_4

logger = logging.getLogger(__name__)


def _torus_has_path(grid: np.ndarray,
                    start: Tuple[int, int],
                    goal: Tuple[int, int]) -> bool:
    """
    Boolean reachability on the free cells of 'grid' with wraparound.

    grid: bool (True=blocked)
    """
    H, W = grid.shape
    if grid[start] or grid[goal]:
        return False

    visited = np.zeros_like(grid, dtype=bool)
    q = [start]
    visited[start] = True

    head = 0  # manual queue for speed
    while head < len(q):
        r, c = q[head]
        head += 1
        if (r, c) == goal:
            return True
        for dr, dc in DELTAS_4:
            nr, nc = (r + int(dr)) % H, (c + int(dc)) % W
            if not visited[nr, nc] and not grid[nr, nc]:
                visited[nr, nc] = True
                q.append((nr, nc))
    return False


def _pick_free(grid: np.ndarray, rng: np.random.Generator, exclude=None) -> Tuple[int, int]:
    free = np.argwhere(~grid)
    if exclude is not None:
        free = free[~((free[:, 0] == exclude[0]) & (free[:, 1] == exclude[1]))]
    if free.size == 0:
        raise RuntimeError("No free cell left to place start/goal; lower the density")
    r, c = free[int(rng.integers(0, len(free)))]
    return (int(r), int(c))


def generate_map(
    H: int = 16,
    W: int = 16,
    *,
    density: float = 0.25,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    ensure_status: str = "any",     # "any" | "success" | "failure"
    symbols: SymbolMap = DEFAULT_SYMBOLS,
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 200,
) -> GridMap:
    """
    Create a random toroidal map.

    ensure_status:
        "any"     : no guarantee about path existence.
        "success" : the goal is reachable from the start.
        "failure" : the goal is unreachable from the start.

    Fixed start/goal cells are always kept free. Raises RuntimeError if no
    map with the requested status turns up within max_tries samples.
    """
    if H < 1 or W < 1 or H * W < 2:
        raise ValueError(f"Map must have at least two cells, got {H}x{W}")
    if not 0.0 <= density < 1.0:
        raise ValueError(f"density must be in [0, 1), got {density}")
    if ensure_status not in ("any", "success", "failure"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    if start is not None and goal is not None and tuple(start) == tuple(goal):
        raise ValueError("start and goal must differ")
    if rng is None:
        rng = np.random.default_rng()

    for attempt in range(max_tries):
        grid = rng.random((H, W)) < density
        for fixed in (start, goal):
            if fixed is not None:
                grid[tuple(fixed)] = False
        # Keep start/goal placement inside the try loop so a crowded sample retries
        try:
            s = tuple(start) if start is not None else _pick_free(grid, rng, exclude=goal)
            g = tuple(goal) if goal is not None else _pick_free(grid, rng, exclude=s)
        except RuntimeError:
            continue

        if ensure_status != "any":
            reachable = _torus_has_path(grid, s, g)
            if reachable != (ensure_status == "success"):
                continue

        logger.debug("Generated %dx%d map (density=%.2f) after %d tries", H, W, density, attempt + 1)
        return GridMap(grid=grid, start=s, goal=g, symbols=symbols)

    raise RuntimeError(
        f"Could not generate a '{ensure_status}' map of size {H}x{W} at density {density} "
        f"in {max_tries} tries")


if __name__ == "__main__":
    from .render import to_text

    env = generate_map(12, 24, density=0.3, rng=np.random.default_rng(0))
    print(to_text(env.to_rows()))
