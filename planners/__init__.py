# -*- coding: utf-8 -*-
"""
Planners on toroidal grid maps with a unified API:
planner.plan(grid_map: GridMap)
  -> {'success': bool, 'path': List[(r,c)] or None, 'length': int or None, 'expanded': int}
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .bfs import BFSPlanner, shortest_path

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": BFSPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of the keys of PLANNERS (currently only 'bfs')
    kwargs : dict
        Passed to the planner constructor

    Returns
    -------
    planner instance
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "BFSPlanner",
    "PLANNERS",
    "get_planner",
    "shortest_path",
]
