#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner on a toroidal grid (unweighted shortest hops).
- 4-connected, with wraparound on both axes.
- Neighbors are visited up, down, left, right, so ties between equal-length
  paths always resolve the same way.
"""

from __future__ import annotations
from typing import List, Tuple, Optional, Dict
from collections import deque
import logging
import numpy as np

from envs.grid_map import GridMap, Cell

logger = logging.getLogger(__name__)


class BFSPlanner:

    @staticmethod
    def _reconstruct(par_r: np.ndarray, par_c: np.ndarray,
                     start: Tuple[int,int], goal: Tuple[int,int]) -> List[Cell]:
        if par_r[goal] == -1 and goal != start:
            raise ValueError(f"Goal {goal} was not reached; there is no path to reconstruct")
        path = []
        r, c = goal
        while (r, c) != start:
            path.append((int(r), int(c)))
            r, c = int(par_r[r, c]), int(par_c[r, c])
        path.append(start)
        path.reverse()
        return path

    def plan(self, grid_map: GridMap) -> Dict:
        """
        Returns {'success': bool, 'path': list[(r,c)] or None,
                 'length': edge count or None, 'expanded': cells dequeued}.
        An unreachable goal is a normal result, not an error.
        """
        H, W = grid_map.shape
        start, goal = grid_map.start, grid_map.goal
        if grid_map.grid[start] or grid_map.grid[goal]:
            return {'success': False, 'path': None, 'length': None, 'expanded': 0}
        if start == goal:
            return {'success': True, 'path': [start], 'length': 0, 'expanded': 0}

        visited = np.zeros((H, W), dtype=bool)
        par_r = np.full((H, W), -1, dtype=np.int32)
        par_c = np.full((H, W), -1, dtype=np.int32)

        dq = deque()
        dq.append(start)
        visited[start] = True
        expanded = 0

        while dq:
            r, c = dq.popleft()
            expanded += 1
            if grid_map.is_goal((r, c)):
                path = self._reconstruct(par_r, par_c, start, goal)
                logger.debug("BFS reached goal %s in %d steps (%d expanded)",
                             goal, len(path) - 1, expanded)
                return {'success': True, 'path': path, 'length': len(path) - 1,
                        'expanded': expanded}
            for nr, nc in grid_map.neighbors((r, c)):
                if visited[nr, nc]:
                    continue
                visited[nr, nc] = True
                par_r[nr, nc] = r
                par_c[nr, nc] = c
                dq.append((nr, nc))

        logger.debug("BFS exhausted %d reachable cells without reaching %s", expanded, goal)
        return {'success': False, 'path': None, 'length': None, 'expanded': expanded}


def shortest_path(grid_map: GridMap) -> Optional[List[Cell]]:
    """Shortest start-to-goal path on `grid_map`, or None if the goal is unreachable."""
    return BFSPlanner().plan(grid_map)['path']
