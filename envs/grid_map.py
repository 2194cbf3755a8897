#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid_map.py
-----------
Character-grid map on a torus: moving off one edge re-enters on the opposite
edge, both horizontally and vertically.

Grid convention: grid[r,c] == True means blocked, False means passable.
Cells are (row, col) tuples.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (row, col)

# 4-connected deltas in the fixed neighbor order: up, down, left, right
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


class MalformedMapError(ValueError):
    """The map text cannot describe a valid grid (ragged rows, bad start/goal)."""


# ------------------------------- Symbol map -------------------------------- #

@dataclass(frozen=True)
class SymbolMap:
    """Characters used to read and write a map."""
    blocked: str = "#"
    passable: str = " "
    start: str = "i"
    goal: str = "O"
    path: str = "."
    # strict=True rejects characters that are none of the above
    strict: bool = False

    def __post_init__(self):
        chars = [self.blocked, self.passable, self.start, self.goal, self.path]
        for ch in chars:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"Map symbols must be single characters, got {ch!r}")
        if len(set(chars)) != len(chars):
            raise ValueError(f"Map symbols must be distinct, got {chars}")

    def is_known(self, ch: str) -> bool:
        return ch in (self.blocked, self.passable, self.start, self.goal)


DEFAULT_SYMBOLS = SymbolMap()


# --------------------------------- Grid map -------------------------------- #

@dataclass
class GridMap:
    """Static toroidal grid with one start and one goal cell."""
    grid: np.ndarray            # (H, W) bool array: True = blocked
    start: Cell
    goal: Cell
    symbols: SymbolMap = field(default=DEFAULT_SYMBOLS)
    # Source rows as read, when parsed from text
    rows: Optional[Tuple[str, ...]] = field(default=None, repr=False)

    def __post_init__(self):
        self.grid = np.asarray(self.grid, dtype=bool)
        if self.grid.ndim != 2 or self.grid.size == 0:
            raise MalformedMapError(f"Grid must be a non-empty 2-D array, got shape {self.grid.shape}")
        H, W = self.grid.shape
        self.start = (int(self.start[0]), int(self.start[1]))
        self.goal = (int(self.goal[0]), int(self.goal[1]))
        for name, (r, c) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= r < H and 0 <= c < W):
                raise MalformedMapError(f"{name.capitalize()} {(r, c)} is outside the {H}x{W} grid")
            if self.grid[r, c]:
                raise MalformedMapError(f"{name.capitalize()} {(r, c)} is on a blocked cell")
        if self.rows is not None and (len(self.rows) != H or any(len(row) != W for row in self.rows)):
            raise MalformedMapError("Source rows do not match the grid shape")
        if self.rows is not None:
            self.rows = tuple(self.rows)

    @classmethod
    def from_rows(cls, rows: Sequence[str], symbols: SymbolMap = DEFAULT_SYMBOLS) -> "GridMap":
        """
        Build a map from equal-length text rows.

        Every character is significant, trailing spaces included; callers
        strip line terminators only. Raises MalformedMapError on an empty map,
        ragged rows, unknown characters in strict mode, or when the start or
        goal symbol does not occur exactly once.
        """
        rows = list(rows)
        if not rows:
            raise MalformedMapError("Map is empty")
        W = len(rows[0])
        if W == 0:
            raise MalformedMapError("Map rows must not be empty")
        for r, row in enumerate(rows):
            if len(row) != W:
                raise MalformedMapError(
                    f"Row {r} has length {len(row)}, expected {W} (rows must be rectangular)")

        H = len(rows)
        grid = np.zeros((H, W), dtype=bool)
        starts: List[Cell] = []
        goals: List[Cell] = []
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                if ch == symbols.blocked:
                    grid[r, c] = True
                elif ch == symbols.start:
                    starts.append((r, c))
                elif ch == symbols.goal:
                    goals.append((r, c))
                elif symbols.strict and not symbols.is_known(ch):
                    raise MalformedMapError(f"Unknown map character {ch!r} at ({r}, {c})")

        if len(starts) != 1:
            raise MalformedMapError(
                f"Expected exactly one start symbol {symbols.start!r}, found {len(starts)}")
        if len(goals) != 1:
            raise MalformedMapError(
                f"Expected exactly one goal symbol {symbols.goal!r}, found {len(goals)}")

        logger.debug("Parsed %dx%d map: start=%s goal=%s blocked=%d",
                     H, W, starts[0], goals[0], int(grid.sum()))
        return cls(grid=grid, start=starts[0], goal=goals[0], symbols=symbols, rows=tuple(rows))

    @classmethod
    def from_text(cls, text: str, symbols: SymbolMap = DEFAULT_SYMBOLS) -> "GridMap":
        # Only \n and \r\n end a line; other Unicode line breaks are map cells
        lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
        while lines and lines[-1] == "":
            lines.pop()
        return cls.from_rows(lines, symbols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.shape[0]

    @property
    def W(self) -> int:
        return self.grid.shape[1]

    def wrap(self, r: int, c: int) -> Cell:
        # Python's % is already non-negative for a positive modulus
        return (r % self.H, c % self.W)

    def is_passable(self, cell: Cell) -> bool:
        return not self.grid[cell]

    def is_goal(self, cell: Cell) -> bool:
        return tuple(cell) == self.goal

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Passable neighbors of `cell` in the order up, down, left, right."""
        r, c = cell
        out: List[Cell] = []
        for dr, dc in DELTAS_4:
            nr, nc = self.wrap(r + int(dr), c + int(dc))
            if not self.grid[nr, nc]:
                out.append((nr, nc))
        return out

    def to_rows(self) -> List[str]:
        """Text rows of the map: the source rows when parsed from text, else drawn from the symbol map."""
        if self.rows is not None:
            return list(self.rows)
        s = self.symbols
        chars = np.where(self.grid, s.blocked, s.passable)
        chars[self.start] = s.start
        chars[self.goal] = s.goal
        return ["".join(row) for row in chars]


def cells_adjacent(a: Cell, b: Cell, shape: Tuple[int, int]) -> bool:
    """True if `b` is one wraparound step away from `a` on a grid of `shape`."""
    H, W = shape
    dr = (b[0] - a[0]) % H
    dc = (b[1] - a[1]) % W
    vertical = dc == 0 and dr in (1 % H, (H - 1) % H)
    horizontal = dr == 0 and dc in (1 % W, (W - 1) % W)
    return vertical or horizontal
