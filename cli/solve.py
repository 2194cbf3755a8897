#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Find the shortest start-to-goal path on a toroidal character map and print the
map with the path marked.

Example:
    python -m cli.solve maps/original.txt --coords
    python -m cli.solve --random 12x30 --density 0.3 --seed 4 --png out.png

Exit status: 0 path found, 1 no path found, 2 unreadable or malformed map.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from envs.grid_map import GridMap, MalformedMapError, SymbolMap
from envs.loader import MapLoadError, load_map
from envs.generator import generate_map
from envs.render import mark_path, save_figure, to_text
from planners import PLANNERS, get_planner

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_MAP = 2


# -------------------- helpers -------------------- #

def _parse_size(token: str) -> Tuple[int, int]:
    token = token.strip().lower()
    if "x" not in token:
        raise argparse.ArgumentTypeError(f"Bad size '{token}', expected like 16x32")
    h, w = token.split("x", 1)
    try:
        return int(h), int(w)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad size '{token}', expected like 16x32")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Shortest path on a map that wraps around its edges.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("map", nargs="?", help="Map file, one grid row per line")
    src.add_argument("--random", type=_parse_size, metavar="HxW",
                     help="Solve a randomly generated map of this size instead")
    ap.add_argument("--density", type=float, default=0.25, help="Blocked-cell density for --random")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for --random")
    ap.add_argument("--planner", type=str, default="bfs", choices=sorted(PLANNERS), help="Planner")
    ap.add_argument("--blocked", default="#", help="Blocked cell symbol")
    ap.add_argument("--passable", default=" ", help="Passable cell symbol")
    ap.add_argument("--start", default="i", help="Start cell symbol")
    ap.add_argument("--goal", default="O", help="Goal cell symbol")
    ap.add_argument("--path-char", default=".", help="Symbol used to mark the path")
    ap.add_argument("--strict", action="store_true",
                    help="Reject characters that are not one of the map symbols")
    ap.add_argument("--coords", action="store_true",
                    help="Also print the path as 'row col' lines")
    ap.add_argument("--png", type=str, default=None, help="Save a figure of the map and path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _load(args, symbols: SymbolMap) -> GridMap:
    if args.random is not None:
        H, W = args.random
        rng = np.random.default_rng(args.seed)
        return generate_map(H, W, density=args.density, symbols=symbols, rng=rng)
    return load_map(args.map, symbols)


# -------------------- main -------------------- #

def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        symbols = SymbolMap(blocked=args.blocked, passable=args.passable,
                            start=args.start, goal=args.goal,
                            path=args.path_char, strict=args.strict)
    except ValueError as e:
        ap.error(str(e))

    try:
        planner = get_planner(args.planner)
    except ValueError as e:
        ap.error(str(e))

    try:
        grid_map = _load(args, symbols)
    except (MapLoadError, MalformedMapError, RuntimeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_MAP

    res = planner.plan(grid_map)
    path = res['path'] if res['success'] else None

    print(to_text(mark_path(grid_map, path)))
    if path is None:
        print("No path found", file=sys.stderr)
    elif args.coords:
        print(f"# {res['length']} steps")
        for r, c in path:
            print(f"{r} {c}")

    if args.png:
        title = f"{args.planner}: {'success' if path else 'fail'}"
        out = save_figure(grid_map, path, args.png, title=title)
        print(f"Saved: {out}", file=sys.stderr)

    return EXIT_FOUND if path is not None else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
