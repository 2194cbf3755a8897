# -*- coding: utf-8 -*-
"""
Toroidal grid maps.
Exposes:
- GridMap, SymbolMap, DEFAULT_SYMBOLS, MalformedMapError (grid_map.py)
- load_map, MapLoadError (loader.py)
- generate_map (generator.py)
- mark_path, to_text, render_map, save_figure (render.py)
"""

from __future__ import annotations

from .grid_map import (
    Cell,
    DEFAULT_SYMBOLS,
    GridMap,
    MalformedMapError,
    SymbolMap,
    cells_adjacent,
)
from .loader import MapLoadError, load_map
from .generator import generate_map
from .render import mark_path, render_map, save_figure, to_text

__all__ = [
    "Cell",
    "DEFAULT_SYMBOLS",
    "GridMap",
    "MalformedMapError",
    "SymbolMap",
    "cells_adjacent",
    "MapLoadError",
    "load_map",
    "generate_map",
    "mark_path",
    "render_map",
    "save_figure",
    "to_text",
]
