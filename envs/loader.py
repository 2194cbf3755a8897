# -*- coding: utf-8 -*-
"""Read map files from disk."""

from __future__ import annotations

import logging
import os
from typing import Union

from .grid_map import GridMap, MalformedMapError, SymbolMap, DEFAULT_SYMBOLS

logger = logging.getLogger(__name__)


class MapLoadError(OSError):
    """The map file could not be read."""


def load_map(path: Union[str, os.PathLike], symbols: SymbolMap = DEFAULT_SYMBOLS) -> GridMap:
    """
    Load a map file (UTF-8 text, one grid row per line).

    Raises MapLoadError if the file cannot be read and MalformedMapError if
    its contents do not form a valid map.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MapLoadError(f"Failed to read file '{path}': {e}") from e

    if not text.strip("\r\n"):
        raise MalformedMapError(f"File '{path}' is empty")
    logger.debug("Read %d bytes from %s", len(text), path)
    return GridMap.from_text(text, symbols)
