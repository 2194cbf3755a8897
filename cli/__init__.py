# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- solve : shortest path on a map file (or a random map), printed as an annotated grid
"""
__all__ = [
    "solve",
]
