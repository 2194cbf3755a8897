# -*- coding: utf-8 -*-

"""
Tests for the toroidal grid maps, the BFS planner and the solve CLI.

Puts the repo root on sys.path so `envs`, `planners` and `cli` import
without installing the project first.
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
