#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from envs.generator import generate_map, _torus_has_path
from envs.grid_map import GridMap, SymbolMap


def test_generate_failure_has_no_path():
    rng = np.random.default_rng(123)
    env = generate_map(H=20, W=20, density=0.45, ensure_status="failure", rng=rng)
    assert not _torus_has_path(env.grid, env.start, env.goal)


def test_generate_success_has_path():
    rng = np.random.default_rng(7)
    env = generate_map(H=20, W=20, density=0.3, ensure_status="success", rng=rng)
    assert _torus_has_path(env.grid, env.start, env.goal)


def test_start_and_goal_are_free_and_distinct():
    rng = np.random.default_rng(0)
    for _ in range(25):
        env = generate_map(H=6, W=9, density=0.4, rng=rng)
        assert env.start != env.goal
        assert not env.grid[env.start]
        assert not env.grid[env.goal]


def test_fixed_start_goal_are_kept_free():
    rng = np.random.default_rng(1)
    env = generate_map(H=5, W=5, density=0.9, start=(0, 0), goal=(4, 4), rng=rng)
    assert env.start == (0, 0) and env.goal == (4, 4)
    assert not env.grid[0, 0] and not env.grid[4, 4]


def test_same_seed_same_map():
    a = generate_map(H=10, W=12, density=0.3, rng=np.random.default_rng(42))
    b = generate_map(H=10, W=12, density=0.3, rng=np.random.default_rng(42))
    assert np.array_equal(a.grid, b.grid)
    assert (a.start, a.goal) == (b.start, b.goal)


def test_generated_map_round_trips_through_text():
    symbols = SymbolMap(blocked="X", passable=".", start="S", goal="G", path="*")
    env = generate_map(H=7, W=11, density=0.3, symbols=symbols, rng=np.random.default_rng(9))
    again = GridMap.from_rows(env.to_rows(), symbols)
    assert np.array_equal(env.grid, again.grid)
    assert (again.start, again.goal) == (env.start, env.goal)


def test_torus_reachability_uses_wraparound():
    grid = np.zeros((3, 5), dtype=bool)
    grid[:, 2] = True
    assert _torus_has_path(grid, (1, 0), (1, 4))
    grid[:, 4] = True
    assert not _torus_has_path(grid, (1, 0), (1, 3))


def test_impossible_status_raises():
    with pytest.raises(RuntimeError, match="Could not generate"):
        generate_map(H=4, W=4, density=0.0, ensure_status="failure",
                     rng=np.random.default_rng(0), max_tries=5)


@pytest.mark.parametrize("kwargs", [
    dict(H=1, W=1),
    dict(density=1.0),
    dict(density=-0.1),
    dict(ensure_status="near-failure"),
    dict(start=(0, 0), goal=(0, 0)),
])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        generate_map(**kwargs)
