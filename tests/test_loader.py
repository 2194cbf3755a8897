#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import pytest

from envs.loader import load_map, MapLoadError
from envs.grid_map import MalformedMapError, SymbolMap


def test_load_map_from_file(write_map, original_rows):
    m = load_map(write_map(original_rows))
    assert m.shape == (4, 7)
    assert m.start == (1, 4)
    assert m.goal == (2, 3)


def test_load_bundled_maps(maps_dir):
    m = load_map(maps_dir / "original.txt")
    assert m.shape == (4, 7)
    m = load_map(maps_dir / "enclosed.txt")
    assert m.start == (1, 1)


def test_load_crlf_file(tmp_path):
    p = tmp_path / "crlf.txt"
    p.write_bytes(b"i #\r\n  O\r\n")
    assert load_map(p).shape == (2, 3)


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(MapLoadError, match="Failed to read file"):
        load_map(tmp_path / "non_existent_file.txt")


def test_empty_file_is_malformed(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(MalformedMapError, match="empty"):
        load_map(p)


def test_ragged_file_is_malformed(write_map):
    with pytest.raises(MalformedMapError, match="rectangular"):
        load_map(write_map(["i  #", "  O"]))


def test_custom_symbols_from_file(write_map):
    symbols = SymbolMap(blocked="X", passable=".", start="S", goal="G", path="*")
    m = load_map(write_map(["S.X", "X.G"]), symbols)
    assert m.start == (0, 0) and m.goal == (1, 2)
