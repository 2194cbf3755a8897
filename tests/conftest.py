"""
Pytest configuration and shared fixtures.

Maps are written as lists of rows so trailing spaces stay visible.
"""

from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def maps_dir(project_root: Path) -> Path:
    """Return the directory with the bundled example maps."""
    return project_root / "maps"


@pytest.fixture
def original_rows() -> list:
    """4x7 map with start 'i' at (1, 4) and goal 'O' at (2, 3)."""
    return [
        "##    #",
        "#  #i #",
        "#  O## ",
        "   #   ",
    ]


@pytest.fixture
def split_rows() -> list:
    """4x7 map whose column 3 wall is only crossed by wrapping around."""
    return [
        "  i#   ",
        "   #   ",
        "   # O ",
        "   #   ",
    ]


@pytest.fixture
def enclosed_rows() -> list:
    """Start and goal sealed in separate pockets, wraparound included."""
    return [
        "#######",
        "#i   ##",
        "#######",
        "##   O#",
    ]


@pytest.fixture
def write_map(tmp_path: Path):
    """Write rows to a map file and return its path."""
    def _write(rows, name="map.txt"):
        p = tmp_path / name
        p.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return p
    return _write
