from pathlib import Path

import pytest

from maze_lab.problems.maze import load_grid_file

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def resource():
    return lambda name: RESOURCES / name


@pytest.fixture
def maze():
    return lambda name: load_grid_file(RESOURCES / name)
