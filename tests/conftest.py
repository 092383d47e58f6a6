"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from cavern.graph import Cavern, generate_cavern


def make_grid(rows: int, cols: int, weight: int = 1) -> Cavern:
    """Fully open grid with row-major ids."""
    cavern = Cavern()
    for node_id in range(rows * cols):
        row, col = divmod(node_id, cols)
        cavern.add_node(node_id, row=row, col=col)
    for node_id in range(rows * cols):
        row, col = divmod(node_id, cols)
        if col + 1 < cols:
            cavern.connect(node_id, node_id + 1, weight)
        if row + 1 < rows:
            cavern.connect(node_id, node_id + cols, weight)
    return cavern


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def cycle_cavern() -> Cavern:
    """
    Four nodes in a unit-weight cycle A-B-C-D-A with 5 gold on C.

    Ids: A=0, B=1, C=2, D=3.
    """
    cavern = Cavern()
    cavern.add_node(0, row=0, col=0)
    cavern.add_node(1, row=0, col=1)
    cavern.add_node(2, row=1, col=1, gold=5)
    cavern.add_node(3, row=1, col=0)
    cavern.connect(0, 1)
    cavern.connect(1, 2)
    cavern.connect(2, 3)
    cavern.connect(3, 0)
    return cavern


@pytest.fixture
def star_cavern() -> Cavern:
    """Center node 0 with two unit-weight spokes to nodes 1 and 2, 5 gold each."""
    cavern = Cavern()
    cavern.add_node(0)
    cavern.add_node(1, gold=5)
    cavern.add_node(2, gold=5)
    cavern.connect(0, 1)
    cavern.connect(0, 2)
    return cavern


@pytest.fixture
def open_grid() -> Cavern:
    """3x5 grid without walls."""
    return make_grid(3, 5)


@pytest.fixture
def seeds() -> list[int]:
    """Seeds for property checks over generated caverns."""
    return [0, 1, 2, 3, 7, 11, 42, 99]


@pytest.fixture
def small_cavern() -> Cavern:
    """A generated 6x8 cavern with loops and weighted edges."""
    return generate_cavern(6, 8, seed=5)
