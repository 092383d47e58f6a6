"""
Random cavern generation.

Caverns are grids of tiles. A randomized depth-first search carves a
spanning tree so every tile is reachable, then a fraction of the
remaining walls is knocked out to create loops. Node ids are row-major
(id = row * cols + col), which the hunt heuristic relies on.
"""

from __future__ import annotations

import logging

import numpy as np

from cavern.config import (
    DEFAULT_GOLD_FRACTION,
    DEFAULT_LOOP_FRACTION,
    DEFAULT_MAX_EDGE_WEIGHT,
    DEFAULT_MAX_GOLD,
)
from cavern.graph.types import Cavern

logger = logging.getLogger(__name__)

# (d_row, d_col) for up, right, down, left
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _carve_spanning_tree(
    rows: int, cols: int, rng: np.random.Generator
) -> set[tuple[int, int]]:
    """Randomized DFS over the grid. Returns carved edges as (low id, high id)."""
    start = int(rng.integers(rows * cols))
    visited = {start}
    stack = [start]
    carved: set[tuple[int, int]] = set()

    while stack:
        current = stack[-1]
        row, col = divmod(current, cols)
        options = []
        for d_row, d_col in _STEPS:
            r, c = row + d_row, col + d_col
            if 0 <= r < rows and 0 <= c < cols and r * cols + c not in visited:
                options.append(r * cols + c)

        if options:
            nxt = options[int(rng.integers(len(options)))]
            carved.add((min(current, nxt), max(current, nxt)))
            visited.add(nxt)
            stack.append(nxt)
        else:
            stack.pop()  # Backtrack

    return carved


def _grid_edges(rows: int, cols: int) -> list[tuple[int, int]]:
    """Every edge between horizontally or vertically adjacent tiles."""
    edges = []
    for row in range(rows):
        for col in range(cols):
            node_id = row * cols + col
            if col + 1 < cols:
                edges.append((node_id, node_id + 1))
            if row + 1 < rows:
                edges.append((node_id, node_id + cols))
    return edges


def generate_cavern(
    rows: int,
    cols: int,
    seed: int | None = None,
    loop_fraction: float = DEFAULT_LOOP_FRACTION,
    max_weight: int = DEFAULT_MAX_EDGE_WEIGHT,
    gold_fraction: float = DEFAULT_GOLD_FRACTION,
    max_gold: int = DEFAULT_MAX_GOLD,
) -> Cavern:
    """
    Generate a connected grid cavern.

    Args:
        rows: Grid height (>= 1)
        cols: Grid width (>= 1)
        seed: RNG seed; the same seed always yields the same cavern
        loop_fraction: Share of non-tree walls opened to create cycles
        max_weight: Edge weights are drawn from [1, max_weight]
        gold_fraction: Share of tiles holding gold
        max_gold: Gold piles are drawn from [1, max_gold]

    Returns:
        The generated Cavern

    Raises:
        ValueError: On out-of-range arguments
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Cavern must be at least 1x1, got {rows}x{cols}")
    if not 0.0 <= loop_fraction <= 1.0:
        raise ValueError(f"loop_fraction must be in [0, 1], got {loop_fraction}")
    if not 0.0 <= gold_fraction <= 1.0:
        raise ValueError(f"gold_fraction must be in [0, 1], got {gold_fraction}")
    if max_weight < 1 or max_gold < 1:
        raise ValueError("max_weight and max_gold must be >= 1")

    rng = np.random.default_rng(seed)
    n_nodes = rows * cols

    cavern = Cavern()
    gold = np.zeros(n_nodes, dtype=np.int64)
    n_gold = int(round(gold_fraction * n_nodes))
    if n_gold:
        gold_ids = rng.choice(n_nodes, size=n_gold, replace=False)
        gold[gold_ids] = rng.integers(1, max_gold + 1, size=n_gold)

    for node_id in range(n_nodes):
        row, col = divmod(node_id, cols)
        cavern.add_node(node_id, row=row, col=col, gold=int(gold[node_id]))

    edges = _carve_spanning_tree(rows, cols, rng)
    walls = [e for e in _grid_edges(rows, cols) if e not in edges]
    n_loops = int(round(loop_fraction * len(walls)))
    if n_loops:
        for idx in rng.choice(len(walls), size=n_loops, replace=False):
            edges.add(walls[int(idx)])

    for a, b in sorted(edges):
        cavern.connect(a, b, int(rng.integers(1, max_weight + 1)))

    logger.debug(f"Generated {rows}x{cols} cavern (seed={seed}): {cavern!r}")
    return cavern
