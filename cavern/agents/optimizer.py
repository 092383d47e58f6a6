"""
Budgeted gold collection for the scram phase.

Starting from a path to the exit, optimize_path() repeatedly splices in a
detour through one gold tile:

    start ... exit   becomes   start ... gold ... exit

The best detour (most extra gold) that fits the budget is taken, then each
half of it is optimized on its own with a share of the budget proportional
to that half's cost. The halves are joined back at the gold tile.

Every half is either returned unchanged or replaced by a detour that fits
its share, and the shares never add up to more than the parent budget, so
the final path never costs more than the budget it was planned with.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cavern.agents.base import ScramView
from cavern.graph.heap import Heap
from cavern.graph.paths import (
    combine_paths,
    format_path,
    path_gold,
    path_weight,
    shortest_path,
)
from cavern.graph.types import Node

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class DetourRecord:
    """
    A candidate detour through one gold tile.

    Records compare by identity so two detours with equal gain can both be
    queued.

    Attributes:
        target: The gold tile the detour passes through
        first: Shortest path from the path start to target
        second: Shortest path from target to the path end
        total_gold: Gold on first + second, each tile counted once
        first_edges: Cost of first
        second_edges: Cost of second
    """

    target: Node
    first: list[Node] = field(repr=False)
    second: list[Node] = field(repr=False)
    total_gold: int
    first_edges: int
    second_edges: int

    @property
    def total_edges(self) -> int:
        return self.first_edges + self.second_edges

    @property
    def first_fraction(self) -> float:
        """Share of the budget allotted to the first half."""
        if not self.total_edges:
            return 0.5
        return self.first_edges / self.total_edges

    @property
    def second_fraction(self) -> float:
        return 1.0 - self.first_fraction

    def split_budget(self, moves: int) -> tuple[int, int]:
        """
        Divide moves between the halves in proportion to their cost.

        Both shares are rounded down, so they never sum to more than moves,
        and each covers its own half whenever total_edges <= moves.
        """
        if not self.total_edges:
            return moves // 2, moves // 2
        return (
            moves * self.first_edges // self.total_edges,
            moves * self.second_edges // self.total_edges,
        )

    def covers(self, node: Node) -> bool:
        """Whether node lies on either half of the detour."""
        return node in self.first or node in self.second


def evaluate_detour(path: list[Node], target: Node) -> DetourRecord | None:
    """
    Price a detour from path[0] through target to path[-1].

    Returns:
        The DetourRecord, or None if target cannot be reached
    """
    first = shortest_path(path[0], target)
    second = shortest_path(target, path[-1])
    if not first or not second:
        return None

    return DetourRecord(
        target=target,
        first=first,
        second=second,
        total_gold=path_gold(combine_paths(first, second)),
        first_edges=path_weight(first),
        second_edges=path_weight(second),
    )


def optimize_path(
    path: list[Node],
    moves: int,
    remaining: Iterable[Node],
    reserve: int = 0,
) -> list[Node]:
    """
    Insert gold-collecting detours into path without exceeding moves.

    Args:
        path: Path to improve; first and last node are kept fixed
        moves: Budget for the whole path
        remaining: Gold tiles not already on the path
        reserve: Steps a detour must leave unused

    Returns:
        A new path from path[0] to path[-1], or path itself when no detour
        fits the budget
    """
    remaining = list(remaining)
    current_gold = path_gold(path)

    detours: Heap[DetourRecord] = Heap(descending=True)
    unreachable: set[Node] = set()
    for target in remaining:
        detour = evaluate_detour(path, target)
        if detour is None:
            logger.warning(f"Gold at node {target.id} is unreachable, skipping")
            unreachable.add(target)
            continue
        if detour.total_edges + reserve > moves:
            continue
        try:
            detours.add(detour, detour.total_gold - current_gold)
        except ValueError:
            pass

    if not detours:
        return path

    best = detours.poll()
    logger.debug(
        f"Detour via node {best.target.id}: +{best.total_gold - current_gold} gold "
        f"for {best.total_edges}/{moves} steps"
    )

    left = [n for n in remaining if n not in unreachable and not best.covers(n)]
    first_moves, second_moves = best.split_budget(moves)
    first = optimize_path(best.first, first_moves, left, reserve)
    second = optimize_path(best.second, second_moves, left, reserve)
    return combine_paths(first, second)


def gold_candidates(nodes: Iterable[Node], path: list[Node]) -> list[Node]:
    """Tiles holding gold that the path does not already visit."""
    on_path = set(path)
    return [n for n in nodes if n.gold > 0 and n not in on_path]


def plan_escape(state: ScramView, reserve: int = 0) -> list[Node]:
    """
    Plan a gold-collecting route from the current node to the exit.

    The plan starts from the shortest exit path and is grown by
    optimize_path() within the remaining budget.

    Raises:
        ValueError: If the exit cannot be reached from the current node
    """
    baseline = shortest_path(state.current_node(), state.exit_node())
    if not baseline:
        raise ValueError(
            f"Exit {state.exit_node().id} is not reachable from node {state.current_node().id}"
        )
    budget = state.steps_left()
    candidates = gold_candidates(state.all_nodes(), baseline)

    path = optimize_path(baseline, budget, candidates, reserve)
    logger.info(
        f"Planned escape: {len(path) - 1} moves, cost {path_weight(path)}/{budget}, "
        f"gold {path_gold(path)} (shortest path gold {path_gold(baseline)})"
    )
    logger.debug(f"Escape route: {format_path(path)}")
    return path


def walk_path(state: ScramView, path: list[Node]) -> None:
    """Move along path, skipping nodes the hunter already stands on."""
    for node in path:
        if node is not state.current_node():
            state.move_to(node)
