"""
Baseline hunter - plain DFS hunt, shortest-path scram.

Used to establish a lower bound on performance: it always finds the orb
and always gets out, but ignores the distance hints and the gold.
"""

from __future__ import annotations

from cavern.agents.base import HuntView, Hunter, ScramView
from cavern.agents.explore import explore, uniform_priority
from cavern.agents.optimizer import walk_path
from cavern.graph.paths import shortest_path


class BaselineHunter(Hunter):
    """Depth-first hunt in neighbour order, then straight to the exit."""

    @property
    def name(self) -> str:
        return "baseline"

    @property
    def description(self) -> str:
        return "Unordered DFS hunt, shortest-path scram"

    def hunt(self, state: HuntView) -> None:
        explore(state, priority=uniform_priority)

    def scram(self, state: ScramView) -> None:
        walk_path(state, shortest_path(state.current_node(), state.exit_node()))
