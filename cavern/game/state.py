"""
Game state for the two phases, played over an in-memory Cavern.

GraphHuntState and GraphScramState are the environment side of the
HuntView / ScramView interfaces. They validate every move and keep the
record the engine uses to decide whether a phase succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from cavern.agents.base import HuntView, NodeStatus, ScramView
from cavern.graph.types import Cavern, Node


@dataclass
class HuntResult:
    """
    Record of a finished hunt.

    Attributes:
        found: Whether the hunter returned standing on the orb
        steps: Number of moves made
        path: Node ids visited, including start and end
        time_ms: Wall-clock time of the phase
    """

    found: bool
    steps: int
    path: list[int]
    time_ms: float


@dataclass
class ScramResult:
    """
    Record of a finished scram.

    Attributes:
        escaped: Whether the hunter ended on the exit within budget
        budget: Steps available at the start of the phase
        steps_left: Steps remaining at the end (negative = overran)
        gold: Gold picked up during the phase
        path: Node ids visited, including start and end
        time_ms: Wall-clock time of the phase
    """

    escaped: bool
    budget: int
    steps_left: int
    gold: int
    path: list[int]
    time_ms: float

    @property
    def steps_used(self) -> int:
        return self.budget - self.steps_left


@dataclass
class GameResult:
    """Complete record of a two-phase game."""

    agent_name: str
    hunt: HuntResult
    scram: ScramResult | None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def won(self) -> bool:
        return self.hunt.found and self.scram is not None and self.scram.escaped

    @property
    def gold(self) -> int:
        """Gold that counts: only a won game keeps its gold."""
        return self.scram.gold if self.won else 0


class GraphHuntState(HuntView):
    """
    Hunt phase over a Cavern.

    The distance hint is the grid (Manhattan) distance to the orb,
    ignoring walls. It is 0 only on the orb itself: any other node reports
    at least 1, even if it shares the orb's coordinates.
    """

    def __init__(self, cavern: Cavern, start_id: int, orb_id: int) -> None:
        self._cavern = cavern
        self._current = cavern.node(start_id)
        self._orb = cavern.node(orb_id)
        self.path: list[int] = [start_id]

    @property
    def steps(self) -> int:
        return len(self.path) - 1

    def current_location(self) -> int:
        return self._current.id

    def neighbors(self) -> list[NodeStatus]:
        return [
            NodeStatus(id=n.id, distance_to_target=self._hint(n))
            for n in self._current.neighbors
        ]

    def distance_to_orb(self) -> int:
        return self._hint(self._current)

    def _hint(self, node: Node) -> int:
        if node is self._orb:
            return 0
        return max(1, node.manhattan(self._orb))

    def move_to(self, node_id: int) -> None:
        if node_id not in self._cavern:
            raise ValueError(f"Cannot move to unknown node {node_id}")
        target = self._cavern.node(node_id)
        if not self._current.is_adjacent(target):
            raise ValueError(
                f"Cannot move from node {self._current.id} to non-adjacent node {node_id}"
            )
        self._current = target
        self.path.append(node_id)


class GraphScramState(ScramView):
    """
    Scram phase over a Cavern.

    Moving costs the edge weight and picks up any gold on the destination.
    The budget is allowed to go negative; the engine treats that as a
    failed escape.
    """

    def __init__(self, cavern: Cavern, start_id: int, exit_id: int, budget: int) -> None:
        self._cavern = cavern
        self._current = cavern.node(start_id)
        self._exit = cavern.node(exit_id)
        self._steps_left = budget
        self.gold_collected = 0
        self.path: list[int] = [start_id]

    def current_node(self) -> Node:
        return self._current

    def exit_node(self) -> Node:
        return self._exit

    def all_nodes(self) -> list[Node]:
        return self._cavern.nodes()

    def steps_left(self) -> int:
        return self._steps_left

    def move_to(self, node: Node) -> None:
        if not self._current.is_adjacent(node):
            raise ValueError(
                f"Cannot move from node {self._current.id} to non-adjacent node {node.id}"
            )
        self._steps_left -= self._current.edge_weight(node)
        self._current = node
        self.path.append(node.id)
        self._pick_up_gold()

    def _pick_up_gold(self) -> None:
        if self._current.gold > 0:
            self.gold_collected += self._current.gold
            self._current.gold = 0

    @property
    def escaped(self) -> bool:
        return self._current is self._exit and self._steps_left >= 0
