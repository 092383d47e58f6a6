"""
Hunter base class and the two views of the cavern it plays against.

A hunter never touches the game directly. During the hunt it sees a
HuntView (local knowledge only); during the scram it sees a ScramView
(the whole graph plus a step budget).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cavern.graph.types import Node


@dataclass(frozen=True)
class NodeStatus:
    """
    What the hunter learns about one open neighbour during the hunt.

    Attributes:
        id: Id of the neighbouring node
        distance_to_target: Distance hint from that node to the orb
    """

    id: int
    distance_to_target: int


class HuntView(ABC):
    """Local view of the cavern during the hunt phase."""

    @abstractmethod
    def current_location(self) -> int:
        """Id of the node the hunter stands on."""
        ...

    @abstractmethod
    def neighbors(self) -> list[NodeStatus]:
        """Open neighbours of the current node. Order is not meaningful."""
        ...

    @abstractmethod
    def distance_to_orb(self) -> int:
        """Distance hint from the current node; 0 exactly on the orb."""
        ...

    @abstractmethod
    def move_to(self, node_id: int) -> None:
        """
        Move to an adjacent node.

        Raises:
            ValueError: If node_id is not an open neighbour
        """
        ...


class ScramView(ABC):
    """Full view of the cavern during the scram phase."""

    @abstractmethod
    def current_node(self) -> Node:
        ...

    @abstractmethod
    def exit_node(self) -> Node:
        ...

    @abstractmethod
    def all_nodes(self) -> list[Node]:
        ...

    @abstractmethod
    def steps_left(self) -> int:
        """Remaining budget; each move costs the weight of its edge."""
        ...

    @abstractmethod
    def move_to(self, node: Node) -> None:
        """
        Move to an adjacent node, paying its edge weight and picking up
        any gold there.

        Raises:
            ValueError: If node is not adjacent to the current node
        """
        ...


class Hunter(ABC):
    """
    Abstract base class for cavern hunters.

    A hunter plays both phases: find the orb, then get out with as much
    gold as the budget allows.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the hunter (e.g., 'detour', 'baseline')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the hunter's strategy."""
        ...

    @abstractmethod
    def hunt(self, state: HuntView) -> None:
        """
        Walk to the orb. Must return while standing on it.

        Args:
            state: Local view; only neighbours and distance hints are known
        """
        ...

    @abstractmethod
    def scram(self, state: ScramView) -> None:
        """
        Walk to the exit before the budget runs out, collecting gold.

        Args:
            state: Full view of the cavern and the remaining budget
        """
        ...

    def on_game_start(self) -> None:
        """Called when a new game begins. Override for setup."""
        pass

    def on_game_end(self, won: bool) -> None:
        """Called when game ends. Override for cleanup."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
