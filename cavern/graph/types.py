"""Graph data structures for caverns."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """
    A single open tile of the cavern.

    Nodes compare and hash by identity: gold changes during a game, and two
    tiles holding the same amount of gold are still different tiles.

    Attributes:
        id: Unique integer id (row-major for generated caverns)
        row: Grid row, used for the distance-to-orb hint
        col: Grid column, used for the distance-to-orb hint
        gold: Gold lying on the tile (0 once picked up)
        neighbors: Adjacent nodes mapped to the weight of the connecting edge
    """

    id: int
    row: int = 0
    col: int = 0
    gold: int = 0
    neighbors: dict[Node, int] = field(default_factory=dict, repr=False)

    def is_adjacent(self, other: Node) -> bool:
        return other in self.neighbors

    def edge_weight(self, other: Node) -> int:
        """Weight of the edge to `other`. Raises ValueError if not adjacent."""
        try:
            return self.neighbors[other]
        except KeyError:
            raise ValueError(f"Node {self.id} is not adjacent to node {other.id}") from None

    def manhattan(self, other: Node) -> int:
        """Grid distance ignoring walls."""
        return abs(self.row - other.row) + abs(self.col - other.col)


class Cavern:
    """
    Undirected weighted graph of open tiles.

    The cavern owns every node. Structure is fixed once built; only the
    gold on each node changes while a game runs.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}

    def add_node(self, node_id: int, row: int = 0, col: int = 0, gold: int = 0) -> Node:
        if node_id in self._nodes:
            raise ValueError(f"Duplicate node id {node_id}")
        if gold < 0:
            raise ValueError(f"Gold must be non-negative, got {gold}")
        node = Node(id=node_id, row=row, col=col, gold=gold)
        self._nodes[node_id] = node
        return node

    def connect(self, a: int, b: int, weight: int = 1) -> None:
        """Add an undirected edge between nodes `a` and `b`."""
        if a == b:
            raise ValueError(f"Self loop on node {a}")
        if weight < 1:
            raise ValueError(f"Edge weight must be >= 1, got {weight}")
        node_a = self.node(a)
        node_b = self.node(b)
        node_a.neighbors[node_b] = weight
        node_b.neighbors[node_a] = weight

    def node(self, node_id: int) -> Node:
        """Get a node by id. Raises KeyError if unknown."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"Unknown node id {node_id}") from None

    def nodes(self) -> list[Node]:
        """All nodes, ordered by id."""
        return [self._nodes[i] for i in sorted(self._nodes)]

    def edges(self) -> list[tuple[int, int, int]]:
        """Every edge once, as (low id, high id, weight)."""
        result = []
        for node in self.nodes():
            for neighbor, weight in node.neighbors.items():
                if node.id < neighbor.id:
                    result.append((node.id, neighbor.id, weight))
        result.sort()
        return result

    def edge_count(self) -> int:
        return sum(len(n.neighbors) for n in self._nodes.values()) // 2

    def total_gold(self) -> int:
        return sum(n.gold for n in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Cavern(nodes={len(self)}, edges={self.edge_count()}, gold={self.total_gold()})"
