"""
Shortest paths and path arithmetic over cavern nodes.

A path is a list of nodes where consecutive nodes are adjacent. The
helpers here never mutate the paths they are given.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from cavern.graph.types import Node


def shortest_path(start: Node, end: Node) -> list[Node]:
    """
    Find the minimum-weight path from start to end (Dijkstra).

    Equal-cost alternatives are resolved by node id, so the same query
    always yields the same path.

    Returns:
        Nodes from start to end inclusive, [start] if start is end, or an
        empty list if end cannot be reached
    """
    if start is end:
        return [start]

    dist: dict[Node, int] = {start: 0}
    parent: dict[Node, Node] = {}
    settled: set[Node] = set()
    frontier = [(0, start.id, start)]

    while frontier:
        d, _, node = heapq.heappop(frontier)
        if node in settled:
            continue
        settled.add(node)

        if node is end:
            path = [end]
            while path[-1] is not start:
                path.append(parent[path[-1]])
            path.reverse()
            return path

        for neighbor, weight in node.neighbors.items():
            if neighbor in settled:
                continue
            nd = d + weight
            if neighbor not in dist or nd < dist[neighbor]:
                dist[neighbor] = nd
                parent[neighbor] = node
                heapq.heappush(frontier, (nd, neighbor.id, neighbor))

    return []


def path_weight(path: Sequence[Node]) -> int:
    """
    Total edge weight along a path.

    Raises:
        ValueError: If two consecutive nodes are not adjacent
    """
    return sum(a.edge_weight(b) for a, b in zip(path, path[1:]))


def path_gold(path: Sequence[Node]) -> int:
    """Gold on the path, counting each distinct node once."""
    return sum(node.gold for node in set(path))


def combine_paths(first: Sequence[Node], second: Sequence[Node]) -> list[Node]:
    """
    Join two paths sharing a boundary node; the join node appears once.

    Raises:
        ValueError: If first does not end where second starts
    """
    if not first or not second:
        raise ValueError("Cannot combine empty paths")
    if first[-1] is not second[0]:
        raise ValueError(
            f"Path ending at node {first[-1].id} cannot join path starting at node {second[0].id}"
        )
    return list(first) + list(second[1:])


def format_path(path: Sequence[Node]) -> str:
    """Render a path as its node ids joined by arrows."""
    return " -> ".join(str(node.id) for node in path)
