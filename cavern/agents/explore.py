"""
Depth-first hunt for the orb, ordered by the distance hints.

The walk keeps an explicit stack of frames instead of recursing, so large
caverns do not hit the interpreter's recursion limit. Each frame holds the
node it was opened on and a heap of that node's neighbours. When a frame
runs dry without finding the orb the hunter steps back to the parent
frame's node.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cavern.agents.base import HuntView, NodeStatus
from cavern.config import INITIAL_HORIZONTAL
from cavern.graph.heap import Heap
from cavern.heuristics import exploration_priority, is_same_axis

logger = logging.getLogger(__name__)

# (current id, neighbour status, horizontal) -> priority, lower first
PriorityFn = Callable[[int, NodeStatus, bool], float]


def heuristic_priority(current_id: int, status: NodeStatus, horizontal: bool) -> float:
    return exploration_priority(current_id, status.id, status.distance_to_target, horizontal)


def distance_priority(current_id: int, status: NodeStatus, horizontal: bool) -> float:
    return status.distance_to_target


def uniform_priority(current_id: int, status: NodeStatus, horizontal: bool) -> float:
    return 0.0


@dataclass
class _Frame:
    node_id: int
    candidates: Heap[NodeStatus]


def _open_frame(
    state: HuntView,
    visited: set[int],
    horizontal: bool,
    priority: PriorityFn,
) -> _Frame:
    current = state.current_location()
    visited.add(current)

    candidates: Heap[NodeStatus] = Heap()
    for status in state.neighbors():
        try:
            candidates.add(status, priority(current, status, horizontal))
        except ValueError:
            pass  # Same neighbour reported twice
    return _Frame(current, candidates)


def explore(
    state: HuntView,
    visited: set[int] | None = None,
    horizontal: bool = INITIAL_HORIZONTAL,
    priority: PriorityFn = heuristic_priority,
) -> int:
    """
    Walk the cavern depth-first until standing on the orb.

    Neighbours are tried best priority first. A neighbour already in
    `visited` is never entered again. If the orb is not reachable the walk
    ends back where it started having covered every reachable node.

    Args:
        state: Hunt view to move through
        visited: Node ids already explored; updated in place
        horizontal: Axis of the move that led to the current node
        priority: Ordering of neighbours, lower first

    Returns:
        Number of moves made
    """
    if visited is None:
        visited = set()

    moves = 0
    stack = [_open_frame(state, visited, horizontal, priority)]

    while stack:
        if state.distance_to_orb() == 0:
            logger.debug(f"Orb found at node {state.current_location()} after {moves} moves")
            return moves

        frame = stack[-1]
        if not frame.candidates:
            stack.pop()
            if stack:
                state.move_to(stack[-1].node_id)
                moves += 1
            continue

        status = frame.candidates.poll()
        if status.id in visited:
            continue

        horizontal = is_same_axis(frame.node_id, status.id)
        state.move_to(status.id)
        moves += 1
        stack.append(_open_frame(state, visited, horizontal, priority))

    logger.warning(f"Explored {len(visited)} nodes without reaching the orb")
    return moves
