"""
Heuristics module.

Ordering rules for the hunt phase. Only the distance hint of each
neighbour is known, so ties are broken by preferring to keep moving
along the same axis as the previous move.

The axis test is `|current_id - neighbor_id| < SAME_AXIS_ID_DELTA`. With
row-major ids that holds exactly for horizontal moves, so it is a cheap
proxy for directional continuity rather than real geometry. On caverns
numbered any other way it is just a weak tie-breaker.
"""

from __future__ import annotations

from cavern.config import SAME_AXIS_BONUS, SAME_AXIS_ID_DELTA


def is_same_axis(current_id: int, neighbor_id: int) -> bool:
    """True if a move between the two ids counts as horizontal."""
    return abs(current_id - neighbor_id) < SAME_AXIS_ID_DELTA


def exploration_priority(
    current_id: int,
    neighbor_id: int,
    distance_to_target: float,
    horizontal: bool,
) -> float:
    """
    Priority of a neighbour in the hunt (lower is explored first).

    Args:
        current_id: Node the agent stands on
        neighbor_id: Candidate next node
        distance_to_target: Distance hint reported for the neighbour
        horizontal: Whether the move into the current node was horizontal

    Returns:
        The distance hint, minus SAME_AXIS_BONUS when the move keeps the axis
    """
    if is_same_axis(current_id, neighbor_id) == horizontal:
        return distance_to_target - SAME_AXIS_BONUS
    return distance_to_target


__all__ = ["is_same_axis", "exploration_priority"]
