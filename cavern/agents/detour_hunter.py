"""
Detour hunter - heuristic depth-first hunt, gold-detour scram.
"""

from __future__ import annotations

import logging

from cavern.agents.base import HuntView, Hunter, ScramView
from cavern.agents.explore import explore, heuristic_priority
from cavern.agents.optimizer import plan_escape, walk_path
from cavern.config import INITIAL_HORIZONTAL, SCRAM_RESERVE_STEPS

logger = logging.getLogger(__name__)


class DetourHunter(Hunter):
    """
    Hunts by trying the neighbour closest to the orb first, with a small
    bonus for keeping the direction of travel, and backtracks out of dead
    ends.

    Scrams by planning the whole route up front: the shortest exit path,
    grown with detours through gold tiles while the budget allows.
    """

    def __init__(self, reserve: int = SCRAM_RESERVE_STEPS) -> None:
        """
        Args:
            reserve: Steps every detour must leave unused
        """
        self._reserve = reserve

    @property
    def name(self) -> str:
        return "detour"

    @property
    def description(self) -> str:
        return "Distance-ordered DFS hunt, budgeted gold-detour scram"

    def hunt(self, state: HuntView) -> None:
        moves = explore(state, set(), INITIAL_HORIZONTAL, heuristic_priority)
        logger.info(f"Hunt finished after {moves} moves")

    def scram(self, state: ScramView) -> None:
        path = plan_escape(state, self._reserve)
        walk_path(state, path)
