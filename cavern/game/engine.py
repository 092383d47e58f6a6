"""
Game engine for running two-phase cavern games.

The engine owns the rules the hunters only observe: it builds the state
for each phase, hands it to the hunter, and judges the outcome. Hunters
never report success themselves.
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from cavern.config import SCRAM_BUDGET_FACTOR
from cavern.game.state import (
    GameResult,
    GraphHuntState,
    GraphScramState,
    HuntResult,
    ScramResult,
)
from cavern.graph.paths import path_weight, shortest_path

if TYPE_CHECKING:
    from cavern.agents.base import Hunter
    from cavern.graph.types import Cavern

logger = logging.getLogger(__name__)


def default_budget(
    cavern: Cavern, start_id: int, exit_id: int, factor: float = SCRAM_BUDGET_FACTOR
) -> int:
    """
    Scram budget: the shortest exit cost scaled by factor, rounded up.

    Never less than the shortest exit cost, so escaping is always possible.

    Raises:
        ValueError: If the exit cannot be reached from start
    """
    path = shortest_path(cavern.node(start_id), cavern.node(exit_id))
    if not path:
        raise ValueError(f"Exit {exit_id} is not reachable from node {start_id}")
    weight = path_weight(path)
    return max(weight, math.ceil(weight * factor))


class GameEngine:
    """
    Runs cavern games.

    The engine handles:
    - Building the hunt and scram states over the cavern
    - Running the hunter for each phase
    - Judging each phase and recording the results
    """

    def __init__(self, budget_factor: float = SCRAM_BUDGET_FACTOR) -> None:
        """
        Args:
            budget_factor: Multiplier on the shortest exit cost used when
                run() is not given an explicit budget
        """
        self._budget_factor = budget_factor

    def run_hunt(self, hunter: Hunter, cavern: Cavern, start_id: int, orb_id: int) -> HuntResult:
        """Run the hunt phase and judge it."""
        logger.info(f"Hunt: node {start_id} -> orb at node {orb_id} with {hunter.name}")
        state = GraphHuntState(cavern, start_id, orb_id)

        start = time.time() * 1000
        hunter.hunt(state)
        elapsed = time.time() * 1000 - start

        found = state.current_location() == orb_id
        if found:
            logger.info(f"Orb found in {state.steps} steps")
        else:
            logger.warning(
                f"Hunt failed: stopped at node {state.current_location()} after {state.steps} steps"
            )
        return HuntResult(found=found, steps=state.steps, path=list(state.path), time_ms=elapsed)

    def run_scram(
        self,
        hunter: Hunter,
        cavern: Cavern,
        start_id: int,
        exit_id: int,
        budget: int | None = None,
    ) -> ScramResult:
        """Run the scram phase and judge it."""
        if budget is None:
            budget = default_budget(cavern, start_id, exit_id, self._budget_factor)
        logger.info(f"Scram: node {start_id} -> exit at node {exit_id}, budget {budget}")
        state = GraphScramState(cavern, start_id, exit_id, budget)

        start = time.time() * 1000
        hunter.scram(state)
        elapsed = time.time() * 1000 - start

        if state.escaped:
            logger.info(
                f"Escaped with {state.steps_left()} steps to spare, "
                f"{state.gold_collected} gold"
            )
        elif state.steps_left() < 0:
            logger.warning(f"Scram failed: budget overrun by {-state.steps_left()} steps")
        else:
            logger.warning(f"Scram failed: ended at node {state.current_node().id}, not the exit")

        return ScramResult(
            escaped=state.escaped,
            budget=budget,
            steps_left=state.steps_left(),
            gold=state.gold_collected,
            path=list(state.path),
            time_ms=elapsed,
        )

    def run(
        self,
        hunter: Hunter,
        cavern: Cavern,
        start_id: int,
        orb_id: int,
        exit_id: int,
        budget: int | None = None,
    ) -> GameResult:
        """
        Run a complete game: hunt from start to the orb, then scram from the
        orb to the exit.

        The scram only runs if the hunt found the orb. Gold on the cavern is
        picked up in place, so pass a fresh cavern for every game.

        Args:
            hunter: The hunter to play the game
            cavern: The cavern to play in
            start_id: Where the hunt begins
            orb_id: Where the orb lies (and the scram begins)
            exit_id: Where the scram must end
            budget: Scram budget; derived from the shortest exit cost if None

        Returns:
            GameResult with both phase records
        """
        hunter.on_game_start()

        hunt = self.run_hunt(hunter, cavern, start_id, orb_id)
        scram = None
        if hunt.found:
            scram = self.run_scram(hunter, cavern, orb_id, exit_id, budget)

        result = GameResult(agent_name=hunter.name, hunt=hunt, scram=scram)
        hunter.on_game_end(result.won)

        if result.won:
            logger.info(f"Won! Hunt {hunt.steps} steps, scram gold {result.gold}")
        else:
            logger.info("Lost")
        return result
