"""
Game engine module.

Provides game state management and execution:
- GraphHuntState / GraphScramState: Environment views over a Cavern
- HuntResult / ScramResult / GameResult: Phase and game records
- GameEngine: Runs games with hunters
"""

from cavern.game.engine import GameEngine, default_budget
from cavern.game.state import (
    GameResult,
    GraphHuntState,
    GraphScramState,
    HuntResult,
    ScramResult,
)

__all__ = [
    "GameEngine",
    "default_budget",
    "GraphHuntState",
    "GraphScramState",
    "HuntResult",
    "ScramResult",
    "GameResult",
]
