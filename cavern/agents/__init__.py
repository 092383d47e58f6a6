"""
Agents module.

Provides hunters for the cavern game:
- DetourHunter: Distance-ordered DFS hunt, budgeted gold-detour scram
- BaselineHunter: Unordered DFS hunt, shortest-path scram
"""

from cavern.agents.base import HuntView, Hunter, NodeStatus, ScramView
from cavern.agents.baseline import BaselineHunter
from cavern.agents.detour_hunter import DetourHunter
from cavern.agents.explore import explore
from cavern.agents.optimizer import (
    DetourRecord,
    evaluate_detour,
    optimize_path,
    plan_escape,
    walk_path,
)

__all__ = [
    "Hunter",
    "HuntView",
    "ScramView",
    "NodeStatus",
    "DetourHunter",
    "BaselineHunter",
    "DetourRecord",
    "explore",
    "evaluate_detour",
    "optimize_path",
    "plan_escape",
    "walk_path",
    "get_agent",
    "available_agents",
]

_AGENTS = {
    "detour": DetourHunter,
    "baseline": BaselineHunter,
}


def available_agents() -> list[str]:
    return list(_AGENTS)


def get_agent(name: str, **kwargs) -> Hunter:
    """
    Get a hunter by name.

    Args:
        name: Agent identifier (detour, baseline)
        **kwargs: Additional arguments passed to the constructor (e.g., reserve)

    Returns:
        Instantiated hunter

    Raises:
        ValueError: If agent name is unknown
    """
    if name not in _AGENTS:
        available = ", ".join(_AGENTS)
        raise ValueError(f"Unknown agent '{name}'. Available: {available}")

    # Only the detour hunter takes options
    if name == "detour":
        return DetourHunter(**kwargs)

    return _AGENTS[name]()
