#!/usr/bin/env python3
"""
Cavern Runner CLI - Play one game with any hunter.

Usage:
    python scripts/play.py
    python scripts/play.py --rows 20 --cols 30 --seed 7
    python scripts/play.py --agent baseline --seed 7
    python scripts/play.py --seed 7 --save data/seven.cavern
    python scripts/play.py --cavern data/seven.cavern --start 0 --orb 55 --exit 120
    python scripts/play.py --list

Agents:
    detour   - Distance-ordered DFS hunt, budgeted gold-detour scram (default)
    baseline - Unordered DFS hunt, shortest-path scram
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

import numpy as np  # noqa: E402

from cavern.agents import available_agents, get_agent  # noqa: E402
from cavern.config import (  # noqa: E402
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_SEED,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    SCRAM_BUDGET_FACTOR,
    list_saved_caverns,
)
from cavern.game import GameEngine  # noqa: E402
from cavern.graph import (  # noqa: E402
    Cavern,
    format_path,
    generate_cavern,
    load_cavern,
    save_cavern,
)


def pick_endpoints(cavern: Cavern, seed: int | None) -> tuple[int, int, int]:
    """Pick distinct start, orb and exit node ids at random."""
    ids = [n.id for n in cavern.nodes()]
    if len(ids) < 3:
        raise ValueError(f"Cavern needs at least 3 nodes, has {len(ids)}")
    rng = np.random.default_rng(seed)
    start, orb, exit_id = rng.choice(ids, size=3, replace=False)
    return int(start), int(orb), int(exit_id)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play one Cavern Runner game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--agent",
        type=str,
        default="detour",
        choices=available_agents(),
        help="Hunter to use (default: detour)",
    )
    parser.add_argument(
        "--cavern",
        type=Path,
        default=None,
        help="Load a saved cavern instead of generating one",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Generated cavern height")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Generated cavern width")
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Seed for cavern generation and endpoint choice",
    )
    parser.add_argument("--start", type=int, default=None, help="Hunt start node id")
    parser.add_argument("--orb", type=int, default=None, help="Orb node id")
    parser.add_argument("--exit", type=int, default=None, help="Exit node id")
    parser.add_argument(
        "--budget",
        type=int,
        default=None,
        help="Scram budget (default: shortest exit cost x budget factor)",
    )
    parser.add_argument(
        "--budget-factor",
        type=float,
        default=SCRAM_BUDGET_FACTOR,
        help=f"Multiplier on the shortest exit cost (default: {SCRAM_BUDGET_FACTOR})",
    )
    parser.add_argument(
        "--save",
        type=Path,
        default=None,
        help="Save the cavern (before the game) to this path",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List saved caverns and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.list:
        saved = list_saved_caverns()
        if not saved:
            print("No saved caverns")
        for path in saved:
            print(f"  {path.name}")
        return 0

    try:
        if args.cavern:
            cavern = load_cavern(args.cavern)
        else:
            cavern = generate_cavern(args.rows, args.cols, seed=args.seed)

        if args.save:
            save_cavern(cavern, args.save)

        start, orb, exit_id = pick_endpoints(cavern, args.seed)
        start = start if args.start is None else args.start
        orb = orb if args.orb is None else args.orb
        exit_id = exit_id if args.exit is None else args.exit

        agent = get_agent(args.agent)
    except (ValueError, KeyError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    total_gold = cavern.total_gold()

    print("\n" + "=" * 60)
    print("Cavern Runner")
    print("=" * 60)
    print(f"  Cavern: {cavern!r}")
    print(f"  Start:  {start}")
    print(f"  Orb:    {orb}")
    print(f"  Exit:   {exit_id}")
    print(f"  Agent:  {agent.name} - {agent.description}")
    print("=" * 60 + "\n")

    engine = GameEngine(budget_factor=args.budget_factor)
    try:
        result = engine.run(agent, cavern, start, orb, exit_id, budget=args.budget)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    if result.won:
        print(f"Victory! Escaped with {result.gold} of {total_gold} gold")
    elif not result.hunt.found:
        print("Game Over. The orb was never found")
    else:
        print("Game Over. Did not escape in time")
    print("=" * 60)

    print(f"\nHunt: {result.hunt.steps} steps ({result.hunt.time_ms:.1f}ms)")
    if result.scram is not None:
        scram = result.scram
        print(
            f"Scram: {scram.steps_used}/{scram.budget} steps, {scram.gold} gold, "
            f"{len(scram.path) - 1} moves ({scram.time_ms:.1f}ms)"
        )
        print(f"  Route: {format_path([cavern.node(i) for i in scram.path])}")

    return 0 if result.won else 1


if __name__ == "__main__":
    sys.exit(main())
