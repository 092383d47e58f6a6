#!/usr/bin/env python3
"""
Benchmark hunters on a set of seeded caverns.

Every hunter plays the same caverns with the same endpoints. Each game
gets a freshly generated cavern since gold is picked up in place.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --games 50 --rows 20 --cols 30
    python scripts/benchmark.py --agents detour --seed 100 --save
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import asdict, dataclass
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
    DEFAULT_BENCHMARK_AGENTS,
    DEFAULT_BENCHMARK_GAMES,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    RESULTS_DIR,
    SCRAM_BUDGET_FACTOR,
)
from cavern.game import GameEngine  # noqa: E402
from cavern.graph import generate_cavern  # noqa: E402


@dataclass
class GameRecord:
    """One game of one agent."""

    agent: str
    seed: int
    won: bool
    hunt_steps: int
    scram_steps: int
    gold: int
    total_gold: int


def play_game(agent_name: str, seed: int, rows: int, cols: int, budget_factor: float) -> GameRecord:
    cavern = generate_cavern(rows, cols, seed=seed)
    total_gold = cavern.total_gold()

    rng = np.random.default_rng(seed)
    start, orb, exit_id = (int(i) for i in rng.choice(len(cavern), size=3, replace=False))

    engine = GameEngine(budget_factor=budget_factor)
    result = engine.run(get_agent(agent_name), cavern, start, orb, exit_id)

    return GameRecord(
        agent=agent_name,
        seed=seed,
        won=result.won,
        hunt_steps=result.hunt.steps,
        scram_steps=result.scram.steps_used if result.scram else 0,
        gold=result.gold,
        total_gold=total_gold,
    )


def summarize(records: list[GameRecord]) -> dict[str, float]:
    hunt = np.array([r.hunt_steps for r in records], dtype=float)
    gold = np.array([r.gold for r in records], dtype=float)
    share = np.array([r.gold / r.total_gold if r.total_gold else 0.0 for r in records])
    return {
        "games": len(records),
        "win_rate": float(np.mean([r.won for r in records])),
        "hunt_steps_mean": float(hunt.mean()),
        "hunt_steps_std": float(hunt.std()),
        "gold_mean": float(gold.mean()),
        "gold_std": float(gold.std()),
        "gold_share_mean": float(share.mean()),
    }


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark Cavern Runner hunters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--agents",
        nargs="+",
        default=DEFAULT_BENCHMARK_AGENTS,
        choices=available_agents(),
        help="Hunters to compare",
    )
    parser.add_argument("--games", type=int, default=DEFAULT_BENCHMARK_GAMES, help="Games per hunter")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first cavern")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Cavern height")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Cavern width")
    parser.add_argument("--budget-factor", type=float, default=SCRAM_BUDGET_FACTOR)
    parser.add_argument("--save", action="store_true", help=f"Write results to {RESULTS_DIR}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    print("=" * 70)
    print("Cavern Runner - Hunter Comparison")
    print("=" * 70)
    print(f"\nTesting {len(args.agents)} hunters on {args.games} caverns "
          f"({args.rows}x{args.cols})...\n")

    records: dict[str, list[GameRecord]] = {agent: [] for agent in args.agents}
    start_time = time.time()

    for i in range(args.games):
        seed = args.seed + i
        for agent in args.agents:
            try:
                records[agent].append(
                    play_game(agent, seed, args.rows, args.cols, args.budget_factor)
                )
            except ValueError as e:
                print(f"  [{agent}] seed {seed}: error: {e}", file=sys.stderr)
                return 1

    print(f"{'Agent':<12} {'Win%':>6} {'Hunt steps':>16} {'Gold':>18} {'Gold share':>11}")
    print("-" * 70)
    summaries = {}
    for agent, agent_records in records.items():
        s = summarize(agent_records)
        summaries[agent] = s
        print(
            f"{agent:<12} {100 * s['win_rate']:>5.0f}% "
            f"{s['hunt_steps_mean']:>8.1f} ± {s['hunt_steps_std']:<5.1f} "
            f"{s['gold_mean']:>9.0f} ± {s['gold_std']:<6.0f} "
            f"{100 * s['gold_share_mean']:>10.1f}%"
        )
    print(f"\nTotal time: {time.time() - start_time:.1f}s")

    if args.save:
        RESULTS_DIR.mkdir(parents=True, exist_ok=True)
        out = RESULTS_DIR / f"benchmark_{int(time.time())}.json"
        with open(out, "w") as f:
            json.dump(
                {
                    "config": vars(args),
                    "summary": summaries,
                    "games": [asdict(r) for rs in records.values() for r in rs],
                },
                f,
                indent=2,
            )
        print(f"Results saved to {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
