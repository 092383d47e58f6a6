"""
Configuration constants for the Cavern Runner project.

All paths, generation settings, and tunable parameters are defined here.
A few values can be overridden from environment variables (or a .env file
loaded by the scripts).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of cavern/
PROJECT_ROOT = Path(__file__).parent.parent

# Saved caverns (msgpack) live here
DATA_DIR = PROJECT_ROOT / "data"

# Benchmark output
RESULTS_DIR = PROJECT_ROOT / "results"

# Extension used for saved caverns
CAVERN_SUFFIX = ".cavern"

# =============================================================================
# Cavern Generation
# =============================================================================

DEFAULT_ROWS = 12
DEFAULT_COLS = 16

# Fraction of the remaining wall edges knocked out after the spanning tree
# is carved. 0 gives a perfect maze (exactly one path between any two nodes).
DEFAULT_LOOP_FRACTION = 0.15

# Edge weights are drawn uniformly from [1, MAX_EDGE_WEIGHT]
DEFAULT_MAX_EDGE_WEIGHT = 5

# Fraction of nodes carrying gold, and the largest single pile
DEFAULT_GOLD_FRACTION = 0.2
DEFAULT_MAX_GOLD = 1000

# Seed used when none is given (None = fresh entropy each run)
_seed = os.environ.get("CAVERN_SEED")
DEFAULT_SEED = int(_seed) if _seed else None

# =============================================================================
# Hunt Heuristic
# =============================================================================

# Two node ids closer than this are treated as lying on the same axis.
# With row-major ids this means "horizontal neighbour".
SAME_AXIS_ID_DELTA = 2

# Subtracted from a neighbour's distance when the move keeps the axis of
# the previous move
SAME_AXIS_BONUS = 0.5

# Axis assumed for the very first move of a hunt
INITIAL_HORIZONTAL = True

# =============================================================================
# Scram Budget
# =============================================================================

# Budget handed to the scram phase = ceil(shortest exit weight * factor)
SCRAM_BUDGET_FACTOR = 1.6

# Steps a detour must leave unused. 0 lets a detour use the budget exactly,
# 1 reproduces the strict "cost < budget" rule.
SCRAM_RESERVE_STEPS = 0

# =============================================================================
# Benchmark Configuration
# =============================================================================

DEFAULT_BENCHMARK_GAMES = 20
DEFAULT_BENCHMARK_AGENTS = ["baseline", "detour"]

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def list_saved_caverns() -> list[Path]:
    """Return saved cavern files in DATA_DIR, sorted by name."""
    if not DATA_DIR.exists():
        return []
    return sorted(DATA_DIR.glob(f"*{CAVERN_SUFFIX}"))
