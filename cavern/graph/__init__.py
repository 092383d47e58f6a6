"""
Graph module.

Provides the cavern graph and the algorithms run over it:
- Node, Cavern: Weighted undirected graph of tiles
- Heap: Min/max priority queue shared by both hunter strategies
- shortest_path: Dijkstra shortest path oracle
- generate_cavern: Random grid caverns
- save_cavern / load_cavern: msgpack persistence
"""

from cavern.graph.generator import generate_cavern
from cavern.graph.heap import Heap
from cavern.graph.loader import load_cavern, save_cavern
from cavern.graph.paths import (
    combine_paths,
    format_path,
    path_gold,
    path_weight,
    shortest_path,
)
from cavern.graph.types import Cavern, Node

__all__ = [
    "Cavern",
    "Node",
    "Heap",
    "shortest_path",
    "path_weight",
    "path_gold",
    "combine_paths",
    "format_path",
    "generate_cavern",
    "save_cavern",
    "load_cavern",
]
