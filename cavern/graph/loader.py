"""
Save and load caverns as msgpack.

File layout (a single msgpack map):
    {
        "version": 1,
        "nodes": [[id, row, col, gold], ...],
        "edges": [[a, b, weight], ...],
    }
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from cavern.graph.types import Cavern

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def cavern_to_dict(cavern: Cavern) -> dict:
    return {
        "version": FORMAT_VERSION,
        "nodes": [[n.id, n.row, n.col, n.gold] for n in cavern.nodes()],
        "edges": [list(edge) for edge in cavern.edges()],
    }


def cavern_from_dict(data: dict) -> Cavern:
    """
    Rebuild a Cavern from its dict form.

    Raises:
        ValueError: If the version is unsupported or the data is malformed
    """
    version = data.get("version")
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported cavern format version: {version!r}")

    cavern = Cavern()
    try:
        for node_id, row, col, gold in data["nodes"]:
            cavern.add_node(node_id, row=row, col=col, gold=gold)
        for a, b, weight in data["edges"]:
            cavern.connect(a, b, weight)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed cavern data: {e}") from e
    return cavern


def save_cavern(cavern: Cavern, path: Path | str) -> None:
    """Write a cavern to disk."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        msgpack.pack(cavern_to_dict(cavern), f)
    logger.info(f"Saved {cavern!r} to {path}")


def load_cavern(path: Path | str) -> Cavern:
    """Read a cavern written by save_cavern()."""
    path = Path(path)
    logger.info(f"Loading cavern from {path}...")
    with open(path, "rb") as f:
        data = msgpack.load(f)
    cavern = cavern_from_dict(data)
    logger.info(f"Loaded {cavern!r}")
    return cavern
