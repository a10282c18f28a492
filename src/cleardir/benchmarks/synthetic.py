"""Deterministic synthetic directory trees for benchmarks and tests.

Kept inside `src/` so benchmarking does not depend on the test package.
"""

from __future__ import annotations

from pathlib import Path
from typing import List


def _child_name(index: int) -> str:
    return f"d{index:03d}"


def build_tree(root: Path, *, depth: int, fanout: int) -> int:
    """Creates a full tree of `fanout` subdirectories per level, `depth` levels deep.

    Returns the number of directories created below `root`.
    """

    if depth < 0 or fanout < 0:
        raise ValueError("depth and fanout must be non-negative")

    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    created = 0
    frontier = [root]
    for _ in range(depth):
        next_frontier: List[Path] = []
        for parent in frontier:
            for index in range(fanout):
                child = parent / _child_name(index)
                child.mkdir()
                next_frontier.append(child)
                created += 1
        frontier = next_frontier
    return created


def expected_directory_count(*, depth: int, fanout: int) -> int:
    """Number of directories `build_tree` creates for the same parameters."""

    return sum(fanout**level for level in range(1, depth + 1))
