"""Creates a synthetic directory tree for manual runs of `cleardir`.

Example:
    python scripts/generate_test_tree.py /tmp/cleardir-tree --depth 4 --fanout 6
"""

from __future__ import annotations

from argparse import ArgumentParser
from pathlib import Path

from cleardir.benchmarks.synthetic import build_tree


def main() -> int:
    parser = ArgumentParser(description="Generate a synthetic directory tree.")
    parser.add_argument("root", type=Path)
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--fanout", type=int, default=5)
    args = parser.parse_args()

    created = build_tree(args.root, depth=args.depth, fanout=args.fanout)
    print(f"Created {created} directories under {args.root}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
