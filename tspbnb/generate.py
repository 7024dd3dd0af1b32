from __future__ import annotations

import argparse
import time
from typing import List, Optional

from .problem import DISTMAX, format_distance_matrix, random_distance_matrix, save_distance_matrix


def main(argv: Optional[List[str]] = None) -> int:
    """Generate a random distance matrix, print it and optionally save it."""
    ap = argparse.ArgumentParser(prog="tsp-random", description="Random distance matrix generator")
    ap.add_argument("size", nargs="?", type=int, default=5, help="Problem size [default: 5]")
    ap.add_argument("filename", nargs="?", help="Save the matrix to this file")
    ap.add_argument("seed", nargs="?", type=int, help="Random seed [default: current time]")
    args = ap.parse_args(argv)

    if args.size < 2:
        ap.error("problem size must be >= 2")
    seed = args.seed if args.seed is not None else int(time.time())

    D = random_distance_matrix(args.size, seed, DISTMAX)
    print(format_distance_matrix(D))
    if args.filename:
        save_distance_matrix(D, args.filename)
        print(f"✓ Distance matrix saved to {args.filename}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
