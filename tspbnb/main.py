from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .classical import SolverConfig, solve_tsp
from .problem import (
    MAX_CITIES,
    city_letter,
    format_distance_matrix,
    load_distance_matrix,
    random_distance_matrix,
    validate_distance_matrix,
)
from .report import save_results
from .tour import format_tour


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tsp-solve",
        description="Exact TSP solver by exhaustive search with optional branch and bound",
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("-l", "--load", metavar="FILE", help="Load distance matrix from FILE")
    source.add_argument("-n", "--size", type=int, help=f"Generate a random problem of size 2..{MAX_CITIES}")
    ap.add_argument("-s", "--seed", type=int, default=0, help="Random seed used with --size [default: 0]")
    ap.add_argument("-f", "--first", type=int, default=0, help="First city [default: 0]")
    ap.add_argument("-o", "--optimize", action="store_true", help="Enable solver optimization (pruning)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Print every fully explored path")
    ap.add_argument("-d", "--debug", action="store_true", help="Print every explored path (implies -v)")
    ap.add_argument("--outdir", help="Save results as JSON and CSV into this directory")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point: load or generate a distance matrix, solve it and print the best tour.

    Returns:
        Process exit status.
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        if args.load:
            D = load_distance_matrix(args.load)
        else:
            if args.size is None or not 2 <= args.size <= MAX_CITIES:
                ap.error(f"problem size must be in range [2, {MAX_CITIES}]")
            D = random_distance_matrix(args.size, args.seed)
        validate_distance_matrix(D)
    except (OSError, ValueError) as e:
        ap.error(str(e))

    if not 0 <= args.first < D.size:
        ap.error(f"first city must be in range [0, {D.size})")

    config = SolverConfig(
        start=args.first,
        prune=args.optimize,
        verbose=args.verbose or args.debug,
        debug=args.debug,
    )

    if args.load:
        print(f"TSP problem of size {D.size} starting from city {city_letter(config.start)}.")
    else:
        print(
            f"TSP problem of size {D.size} starting from city {city_letter(config.start)} "
            f"(seed {args.seed})."
        )
    print(format_distance_matrix(D))
    print("Starting path exploration...")
    result = solve_tsp(D, config)

    print(f"TSP solved after {result.completed} paths fully explored over {result.search_space}.")
    print(format_tour(result.tour, result.distance))

    if args.outdir:
        instance = Path(args.load).stem if args.load else f"random_n{D.size}_s{args.seed}"
        path = save_results(result, D, config, instance=instance, outdir=args.outdir)
        print(f"✓ Results saved to {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
