from __future__ import annotations

import argparse
from typing import List, Optional

from .classical import SolveResult, SolverConfig, solve_tsp
from .problem import DistanceMatrix, format_distance_matrix, load_distance_matrix, tour_length, validate_distance_matrix
from .tour import format_tour


def check_solution(D: DistanceMatrix, expected: int) -> SolveResult:
    """
    Solve from city 0 and compare the optimal distance against a known value.

    The distance is recomputed from the returned tour rather than trusted.

    Raises:
        RuntimeError: If the optimal distance differs from the expected one.
    """
    result = solve_tsp(D, SolverConfig(start=0))
    dist = tour_length(result.tour, D)
    print(format_tour(result.tour, result.distance))
    print(f"tsp dist: {dist} (expected: {expected})")
    if dist != expected or result.distance != expected:
        raise RuntimeError(f"Baseline drift: expected {expected}, got {dist}")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="tsp-checksol", description="Check the optimal distance of a TSP instance")
    ap.add_argument("filename", help="Distance matrix file")
    ap.add_argument("mindist", type=int, help="Expected optimal distance")
    args = ap.parse_args(argv)

    try:
        D = load_distance_matrix(args.filename)
        validate_distance_matrix(D)
    except (OSError, ValueError) as e:
        ap.error(str(e))

    print(format_distance_matrix(D))
    try:
        check_solution(D, args.mindist)
    except RuntimeError as e:
        print(f"✗ {e}")
        return 1
    print("✓ Regression check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
