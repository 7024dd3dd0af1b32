from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from .problem import DistanceMatrix
from .tour import Tour


@dataclass(frozen=True)
class SolverConfig:
    """
    Options for one solve.

    Attributes:
        start: Index of the starting city.
        prune: Enable branch-and-bound pruning.
        verbose: Print every fully explored (closed) tour.
        debug: Print the working tour at every recursive step.
    """
    start: int = 0
    prune: bool = False
    verbose: bool = False
    debug: bool = False


@dataclass(frozen=True)
class SolveResult:
    """
    Best closed tour found and the amount of work done.

    Attributes:
        tour: City indices of the best tour (n + 1 entries, first == last).
        distance: Total distance of the best tour.
        completed: Number of closed candidate tours examined.
    """
    tour: List[int]
    distance: int
    completed: int

    @property
    def search_space(self) -> int:
        """Number of distinct closed tours from a fixed start, (n-1)!."""
        return math.factorial(len(self.tour) - 2)


def _check(cur: Tour, best: Tour, prune: bool) -> bool:
    # the closing return to the start never goes through here
    if len(cur) <= 1:
        return True
    if cur.repeats_last():
        return False
    # edge weights are non-negative: a partial tour never gets cheaper
    if prune and best.is_set and cur.total_distance >= best.total_distance:
        return False
    return True


def _explore(D: DistanceMatrix, config: SolverConfig, cur: Tour, best: Tour) -> int:
    """Extend the working tour with every city in turn; return closed tours seen."""
    if config.debug:
        print(cur)
    n = D.size
    completed = 0
    for city in range(n):
        cur.push(D, city)
        if _check(cur, best, config.prune):
            if len(cur) == n:
                cur.push(D, config.start)
                if cur.total_distance < best.total_distance:
                    best.copy_from(cur)
                if config.verbose:
                    print(cur)
                completed += 1
                cur.pop(D)
            else:
                completed += _explore(D, config, cur, best)
        cur.pop(D)
    return completed


def solve_tsp(D: DistanceMatrix, config: SolverConfig = SolverConfig()) -> SolveResult:
    """
    Exact TSP solver by depth-first enumeration with optional pruning.

    Cities are tried in increasing index order at every depth, and the best
    tour is only replaced on strict improvement, so among equal-cost optima
    the first one in that order is returned. Pruning never changes the
    returned tour or distance, only the number of completed tours.

    Args:
        D: Symmetric distance matrix with non-negative integer entries.
        config: Start city, pruning and trace options.

    Returns:
        SolveResult with the best closed tour, its distance and the number
        of closed candidate tours examined.

    Raises:
        ValueError: If the problem size is below 2 or the start city is out of range.
    """
    n = D.size
    if n < 2:
        raise ValueError(f"Problem size must be >= 2, got {n}.")
    if not 0 <= config.start < n:
        raise ValueError(f"Start city must be in [0, {n}), got {config.start}.")

    cur = Tour(n + 1, 0)
    best = Tour(n + 1, math.inf)
    cur.push(D, config.start)
    completed = _explore(D, config, cur, best)

    return SolveResult(tour=best.cities(), distance=int(best.total_distance), completed=completed)
