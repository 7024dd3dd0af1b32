#!/usr/bin/env python3
"""
Visualize the effect of branch-and-bound pruning.

For each problem size, solves a few random instances with and without
pruning and plots the number of fully explored tours against (n-1)!.
"""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from tspbnb.classical import SolverConfig, solve_tsp
from tspbnb.problem import random_distance_matrix

MAX_N = 9
SEEDS = range(5)


def collect_pruning_stats(max_n=MAX_N, seeds=SEEDS):
    """Solve random instances for n = 2..max_n and tabulate completed tour counts."""
    rows = []
    for n in range(2, max_n + 1):
        for seed in seeds:
            D = random_distance_matrix(n, seed)
            full = solve_tsp(D, SolverConfig(prune=False))
            pruned = solve_tsp(D, SolverConfig(prune=True))
            if full.distance != pruned.distance:
                raise RuntimeError(f"Pruning changed the optimum for n={n}, seed={seed}")
            rows.append({
                "n": n,
                "seed": seed,
                "search_space": math.factorial(n - 1),
                "completed_full": full.completed,
                "completed_pruned": pruned.completed,
                "distance": full.distance,
            })
    return pd.DataFrame(rows)


def figure_pruning_effect(stats, output_path):
    """Bar chart of mean completed tours per problem size, log scale."""
    summary = stats.groupby("n")[["search_space", "completed_full", "completed_pruned"]].mean()
    sizes = summary.index.to_numpy()
    x = np.arange(len(sizes))
    width = 0.4

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x - width / 2, summary["completed_full"], width, color='#E0E0E0',
           edgecolor='black', linewidth=0.5, label='Without pruning', zorder=3)
    ax.bar(x + width / 2, summary["completed_pruned"], width, color='#4CAF50',
           edgecolor='black', linewidth=0.5, label='With pruning', zorder=3)
    ax.plot(x, summary["search_space"], 'o--', color='#1565C0', linewidth=2,
            markersize=6, label='(n-1)!', zorder=4)

    ax.set_yscale('log')
    ax.set_xticks(x)
    ax.set_xticklabels([str(n) for n in sizes])
    ax.set_xlabel('Number of Cities', fontsize=12, fontweight='bold')
    ax.set_ylabel('Fully Explored Tours (mean)', fontsize=12, fontweight='bold')
    ax.set_title('Branch and Bound: Fully Explored Tours per Problem Size',
                 fontsize=13, fontweight='bold', pad=10)
    ax.grid(True, alpha=0.3, linestyle='--', axis='y', zorder=1)
    ax.legend(loc='upper left', fontsize=10, framealpha=0.9)

    plt.tight_layout()
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=150, facecolor='white')
    print(f"Figure saved to: {output_path}")
    plt.close(fig)


def main():
    """Generate the pruning figure."""
    print(f"Solving random instances for n = 2..{MAX_N}...")
    stats = collect_pruning_stats()
    print(stats.groupby("n")[["completed_full", "completed_pruned"]].mean().to_string())
    figure_pruning_effect(stats, Path("results") / "pruning_effect.png")


if __name__ == "__main__":
    main()
