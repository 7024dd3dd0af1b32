from __future__ import annotations
import json
import pandas as pd
from pathlib import Path

from .classical import SolveResult, SolverConfig
from .problem import DistanceMatrix, city_letter

DEFAULT_OUTDIR = "results"


def result_row(result: SolveResult, D: DistanceMatrix, config: SolverConfig) -> dict:
    """
    Flatten a solve result into a single JSON/CSV-friendly row.

    Args:
        result: Result returned by solve_tsp.
        D: Distance matrix that was solved.
        config: Solver configuration used.

    Returns:
        Dictionary with problem, configuration and solution fields.
    """
    return {
        "problem_size": D.size,
        "start_city_index": config.start,
        "start_city": city_letter(config.start),
        "pruning": config.prune,
        "tour_indices": result.tour,
        "tour": "".join(city_letter(c) for c in result.tour),
        "distance": result.distance,
        "completed_tours": result.completed,
        "search_space_size": result.search_space,
    }


def save_results(
    result: SolveResult,
    D: DistanceMatrix,
    config: SolverConfig,
    instance: str = "results",
    outdir: str = DEFAULT_OUTDIR,
) -> Path:
    """
    Save a solve result as <instance>.json and a single-row <instance>.csv.

    Args:
        result: Result returned by solve_tsp.
        D: Distance matrix that was solved.
        config: Solver configuration used.
        instance: Instance name, used as the file stem and stored in the row.
        outdir: Output directory path (default: "results").

    Returns:
        Path of the JSON file written.
    """
    row = {"instance": instance, **result_row(result, D, config)}
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    json_path = out / f"{instance}.json"
    with open(json_path, "w") as f:
        json.dump(row, f, indent=2)
    # tour_indices is a list; keep it readable as one CSV cell
    csv_row = dict(row, tour_indices=" ".join(str(c) for c in result.tour))
    pd.DataFrame([csv_row]).to_csv(out / f"{instance}.csv", index=False)
    return json_path
