from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import numpy as np

DISTMAX = 10  # max random distance between two cities
MAX_CITIES = 26  # city names in range [A, Z]


def city_letter(city: int) -> str:
    """Return the letter naming a city index (0 -> 'A')."""
    return chr(ord("A") + city)


class DistanceMatrix:
    """
    Read-only square table of non-negative integer distances between cities.

    The underlying numpy array is copied on construction and flagged
    non-writeable. Lookups go through a nested-list mirror of the array,
    which is much faster than numpy scalar indexing inside the search loop.

    Attributes:
        size: Number of cities.
    """

    def __init__(self, data) -> None:
        raw = np.array(data)
        if not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Distance matrix must hold integers, got dtype {raw.dtype}.")
        D = raw.astype(np.int64)
        if not np.array_equal(D, raw):
            raise ValueError("Distance matrix entries do not fit in 64-bit integers.")
        if D.ndim != 2 or D.shape[0] != D.shape[1]:
            raise ValueError(f"Distance matrix must be square, got shape {D.shape}.")
        D.flags.writeable = False
        self._array = D
        self._rows = D.tolist()
        self.size = D.shape[0]

    def distance(self, i: int, j: int) -> int:
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"City index out of range: ({i}, {j}) for size {self.size}")
        return self._rows[i][j]

    def as_array(self) -> np.ndarray:
        return self._array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return bool(np.array_equal(self._array, other._array))

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"


def validate_distance_matrix(D: DistanceMatrix) -> Dict[str, bool]:
    """
    Validate distance matrix properties.

    Checks size bounds, symmetry, zero diagonal and non-negative entries.

    Args:
        D: Distance matrix to validate.

    Returns:
        Dictionary with validation flags:
        {"square": bool, "symmetric": bool, "diag_zero": bool, "non_negative": bool}

    Raises:
        ValueError: If any check fails.
    """
    A = D.as_array()
    if D.size < 2:
        raise ValueError(f"Problem size must be >= 2, got {D.size}.")
    if D.size > MAX_CITIES:
        raise ValueError(f"Problem size must be <= {MAX_CITIES}, got {D.size}.")
    if not np.array_equal(A, A.T):
        raise ValueError("Distance matrix is not symmetric.")
    if np.any(np.diag(A) != 0):
        raise ValueError("Distance matrix diagonal is not zero.")
    if np.any(A < 0):
        raise ValueError("Distance matrix has negative entries.")

    return {"square": True, "symmetric": True, "diag_zero": True, "non_negative": True}


def tour_length(tour: Sequence[int], D: DistanceMatrix) -> int:
    """
    Compute the length of a tour from the distance matrix.

    The tour is taken as given: a closed tour must already repeat its first
    city at the end.

    Args:
        tour: Sequence of city indices.
        D: Distance matrix.

    Returns:
        Sum of distances over all consecutive pairs.
    """
    total = 0
    for k in range(len(tour) - 1):
        total += D.distance(tour[k], tour[k + 1])
    return total


def random_distance_matrix(size: int, seed: int, distmax: int = DISTMAX) -> DistanceMatrix:
    """
    Generate a random symmetric distance matrix.

    Off-diagonal distances are drawn uniformly from [1, distmax]; the
    diagonal is zero. The same seed always yields the same matrix.

    Args:
        size: Number of cities (>= 2).
        seed: Random seed.
        distmax: Largest distance that may be drawn (default: DISTMAX).

    Returns:
        DistanceMatrix of the requested size.
    """
    if size < 2:
        raise ValueError(f"Problem size must be >= 2, got {size}.")
    if distmax < 1:
        raise ValueError(f"Max distance must be >= 1, got {distmax}.")
    rng = np.random.default_rng(seed)
    D = np.zeros((size, size), dtype=np.int64)
    for i in range(size):
        for j in range(i):
            d = int(rng.integers(1, distmax + 1))
            D[i, j] = d
            D[j, i] = d
    return DistanceMatrix(D)


def load_distance_matrix(path: Union[str, Path]) -> DistanceMatrix:
    """
    Load a distance matrix from a text file.

    Format: the problem size, followed by size * size non-negative integers
    in row-major order, all whitespace-delimited.

    Raises:
        ValueError: If the file content is malformed.
    """
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: empty distance matrix file.")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as e:
        raise ValueError(f"{path}: non-integer token in distance matrix file.") from e

    size, entries = values[0], values[1:]
    if size < 1:
        raise ValueError(f"{path}: invalid problem size {size}.")
    if len(entries) != size * size:
        raise ValueError(
            f"{path}: expected {size * size} distances for size {size}, got {len(entries)}."
        )
    if any(v < 0 for v in entries):
        raise ValueError(f"{path}: negative distance in matrix.")

    return DistanceMatrix(np.array(entries, dtype=np.int64).reshape(size, size))


def save_distance_matrix(D: DistanceMatrix, path: Union[str, Path]) -> None:
    """Save a distance matrix to a text file (size line, then one row per line)."""
    lines = [str(D.size)]
    for row in D.as_array():
        lines.append(" ".join(str(int(v)) for v in row))
    Path(path).write_text("\n".join(lines) + "\n")


def format_distance_matrix(D: DistanceMatrix, width: Optional[int] = None) -> str:
    """
    Render a distance matrix as a table with lettered rows and columns.

    Example for size 3:

             A  B  C
          ------------
        A |  0  1  2 |
        B |  1  0  3 |
        C |  2  3  0 |
          ------------
    """
    A = D.as_array()
    if width is None:
        width = max(2, len(str(int(A.max()))))
    cell = width + 1
    header = "    " + "".join(f"{city_letter(j):>{width}} " for j in range(D.size))
    separator = "  --" + "-" * (cell * D.size) + "-"
    lines = [header, separator]
    for i in range(D.size):
        cells = "".join(f"{int(A[i, j]):>{width}} " for j in range(D.size))
        lines.append(f"{city_letter(i)} | {cells}|")
    lines.append(separator)
    return "\n".join(lines)
