from __future__ import annotations

import math
from typing import List, Union

from .problem import DistanceMatrix, city_letter


def format_tour(cities: List[int], distance: Union[int, float], capacity: int = 0) -> str:
    """Render a tour as '[ A B C A ] => (6)', padding unfilled slots with '-'."""
    slots = [city_letter(c) for c in cities]
    slots += ["-"] * (capacity - len(cities))
    dist = "inf" if math.isinf(distance) else str(distance)
    return "[ " + " ".join(slots) + f" ] => ({dist})"


class Tour:
    """
    Fixed-capacity path of city indices with its accumulated distance.

    The buffer is allocated once and reused: push/pop only move a length
    cursor and update the running total by exactly one edge.

    Attributes:
        capacity: Maximum number of cities (problem size + 1, for the
            closing return to the start city).
    """

    def __init__(self, capacity: int, distance: Union[int, float] = 0) -> None:
        if capacity < 1:
            raise ValueError(f"Tour capacity must be >= 1, got {capacity}.")
        self.capacity = capacity
        self._array: List[int] = [0] * capacity
        self._length = 0
        self._distance = distance

    def __len__(self) -> int:
        return self._length

    @property
    def total_distance(self) -> Union[int, float]:
        return self._distance

    @property
    def is_set(self) -> bool:
        return not math.isinf(self._distance)

    def last(self) -> int:
        if self._length == 0:
            raise IndexError("last() on empty tour")
        return self._array[self._length - 1]

    def push(self, D: DistanceMatrix, city: int) -> None:
        if self._length >= self.capacity:
            raise IndexError("push() on full tour")
        if not 0 <= city < D.size:
            raise IndexError(f"City index out of range: {city}")
        if self._length > 0:
            self._distance += D.distance(self._array[self._length - 1], city)
        else:
            self._distance = 0
        self._array[self._length] = city
        self._length += 1

    def pop(self, D: DistanceMatrix) -> int:
        if self._length == 0:
            raise IndexError("pop() from empty tour")
        self._length -= 1
        city = self._array[self._length]
        if self._length > 0:
            self._distance -= D.distance(self._array[self._length - 1], city)
        else:
            self._distance = 0
        return city

    def repeats_last(self) -> bool:
        """True if the last city already occurs earlier in the tour."""
        last = self.last()
        for k in range(self._length - 1):
            if self._array[k] == last:
                return True
        return False

    def cities(self) -> List[int]:
        return self._array[: self._length]

    def copy_from(self, other: Tour) -> None:
        # snapshot, replaces this tour wholesale
        self.capacity = other.capacity
        self._array = list(other._array)
        self._length = other._length
        self._distance = other._distance

    def __str__(self) -> str:
        return format_tour(self.cities(), self._distance, self.capacity)

    def __repr__(self) -> str:
        return f"Tour({self.cities()!r}, distance={self._distance!r})"
