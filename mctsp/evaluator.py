from __future__ import annotations
from typing import List

from .distance import DistanceTable


def edge_lengths(distance: DistanceTable, path: List[int]) -> List[float]:
    D = distance.matrix
    return [float(D[path[k], path[k + 1]]) for k in range(len(path) - 1)]


def path_length(distance: DistanceTable, path: List[int]) -> float:
    """Total length of a closed path [c0, c1, ..., c0]. The path is not validated."""
    D = distance.matrix
    dist = 0.0
    for k in range(len(path) - 1):
        dist += D[path[k], path[k + 1]]
    return float(dist)
