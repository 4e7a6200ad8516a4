from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np


class DistanceTable:
    """Full pairwise Euclidean distance matrix, computed once.

    Backed by a single C-ordered float64 buffer of shape (n, n), so entry
    (i, j) sits at flat offset i*n + j. The buffer is read-only after
    construction.
    """

    def __init__(self, coords: Sequence[Tuple[float, float]]):
        xy = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
        self.n = xy.shape[0]
        dx = xy[:, 0][:, None] - xy[:, 0][None, :]
        dy = xy[:, 1][:, None] - xy[:, 1][None, :]
        D = np.ascontiguousarray(np.hypot(dx, dy))
        D.setflags(write=False)
        self._D = D

    @property
    def matrix(self) -> np.ndarray:
        return self._D

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, ij: Tuple[int, int]) -> float:
        i, j = ij
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"city index out of range for {self.n} cities: ({i}, {j})")
        return float(self._D[i, j])

    def as_list(self) -> List[List[float]]:
        return self._D.tolist()
