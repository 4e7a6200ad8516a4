from __future__ import annotations
import random
import time
from typing import List, Optional

from .errors import InvalidCityCount


def randperm(n: int, rng: random.Random) -> List[int]:
    """Uniform random permutation of range(n) (Fisher-Yates)."""
    perm = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        perm[i], perm[j] = perm[j], perm[i]
    return perm


def is_valid_cycle(path: List[int], n: int) -> bool:
    if len(path) != n + 1 or n < 1:
        return False
    if path[0] != path[n]:
        return False
    return sorted(path[:n]) == list(range(n))


def copy_path(path: List[int]) -> List[int]:
    return list(path)


class PermutationSampler:
    """Draws closed random tours over n cities.

    The random stream is seeded once, when the sampler is built. Pass `rng`
    to share or control the stream; otherwise `seed` is used, and if that is
    None too, a time-derived seed.
    """

    def __init__(self, n: int, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if n < 1:
            raise InvalidCityCount(f"need at least one city, got {n}")
        self.n = n
        if rng is not None:
            self.seed = None
            self.rng = rng
        else:
            self.seed = seed if seed is not None else time.time_ns()
            self.rng = random.Random(self.seed)

    def sample(self) -> List[int]:
        path = randperm(self.n, self.rng)
        path.append(path[0])
        return path
