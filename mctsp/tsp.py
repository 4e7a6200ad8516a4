from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional

from .distance import DistanceTable
from .errors import CityFileNotFound, IncompatibleDataFile

Point = Tuple[float, float]


def _parse_line(line: str) -> Optional[Point]:
    parts = line.split()
    if len(parts) != 2:
        return None
    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError:
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return x, y


def read_coordinates(path) -> List[Point]:
    """Read one `x y` pair per line. Blank lines are skipped."""
    try:
        with open(path, "rb") as f:
            raw_lines = f.readlines()
    except OSError as exc:
        raise CityFileNotFound(f"no such file or directory: {path}") from exc

    coords = []
    for lineno, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise IncompatibleDataFile(path, lineno, raw.decode("utf-8", errors="replace")) from None
        if not line.strip():
            continue
        pt = _parse_line(line)
        if pt is None:
            raise IncompatibleDataFile(path, lineno, line)
        coords.append(pt)
    if not coords:
        raise CityFileNotFound(f"no coordinates in {path}")
    return coords


@dataclass
class TSPInstance:
    coords: List[Point]
    name: str = "euclidean_tsp"

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return TSPInstance(coords=coords, name=name)

    @staticmethod
    def from_file(path, name: Optional[str] = None):
        return TSPInstance(coords=read_coordinates(path), name=name or str(path))

    def n_cities(self) -> int:
        return len(self.coords)

    def distance_matrix(self):
        return DistanceTable(self.coords)

    def path_coords(self, path: List[int]) -> List[Point]:
        return [self.coords[i] for i in path]
