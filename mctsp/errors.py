from __future__ import annotations


class MonteCarloTSPError(Exception):
    """Base class for everything the package raises on purpose."""


class InvalidCityCount(MonteCarloTSPError, ValueError):
    pass


class InvalidTrialCount(MonteCarloTSPError, ValueError):
    pass


class InvalidDisplayMode(MonteCarloTSPError, ValueError):
    pass


class DegeneratePath(MonteCarloTSPError, AssertionError):
    """A sampled path is not a closed permutation cycle. This is a bug, not bad input."""


class CityFileNotFound(MonteCarloTSPError, FileNotFoundError):
    pass


class IncompatibleDataFile(MonteCarloTSPError, ValueError):
    def __init__(self, path, lineno: int, line: str):
        self.path = path
        self.lineno = lineno
        self.line = line
        super().__init__(f"{path}:{lineno}: expected two numbers, got {line.strip()!r}")
