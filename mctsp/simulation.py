from __future__ import annotations
import enum
import math
import numbers
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .distance import DistanceTable
from .errors import DegeneratePath, InvalidCityCount, InvalidDisplayMode, InvalidTrialCount
from .evaluator import path_length
from .sampler import PermutationSampler, copy_path, is_valid_cycle

# every trial index is exact both as int and as float up to here
MAX_TRIALS = 2 ** 53


class DisplayMode(enum.IntEnum):
    SILENT = 0
    VERBOSE = 1
    VERBOSE_EXTRA = 2

    @classmethod
    def parse(cls, value) -> "DisplayMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, (numbers.Integral, str)):
            raise InvalidDisplayMode(f"invalid mode {value!r}, choose 0, 1 or 2")
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidDisplayMode(f"invalid mode {value!r}, choose 0, 1 or 2") from None


@dataclass
class SimulationConfig:
    n_trials: int = 1000
    mode: DisplayMode = DisplayMode.SILENT
    seed: Optional[int] = None          # None -> time-derived seed
    time_limit_sec: Optional[float] = None
    record_history: bool = False
    validate_paths: bool = False        # re-check every sampled path


@dataclass(frozen=True)
class TrialResult:
    trial: int
    path: List[int]
    length: float


@dataclass
class BestPath:
    path: Optional[List[int]] = None
    length: float = math.inf
    trial: Optional[int] = None

    def offer(self, path: List[int], length: float, trial: int) -> bool:
        """Keep `path` if it is strictly shorter than the current best. Ties keep the older one."""
        if length < self.length:
            self.path = copy_path(path)
            self.length = length
            self.trial = trial
            return True
        return False


@dataclass
class SimulationResult:
    best_path: Optional[List[int]]
    best_length: float
    best_trial: Optional[int]
    n_trials: int
    elapsed_sec: float
    seed: Optional[int]
    config: SimulationConfig
    history_best_lengths: List[float] = field(default_factory=list)
    stopped_early: bool = False

    @property
    def has_result(self) -> bool:
        return self.best_path is not None


def check_trial_count(n_trials) -> int:
    if isinstance(n_trials, bool) or not isinstance(n_trials, numbers.Integral):
        raise InvalidTrialCount(f"number of simulations must be an integer, got {n_trials!r}")
    n_trials = int(n_trials)
    if n_trials < 0:
        raise InvalidTrialCount(f"number of simulations must be non-negative, got {n_trials}")
    if n_trials > MAX_TRIALS:
        raise InvalidTrialCount(f"number of simulations must be at most {MAX_TRIALS}")
    return n_trials


class MonteCarloSimulation:
    """Draws `cfg.n_trials` random closed tours and keeps the shortest one."""

    def __init__(self, distance: DistanceTable, cfg: SimulationConfig, rng: Optional[random.Random] = None):
        if distance.n < 1:
            raise InvalidCityCount(f"need at least one city, got {distance.n}")
        self.D = distance
        self.n = distance.n
        self.cfg = cfg
        self.n_trials = check_trial_count(cfg.n_trials)
        self.mode = DisplayMode.parse(cfg.mode)
        self.sampler = PermutationSampler(self.n, rng=rng, seed=cfg.seed)
        self.best = BestPath()
        self.history_best_lengths: List[float] = []

    def _trial(self, trial: int) -> TrialResult:
        path = self.sampler.sample()
        if self.cfg.validate_paths and not is_valid_cycle(path, self.n):
            raise DegeneratePath(f"trial {trial} produced {path!r}")
        return TrialResult(trial=trial, path=path, length=path_length(self.D, path))

    def run(self, on_trial: Optional[Callable[[TrialResult], None]] = None) -> SimulationResult:
        start = time.time()
        deadline = start + self.cfg.time_limit_sec if self.cfg.time_limit_sec is not None else None
        self.best = BestPath()
        self.history_best_lengths = []

        done = 0
        stopped_early = False
        while done < self.n_trials:
            res = self._trial(done)
            if on_trial is not None:
                on_trial(res)
            self.best.offer(res.path, res.length, res.trial)
            done += 1
            if self.cfg.record_history:
                self.history_best_lengths.append(self.best.length)
            if deadline is not None and done < self.n_trials and time.time() >= deadline:
                stopped_early = True
                break

        elapsed = time.time() - start
        return SimulationResult(best_path=self.best.path, best_length=self.best.length,
                                best_trial=self.best.trial, n_trials=done, elapsed_sec=elapsed,
                                seed=self.sampler.seed, config=self.cfg,
                                history_best_lengths=self.history_best_lengths,
                                stopped_early=stopped_early)


def simulate(distance: DistanceTable, n_trials: int, mode=DisplayMode.SILENT, seed: Optional[int] = None,
             on_trial: Optional[Callable[[TrialResult], None]] = None) -> SimulationResult:
    cfg = SimulationConfig(n_trials=n_trials, mode=DisplayMode.parse(mode), seed=seed)
    return MonteCarloSimulation(distance, cfg).run(on_trial=on_trial)
