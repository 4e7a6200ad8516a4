from __future__ import annotations
import time, statistics, os
from typing import List, Optional
from dataclasses import replace
from concurrent.futures import ThreadPoolExecutor
import csv
from .tsp import TSPInstance
from .distance import DistanceTable
from .simulation import (BestPath, MonteCarloSimulation, SimulationConfig, SimulationResult,
                         check_trial_count)


def run_repeated_trials(instance: TSPInstance, cfg: SimulationConfig, n_runs: int = 10, base_seed: int = 42):
    D = instance.distance_matrix()
    lengths = []
    times = []
    best_paths = []
    for r in range(n_runs):
        cfg_r = replace(cfg, seed=base_seed + r)
        res = MonteCarloSimulation(D, cfg_r).run()
        lengths.append(res.best_length)
        times.append(res.elapsed_sec)
        best_paths.append(res.best_path)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "n_trials": cfg.n_trials,
        "n_runs": n_runs,
    }
    return stats, list(zip(lengths, times, best_paths))


def run_trial_sweep(instance: TSPInstance, trial_counts: List[int], base_cfg: Optional[SimulationConfig] = None,
                    n_runs: int = 5, base_seed: int = 100, csv_path: Optional[str] = None):
    """Repeated runs for each trial count; one summary row per count."""
    base_cfg = base_cfg or SimulationConfig()
    rows = []
    for n_trials in trial_counts:
        cfg = replace(base_cfg, n_trials=n_trials)
        stats, _ = run_repeated_trials(instance, cfg, n_runs=n_runs, base_seed=base_seed)
        rows.append(stats)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=stats.keys())
                if write_header:
                    w.writeheader()
                w.writerow(stats)
    return rows


def _split(n_trials: int, n_workers: int) -> List[int]:
    q, r = divmod(n_trials, n_workers)
    return [q + (1 if k < r else 0) for k in range(n_workers)]


def run_parallel(distance: DistanceTable, cfg: SimulationConfig, n_workers: int = 4,
                 base_seed: Optional[int] = None) -> SimulationResult:
    """Split the trials over workers with independent streams, then reduce.

    Worker k draws from random.Random(base_seed + k). The local bests are
    merged in worker order with the same strict less-than rule as a single
    run, so fixed seeds give a fixed answer regardless of scheduling.
    """
    if n_workers < 1:
        raise ValueError("n_workers must be >= 1")
    n_trials = check_trial_count(cfg.n_trials)
    if base_seed is None:
        base_seed = cfg.seed if cfg.seed is not None else time.time_ns()
    shares = _split(n_trials, n_workers)
    sims = [MonteCarloSimulation(distance, replace(cfg, n_trials=share, seed=base_seed + k))
            for k, share in enumerate(shares)]

    start = time.time()
    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        results = list(executor.map(lambda sim: sim.run(), sims))
    elapsed = time.time() - start

    best = BestPath()
    offset = 0
    for share, res in zip(shares, results):
        if res.has_result:
            best.offer(res.best_path, res.best_length, offset + res.best_trial)
        offset += share
    return SimulationResult(best_path=best.path, best_length=best.length, best_trial=best.trial,
                            n_trials=sum(r.n_trials for r in results), elapsed_sec=elapsed,
                            seed=base_seed, config=cfg,
                            stopped_early=any(r.stopped_early for r in results))
