from __future__ import annotations
from typing import List

from .distance import DistanceTable
from .evaluator import edge_lengths
from .simulation import DisplayMode, SimulationResult, TrialResult
from .tsp import TSPInstance


def _fmt_path(path: List[int]) -> str:
    return " -> ".join(str(c) for c in path)


def format_trial(res: TrialResult, distance: DistanceTable, mode: DisplayMode) -> str:
    line = f"{res.trial + 1:>6}: [{_fmt_path(res.path)}]  length={res.length:.4f}"
    if mode == DisplayMode.VERBOSE_EXTRA:
        legs = ", ".join(f"{d:.4f}" for d in edge_lengths(distance, res.path))
        line += f"\n        legs: {legs}"
    return line


def print_trial(res: TrialResult, distance: DistanceTable, mode: DisplayMode):
    print(format_trial(res, distance, mode))


def format_report(instance: TSPInstance, distance: DistanceTable, result: SimulationResult,
                  mode: DisplayMode = DisplayMode.SILENT) -> str:
    lines = []
    if mode == DisplayMode.VERBOSE_EXTRA:
        lines.append("DISTANCE MATRIX:")
        for row in distance.as_list():
            lines.append("  " + " ".join(f"{d:10.4f}" for d in row))
        lines.append("")

    lines.append("BEST PATH:")
    if not result.has_result:
        lines.append("  no result (no paths simulated)")
    else:
        for city, (x, y) in zip(result.best_path, instance.path_coords(result.best_path)):
            lines.append(f"  {city:>4}  ({x:.4f}, {y:.4f})")
        lines.append("")
        lines.append(f"BEST LENGTH: {result.best_length:.4f}")
        lines.append(f"FOUND AT TRIAL: {result.best_trial + 1}")
    lines.append(f"SIMULATED PATHS: {result.n_trials}")
    if result.stopped_early:
        lines.append(f"STOPPED EARLY: time limit reached after {result.n_trials} of {result.config.n_trials}")
    lines.append(f"ELAPSED: {result.elapsed_sec:.3f}s")
    return "\n".join(lines)


def print_report(instance: TSPInstance, distance: DistanceTable, result: SimulationResult,
                 mode: DisplayMode = DisplayMode.SILENT):
    print(format_report(instance, distance, result, mode))
