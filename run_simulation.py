# run_simulation.py
# Monte Carlo search for a short Traveling Salesman tour.
#
# Usage:
#   python run_simulation.py -n 5 -m 0 -f data/grid04_xy.txt   # 5 paths over a 4-city file
#   python run_simulation.py -n 100000 -m 0 -f cities.txt --time-limit 10
#
import os
import sys
import argparse
from functools import partial

from mctsp import TSPInstance, DisplayMode, SimulationConfig, MonteCarloSimulation
from mctsp.errors import MonteCarloTSPError
from mctsp.report import print_trial, print_report


def build_parser():
    ap = argparse.ArgumentParser(
        prog="mctsp",
        description="Find best path to Traveling Salesman Problem using Monte Carlo Method",
        epilog="example: mctsp -n 5 -m 0 -f data/grid04_xy.txt   # simulates 5 paths for 4 cities data file",
    )
    ap.add_argument("-n", "--iter", dest="n_trials", required=True, help="number of paths to simulate")
    ap.add_argument("-m", "--mode", required=True, help="exhibition mode 0, 1 or 2 (silent = 0)")
    ap.add_argument("-f", "--file", required=True, help="cities coordinates file")
    ap.add_argument("--seed", type=int, default=None, help="random seed (default: time-derived)")
    ap.add_argument("--time-limit", type=float, default=None, help="stop after this many seconds")
    return ap


def _parse_trials(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError("number of simulations must be an integer") from None


def fail(prog, msg):
    print(f"{prog}: error: {msg}", file=sys.stderr)
    return 1


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    prog = ap.prog

    try:
        n_trials = _parse_trials(args.n_trials)
        mode = DisplayMode.parse(args.mode)
        inst = TSPInstance.from_file(args.file, name=os.path.basename(args.file))
        cfg = SimulationConfig(n_trials=n_trials, mode=mode, seed=args.seed, time_limit_sec=args.time_limit)
        D = inst.distance_matrix()
        sim = MonteCarloSimulation(D, cfg)
    except (MonteCarloTSPError, ValueError) as exc:
        return fail(prog, exc)

    if mode == DisplayMode.SILENT:
        res = sim.run()
    else:
        print("POSSIBLE PATHS:")
        res = sim.run(on_trial=partial(print_trial, distance=D, mode=mode))
        print()

    print_report(inst, D, res, mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
