# run_experiments.py
import os, json, argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from mctsp import TSPInstance, SimulationConfig, MonteCarloSimulation
from mctsp.experiments import run_repeated_trials, run_trial_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details_by_trials, save_path):
    plt.figure()
    labels = list(details_by_trials.keys())
    for i, label in enumerate(labels, start=1):
        lengths = [L for (L, t, path) in details_by_trials[label]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(labels) + 1), labels)
    plt.xlabel("Simulated paths per run")
    plt.ylabel("Best tour length")
    plt.title("Best lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(inst, cfg, save_path):
    sim = MonteCarloSimulation(inst.distance_matrix(), cfg)
    res = sim.run()
    plt.figure()
    plt.plot(np.arange(1, len(res.history_best_lengths) + 1), res.history_best_lengths)
    plt.xscale("log")
    plt.xlabel("Trial")
    plt.ylabel("Best-so-far tour length")
    plt.title(f"Monte Carlo convergence ({inst.n_cities()} cities)")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=10, help="number of cities")
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--trials", default="100,1000,10000", help="comma-separated trial counts")
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args()

    inst = TSPInstance.random_euclidean(n=args.n, seed=123, square_size=args.square, name=f"demo{args.n}")
    trial_counts = [int(x.strip()) for x in args.trials.split(",") if x.strip()]

    # repeated runs per trial budget
    records = []
    details_by_trials = {}
    for n_trials in trial_counts:
        cfg = SimulationConfig(n_trials=n_trials)
        stats, details = run_repeated_trials(inst, cfg, n_runs=args.runs)
        print(n_trials, json.dumps(stats, indent=2))
        records.append(stats)
        details_by_trials[str(n_trials)] = details

    # summary CSV + scatter plot
    df_summary = pd.DataFrame.from_records(records)
    df_summary.to_csv(ensure(os.path.join(args.outdir, "results_summary.csv")), index=False)
    plot_scatter(details_by_trials, os.path.join(args.outdir, "results_distribution.png"))

    # best-so-far curve for the largest budget
    cfg = SimulationConfig(n_trials=max(trial_counts), seed=7, record_history=True)
    plot_convergence(inst, cfg, os.path.join(args.outdir, "convergence.png"))

    rows = run_trial_sweep(inst, trial_counts, n_runs=3, base_seed=500,
                           csv_path=os.path.join(args.outdir, "trial_sweep.csv"))
    print("Trial budgets evaluated:", len(rows))


if __name__ == "__main__":
    main()
