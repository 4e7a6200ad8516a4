import os, argparse
import matplotlib.pyplot as plt
import imageio

from mctsp import TSPInstance, SimulationConfig, MonteCarloSimulation


def visualize(inst, cfg, outdir, step=1):
    os.makedirs(outdir, exist_ok=True)
    sim = MonteCarloSimulation(inst.distance_matrix(), cfg)
    improvements = []

    def on_trial(res):
        if res.length < sim.best.length:
            improvements.append((res.trial, list(res.path), res.length))

    res = sim.run(on_trial=on_trial)
    if not res.has_result:
        print("Nothing to draw: no paths simulated")
        return None

    coords = inst.coords
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    frames = []
    for k, (trial, path, L) in enumerate(improvements[::step]):
        xs = [coords[i][0] for i in path]
        ys = [coords[i][1] for i in path]

        plt.figure(figsize=(5,5))
        plt.plot(cx, cy, "o")
        plt.plot(xs, ys, "-")
        plt.title(f"Monte Carlo best-so-far\ntrial={trial+1}  length={L:.2f}")
        plt.axis("equal")
        plt.tight_layout()
        frame_path = os.path.join(outdir, f"mc_frame_{k:03d}.png")
        plt.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close()
        frames.append(frame_path)

    gif_path = os.path.join(outdir, "mc_convergence.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return gif_path

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--file", default=None, help="cities coordinates file (default: random instance)")
    p.add_argument("--n", type=int, default=8, help="number of random cities")
    p.add_argument("--trials", type=int, default=5000)
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=1, help="frame every k improvements")
    args = p.parse_args()

    if args.file:
        inst = TSPInstance.from_file(args.file)
    else:
        inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    cfg = SimulationConfig(n_trials=args.trials, seed=args.seed)
    visualize(inst, cfg, args.outdir, step=args.step)

if __name__ == "__main__":
    main()
