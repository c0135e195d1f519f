#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.experiments.analyze import load_many

HEUR_ORDER = ["ucs", "misplaced", "euclidean", "manhattan", "linear_conflict"]
LABELS = {
    "ucs": "Uniform Cost",
    "misplaced": "Misplaced Tile",
    "euclidean": "Euclidean",
    "manhattan": "Manhattan",
    "linear_conflict": "Manhattan + Linear Conflict",
}


def plot_metric(ax, df, metric, log=True):
    """Mean ± std of ``metric`` vs scramble depth, one line per heuristic."""
    stats = df.groupby(["heuristic", "depth"])[metric].agg(["mean", "std"]).fillna(0.0)
    present = [h for h in HEUR_ORDER if h in stats.index.get_level_values(0)]
    # offset lines a tiny bit so error bars don't overlap
    offsets = np.linspace(-0.2, 0.2, num=max(len(present), 1))
    for off, heur in zip(offsets, present):
        sub = stats.loc[heur]
        xs = sub.index.to_numpy(dtype=float) + off
        ax.errorbar(xs, sub["mean"].to_numpy(), yerr=sub["std"].to_numpy(),
                    marker="o", capsize=3, label=LABELS.get(heur, heur))
    if log:
        ax.set_yscale("log")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "max_queue", "time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
