#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.errors import PuzzleError
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import get_puzzle, parse_tiles
from npuzzle.search.a_star import solve


def draw_board(tiles: Sequence[int], n: int, out_path: Path, title: str = ""):
    fig = plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, n], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.55, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close(fig)


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one puzzle and save a board image per step.")
    p.add_argument("--puzzle", default="doable")
    p.add_argument("--tiles", default=None)
    p.add_argument("--heuristic", default="linear_conflict")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    try:
        puzzle = NPuzzle(parse_tiles(args.tiles) if args.tiles else get_puzzle(args.puzzle))
    except (PuzzleError, KeyError) as e:
        print(f"Invalid puzzle: {e}", file=sys.stderr)
        sys.exit(2)

    res = solve(puzzle, args.heuristic)
    if not res.path:
        print(f"No path ({res.termination}).")
        return

    outdir = Path(args.outdir)
    for i, s in enumerate(res.path):
        draw_board(s.tiles, puzzle.dim, outdir / f"step_{i:03d}.png", title=s.move.label)
    print(f"Saved {len(res.path)} frames to {outdir}")


if __name__ == "__main__":
    main()
