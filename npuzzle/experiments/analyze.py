#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from npuzzle.heuristics.registry import HeuristicKind

METRICS = ("expanded", "max_queue", "time_sec")

# Weakest to strongest; euclidean and misplaced are not ordered against each other.
ORDERING = [
    ("ucs", "misplaced"),
    ("ucs", "euclidean"),
    ("misplaced", "manhattan"),
    ("euclidean", "manhattan"),
    ("manhattan", "linear_conflict"),
]


def load_many(patterns: Iterable[str]) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(str(pat))):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Normalize heuristic labels (names or menu numbers) to short names
    if "heuristic" in df.columns:
        df["heuristic"] = df["heuristic"].map(lambda h: HeuristicKind.parse(str(h)).short_name)

    # Keep clean rows only
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]

    for c in ("n", "depth", "seed", "expanded", "generated", "duplicates", "max_queue", "goal_depth", "time_sec"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def summarize(df: pd.DataFrame, metrics=METRICS) -> pd.DataFrame:
    """mean/median/std of each metric per (heuristic, depth)."""
    if df.empty:
        return pd.DataFrame()
    cols = [m for m in metrics if m in df.columns]
    out = df.groupby(["heuristic", "depth"])[cols].agg(["mean", "median", "std", "count"])
    return out.fillna(0.0)


def check_heuristic_ordering(df: pd.DataFrame, metric: str = "expanded") -> List[str]:
    """Return the (weaker, stronger, depth) pairs where the stronger heuristic expanded more on average."""
    if df.empty:
        return []
    means = df.groupby(["heuristic", "depth"])[metric].mean()
    problems = []
    for weak, strong in ORDERING:
        for depth in sorted(df["depth"].dropna().unique()):
            a = means.get((weak, depth))
            b = means.get((strong, depth))
            if a is None or b is None:
                continue
            if b > a:
                problems.append(f"{strong} > {weak} at depth {int(depth)} ({b:.1f} vs {a:.1f})")
    return problems


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per heuristic and depth.")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return
    table = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print(table)
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out)
        print(f"Saved: {args.out}")

    problems = check_heuristic_ordering(df)
    if problems:
        print("\nHeuristic ordering violations:")
        for p in problems:
            print("  " + p)
    else:
        print("\nHeuristic ordering holds: ucs >= misplaced/euclidean >= manhattan >= linear_conflict")


if __name__ == "__main__":
    main()
