#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m npuzzle.experiments.runner --n 3 --depths 4 8 12 16 20 --per_depth 10 --out results/p8.csv")
    run("python -m npuzzle.experiments.runner --n 4 --depths 4 8 12 16 --per_depth 5 "
        "--heuristics manhattan linear_conflict --timeout_sec 30 --out results/p15.csv")
    run("python -m npuzzle.experiments.analyze results/p8.csv results/p15.csv --out results/summary.csv")
    run("python -m npuzzle.experiments.plot results/p8.csv --save results/plots")

if __name__ == "__main__":
    main()
