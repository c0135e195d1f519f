#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.heuristics.registry import HeuristicKind
from npuzzle.search.a_star import TIE_BREAKS, SolveResult, solve

logger = logging.getLogger(__name__)

State = Tuple[int, ...]

HEADER = [
    "heuristic", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "max_queue", "goal_depth", "time_sec",
    "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = dom.scramble(d, seed)
            seed += 1
            attempts += 1
            if dom.is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def run(n: int, depths: List[int], per_depth: int, heuristics: Sequence[HeuristicKind],
        out: Path, timeout_sec: float | None = None, include_unsolvable: bool = False,
        start_seed: int = 0, tie_break: str = "heap") -> int:
    """Solve every instance with every heuristic and write one CSV row per run. Returns row count."""
    dom = NPuzzle(tuple(list(range(1, n * n)) + [0]))
    insts = generate_instances(dom, depths, per_depth, start_seed)
    out.parent.mkdir(parents=True, exist_ok=True)

    def write_row(w, res: SolveResult, inst: Instance, solvable_flag: int):
        row = res.as_row()
        row.update({"n": n, "tie_break": tie_break, "depth": inst.depth, "seed": inst.seed, "solvable": solvable_flag})
        w.writerow(row)

    rows = 0
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            variants = [(inst.state, 1)]
            if include_unsolvable:
                variants.append((make_unsolvable_variant(inst.state), 0))
            for state, flag in variants:
                puzzle = NPuzzle(state)
                for kind in heuristics:
                    res = solve(puzzle, kind, timeout_sec=timeout_sec, tie_break=tie_break)
                    write_row(w, res, inst, flag)
                    rows += 1
            logger.debug("instance depth=%d seed=%d done", inst.depth, inst.seed)
    logger.info("Wrote %s (%d instances, %d rows)", out, len(insts), rows)
    return rows


def main(argv=None):
    ap = argparse.ArgumentParser(description="UCS/A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Board side (3 = 8-puzzle, 4 = 15-puzzle)")
    ap.add_argument("--heuristics", nargs="+",
                    default=["ucs", "misplaced", "euclidean", "manhattan", "linear_conflict"])
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16, 20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="heap")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-run wall time")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    kinds = [HeuristicKind.parse(h) for h in args.heuristics]
    run(args.n, args.depths, args.per_depth, kinds, args.out,
        timeout_sec=args.timeout_sec, include_unsolvable=args.include_unsolvable,
        start_seed=args.start_seed, tie_break=args.tie_break)
    print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
