#!/usr/bin/env python3
import argparse, logging, sys

from npuzzle.domains.display import format_solution, format_state
from npuzzle.domains.errors import PuzzleError
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import DEFAULT_PUZZLES, get_puzzle, parse_tiles
from npuzzle.heuristics.registry import HeuristicKind
from npuzzle.search.a_star import TIE_BREAKS, solve


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one N-puzzle with UCS or A*.")
    p.add_argument("--puzzle", default="wait_for_it", help="Name of a default puzzle (see --list)")
    p.add_argument("--tiles", default=None,
                   help="Your own puzzle on one line, e.g. \"1 2 3 4 5 6 7 8 0\" (0 is the blank)")
    p.add_argument("--heuristic", default="ucs",
                   help="1/ucs, 2/misplaced, 3/euclidean, 4/manhattan, 5/linear_conflict")
    p.add_argument("--verbose", action="store_true", help="Trace every expanded state")
    p.add_argument("--timeout_sec", type=float, default=None)
    p.add_argument("--tie_break", choices=list(TIE_BREAKS), default="heap")
    p.add_argument("--list", action="store_true", help="List default puzzles and exit")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.list:
        for name, tiles in DEFAULT_PUZZLES.items():
            print(f"{name}: {' '.join(map(str, tiles))}")
        return 0

    try:
        tiles = parse_tiles(args.tiles) if args.tiles else get_puzzle(args.puzzle)
        puzzle = NPuzzle(tiles)
    except (PuzzleError, KeyError) as e:
        print(f"Invalid puzzle: {e}", file=sys.stderr)
        return 2

    kind = HeuristicKind.parse(args.heuristic)
    print(f"Solving with {kind.short_name}:")
    print(format_state(puzzle.start.tiles, puzzle.dim))
    res = solve(puzzle, kind, verbose=args.verbose, timeout_sec=args.timeout_sec,
                tie_break=args.tie_break)

    print()
    print(format_solution(res.path, puzzle.dim))
    if res.solved:
        print(f"To solve this problem, the search algorithm expanded a total of {res.expanded} nodes.")
        print(f"The maximum number of nodes in the queue at any one time was {res.max_queue_size}.")
        print(f"The depth of the goal node was {res.goal_depth}.")
    elif res.termination == "unsolvable":
        print("PUZZLE IS NOT SOLVABLE")
    else:
        print(f"No solution ({res.termination}) after expanding {res.expanded} nodes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
