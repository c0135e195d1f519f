from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from npuzzle.domains.display import format_state
from npuzzle.domains.errors import PathReconstructionError
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.state import Move, PuzzleState
from npuzzle.heuristics.registry import HeuristicKind, get_heuristic

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Outcome of one ``solve`` call.

    ``goal_depth`` counts the states on the path, start included, so a
    puzzle that is already solved has depth 1 and zero moves.
    ``termination`` is one of ok, unsolvable, exhausted, timeout, limit.
    """
    path: List[PuzzleState] = field(default_factory=list)
    expanded: int = 0
    max_queue_size: int = 0
    goal_depth: int = 0
    generated: int = 0
    duplicates: int = 0
    time: float = 0.0
    heuristic: HeuristicKind = HeuristicKind.UNIFORM_COST
    termination: str = "ok"

    @property
    def solved(self) -> bool:
        return self.termination == "ok"

    @property
    def moves(self) -> List[Move]:
        return [s.move for s in self.path[1:]]

    @property
    def num_moves(self) -> int:
        return max(self.goal_depth - 1, 0)

    def as_row(self) -> Dict[str, object]:
        return {
            "heuristic": self.heuristic.short_name,
            "expanded": self.expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "max_queue": self.max_queue_size,
            "goal_depth": self.goal_depth,
            "time_sec": f"{self.time:.6f}",
            "termination": self.termination,
        }


def reconstruct_path(goal: PuzzleState, explored: Dict[str, PuzzleState]) -> List[PuzzleState]:
    """Follow parent keys through ``explored`` back to the start; returns start..goal."""
    path: List[PuzzleState] = [goal]
    parent_key = goal.parent_key
    while parent_key is not None:
        try:
            node = explored[parent_key]
        except KeyError:
            raise PathReconstructionError(
                f"parent {parent_key!r} of a path state was never explored"
            ) from None
        path.append(node)
        parent_key = node.parent_key
    path.reverse()
    return path


TIE_BREAKS = ("heap", "shallow", "deep", "fifo", "lifo")


@dataclass(order=True)
class _FrontierItem:
    priority: Tuple[float, ...]
    state: PuzzleState = field(compare=False)


def solve(
    puzzle: NPuzzle,
    heuristic_kind=HeuristicKind.UNIFORM_COST,
    verbose: bool = False,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
    tie_break: str = "heap",
) -> SolveResult:
    """
    Best-first graph search ordered by f = g + h.
    With UNIFORM_COST this is Uniform Cost Search, otherwise A*.
    A board is pushed at most once and expanded at most once.
    tie_break orders equal-f entries: heap (compare f only and leave ties to
    the binary heap), shallow (lower g first), deep, fifo, lifo.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    kind = HeuristicKind.parse(heuristic_kind)
    hfun = get_heuristic(kind)
    dim = puzzle.dim
    t0 = perf_counter()
    counter = itertools.count()

    def priority_tuple(f: float, g: int) -> Tuple[float, ...]:
        if tie_break == "heap": return (f,)
        if tie_break == "deep": return (f, -g, next(counter))
        if tie_break == "fifo": return (f, 0, next(counter))
        if tie_break == "lifo": return (f, 0, -next(counter))
        return (f, g, next(counter))

    if not puzzle.solvable:
        logger.debug("Start board %s is not solvable; skipping search", puzzle.start.key)
        if verbose:
            logger.info("PUZZLE IS NOT SOLVABLE")
        return SolveResult(heuristic=kind, termination="unsolvable", time=perf_counter() - t0)

    start = PuzzleState(puzzle.start.tiles, puzzle.start.blank_index)
    start.h = hfun(start.tiles, dim)
    start.f = start.g + start.h

    open_heap: List[_FrontierItem] = []
    heapq.heappush(open_heap, _FrontierItem(priority_tuple(start.f, 0), start))
    in_frontier: Set[str] = {start.key}
    explored: Dict[str, PuzzleState] = {}

    expanded = generated = duplicates = 0
    max_queue = 0

    def finish(termination: str, path: Optional[List[PuzzleState]] = None) -> SolveResult:
        path = path or []
        res = SolveResult(
            path=path, expanded=expanded, max_queue_size=max_queue,
            goal_depth=len(path), generated=generated, duplicates=duplicates,
            time=perf_counter() - t0, heuristic=kind, termination=termination,
        )
        logger.debug("%s search ended (%s): expanded=%d max_queue=%d depth=%d",
                     kind.short_name, termination, expanded, max_queue, res.goal_depth)
        return res

    logger.debug("Solving %s with %s (h0=%s)", start.key, kind.short_name, start.h)
    if verbose:
        logger.info("SOLVING PUZZLE...")

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return finish("timeout")
        if max_expansions is not None and expanded >= max_expansions:
            return finish("limit")

        node = heapq.heappop(open_heap).state
        key = node.key
        in_frontier.discard(key)

        if puzzle.is_goal(node):
            path = reconstruct_path(node, explored)
            if verbose:
                logger.info("GOAL\n%s", format_state(node.tiles, dim))
            return finish("ok", path)

        if key in explored:
            continue

        if verbose:
            if node.parent_key is None:
                logger.info("Expanding state\n%s", format_state(node.tiles, dim))
            else:
                logger.info("The best state to expand with g(n) = %d and h(n) = %g is...\n%s\nExpanding this node...",
                            node.g, node.h, format_state(node.tiles, dim))

        explored[key] = node
        expanded += 1

        for child in puzzle.children(node):
            generated += 1
            child_key = child.key
            if child_key in in_frontier or child_key in explored:
                duplicates += 1
                continue
            child.g = node.g + 1
            child.h = hfun(child.tiles, dim)
            child.f = child.g + child.h
            child.parent_key = key
            heapq.heappush(open_heap, _FrontierItem(priority_tuple(child.f, child.g), child))
            in_frontier.add(child_key)

        max_queue = max(max_queue, len(open_heap))

    return finish("exhausted")
