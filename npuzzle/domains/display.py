from __future__ import annotations
from typing import List, Sequence

from npuzzle.domains.state import Move, PuzzleState

_HEADERS = {
    Move.UP: "MOVE UP -----",
    Move.DOWN: "MOVE DOWN ---",
    Move.LEFT: "MOVE LEFT ---",
    Move.RIGHT: "MOVE RIGHT --",
}


def format_state(tiles: Sequence[int], dim: int) -> str:
    """Board as rows of left-aligned numbers padded to the widest tile."""
    width = len(str(len(tiles) - 1)) + 1
    rows = []
    for r in range(dim):
        row = tiles[r * dim:(r + 1) * dim]
        rows.append("".join(str(t).ljust(width) for t in row).rstrip())
    return "\n".join(rows)


def format_step(index: int, state: PuzzleState, dim: int) -> str:
    if state.move == Move.NONE:
        header = "------ START ------"
    else:
        header = f"-- {index}: {_HEADERS[state.move]}"
    return header + "\n" + format_state(state.tiles, dim)


def format_solution(path: List[PuzzleState], dim: int) -> str:
    lines = ["*************** SOLUTION ****************", ""]
    if not path:
        lines += ["-- NO SOLUTION --", ""]
    for i, state in enumerate(path):
        lines += [format_step(i, state, dim), ""]
    lines.append("*****************************************")
    return "\n".join(lines)
