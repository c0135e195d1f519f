from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import math
import random

from npuzzle.domains.errors import InvalidSize, InvalidTiles
from npuzzle.domains.state import Move, PuzzleState, Tiles


def _board_dim(length: int) -> int:
    dim = math.isqrt(length)
    if length < 4 or dim * dim != length:
        raise InvalidSize(f"{length} tiles do not form a square board of side >= 2")
    return dim


def _validate(tiles: Sequence[int]) -> Tiles:
    tiles = list(tiles)
    if any(isinstance(t, bool) for t in tiles):
        raise InvalidTiles("tiles must be integers, not booleans")
    try:
        values = tuple(int(t) for t in tiles)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidTiles(f"tiles must be integers: {e}") from e
    if any(v != t for v, t in zip(values, tiles)):
        raise InvalidTiles("tiles must be whole numbers")
    _board_dim(len(values))
    if sorted(values) != list(range(len(values))):
        raise InvalidTiles(
            f"tiles must be a permutation of 0..{len(values) - 1} with a single 0 blank"
        )
    return values


class NPuzzle:
    """Square dim×dim sliding-tile puzzle built from a flat start board (0 is the blank)."""
    def __init__(self, tiles: Sequence[int]):
        values = _validate(tiles)
        self.length = len(values)
        self.size = self.length - 1
        self.dim = _board_dim(self.length)
        self.GOAL: Tiles = tuple(list(range(1, self.length)) + [0])
        n = self.dim
        # Precompute (target index, move) pairs for each blank position
        self._nei: Dict[int, Tuple[Tuple[int, Move], ...]] = {}
        for i in range(self.length):
            r, c = divmod(i, n)
            moves = []
            if r > 0:       moves.append((i - n, Move.UP))
            if r < n - 1:   moves.append((i + n, Move.DOWN))
            if c > 0:       moves.append((i - 1, Move.LEFT))
            if c < n - 1:   moves.append((i + 1, Move.RIGHT))
            self._nei[i] = tuple(moves)
        self.start = PuzzleState(values)
        self.solvable = self.is_solvable()

    def __repr__(self) -> str:
        return f"NPuzzle({list(self.start.tiles)!r})"

    # ---------- Core dynamics ----------
    def is_goal(self, s: PuzzleState) -> bool:
        for i, t in enumerate(s.tiles):
            if t != 0 and t != i + 1:
                return False
        return True

    def children(self, s: PuzzleState) -> List[PuzzleState]:
        """One child per legal blank move, in Up, Down, Left, Right order."""
        return [s.moved(j, move) for j, move in self._nei[s.blank_index]]

    # ---------- Solvability ----------
    def is_solvable(self, tiles: Optional[Sequence[int]] = None) -> bool:
        """Parity rule on inversions (pairs of non-blank tiles out of order):
           - dim odd: inversions must be even
           - dim even: inversions odd with the blank on an even row counted
             1-based from the bottom, or inversions even with it on an odd row
        """
        s = self.start.tiles if tiles is None else tuple(tiles)
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[j] < arr[i]:
                    inv += 1
        if self.dim % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.dim - s.index(0) // self.dim
        if inv % 2 == 1:
            return blank_row_from_bottom % 2 == 0
        return blank_row_from_bottom % 2 == 1

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> Tiles:
        """Random walk of ``depth`` blank moves from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = [j for j, _ in self._nei[z]]
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s


def new_puzzle(tiles: Sequence[int]) -> NPuzzle:
    """Build a puzzle, raising InvalidSize or InvalidTiles on bad input."""
    return NPuzzle(tiles)
