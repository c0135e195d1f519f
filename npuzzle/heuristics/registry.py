from __future__ import annotations
from enum import IntEnum
from typing import Callable, Dict, Sequence, Union
import logging

from npuzzle.heuristics.euclidean import euclidean
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan
from npuzzle.heuristics.misplaced import misplaced_tile

logger = logging.getLogger(__name__)

HeuristicFn = Callable[[Sequence[int], int], float]


def zero(s: Sequence[int], dim: int) -> int:
    """Uniform Cost Search: no estimate."""
    return 0


class HeuristicKind(IntEnum):
    UNIFORM_COST = 1
    MISPLACED_TILE = 2
    EUCLIDEAN = 3
    MANHATTAN = 4
    MANHATTAN_LINEAR_CONFLICT = 5

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def parse(cls, value: Union["HeuristicKind", int, str, None]) -> "HeuristicKind":
        """Resolve a member, menu number or name; anything unknown means Uniform Cost."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower().replace("-", "_").replace(" ", "_")
            if text.isdigit():
                value = int(text)
            elif text in _ALIASES:
                return _ALIASES[text]
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        logger.warning("Unknown heuristic %r, falling back to uniform cost search", value)
        return cls.UNIFORM_COST


_SHORT_NAMES: Dict[HeuristicKind, str] = {
    HeuristicKind.UNIFORM_COST: "ucs",
    HeuristicKind.MISPLACED_TILE: "misplaced",
    HeuristicKind.EUCLIDEAN: "euclidean",
    HeuristicKind.MANHATTAN: "manhattan",
    HeuristicKind.MANHATTAN_LINEAR_CONFLICT: "linear_conflict",
}

_ALIASES: Dict[str, HeuristicKind] = {
    "ucs": HeuristicKind.UNIFORM_COST,
    "uniform": HeuristicKind.UNIFORM_COST,
    "uniform_cost": HeuristicKind.UNIFORM_COST,
    "zero": HeuristicKind.UNIFORM_COST,
    "misplaced": HeuristicKind.MISPLACED_TILE,
    "misplaced_tile": HeuristicKind.MISPLACED_TILE,
    "euclidean": HeuristicKind.EUCLIDEAN,
    "euclid": HeuristicKind.EUCLIDEAN,
    "manhattan": HeuristicKind.MANHATTAN,
    "m": HeuristicKind.MANHATTAN,
    "linear_conflict": HeuristicKind.MANHATTAN_LINEAR_CONFLICT,
    "manhattan_linear_conflict": HeuristicKind.MANHATTAN_LINEAR_CONFLICT,
    "linear": HeuristicKind.MANHATTAN_LINEAR_CONFLICT,
    "lc": HeuristicKind.MANHATTAN_LINEAR_CONFLICT,
}

_FUNCS: Dict[HeuristicKind, HeuristicFn] = {
    HeuristicKind.UNIFORM_COST: zero,
    HeuristicKind.MISPLACED_TILE: misplaced_tile,
    HeuristicKind.EUCLIDEAN: euclidean,
    HeuristicKind.MANHATTAN: manhattan,
    HeuristicKind.MANHATTAN_LINEAR_CONFLICT: linear_conflict,
}


def get_heuristic(kind) -> HeuristicFn:
    return _FUNCS[HeuristicKind.parse(kind)]


def heuristic_cost(s: Sequence[int], dim: int, kind) -> float:
    return get_heuristic(kind)(s, dim)
