from __future__ import annotations
from typing import Dict, Tuple
import re

from npuzzle.domains.errors import InvalidSize, InvalidTiles

Tiles = Tuple[int, ...]

# ---------------- 8-puzzles ----------------
TRIVIAL: Tiles = (1, 2, 3,
                  4, 5, 6,
                  7, 8, 0)

EASY: Tiles = (1, 2, 0,
               4, 5, 3,
               7, 8, 6)

DOABLE: Tiles = (0, 1, 2,
                 4, 5, 3,
                 7, 8, 6)

OH_BOY: Tiles = (8, 7, 1,
                 6, 0, 2,
                 5, 4, 3)

WAIT_FOR_IT: Tiles = (8, 6, 7,
                      2, 5, 4,
                      3, 0, 1)

IMPOSSIBLE: Tiles = (1, 2, 3,
                     4, 5, 6,
                     8, 7, 0)

# ---------------- 15-puzzles ----------------
FIFTEEN_TRIVIAL: Tiles = (1,  2,  3,  4,
                          5,  6,  7,  8,
                          9,  10, 11, 12,
                          13, 14, 15, 0)

FIFTEEN_EASY: Tiles = (1,  2,  3,  0,
                       5,  6,  7,  4,
                       9,  10, 11, 8,
                       13, 14, 15, 12)

FIFTEEN_DOABLE: Tiles = (2,  0,  3,  4,
                         1,  10, 6,  8,
                         5,  9,  7,  11,
                         13, 14, 15, 12)

FIFTEEN_WAIT_FOR_IT: Tiles = (1,  10, 15, 4,
                              13, 6,  3,  8,
                              2,  9,  12, 7,
                              14, 5,  0,  11)

FIFTEEN_IMPOSSIBLE: Tiles = (1,  2,  3,  4,
                             5,  6,  7,  8,
                             9,  10, 11, 12,
                             13, 15, 14, 0)

DEFAULT_PUZZLES: Dict[str, Tiles] = {
    "trivial": TRIVIAL,
    "easy": EASY,
    "doable": DOABLE,
    "oh_boy": OH_BOY,
    "wait_for_it": WAIT_FOR_IT,
    "impossible": IMPOSSIBLE,
    "fifteen_trivial": FIFTEEN_TRIVIAL,
    "fifteen_easy": FIFTEEN_EASY,
    "fifteen_doable": FIFTEEN_DOABLE,
    "fifteen_wait_for_it": FIFTEEN_WAIT_FOR_IT,
    "fifteen_impossible": FIFTEEN_IMPOSSIBLE,
}

# Documented runs: goal depth counts states on the path (start included);
# per heuristic (expanded, max queue size).
REFERENCE_STATS: Dict[str, Dict[str, object]] = {
    "doable": {
        "depth": 5,
        "euclidean": (4, 4), "manhattan": (4, 4), "linear_conflict": (4, 4),
    },
    "oh_boy": {
        "depth": 23,
        "euclidean": (1027, 576), "manhattan": (330, 212), "linear_conflict": (303, 191),
    },
    "wait_for_it": {
        "depth": 32,
        "euclidean": (37614, 15613), "manhattan": (6862, 3634), "linear_conflict": (3645, 2000),
    },
    "fifteen_doable": {
        "depth": 10,
        "euclidean": (9, 14), "manhattan": (9, 14), "linear_conflict": (9, 14),
    },
    "fifteen_wait_for_it": {
        "depth": 36,
        "euclidean": (117205, 108971), "manhattan": (25369, 22861), "linear_conflict": (3615, 3642),
    },
}


def get_puzzle(name: str) -> Tiles:
    key = name.strip().lower().replace("-", "_")
    try:
        return DEFAULT_PUZZLES[key]
    except KeyError:
        raise KeyError(f"unknown puzzle {name!r}; choose from {', '.join(DEFAULT_PUZZLES)}") from None


def parse_tiles(text: str) -> Tiles:
    """Turn '1 2 3 4 5 6 7 8 0' (spaces, newlines or commas) into a tile tuple."""
    tokens = [t for t in re.split(r"[\s,]+", text.strip()) if t]
    if not tokens:
        raise InvalidSize("no tiles given")
    out = []
    for tok in tokens:
        try:
            out.append(int(tok))
        except ValueError:
            raise InvalidTiles(f"not an integer tile: {tok!r}") from None
    return tuple(out)
