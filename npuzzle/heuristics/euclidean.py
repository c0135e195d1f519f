from typing import Sequence
import math


def euclidean(s: Sequence[int], dim: int) -> float:
    """Sum of straight-line distances to goal positions (blank ignored)."""
    dist = 0.0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, dim)
        gr, gc = divmod(tile - 1, dim)
        dist += math.sqrt((r - gr) ** 2 + (c - gc) ** 2)
    return dist
