from typing import Sequence


def manhattan(s: Sequence[int], dim: int) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, dim)
        gr, gc = divmod(tile - 1, dim)
        dist += abs(r - gr) + abs(c - gc)
    return dist
