from typing import Sequence

from npuzzle.heuristics.manhattan import manhattan


def linear_conflict(s: Sequence[int], dim: int) -> int:
    """Manhattan + 2 per pair of tiles reversed inside their shared goal row or column.

    Each tile only looks forward (j > i) along its row segment and down its
    column, so a pair is counted once.
    """
    m = manhattan(s, dim)
    n = len(s)
    for i, ti in enumerate(s):
        if ti == 0:
            continue
        r, c = divmod(i, dim)
        gr, gc = divmod(ti - 1, dim)
        # Row conflicts
        if gr == r:
            for j in range(i + 1, (r + 1) * dim):
                tj = s[j]
                if tj != 0 and (tj - 1) // dim == r and tj < ti:
                    m += 2
        # Column conflicts
        if gc == c:
            for j in range(i + dim, n, dim):
                tj = s[j]
                if tj != 0 and (tj - 1) % dim == c and tj < ti:
                    m += 2
    return m
