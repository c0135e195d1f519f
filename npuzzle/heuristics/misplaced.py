from typing import Sequence


def misplaced_tile(s: Sequence[int], dim: int) -> int:
    """Number of non-blank tiles not on their goal square."""
    return sum(1 for i, t in enumerate(s) if t != 0 and t != i + 1)
