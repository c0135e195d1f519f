from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence, Tuple

Tiles = Tuple[int, ...]


class Move(IntEnum):
    """Direction the blank travelled to produce a state."""
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def label(self) -> str:
        return "START" if self is Move.NONE else self.name


def state_key(tiles: Sequence[int]) -> str:
    """Identity key of a board. Comma-joined so 1,12 and 11,2 never collide."""
    return ",".join(str(t) for t in tiles)


@dataclass
class PuzzleState:
    """One board configuration plus its search bookkeeping.

    Only ``tiles`` takes part in equality and hashing.
    """
    tiles: Tiles
    blank_index: int = -1
    g: int = field(default=0, compare=False)
    h: float = field(default=0, compare=False)
    f: float = field(default=0, compare=False)
    move: Move = field(default=Move.NONE, compare=False)
    parent_key: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        self.tiles = tuple(self.tiles)
        if self.blank_index < 0:
            self.blank_index = self.tiles.index(0)

    def __hash__(self) -> int:
        return hash(self.tiles)

    @property
    def key(self) -> str:
        return state_key(self.tiles)

    def moved(self, target: int, move: Move) -> "PuzzleState":
        """Copy with the blank swapped into ``target``; costs are left unset."""
        lst = list(self.tiles)
        z = self.blank_index
        lst[z], lst[target] = lst[target], lst[z]
        return PuzzleState(tiles=tuple(lst), blank_index=target, move=move)
