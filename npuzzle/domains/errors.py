from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for rejected puzzle input."""


class InvalidSize(PuzzleError):
    """Tile count is not the square of a board side (2x2 or larger)."""


class InvalidTiles(PuzzleError):
    """Tiles are not a permutation of 0..len-1."""


class PathReconstructionError(RuntimeError):
    """A parent key was not found among the explored states."""
