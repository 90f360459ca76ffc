"""Bounded random cell sampling shared by repair-start selection and seeding."""
from __future__ import annotations

from typing import Callable, Optional

from .cells import Cell, Coord

CellPredicate = Callable[[Cell], bool]


def is_free(cell: Cell) -> bool:
    """Playable cell nobody owns yet."""
    return not cell.is_hole and cell.owner == 0


def sample_cell(board: "Board", predicate: CellPredicate = is_free) -> Optional[Coord]:
    """Draw up to ``sample_attempts`` random coordinates and return the first match.

    Holes never match regardless of ``predicate``. The coordinate is the handle
    callers mutate through (``board.grid[row][col]``); it is also remembered on
    ``board.last_sampled``, which is reset to None when every draw misses.
    A failed coordinate draw counts as one spent attempt.
    """
    board.last_sampled = None
    if board.rows == 0 or board.columns == 0:
        return None
    for _ in range(board.config.sample_attempts):
        row = board.rng.randrange(board.rows)
        column = board.rng.randrange(board.columns)
        if row is None or column is None:
            continue
        cell = board.grid[row][column]
        if cell.is_hole or not predicate(cell):
            continue
        board.last_sampled = (row, column)
        return row, column
    return None


__all__ = ["sample_cell", "is_free", "CellPredicate"]
