"""Capacity amplification for well-connected cells."""
from __future__ import annotations

from .connectivity import linked_neighbors
from .topology import iter_coords


def boost_chance(board: "Board", link_count: int) -> int:
    """Boost probability for a cell with ``link_count`` linked neighbours.

    The table holds entries for 1..6 links; a count of 0 is clamped onto the
    first entry.
    """
    table = board.config.boost_table
    index = min(max(link_count - 1, 0), len(table) - 1)
    return table[index]


def amplify_power(board: "Board") -> int:
    boosted = 0
    for row, column in iter_coords(board.rows, board.columns):
        cell = board.grid[row][column]
        if cell.is_hole:
            continue
        count = len(linked_neighbors(board, row, column))
        if board.rng.chance(boost_chance(board, count)):
            cell.capacity = board.config.boosted_capacity
            boosted += 1
    if board.enable_metrics:
        board.metrics['cells_boosted'] += boosted
    return boosted


__all__ = ["amplify_power", "boost_chance"]
