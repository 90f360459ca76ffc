"""Hole punching.

A hole is a zeroed cell. Turning a cell into a hole also clears the single
link bit each surrounding cell had pointing at it; the neighbours' other links
are left alone.
"""
from __future__ import annotations

from .cells import DIRECTIONS
from .topology import iter_coords, neighbor_in_grid, reverse_direction


def make_hole(board: "Board", row: int, column: int) -> None:
    board.grid[row][column].clear()
    for d in DIRECTIONS:
        near = neighbor_in_grid(board.rows, board.columns, row, column, d)
        if near is None:
            continue
        board.grid[near[0]][near[1]].links[reverse_direction(d)] = False


def punch_holes(board: "Board") -> int:
    """Independently turn each cell into a hole with ``hole_chance`` percent odds."""
    punched = 0
    for row, column in iter_coords(board.rows, board.columns):
        if not board.rng.chance(board.config.hole_chance):
            continue
        make_hole(board, row, column)
        punched += 1
    if board.enable_metrics:
        board.metrics['holes_punched'] += punched
    return punched


__all__ = ["make_hole", "punch_holes"]
