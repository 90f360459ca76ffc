"""Index math for the staggered (odd rows shifted right) hex grid.

Every odd-indexed row sits half a cell to the right of the even rows, so the
diagonal neighbours of a cell depend on the parity of its row:

    even row:  up_left=(r-1,c-1)  up_right=(r-1,c)  bottom_left=(r+1,c-1)  bottom_right=(r+1,c)
    odd row:   up_left=(r-1,c)    up_right=(r-1,c+1)  bottom_left=(r+1,c)  bottom_right=(r+1,c+1)

Left and right are always ``(r,c-1)`` and ``(r,c+1)``.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from .cells import BOTTOM_LEFT, BOTTOM_RIGHT, DIRECTIONS, LEFT, RIGHT, UP_LEFT, UP_RIGHT, Coord

# (row delta, column delta) per direction, indexed by row parity
_EVEN_OFFSETS = {
    LEFT: (0, -1),
    UP_LEFT: (-1, -1),
    UP_RIGHT: (-1, 0),
    RIGHT: (0, 1),
    BOTTOM_RIGHT: (1, 0),
    BOTTOM_LEFT: (1, -1),
}
_ODD_OFFSETS = {
    LEFT: (0, -1),
    UP_LEFT: (-1, 0),
    UP_RIGHT: (-1, 1),
    RIGHT: (0, 1),
    BOTTOM_RIGHT: (1, 1),
    BOTTOM_LEFT: (1, 0),
}


def iter_coords(rows: int, columns: int) -> Iterator[Coord]:
    """Yield every coordinate once in row-major order."""
    for row in range(rows):
        for column in range(columns):
            yield row, column


def in_bounds(rows: int, columns: int, row: int, column: int) -> bool:
    return 0 <= row < rows and 0 <= column < columns


def neighbor_coord(row: int, column: int, direction: int) -> Coord:
    """Coordinate one step from ``(row, column)``; may lie outside the grid."""
    dr, dc = (_ODD_OFFSETS if row % 2 else _EVEN_OFFSETS)[direction]
    return row + dr, column + dc


def neighbor_in_grid(rows: int, columns: int, row: int, column: int, direction: int) -> Optional[Coord]:
    nr, nc = neighbor_coord(row, column, direction)
    if in_bounds(rows, columns, nr, nc):
        return nr, nc
    return None


def eligible_directions(rows: int, columns: int, row: int, column: int) -> List[int]:
    """Directions from ``(row, column)`` that stay inside the grid."""
    # Exact hex bounds, not edge flags: odd-row column 0 may link up-left and bottom-left.
    return [d for d in DIRECTIONS if neighbor_in_grid(rows, columns, row, column, d) is not None]


def reverse_direction(direction: int) -> int:
    """Slot on the neighbour that points back at the originating cell."""
    return (direction + 3) % 6


def direction_between(a: Coord, b: Coord) -> Optional[int]:
    """Direction leading from ``a`` to ``b`` or None when they are not adjacent."""
    (r1, c1), (r2, c2) = a, b
    if abs(r1 - r2) > 1 or abs(c1 - c2) > 1:
        return None
    for d in DIRECTIONS:
        if neighbor_coord(r1, c1, d) == (r2, c2):
            return d
    return None


__all__ = [
    "iter_coords",
    "in_bounds",
    "neighbor_coord",
    "neighbor_in_grid",
    "eligible_directions",
    "reverse_direction",
    "direction_between",
]
