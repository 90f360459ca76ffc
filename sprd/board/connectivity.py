"""Reachability search and connectivity repair.

Links are one-directional flags, but traversal treats a pair of neighbours as
connected when *either* side points at the other. The repair pass relies on
this: it only ever sets the flag on the cell being rescued, never the mirror
flag on its neighbour.
"""
from __future__ import annotations

from collections import deque
from typing import List, Optional

from ..logging_utils import get_logger
from .cells import DIRECTIONS, Coord
from .holes import make_hole
from .sampler import sample_cell
from .topology import direction_between, iter_coords, neighbor_in_grid, reverse_direction

log = get_logger("sprd.connectivity")

VisitedMap = List[List[bool]]


def linked_neighbors(board: "Board", row: int, column: int) -> List[Coord]:
    """Neighbours joined to ``(row, column)`` by a link in either direction."""
    grid = board.grid
    cell = grid[row][column]
    found = []
    for d in DIRECTIONS:
        near = neighbor_in_grid(board.rows, board.columns, row, column, d)
        if near is None:
            continue
        other = grid[near[0]][near[1]]
        if other.is_hole:
            continue
        if cell.links[d] or other.links[reverse_direction(d)]:
            found.append(near)
    return found


def candidate_neighbors(board: "Board", row: int, column: int) -> List[Coord]:
    """Every playable neighbour, ignoring link flags."""
    found = []
    for d in DIRECTIONS:
        near = neighbor_in_grid(board.rows, board.columns, row, column, d)
        if near is not None and not board.grid[near[0]][near[1]].is_hole:
            found.append(near)
    return found


def reachable_map(board: "Board", start: Coord, holes_visited: bool = True) -> Optional[VisitedMap]:
    """Flood outward from ``start`` over linked neighbours.

    Returns a rows x columns boolean map, or None when the start has no linked
    neighbour at all (nothing to flood). With ``holes_visited`` every hole is
    pre-marked True so callers only see playable cells as unreached.
    """
    grid = board.grid
    visited = [[holes_visited and cell.is_hole for cell in line] for line in grid]
    sr, sc = start
    visited[sr][sc] = True
    first = linked_neighbors(board, sr, sc)
    if not first:
        return None
    q = deque()
    for nr, nc in first:
        if not visited[nr][nc]:
            visited[nr][nc] = True
            q.append((nr, nc))
    while q:
        cr, cc = q.popleft()
        for nr, nc in linked_neighbors(board, cr, cc):
            if not visited[nr][nc]:
                visited[nr][nc] = True
                q.append((nr, nc))
    return visited


def link_two_cells(board: "Board", a: Coord, b: Coord) -> bool:
    """Point ``a`` at ``b``. Only ``a``'s flag is set; False if not adjacent."""
    d = direction_between(a, b)
    if d is None:
        return False
    board.grid[a[0]][a[1]].links[d] = True
    return True


def _restore_outgoing_links(board: "Board") -> int:
    """Mirror one incoming link on playable cells left without an outgoing one.

    Hole punching can clear a cell's only flag while a neighbour still points
    at it. Mirroring that neighbour's link leaves reachability unchanged and
    keeps every playable cell distinguishable from a hole.
    """
    mirrored = 0
    for row, column in iter_coords(board.rows, board.columns):
        cell = board.grid[row][column]
        if cell.is_hole or any(cell.links):
            continue
        near = linked_neighbors(board, row, column)
        if near and link_two_cells(board, (row, column), near[0]):
            mirrored += 1
    return mirrored


def _pick_start(board: "Board"):
    attempts = 1 + board.config.repair_retries
    for _ in range(attempts):
        if board.enable_metrics:
            board.metrics['repair_attempts'] += 1
        start = sample_cell(board)
        if start is None:
            return None, None, "no_start_cell"
        visited = reachable_map(board, start)
        if visited is not None:
            return start, visited, None
    return None, None, "isolated_start"


def repair_connectivity(board: "Board") -> bool:
    """Make every playable cell reachable from one sampled start cell.

    Unreached cells with no playable neighbour become holes; the rest are linked
    toward every playable neighbour. A second flood then prunes whatever is
    still cut off. Returns False (grid untouched) when no usable start cell is
    found within the bounded retries.
    """
    start, visited, reason = _pick_start(board)
    if start is None:
        if board.enable_metrics:
            board.metrics['repair_aborted'] += 1
        log.warn(event="repair_aborted", reason=reason, rows=board.rows, columns=board.columns)
        return False

    grid = board.grid
    pruned = relinked = added = 0
    for row, column in iter_coords(board.rows, board.columns):
        if visited[row][column] or grid[row][column].is_hole:
            continue
        near = candidate_neighbors(board, row, column)
        if not near:
            make_hole(board, row, column)
            pruned += 1
            continue
        relinked += 1
        for target in near:
            d = direction_between((row, column), target)
            already = grid[row][column].links[d]
            if link_two_cells(board, (row, column), target) and not already:
                added += 1

    # The start keeps its linked neighbours: links are only ever added above.
    visited = reachable_map(board, start)
    for row, column in iter_coords(board.rows, board.columns):
        if visited is not None and visited[row][column]:
            continue
        if (row, column) == start or grid[row][column].is_hole:
            continue
        make_hole(board, row, column)
        pruned += 1

    added += _restore_outgoing_links(board)
    if board.enable_metrics:
        board.metrics['cells_pruned'] += pruned
        board.metrics['cells_relinked'] += relinked
        board.metrics['links_added'] += added
    return True


__all__ = [
    "linked_neighbors",
    "candidate_neighbors",
    "reachable_map",
    "link_two_cells",
    "repair_connectivity",
]
