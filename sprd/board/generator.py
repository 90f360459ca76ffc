"""Grid construction: allocate cells and draw their initial neighbour links."""
from __future__ import annotations

from typing import List

from .cells import Cell, Grid
from .topology import eligible_directions


def draw_links(board: "Board", row: int, column: int) -> List[bool]:
    """Random link flags for one cell.

    Directions leaving the grid are always False. Each remaining direction is
    set with ``link_chance`` percent probability; if none was set, one eligible
    direction picked uniformly at random is forced on so every cell keeps at
    least one potential link (a lone 1x1 cell has no eligible direction).
    """
    allowed = eligible_directions(board.rows, board.columns, row, column)
    links = [False] * 6
    for d in allowed:
        links[d] = board.rng.chance(board.config.link_chance)
    if allowed and not any(links):
        links[board.rng.choice(allowed)] = True
    return links


def build_grid(board: "Board") -> Grid:
    cfg = board.config
    grid: Grid = []
    for row in range(board.rows):
        cells = []
        for column in range(board.columns):
            cells.append(Cell(owner=0, power=0, capacity=cfg.default_capacity, links=draw_links(board, row, column)))
        grid.append(cells)
    return grid


__all__ = ["build_grid", "draw_links"]
