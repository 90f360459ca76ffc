"""Helpers shared by the board tests.

Stage functions only touch a handful of attributes on the board session, so
unit tests drive them through a light namespace instead of a full pipeline run.
"""
import random
from types import SimpleNamespace

from sprd.board import BoardConfig, Cell, RandomSource
from sprd.board.connectivity import reachable_map
from sprd.board.metrics import init_metrics


class ThresholdSource(RandomSource):
    """Answers every chance roll with ``percentage >= threshold``.

    With the default threshold of 50 hole rolls (15%) and boost rolls (<=10%)
    fail while link rolls (65%) succeed. Coordinate draws stay seeded-random.
    """

    def __init__(self, threshold=50, seed=7):
        super().__init__(seed=seed)
        self.threshold = threshold

    def chance(self, percentage):
        return percentage >= self.threshold


class BrokenSource(RandomSource):
    """Entropy source whose every draw raises OSError."""

    def __init__(self):
        class _Raising(random.Random):
            def randint(self, a, b):
                raise OSError("entropy exhausted")

            def randrange(self, *args, **kwargs):
                raise OSError("entropy exhausted")

        super().__init__(rng=_Raising())


def make_board(rows, columns, grid=None, players=2, rng=None, **config):
    cfg = BoardConfig(rows=rows, columns=columns, players=players, **config)
    if grid is None:
        grid = [[Cell(capacity=cfg.default_capacity) for _ in range(columns)] for _ in range(rows)]
    return SimpleNamespace(
        rows=rows,
        columns=columns,
        players=players,
        config=cfg,
        rng=rng if rng is not None else RandomSource(seed=1),
        grid=grid,
        metrics=init_metrics(),
        enable_metrics=True,
        last_sampled=None,
    )


def grid_from_links(rows):
    """Build a grid from nested lists of 6-char link strings; '' marks a hole."""
    grid = []
    for line in rows:
        cells = []
        for layout in line:
            if layout == "":
                cells.append(Cell())
            else:
                cells.append(Cell(capacity=8, links=[ch == "1" for ch in layout]))
        grid.append(cells)
    return grid


def playable_coords(board):
    return [(r, c) for r in range(board.rows) for c in range(board.columns) if not board.grid[r][c].is_hole]


def is_fully_connected(board):
    cells = playable_coords(board)
    if len(cells) <= 1:
        return True
    visited = reachable_map(board, cells[0])
    if visited is None:
        return False
    return all(visited[r][c] for r, c in cells)


def is_zeroed(cell):
    return cell.owner == 0 and cell.power == 0 and not any(cell.links)
