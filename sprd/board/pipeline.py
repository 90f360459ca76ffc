"""Pipeline orchestration for board generation.

One :class:`Board` is one generation session: it owns the grid, the random
source and the last sampled coordinate, runs every stage once in order and is
discarded after serialization. Nothing is shared between boards.

Stages:
    build_grid -> punch_holes -> repair_connectivity -> seed_players -> amplify_power
"""
from __future__ import annotations

import json
import time
from typing import Any, Dict, List, Optional

from ..logging_utils import get_logger
from ..utils.cell_compress import compress_grid
from .cells import Coord, Grid
from .config import BoardConfig, resolve_config
from .connectivity import repair_connectivity
from .generator import build_grid
from .holes import punch_holes
from .metrics import init_metrics
from .players import seed_players
from .power import amplify_power
from .rng import RandomSource

log = get_logger("sprd.board")


class Board:
    def __init__(
        self,
        config: BoardConfig | None = None,
        *,
        rows: int | None = None,
        columns: int | None = None,
        players: int | None = None,
        seed: int | None = None,
        rng: RandomSource | None = None,
        **options,
    ):
        # Accept either a ready config object or keyword tunables
        if config is not None and (options or any(v is not None for v in (rows, columns, players, seed))):
            raise TypeError("pass either a BoardConfig or keyword tunables, not both")
        if config is None:
            given = dict(options)
            for name, value in (("rows", rows), ("columns", columns), ("players", players), ("seed", seed)):
                if value is not None:
                    given[name] = value
            config = resolve_config(**given)
        self.config = config
        self.rows = config.rows
        self.columns = config.columns
        self.players = config.players
        self.seed = config.seed
        self.enable_metrics = config.enable_metrics
        self.rng = rng if rng is not None else RandomSource(config.seed)
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self.last_sampled: Optional[Coord] = None
        self.grid: Grid = []
        self.starts: Dict[int, Optional[Coord]] = {}
        self.repaired = False
        self._run_pipeline()

    def _run_pipeline(self):
        """Execute ordered generation phases with per-phase timing (``phase_ms``)."""
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        self.grid = _phase('build_grid', build_grid, self)
        _phase('punch_holes', punch_holes, self)
        self.repaired = _phase('repair_connectivity', repair_connectivity, self)
        self.starts = _phase('seed_players', seed_players, self)
        if self.config.amplify_power:
            _phase('amplify_power', amplify_power, self)

        if self.enable_metrics:
            self.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 3)
            self.metrics['phase_ms'] = phase_times
        log.debug(
            event="board_generated",
            rows=self.rows,
            columns=self.columns,
            players=self.players,
            seed=self.seed,
            holes=self.hole_count(),
            seated=sum(1 for s in self.starts.values() if s is not None),
            runtime_ms=self.metrics.get('runtime_ms'),
        )

    def hole_count(self) -> int:
        return sum(1 for line in self.grid for c in line if c.is_hole)

    def to_rows(self, compress: bool = False) -> List[List[List[int]]]:
        rows = [[c.to_list() for c in line] for line in self.grid]
        return compress_grid(rows) if compress else rows

    def to_json(self, compress: bool = True) -> str:
        return json.dumps(self.to_rows(compress=compress), separators=(",", ":"))


def generate_board(rows: int, columns: int, players: int, **options) -> Board:
    """Convenience wrapper: build one board with the given size and player count."""
    return Board(rows=rows, columns=columns, players=players, **options)


__all__ = ["Board", "generate_board"]
