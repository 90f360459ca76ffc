from __future__ import annotations

from typing import Dict, Optional

from ..logging_utils import get_logger
from .cells import Coord
from .sampler import is_free, sample_cell

log = get_logger("sprd.players")


def seed_players(board: "Board") -> Dict[int, Optional[Coord]]:
    """Give each player 1..N a random free start cell with starting power.

    A player whose sampling runs dry stays unseated (mapped to None); there is
    no retry beyond the sampler's own attempts and no spacing between starts.
    """
    starts: Dict[int, Optional[Coord]] = {}
    for player in range(1, board.players + 1):
        found = sample_cell(board, is_free)
        starts[player] = found
        if found is None:
            if board.enable_metrics:
                board.metrics['players_unseated'] += 1
            log.debug(event="player_unseated", player=player)
            continue
        cell = board.grid[found[0]][found[1]]
        cell.owner = player
        cell.power = board.config.start_power
        if board.enable_metrics:
            board.metrics['players_seated'] += 1
    return starts


__all__ = ["seed_players"]
