from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'holes_punched': 0,
        'repair_attempts': 0,
        'repair_aborted': 0,
        'cells_relinked': 0,
        'links_added': 0,
        'cells_pruned': 0,
        'players_seated': 0,
        'players_unseated': 0,
        'cells_boosted': 0,
        'runtime_ms': 0.0,
    }
