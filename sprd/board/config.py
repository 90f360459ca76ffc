from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional, Tuple

from flask import current_app, has_app_context

# BoardConfig field -> env var / Flask config key
CONFIG_KEYS = {
    "hole_chance": "MAPGEN_HOLE_CHANCE",
    "link_chance": "MAPGEN_LINK_CHANCE",
    "default_capacity": "MAPGEN_DEFAULT_CAPACITY",
    "boosted_capacity": "MAPGEN_BOOSTED_CAPACITY",
    "enable_metrics": "MAPGEN_ENABLE_METRICS",
    "amplify_power": "MAPGEN_AMPLIFY_POWER",
    "seed": "MAPGEN_SEED",
}


@dataclass
class BoardConfig:
    rows: int = 10
    columns: int = 10
    players: int = 2
    hole_chance: int = 15
    link_chance: int = 65
    default_capacity: int = 8
    boosted_capacity: int = 12
    start_power: int = 2
    sample_attempts: int = 10
    repair_retries: int = 5
    # Boost probability (percent) for cells with 1..6 links
    boost_table: Tuple[int, ...] = (0, 10, 10, 5, 5, 5)
    amplify_power: bool = True
    enable_metrics: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if self.rows < 0 or self.columns < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {self.rows}x{self.columns}")
        if self.players < 0:
            raise ValueError(f"player count must be non-negative, got {self.players}")
        for name in ("hole_chance", "link_chance"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be a percentage in 0..100, got {value}")
        if self.default_capacity <= 0 or self.boosted_capacity <= 0:
            raise ValueError("capacities must be positive; zero capacity is reserved for holes")
        self.boost_table = tuple(self.boost_table)
        if len(self.boost_table) != 6:
            raise ValueError(f"boost_table needs 6 entries, got {len(self.boost_table)}")


def _coerce(name: str, raw):
    if name in ("enable_metrics", "amplify_power"):
        if isinstance(raw, str):
            return raw.strip().lower() not in {"0", "false", "no", "off", ""}
        return bool(raw)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return None
    return int(raw)


def resolve_config(**overrides) -> BoardConfig:
    """Build a BoardConfig from defaults, env vars, Flask config, then kwargs.

    Later sources win. Flask config is consulted only inside an application
    context; explicit keyword arguments always have the final say.
    """
    values = {}
    for name, key in CONFIG_KEYS.items():
        if key in os.environ:
            coerced = _coerce(name, os.environ[key])
            if coerced is not None:
                values[name] = coerced
    if has_app_context():
        cfg = current_app.config
        for name, key in CONFIG_KEYS.items():
            if key in cfg:
                coerced = _coerce(name, cfg.get(key))
                if coerced is not None:
                    values[name] = coerced
    known = {f.name for f in fields(BoardConfig)}
    for name, value in overrides.items():
        if name not in known:
            raise TypeError(f"unknown board option: {name}")
        values[name] = value
    return BoardConfig(**values)


__all__ = ["BoardConfig", "CONFIG_KEYS", "resolve_config"]
