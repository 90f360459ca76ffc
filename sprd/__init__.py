"""
project: SPRD map generator
module: __init__.py
License: MIT

Flask application object and configuration setup.

The generator itself is a plain library (see :mod:`sprd.board`); the Flask app
exists so hosting code and tests share one configuration surface. Tunables are
sourced from environment variables with sensible defaults and can be adjusted
per app via ``app.config``. When an application context is active the board
pipeline reads its overrides from there.
"""

import os

from dotenv import load_dotenv
from flask import Flask

# Load .env if present so MAPGEN_* tunables can be supplied without exporting
# shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_flag(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def _load_config(flask_app: Flask) -> None:
    flask_app.config.update(
        MAPGEN_HOLE_CHANCE=_env_int("MAPGEN_HOLE_CHANCE", 15),
        MAPGEN_LINK_CHANCE=_env_int("MAPGEN_LINK_CHANCE", 65),
        MAPGEN_DEFAULT_CAPACITY=_env_int("MAPGEN_DEFAULT_CAPACITY", 8),
        MAPGEN_BOOSTED_CAPACITY=_env_int("MAPGEN_BOOSTED_CAPACITY", 12),
        MAPGEN_ENABLE_METRICS=_env_flag("MAPGEN_ENABLE_METRICS", True),
        MAPGEN_AMPLIFY_POWER=_env_flag("MAPGEN_AMPLIFY_POWER", True),
    )


_load_config(app)


def create_app(**overrides):
    """Return the Flask app with environment config (re)applied.

    Keyword overrides are written into ``app.config`` last, which makes the
    factory convenient for tests that want a specific tunable without touching
    the process environment.
    """
    _load_config(app)
    if overrides:
        app.config.update(overrides)
    return app


__all__ = ["app", "create_app"]
