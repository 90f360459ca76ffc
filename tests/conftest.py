import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from sprd import create_app  # noqa: E402

_MAPGEN_VARS = (
    "MAPGEN_HOLE_CHANCE",
    "MAPGEN_LINK_CHANCE",
    "MAPGEN_DEFAULT_CAPACITY",
    "MAPGEN_BOOSTED_CAPACITY",
    "MAPGEN_ENABLE_METRICS",
    "MAPGEN_AMPLIFY_POWER",
    "MAPGEN_SEED",
)


@pytest.fixture()
def test_app(monkeypatch):
    # Start every test from default tunables regardless of the developer's shell / .env
    for key in _MAPGEN_VARS:
        monkeypatch.delenv(key, raising=False)
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()
