"""Fallible random source.

The generator draws every random decision through :class:`RandomSource`. When
the underlying entropy source raises, the draw degrades to its least favourable
outcome instead of propagating: ``chance`` answers False, ``randrange`` answers
None and ``choice`` falls back to the first option.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

from ..logging_utils import get_logger

T = TypeVar("T")

log = get_logger("sprd.rng")

# Errors os.urandom (and therefore SystemRandom) can raise.
_SOURCE_ERRORS = (OSError, NotImplementedError)


class RandomSource:
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        if rng is not None:
            self._rng = rng
        elif seed is None:
            self._rng = random.SystemRandom()
        else:
            # Local RNG so external random usage does not affect generation
            self._rng = random.Random(seed)
        self.seed = seed
        self.failures = 0

    def _failed(self, draw: str, exc: Exception) -> None:
        self.failures += 1
        log.debug(event="random_source_failed", draw=draw, error=type(exc).__name__)

    def chance(self, percentage: int) -> bool:
        """True with ``percentage`` percent probability (1..100 roll <= percentage)."""
        try:
            return self._rng.randint(1, 100) <= percentage
        except _SOURCE_ERRORS as exc:
            self._failed("chance", exc)
            return False

    def randrange(self, stop: int) -> Optional[int]:
        if stop <= 0:
            return None
        try:
            return self._rng.randrange(stop)
        except _SOURCE_ERRORS as exc:
            self._failed("randrange", exc)
            return None

    def choice(self, options: Sequence[T]) -> T:
        try:
            return options[self._rng.randrange(len(options))]
        except _SOURCE_ERRORS as exc:
            self._failed("choice", exc)
            return options[0]


__all__ = ["RandomSource"]
