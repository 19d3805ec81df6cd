from __future__ import annotations

"""Randomness helpers for question generation and seeding."""

import os
import random
from typing import Optional, Sequence

from ..theory.note import Note
from ..theory.scales import ScaleType


def resolve_seed(seed: Optional[int] = None) -> Optional[int]:
    """Pick the seed to use: explicit value first, then the SEED env var."""
    if seed is not None:
        return seed
    env = os.environ.get("SEED")
    if env is None:
        return None
    try:
        return int(env)
    except ValueError:
        return None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build the random source handed to the quiz pages."""
    return random.Random(resolve_seed(seed))


def choose_random_tonic(rng: random.Random, pool: Sequence[Note]) -> Note:
    """Choose a tonic uniformly from `pool`."""
    if not pool:
        raise ValueError("Tonic pool is empty")
    return pool[rng.randrange(len(pool))]


def choose_random_scale_type(rng: random.Random) -> ScaleType:
    """Choose one of the seven scale types with equal probability."""
    return rng.choice(ScaleType.all())
