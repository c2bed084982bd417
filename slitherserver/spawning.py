"""Creating baits: random ones, placed ones, and those left by dead snakes."""

from __future__ import annotations

import random

from slitherserver import constants as C
from slitherserver.bait import Bait, BaitStore
from slitherserver.snake import Snake


def generate_bait(store: BaitStore, low: float, high: float,
                  rng: random.Random | None = None) -> Bait:
    """Add a bait at a random spot in ``[low, high)`` on both axes."""
    rng = rng or random.Random()
    x = rng.uniform(low, high)
    y = rng.uniform(low, high)
    color = str(rng.randrange(0, C.MAX_BAIT_COLOR_RANGE))
    size = rng.uniform(0.0, C.MAX_BAIT_SIZE)
    return store.create(x, y, color, size)


def generate_specific_bait(store: BaitStore, x: float, y: float, color: int,
                           size: float) -> Bait:
    """Add a bait at a given place with a given colour and size."""
    return store.create(x, y, str(color), size)


def generate_mass_bait(store: BaitStore, snake: Snake,
                       rng: random.Random | None = None) -> list[Bait]:
    """Scatter baits along a dead snake's body, one per other node, all one colour.

    The last node never gets a bait.
    """
    rng = rng or random.Random()
    color = str(rng.randrange(0, C.MAX_BAIT_COLOR_RANGE))
    size = float(C.MAX_BAITS_SIZE_ON_DEAD)
    baits = []
    for node in snake.nodes[:-1:2]:
        offset_x = rng.uniform(-5.0, 5.0)
        offset_y = rng.uniform(-5.0, 5.0)
        baits.append(store.create(node.x + offset_x, node.y + offset_y, color, size))
    return baits