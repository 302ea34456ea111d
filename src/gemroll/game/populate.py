"""Level content: uniform random gems, spikes and enemies for a difficulty level."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from gemroll.game.entities import Enemy, Gem, Spike, Viewport

logger = logging.getLogger(__name__)

SPREAD_SCREENS = 2.0        # content is scattered over the first two screens

GEM_BAND_TOP = 350.0        # gems float between these depths above the bottom
GEM_BAND_BOTTOM = 150.0
SPIKE_DEPTH = 80.0
ENEMY_DEPTH = 120.0
ENEMY_MIN_SPEED = 1.0
ENEMY_SPEED_RANGE = 1.0


@dataclass
class LevelContent:
    gems: list[Gem] = field(default_factory=list)
    spikes: list[Spike] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)


def gem_count(level: int) -> int:
    return 5 + 2 * level


def spike_count(level: int) -> int:
    return 3 + level


def enemy_count(level: int) -> int:
    return level


def populate(level: int, viewport: Viewport, rng: random.Random) -> LevelContent:
    """Place the entities for ``level``.

    Placement is independent per entity; overlaps with each other or
    with the terrain are allowed.
    """
    span = viewport.width * SPREAD_SCREENS
    h = viewport.height

    gems = [
        Gem(
            x=rng.random() * span,
            y=h - GEM_BAND_TOP + rng.random() * (GEM_BAND_TOP - GEM_BAND_BOTTOM),
        )
        for _ in range(gem_count(level))
    ]

    spikes = [
        Spike(x=rng.random() * span, y=h - SPIKE_DEPTH)
        for _ in range(spike_count(level))
    ]

    enemies = []
    for _ in range(enemy_count(level)):
        x = rng.random() * span
        speed = ENEMY_MIN_SPEED + rng.random() * ENEMY_SPEED_RANGE
        direction = 1 if rng.random() > 0.5 else -1
        enemies.append(Enemy(x=x, y=h - ENEMY_DEPTH, speed=speed, direction=direction))

    logger.debug(
        f"Level {level} populated: {len(gems)} gems, {len(spikes)} spikes, "
        f"{len(enemies)} enemies"
    )
    return LevelContent(gems=gems, spikes=spikes, enemies=enemies)
