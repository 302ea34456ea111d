"""Enemy patrol movement.

Edge detection here compares absolute enemy x against absolute terrain
x, unlike the ball's collision which works camera-relative. Enemies
have no gravity and stay at their spawn height.
"""

from __future__ import annotations

from typing import Sequence

from gemroll.game import terrain as terrain_gen
from gemroll.game.entities import Enemy, TerrainSample

DROP_TOLERANCE = 5.0


def containing_segment(
    terrain: Sequence[TerrainSample], x: float
) -> tuple[TerrainSample, TerrainSample] | None:
    """First segment strictly containing ``x``, if any."""
    for a, b in zip(terrain, terrain[1:]):
        if a.x < x < b.x:
            return a, b
    return None


def move_enemy(enemy: Enemy, terrain: Sequence[TerrainSample]) -> None:
    enemy.x += enemy.speed * enemy.direction

    segment = containing_segment(terrain, enemy.x)
    if segment is None:
        enemy.direction *= -1
        return

    ground = terrain_gen.height_at(*segment, enemy.x)
    if enemy.y < ground - DROP_TOLERANCE:
        enemy.direction *= -1


def move_enemies(enemies: Sequence[Enemy], terrain: Sequence[TerrainSample]) -> None:
    for enemy in enemies:
        move_enemy(enemy, terrain)
