"""Ball physics and collision tests.

Explicit Euler with a fixed per-tick step: every constant below is in
pixels per tick (or per tick squared). The ball's x lives in the same
space as ``world_x - camera_offset`` for every other entity, which is
why each test subtracts the camera on the entity side only.
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

from gemroll.game import terrain as terrain_gen
from gemroll.game.entities import Enemy, Gem, InputState, Player, Spike, TerrainSample

GRAVITY = 0.4
FRICTION = 0.99          # ground contact, applied per matching segment
AIR_DECAY = 0.9          # horizontal decay with no direction held
MOVE_SPEED = 5.0
JUMP_VELOCITY = -12.0
STOMP_BOUNCE = -10.0

TERRAIN_TOLERANCE = 10.0
SPIKE_TOLERANCE = 5.0
STOMP_TOLERANCE = 10.0

GEM_POINTS = 50
STOMP_POINTS = 100


class Contact(Enum):
    """Outcome of the ball touching an enemy."""
    STOMP = auto()
    HIT = auto()


def integrate(player: Player, inputs: InputState) -> None:
    """Apply gravity and controls, then advance the position one tick."""
    player.dy += GRAVITY

    # Left is checked first, so it wins when both are held.
    if inputs.left:
        player.dx = -MOVE_SPEED
    elif inputs.right:
        player.dx = MOVE_SPEED
    else:
        player.dx *= AIR_DECAY

    if inputs.jump and player.on_ground:
        player.dy = JUMP_VELOCITY
        player.on_ground = False

    player.x += player.dx
    player.y += player.dy


def camera_offset(player_x: float, screen_width: float) -> float:
    """Horizontal scroll keeping the ball at mid-screen once past it."""
    half = screen_width / 2
    if player_x > half:
        return player_x - half
    return 0.0


def resolve_terrain(player: Player, terrain: Sequence[TerrainSample], camera: float) -> None:
    """Land the ball on any segment under it.

    Every overlapping segment is evaluated in order and each one that
    matches snaps the ball again, so the last match wins. Friction is
    applied once per match.
    """
    assert terrain, "terrain accessed before generation"
    player.on_ground = False

    for a, b in zip(terrain, terrain[1:]):
        if player.right > a.x - camera and player.left < b.x - camera:
            ground = terrain_gen.height_at(a, b, player.x + camera)

            if player.bottom >= ground and player.top <= ground + TERRAIN_TOLERANCE:
                player.y = ground - player.radius
                player.dy = 0.0
                player.on_ground = True
                player.dx *= FRICTION


def collect_gems(player: Player, gems: Sequence[Gem], camera: float) -> int:
    """Mark every gem the ball touches as collected; return how many were new."""
    collected = 0
    for gem in gems:
        if gem.collected:
            continue
        distance = math.hypot(player.x - (gem.x - camera), player.y - gem.y)
        if distance < player.radius + gem.radius:
            gem.collected = True
            collected += 1
    return collected


def touches_spike(player: Player, spike: Spike, camera: float) -> bool:
    left = spike.x - camera
    return (
        player.bottom >= spike.y - SPIKE_TOLERANCE
        and left - player.radius < player.x < left + spike.width + player.radius
    )


def enemy_contact(player: Player, enemy: Enemy, camera: float) -> Contact | None:
    """Classify a ball/enemy touch. Does not mutate either side."""
    left = enemy.x - camera
    overlapping = (
        player.right > left
        and player.left < left + enemy.width
        and player.bottom > enemy.top
        and player.top < enemy.y
    )
    if not overlapping:
        return None

    if player.dy > 0 and player.top < enemy.top + STOMP_TOLERANCE:
        return Contact.STOMP
    return Contact.HIT


def bounce(player: Player) -> None:
    """Kick the ball back up after a stomp."""
    player.dy = STOMP_BOUNCE


def fell_out(player: Player, screen_height: float) -> bool:
    return player.y > screen_height + player.radius
