"""Entity types shared by the simulation modules.

All positions are world coordinates in screen pixels with y growing
downwards. The player is the one exception the collision code relies
on: its x is compared against camera-adjusted positions of everything
else.
"""

from __future__ import annotations

from dataclasses import dataclass

SPAWN_X = 50.0
SPAWN_Y = 100.0
BALL_RADIUS = 15.0

GEM_RADIUS = 8.0
SPIKE_SIZE = 20.0
ENEMY_SIZE = 25.0


@dataclass
class Player:
    x: float = SPAWN_X
    y: float = SPAWN_Y
    radius: float = BALL_RADIUS
    dx: float = 0.0
    dy: float = 0.0
    on_ground: bool = False

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    def respawn(self) -> None:
        """Put the ball back at the spawn point, at rest.

        ``on_ground`` is left alone; the next terrain pass recomputes it.
        """
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.dx = 0.0
        self.dy = 0.0


@dataclass(frozen=True)
class TerrainSample:
    x: float
    y: float


@dataclass
class Gem:
    x: float
    y: float
    radius: float = GEM_RADIUS
    collected: bool = False


@dataclass(frozen=True)
class Spike:
    """Triangle standing on ``y``; ``x`` is its left corner."""

    x: float
    y: float
    width: float = SPIKE_SIZE
    height: float = SPIKE_SIZE


@dataclass(eq=False)
class Enemy:
    """Patrolling box. ``y`` is the bottom edge, ``x`` the left edge.

    Compared by identity so that removing a stomped enemy never takes
    out another one that happens to share its position.
    """

    x: float
    y: float
    speed: float
    direction: int
    width: float = ENEMY_SIZE
    height: float = ENEMY_SIZE

    @property
    def top(self) -> float:
        return self.y - self.height


@dataclass(frozen=True)
class InputState:
    """Held controls, sampled once at the start of a tick."""

    left: bool = False
    right: bool = False
    jump: bool = False


@dataclass(frozen=True)
class Viewport:
    """Screen dimensions the level is generated and scrolled against."""

    width: float = 800.0
    height: float = 400.0
    segment_count: int = 20

    @property
    def segment_width(self) -> float:
        return self.width / self.segment_count
