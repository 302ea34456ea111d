"""The session aggregate and the immutable snapshots handed to sinks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from gemroll.core.state import State
from gemroll.game import physics, populate, terrain
from gemroll.game.entities import Enemy, Gem, Player, Spike, TerrainSample, Viewport

STARTING_LIVES = 3
STARTING_LEVEL = 1


@dataclass(frozen=True)
class HudSnapshot:
    score: int
    lives: int
    level: int


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything needed to draw one frame. Entities are copies."""

    camera_offset: float
    player: Player
    terrain: tuple[TerrainSample, ...]
    gems: tuple[Gem, ...]
    spikes: tuple[Spike, ...]
    enemies: tuple[Enemy, ...]
    state: State
    score: int
    viewport: Viewport


@dataclass
class GameSession:
    """All mutable state of one play-through.

    Restarting replaces the whole aggregate rather than resetting fields.
    """

    viewport: Viewport
    rng: random.Random
    score: int = 0
    lives: int = STARTING_LIVES
    level: int = STARTING_LEVEL
    player: Player = field(default_factory=Player)
    terrain: list[TerrainSample] = field(default_factory=list)
    gems: list[Gem] = field(default_factory=list)
    spikes: list[Spike] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)

    @classmethod
    def new(cls, viewport: Viewport, rng: random.Random) -> "GameSession":
        session = cls(viewport=viewport, rng=rng)
        session.build_level()
        return session

    @property
    def camera_offset(self) -> float:
        return physics.camera_offset(self.player.x, self.viewport.width)

    def build_level(self) -> None:
        """Regenerate terrain and content for the current level."""
        vp = self.viewport
        self.terrain = terrain.generate(vp.segment_count, vp.height, vp.width)
        content = populate.populate(self.level, vp, self.rng)
        self.gems = content.gems
        self.spikes = content.spikes
        self.enemies = content.enemies

    def hud(self) -> HudSnapshot:
        return HudSnapshot(score=self.score, lives=self.lives, level=self.level)

    def snapshot(self, state: State) -> RenderSnapshot:
        return RenderSnapshot(
            camera_offset=self.camera_offset,
            player=replace(self.player),
            terrain=tuple(self.terrain),
            gems=tuple(replace(g) for g in self.gems),
            spikes=tuple(self.spikes),
            enemies=tuple(replace(e) for e in self.enemies),
            state=state,
            score=self.score,
            viewport=self.viewport,
        )
