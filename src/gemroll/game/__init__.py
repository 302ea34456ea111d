"""Simulation core for Gemroll. Nothing in here knows about pygame."""

from gemroll.game.entities import Enemy, Gem, InputState, Player, Spike, TerrainSample, Viewport
from gemroll.game.session import GameSession, HudSnapshot, RenderSnapshot

__all__ = [
    "Enemy",
    "Gem",
    "InputState",
    "Player",
    "Spike",
    "TerrainSample",
    "Viewport",
    "GameSession",
    "HudSnapshot",
    "RenderSnapshot",
]
