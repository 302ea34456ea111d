"""
Abstract sinks the simulation pushes its state into.

These interfaces define the contract between the game engine and any
presentation layer (the pygame window, a headless recorder, tests).
The engine never touches a drawing API directly.
"""

from abc import ABC, abstractmethod

from gemroll.game.session import HudSnapshot, RenderSnapshot


class RenderSink(ABC):
    """Receives one full scene snapshot per tick."""

    @abstractmethod
    def render(self, snapshot: RenderSnapshot) -> None:
        """Draw the scene after the tick's state update."""
        ...


class HudSink(ABC):
    """Receives score/lives/level whenever any of them changes."""

    @abstractmethod
    def update_hud(self, hud: HudSnapshot) -> None:
        ...


class NullSink(RenderSink, HudSink):
    """Discards everything. Used when running without a display."""

    def render(self, snapshot: RenderSnapshot) -> None:
        pass

    def update_hud(self, hud: HudSnapshot) -> None:
        pass
