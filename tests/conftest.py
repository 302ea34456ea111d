import random

import pytest

from gemroll.core.events import EventBus
from gemroll.display.base import HudSink, RenderSink
from gemroll.game.engine import GameEngine
from gemroll.game.entities import Gem, Viewport


class RecordingSink(RenderSink, HudSink):
    def __init__(self):
        self.frames = []
        self.huds = []

    def render(self, snapshot):
        self.frames.append(snapshot)

    def update_hud(self, hud):
        self.huds.append(hud)


@pytest.fixture
def viewport():
    return Viewport(width=800, height=400, segment_count=20)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def engine(bus, viewport, sink):
    return GameEngine(
        event_bus=bus,
        viewport=viewport,
        render_sink=sink,
        hud_sink=sink,
        rng=random.Random(1234),
    )


@pytest.fixture
def running(engine):
    """A started engine with an empty, predictable level.

    One gem is parked far off to the right so the level never counts as
    complete by accident.
    """
    engine.start()
    s = engine.session
    s.gems = [Gem(x=50_000, y=0)]
    s.spikes = []
    s.enemies = []
    return engine
