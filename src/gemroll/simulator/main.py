"""
Simulator composition root.

Wires the engine, the frame driver, the scene renderer and the pygame
window together through the event bus.
"""

import logging
import random

from gemroll.config.settings import Settings, get_settings
from gemroll.core.driver import FrameDriver
from gemroll.core.events import Event, EventBus, EventType
from gemroll.core.state import State, StateContext, StateMachine
from gemroll.game.engine import GameEngine
from gemroll.game.entities import Viewport
from gemroll.graphics.renderer import SceneRenderer
from gemroll.simulator.input import ControlPad
from gemroll.simulator.window import GameWindow, WindowConfig

logger = logging.getLogger(__name__)


class GemrollSimulator:
    """Main application integrating all systems."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        display = self.settings.display

        # Core systems
        self.state_machine = StateMachine()
        self.event_bus = EventBus()
        self.renderer = SceneRenderer(display.width, display.height)
        self.pad = ControlPad()

        # Window
        self.window_config = WindowConfig(
            width=display.width,
            height=display.height,
            scale=display.scale,
            hud_height=display.hud_height,
            title=display.title,
            fps=display.fps,
        )
        self.window = GameWindow(
            renderer=self.renderer,
            pad=self.pad,
            config=self.window_config,
            state_machine=self.state_machine,
            event_bus=self.event_bus,
        )

        # Simulation
        viewport = Viewport(
            width=display.width,
            height=display.height,
            segment_count=self.settings.terrain_segments,
        )
        if self.settings.seed is not None:
            logger.info(f"Using fixed level seed {self.settings.seed}")
        self.engine = GameEngine(
            event_bus=self.event_bus,
            viewport=viewport,
            render_sink=self.renderer,
            hud_sink=self.window,
            rng=random.Random(self.settings.seed),
            state_machine=self.state_machine,
        )
        self.driver = FrameDriver(self._tick, fps=display.fps)

        self._setup_event_handlers()

        logger.info("GemrollSimulator initialized")

    def _setup_event_handlers(self) -> None:
        """Set up event routing between window, engine and driver."""
        self.event_bus.subscribe(EventType.START_PRESSED, self._on_start)
        self.event_bus.subscribe(EventType.QUIT_PRESSED, self._on_quit)
        self.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)
        self.state_machine.add_listener(self._on_state_change)

    def _on_state_change(self, old: State, new: State, context: StateContext) -> None:
        """Republish state transitions on the bus."""
        self.event_bus.emit(Event(
            EventType.STATE_CHANGED,
            data={"from": old.name, "to": new.name, "sessions": context.sessions_started},
            source="state_machine",
        ))

    def _on_start(self, event: Event) -> None:
        """Start a session and (re)schedule ticking for it."""
        if self.engine.start():
            logger.info(f"Session started from {event.source}")
            self.driver.start()

    def _on_quit(self, event: Event) -> None:
        self.driver.stop()

    def _on_game_over(self, event: Event) -> None:
        score = event.data.get("score", 0)
        level = event.data.get("level", 1)
        logger.info(f"Final score {score} on level {level}")

    def _tick(self) -> bool:
        return self.engine.tick(self.pad.sample())

    async def run(self) -> None:
        """Run until the window is closed."""
        logger.info("Starting Gemroll...")

        # Draw the idle level behind the start prompt
        self.engine.present()

        await self.window.run()

        self.driver.stop()
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        logger.info(f"Gemroll shut down after {self.driver.frame} ticks")
