"""
Main game window using pygame.

Pumps keyboard events into the control pad and the event bus, shows
the playfield frames produced by the scene renderer, and acts as the
HUD sink for score, lives and level.
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from ..core.events import Event, EventBus, EventType, start_event
from ..core.state import State, StateMachine
from ..display.base import HudSink
from ..game.session import HudSnapshot
from ..graphics.renderer import SceneRenderer
from .input import ControlPad

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Game window configuration."""
    width: int = 800
    height: int = 400
    scale: int = 1
    hud_height: int = 40
    title: str = "Gemroll"
    fps: int = 60

    # Colors
    bg_color: tuple[int, int, int] = (20, 20, 30)
    text_color: tuple[int, int, int] = (230, 230, 240)
    accent_color: tuple[int, int, int] = (255, 215, 0)
    alert_color: tuple[int, int, int] = (244, 67, 54)


class GameWindow(HudSink):
    """
    Desktop window around the simulation.

    Keyboard Mapping:
        LEFT / RIGHT: Roll
        UP: Jump
        SPACE: Start (only when no game is running)
        RETURN: Start / restart button
        D: Toggle debug panel
        S: Capture screenshot
        Q / ESC: Quit
    """

    def __init__(
        self,
        renderer: SceneRenderer,
        pad: ControlPad,
        config: WindowConfig | None = None,
        state_machine: StateMachine | None = None,
        event_bus: EventBus | None = None
    ) -> None:
        self.config = config or WindowConfig()
        self.renderer = renderer
        self.pad = pad
        self.state_machine = state_machine or StateMachine()
        self.event_bus = event_bus or EventBus()

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False

        self._hud = HudSnapshot(score=0, lives=3, level=1)

        # Log viewer for the debug panel
        self._log_buffer: list[str] = []
        self._max_log_lines = 12
        self._log_handler: logging.Handler | None = None

        logger.info("GameWindow created")

    @property
    def hud(self) -> HudSnapshot:
        return self._hud

    @property
    def is_open(self) -> bool:
        return self._running

    def update_hud(self, hud: HudSnapshot) -> None:
        self._hud = hud

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the debug panel."""
        if self._log_handler is not None:
            return

        class WindowLogHandler(logging.Handler):
            def __init__(self, window: 'GameWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        handler = WindowLogHandler(self)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(handler)
        self._log_handler = handler

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        self._setup_log_capture()

        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (
            self.config.width * self.config.scale,
            self.config.height * self.config.scale + self.config.hud_height,
        )
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 24)
        self._big_font = pygame.font.SysFont(None, 48)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.KEYUP:
                self._handle_keyup(event)
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.pad.release_all()

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.stop()
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()

        elif key == pygame.K_LEFT:
            self.pad.left.press()
        elif key == pygame.K_RIGHT:
            self.pad.right.press()
        elif key == pygame.K_UP:
            self.pad.jump.press()

        elif key == pygame.K_SPACE:
            if not self.state_machine.is_running:
                self.event_bus.emit(start_event("keyboard"))
        elif key == pygame.K_RETURN:
            self.event_bus.emit(start_event("button"))

    def _handle_keyup(self, event: pygame.event.Event) -> None:
        """Handle key release."""
        key = event.key

        if key == pygame.K_LEFT:
            self.pad.left.release()
        elif key == pygame.K_RIGHT:
            self.pad.right.release()
        elif key == pygame.K_UP:
            self.pad.jump.release()

    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)

        self._render_hud()
        self._render_playfield()

        state = self.state_machine.state
        if state is State.GAME_OVER:
            self._render_game_over()
        if state is not State.RUNNING:
            self._render_start_prompt(state)
        if self._show_debug:
            self._render_debug_panel()

        pygame.display.flip()

    def _render_hud(self) -> None:
        """Score, lives and level across the top bar."""
        if not self._font:
            return
        hud = self._hud
        labels = [f"Score: {hud.score}", f"Lives: {hud.lives}", f"Level: {hud.level}"]
        slot = self._screen.get_width() // len(labels)
        y = (self.config.hud_height - self._font.get_height()) // 2
        for i, label in enumerate(labels):
            surface = self._font.render(label, True, self.config.text_color)
            self._screen.blit(surface, (slot * i + 20, y))

    def _render_playfield(self) -> None:
        """Blit the renderer's RGB buffer below the HUD bar."""
        surface = pygame.surfarray.make_surface(self.renderer.buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(
                surface,
                (self.config.width * self.config.scale, self.config.height * self.config.scale),
            )
        self._screen.blit(surface, (0, self.config.hud_height))

    def _playfield_center(self) -> tuple[int, int]:
        w = self.config.width * self.config.scale
        h = self.config.height * self.config.scale
        return w // 2, self.config.hud_height + h // 2

    def _render_game_over(self) -> None:
        if not self._big_font or not self._font:
            return
        cx, cy = self._playfield_center()
        title = self._big_font.render("Game Over!", True, self.config.alert_color)
        self._screen.blit(title, title.get_rect(center=(cx, cy - 20)))
        final = self._font.render(f"Final Score: {self._hud.score}", True, self.config.alert_color)
        self._screen.blit(final, final.get_rect(center=(cx, cy + 20)))

    def _render_start_prompt(self, state: State) -> None:
        if not self._font:
            return
        verb = "Play Again" if state is State.GAME_OVER else "Play"
        text = self._font.render(f"Press SPACE to {verb}", True, self.config.accent_color)
        cx, cy = self._playfield_center()
        self._screen.blit(text, text.get_rect(center=(cx, cy + 60)))

    def _render_debug_panel(self) -> None:
        """Render the debug information panel."""
        if not self._font:
            return

        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"State: {self.state_machine.state.name}",
            f"Rendered: {self.renderer.frames_rendered}",
            "Presses: " + " ".join(f"{b.name}={b.presses}" for b in self.pad.buttons),
            "",
        ] + self._log_buffer[-self._max_log_lines:]

        panel = pygame.Surface((360, 18 * len(lines) + 12), pygame.SRCALPHA)
        panel.fill((20, 25, 35, 200))
        self._screen.blit(panel, (10, self.config.hud_height + 10))

        y = self.config.hud_height + 16
        for line in lines:
            display_line = line[:50] + "..." if len(line) > 53 else line
            text_surface = self._font.render(display_line, True, self.config.text_color)
            self._screen.blit(text_surface, (18, y))
            y += 18

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    async def run(self) -> None:
        """Window loop: events and presentation.

        Simulation ticks run in the frame driver's own task; this loop
        yields to it between frames.
        """
        try:
            self._init_pygame()
            self._running = True
            interval = 1.0 / self.config.fps

            logger.info("Window loop started")

            while self._running:
                self._handle_events()
                self._render()

                if self._clock:
                    self._clock.tick()
                self._frame_count += 1

                await asyncio.sleep(interval)
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        if self._log_handler is not None:
            logging.getLogger().removeHandler(self._log_handler)
            self._log_handler = None
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Close the window at the end of the current frame."""
        if self._running:
            self._running = False
            self.event_bus.emit(Event(EventType.QUIT_PRESSED, source="window"))
