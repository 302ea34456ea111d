"""Game engine: owns the session and drives its state transitions.

One call to ``tick`` runs the whole update sequence:

    integrate -> extend terrain -> terrain / gem / spike / enemy
    collisions -> enemy patrol -> level completion -> fall check

then hands a render snapshot to the render sink. Every operation that
changes score, lives or level pushes a HUD snapshot. Once the session reaches GAME_OVER the rest of the tick is
skipped and later ticks do nothing until ``start`` is called again.
"""

from __future__ import annotations

import logging
import random
from typing import Any

from gemroll.core.events import Event, EventBus, EventType
from gemroll.core.state import State, StateMachine
from gemroll.display.base import HudSink, NullSink, RenderSink
from gemroll.game import enemies as enemy_motion
from gemroll.game import physics, terrain
from gemroll.game.entities import InputState, Viewport
from gemroll.game.session import GameSession, HudSnapshot

logger = logging.getLogger(__name__)


class GameEngine:
    """The game state machine around a ``GameSession``.

    Args:
        event_bus: Bus that receives gameplay and state events
        viewport: Screen dimensions the levels are built for
        render_sink: Receives a scene snapshot after every tick
        hud_sink: Receives score/lives/level when they change
        rng: Random source for level content
        state_machine: Session state machine (a fresh one by default)
    """

    def __init__(
        self,
        event_bus: EventBus,
        viewport: Viewport | None = None,
        render_sink: RenderSink | None = None,
        hud_sink: HudSink | None = None,
        rng: random.Random | None = None,
        state_machine: StateMachine | None = None,
    ) -> None:
        self.event_bus = event_bus
        self.viewport = viewport or Viewport()
        self.render_sink = render_sink or NullSink()
        self.hud_sink = hud_sink or NullSink()
        self.rng = rng or random.Random()
        self.state_machine = state_machine or StateMachine()

        # Idle screen shows a level too; start() replaces it.
        self._session = GameSession.new(self.viewport, self.rng)
        self._last_hud: HudSnapshot | None = None

        logger.debug(f"GameEngine created for {self.viewport}")

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> State:
        return self.state_machine.state

    @property
    def is_running(self) -> bool:
        return self.state_machine.is_running

    # Session control

    def start(self) -> bool:
        """Begin a new session. Ignored while one is already running."""
        if self.is_running:
            logger.debug("Start ignored: session already running")
            return False

        self._session = GameSession.new(self.viewport, self.rng)
        started = self.state_machine.context.sessions_started + 1
        self.state_machine.transition(
            State.RUNNING, final_score=None, sessions_started=started
        )
        self._emit(EventType.SESSION_STARTED, {"session": started})

        self._publish_hud(force=True)
        self.present()
        return True

    def tick(self, inputs: InputState) -> bool:
        """Advance one frame. Returns whether the session is still running."""
        if not self.is_running:
            return False

        s = self._session
        player = s.player

        physics.integrate(player, inputs)

        if terrain.needs_extension(s.terrain, s.camera_offset, self.viewport.width):
            terrain.extend(s.terrain, self.viewport.segment_width, self.viewport.height)

        physics.resolve_terrain(player, s.terrain, s.camera_offset)

        gained = physics.collect_gems(player, s.gems, s.camera_offset)
        if gained:
            s.score += gained * physics.GEM_POINTS
            self._emit(EventType.GEM_COLLECTED, {"count": gained, "score": s.score})

        for spike in s.spikes:
            if not self.is_running:
                break
            if physics.touches_spike(player, spike, s.camera_offset):
                self.lose_life("spike")

        self._resolve_enemies()

        if self.is_running:
            enemy_motion.move_enemies(s.enemies, s.terrain)

        if self.is_running and self.check_level_complete():
            self.level_up()

        if self.is_running and physics.fell_out(player, self.viewport.height):
            self.lose_life("fell")

        self._publish_hud()
        self.present()
        return self.is_running

    def _resolve_enemies(self) -> None:
        s = self._session
        for enemy in list(s.enemies):
            if not self.is_running:
                return
            contact = physics.enemy_contact(s.player, enemy, s.camera_offset)
            if contact is physics.Contact.STOMP:
                physics.bounce(s.player)
                s.enemies.remove(enemy)
                s.score += physics.STOMP_POINTS
                logger.debug(f"Enemy stomped, {len(s.enemies)} left")
                self._emit(EventType.ENEMY_STOMPED, {"remaining": len(s.enemies), "score": s.score})
            elif contact is physics.Contact.HIT:
                self.lose_life("enemy")

    # Transitions

    def lose_life(self, reason: str = "") -> None:
        """Take a life; respawn the ball or end the session."""
        if not self.is_running:
            return

        s = self._session
        s.lives -= 1
        logger.info(f"Life lost ({reason or 'unknown'}), {s.lives} left")
        self._emit(EventType.LIFE_LOST, {"reason": reason, "lives": s.lives})

        if s.lives <= 0:
            self.state_machine.transition(State.GAME_OVER, final_score=s.score)
            logger.info(f"Game over, final score {s.score}")
            self._emit(EventType.GAME_OVER, {"score": s.score, "level": s.level})
        else:
            s.player.respawn()

        self._publish_hud()

    def check_level_complete(self) -> bool:
        s = self._session
        return all(gem.collected for gem in s.gems) and not s.enemies

    def level_up(self) -> None:
        s = self._session
        s.level += 1
        s.build_level()
        s.player.respawn()
        logger.info(f"Level up: now on level {s.level}")
        self._emit(EventType.LEVEL_UP, {"level": s.level})
        self._publish_hud()

    # Output

    def present(self) -> None:
        """Push the current scene to the render sink."""
        self.render_sink.render(self._session.snapshot(self.state))

    def _publish_hud(self, force: bool = False) -> None:
        hud = self._session.hud()
        if not force and hud == self._last_hud:
            return
        self._last_hud = hud
        self.hud_sink.update_hud(hud)
        self._emit(EventType.HUD_CHANGED, {"score": hud.score, "lives": hud.lives, "level": hud.level})

    def _emit(self, event_type: EventType, data: dict[str, Any]) -> None:
        self.event_bus.emit(Event(type=event_type, data=data, source="engine"))
