"""Scene renderer: draws a RenderSnapshot into an RGB numpy buffer."""

import logging

import numpy as np
from numpy.typing import NDArray

from gemroll.core.state import State
from gemroll.display.base import RenderSink
from gemroll.game.session import RenderSnapshot
from gemroll.graphics.primitives import (
    Color, darken, draw_circle, draw_rect, draw_triangle, fill, fill_below_polyline
)

logger = logging.getLogger(__name__)

SKY: Color = (135, 206, 235)
GROUND: Color = (76, 175, 80)
BALL: Color = (255, 87, 34)
GEM: Color = (255, 215, 0)
SPIKE: Color = (51, 51, 51)
ENEMY: Color = (156, 39, 176)
EYE: Color = (255, 255, 255)

EYE_INSET = 7
EYE_RADIUS = 3
GAME_OVER_SHADE = 0.75


class SceneRenderer(RenderSink):
    """Render sink backed by a (height, width, 3) uint8 buffer.

    Text (HUD, game over caption) is left to the window, which has
    fonts; this class only produces the playfield pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.buffer: NDArray[np.uint8] = np.zeros((height, width, 3), dtype=np.uint8)
        self.frames_rendered = 0
        self.last_state: State | None = None
        self.last_score = 0

    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of the current frame."""
        return self.buffer.copy()

    def render(self, snapshot: RenderSnapshot) -> None:
        buf = self.buffer
        cam = snapshot.camera_offset

        fill(buf, SKY)
        self._draw_terrain(snapshot, cam)

        for gem in snapshot.gems:
            if not gem.collected:
                draw_circle(buf, gem.x - cam, gem.y, gem.radius, GEM)

        for spike in snapshot.spikes:
            left = spike.x - cam
            draw_triangle(
                buf,
                [(left, spike.y), (left + spike.width / 2, spike.y - spike.height), (left + spike.width, spike.y)],
                SPIKE,
            )

        for enemy in snapshot.enemies:
            left = enemy.x - cam
            draw_rect(buf, int(left), int(enemy.top), int(enemy.width), int(enemy.height), ENEMY)
            eye_x = left + (EYE_INSET if enemy.direction > 0 else enemy.width - EYE_INSET)
            draw_circle(buf, eye_x, enemy.top + EYE_INSET, EYE_RADIUS, EYE)

        # The ball's x is already screen-space.
        player = snapshot.player
        draw_circle(buf, player.x, player.y, player.radius, BALL)

        if snapshot.state is State.GAME_OVER:
            darken(buf, GAME_OVER_SHADE)

        self.frames_rendered += 1
        self.last_state = snapshot.state
        self.last_score = snapshot.score

    def _draw_terrain(self, snapshot: RenderSnapshot, cam: float) -> None:
        if not snapshot.terrain:
            return
        xs = [sample.x - cam for sample in snapshot.terrain]
        ys = [sample.y for sample in snapshot.terrain]
        fill_below_polyline(self.buffer, xs, ys, GROUND)
