"""Graphics module for the Gemroll rendering pipeline."""

from gemroll.graphics.renderer import SceneRenderer
from gemroll.graphics.primitives import (
    darken,
    draw_circle,
    draw_rect,
    draw_triangle,
    fill,
    fill_below_polyline,
)

__all__ = [
    # Renderer
    "SceneRenderer",
    # Primitives
    "darken",
    "draw_circle",
    "draw_rect",
    "draw_triangle",
    "fill",
    "fill_below_polyline",
]
