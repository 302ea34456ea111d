"""Procedural terrain: a fixed sine profile sampled at a constant step.

The sample list is append-only for the lifetime of a session. Nothing
is ever dropped behind the camera, so it grows with distance travelled.
"""

from __future__ import annotations

import math
from typing import Sequence

from gemroll.game.entities import TerrainSample

BASE_DEPTH = 100.0     # ground baseline above the screen bottom
AMPLITUDE = 30.0
FREQUENCY = 0.5        # radians per sample index
LOOKAHEAD = 1.5        # screen widths kept generated past the camera


def wave_height(index: int, screen_height: float) -> float:
    """Ground height of the ``index``-th sample."""
    return screen_height - BASE_DEPTH + AMPLITUDE * math.sin(FREQUENCY * index)


def generate(segment_count: int, screen_height: float, screen_width: float) -> list[TerrainSample]:
    """Build the initial profile: ``segment_count + 2`` samples.

    The first sample sits one segment left of the screen so the spawn
    area is covered and interpolation can look back.
    """
    assert segment_count > 0, "terrain needs at least one segment"
    segment_width = screen_width / segment_count
    return [
        TerrainSample(x=(i - 1) * segment_width, y=wave_height(i, screen_height))
        for i in range(segment_count + 2)
    ]


def needs_extension(terrain: Sequence[TerrainSample], camera_offset: float, screen_width: float) -> bool:
    assert terrain, "terrain accessed before generation"
    return terrain[-1].x - camera_offset < LOOKAHEAD * screen_width


def extend(terrain: list[TerrainSample], segment_width: float, screen_height: float) -> TerrainSample:
    """Append exactly one sample continuing the waveform and return it."""
    assert terrain, "terrain accessed before generation"
    sample = TerrainSample(
        x=terrain[-1].x + segment_width,
        y=wave_height(len(terrain), screen_height),
    )
    terrain.append(sample)
    return sample


def height_at(a: TerrainSample, b: TerrainSample, x: float) -> float:
    """Linearly interpolate the ground between two samples at world ``x``."""
    assert b.x != a.x, "degenerate terrain segment"
    t = (x - a.x) / (b.x - a.x)
    return a.y + t * (b.y - a.y)
