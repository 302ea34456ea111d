"""Basic drawing primitives for Gemroll frame buffers."""

from typing import Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
) -> None:
    """Draw a filled rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    buffer[y1:y2, x1:x2] = color


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
) -> None:
    """Draw a filled circle on the buffer.

    Only the bounding box of the circle is tested, so drawing small
    circles on a large buffer stays cheap.
    """
    h, w = buffer.shape[:2]

    x1 = max(0, int(np.floor(cx - radius)))
    y1 = max(0, int(np.floor(cy - radius)))
    x2 = min(w, int(np.ceil(cx + radius)) + 1)
    y2 = min(h, int(np.ceil(cy + radius)) + 1)
    if x1 >= x2 or y1 >= y2:
        return

    y_indices, x_indices = np.ogrid[y1:y2, x1:x2]
    dist_sq = (x_indices - cx) ** 2 + (y_indices - cy) ** 2
    mask = dist_sq <= radius ** 2
    buffer[y1:y2, x1:x2][mask] = color


def draw_triangle(
    buffer: Buffer,
    points: Sequence[Tuple[float, float]],
    color: Color,
) -> None:
    """Draw a filled triangle using barycentric sign tests over its bounding box."""
    h, w = buffer.shape[:2]
    (ax, ay), (bx, by), (cx, cy) = points

    x1 = max(0, int(np.floor(min(ax, bx, cx))))
    y1 = max(0, int(np.floor(min(ay, by, cy))))
    x2 = min(w, int(np.ceil(max(ax, bx, cx))) + 1)
    y2 = min(h, int(np.ceil(max(ay, by, cy))) + 1)
    if x1 >= x2 or y1 >= y2:
        return

    py, px = np.mgrid[y1:y2, x1:x2]

    def edge(x0: float, y0: float, x1_: float, y1_: float) -> NDArray[np.float64]:
        return (x1_ - x0) * (py - y0) - (y1_ - y0) * (px - x0)

    e0 = edge(ax, ay, bx, by)
    e1 = edge(bx, by, cx, cy)
    e2 = edge(cx, cy, ax, ay)
    mask = ((e0 >= 0) & (e1 >= 0) & (e2 >= 0)) | ((e0 <= 0) & (e1 <= 0) & (e2 <= 0))
    buffer[y1:y2, x1:x2][mask] = color


def fill_below_polyline(
    buffer: Buffer,
    xs: Sequence[float],
    ys: Sequence[float],
    color: Color,
) -> None:
    """Fill everything under a polyline down to the bottom of the buffer.

    ``xs`` must be increasing. Columns outside the polyline's x range
    take the height of the nearest end point.
    """
    if len(xs) == 0:
        return
    h, w = buffer.shape[:2]

    columns = np.arange(w) + 0.5
    surface = np.interp(columns, np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    rows = np.arange(h)[:, np.newaxis]
    mask = rows >= surface[np.newaxis, :]
    buffer[mask] = color


def darken(buffer: Buffer, alpha: float) -> None:
    """Blend the whole buffer towards black by ``alpha`` (0..1)."""
    alpha = max(0.0, min(1.0, alpha))
    buffer[:, :] = (buffer * (1.0 - alpha)).astype(np.uint8)
