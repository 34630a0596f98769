"""
Shape rasterization and corner masks.

Shapes are described by :py:mod:`screenshot_beautify.shapes` and rasterized
with :py:mod:`skimage.draw`. A pixel is covered when its center lies inside
the shape; curved edges are anti-aliased by supersampling only the windows
around the arcs, so the cost does not grow with the supersampling factor for
large shapes.

All functions return ``(height, width, 1)`` float32 coverage in ``[0, 1]``.
"""

import logging
import math
from typing import Callable, Tuple

import numpy as np
from skimage import draw
from skimage.transform import downscale_local_mean

from screenshot_beautify.composite.utils import BBox, intersect
from screenshot_beautify.constants import ANTIALIAS
from screenshot_beautify.shapes import Circle, RoundedRectangle

logger = logging.getLogger(__name__)

Size = Tuple[int, int]


class _Grid:
    """Maps image coordinates onto a supersampled window."""

    def __init__(self, window: BBox, antialias: int):
        self.left, self.top, right, bottom = window
        self.antialias = antialias
        self.canvas = np.zeros(
            ((bottom - self.top) * antialias, (right - self.left) * antialias),
            dtype=bool,
        )

    def row(self, y: float) -> float:
        return (y - self.top) * self.antialias - 0.5

    def col(self, x: float) -> float:
        return (x - self.left) * self.antialias - 0.5

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        rows, cols = self.canvas.shape
        r0 = max(0, math.ceil(self.row(y0)))
        r1 = min(rows, math.ceil(self.row(y1)))
        c0 = max(0, math.ceil(self.col(x0)))
        c1 = min(cols, math.ceil(self.col(x1)))
        if r1 <= r0 or c1 <= c0:
            return
        rr, cc = draw.rectangle((r0, c0), end=(r1 - 1, c1 - 1), shape=self.canvas.shape)
        self.canvas[rr, cc] = True

    def fill_disk(self, cx: float, cy: float, radius: float) -> None:
        if radius <= 0:
            return
        rr, cc = draw.disk(
            (self.row(cy), self.col(cx)),
            radius * self.antialias,
            shape=self.canvas.shape,
        )
        self.canvas[rr, cc] = True

    def coverage(self) -> np.ndarray:
        plane = self.canvas.astype(np.float32)
        if self.antialias > 1:
            plane = downscale_local_mean(plane, (self.antialias, self.antialias))
        return plane.astype(np.float32)


def _rasterize(window: BBox, antialias: int, paint: Callable[[_Grid], None]) -> np.ndarray:
    grid = _Grid(window, antialias)
    paint(grid)
    return grid.coverage()


def _paint_rounded(grid: _Grid, rect: RoundedRectangle) -> None:
    x0, y0 = rect.x, rect.y
    x1, y1 = rect.x + rect.width, rect.y + rect.height
    r = rect.effective_radius
    grid.fill_rect(x0 + r, y0, x1 - r, y1)
    grid.fill_rect(x0, y0 + r, x1, y1 - r)
    for cx, cy in _corner_centers(rect):
        grid.fill_disk(cx, cy, r)


def _corner_centers(rect: RoundedRectangle):
    r = rect.effective_radius
    x0, y0 = rect.x + r, rect.y + r
    x1, y1 = rect.x + rect.width - r, rect.y + rect.height - r
    return [(x0, y0), (x1, y0), (x0, y1), (x1, y1)]


def _window_around(cx: float, cy: float, r: float, size: Size) -> BBox:
    box = (
        int(math.floor(cx - r)) - 1,
        int(math.floor(cy - r)) - 1,
        int(math.ceil(cx + r)) + 1,
        int(math.ceil(cy + r)) + 1,
    )
    return intersect(box, (0, 0, size[0], size[1]))


def draw_rounded_rectangle(
    rect: RoundedRectangle, size: Size, antialias: int = ANTIALIAS
) -> np.ndarray:
    """Rasterize a rounded rectangle on a ``size`` transparent plane."""
    width, height = size
    plane = _rasterize((0, 0, width, height), 1, lambda g: _paint_rounded(g, rect))
    r = rect.effective_radius
    if antialias > 1 and r > 0:
        for cx, cy in _corner_centers(rect):
            window = _window_around(cx, cy, r, size)
            if window == (0, 0, 0, 0):
                continue
            left, top, right, bottom = window
            plane[top:bottom, left:right] = _rasterize(
                window, antialias, lambda g: _paint_rounded(g, rect)
            )
    return np.expand_dims(plane, 2)


def draw_rectangle(x0: float, y0: float, x1: float, y1: float, size: Size) -> np.ndarray:
    """Rasterize an axis aligned rectangle given by its corners."""
    width, height = size

    def paint(grid: _Grid) -> None:
        grid.fill_rect(x0, y0, x1, y1)

    return np.expand_dims(_rasterize((0, 0, width, height), 1, paint), 2)


def draw_circle(circle: Circle, size: Size, antialias: int = ANTIALIAS) -> np.ndarray:
    """Rasterize a filled circle on a ``size`` transparent plane."""
    width, height = size
    plane = np.zeros((height, width), dtype=np.float32)
    window = _window_around(circle.cx, circle.cy, circle.radius, size)
    if window != (0, 0, 0, 0) and circle.radius > 0:
        left, top, right, bottom = window
        plane[top:bottom, left:right] = _rasterize(
            window, antialias, lambda g: g.fill_disk(circle.cx, circle.cy, circle.radius)
        )
    return np.expand_dims(plane, 2)


def full_rounded_mask(width: int, height: int, radius: float) -> np.ndarray:
    """Mask rounding all four corners of a ``width`` x ``height`` box."""
    return draw_rounded_rectangle(
        RoundedRectangle(0, 0, width, height, radius), (width, height)
    )


def bottom_rounded_mask(width: int, height: int, radius: float) -> np.ndarray:
    """
    Mask rounding only the bottom corners of a ``width`` x ``height`` box.

    The top-left and top-right ``radius`` squares are filled back in, so the
    top edge stays square where the screenshot meets the title bar.
    """
    rect = RoundedRectangle(0, 0, width, height, radius)
    mask = draw_rounded_rectangle(rect, (width, height))
    r = rect.effective_radius
    if r > 0:
        mask = np.maximum(mask, draw_rectangle(0, 0, r, r, (width, height)))
        mask = np.maximum(mask, draw_rectangle(width - r, 0, width, r, (width, height)))
    return mask


def apply_mask(alpha: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Keep ``alpha`` only where ``mask`` is opaque (destination-in)."""
    assert alpha.shape == mask.shape, "Mask %s does not match %s" % (
        mask.shape,
        alpha.shape,
    )
    return alpha * mask
