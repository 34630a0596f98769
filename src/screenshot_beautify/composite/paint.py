"""Paint and fill operations for compositing."""

import logging
from typing import Tuple

import numpy as np
from scipy import interpolate

from screenshot_beautify.color import RGB, to_unit
from screenshot_beautify.shapes import LinearGradient

logger = logging.getLogger(__name__)

Size = Tuple[int, int]


def draw_solid_color_fill(size: Size, rgb: RGB) -> np.ndarray:
    """
    Create a solid color fill.
    """
    width, height = size
    return np.full((height, width, 3), to_unit(rgb), dtype=np.float32)


def draw_gradient_fill(size: Size, gradient: LinearGradient) -> np.ndarray:
    """
    Create a linear gradient fill of exactly ``size``.

    Pixel centers are projected onto the gradient axis in bounding box units,
    so the axis stretches with the box the way SVG ``objectBoundingBox``
    gradients do. Positions before the first and after the last stop take
    the end colors.
    """
    width, height = size
    Z = _make_linear_gradient(width, height, gradient.start, gradient.end)
    G = _make_gradient_color(gradient)
    return G(Z).astype(np.float32)


def _make_linear_gradient(width, height, start, end):
    """Generates index map for linear gradients."""
    x1, y1 = start[0] / 100.0, start[1] / 100.0
    x2, y2 = end[0] / 100.0, end[1] / 100.0
    X, Y = np.meshgrid(
        (np.arange(width, dtype=np.float64) + 0.5) / width,
        (np.arange(height, dtype=np.float64) + 0.5) / height,
    )
    dx, dy = x2 - x1, y2 - y1
    length = dx * dx + dy * dy
    if length == 0:
        logger.debug("Degenerate gradient axis, using the first stop.")
        return np.zeros((height, width), dtype=np.float64)
    Z = ((X - x1) * dx + (Y - y1) * dy) / length
    return np.clip(Z, 0.0, 1.0)


def _make_gradient_color(gradient: LinearGradient):
    X = list(gradient.offsets)
    Y = [np.array(to_unit(stop), dtype=np.float64) for stop in gradient.stops]
    if len(X) == 1:
        X = [0.0, 1.0]
        Y = [Y[0], Y[0]]
    return interpolate.interp1d(
        X, np.stack(Y), axis=0, bounds_error=False, fill_value=(Y[0], Y[-1])
    )
