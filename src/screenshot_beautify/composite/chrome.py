"""Window chrome: the rounded panel, its title bar and the three buttons."""

import logging
from typing import Tuple

import numpy as np

from screenshot_beautify.composite.paint import draw_solid_color_fill
from screenshot_beautify.composite.vector import (
    draw_circle,
    draw_rectangle,
    draw_rounded_rectangle,
)
from screenshot_beautify.config import FrameStyle
from screenshot_beautify.shapes import Circle, RoundedRectangle

logger = logging.getLogger(__name__)


def draw_frame(
    size: Tuple[int, int], title_bar_height: float, radius: float, style: FrameStyle
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Render the window chrome at the framed size.

    The title bar is rounded at its top corners only; its bottom edge is
    square against the content area. Buttons sit at fixed spacing from the
    left edge, vertically centered in the title bar.

    :return: ``(color, alpha)`` arrays of the chrome layer.
    """
    # Import at runtime to avoid circular imports
    from screenshot_beautify.composite.composite import Compositor

    width, height = size
    compositor = Compositor(size, 1.0, 0.0)

    panel = draw_rounded_rectangle(RoundedRectangle(0, 0, width, height, radius), size)
    compositor.fill(draw_solid_color_fill(size, style.content_color), panel)

    title = RoundedRectangle(0, 0, width, title_bar_height, radius)
    bar = np.maximum(
        draw_rounded_rectangle(title, size),
        draw_rectangle(0, title.effective_radius, width, title_bar_height, size),
    )
    compositor.fill(draw_solid_color_fill(size, style.title_bar_color), bar)

    cy = title_bar_height / 2.0
    for index, rgb in enumerate(style.button_colors):
        cx = style.first_button_x + style.button_spacing * index
        button = draw_circle(Circle(cx, cy, style.button_size / 2.0), size)
        compositor.fill(draw_solid_color_fill(size, rgb), button)

    color, alpha = compositor.finish()
    logger.debug("Drew frame chrome %dx%d" % (width, height))
    return color, alpha

