"""
Geometry of a composition.

:py:func:`compute_layout` derives the size and the placement of every layer
from the screenshot size and a :py:class:`~screenshot_beautify.config.CompositionConfig`.
Offsets are kept as floats; they are rounded only when a layer is placed on
the canvas.

Example::

    >>> plan = compute_layout((1000, 700), CompositionConfig())
    >>> plan.canvas_size
    (1240, 972)
"""

import logging
from typing import Tuple

from attrs import define

from screenshot_beautify.color import round_half_up
from screenshot_beautify.config import CompositionConfig

logger = logging.getLogger(__name__)

Offset = Tuple[float, float]


@define(frozen=True)
class LayoutPlan:
    """Read-only geometry of one composition."""

    image_size: Tuple[int, int]
    framed_size: Tuple[int, int]
    canvas_size: Tuple[int, int]
    shadow_padding: float
    frame_offset: Offset
    shadow_offset: Offset
    screenshot_offset: Offset

    @property
    def framed_width(self) -> int:
        return self.framed_size[0]

    @property
    def framed_height(self) -> int:
        return self.framed_size[1]

    @property
    def canvas_width(self) -> int:
        return self.canvas_size[0]

    @property
    def canvas_height(self) -> int:
        return self.canvas_size[1]


def place(offset: Offset) -> Tuple[int, int]:
    """Round an offset to the nearest pixel."""
    return round_half_up(offset[0]), round_half_up(offset[1])


def _to_pixels(value: float) -> int:
    # Sizes are integral for integral options; fractional options round.
    return round_half_up(value)


def compute_layout(size: Tuple[int, int], config: CompositionConfig) -> LayoutPlan:
    """
    Compute the layout plan of a composition.

    The window chrome sits above the screenshot, so the framed height grows by
    the title bar. The canvas adds the padding on every side plus a shadow
    margin of ``2 * blur + |offset_y|``, which is reserved whether or not a
    shadow is drawn.
    """
    width, height = size
    padding = config.padding
    blur = config.shadow_blur
    offset_x, offset_y = config.shadow_offset

    framed_width = width
    framed_height = _to_pixels(height + config.title_bar_height)
    content_width = framed_width + 2 * padding
    content_height = framed_height + 2 * padding

    shadow_padding = 2 * blur + abs(offset_y)
    canvas_size = (
        _to_pixels(content_width + shadow_padding),
        _to_pixels(content_height + shadow_padding),
    )

    frame_x = padding + shadow_padding / 2.0
    frame_y = padding + shadow_padding / 2.0
    plan = LayoutPlan(
        image_size=(width, height),
        framed_size=(framed_width, framed_height),
        canvas_size=canvas_size,
        shadow_padding=shadow_padding,
        frame_offset=(frame_x, frame_y),
        shadow_offset=(frame_x + offset_x - blur / 2.0, frame_y + offset_y - blur / 2.0),
        screenshot_offset=(frame_x, frame_y + config.title_bar_height),
    )
    logger.debug("Layout for %dx%d: %s" % (width, height, plan))
    return plan
