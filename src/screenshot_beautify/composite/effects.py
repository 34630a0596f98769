"""
Drop shadow rendering.

The shadow is a rounded rectangle the size of the window frame, painted black
at the configured opacity on a layer that is ``blur`` pixels larger than the
frame, then blurred with a Gaussian of sigma ``blur``. The layout engine
compensates the ``blur / 2`` inset when it places the layer.
"""

import logging
from typing import Tuple

import numpy as np
from skimage import filters

from screenshot_beautify.color import round_half_up
from screenshot_beautify.composite.vector import draw_rounded_rectangle
from screenshot_beautify.shapes import RoundedRectangle

logger = logging.getLogger(__name__)


def draw_drop_shadow(
    size: Tuple[int, int], radius: float, blur: float, opacity: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Render a blurred shadow for a frame of ``size``.

    :return: ``(color, alpha)`` of shapes ``(h, w, 3)`` and ``(h, w, 1)``
        where ``(w, h)`` is ``size`` grown by ``blur``.
    """
    width, height = size
    inset = blur / 2.0
    shadow_size = (round_half_up(width + blur), round_half_up(height + blur))
    shape = draw_rounded_rectangle(
        RoundedRectangle(inset, inset, width, height, radius), shadow_size
    )
    alpha = shape * np.float32(opacity)
    if blur > 0:
        logger.debug("Blurring shadow with sigma %g" % blur)
        alpha = filters.gaussian(
            alpha[:, :, 0], sigma=blur, mode="constant", cval=0.0, preserve_range=True
        )
        alpha = np.expand_dims(alpha, 2)
    alpha = np.clip(alpha, 0.0, 1.0).astype(np.float32)
    color = np.zeros(alpha.shape[:2] + (3,), dtype=np.float32)
    return color, alpha
