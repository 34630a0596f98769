"""
Background layer factories.

Each :py:class:`~screenshot_beautify.constants.BackgroundKind` maps to a
factory registered in :py:data:`BACKGROUNDS`. A factory receives the source
screenshot, the canvas size and the requested
:py:class:`~screenshot_beautify.config.Background` and returns the
``(color, alpha)`` planes of the canvas.
"""

import logging
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from screenshot_beautify import dominant, pil_io
from screenshot_beautify.composite.paint import draw_gradient_fill
from screenshot_beautify.composite.utils import solid
from screenshot_beautify.config import Background
from screenshot_beautify.constants import DEFAULT_GRADIENT, DIAGONAL_AXIS, BackgroundKind
from screenshot_beautify.color import hex_to_rgb
from screenshot_beautify.presets import get_preset
from screenshot_beautify.registry import new_registry
from screenshot_beautify.shapes import LinearGradient

logger = logging.getLogger(__name__)

BACKGROUNDS, register = new_registry(attribute="kind")

Size = Tuple[int, int]
Planes = Tuple[np.ndarray, np.ndarray]


def create_background(
    source: Image.Image, size: Size, background: Optional[Background]
) -> Planes:
    """Render the background requested by ``background`` at ``size``."""
    if background is None:
        background = Background.default()
    factory = BACKGROUNDS[background.kind]
    logger.debug("Creating %s background %dx%d" % (background.kind.value, size[0], size[1]))
    return factory(source, size, background)


def _opaque(size: Size, color: np.ndarray) -> Planes:
    return color, solid(size, 1.0)


def _diagonal(stops) -> LinearGradient:
    start, end = DIAGONAL_AXIS
    return LinearGradient(stops, start, end)


@register(BackgroundKind.DEFAULT)
def _default_background(source: Image.Image, size: Size, background: Background) -> Planes:
    gradient = _diagonal([hex_to_rgb(c) for c in DEFAULT_GRADIENT])
    return _opaque(size, draw_gradient_fill(size, gradient))


@register(BackgroundKind.IMAGE)
def _image_background(source: Image.Image, size: Size, background: Background) -> Planes:
    assert background.path is not None
    image = pil_io.open_image(background.path)
    fitted = pil_io.cover_fit(image.convert("RGBA"), size)
    return pil_io.to_arrays(fitted)


@register(BackgroundKind.PRESET)
def _preset_background(source: Image.Image, size: Size, background: Background) -> Planes:
    assert background.name is not None
    gradient = get_preset(background.name).to_gradient()
    return _opaque(size, draw_gradient_fill(size, gradient))


@register(BackgroundKind.GRADIENT)
def _gradient_background(source: Image.Image, size: Size, background: Background) -> Planes:
    return _opaque(size, draw_gradient_fill(size, _diagonal(background.colors)))


@register(BackgroundKind.AUTO)
def _auto_background(source: Image.Image, size: Size, background: Background) -> Planes:
    gradient = dominant.extract_gradient(source)
    return _opaque(size, draw_gradient_fill(size, gradient))
