"""Composite implementation for the decorated screenshot."""

import logging
import os
from typing import Optional, Tuple, Union

import numpy as np
from attrs import define, field
from PIL import Image

from screenshot_beautify import pil_io
from screenshot_beautify.composite import utils
from screenshot_beautify.composite.background import create_background
from screenshot_beautify.composite.chrome import draw_frame
from screenshot_beautify.composite.effects import draw_drop_shadow
from screenshot_beautify.composite.vector import apply_mask, bottom_rounded_mask
from screenshot_beautify.config import CompositionConfig
from screenshot_beautify.layout import LayoutPlan, compute_layout, place

logger = logging.getLogger(__name__)


@define(eq=False)
class Layer:
    """
    Raster layer with its placement on the canvas.

    ``offset`` is the ``(left, top)`` position and may be fractional; it is
    rounded to the nearest pixel when the layer is applied.
    """

    color: np.ndarray
    alpha: np.ndarray
    offset: Tuple[float, float] = (0.0, 0.0)
    name: str = field(default="", kw_only=True)

    @property
    def width(self) -> int:
        return self.color.shape[1]

    @property
    def height(self) -> int:
        return self.color.shape[0]

    def __repr__(self) -> str:
        return "%s(%r, size=%dx%d, offset=%r)" % (
            self.__class__.__name__,
            self.name,
            self.width,
            self.height,
            self.offset,
        )


class Compositor(object):
    """Composite context.

    Layers are stacked back to front with the normal (source-over) operator.

    Example::

        compositor = Compositor(canvas_size, background_color, 1.0)
        for layer in layers:
            compositor.apply(layer)
        color, alpha = compositor.finish()
    """

    def __init__(
        self,
        size: Tuple[int, int],
        color: Union[float, Tuple[float, ...], np.ndarray] = 1.0,
        alpha: Union[float, np.ndarray] = 0.0,
    ):
        self._size = size
        if isinstance(color, np.ndarray):
            self._color = color.astype(np.float32, copy=True)
        else:
            channels = 1 if isinstance(color, float) else len(color)
            self._color = utils.solid(size, color, channels)
            if channels == 1:
                self._color = np.repeat(self._color, 3, axis=2)
        if isinstance(alpha, np.ndarray):
            self._alpha = alpha.astype(np.float32, copy=True)
        else:
            self._alpha = utils.solid(size, alpha)
        assert self._color.shape[:2] == (self.height, self.width)
        assert self._alpha.shape == (self.height, self.width, 1)

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    @property
    def viewport(self) -> Tuple[int, int, int, int]:
        return (0, 0, self.width, self.height)

    def apply(self, layer: Layer) -> None:
        """Place ``layer`` at its rounded offset, clipped to the canvas."""
        logger.debug("Compositing %s" % (layer,))
        left, top = place(layer.offset)
        bbox = (left, top, left + layer.width, top + layer.height)
        inter = utils.intersect(self.viewport, bbox)
        if inter == (0, 0, 0, 0):
            logger.debug("Out of viewport %s" % (layer,))
            return
        source = (slice(inter[1] - top, inter[3] - top), slice(inter[0] - left, inter[2] - left))
        target = (slice(inter[1], inter[3]), slice(inter[0], inter[2]))
        self._apply_source(layer.color[source], layer.alpha[source], target)

    def fill(self, color: np.ndarray, alpha: np.ndarray) -> None:
        """Composite a canvas sized source."""
        self.apply(Layer(color, alpha))

    def _apply_source(
        self, color: np.ndarray, alpha: np.ndarray, target: Tuple[slice, slice]
    ) -> None:
        color_b = self._color[target]
        alpha_b = self._alpha[target]
        alpha_r = utils.union(alpha_b, alpha)
        color_t = alpha * color + (1.0 - alpha) * alpha_b * color_b
        self._color[target] = utils.clip(utils.divide(color_t, alpha_r))
        self._alpha[target] = alpha_r

    def finish(self) -> Tuple[np.ndarray, np.ndarray]:
        return self._color, self._alpha

    def topil(self) -> Image.Image:
        return pil_io.from_arrays(self._color, self._alpha)


def create_layers(
    image: Image.Image, config: CompositionConfig, plan: LayoutPlan
) -> list:
    """Build the shadow, frame and screenshot layers, back to front."""
    layers = []
    if config.shadow:
        color, alpha = draw_drop_shadow(
            plan.framed_size,
            config.corner_radius,
            config.shadow_blur,
            config.shadow_opacity,
        )
        layers.append(Layer(color, alpha, plan.shadow_offset, name="shadow"))

    color, alpha = draw_frame(
        plan.framed_size,
        config.title_bar_height,
        config.corner_radius,
        config.frame,
    )
    layers.append(Layer(color, alpha, plan.frame_offset, name="frame"))

    color, alpha = pil_io.to_arrays(image)
    mask = bottom_rounded_mask(image.width, image.height, config.corner_radius)
    layers.append(
        Layer(color, apply_mask(alpha, mask), plan.screenshot_offset, name="screenshot")
    )
    return layers


def compose(
    source: pil_io.ImageSource, config: Optional[CompositionConfig] = None
) -> Image.Image:
    """
    Decorate a screenshot and return the composed RGBA image.

    Args:
        source: Path of the screenshot or an opened PIL image.
        config: Composition options, defaults to :py:class:`CompositionConfig`.

    Returns:
        PIL Image of the canvas size given by
        :py:func:`~screenshot_beautify.layout.compute_layout`.

    Raises:
        InvalidImage: the screenshot has no usable dimensions.
        UnknownPreset: the background preset is not in the catalog.
        IOFailure: the screenshot or the background image cannot be read.
    """
    config = config or CompositionConfig()
    image = pil_io.open_image(source)
    plan = compute_layout(image.size, config)

    color, alpha = create_background(image, plan.canvas_size, config.background)
    compositor = Compositor(plan.canvas_size, color, alpha)
    for layer in create_layers(image, config, plan):
        compositor.apply(layer)
    return compositor.topil()


def beautify(
    source: pil_io.ImageSource,
    output: Optional[Union[str, "os.PathLike[str]"]] = None,
    config: Optional[CompositionConfig] = None,
) -> Union[bytes, str]:
    """
    Compose and encode a decorated screenshot as PNG.

    When ``output`` is ``None`` the PNG bytes are returned. Otherwise the file
    is written atomically and its absolute path returned; nothing is written
    when any step fails.
    """
    data = pil_io.encode_png(compose(source, config))
    if output is None:
        return data
    return pil_io.write_atomic(data, output)
