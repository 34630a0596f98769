"""
Dominant color analysis for the ``auto`` background.

The screenshot is sampled on a small grid, the samples are bucketed into a
coarse RGB histogram and the most frequent bucket is taken as the dominant
color. A two-stop gradient is then derived from it:

- neutral images (low average saturation, a low saturation dominant color, or
  a dominant color whose channels are close together) get a subtle grey wash,
- colorful images get a slightly saturated, lighter stop and a darker stop
  shifted by 15 degrees of hue.

Example::

    from PIL import Image
    from screenshot_beautify.dominant import extract_dominant_color

    start, end = extract_dominant_color(Image.open('shot.png'))
"""

import logging
from typing import List, Tuple

import numpy as np
from attrs import define
from PIL import Image

from screenshot_beautify import pil_io
from screenshot_beautify.color import (
    HSL,
    RGB,
    channel_spread,
    hsl_to_rgb,
    quantize,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsl_array,
)
from screenshot_beautify.constants import DIAGONAL_AXIS, SAMPLE_SIZE
from screenshot_beautify.shapes import LinearGradient

logger = logging.getLogger(__name__)

#: Average saturation (percent) below which the whole image counts as neutral.
NEUTRAL_AVERAGE_SATURATION = 25.0
#: Saturation (percent) below which the dominant color counts as neutral.
NEUTRAL_DOMINANT_SATURATION = 15.0
#: Channel spread below which the dominant color counts as grey.
NEUTRAL_CHANNEL_SPREAD = 40


@define(frozen=True)
class ColorSample:
    rgb: RGB
    hsl: HSL

    @classmethod
    def from_rgb(cls, rgb: RGB) -> "ColorSample":
        return cls(rgb, rgb_to_hsl(*rgb))


@define(frozen=True)
class DominantColor:
    """Result of :py:func:`analyze`."""

    sample: ColorSample
    count: int
    average_saturation: float
    neutral: bool

    @property
    def rgb(self) -> RGB:
        return self.sample.rgb

    @property
    def hsl(self) -> HSL:
        return self.sample.hsl


def sample_pixels(image: Image.Image, size: Tuple[int, int] = SAMPLE_SIZE) -> np.ndarray:
    """Cover-fit ``image`` to ``size`` and return its ``(n, 3)`` RGB samples."""
    thumbnail = pil_io.cover_fit(image.convert("RGB"), size)
    return np.asarray(thumbnail, dtype=np.int64).reshape(-1, 3)


def analyze(image: Image.Image) -> DominantColor:
    """Find the dominant color of ``image`` and classify it."""
    pixels = sample_pixels(image)
    _, saturation, _ = rgb_to_hsl_array(pixels)
    average_saturation = float(np.mean(saturation))

    # 256 is reachable by rounding; keep the bucket a valid channel value.
    buckets = np.minimum(quantize(pixels), 255)
    keys, first, counts = np.unique(buckets, axis=0, return_index=True, return_counts=True)
    # Most frequent bucket, ties go to the bucket seen first.
    best = np.lexsort((first, -counts))[0]
    rgb = tuple(int(c) for c in keys[best])
    sample = ColorSample.from_rgb(rgb)  # type: ignore[arg-type]

    neutral = (
        average_saturation < NEUTRAL_AVERAGE_SATURATION
        or sample.hsl[1] < NEUTRAL_DOMINANT_SATURATION
        or channel_spread(sample.rgb) < NEUTRAL_CHANNEL_SPREAD
    )
    result = DominantColor(sample, int(counts[best]), average_saturation, neutral)
    logger.debug(
        "Dominant color %s (%d samples), average saturation %.1f, neutral=%s"
        % (rgb_to_hex(*rgb), result.count, average_saturation, neutral)
    )
    return result


def derive_gradient_colors(dominant: DominantColor) -> Tuple[RGB, RGB]:
    """Derive the two gradient stops from a dominant color."""
    h, s, l = dominant.hsl
    if dominant.neutral:
        start = (h, 0.0, min(l + 8, 55))
        end = (h, 0.0, max(l - 5, 20))
    else:
        start = (h, min(s + 5, 60), min(l + 10, 60))
        end = ((h + 15) % 360, s, max(l - 5, 25))
    return hsl_to_rgb(*start), hsl_to_rgb(*end)


def extract_dominant_color(image: Image.Image) -> List[str]:
    """Return the two gradient stops as hex strings."""
    return [rgb_to_hex(*c) for c in derive_gradient_colors(analyze(image))]


def extract_gradient(image: Image.Image) -> LinearGradient:
    """Diagonal gradient harmonizing with ``image``."""
    start, end = DIAGONAL_AXIS
    return LinearGradient(derive_gradient_colors(analyze(image)), start, end)
