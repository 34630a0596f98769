"""
Color conversion helpers.

Hue is expressed in degrees ``[0, 360)``, saturation and lightness in percent
``[0, 100]`` and RGB channels as integers ``[0, 255]``, which is the scale the
dominant color heuristics are tuned for.
"""

import logging
import math
import re
from typing import Tuple

import numpy as np

from screenshot_beautify.constants import QUANTIZATION_STEP
from screenshot_beautify.errors import InvalidConfig

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def round_half_up(value: float) -> int:
    """Round ``x.5`` towards positive infinity instead of to even."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(text: str) -> RGB:
    """
    Parse ``#rrggbb`` or ``#rgb`` into an RGB triple.

    Example::

        >>> hex_to_rgb('#ff5733')
        (255, 87, 51)
    """
    match = _HEX_PATTERN.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise InvalidConfig("Invalid hex color: %r" % (text,))
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#%02x%02x%02x" % (r, g, b)


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """RGB to HSL conversion."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    maxc = max(r, g, b)
    minc = min(r, g, b)
    h = s = 0.0
    l = (maxc + minc) / 2.0

    if maxc != minc:
        d = maxc - minc
        s = d / (2.0 - maxc - minc) if l > 0.5 else d / (maxc + minc)
        if maxc == r:
            h = ((g - b) / d + (6.0 if g < b else 0.0)) / 6.0
        elif maxc == g:
            h = ((b - r) / d + 2.0) / 6.0
        else:
            h = ((r - g) / d + 4.0) / 6.0
    return h * 360.0, s * 100.0, l * 100.0


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSL to RGB conversion."""
    h, s, l = h / 360.0, s / 100.0, l / 100.0
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1.0 / 3.0)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1.0 / 3.0)
    return (
        round_half_up(r * 255),
        round_half_up(g * 255),
        round_half_up(b * 255),
    )


def rgb_to_hsl_array(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorized RGB to HSL conversion.

    :param rgb: array of shape ``(..., 3)`` with channels in ``[0, 255]``.
    :return: ``(h, s, l)`` arrays on the same scale as :py:func:`rgb_to_hsl`.
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    maxc = np.max(rgb, axis=-1)
    minc = np.min(rgb, axis=-1)
    chroma = maxc - minc
    nonzero = chroma > 0

    l = (maxc + minc) / 2.0
    s = np.zeros_like(l)
    h = np.zeros_like(l)

    index = nonzero & (l > 0.5)
    s[index] = chroma[index] / (2.0 - maxc[index] - minc[index])
    index = nonzero & (l <= 0.5)
    s[index] = chroma[index] / (maxc[index] + minc[index])

    # Same precedence as the scalar version: red, then green, then blue.
    d = np.where(nonzero, chroma, 1.0)
    hue_b = (r - g) / d + 4.0
    hue_g = (b - r) / d + 2.0
    hue_r = (g - b) / d + np.where(g < b, 6.0, 0.0)
    hc = np.where(maxc == r, hue_r, np.where(maxc == g, hue_g, hue_b))
    h[nonzero] = hc[nonzero] / 6.0
    return h * 360.0, s * 100.0, l * 100.0


def quantize(value, step: int = QUANTIZATION_STEP):
    """Snap channel values to a coarse grid; works on scalars and arrays."""
    if isinstance(value, np.ndarray):
        return (np.floor(value / step + 0.5) * step).astype(np.int64)
    return round_half_up(value / step) * step


def channel_spread(rgb: RGB) -> int:
    """Difference between the strongest and the weakest channel."""
    return max(rgb) - min(rgb)


def to_unit(rgb: RGB) -> Tuple[float, float, float]:
    """Scale an RGB triple to the ``[0, 1]`` floats used by the compositor."""
    return tuple(c / 255.0 for c in rgb)  # type: ignore[return-value]
