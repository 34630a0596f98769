"""
Various constants for screenshot_beautify
"""
from enum import Enum


class BackgroundKind(str, Enum):
    """
    Background source of a composition.
    """
    DEFAULT = "default"
    IMAGE = "image"
    PRESET = "preset"
    GRADIENT = "gradient"
    AUTO = "auto"


#: Preset name that triggers dominant-color extraction.
AUTO_PRESET = "auto"

#: Dark charcoal gradient used when no background is requested.
DEFAULT_GRADIENT = ("#2d3436", "#636e72")

#: Axis of the default and auto gradients, in percent of the canvas.
DIAGONAL_AXIS = ((0.0, 0.0), (100.0, 100.0))

#: Fallback angle of a gradient preset.
DEFAULT_ANGLE = 135.0

#: Grid the dominant color analysis samples the source on.
SAMPLE_SIZE = (50, 50)

#: Bucket width of the color histogram.
QUANTIZATION_STEP = 32

#: Supersampling factor used when rasterizing shapes.
ANTIALIAS = 4

#: Extensions the directory watcher treats as screenshots.
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif")

#: Marker in output file names; such files are never picked up again.
BEAUTIFIED_SUFFIX = "_beautified"
