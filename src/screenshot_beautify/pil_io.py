"""
PIL IO module.

Boundary between the compositor's float arrays and Pillow images and files.
Decoding, resizing and encoding are Pillow's job; this module maps its
failures onto :py:mod:`screenshot_beautify.errors`.
"""

import io
import logging
import os
import tempfile
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from screenshot_beautify.errors import InvalidImage, IOFailure

logger = logging.getLogger(__name__)

ImageSource = Union[str, "os.PathLike[str]", Image.Image]


def open_image(source: ImageSource) -> Image.Image:
    """Open and fully decode an image.

    :raises InvalidImage: when the data is not a decodable image.
    :raises IOFailure: when the file cannot be read, e.g. while it is still
        locked by the program writing it.
    """
    if isinstance(source, Image.Image):
        image = source
    else:
        path = os.fspath(source)
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except UnidentifiedImageError as e:
            raise InvalidImage("Could not determine image dimensions: %s" % path) from e
        except (OSError, ValueError) as e:
            raise IOFailure("Failed to read image (%s)" % e, path) from e
    validate_size(image.size)
    return image


def validate_size(size: Tuple[int, int]) -> None:
    width, height = size
    if not width or not height or width <= 0 or height <= 0:
        raise InvalidImage("Could not determine image dimensions: %dx%d" % (width, height))


def to_arrays(image: Image.Image) -> Tuple[np.ndarray, np.ndarray]:
    """Split an image into float32 ``(h, w, 3)`` color and ``(h, w, 1)`` alpha."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    pixels = np.asarray(image, dtype=np.float32) / 255.0
    return pixels[:, :, :3], pixels[:, :, 3:]


def from_arrays(color: np.ndarray, alpha: np.ndarray) -> Image.Image:
    """Merge float color and alpha planes into an RGBA image."""
    pixels = np.concatenate((color, alpha), axis=2)
    pixels = np.rint(np.clip(pixels, 0.0, 1.0) * 255.0).astype(np.uint8)
    return Image.fromarray(pixels)


def cover_fit(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """Resize to fill ``size`` completely, cropping the overflow around the center."""
    return ImageOps.fit(image, size, method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def encode_png(image: Image.Image) -> bytes:
    """Encode losslessly as PNG."""
    with io.BytesIO() as f:
        try:
            image.save(f, format="PNG")
        except (OSError, ValueError) as e:
            raise IOFailure("Failed to encode PNG (%s)" % e) from e
        return f.getvalue()


def write_atomic(data: bytes, path: Union[str, "os.PathLike[str]"]) -> str:
    """Write ``data`` so that ``path`` is either untouched or complete.

    The bytes go to a hidden temporary file next to ``path`` which then
    replaces the destination.
    """
    path = os.path.abspath(os.fspath(path))
    directory, name = os.path.split(path)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix="." + name, suffix=".tmp", dir=directory)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise IOFailure("Failed to write image (%s)" % e, path) from e
    logger.debug("Wrote %d bytes to %s" % (len(data), path))
    return path
