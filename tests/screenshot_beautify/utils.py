import logging
import os

import numpy as np
from PIL import Image

logging.basicConfig(level=logging.DEBUG)


def solid_image(size=(40, 30), color=(10, 200, 30), mode="RGB"):
    return Image.new(mode, size, color)


def split_image(size, left, right):
    """Image with ``left`` on the left half and ``right`` on the right half."""
    width, height = size
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, : width // 2] = left
    pixels[:, width // 2 :] = right
    return Image.fromarray(pixels)


def save(image, directory, name):
    path = os.path.join(str(directory), name)
    image.save(path)
    return path


def pixel(image, x, y):
    return image.convert("RGBA").getpixel((x, y))
