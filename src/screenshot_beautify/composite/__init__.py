"""
Composite module for layer rendering and blending.

This subpackage turns a screenshot and a
:py:class:`~screenshot_beautify.config.CompositionConfig` into the decorated
image. Layers are NumPy float arrays (color in ``(h, w, 3)``, alpha in
``(h, w, 1)``, values in ``[0, 1]``) stacked back to front on the background:

1. drop shadow (optional),
2. window chrome,
3. the screenshot with its bottom corners rounded.

Key modules:

- :py:mod:`screenshot_beautify.composite.composite`: Compositor and pipeline
- :py:mod:`screenshot_beautify.composite.background`: Background factories
- :py:mod:`screenshot_beautify.composite.chrome`: Window frame drawing
- :py:mod:`screenshot_beautify.composite.effects`: Drop shadow
- :py:mod:`screenshot_beautify.composite.paint`: Solid and gradient fills
- :py:mod:`screenshot_beautify.composite.vector`: Shape rasterization and masks

Example usage::

    from screenshot_beautify.composite import compose

    image = compose('screenshot.png')
    image.save('screenshot_beautified.png')
"""

from screenshot_beautify.composite.composite import Compositor, Layer, beautify, compose

__all__ = [
    "Compositor",
    "Layer",
    "beautify",
    "compose",
]
