"""
screenshot-beautify: decorate screenshots with a window frame, a drop shadow,
rounded corners and a gradient or image background.

Basic usage::

    from screenshot_beautify import Background, CompositionConfig, beautify

    # Write a decorated copy next to the original
    beautify('shot.png', 'shot_beautified.png')

    # Or keep the PNG in memory
    data = beautify('shot.png', config=CompositionConfig(
        background=Background.auto(),
    ))

Architecture:

- :py:mod:`screenshot_beautify.layout`: Geometry of every layer
- :py:mod:`screenshot_beautify.composite`: Layer rendering and stacking
- :py:mod:`screenshot_beautify.presets`: Named gradient backgrounds
- :py:mod:`screenshot_beautify.dominant`: Background derived from the screenshot
- :py:mod:`screenshot_beautify.watcher`: Directory watching job queue
"""

from screenshot_beautify.composite import beautify, compose
from screenshot_beautify.config import Background, CompositionConfig, FrameStyle
from screenshot_beautify.errors import (
    BeautifyError,
    InvalidConfig,
    InvalidImage,
    IOFailure,
    UnknownPreset,
)
from screenshot_beautify.presets import list_presets
from screenshot_beautify.version import __version__

__all__ = [
    "Background",
    "BeautifyError",
    "CompositionConfig",
    "FrameStyle",
    "IOFailure",
    "InvalidConfig",
    "InvalidImage",
    "UnknownPreset",
    "__version__",
    "beautify",
    "compose",
    "list_presets",
]
