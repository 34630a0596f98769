"""
Named gradient presets.

The catalog is built once at import time and exposed read-only. Besides the
fixed entries, the special name ``"auto"`` asks the compositor to derive a
gradient from the screenshot itself (see :py:mod:`screenshot_beautify.dominant`).

Example::

    from screenshot_beautify.presets import get_preset, list_presets

    list_presets()  # ['auto', 'sunset', 'sunrise', ...]
    spec = get_preset('ocean')
    gradient = spec.to_gradient()
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Tuple

from attrs import define, field

from screenshot_beautify.color import RGB, hex_to_rgb, rgb_to_hex
from screenshot_beautify.constants import AUTO_PRESET, DEFAULT_ANGLE
from screenshot_beautify.errors import UnknownPreset
from screenshot_beautify.shapes import LinearGradient

logger = logging.getLogger(__name__)


def _to_colors(values) -> Tuple[RGB, ...]:
    return tuple(hex_to_rgb(v) if isinstance(v, str) else tuple(v) for v in values)


@define(frozen=True)
class GradientSpec:
    """Ordered colors and an angle in degrees ``[0, 360)``."""

    colors: Tuple[RGB, ...] = field(converter=_to_colors)
    angle: float = field(default=DEFAULT_ANGLE, converter=lambda a: float(a) % 360.0)
    title: str = ""

    @colors.validator
    def _validate_colors(self, attribute, value):
        if len(value) == 0:
            raise ValueError("A gradient needs at least one color")

    @property
    def hex_colors(self) -> List[str]:
        return [rgb_to_hex(*c) for c in self.colors]

    def to_gradient(self) -> LinearGradient:
        return LinearGradient.from_angle(self.colors, self.angle)


def _build_catalog() -> Mapping[str, GradientSpec]:
    entries = [
        # Warm tones
        ("sunset", "Sunset", ["#ff9a9e", "#fecfef", "#fecfef", "#fad0c4"]),
        ("sunrise", "Sunrise", ["#f093fb", "#f5576c"]),
        ("peach", "Peach", ["#ffecd2", "#fcb69f"]),
        # Cool tones
        ("ocean", "Ocean", ["#667eea", "#764ba2"]),
        ("sky", "Sky", ["#a1c4fd", "#c2e9fb"]),
        ("northern", "Northern Lights", ["#43e97b", "#38f9d7"]),
        # Dark tones
        ("charcoal", "Charcoal", ["#2d3436", "#636e72"]),
        ("midnight", "Midnight", ["#232526", "#414345"]),
        ("space", "Space", ["#0f0c29", "#302b63", "#24243e"]),
        # Vibrant
        ("neon", "Neon", ["#fc00ff", "#00dbde"]),
        ("fire", "Fire", ["#f12711", "#f5af19"]),
        ("aurora", "Aurora", ["#00c6fb", "#005bea"]),
        # Soft/Muted
        ("lavender", "Lavender", ["#e0c3fc", "#8ec5fc"]),
        ("mint", "Mint", ["#d4fc79", "#96e6a1"]),
        ("rose", "Rose", ["#eecda3", "#ef629f"]),
    ]
    return MappingProxyType(
        {
            key: GradientSpec(colors, DEFAULT_ANGLE, title)
            for key, title, colors in entries
        }
    )


#: Read-only catalog of the fixed presets, in display order.
PRESETS: Mapping[str, GradientSpec] = _build_catalog()


def list_presets() -> List[str]:
    """Return every accepted preset name, ``"auto"`` first."""
    return [AUTO_PRESET] + list(PRESETS)


def get_preset(name: str) -> GradientSpec:
    """Look up a fixed preset.

    :raises UnknownPreset: when ``name`` is not in the catalog.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPreset(name, list_presets()) from None
