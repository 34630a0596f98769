"""
Composition options.

:py:class:`CompositionConfig` collects every option of a composition with its
documented default. It is validated once, when it is created, and the
pipeline reads it without applying further fallbacks.

Example::

    from screenshot_beautify.config import Background, CompositionConfig

    config = CompositionConfig(
        padding=40,
        background=Background.preset('ocean'),
    )
"""

import logging
import math
from typing import Optional, Tuple, Union

from attrs import define, evolve, field

from screenshot_beautify.color import RGB, hex_to_rgb
from screenshot_beautify.constants import AUTO_PRESET, BackgroundKind
from screenshot_beautify.errors import InvalidConfig
from screenshot_beautify.validators import instance_of, non_negative, range_

logger = logging.getLogger(__name__)

ColorLike = Union[str, Tuple[int, int, int]]


def to_rgb(value: ColorLike) -> RGB:
    """Accept ``#rrggbb`` text or an RGB triple."""
    if isinstance(value, str):
        return hex_to_rgb(value)
    try:
        rgb = tuple(int(c) for c in value)
    except (TypeError, ValueError):
        raise InvalidConfig("Invalid color: %r" % (value,))
    if len(rgb) != 3 or any(c < 0 or c > 255 for c in rgb):
        raise InvalidConfig("Invalid color: %r" % (value,))
    return rgb  # type: ignore[return-value]


def _to_colors(values) -> Tuple[RGB, ...]:
    return tuple(to_rgb(v) for v in values)


def _to_offset(value) -> Tuple[float, float]:
    try:
        x, y = value
        offset = float(x), float(y)
    except (TypeError, ValueError):
        raise InvalidConfig("Shadow offset must be an (x, y) pair, got %r" % (value,))
    if not all(math.isfinite(v) for v in offset):
        raise InvalidConfig("Shadow offset must be finite, got %r" % (value,))
    return offset


@define(frozen=True)
class Background:
    """
    Background source of a composition.

    Use the constructors rather than the initializer::

        Background.image('wallpaper.jpg')
        Background.preset('sunset')
        Background.gradient('#ff0000', '#0000ff')
        Background.auto()
    """

    kind: BackgroundKind = field(converter=BackgroundKind)
    path: Optional[str] = field(default=None, validator=instance_of(str, allow_none=True))
    name: Optional[str] = field(default=None, validator=instance_of(str, allow_none=True))
    colors: Tuple[RGB, ...] = field(default=(), converter=_to_colors)

    @colors.validator
    def _validate_colors(self, attribute, value):
        if self.kind == BackgroundKind.GRADIENT and len(value) < 2:
            raise InvalidConfig("A gradient background needs at least two colors")

    @classmethod
    def image(cls, path: str) -> "Background":
        return cls(BackgroundKind.IMAGE, path=str(path))

    @classmethod
    def preset(cls, name: str) -> "Background":
        if name == AUTO_PRESET:
            return cls.auto()
        return cls(BackgroundKind.PRESET, name=name)

    @classmethod
    def gradient(cls, *colors: ColorLike) -> "Background":
        return cls(BackgroundKind.GRADIENT, colors=colors)

    @classmethod
    def auto(cls) -> "Background":
        return cls(BackgroundKind.AUTO, name=AUTO_PRESET)

    @classmethod
    def default(cls) -> "Background":
        return cls(BackgroundKind.DEFAULT)

    @classmethod
    def from_options(
        cls, image: Optional[str] = None, preset: Optional[str] = None
    ) -> Optional["Background"]:
        """Build a background from command line style options.

        An image path wins over a preset name.
        """
        if image:
            return cls.image(image)
        if preset:
            return cls.preset(preset)
        return None


@define(frozen=True)
class FrameStyle:
    """Colors and button geometry of the window chrome."""

    title_bar_color: RGB = field(default="#3C3C3C", converter=to_rgb)
    content_color: RGB = field(default="#2D2D2D", converter=to_rgb)
    button_size: float = field(default=14, validator=non_negative)
    button_spacing: float = field(default=22, validator=non_negative)
    first_button_x: float = field(default=20, validator=non_negative)
    button_colors: Tuple[RGB, ...] = field(
        default=("#FF5F57", "#FEBC2E", "#28C840"), converter=_to_colors
    )


@define(frozen=True)
class CompositionConfig:
    """
    Options of a single composition.

    .. py:attribute:: padding

        Space between the window frame and the canvas content edge, in pixels.

    .. py:attribute:: corner_radius

        Radius of the rounded window corners, in pixels.

    .. py:attribute:: title_bar_height

        Height of the chrome strip above the screenshot, in pixels.

    .. py:attribute:: shadow_blur

        Gaussian sigma of the drop shadow, in pixels.

    .. py:attribute:: shadow_offset

        ``(x, y)`` displacement of the shadow from the frame.

    .. py:attribute:: shadow_opacity

        Opacity of the shadow before blurring, in ``[0, 1]``.

    .. py:attribute:: shadow

        Whether the shadow layer is drawn. The canvas keeps its shadow margin
        either way.

    .. py:attribute:: background

        A :py:class:`Background`, or ``None`` for the default gradient.
    """

    padding: float = field(default=80, validator=non_negative)
    corner_radius: float = field(default=10, validator=non_negative)
    title_bar_height: float = field(default=32, validator=non_negative)
    shadow_blur: float = field(default=30, validator=non_negative)
    shadow_offset: Tuple[float, float] = field(default=(0, 20), converter=_to_offset)
    shadow_opacity: float = field(default=0.5, validator=range_(0.0, 1.0))
    shadow: bool = field(default=True, converter=bool)
    background: Optional[Background] = field(
        default=None, validator=instance_of(Background, allow_none=True)
    )
    frame: FrameStyle = field(factory=FrameStyle, validator=instance_of(FrameStyle))

    @property
    def shadow_offset_x(self) -> float:
        return self.shadow_offset[0]

    @property
    def shadow_offset_y(self) -> float:
        return self.shadow_offset[1]

    def replace(self, **changes) -> "CompositionConfig":
        """Return a copy with ``changes`` applied and validated."""
        return evolve(self, **changes)
