"""
Shape descriptions handed to the rasterizers.

These records only describe geometry; :py:mod:`screenshot_beautify.composite.vector`
and :py:mod:`screenshot_beautify.composite.paint` turn them into pixels.
"""

import math
from typing import Tuple

from attrs import define, field

from screenshot_beautify.color import RGB

Point = Tuple[float, float]


@define(frozen=True)
class RoundedRectangle:
    """Axis aligned rectangle with circular corners of ``radius``."""

    x: float
    y: float
    width: float
    height: float
    radius: float = 0.0

    @property
    def effective_radius(self) -> float:
        """Radius clamped so opposite corners never overlap."""
        return max(0.0, min(self.radius, self.width / 2.0, self.height / 2.0))


@define(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float


def gradient_axis(angle: float) -> Tuple[Point, Point]:
    """
    Axis endpoints of a linear gradient, in percent of the box.

    The axis is centered on the box. ``0`` degrees points along the positive
    x axis and angles grow clockwise in image space::

        >>> gradient_axis(0)
        ((0.0, 50.0), (100.0, 50.0))
    """
    theta = math.radians(angle)
    cos, sin = math.cos(theta), math.sin(theta)
    return (50.0 - cos * 50.0, 50.0 - sin * 50.0), (50.0 + cos * 50.0, 50.0 + sin * 50.0)


def _to_stops(values) -> Tuple[RGB, ...]:
    return tuple(tuple(int(c) for c in v) for v in values)  # type: ignore[misc]


@define(frozen=True)
class LinearGradient:
    """
    Linear gradient with evenly spaced stops.

    ``start`` and ``end`` are percentages of the filled box, the way SVG
    ``objectBoundingBox`` units express them. Stop ``i`` of ``n`` sits at
    offset ``i / (n - 1)``; a single stop is a solid fill.
    """

    stops: Tuple[RGB, ...] = field(converter=_to_stops)
    start: Point = (0.0, 0.0)
    end: Point = (100.0, 100.0)

    @stops.validator
    def _validate_stops(self, attribute, value):
        if len(value) == 0:
            raise ValueError("A gradient needs at least one stop")

    @property
    def offsets(self) -> Tuple[float, ...]:
        n = len(self.stops)
        if n == 1:
            return (0.0,)
        return tuple(i / (n - 1) for i in range(n))

    @classmethod
    def from_angle(cls, stops, angle: float) -> "LinearGradient":
        start, end = gradient_axis(angle)
        return cls(stops, start, end)
