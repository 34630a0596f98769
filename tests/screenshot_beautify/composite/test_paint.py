import logging

import numpy as np
import pytest

from screenshot_beautify.composite.paint import draw_gradient_fill, draw_solid_color_fill
from screenshot_beautify.shapes import LinearGradient, gradient_axis

logger = logging.getLogger(__name__)

BLACK_WHITE = [(0, 0, 0), (255, 255, 255)]


@pytest.mark.parametrize(
    "angle, start, end",
    [
        (0, (0, 50), (100, 50)),
        (90, (50, 0), (50, 100)),
        (180, (100, 50), (0, 50)),
        (270, (50, 100), (50, 0)),
        (45, (14.6447, 14.6447), (85.3553, 85.3553)),
    ],
)
def test_gradient_axis(angle, start, end):
    result = gradient_axis(angle)
    assert result[0] == pytest.approx(start, abs=1e-4)
    assert result[1] == pytest.approx(end, abs=1e-4)


def test_draw_solid_color_fill():
    fill = draw_solid_color_fill((4, 3), (255, 0, 51))
    assert fill.shape == (3, 4, 3)
    np.testing.assert_allclose(fill[1, 1], (1.0, 0.0, 0.2))


def test_horizontal_gradient():
    gradient = LinearGradient.from_angle(BLACK_WHITE, 0)
    fill = draw_gradient_fill((4, 2), gradient)
    assert fill.shape == (2, 4, 3)
    np.testing.assert_allclose(fill[0, :, 0], [0.125, 0.375, 0.625, 0.875], atol=1e-6)
    np.testing.assert_allclose(fill[0], fill[1])


def test_reversed_gradient():
    forward = draw_gradient_fill((8, 8), LinearGradient.from_angle(BLACK_WHITE, 0))
    backward = draw_gradient_fill((8, 8), LinearGradient.from_angle(BLACK_WHITE, 180))
    np.testing.assert_allclose(forward, backward[:, ::-1], atol=1e-6)


def test_vertical_gradient():
    fill = draw_gradient_fill((2, 4), LinearGradient.from_angle(BLACK_WHITE, 90))
    assert np.all(np.diff(fill[:, 0, 0]) > 0)
    np.testing.assert_allclose(fill[:, 0], fill[:, 1])


def test_diagonal_gradient():
    fill = draw_gradient_fill((10, 10), LinearGradient(BLACK_WHITE))
    assert fill[0, 0, 0] < fill[5, 5, 0] < fill[9, 9, 0]
    assert fill[0, 9, 0] == pytest.approx(fill[9, 0, 0])


def test_single_stop_is_solid():
    fill = draw_gradient_fill((5, 5), LinearGradient([(255, 0, 0)]))
    np.testing.assert_allclose(fill, draw_solid_color_fill((5, 5), (255, 0, 0)))


def test_three_stops():
    gradient = LinearGradient.from_angle([(255, 0, 0), (0, 255, 0), (0, 0, 255)], 0)
    assert gradient.offsets == (0.0, 0.5, 1.0)
    fill = draw_gradient_fill((2, 1), gradient)
    # Pixel centers at 25% and 75% of the axis.
    np.testing.assert_allclose(fill[0, 0], (0.5, 0.5, 0.0), atol=1e-6)
    np.testing.assert_allclose(fill[0, 1], (0.0, 0.5, 0.5), atol=1e-6)


def test_degenerate_axis():
    gradient = LinearGradient(BLACK_WHITE, (50, 50), (50, 50))
    fill = draw_gradient_fill((3, 3), gradient)
    assert np.all(fill == 0)
