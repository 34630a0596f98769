import pytest

from screenshot_beautify.config import CompositionConfig
from screenshot_beautify.layout import compute_layout, place


def test_default_layout():
    plan = compute_layout((1000, 700), CompositionConfig())
    assert plan.image_size == (1000, 700)
    assert plan.framed_size == (1000, 732)
    assert plan.shadow_padding == 80
    assert plan.canvas_size == (1240, 972)
    assert plan.frame_offset == (120, 120)
    assert plan.shadow_offset == (105, 125)
    assert plan.screenshot_offset == (120, 152)


def test_shadow_disabled_keeps_margin():
    with_shadow = compute_layout((300, 200), CompositionConfig())
    without = compute_layout((300, 200), CompositionConfig(shadow=False))
    assert with_shadow == without


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"padding": 0}, (1080, 812)),
        ({"shadow_blur": 0, "shadow_offset": (0, 0)}, (1160, 892)),
        ({"shadow_offset": (0, -20)}, (1240, 972)),
        ({"title_bar_height": 0}, (1240, 940)),
    ],
)
def test_canvas_size(kwargs, expected):
    plan = compute_layout((1000, 700), CompositionConfig(**kwargs))
    assert plan.canvas_size == expected


def test_fractional_offsets():
    plan = compute_layout((100, 100), CompositionConfig(shadow_blur=5))
    assert plan.shadow_padding == 30
    assert plan.frame_offset == (95, 95)
    assert plan.shadow_offset == (92.5, 112.5)
    assert place(plan.shadow_offset) == (93, 113)


def test_place():
    assert place((0.5, 1.5)) == (1, 2)
    assert place((2.4, -0.5)) == (2, 0)
