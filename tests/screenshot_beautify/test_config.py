import pytest

from screenshot_beautify.config import Background, CompositionConfig, FrameStyle
from screenshot_beautify.constants import BackgroundKind
from screenshot_beautify.errors import InvalidConfig


def test_defaults():
    config = CompositionConfig()
    assert config.padding == 80
    assert config.corner_radius == 10
    assert config.title_bar_height == 32
    assert config.shadow_blur == 30
    assert config.shadow_offset == (0, 20)
    assert config.shadow_offset_x == 0
    assert config.shadow_offset_y == 20
    assert config.shadow_opacity == 0.5
    assert config.shadow is True
    assert config.background is None
    assert config.frame == FrameStyle()


def test_frame_style_defaults():
    style = FrameStyle()
    assert style.title_bar_color == (60, 60, 60)
    assert style.content_color == (45, 45, 45)
    assert style.button_colors == ((255, 95, 87), (254, 188, 46), (40, 200, 64))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"padding": -1},
        {"corner_radius": -0.5},
        {"title_bar_height": -10},
        {"shadow_blur": -2},
        {"shadow_opacity": 1.5},
        {"shadow_opacity": -0.1},
        {"shadow_offset": (1, 2, 3)},
        {"shadow_offset": "far"},
        {"padding": float("nan")},
        {"padding": float("inf")},
        {"corner_radius": float("-inf")},
        {"shadow_blur": float("nan")},
        {"shadow_opacity": float("nan")},
        {"shadow_offset": (0, float("nan"))},
        {"shadow_offset": (float("inf"), 20)},
        {"padding": "80"},
        {"background": "ocean"},
        {"frame": {"button_size": 10}},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidConfig):
        CompositionConfig(**kwargs)


def test_replace_validates():
    config = CompositionConfig()
    assert config.replace(padding=0).padding == 0
    with pytest.raises(InvalidConfig):
        config.replace(padding=-5)


def test_background_constructors():
    assert Background.image("bg.jpg").kind == BackgroundKind.IMAGE
    assert Background.preset("ocean").name == "ocean"
    assert Background.preset("auto") == Background.auto()
    assert Background.default().kind == BackgroundKind.DEFAULT

    gradient = Background.gradient("#ff0000", (0, 0, 255))
    assert gradient.colors == ((255, 0, 0), (0, 0, 255))


def test_background_gradient_needs_two_colors():
    with pytest.raises(InvalidConfig):
        Background.gradient("#ff0000")


@pytest.mark.parametrize(
    "image, preset, expected",
    [
        (None, None, None),
        ("bg.png", None, Background.image("bg.png")),
        (None, "sunset", Background.preset("sunset")),
        ("bg.png", "sunset", Background.image("bg.png")),
        (None, "auto", Background.auto()),
    ],
)
def test_background_from_options(image, preset, expected):
    assert Background.from_options(image, preset) == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"button_size": float("nan")},
        {"button_spacing": float("inf")},
        {"first_button_x": -1},
    ],
)
def test_invalid_frame_style(kwargs):
    with pytest.raises(InvalidConfig):
        FrameStyle(**kwargs)


def test_invalid_background_fields():
    with pytest.raises(InvalidConfig):
        Background(BackgroundKind.PRESET, name=42)
