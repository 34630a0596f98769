import numpy as np
import pytest

from screenshot_beautify.composite.effects import draw_drop_shadow


def test_drop_shadow():
    color, alpha = draw_drop_shadow((20, 10), 2, 4, 0.5)
    assert color.shape == (14, 24, 3)
    assert alpha.shape == (14, 24, 1)
    assert not color.any()
    assert 0 < alpha.max() <= 0.5
    assert alpha[7, 12, 0] == pytest.approx(alpha.max(), abs=1e-6)
    assert alpha[0, 0, 0] < alpha[7, 12, 0]


def test_drop_shadow_is_symmetric():
    _, alpha = draw_drop_shadow((30, 20), 4, 6, 0.8)
    np.testing.assert_allclose(alpha, alpha[::-1, ::-1], atol=1e-6)


def test_drop_shadow_without_blur():
    color, alpha = draw_drop_shadow((20, 10), 0, 0, 0.5)
    assert alpha.shape == (10, 20, 1)
    np.testing.assert_allclose(alpha, 0.5)


@pytest.mark.parametrize("opacity", [0.0, 1.0])
def test_drop_shadow_opacity(opacity):
    _, alpha = draw_drop_shadow((20, 10), 2, 3, opacity)
    assert alpha.max() <= opacity
    if opacity == 0.0:
        assert not alpha.any()
