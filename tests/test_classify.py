import numpy as np
import pytest

from hqx_upscale.classify import (
    Bt601Classifier,
    ShiftClassifier,
    Thresholds,
    get_classifier,
    is_different,
)
from hqx_upscale.color import pack_color

WHITE = pack_color(255, 255, 255)
BLACK = pack_color(0, 0, 0)


def test_default_thresholds():
    t = Thresholds()
    assert (t.y, t.u, t.v, t.a) == (0x30, 0x07, 0x06, 0x50)
    assert t.shifted() == (0x30 << 16, 0x07 << 8, 0x06, 0x50 << 24)


@pytest.mark.parametrize("kwargs", [{"y": -1}, {"u": 1.5}, {"a": True}, {"v": "6"}])
def test_thresholds_validation(kwargs):
    with pytest.raises(ValueError):
        Thresholds(**kwargs)


@pytest.mark.parametrize("mode", ["A", "B"])
def test_equal_colors_never_differ(mode):
    zero = Thresholds(0, 0, 0, 0)
    for color in (BLACK, WHITE, 0x00000000, 0x7F102030):
        assert is_different(color, color, zero, mode) is False


@pytest.mark.parametrize("mode", ["A", "B"])
def test_symmetry(mode):
    rng = np.random.default_rng(1234)
    a = rng.integers(0, 2**32, size=500, dtype=np.uint64).astype(np.uint32)
    b = rng.integers(0, 2**32, size=500, dtype=np.uint64).astype(np.uint32)
    classifier = get_classifier(mode)
    t = Thresholds(20, 5, 5, 40)
    np.testing.assert_array_equal(classifier(a, b, t), classifier(b, a, t))


@pytest.mark.parametrize("mode", ["A", "B"])
def test_black_and_white_differ(mode):
    assert is_different(BLACK, WHITE, mode=mode) is True


@pytest.mark.parametrize("mode", ["A", "B"])
def test_near_colors_are_similar(mode):
    assert is_different(pack_color(100, 100, 100), pack_color(101, 100, 100), mode=mode) is False


def test_alpha_is_compared():
    opaque = pack_color(10, 10, 10, 255)
    clear = pack_color(10, 10, 10, 0)
    assert is_different(opaque, clear) is True
    assert is_different(opaque, clear, Thresholds(a=255)) is False


def test_variants_weigh_channels_differently():
    blue = pack_color(0, 0, 255)
    luma_only = Thresholds(y=48, u=255, v=255, a=255)
    assert Bt601Classifier().is_different(blue, BLACK, luma_only) is False
    assert ShiftClassifier().is_different(blue, BLACK, luma_only) is True


def test_array_input_returns_mask():
    colors = np.array([BLACK, WHITE, BLACK], dtype=np.uint32)
    result = is_different(colors, BLACK)
    assert result.dtype == bool
    assert result.tolist() == [False, True, False]


def test_get_classifier():
    assert get_classifier("a").mode == "A"
    assert get_classifier("B").mode == "B"
    custom = ShiftClassifier()
    assert get_classifier(custom) is custom
    with pytest.raises(ValueError):
        get_classifier("C")
