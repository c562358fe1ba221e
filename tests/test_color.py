import numpy as np
import pytest

from hqx_upscale.color import Mix, mix, pack_color, pack_rgba, unpack_color, unpack_rgba

WHITE = pack_color(255, 255, 255)
BLACK = pack_color(0, 0, 0)


def test_pack_color_layout():
    assert pack_color(0x12, 0x34, 0x56, 0x78) == 0x78123456
    assert unpack_color(0x78123456) == (0x12, 0x34, 0x56, 0x78)


def test_pack_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        pack_color(256, 0, 0)


def test_pack_rgba_matches_scalar_packing():
    pixels = np.array([[[1, 2, 3, 4], [250, 128, 0, 255]]], dtype=np.uint8)
    colors = pack_rgba(pixels)
    assert colors.dtype == np.uint32
    assert colors.tolist() == [[pack_color(1, 2, 3, 4), pack_color(250, 128, 0, 255)]]
    np.testing.assert_array_equal(unpack_rgba(colors), pixels)


def test_pack_rgba_requires_four_channels():
    with pytest.raises(ValueError):
        pack_rgba(np.zeros((2, 2, 3), dtype=np.uint8))


def test_mix_three_to_one():
    assert mix([WHITE, BLACK], (3, 1), 4) == pack_color(191, 191, 191, 255)


def test_mix_two_one_one():
    assert mix([WHITE, BLACK, BLACK], (2, 1, 1), 4) == pack_color(127, 127, 127, 255)


def test_mix_sixteenths():
    a = pack_color(200, 0, 0)
    b = pack_color(10, 0, 0)
    c = pack_color(20, 0, 0)
    # (2*200 + 7*10 + 7*20) / 16 = 38.125
    assert mix([a, b, c], (2, 7, 7), 16) == pack_color(38, 0, 0, 255)


def test_mix_truncates():
    # 7/8 of the way to zero is still zero
    assert mix([pack_color(0, 0, 0, 0), pack_color(0, 0, 7, 0)], (7, 1), 8) == 0


def test_mix_identical_colors_is_exact():
    color = 0x80FF7F01
    assert mix([color, color, color], (2, 7, 7), 16) == color
    assert mix([color, color], (5, 3), 8) == color


def test_mix_broadcasts_over_arrays():
    colors = np.array([WHITE, BLACK, pack_color(40, 80, 120)], dtype=np.uint32)
    result = mix([colors, BLACK], (1, 1), 2)
    assert result.dtype == np.uint32
    assert result.tolist() == [
        pack_color(127, 127, 127, 255),
        BLACK,
        pack_color(20, 40, 60, 255),
    ]


@pytest.mark.parametrize("weights,denom", [((2, 1), 4), ((2, 1), 3), ((1, -1), 0), ((1, 1, 1, 1), 4)])
def test_mix_rejects_bad_weights(weights, denom):
    with pytest.raises(ValueError):
        mix([WHITE] * len(weights), weights, denom)


def test_mix_operation():
    op = Mix((4, 3, 1), (2, 1, 1))
    assert op.denom == 4
    window = [BLACK] * 9
    window[4] = WHITE
    assert op.apply(window) == pack_color(127, 127, 127, 255)
    assert str(op) == "4,3,1@2:1:1"
    assert Mix((4,), (1,)).apply(window) == WHITE


@pytest.mark.parametrize("indices,weights", [((4, 9), (1, 1)), ((4, 3), (2, 1)), ((4, 3), (1,)), ((), ())])
def test_mix_operation_validation(indices, weights):
    with pytest.raises(ValueError):
        Mix(indices, weights)
