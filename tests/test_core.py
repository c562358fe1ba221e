import itertools

import numpy as np
import pytest
from PIL import Image

from hqx_upscale.classify import Thresholds, get_classifier
from hqx_upscale.color import pack_color
from hqx_upscale.core import (
    colors_to_image,
    hq2x,
    hq3x,
    hq4x,
    image_to_colors,
    run,
    upscale,
    upscale_image,
)
from hqx_upscale.rules import SCALES, get_table
from hqx_upscale.window import pattern_code, sample_window

WHITE = pack_color(255, 255, 255)
BLACK = pack_color(0, 0, 0)
GRAY = pack_color(128, 128, 128)

PALETTE = np.array(
    [BLACK, WHITE, pack_color(10, 12, 8), pack_color(200, 40, 40), pack_color(0, 0, 255, 128)],
    dtype=np.uint32,
)


def random_image(height, width, seed=7):
    rng = np.random.default_rng(seed)
    return PALETTE[rng.integers(0, len(PALETTE), size=(height, width))]


def reference_upscale(image, scale, thresholds, classifier, wrap_x, wrap_y):
    """Pixel-by-pixel scan using the single-window API."""
    table = get_table(scale)
    height, width = image.shape
    out = np.zeros((height * scale, width * scale), dtype=np.uint32)
    for row in range(height):
        for col in range(width):
            window = sample_window(image, row, col, wrap_x, wrap_y)
            code = pattern_code(window, thresholds, classifier)
            block = table.apply(code, window, thresholds, classifier)
            for i, line in enumerate(block):
                for j, color in enumerate(line):
                    out[row * scale + i, col * scale + j] = color
    return out


def test_uniform_gray_scenario():
    image = np.full((2, 2), GRAY, dtype=np.uint32)
    for row in range(2):
        for col in range(2):
            assert pattern_code(sample_window(image, row, col), Thresholds(), get_classifier("A")) == 0
    result = upscale(image, 3)
    assert result.shape == (6, 6)
    assert (result == GRAY).all()


def test_isolated_white_pixel_scenario():
    image = np.full((3, 3), BLACK, dtype=np.uint32)
    image[1, 1] = WHITE
    assert pattern_code(sample_window(image, 1, 1), Thresholds(), get_classifier("A")) == 255

    result = upscale(image, 3)
    corner = pack_color(127, 127, 127)
    assert result[3:6, 3:6].tolist() == [
        [corner, WHITE, corner],
        [WHITE, WHITE, WHITE],
        [corner, WHITE, corner],
    ]


def test_corner_pixel_clamped_and_wrapped():
    image = np.full((3, 3), GRAY, dtype=np.uint32)
    image[0, 0] = WHITE
    classifier = get_classifier("A")

    clamped = sample_window(image, 0, 0)
    assert clamped[:2] == [WHITE, WHITE] and clamped[3] == WHITE
    assert pattern_code(clamped, Thresholds(), classifier) == 0b11110100

    wrapped = sample_window(image, 0, 0, wrap_x=True, wrap_y=True)
    assert wrapped[0] == wrapped[1] == wrapped[3] == GRAY
    assert pattern_code(wrapped, Thresholds(), classifier) == 255

    blend = pack_color(191, 191, 191)
    assert upscale(image, 3)[:3, :3].tolist() == [
        [WHITE, WHITE, WHITE],
        [WHITE, WHITE, WHITE],
        [WHITE, WHITE, blend],
    ]
    assert upscale(image, 3, wrap_x=True, wrap_y=True)[:3, :3].tolist() == [
        [blend, WHITE, blend],
        [WHITE, WHITE, WHITE],
        [blend, WHITE, blend],
    ]


@pytest.mark.parametrize("scale", SCALES)
@pytest.mark.parametrize("mode", ["A", "B"])
def test_vectorized_scan_matches_reference(scale, mode):
    image = random_image(5, 6)
    classifier = get_classifier(mode)
    for wrap_x, wrap_y in itertools.product([False, True], repeat=2):
        expected = reference_upscale(image, scale, Thresholds(), classifier, wrap_x, wrap_y)
        result = upscale(image, scale, classifier=mode, wrap_x=wrap_x, wrap_y=wrap_y)
        np.testing.assert_array_equal(result, expected)


@pytest.mark.parametrize("scale", SCALES)
def test_dimension_law(scale):
    image = random_image(4, 7)
    result = upscale(image, scale)
    assert result.shape == (4 * scale, 7 * scale)
    assert result.dtype == np.uint32


def test_deterministic():
    image = random_image(8, 8, seed=3)
    np.testing.assert_array_equal(upscale(image, 4, classifier="B"), upscale(image, 4, classifier="B"))


@pytest.mark.parametrize("workers", [2, 3, 16])
def test_workers_do_not_change_output(workers):
    image = random_image(9, 5, seed=11)
    np.testing.assert_array_equal(upscale(image, 3, workers=workers), upscale(image, 3))


def test_writes_into_caller_buffer():
    image = random_image(3, 4)
    out = np.zeros((6, 8), dtype=np.uint32)
    result = upscale(image, 2, out=out)
    assert result is out
    np.testing.assert_array_equal(out, upscale(image, 2))


def test_run_fills_flat_buffer_only():
    image = random_image(3, 4)
    need = 3 * 3 * 4 * 3
    out = np.full(need + 10, 0xDEADBEEF, dtype=np.uint32)
    end = run(image.ravel().tolist(), 4, 3, out)
    assert end == need
    np.testing.assert_array_equal(out[:need].reshape(9, 12), upscale(image, 3))
    assert (out[need:] == 0xDEADBEEF).all()


def test_run_validation():
    out = np.zeros(100, dtype=np.uint32)
    with pytest.raises(ValueError):
        run([GRAY], 0, 1, out)
    with pytest.raises(ValueError):
        run([GRAY] * 3, 2, 2, out)
    with pytest.raises(ValueError):
        run([GRAY] * 4, 2, 2, np.zeros(35, dtype=np.uint32))
    with pytest.raises(ValueError):
        run([GRAY] * 4, 2, 2, None)


@pytest.mark.parametrize(
    "image",
    [
        np.zeros(4, dtype=np.uint32),
        np.zeros((0, 3), dtype=np.uint32),
        np.zeros((2, 2), dtype=np.float32),
        np.full((2, 2), -1, dtype=np.int64),
    ],
)
def test_rejects_bad_images(image):
    with pytest.raises(ValueError):
        upscale(image)


@pytest.mark.parametrize(
    "out",
    [
        np.zeros((6, 5), dtype=np.uint32),
        np.zeros((6, 6), dtype=np.int32),
        np.zeros(35, dtype=np.uint32),
        np.zeros((6, 6, 1), dtype=np.uint32),
        np.zeros((6, 12), dtype=np.uint32)[:, ::2],
    ],
)
def test_rejects_bad_output_buffers(out):
    with pytest.raises(ValueError):
        upscale(np.full((2, 2), GRAY, dtype=np.uint32), 3, out=out)


def test_rejects_read_only_buffer():
    out = np.zeros((6, 6), dtype=np.uint32)
    out.flags.writeable = False
    with pytest.raises(ValueError):
        upscale(np.full((2, 2), GRAY, dtype=np.uint32), 3, out=out)


def test_rejects_bad_options():
    image = np.full((2, 2), GRAY, dtype=np.uint32)
    with pytest.raises(ValueError):
        upscale(image, 5)
    with pytest.raises(ValueError):
        upscale(image, 3, workers=0)
    with pytest.raises(ValueError):
        upscale(image, 3, classifier="Z")


def test_accepts_other_integer_dtypes():
    image = np.full((2, 3), GRAY, dtype=np.int64)
    assert (upscale(image, 2) == GRAY).all()


def test_fixed_scale_wrappers():
    image = random_image(2, 3)
    assert hq2x(image).shape == (4, 6)
    assert hq3x(image, "B").shape == (6, 9)
    assert hq4x(image).shape == (8, 12)


def test_image_round_trip():
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 40))
    colors = image_to_colors(img)
    assert colors.shape == (2, 3)
    assert (colors == pack_color(10, 20, 30, 40)).all()
    assert colors_to_image(colors).getpixel((2, 1)) == (10, 20, 30, 40)


def test_upscale_image(tmp_path, capsys):
    source = tmp_path / "sprite.png"
    img = Image.new("RGB", (4, 3), (0, 0, 0))
    img.putpixel((1, 1), (255, 255, 255))
    img.save(source)

    target = tmp_path / "big.png"
    result = upscale_image(source, target, scale=2, verbose=True)

    assert result.size == (8, 6)
    assert result.mode == "RGBA"
    assert target.exists()
    with Image.open(target) as saved:
        assert saved.size == (8, 6)
    assert result.getpixel((0, 0)) == (0, 0, 0, 255)

    printed = capsys.readouterr().out
    assert "Input image: 4x3" in printed
    assert f"Saved to: {target}" in printed


def test_upscale_image_quiet(tmp_path, capsys):
    source = tmp_path / "tile.png"
    Image.new("RGBA", (2, 2), (5, 5, 5, 255)).save(source)
    result = upscale_image(source, scale=4, mode="B", verbose=False)
    assert result.size == (8, 8)
    assert capsys.readouterr().out == ""
