import numpy as np
import pytest

from hqx_upscale.classify import Thresholds, get_classifier
from hqx_upscale.color import Mix, pack_color
from hqx_upscale.hq3x_table import HQ3X_BODIES
from hqx_upscale.rules import (
    HQ3X,
    SCALES,
    Choice,
    RuleTable,
    compile_body,
    get_table,
    parse_mix,
)

WHITE = pack_color(255, 255, 255)
BLACK = pack_color(0, 0, 0)
RED = pack_color(255, 0, 0)
GRAY = pack_color(127, 127, 127)
CENTER = Mix((4,), (1,))

CLASSIFIER = get_classifier("A")
THRESHOLDS = Thresholds()


def isolated(center=WHITE, background=BLACK):
    window = [background] * 9
    window[4] = center
    return window


def test_hq3x_bodies_cover_every_code_once():
    codes = [code for group, _ in HQ3X_BODIES for code in group]
    assert sorted(codes) == list(range(256))


@pytest.mark.parametrize("scale", SCALES)
def test_table_is_total(scale):
    table = get_table(scale)
    assert table.scale == scale
    assert len(table) == 256
    rng = np.random.default_rng(scale)
    palette = [WHITE, BLACK, RED, pack_color(250, 250, 250)]
    for code in range(256):
        assert len(table[code]) == scale * scale
        window = [palette[i] for i in rng.integers(0, len(palette), size=9)]
        block = table.apply(code, window, THRESHOLDS, CLASSIFIER)
        assert len(block) == scale
        for line in block:
            assert len(line) == scale
            assert all(0 <= color <= 0xFFFFFFFF for color in line)


@pytest.mark.parametrize("scale", SCALES)
def test_uniform_window_is_fixed_point(scale):
    table = get_table(scale)
    color = pack_color(12, 200, 77, 180)
    for code in range(256):
        block = table.apply(code, [color] * 9, THRESHOLDS, CLASSIFIER)
        assert block == [[color] * scale for _ in range(scale)]


def test_tie_breaks_never_test_the_center():
    for rule in HQ3X.rules:
        for slot in rule:
            if isinstance(slot, Choice):
                assert 4 not in slot.pair
                assert slot.pair in {(3, 1), (1, 5), (5, 7), (7, 3)}


def test_center_sub_pixel_is_always_the_source_color():
    for rule in HQ3X.rules:
        assert rule[4] == CENTER
    for rule in get_table(4).rules:
        assert rule[5] == rule[6] == rule[9] == rule[10] == CENTER


def test_two_x_uses_three_x_corners():
    table = get_table(2)
    for code in range(256):
        assert table[code] == (HQ3X[code][0], HQ3X[code][2], HQ3X[code][6], HQ3X[code][8])


def test_isolated_pixel_rule():
    corner = pack_color(127, 127, 127, 255)
    block = HQ3X.apply(255, isolated(), THRESHOLDS, CLASSIFIER)
    assert block == [
        [corner, WHITE, corner],
        [WHITE, WHITE, WHITE],
        [corner, WHITE, corner],
    ]


def test_tie_break_keeps_center_when_neighbors_differ():
    window = isolated()
    window[3] = RED
    block = HQ3X.apply(255, window, THRESHOLDS, CLASSIFIER)
    # 3 and 1 differ, so the top-left corner keeps the source color
    assert block[0][0] == WHITE
    assert block[0][2] == pack_color(127, 127, 127, 255)


def test_code_zero_blends_edges():
    window = [GRAY] * 9
    window[4] = WHITE
    block = HQ3X.apply(0, window, THRESHOLDS, CLASSIFIER)
    three_to_one = pack_color(223, 223, 223, 255)
    two_one_one = pack_color(191, 191, 191, 255)
    assert block == [
        [two_one_one, three_to_one, two_one_one],
        [three_to_one, WHITE, three_to_one],
        [two_one_one, three_to_one, two_one_one],
    ]


def test_apply_planes_matches_apply():
    rng = np.random.default_rng(99)
    palette = np.array([WHITE, BLACK, RED, pack_color(0, 0, 250)], dtype=np.uint32)
    planes = [palette[rng.integers(0, 4, size=32)] for _ in range(9)]
    for code in (0, 10, 127, 191, 223, 255):
        values = HQ3X.apply_planes(code, planes, THRESHOLDS, CLASSIFIER)
        for n in range(32):
            window = [int(p[n]) for p in planes]
            block = HQ3X.apply(code, window, THRESHOLDS, CLASSIFIER)
            assert [int(v[n]) if np.ndim(v) else int(v) for v in values] == sum(block, [])


def test_parse_mix():
    assert parse_mix("4") == CENTER
    assert parse_mix("4,0@3:1") == Mix((4, 0), (3, 1))
    assert parse_mix("4,3,1@2:7:7").denom == 16


def test_compile_body_with_choice():
    rule = compile_body(["00=4", "?1,5 01=4 | 01=4,1@7:1", "10=4 11=4"], scale=2)
    assert rule[0] == CENTER
    assert rule[1] == Choice((1, 5), CENTER, Mix((4, 1), (7, 1)))
    assert str(rule[1]) == "?1,5 4 | 4,1@7:1"


@pytest.mark.parametrize(
    "lines",
    [
        ["00=4", "01=4", "10=4"],
        ["00=4", "00=4", "01=4", "10=4", "11=4"],
        ["00=4", "?1,5 01=4 | 10=4", "11=4"],
        ["00=4", "?4,5 01=4 | 01=4", "10=4", "11=4"],
        ["00=4", "01=4", "10=4", "12=4"],
    ],
)
def test_compile_body_rejects_malformed(lines):
    with pytest.raises(ValueError):
        compile_body(lines, scale=2)


def test_table_rejects_gaps_and_duplicates():
    body = ["00=4 01=4 10=4 11=4"]
    with pytest.raises(ValueError):
        RuleTable.from_bodies(2, [(range(255), body)])
    with pytest.raises(ValueError):
        RuleTable.from_bodies(2, [(range(256), body), ((7,), body)])
    assert len(RuleTable.from_bodies(2, [(range(256), body)])) == 256


def test_unsupported_scale():
    with pytest.raises(ValueError):
        get_table(5)
