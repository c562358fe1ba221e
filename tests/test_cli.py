import pytest
from PIL import Image

from hqx_upscale.cli import build_parser, main


@pytest.fixture
def sprite(tmp_path):
    path = tmp_path / "sprite.png"
    img = Image.new("RGBA", (3, 3), (0, 0, 0, 255))
    img.putpixel((1, 1), (255, 255, 255, 255))
    img.save(path)
    return path


def test_default_output_path(sprite, capsys):
    main([str(sprite), "-s", "2"])
    output = sprite.parent / "sprite_hq2x.png"
    with Image.open(output) as img:
        assert img.size == (6, 6)
    assert "Saved to:" in capsys.readouterr().out


def test_explicit_output_and_options(sprite, tmp_path, capsys):
    output = tmp_path / "out.png"
    main([
        str(sprite), "-o", str(output), "-s", "4", "-m", "B",
        "--threshold-y", "0x20", "--threshold-a", "0",
        "--wrap-x", "--wrap-y", "-j", "2", "-q",
    ])
    with Image.open(output) as img:
        assert img.size == (12, 12)
    assert capsys.readouterr().out == ""


def test_threshold_parsing():
    args = build_parser().parse_args(["in.png", "--threshold-u", "0x10", "--threshold-v", "9"])
    assert args.threshold_u == 16
    assert args.threshold_v == 9
    assert args.threshold_y == 0x30
    assert args.scale == 3
    assert args.mode == "A"


@pytest.mark.parametrize(
    "argv",
    [
        ["-s", "5"],
        ["-m", "C"],
        ["--threshold-y", "-1"],
        ["--threshold-u", "lots"],
        ["-j", "0"],
    ],
)
def test_invalid_arguments(sprite, argv):
    with pytest.raises(SystemExit) as excinfo:
        main([str(sprite), *argv])
    assert excinfo.value.code == 2
