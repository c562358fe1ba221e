"""Command-line interface for hqx-upscale."""

import argparse
from pathlib import Path

from .classify import Thresholds
from .core import upscale_image
from .rules import SCALES


def _threshold(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"threshold must be non-negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    defaults = Thresholds()
    parser = argparse.ArgumentParser(
        description="Magnify pixel art with the hq2x/hq3x/hq4x edge-directed filters"
    )
    parser.add_argument("input", help="Input image path")
    parser.add_argument("-o", "--output", help="Output image path (default: input_hq<N>x.png)")
    parser.add_argument("-s", "--scale", type=int, choices=SCALES, default=3, help="Magnification factor")
    parser.add_argument("-m", "--mode", choices=["A", "B"], default="A", help="Color distance classifier")
    parser.add_argument("--threshold-y", type=_threshold, default=defaults.y, help="Luma tolerance")
    parser.add_argument("--threshold-u", type=_threshold, default=defaults.u, help="U chroma tolerance")
    parser.add_argument("--threshold-v", type=_threshold, default=defaults.v, help="V chroma tolerance")
    parser.add_argument("--threshold-a", type=_threshold, default=defaults.a, help="Alpha tolerance")
    parser.add_argument("--wrap-x", action="store_true", help="Wrap around horizontally at the image edges")
    parser.add_argument("--wrap-y", action="store_true", help="Wrap around vertically at the image edges")
    parser.add_argument("-j", "--workers", type=int, default=1, help="Worker threads (default: 1)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress output")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    # Default output path
    if args.output is None:
        input_path = Path(args.input)
        args.output = input_path.parent / f"{input_path.stem}_hq{args.scale}x.png"

    upscale_image(
        args.input,
        args.output,
        scale=args.scale,
        mode=args.mode,
        thresholds=Thresholds(args.threshold_y, args.threshold_u, args.threshold_v, args.threshold_a),
        wrap_x=args.wrap_x,
        wrap_y=args.wrap_y,
        workers=args.workers,
        verbose=not args.quiet,
    )


if __name__ == "__main__":
    main()
