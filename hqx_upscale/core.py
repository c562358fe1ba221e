"""
Edge-directed magnification of pixel art (hq2x / hq3x / hq4x).

Every source pixel is compared with its 8 neighbors, the comparison is
encoded as a pattern code, and the code's rule decides how each of the
N*N output sub-pixels blends the neighborhood. Edges stay sharp and
diagonals get smoothed instead of turning into staircases.

The scanner works on whole row ranges with numpy: windows are slices of
a padded copy of the image, and each distinct pattern code in the range
is evaluated once over all the pixels that carry it.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import numpy as np
from PIL import Image

from .classify import Classifier, Thresholds, get_classifier
from .color import pack_rgba, unpack_rgba
from .rules import RuleTable, get_table
from .window import pad_raster, pattern_code, window_planes


def image_to_colors(img: Image.Image) -> np.ndarray:
    """Convert a PIL image to a (height, width) uint32 raster."""
    return pack_rgba(np.array(img.convert("RGBA")))


def colors_to_image(colors: np.ndarray) -> Image.Image:
    """Convert a uint32 raster back to an RGBA PIL image."""
    return Image.fromarray(unpack_rgba(colors))


def _as_raster(image) -> np.ndarray:
    colors = np.asarray(image)
    if colors.ndim != 2:
        raise ValueError(f"Expected a 2-D raster of packed colors, got shape {colors.shape}")
    if colors.shape[0] == 0 or colors.shape[1] == 0:
        raise ValueError(f"Image dimensions must be positive, got {colors.shape[1]}x{colors.shape[0]}")
    if colors.dtype == np.uint32:
        return np.ascontiguousarray(colors)
    if colors.dtype.kind not in "ui":
        raise ValueError(f"Packed colors must be integers, got dtype {colors.dtype}")
    if colors.min() < 0 or colors.max() > 0xFFFFFFFF:
        raise ValueError("Packed colors must fit in 32 bits")
    return colors.astype(np.uint32)


def _output_view(out, rows: int, cols: int) -> np.ndarray:
    """Validate a caller buffer and view it as (rows, cols)."""
    if out is None:
        return np.zeros((rows, cols), dtype=np.uint32)
    if not isinstance(out, np.ndarray):
        out = np.frombuffer(out, dtype=np.uint32)
    if out.dtype != np.uint32:
        raise ValueError(f"Output buffer must be uint32, got {out.dtype}")
    if not out.flags.writeable:
        raise ValueError("Output buffer is read-only")
    if not out.flags.c_contiguous:
        raise ValueError("Output buffer must be C-contiguous")
    if out.ndim == 2:
        if out.shape != (rows, cols):
            raise ValueError(f"Output buffer shape {out.shape} does not match {(rows, cols)}")
        return out
    if out.ndim == 1:
        if out.size < rows * cols:
            raise ValueError(f"Output buffer holds {out.size} colors, need {rows * cols}")
        return out[:rows * cols].reshape(rows, cols)
    raise ValueError(f"Output buffer must be 1-D or 2-D, got shape {out.shape}")


def _row_ranges(height: int, workers: int) -> list[tuple[int, int]]:
    """Split rows into at most ``workers`` contiguous ranges."""
    chunks = min(workers, height)
    bounds = [height * i // chunks for i in range(chunks + 1)]
    return list(zip(bounds[:-1], bounds[1:]))


def scan_rows(
    padded: np.ndarray,
    blocks: np.ndarray,
    start: int,
    stop: int,
    table: RuleTable,
    thresholds: Thresholds,
    classifier: Classifier,
) -> None:
    """
    Fill the output blocks of source rows start..stop-1.

    ``blocks`` is the output viewed as (height, N, width, N) so that
    ``blocks[r, i, c, j]`` is sub-pixel (i, j) of source pixel (r, c).
    Only those rows of ``blocks`` are written.
    """
    window = window_planes(padded, start, stop)
    codes = pattern_code(window, thresholds, classifier)

    for code in np.unique(codes):
        mask = codes == code
        selected = [plane[mask] for plane in window]
        values = table.apply_planes(int(code), selected, thresholds, classifier)
        for slot, value in enumerate(values):
            i, j = divmod(slot, table.scale)
            blocks[start:stop, i, :, j][mask] = value


def upscale(
    image,
    scale: int = 3,
    out=None,
    thresholds: Thresholds | None = None,
    classifier: "str | Classifier" = "A",
    wrap_x: bool = False,
    wrap_y: bool = False,
    workers: int = 1,
) -> np.ndarray:
    """
    Magnify a raster of packed colors by ``scale`` (2, 3 or 4).

    Args:
        image: 2-D array of packed A<<24|R<<16|G<<8|B colors
        scale: Magnification factor
        out: Optional uint32 buffer, (height*scale, width*scale) or 1-D
            with at least that many elements; allocated when omitted
        thresholds: Per-channel Y/U/V/A tolerances (defaults: 48, 7, 6, 80)
        classifier: "A", "B" or a Classifier instance
        wrap_x: Sample the opposite column at the left/right edge
        wrap_y: Sample the opposite row at the top/bottom edge
        workers: Number of threads, each owning a contiguous row range

    Returns:
        The filled output, shaped (height*scale, width*scale)
    """
    table = get_table(scale)
    colors = _as_raster(image)
    if thresholds is None:
        thresholds = Thresholds()
    classifier = get_classifier(classifier)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    height, width = colors.shape
    out = _output_view(out, height * scale, width * scale)
    blocks = out.reshape(height, scale, width, scale)
    padded = pad_raster(colors, wrap_x, wrap_y)

    ranges = _row_ranges(height, workers)
    if len(ranges) == 1:
        scan_rows(padded, blocks, 0, height, table, thresholds, classifier)
    else:
        with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
            futures = [
                pool.submit(scan_rows, padded, blocks, start, stop, table, thresholds, classifier)
                for start, stop in ranges
            ]
            for future in futures:
                future.result()

    return out


def run(
    image,
    width: int,
    height: int,
    out,
    thresholds: Thresholds | None = None,
    classifier: "str | Classifier" = "A",
    wrap_x: bool = False,
    wrap_y: bool = False,
    scale: int = 3,
) -> int:
    """
    Flat-buffer entry point.

    ``image`` is a row-major sequence of width*height colors and ``out`` a
    writable uint32 buffer of at least width*scale * height*scale colors,
    filled with stride width*scale. Returns the index just past the
    filled region.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if out is None:
        raise ValueError("run() needs a caller-provided output buffer")
    source = np.asarray(image).reshape(-1)
    if source.size < width * height:
        raise ValueError(f"Source holds {source.size} colors, need {width * height}")

    filled = width * scale * height * scale
    target = _output_view(out, height * scale, width * scale)
    upscale(
        source[:width * height].reshape(height, width),
        scale,
        out=target,
        thresholds=thresholds,
        classifier=classifier,
        wrap_x=wrap_x,
        wrap_y=wrap_y,
    )
    return filled


def hq2x(image, mode: str = "A") -> np.ndarray:
    return upscale(image, 2, classifier=mode)


def hq3x(image, mode: str = "A") -> np.ndarray:
    return upscale(image, 3, classifier=mode)


def hq4x(image, mode: str = "A") -> np.ndarray:
    return upscale(image, 4, classifier=mode)


def upscale_image(
    input_path: str | Path,
    output_path: str | Path | None = None,
    scale: int = 3,
    mode: str = "A",
    thresholds: Thresholds | None = None,
    wrap_x: bool = False,
    wrap_y: bool = False,
    workers: int = 1,
    verbose: bool = True,
) -> Image.Image:
    """
    Magnify an image file.

    Args:
        input_path: Path to any image Pillow can read
        output_path: Where to save the result (optional)
        scale: 2, 3 or 4
        mode: Distance classifier, "A" or "B"
        verbose: Print progress

    Returns:
        The magnified RGBA image
    """
    img = Image.open(input_path)

    if verbose:
        print(f"Input image: {img.size[0]}x{img.size[1]} ({img.mode})")

    colors = image_to_colors(img)
    if thresholds is None:
        thresholds = Thresholds()

    if verbose:
        print(f"Scaling {scale}x with classifier {mode} "
              f"(thresholds Y={thresholds.y} U={thresholds.u} V={thresholds.v} A={thresholds.a})")

    result = upscale(
        colors,
        scale,
        thresholds=thresholds,
        classifier=mode,
        wrap_x=wrap_x,
        wrap_y=wrap_y,
        workers=workers,
    )
    output = colors_to_image(result)

    if verbose:
        print(f"Output size: {output.size[0]}x{output.size[1]}")

    if output_path:
        output.save(output_path)
        if verbose:
            print(f"Saved to: {output_path}")

    return output
