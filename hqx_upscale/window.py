"""
3x3 neighborhood sampling and the 8-bit pattern code.

Window layout (row-major, center at 4):

    +----+----+----+
    | w0 | w1 | w2 |
    +----+----+----+
    | w3 | w4 | w5 |
    +----+----+----+
    | w6 | w7 | w8 |
    +----+----+----+

At the image border a missing row or column is either taken from the
opposite edge (wrap) or replaced by the border row/column itself (clamp).
"""

import numpy as np

from .classify import Classifier, Thresholds

# Bit k of the pattern code describes window index NEIGHBORS[k].
NEIGHBORS = (0, 1, 2, 3, 5, 6, 7, 8)


def sample_window(image: np.ndarray, row: int, col: int, wrap_x: bool = False, wrap_y: bool = False) -> list[int]:
    """Return the 9 colors around (row, col)."""
    height, width = image.shape
    if not (0 <= row < height and 0 <= col < width):
        raise ValueError(f"Pixel ({row}, {col}) outside {width}x{height} image")

    if row > 0:
        prev_row = row - 1
    else:
        prev_row = height - 1 if wrap_y else row
    if row < height - 1:
        next_row = row + 1
    else:
        next_row = 0 if wrap_y else row

    if col > 0:
        prev_col = col - 1
    else:
        prev_col = width - 1 if wrap_x else col
    if col < width - 1:
        next_col = col + 1
    else:
        next_col = 0 if wrap_x else col

    return [
        int(image[r, c])
        for r in (prev_row, row, next_row)
        for c in (prev_col, col, next_col)
    ]


def pad_raster(image: np.ndarray, wrap_x: bool = False, wrap_y: bool = False) -> np.ndarray:
    """
    Add a one pixel border so every pixel has a full window.

    Rows are padded before columns, which reproduces the corner behavior
    of sample_window for every wrap combination.
    """
    padded = np.pad(image, ((1, 1), (0, 0)), mode="wrap" if wrap_y else "edge")
    return np.pad(padded, ((0, 0), (1, 1)), mode="wrap" if wrap_x else "edge")


def window_planes(padded: np.ndarray, start: int, stop: int) -> list[np.ndarray]:
    """
    Windows for source rows start..stop-1, as 9 arrays of shape (rows, width).

    ``padded`` is the output of pad_raster; plane k holds window color k of
    every pixel in the range.
    """
    width = padded.shape[1] - 2
    return [
        padded[start + dr:stop + dr, dc:dc + width]
        for dr in range(3)
        for dc in range(3)
    ]


def pattern_code(window, thresholds: Thresholds, classifier: Classifier):
    """
    Combine the 8 center-vs-neighbor tests into a code in 0..255.

    Works on a list of 9 colors (returns int) or a list of 9 arrays
    (returns a uint8 array).
    """
    center = window[4]
    code = 0
    for bit, k in enumerate(NEIGHBORS):
        differs = classifier.is_different(center, window[k], thresholds)
        code = code | (np.asarray(differs, dtype=np.int64) << bit)
    if np.ndim(code) == 0:
        return int(code)
    return code.astype(np.uint8)
